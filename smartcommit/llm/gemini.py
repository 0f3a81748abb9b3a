"""Google Gemini LLM Client"""

import os

import httpx
from google import genai
from google.genai import errors, types

from smartcommit.llm.base import (
    GenerationRequest,
    LLMClient,
    LLMResponse,
    LLMAuthError,
    LLMConnectionError,
    LLMServerError,
    LLMTimeoutError,
    SYSTEM_PROMPT,
    ensure_message,
)

API_KEY_ENV_VARS = ("GEMINI_API_KEY", "GOOGLE_API_KEY")


class GeminiClient(LLMClient):
    """Gemini API client. Reads GEMINI_API_KEY or GOOGLE_API_KEY, then the api_key argument."""

    DEFAULT_MODEL = "gemini-2.0-flash"
    DEFAULT_TIMEOUT = 30
    MAX_TOKENS = 1000
    TEMPERATURE = 0.4

    def __init__(self, api_key: str | None = None, model: str | None = None, timeout: int | None = None):
        self.api_key = next((os.environ[v] for v in API_KEY_ENV_VARS if os.environ.get(v)), None) or api_key
        self.model = model or self.DEFAULT_MODEL
        self.timeout = timeout or self.DEFAULT_TIMEOUT

        if not self.api_key:
            raise LLMAuthError(
                "No API key found. Set GEMINI_API_KEY environment variable:\n"
                "  export GEMINI_API_KEY='your-key-here'"
            )

        self._client = genai.Client(
            api_key=self.api_key,
            http_options=types.HttpOptions(timeout=self.timeout * 1000),
        )

    @property
    def name(self) -> str:
        return f"Google Gemini ({self.model})"

    def generate(self, request: GenerationRequest) -> LLMResponse:
        try:
            response = self._client.models.generate_content(
                model=self.model,
                contents=request.to_prompt(),
                config=types.GenerateContentConfig(
                    system_instruction=SYSTEM_PROMPT,
                    temperature=self.TEMPERATURE,
                    max_output_tokens=self.MAX_TOKENS,
                ),
            )
        except errors.ClientError as e:
            if e.code in (401, 403):
                raise LLMAuthError(f"Gemini rejected the API key: {e.message}")
            raise LLMServerError(str(e.code), e.message or str(e))
        except errors.APIError as e:
            raise LLMServerError(str(e.code), e.message or str(e))
        except httpx.TimeoutException:
            raise LLMTimeoutError(f"Request timed out after {self.timeout}s")
        except httpx.TransportError as e:
            raise LLMConnectionError(f"Could not reach Gemini: {e}")

        tokens = 0
        if response.usage_metadata and response.usage_metadata.total_token_count:
            tokens = response.usage_metadata.total_token_count

        return LLMResponse(
            content=ensure_message(response.text),
            model=self.model,
            tokens_used=tokens,
        )
