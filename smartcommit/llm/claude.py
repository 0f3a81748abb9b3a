"""Claude (Anthropic) LLM Client"""

import os

import anthropic

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


class ClaudeClient(LLMClient):
    """Claude API client. Reads ANTHROPIC_API_KEY, then the api_key argument."""

    DEFAULT_MODEL = "claude-sonnet-4-20250514"
    DEFAULT_TIMEOUT = 30
    MAX_TOKENS = 1000
    TEMPERATURE = 0.4

    def __init__(self, api_key: str | None = None, model: str | None = None, timeout: int | None = None):
        self.api_key = os.environ.get("ANTHROPIC_API_KEY") or api_key
        self.model = model or self.DEFAULT_MODEL
        self.timeout = timeout or self.DEFAULT_TIMEOUT

        if not self.api_key:
            raise LLMAuthError(
                "No API key found. Set ANTHROPIC_API_KEY environment variable:\n"
                "  export ANTHROPIC_API_KEY='your-key-here'"
            )

        # Retries are disabled: a failed call aborts the run
        self._client = anthropic.Anthropic(api_key=self.api_key, timeout=float(self.timeout), max_retries=0)

    @property
    def name(self) -> str:
        return f"Claude ({self.model})"

    def generate(self, request: GenerationRequest) -> LLMResponse:
        try:
            response = self._client.messages.create(
                model=self.model,
                max_tokens=self.MAX_TOKENS,
                temperature=self.TEMPERATURE,
                system=SYSTEM_PROMPT,
                messages=[{"role": "user", "content": request.to_prompt()}]
            )
        except anthropic.AuthenticationError:
            raise LLMAuthError("Invalid API key. Check your ANTHROPIC_API_KEY.")
        except anthropic.APITimeoutError:
            raise LLMTimeoutError(f"Request timed out after {self.timeout}s")
        except anthropic.APIConnectionError as e:
            raise LLMConnectionError(f"Could not reach the Claude API: {e}")
        except anthropic.APIStatusError as e:
            raise LLMServerError(str(e.status_code), e.message)

        content = ""
        for block in response.content:
            if block.type == "text":
                content = block.text.strip()
                break

        return LLMResponse(
            content=ensure_message(content),
            model=self.model,
            tokens_used=response.usage.input_tokens + response.usage.output_tokens
        )
