"""LLM Client Package"""

from smartcommit.config import Config
from smartcommit.llm.base import (
    FALLBACK_MESSAGE,
    SYSTEM_PROMPT,
    GenerationRequest,
    LLMAuthError,
    LLMClient,
    LLMConnectionError,
    LLMError,
    LLMResponse,
    LLMServerError,
    LLMTimeoutError,
    ensure_message,
)
from smartcommit.llm.claude import ClaudeClient
from smartcommit.llm.gemini import GeminiClient
from smartcommit.llm.server import ServerClient

PROVIDERS = {
    "server": ServerClient,
    "gemini": GeminiClient,
    "claude": ClaudeClient,
}


def get_client(config: Config) -> LLMClient:
    """Build the client for config.provider ('server', 'gemini' or 'claude')."""
    if config.provider == "server":
        return ServerClient(
            server_url=config.server_url,
            api_key=config.api_key,
            timeout=config.timeout,
            model=config.model,
        )

    if config.provider in PROVIDERS:
        return PROVIDERS[config.provider](
            api_key=config.api_key or None,
            model=config.model,
            timeout=config.timeout,
        )

    raise LLMError(f"Unknown provider: {config.provider}. Use 'server', 'gemini', or 'claude'.")


__all__ = [
    "LLMClient",
    "LLMResponse",
    "LLMError",
    "LLMAuthError",
    "LLMServerError",
    "LLMConnectionError",
    "LLMTimeoutError",
    "GenerationRequest",
    "ServerClient",
    "GeminiClient",
    "ClaudeClient",
    "get_client",
    "PROVIDERS",
    "SYSTEM_PROMPT",
    "FALLBACK_MESSAGE",
    "ensure_message",
]
