"""LLM Base Classes and Shared Code"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from smartcommit.prompts import PromptBuilder, PromptConfig


SYSTEM_PROMPT = """You are a senior software engineer who writes precise git commit messages in the Conventional Commits format.

Your standards:
- The diff shows WHAT; you explain WHY
- Specific verbs over vague ones (never "update", "change", "modify")
- Bullets add context the subject line can't capture
- Placeholders such as [REDACTED] stand for removed secrets; never guess their values"""

# Anything shorter is treated as a failed generation
MIN_MESSAGE_LENGTH = 10

FALLBACK_MESSAGE = "chore: update files\n\n- Update project files\n- Apply changes from diff"


def ensure_message(content: str | None) -> str:
    """Return content, or the canned fallback when the backend produced nothing usable."""
    content = (content or "").strip()
    if len(content) < MIN_MESSAGE_LENGTH:
        return FALLBACK_MESSAGE
    return content


@dataclass
class GenerationRequest:
    """What the backend needs to write a commit message."""
    diff: str
    style: str = "detailed"
    type: str | None = None
    scope: str | None = None
    max_length: int | None = 100

    def to_payload(self) -> dict:
        """JSON body for the HTTP server; empty optional fields are omitted."""
        payload = {"diff": self.diff, "style": self.style}
        if self.type:
            payload["type"] = self.type
        if self.scope:
            payload["scope"] = self.scope
        if self.max_length:
            payload["max_length"] = self.max_length
        return payload

    def to_prompt(self) -> str:
        """Full prompt for SDK backends that talk to the model directly."""
        config = PromptConfig(
            style=self.style,
            forced_type=self.type,
            forced_scope=self.scope,
            max_subject_length=self.max_length or 72,
        )
        return PromptBuilder().build(self.diff, config)


@dataclass
class LLMResponse:
    """Structured response from any LLM provider."""
    content: str
    model: str = ""
    tokens_used: int = 0


class LLMError(Exception):
    """Raised when LLM operations fail."""
    pass


class LLMAuthError(LLMError):
    """Missing or rejected credentials."""
    pass


class LLMServerError(LLMError):
    """The backend reported a failure."""

    def __init__(self, code: str, message: str):
        self.code = code
        self.message = message
        super().__init__(f"Server error: {code} - {message}")


class LLMConnectionError(LLMError):
    """The backend could not be reached."""
    pass


class LLMTimeoutError(LLMError):
    """The backend did not answer within the configured timeout."""
    pass


class LLMClient(ABC):
    """Abstract base for LLM clients."""

    @abstractmethod
    def generate(self, request: GenerationRequest) -> LLMResponse:
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        pass
