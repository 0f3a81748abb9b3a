"""Redactor - Strip secrets and personal data from diffs before they leave the machine."""

from dataclasses import dataclass
import re


@dataclass(frozen=True)
class RedactionRule:
    """A pattern and the template that replaces each match."""
    name: str
    pattern: re.Pattern
    replacement: str

    def apply(self, text: str) -> tuple[str, int]:
        return self.pattern.subn(self.replacement, text)


# Order matters: each rule runs on the output of the previous one.
DEFAULT_RULES: list[RedactionRule] = [
    RedactionRule(
        name="secret",
        pattern=re.compile(
            r'(api[ _-]?key|token|secret|password|passwd|auth|access[ _-]?key)'
            r'\s*[:=]\s*["\']?[a-zA-Z0-9_\-/+=.]{8,}["\']?',
            re.IGNORECASE,
        ),
        replacement=r'\1: [REDACTED]',
    ),
    RedactionRule(
        name="bearer",
        pattern=re.compile(
            r'authorization\s*[:=]\s*["\']?bearer\s+[a-zA-Z0-9\-._~+/]+=*["\']?',
            re.IGNORECASE,
        ),
        replacement='authorization: [REDACTED]',
    ),
    RedactionRule(
        name="github_token",
        pattern=re.compile(r'\b(?:ghp_[a-zA-Z0-9]{36}|github_pat_[a-zA-Z0-9_]{50,})\b'),
        replacement='[GITHUB_TOKEN_REDACTED]',
    ),
    RedactionRule(
        name="aws_access_key",
        pattern=re.compile(r'\bAKIA[0-9A-Z]{16}\b'),
        replacement='[AWS_ACCESS_KEY_REDACTED]',
    ),
    RedactionRule(
        name="private_key",
        pattern=re.compile(
            r'-----BEGIN (?P<label>[A-Z ]*)PRIVATE KEY-----.+?-----END (?P=label)PRIVATE KEY-----',
            re.DOTALL,
        ),
        replacement='[PRIVATE_KEY_REDACTED]',
    ),
    RedactionRule(
        name="email",
        pattern=re.compile(r'[a-zA-Z0-9._%+\-]+@[a-zA-Z0-9.\-]+\.[a-zA-Z]{2,}'),
        replacement='[EMAIL_REDACTED]',
    ),
    RedactionRule(
        name="credit_card",
        pattern=re.compile(r'\b\d{4}[\s-]?\d{4}[\s-]?\d{4}[\s-]?\d{4}\b'),
        replacement='[CC_REDACTED]',
    ),
]


@dataclass
class RedactionResult:
    """Sanitized text plus how many matches each rule replaced."""
    text: str
    counts: dict[str, int]

    @property
    def total(self) -> int:
        return sum(self.counts.values())


class Redactor:
    """Best-effort filter for sensitive data in diff text.

    False negatives are possible. Placeholders never match any rule, so
    running the redactor on its own output changes nothing.
    """

    def __init__(self, rules: list[RedactionRule] | None = None):
        self.rules = rules if rules is not None else DEFAULT_RULES

    def scan(self, text: str) -> RedactionResult:
        counts = {}
        for rule in self.rules:
            text, hits = rule.apply(text)
            counts[rule.name] = hits
        return RedactionResult(text=text, counts=counts)

    def redact(self, text: str) -> str:
        return self.scan(text).text


_default_redactor = Redactor()


def redact(diff_text: str) -> str:
    """Return diff_text with every recognized secret replaced by a placeholder."""
    return _default_redactor.redact(diff_text)
