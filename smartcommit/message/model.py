"""Conventional Commit Model - Structured commit messages and their text form."""

import re
from dataclasses import dataclass, field

from smartcommit import COMMIT_TYPE_NAMES, DEFAULT_COMMIT_TYPE

BREAKING_CHANGE_FOOTER = "BREAKING CHANGE: This commit contains breaking changes"
ELLIPSIS = "..."

HEADER_PATTERN = re.compile(
    r'^(?P<type>[A-Za-z]+)(?:\((?P<scope>[^()]*)\))?(?P<breaking>!)?:\s*(?P<title>.*)$'
)


def parse_commit_type(candidate: str) -> str:
    """Normalize a commit type, falling back to 'chore' for anything unknown."""
    normalized = candidate.strip().lower()
    if normalized in COMMIT_TYPE_NAMES:
        return normalized
    return DEFAULT_COMMIT_TYPE


def truncate_title(title: str, max_len: int) -> str:
    """Shorten title to max_len characters, ending with '...' when cut.

    Raises:
        ValueError: if max_len leaves no room for at least one character
            before the ellipsis.
    """
    if len(title) <= max_len:
        return title
    if max_len <= len(ELLIPSIS):
        raise ValueError(f"max_len must be at least {len(ELLIPSIS) + 1}, got {max_len}")
    return title[:max_len - len(ELLIPSIS)] + ELLIPSIS


@dataclass(frozen=True)
class ConventionalHeader:
    """The fields of a parsed `type(scope): title` line."""
    type: str
    scope: str
    title: str
    breaking: bool = False


def parse_header(line: str) -> ConventionalHeader | None:
    """Parse a commit header, returning None if it isn't conventional."""
    match = HEADER_PATTERN.match(line.strip())
    if not match:
        return None
    return ConventionalHeader(
        type=match.group('type'),
        scope=match.group('scope') or '',
        title=match.group('title'),
        breaking=bool(match.group('breaking')),
    )


@dataclass
class ConventionalCommit:
    """A commit message in Conventional Commits form."""
    type: str
    title: str
    scope: str = ""
    body: list[str] = field(default_factory=list)
    breaking_change: bool = False

    @property
    def header(self) -> str:
        if self.scope:
            return f"{self.type}({self.scope}): {self.title}"
        return f"{self.type}: {self.title}"

    def format(self) -> str:
        parts = [self.header]

        if self.body:
            parts.append("\n\n")
            parts.extend(f"- {line}\n" for line in self.body)

        if self.breaking_change:
            # Body bullets already end in a newline
            parts.append("\n" if self.body else "\n\n")
            parts.append(BREAKING_CHANGE_FOOTER)

        return "".join(parts)

    @classmethod
    def from_message(cls, message: str) -> 'ConventionalCommit | None':
        """Best-effort parse of a full message; None if the header isn't conventional."""
        lines = message.strip().split('\n')
        header = parse_header(lines[0])
        if header is None:
            return None

        body = []
        breaking = header.breaking
        for line in lines[1:]:
            stripped = line.strip()
            if stripped.startswith('BREAKING CHANGE:'):
                breaking = True
            elif stripped.startswith('- '):
                body.append(stripped[2:])

        return cls(
            type=parse_commit_type(header.type),
            scope=header.scope,
            title=header.title,
            body=body,
            breaking_change=breaking,
        )
