"""Commit Message Package"""

from smartcommit.message.model import (
    BREAKING_CHANGE_FOOTER,
    ConventionalCommit,
    ConventionalHeader,
    parse_commit_type,
    parse_header,
    truncate_title,
)
from smartcommit.message.overrides import limit_title, override_scope, override_type

__all__ = [
    "BREAKING_CHANGE_FOOTER",
    "ConventionalCommit",
    "ConventionalHeader",
    "parse_commit_type",
    "parse_header",
    "truncate_title",
    "limit_title",
    "override_scope",
    "override_type",
]
