"""Git Operations Package"""

from smartcommit.git.client import (
    GitClient,
    GitError,
    NotARepositoryError,
    NoStagedChangesError,
    DiffRetrievalError,
    CommitError,
)
from smartcommit.git.redactor import Redactor, RedactionRule, RedactionResult, DEFAULT_RULES, redact

__all__ = [
    "GitClient",
    "GitError",
    "NotARepositoryError",
    "NoStagedChangesError",
    "DiffRetrievalError",
    "CommitError",
    "Redactor",
    "RedactionRule",
    "RedactionResult",
    "DEFAULT_RULES",
    "redact",
]
