"""One-time consent before diffs are sent to a remote backend."""

from pathlib import Path
from typing import Callable, Optional

from smartcommit.output import bold, warning

CONSENT_FILENAME = ".smartcommit_consent"
AFFIRMATIVE_ANSWERS = {"y", "yes"}


class ConsentDeclinedError(Exception):
    """Raised when the user refuses to send diffs off the machine."""
    pass


def consent_path() -> Path:
    return Path.home() / CONSENT_FILENAME


def is_affirmative(answer: str) -> bool:
    return answer.strip().lower() in AFFIRMATIVE_ANSWERS


def has_consent(path: Optional[Path] = None) -> bool:
    return (path or consent_path()).exists()


def record_consent(path: Optional[Path] = None) -> Path:
    path = path or consent_path()
    path.write_text("consented")
    path.chmod(0o600)
    return path


def check_consent(backend_name: str, input_fn: Callable[[str], str] = input,
                  path: Optional[Path] = None) -> None:
    """Ask for consent once and remember the answer.

    Raises:
        ConsentDeclinedError: the user answered anything but y/yes, or stdin closed.
    """
    if has_consent(path):
        return

    print(f"\n{bold(warning('SECURITY NOTICE:'))}")
    print(f"SmartCommit sends your git diffs to {backend_name} for analysis.")
    print("Sensitive data is filtered, but you should review output before committing.")
    print("\nDo NOT use on repositories with highly sensitive/proprietary code.")

    try:
        answer = input_fn(f"\nDo you consent to sending diffs to {backend_name}? (yes/no): ")
    except EOFError:
        answer = ""

    if not is_affirmative(answer):
        raise ConsentDeclinedError("Consent not given. No diff was sent.")

    record_consent(path)
