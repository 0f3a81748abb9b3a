"""CLI Utility Functions"""

import re
import subprocess
import sys
from typing import Callable

from smartcommit import COMMIT_TYPE_NAMES
from smartcommit.config.consent import is_affirmative

TYPES_PATTERN = '|'.join(COMMIT_TYPE_NAMES)

# First line that looks like a header, possibly behind an opening fence
HEADER_START = re.compile(rf'^[`\s]*(?:{TYPES_PATTERN})[(!:]')

# Anything the backend echoes after the message: diff text or a code fence
TRAILING_JUNK = re.compile(r'^(?:diff --git |@@\s|[+-]{3}\s[ab]/|index [0-9a-f]|```)')

# Tried in order; a missing binary moves on to the next one
CLIPBOARD_COMMANDS = {
    'win32': [['clip']],
    'darwin': [['pbcopy']],
}
UNIX_CLIPBOARD_COMMANDS = [
    ['xclip', '-selection', 'clipboard'],
    ['xsel', '--clipboard', '--input'],
    ['wl-copy'],
]


def clean_commit_message(text: str) -> str:
    """Trim backend chatter around the commit message.

    Drops preamble lines before the first conventional header and cuts at
    the first echoed diff or code fence after it. Free text with no header
    is kept whole.
    """
    lines = text.strip().split('\n')

    start = next((i for i, line in enumerate(lines) if HEADER_START.match(line)), 0)
    end = next((i for i in range(start + 1, len(lines)) if TRAILING_JUNK.match(lines[i])), len(lines))

    kept = lines[start:end]
    kept[0] = kept[0].strip('`').strip()
    return '\n'.join(kept).rstrip()


def copy_to_clipboard(text: str) -> tuple[bool, str]:
    """Copy text to clipboard. Returns (success, failure_reason)."""
    data = text.encode('utf-8')

    for command in CLIPBOARD_COMMANDS.get(sys.platform, UNIX_CLIPBOARD_COMMANDS):
        try:
            subprocess.run(command, input=data, check=True, capture_output=True)
        except FileNotFoundError:
            continue
        except (subprocess.CalledProcessError, OSError) as e:
            return False, f"Clipboard command failed: {e}"
        return True, ""

    if sys.platform.startswith('linux'):
        return False, "Install xclip or wl-clipboard: sudo apt install xclip"
    return False, "No clipboard tool found"


def confirm(prompt: str, input_fn: Callable[[str], str] = input) -> bool:
    """Ask a yes/no question. Only y/yes (any case) counts as yes; EOF is no."""
    try:
        answer = input_fn(prompt)
    except EOFError:
        return False
    return is_affirmative(answer)
