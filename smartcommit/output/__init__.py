"""Terminal Output Package

Colors, status lines and the spinner shown while a backend call blocks.
Errors and warnings go to stderr.
"""

import itertools
import os
import sys
import threading

from smartcommit.message.model import HEADER_PATTERN


class Colors:
    """ANSI escape codes for terminal colors."""
    RESET = '\033[0m'
    BOLD = '\033[1m'
    DIM = '\033[2m'
    RED = '\033[31m'
    GREEN = '\033[32m'
    YELLOW = '\033[33m'
    MAGENTA = '\033[35m'
    CYAN = '\033[36m'


def _enable_windows_ansi() -> bool:
    try:
        import ctypes
        kernel32 = ctypes.windll.kernel32
        # ENABLE_VIRTUAL_TERMINAL_PROCESSING on the stdout handle
        return bool(kernel32.SetConsoleMode(kernel32.GetStdHandle(-11), 7))
    except (AttributeError, OSError):
        return False


def _color_enabled(stream) -> bool:
    """NO_COLOR beats FORCE_COLOR; otherwise color only real terminals."""
    if os.environ.get('NO_COLOR'):
        return False
    if os.environ.get('FORCE_COLOR'):
        return True
    if os.environ.get('TERM') == 'dumb':
        return False
    if not getattr(stream, 'isatty', None) or not stream.isatty():
        return False
    if sys.platform == 'win32':
        return _enable_windows_ansi()
    return True


def _can_encode(stream, sample: str) -> bool:
    try:
        sample.encode(getattr(stream, 'encoding', None) or 'utf-8')
    except (UnicodeEncodeError, LookupError):
        return False
    return True


COLORS_ENABLED = _color_enabled(sys.stdout)
UNICODE_ENABLED = _can_encode(sys.stdout, '✓✗⚠━⠋')

CHECK = '✓' if UNICODE_ENABLED else '[OK]'
CROSS = '✗' if UNICODE_ENABLED else '[X]'
WARN = '⚠' if UNICODE_ENABLED else '[!]'
RULE = '━' if UNICODE_ENABLED else '='
RULE_WIDTH = 46


def _colorize(text: str, *codes: str) -> str:
    if not COLORS_ENABLED:
        return text
    return f"{''.join(codes)}{text}{Colors.RESET}"


def success(text: str) -> str:
    return _colorize(text, Colors.GREEN)


def error(text: str) -> str:
    return _colorize(text, Colors.RED)


def warning(text: str) -> str:
    return _colorize(text, Colors.YELLOW)


def info(text: str) -> str:
    return _colorize(text, Colors.CYAN)


def dim(text: str) -> str:
    return _colorize(text, Colors.DIM)


def bold(text: str) -> str:
    return _colorize(text, Colors.BOLD)


def highlight(text: str) -> str:
    """Bold magenta, used for the message frame."""
    return _colorize(text, Colors.BOLD, Colors.MAGENTA)


def print_success(message: str) -> None:
    print(f"{success(CHECK)} {message}")


def print_error(message: str) -> None:
    print(f"{error(CROSS)} {error(message)}", file=sys.stderr)


def print_warning(message: str) -> None:
    print(f"{warning(WARN)} {warning(message)}", file=sys.stderr)


def print_verbose(message: str) -> None:
    """Dim, indented diagnostic line for --verbose."""
    print(dim(f"  {message}"))


def print_hint(message: str) -> None:
    print(info(message))


def print_rule(width: int = RULE_WIDTH) -> None:
    print(highlight(RULE * width))


# Additions green, fixes red, housekeeping dim
_TYPE_COLOR_GROUPS = {
    Colors.GREEN: ('feat', 'perf'),
    Colors.RED: ('fix', 'revert'),
    Colors.YELLOW: ('refactor',),
    Colors.MAGENTA: ('test',),
    Colors.CYAN: ('docs', 'ci', 'build'),
    Colors.DIM: ('chore', 'style'),
}

COMMIT_TYPE_COLORS = {
    commit_type: color
    for color, commit_types in _TYPE_COLOR_GROUPS.items()
    for commit_type in commit_types
}


def colorize_commit_type(message: str) -> str:
    """Color the `type(scope):` prefix of the first line by commit type.

    Unknown types and free-text first lines come back unchanged.
    """
    if not COLORS_ENABLED:
        return message

    first, sep, rest = message.partition('\n')
    match = HEADER_PATTERN.match(first)
    if not match:
        return message

    color = COMMIT_TYPE_COLORS.get(match.group('type').lower())
    if not color:
        return message

    prefix = first[:match.start('title')].rstrip()
    return _colorize(prefix, Colors.BOLD, color) + first[len(prefix):] + sep + rest


class Spinner:
    """Animate a spinner on stdout while the wrapped block runs.

    Silent when stdout isn't a terminal.
    """

    FRAMES = '⠋⠙⠹⠸⠼⠴⠦⠧⠇⠏' if UNICODE_ENABLED else '-\\|/'
    INTERVAL = 0.08

    def __init__(self, label: str = "", stream=None):
        self.label = label
        self.stream = stream or sys.stdout
        self._stop = threading.Event()
        self._thread = None

    def _animate(self):
        for frame in itertools.cycle(self.FRAMES):
            if self._stop.is_set():
                break
            self.stream.write(f"\r\033[K{frame} {self.label}")
            self.stream.flush()
            self._stop.wait(self.INTERVAL)

    def __enter__(self):
        if self.stream.isatty():
            self._stop.clear()
            self._thread = threading.Thread(target=self._animate, daemon=True)
            self._thread.start()
        return self

    def __exit__(self, *exc_info):
        if self._thread is None:
            return False
        self._stop.set()
        self._thread.join()
        self._thread = None
        self.stream.write('\r\033[K')
        self.stream.flush()
        return False


__all__ = [
    "Colors", "COLORS_ENABLED", "UNICODE_ENABLED",
    "CHECK", "CROSS", "WARN", "RULE", "RULE_WIDTH",
    "success", "error", "warning", "info", "dim", "bold", "highlight",
    "print_success", "print_error", "print_warning", "print_verbose",
    "print_hint", "print_rule",
    "colorize_commit_type", "Spinner", "COMMIT_TYPE_COLORS",
]
