"""CLI Argument Parsing"""

import argparse
import argcomplete

from smartcommit import COMMIT_TYPE_NAMES, __version__
from smartcommit.config import VALID_PROVIDERS, VALID_STYLES
from smartcommit.message.model import ELLIPSIS

MIN_TITLE_LENGTH = len(ELLIPSIS) + 1


def positive_int(value: str) -> int:
    number = int(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value}")
    return number


def title_length(value: str) -> int:
    """At least one title character must survive before the ellipsis."""
    number = int(value)
    if number < MIN_TITLE_LENGTH:
        raise argparse.ArgumentTypeError(f"must be at least {MIN_TITLE_LENGTH}, got {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='smartcommit',
        description='Generate conventional commit messages from staged changes',
        epilog='Example: smartcommit -t fix -s api'
    )

    parser.add_argument('-v', '--version', action='version', version=f'%(prog)s {__version__}')

    # Message options
    parser.add_argument('-t', '--type', type=str.lower, choices=COMMIT_TYPE_NAMES, help='Force commit type (feat, fix, chore, etc.)')
    parser.add_argument('-s', '--scope', type=str, metavar='SCOPE', help='Force commit scope')
    parser.add_argument('--style', type=str, choices=sorted(VALID_STYLES), help='Commit message style')
    parser.add_argument('--max-title-length', type=title_length, metavar='N', help='Truncate the generated title to N characters')

    # Backend options
    parser.add_argument('-p', '--provider', type=str, choices=sorted(VALID_PROVIDERS), help='Generation backend')
    parser.add_argument('-m', '--model', type=str, metavar='MODEL', help='Model name')
    parser.add_argument('--server-url', type=str, metavar='URL', help='SmartCommit server URL')
    parser.add_argument('--timeout', type=positive_int, metavar='SECONDS', help='Backend request timeout')

    # Flow options
    parser.add_argument('-d', '--dry-run', action='store_true', help='Print commit message without committing')
    parser.add_argument('-c', '--copy', action='store_true', help='Copy commit message to clipboard')
    parser.add_argument('--verbose', action='store_true', help='Show debug info (config source, redactions, tokens)')

    # Setup/config
    parser.add_argument('--setup', action='store_true', help='Configure defaults')
    parser.add_argument('--display-config', action='store_true', help='Show current configuration')
    parser.add_argument('--install-completion', action='store_true', help='Install shell tab completion')

    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = build_parser()
    argcomplete.autocomplete(parser)
    return parser.parse_args(argv)
