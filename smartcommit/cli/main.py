"""CLI Main Entry Point"""

import time
from dataclasses import replace
from typing import Callable

from smartcommit.config import Config, ConfigManager, load_env
from smartcommit.config.consent import ConsentDeclinedError, check_consent
from smartcommit.git import GitClient, GitError, NotARepositoryError, NoStagedChangesError, Redactor
from smartcommit.llm import GenerationRequest, LLMClient, LLMError, ensure_message, get_client
from smartcommit.message import limit_title, override_scope, override_type, parse_header
from smartcommit.output import (
    CHECK, Spinner, bold, colorize_commit_type, dim, highlight, info, success, warning,
    print_error, print_hint, print_rule, print_success, print_verbose, print_warning,
)

from smartcommit.cli.args import parse_args
from smartcommit.cli.commands import display_config, run_install_completion, run_setup
from smartcommit.cli.utils import clean_commit_message, confirm, copy_to_clipboard


def _apply_cli_overrides(args, config: Config) -> Config:
    """Return a copy of config with command-line values layered on top."""
    overrides = {}
    if args.provider:
        overrides['provider'] = args.provider
    if args.model:
        overrides['model'] = args.model
    if args.style:
        overrides['style'] = args.style
    if args.server_url:
        overrides['server_url'] = args.server_url
    if args.timeout:
        overrides['timeout'] = args.timeout
    return replace(config, **overrides) if overrides else config


def _resolve_type(args, config: Config) -> str | None:
    """--type wins; the configured default_type only applies without it."""
    return args.type or config.default_type or None


def _read_redacted_diff(git: GitClient, verbose: bool) -> str:
    """Fetch the staged diff and strip secrets from it."""
    result = Redactor().scan(git.get_staged_diff())

    print_success(f"Found staged changes ({len(result.text)} characters)")
    if verbose and result.total:
        hits = ", ".join(f"{name}={count}" for name, count in result.counts.items() if count)
        print_verbose(f"Redacted {result.total} item(s): {hits}")
    return result.text


def _generate_message(client: LLMClient, request: GenerationRequest, verbose: bool) -> str:
    """Run generation with a spinner and return the cleaned message."""
    print(info(f"\nGenerating commit message using {client.name}..."))

    t0 = time.time()
    with Spinner():
        response = client.generate(request)
    elapsed = time.time() - t0

    if verbose:
        print_verbose(f"Model: {response.model or 'unknown'}, tokens: {response.tokens_used}, {elapsed:.2f}s")
    # Cleanup can strip a fenced reply down to nothing
    return ensure_message(clean_commit_message(response.content))


def _apply_overrides(message: str, commit_type: str | None, scope: str | None,
                     max_title_length: int | None = None) -> str:
    if commit_type:
        message = override_type(message, commit_type)
    if scope:
        message = override_scope(message, scope)
    if max_title_length:
        message = limit_title(message, max_title_length)
    return message


def _display_message(message: str) -> None:
    """Print the message between rules with the header highlighted."""
    lines = colorize_commit_type(message).split('\n')

    print()
    print_rule()
    print(highlight("Generated Commit Message"))
    print_rule()
    print(bold(lines[0]))
    for line in lines[1:]:
        print(line if line.strip() else "")
    print_rule()
    print()


def _copy_and_report(message: str) -> None:
    copied, reason = copy_to_clipboard(message)
    if copied:
        print(f"{success(CHECK)} Commit message copied to clipboard!")
    else:
        print_warning(f"Failed to copy to clipboard{': ' + reason if reason else ''}")


def run_commit_flow(args, config: Config, git: GitClient | None = None,
                    client_factory: Callable[[Config], LLMClient] = get_client,
                    input_fn: Callable[[str], str] = input) -> int:
    """Staged changes -> redacted diff -> generated message -> optional commit.

    Returns:
        int: Exit code
    """
    git = git or GitClient()

    try:
        if not git.is_repository():
            raise NotARepositoryError("Not a git repository")
        if not git.has_staged_changes():
            raise NoStagedChangesError("No staged changes found")

        client = client_factory(config)
        check_consent(client.name, input_fn=input_fn)

        diff = _read_redacted_diff(git, args.verbose)

        commit_type = _resolve_type(args, config)
        request = GenerationRequest(diff=diff, style=config.style, type=commit_type, scope=args.scope)
        message = _generate_message(client, request, args.verbose)

        message = _apply_overrides(message, commit_type, args.scope, args.max_title_length)
        if args.verbose and parse_header(message.split('\n')[0]) is None:
            print_verbose("Generated header is not in type(scope): title form; overrides may not apply")

        _display_message(message)

        if args.copy:
            _copy_and_report(message)

        if args.dry_run:
            print_hint("Dry run mode - no commit created.")
            return 0

        if not confirm("Commit with this message? (y/n): ", input_fn=input_fn):
            print(warning("\nCommit cancelled."))
            return 0

        git.commit(message)
        print_success("Commit successful!")
        return 0

    except NoStagedChangesError as e:
        print_error(str(e))
        print_hint("Use 'git add <files>' to stage changes first")
        return 1
    except (GitError, LLMError, ConsentDeclinedError) as e:
        print_error(str(e))
        return 1
    except ValueError as e:
        print_error(f"Invalid option: {e}")
        return 1


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    args = parse_args(argv)
    manager = ConfigManager()

    # Handle subcommands that exit early
    if args.install_completion:
        return run_install_completion()
    if args.setup:
        return run_setup(manager)

    loaded_env = load_env()
    if args.display_config:
        return display_config(manager)

    config = _apply_cli_overrides(args, manager.load())
    if args.verbose:
        print_verbose(f"Config: {manager.get_config_path() or 'defaults'}{', .env loaded' if loaded_env else ''}")

    try:
        return run_commit_flow(args, config)
    except KeyboardInterrupt:
        print(dim("\nCancelled."))
        return 130
