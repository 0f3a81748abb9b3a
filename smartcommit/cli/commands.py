"""CLI Commands"""

import os
import sys
from typing import Callable

from smartcommit import COMMIT_TYPE_NAMES
from smartcommit.config import (
    Config,
    ConfigManager,
    ENV_API_KEY,
    ENV_MODEL,
    ENV_PROVIDER,
    ENV_SERVER_URL,
    ENV_TIMEOUT,
)
from smartcommit.config.consent import consent_path, has_consent
from smartcommit.output import bold, dim, info, print_success


def _mask(secret: str) -> str:
    if not secret:
        return "(not set)"
    return secret[:4] + "*" * max(len(secret) - 4, 4)


def display_config(manager: ConfigManager) -> int:
    """Display current configuration."""
    config = manager.load()
    config_path = manager.get_config_path()

    print(f"\n{bold('Current Configuration')}\n")

    if config_path:
        print(f"  {dim('Loaded from:')} {config_path}")
    else:
        print(f"  {dim('Loaded from:')} defaults (no {ConfigManager.CONFIG_FILENAME} found)")

    env_names = [ENV_SERVER_URL, ENV_API_KEY, ENV_PROVIDER, ENV_MODEL, ENV_TIMEOUT]
    env_set = [name for name in env_names if os.environ.get(name)]
    if env_set:
        print(f"  {dim('Environment overrides:')} {', '.join(env_set)}")

    print()
    print(f"  {bold('Settings:')}")
    print(f"    provider:     {info(config.provider)}")
    print(f"    model:        {info(config.model or 'default')}")
    print(f"    style:        {info(config.style)}")
    print(f"    default_type: {info(config.default_type or '(none)')}")
    print(f"    server_url:   {info(config.server_url)}")
    print(f"    api_key:      {info(_mask(config.api_key))}")
    print(f"    timeout:      {info(str(config.timeout))}s")

    consent = "given" if has_consent() else "not given"
    print(f"\n  {dim('Consent:')} {consent} ({consent_path()})")

    print(f"\n  {dim('Config locations:')}")
    print(f"    Local:  {ConfigManager.CONFIG_FILENAME} (in current directory)")
    print(f"    Global: ~/{ConfigManager.CONFIG_FILENAME}")
    print(f"\n  {dim('Run')} smartcommit --setup {dim('to configure')}\n")

    return 0


def _choose(prompt: str, options: list[str], default: str, input_fn: Callable[[str], str]) -> str:
    for i, option in enumerate(options, 1):
        marker = " (default)" if option == default else ""
        print(f"  {i}. {option}{marker}")
    print()

    while True:
        choice = input_fn(f"{prompt} [1-{len(options)}] (Enter for default): ").strip()
        if choice == '':
            return default
        if choice.isdigit() and 1 <= int(choice) <= len(options):
            return options[int(choice) - 1]


def run_setup(manager: ConfigManager, input_fn: Callable[[str], str] = input) -> int:
    """Quick setup wizard. Writes ~/.smartcommitrc.json."""
    defaults = Config()
    print(f"\n{bold('Setup Wizard')}\n")

    print("Choose generation backend:\n")
    provider = _choose("Select", ["server", "gemini", "claude"], defaults.provider, input_fn)

    server_url = defaults.server_url
    if provider == "server":
        server_url = input_fn(f"\nServer URL (Enter for {defaults.server_url}): ").strip() or defaults.server_url
    else:
        key_var = "GEMINI_API_KEY" if provider == "gemini" else "ANTHROPIC_API_KEY"
        print(dim(f"\nSet {key_var} in your environment or .env file."))

    print("\nCommit message style:\n")
    style = _choose("Select", ["detailed", "short"], defaults.style, input_fn)

    print("\nDefault commit type (none lets the backend decide):\n")
    default_type = _choose("Select", ["none", *COMMIT_TYPE_NAMES], "none", input_fn)
    if default_type == "none":
        default_type = ""

    config = Config(
        provider=provider,
        style=style,
        default_type=default_type,
        server_url=server_url,
    )
    path = manager.save(config, global_config=True)

    print_success(f"Saved to {path}")
    return 0


def run_install_completion() -> int:
    """Install shell tab completion."""
    shell = os.environ.get('SHELL', '')
    line = 'eval "$(register-python-argcomplete smartcommit)"'

    print(f"\n{bold('Tab Completion Setup')}\n")

    if 'zsh' in shell or 'bash' in shell:
        rc_file = os.path.expanduser('~/.zshrc' if 'zsh' in shell else '~/.bashrc')
        print(f"Add this line to {dim(rc_file)}:\n")
        print(f"  {line}\n")
        print(f"Then run: {dim('source ' + rc_file)}")
    elif sys.platform == 'win32':
        print("For PowerShell, run:\n")
        print("  register-python-argcomplete --shell powershell smartcommit | Out-String | Invoke-Expression\n")
        print("To make it permanent, add it to your $PROFILE.")
    else:
        print("Run one of these based on your shell:\n")
        print(f"  {dim('# Bash/Zsh')}")
        print(f"  {line}\n")
        print(f"  {dim('# Fish')}")
        print("  register-python-argcomplete --shell fish smartcommit | source")

    print(f"\n{dim('After setup, press TAB to autocomplete flags.')}")
    return 0
