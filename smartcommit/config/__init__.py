"""Configuration Management Package"""

import json
import os
from dataclasses import dataclass, asdict, fields
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from smartcommit import COMMIT_TYPE_NAMES
from smartcommit.output import print_warning

# Valid configuration values
VALID_PROVIDERS = {"server", "gemini", "claude"}
VALID_STYLES = {"detailed", "short"}

# Environment variables that always win over file values
ENV_SERVER_URL = "SMARTCOMMIT_SERVER_URL"
ENV_API_KEY = "SMARTCOMMIT_API_KEY"

# Environment variables that fill in settings
ENV_PROVIDER = "SMARTCOMMIT_PROVIDER"
ENV_MODEL = "SMARTCOMMIT_MODEL"
ENV_TIMEOUT = "SMARTCOMMIT_TIMEOUT"


class ConfigParseError(Exception):
    """Raised when a config file exists but can't be read as JSON."""
    pass


@dataclass(frozen=True)
class Config:
    """Settings loaded once at startup and never mutated afterwards."""
    provider: str = "server"
    default_type: str = ""  # empty lets the backend pick
    style: str = "detailed"
    server_url: str = "http://localhost:8080"
    api_key: str = ""
    timeout: int = 30  # seconds
    model: Optional[str] = None

    def to_dict(self) -> dict:
        return {k: v for k, v in asdict(self).items() if v is not None}

    @staticmethod
    def validate(data: dict) -> list[str]:
        """Validate raw config values in place and return a list of warnings.

        Invalid values are dropped so the field default applies.
        """
        warnings = []
        defaults = Config()

        if "provider" in data and data["provider"] not in VALID_PROVIDERS:
            warnings.append(f"Invalid provider '{data['provider']}', using '{defaults.provider}'")
            del data["provider"]

        if "style" in data and data["style"] not in VALID_STYLES:
            warnings.append(f"Invalid style '{data['style']}', using '{defaults.style}'")
            del data["style"]

        if "default_type" in data and data["default_type"] and data["default_type"] not in COMMIT_TYPE_NAMES:
            warnings.append(f"Invalid default_type '{data['default_type']}', using '{defaults.default_type}'")
            del data["default_type"]

        if "timeout" in data:
            timeout = data["timeout"]
            if isinstance(timeout, bool) or not isinstance(timeout, int) or timeout <= 0:
                warnings.append(f"Invalid timeout '{timeout}', using {defaults.timeout}")
                del data["timeout"]

        return warnings

    @classmethod
    def from_dict(cls, data: dict) -> 'Config':
        valid_keys = {f.name for f in fields(cls)}
        filtered = {k: v for k, v in data.items() if k in valid_keys}
        for warning in cls.validate(filtered):
            print_warning(f"Config warning: {warning}")
        return cls(**filtered)


def apply_env_overrides(config: Config, environ: Optional[dict] = None) -> Config:
    """Layer environment variables over file-sourced values."""
    env = os.environ if environ is None else environ
    overrides = {}

    if env.get(ENV_SERVER_URL):
        overrides["server_url"] = env[ENV_SERVER_URL]
    if env.get(ENV_API_KEY):
        overrides["api_key"] = env[ENV_API_KEY]

    if env.get(ENV_PROVIDER):
        overrides["provider"] = env[ENV_PROVIDER]
    if env.get(ENV_MODEL):
        overrides["model"] = env[ENV_MODEL]
    if env.get(ENV_TIMEOUT):
        try:
            overrides["timeout"] = int(env[ENV_TIMEOUT])
        except ValueError:
            print_warning(f"Ignoring {ENV_TIMEOUT}={env[ENV_TIMEOUT]!r}: not an integer")

    if not overrides:
        return config

    # Run env values through the same validation as file values
    merged = {**config.to_dict(), **overrides}
    return Config.from_dict(merged)


def load_env(path: Optional[Path] = None) -> bool:
    """Load a .env file into the environment. A missing file is not an error."""
    dotenv_path = path or Path.cwd() / ".env"
    return load_dotenv(dotenv_path=dotenv_path, override=False)


class ConfigManager:
    """Manages loading and saving configuration."""

    CONFIG_FILENAME = ".smartcommitrc.json"

    def __init__(self):
        self._config: Optional[Config] = None
        self._config_path: Optional[Path] = None

    def load(self) -> Config:
        if self._config is not None:
            return self._config

        self._config = apply_env_overrides(self._load_file_config())
        return self._config

    def _load_file_config(self) -> Config:
        for path in (Path.cwd() / self.CONFIG_FILENAME, Path.home() / self.CONFIG_FILENAME):
            if not path.exists():
                continue
            try:
                config = self._load_from_file(path)
            except ConfigParseError as e:
                print_warning(f"{e}; using defaults")
                return Config()
            self._config_path = path
            return config

        return Config()

    def _load_from_file(self, path: Path) -> Config:
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError, OSError) as e:
            raise ConfigParseError(f"Could not load {path}: {e}")

        if not isinstance(data, dict):
            raise ConfigParseError(f"Could not load {path}: expected a JSON object")
        return Config.from_dict(data)

    def save(self, config: Config, global_config: bool = True) -> Path:
        path = Path.home() / self.CONFIG_FILENAME if global_config else Path.cwd() / self.CONFIG_FILENAME
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(config.to_dict(), f, indent=2)
        return path

    def get_config_path(self) -> Optional[Path]:
        return self._config_path


__all__ = [
    "Config",
    "ConfigManager",
    "ConfigParseError",
    "apply_env_overrides",
    "load_env",
    "VALID_PROVIDERS",
    "VALID_STYLES",
]
