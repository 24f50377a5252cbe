"""Layered TOML configuration.

config/default.toml holds every setting the service ships with;
config/<NUREMENTO_ENV>.toml, when present, overrides parts of it.
Environment variables are applied later by Settings.
"""

import os
import tomllib
from pathlib import Path
from typing import Any

CONFIG_DIR_ENV = "NUREMENTO_CONFIG_DIR"
ENVIRONMENT_ENV = "NUREMENTO_ENV"
DEFAULT_ENVIRONMENT = "development"

# How far up from the working directory to look for config/
_SEARCH_DEPTH = 5


def get_config_dir() -> Path:
    """Locate the config directory.

    NUREMENTO_CONFIG_DIR wins when set and must exist. Otherwise the
    nearest config/ in the working directory or one of its parents.
    """
    explicit = os.environ.get(CONFIG_DIR_ENV)
    if explicit:
        path = Path(explicit)
        if not path.is_dir():
            raise FileNotFoundError(f"{CONFIG_DIR_ENV} points at a missing directory: {explicit}")
        return path

    start = Path.cwd()
    for directory in [start, *start.parents][:_SEARCH_DEPTH]:
        candidate = directory / "config"
        if candidate.is_dir():
            return candidate
    return Path("config")


def get_environment() -> str:
    return os.environ.get(ENVIRONMENT_ENV, DEFAULT_ENVIRONMENT)


def load_toml(file_path: Path) -> dict[str, Any]:
    """Parse one TOML file.

    Raises:
        FileNotFoundError: If the file does not exist
        tomllib.TOMLDecodeError: On invalid TOML
    """
    try:
        with file_path.open("rb") as f:
            return tomllib.load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Configuration file not found: {file_path}") from None


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Return base updated with override, merging nested tables.

    Neither argument is modified.
    """
    merged = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = deep_merge(current, value)
        else:
            merged[key] = value
    return merged


def load_config() -> dict[str, Any]:
    """Load default.toml merged with the current environment's file.

    Raises:
        FileNotFoundError: If default.toml is missing
    """
    config_dir = get_config_dir()
    config = load_toml(config_dir / "default.toml")

    env_file = config_dir / f"{get_environment()}.toml"
    if env_file.is_file():
        config = deep_merge(config, load_toml(env_file))
    return config
