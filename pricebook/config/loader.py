"""Locate and read the TOML files that feed Settings.

A config directory holds ``default.toml`` plus optional per-environment
files such as ``development.toml``. When no config directory exists at all
the loader yields an empty mapping and Settings falls back to its defaults.
"""

import os
import tomllib
from pathlib import Path
from typing import Any

CONFIG_DIR_ENV = "PRICEBOOK_CONFIG_DIR"
ENVIRONMENT_ENV = "PRICEBOOK_ENV"
DEFAULT_ENVIRONMENT = "development"
SEARCH_DEPTH = 5


def get_environment() -> str:
    """Name of the active environment file, without extension."""
    return os.environ.get(ENVIRONMENT_ENV, DEFAULT_ENVIRONMENT)


def find_config_dir() -> Path | None:
    """Return the config directory, or None when there is none to read.

    An explicit PRICEBOOK_CONFIG_DIR must exist. Without it, the working
    directory and its parents are searched for a ``config/`` folder.

    Raises:
        FileNotFoundError: If PRICEBOOK_CONFIG_DIR points nowhere
    """
    explicit = os.environ.get(CONFIG_DIR_ENV)
    if explicit:
        path = Path(explicit)
        if not path.is_dir():
            raise FileNotFoundError(f"Config directory not found: {explicit}")
        return path

    for directory in [Path.cwd(), *Path.cwd().parents][:SEARCH_DEPTH]:
        candidate = directory / "config"
        if candidate.is_dir():
            return candidate
    return None


def load_toml(file_path: Path) -> dict[str, Any]:
    """Parse one TOML file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        tomllib.TOMLDecodeError: If the TOML syntax is invalid
    """
    try:
        with file_path.open("rb") as f:
            return tomllib.load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Configuration file not found: {file_path}") from None


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Return base overlaid with override; tables merge, everything else is replaced."""
    merged = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = deep_merge(current, value)
        else:
            merged[key] = value
    return merged


def config_files(config_dir: Path, environment: str) -> list[Path]:
    """Files to read, lowest priority first.

    Raises:
        FileNotFoundError: If the directory has no default.toml
    """
    default = config_dir / "default.toml"
    if not default.is_file():
        raise FileNotFoundError(
            f"Default configuration file not found: {default}. "
            f"Create config/default.toml or set {CONFIG_DIR_ENV}."
        )

    files = [default]
    overlay = config_dir / f"{environment}.toml"
    if overlay.is_file() and overlay != default:
        files.append(overlay)
    return files


def load_config() -> dict[str, Any]:
    """Read and merge every config file for the active environment."""
    config_dir = find_config_dir()
    if config_dir is None:
        return {}

    config: dict[str, Any] = {}
    for path in config_files(config_dir, get_environment()):
        config = deep_merge(config, load_toml(path))
    return config
