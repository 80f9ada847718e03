"""Configuration file management for PocketPal."""

import os
import tomllib
from pathlib import Path
from typing import Any

import tomli_w

from pocketpal.exceptions import ConfigError
from pocketpal.store.storage import DEFAULT_DELIMITER, get_default_storage_path, validate_delimiter


def get_xdg_config_home() -> Path:
    """Get XDG config directory, with fallback to ~/.config."""
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        return Path(xdg_config)
    return Path.home() / ".config"


def get_config_path() -> Path:
    """Get the config file path (XDG compliant).

    Returns:
        Path to the config file.
    """
    return get_xdg_config_home() / "pocketpal" / "config.toml"


def default_config() -> dict[str, Any]:
    """Configuration used when no config file exists."""
    return {
        "storage_path": str(get_default_storage_path()),
        "delimiter": DEFAULT_DELIMITER,
    }


def create_default_config(config_path: Path | None = None) -> None:
    """Create default config file with secure permissions.

    Args:
        config_path: Path to config file. If None, uses default location.
    """
    if config_path is None:
        config_path = get_config_path()

    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, "wb") as f:
        tomli_w.dump(default_config(), f)

    os.chmod(config_path, 0o600)


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load configuration from TOML file, filling in defaults.

    A missing file is not an error: the defaults are returned.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Configuration dictionary with "storage_path" and "delimiter".

    Raises:
        ConfigError: If the file is not valid TOML or holds invalid values.
    """
    if config_path is None:
        config_path = get_config_path()

    config = default_config()
    if config_path.exists():
        try:
            with open(config_path, "rb") as f:
                config.update(tomllib.load(f))
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid config file {config_path}: {e}") from e

    if not isinstance(config["storage_path"], str) or not config["storage_path"].strip():
        raise ConfigError("storage_path must be a non-empty string")
    config["delimiter"] = validate_delimiter(config["delimiter"])
    return config


def save_config(config: dict[str, Any], config_path: Path | None = None) -> None:
    """Save configuration to TOML file.

    Args:
        config: Configuration dictionary.
        config_path: Path to config file. If None, uses default location.
    """
    if config_path is None:
        config_path = get_config_path()

    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, "wb") as f:
        tomli_w.dump(config, f)

    os.chmod(config_path, 0o600)


def get_storage_path(config: dict[str, Any]) -> Path:
    """Resolve the entries file path from a loaded config, expanding ~."""
    return Path(config["storage_path"]).expanduser()
