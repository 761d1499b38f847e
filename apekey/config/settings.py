"""Configuration utilities for apekey."""

import os
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from apekey.exceptions import ConfigurationError

from .constants import (
    CONFIG_DIRNAME,
    DEFAULT_XMONAD_CONFIG,
    ENV_VAR_DEFINITIONS,
    LOG_FILENAME,
    USER_CONFIG_FILENAME,
)


def get_config_dir() -> Path:
    """Get the apekey config directory, respecting XDG_CONFIG_HOME."""
    xdg = os.environ.get("XDG_CONFIG_HOME")
    base = Path(xdg) if xdg else Path.home() / ".config"
    return base / CONFIG_DIRNAME


def get_user_config_path() -> Path:
    """Path of the user config file (may not exist)."""
    return get_config_dir() / USER_CONFIG_FILENAME


def get_log_path() -> Path:
    """Path of the log file, creating its directory."""
    config_dir = get_config_dir()
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir / LOG_FILENAME


def validate_env_var(name: str, value: Optional[str]) -> Tuple[bool, Optional[str]]:
    """Validate a single environment variable value.

    Args:
        name: The environment variable name.
        value: The current value (or None if not set).

    Returns:
        Tuple of (is_valid, error_message).
    """
    if name not in ENV_VAR_DEFINITIONS:
        return True, None  # Unknown vars are always valid

    if value is None:
        return True, None

    valid_values = ENV_VAR_DEFINITIONS[name].get("valid_values")
    if valid_values is None:
        return True, None

    if value.lower() not in [v.lower() for v in valid_values]:
        return False, f"Invalid value '{value}' for {name}. Valid values: {valid_values}"

    return True, None


def validate_all_env_vars() -> List[str]:
    """Validate all apekey environment variables.

    Returns:
        List of error messages (empty if all valid).
    """
    errors = []
    for name in ENV_VAR_DEFINITIONS:
        is_valid, error = validate_env_var(name, os.environ.get(name))
        if not is_valid:
            errors.append(error)
    return errors


def get_env_var(name: str, validate: bool = True) -> Optional[str]:
    """Get an environment variable with optional validation.

    Raises:
        ConfigurationError: If validate=True and the value is invalid.
    """
    value = os.environ.get(name)

    if validate and value is not None:
        is_valid, error = validate_env_var(name, value)
        if not is_valid:
            raise ConfigurationError(error, setting=name)

    if value is None and name in ENV_VAR_DEFINITIONS:
        return ENV_VAR_DEFINITIONS[name].get("default")

    return value


def get_env_info() -> Dict[str, Dict]:
    """Get information about all apekey environment variables."""
    info = {}
    for name, definition in ENV_VAR_DEFINITIONS.items():
        value = os.environ.get(name)
        is_valid, _ = validate_env_var(name, value)
        info[name] = {
            "description": definition.get("description", ""),
            "value": value,
            "is_set": value is not None,
            "valid": is_valid,
            "default": definition.get("default"),
        }
    return info


def resolve_xmonad_config(cli_path: Optional[str], config_path: Optional[str]) -> Path:
    """Pick the keymap source path.

    Precedence: CLI argument, APEKEY_XMONAD_CONFIG, user config, default.
    """
    candidate = (
        cli_path
        or get_env_var("APEKEY_XMONAD_CONFIG")
        or config_path
        or DEFAULT_XMONAD_CONFIG
    )
    return Path(candidate).expanduser()
