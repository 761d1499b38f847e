"""Configuration for apekey: constants, environment settings, user config file."""

from .settings import (
    get_config_dir,
    get_log_path,
    get_user_config_path,
    resolve_xmonad_config,
)
from .user_config import Colors, UserConfig, load_user_config

__all__ = [
    "Colors",
    "UserConfig",
    "get_config_dir",
    "get_log_path",
    "get_user_config_path",
    "load_user_config",
    "resolve_xmonad_config",
]
