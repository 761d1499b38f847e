"""
User configuration.

Loads preferences from $XDG_CONFIG_HOME/apekey/apekey.yaml (default
~/.config/apekey/apekey.yaml). Every key is optional.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

import yaml
from textual.color import Color, ColorParseError

from apekey.exceptions import ConfigurationError, FileReadError

from .constants import (
    BG_COLOR,
    DEFAULT_THEME,
    DEFAULT_XMONAD_CONFIG,
    ERROR_COLOR,
    FG_COLOR,
    KEYBIND_COLOR,
    SCROLLBAR_COLOR,
    THEMES,
)
from .settings import get_user_config_path

logger = logging.getLogger(__name__)

_BARE_HEX = re.compile(r"^[0-9a-fA-F]{6}([0-9a-fA-F]{2})?$")

EXAMPLE_CONFIG = f"""# apekey configuration
#
# Path of your annotated xmonad config. The APEKEY_XMONAD_CONFIG environment
# variable and the command-line argument take precedence.
xmonad_config: "{DEFAULT_XMONAD_CONFIG}"

# dark or light
theme: {DEFAULT_THEME}

# Hex colors, #RRGGBB or #RRGGBBAA, applied over the theme. A color left
# out keeps the theme's. The values below are the dark theme's.
# colors:
#   fg: "{FG_COLOR}"
#   bg: "{BG_COLOR}"
#   keybind: "{KEYBIND_COLOR}"
#   scrollbar: "{SCROLLBAR_COLOR}"
#   error: "{ERROR_COLOR}"
#   title: "{FG_COLOR}"
#   section: "#D9A05B"
"""


def parse_color(value: Any, setting: str) -> str:
    """
    Validate a color value and normalize it to hex.

    Accepts anything Textual can parse; a bare ``RRGGBB`` gets its ``#``.

    Raises:
        ConfigurationError: If the value is not a color.
    """
    text = str(value).strip()
    if _BARE_HEX.match(text):
        text = f"#{text}"
    try:
        color = Color.parse(text)
    except ColorParseError as e:
        raise ConfigurationError(f"Failed to parse color value {value!r}", setting=setting) from e
    return color.hex


@dataclass
class Colors:
    """Color overrides applied on top of the selected theme."""

    fg: str | None = None
    bg: str | None = None
    title: str | None = None
    section: str | None = None
    keybind: str | None = None
    scrollbar: str | None = None
    error: str | None = None

    @classmethod
    def from_dict(cls, data: Any) -> Colors:
        if not isinstance(data, dict):
            raise ConfigurationError("colors must be a mapping", setting="colors")
        known = {f.name for f in fields(cls)}
        values: dict[str, str] = {}
        for name, value in data.items():
            if name not in known:
                logger.warning(f"Ignoring unknown color setting: {name}")
                continue
            if value is not None:
                values[name] = parse_color(value, f"colors.{name}")
        return cls(**values)


@dataclass
class UserConfig:
    """Preferences read from the user config file."""

    xmonad_config: str = DEFAULT_XMONAD_CONFIG
    theme: str = DEFAULT_THEME
    colors: Colors = field(default_factory=Colors)

    @classmethod
    def from_dict(cls, data: Any) -> UserConfig:
        """
        Build a config from parsed YAML.

        Raises:
            ConfigurationError: If a value has the wrong shape.
        """
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ConfigurationError("The config file must contain a mapping")

        config = cls()
        if "xmonad_config" in data:
            path = data["xmonad_config"]
            if not isinstance(path, str) or not path.strip():
                raise ConfigurationError("xmonad_config must be a path", setting="xmonad_config")
            config.xmonad_config = path.strip()
        if "theme" in data:
            theme = str(data["theme"]).lower()
            if theme not in THEMES:
                raise ConfigurationError(
                    f"Unknown theme {data['theme']!r}, expected one of {THEMES}",
                    setting="theme",
                )
            config.theme = theme
        if data.get("colors") is not None:
            config.colors = Colors.from_dict(data["colors"])
        return config

    @classmethod
    def try_read(cls, path: Path | None = None) -> UserConfig:
        """
        Read and validate the config file.

        Raises:
            FileReadError: The file cannot be read.
            ConfigurationError: The file is not valid YAML or has bad values.
        """
        path = path or get_user_config_path()
        try:
            content = path.read_text(encoding="utf-8")
        except OSError as e:
            raise FileReadError(path=str(path), cause=str(e)) from e
        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ConfigurationError("Failed to parse user config file", path=str(path)) from e
        return cls.from_dict(data)


def load_user_config(path: Path | None = None) -> UserConfig:
    """
    Load the user config, falling back to defaults.

    A missing file silently yields the defaults; an unreadable or invalid one
    is logged and yields the defaults too.
    """
    path = path or get_user_config_path()
    if not path.exists():
        return UserConfig()
    try:
        return UserConfig.try_read(path)
    except (FileReadError, ConfigurationError) as e:
        logger.warning(f"Failed to read user config, {e}")
        logger.warning("Fallback to default config")
        return UserConfig()


def save_example_config(path: Path | None = None) -> bool:
    """
    Write the example config if no config file exists yet.

    Returns:
        True if the file was created, False if it already exists
    """
    path = path or get_user_config_path()
    if path.exists():
        return False
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(EXAMPLE_CONFIG, encoding="utf-8")
    return True
