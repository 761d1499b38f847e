"""
apekey TUI Theme Definitions.

Two base themes, dark and light, built on Textual's theming system. User
color overrides from the config file are layered on top of the base theme.
"""

from typing import Any

from textual.theme import Theme

from apekey.config.constants import (
    BG_COLOR,
    ERROR_COLOR,
    FG_COLOR,
    KEYBIND_COLOR,
    SCROLLBAR_COLOR,
)
from apekey.config.user_config import Colors

# =============================================================================
# apekey Dark Theme (Default)
# Warm brown background with a muted red accent for keys
# =============================================================================

APEKEY_DARK = Theme(
    name="apekey-dark",
    primary=KEYBIND_COLOR,  # Keys
    secondary=SCROLLBAR_COLOR,  # Scrollbar, borders
    accent="#D9A05B",  # Match highlight
    foreground=FG_COLOR,
    background=BG_COLOR,
    surface="#33291F",
    panel="#3D3127",
    error=ERROR_COLOR,
    dark=True,
    variables={"apekey-title": FG_COLOR, "apekey-section": "#D9A05B"},
)

# =============================================================================
# apekey Light Theme
# =============================================================================

APEKEY_LIGHT = Theme(
    name="apekey-light",
    primary="#A8434A",
    secondary="#7F4A2B",
    accent="#B5651D",
    foreground="#2A211C",
    background="#F5EFE6",
    surface="#EDE4D8",
    panel="#E3D8C9",
    error="#C62828",
    dark=False,
    variables={"apekey-title": "#2A211C", "apekey-section": "#B5651D"},
)

APEKEY_THEMES: dict[str, Theme] = {
    "dark": APEKEY_DARK,
    "light": APEKEY_LIGHT,
}

USER_THEME_NAME = "apekey-user"


def build_theme(theme: str, colors: Colors) -> Theme:
    """
    Build the theme the app runs with.

    Args:
        theme: "dark" or "light"
        colors: User color overrides; unset colors keep the base value

    Returns:
        A Theme named ``apekey-user`` with the overrides applied
    """
    base = APEKEY_THEMES.get(theme, APEKEY_DARK)
    variables: dict[str, str] = dict(base.variables)
    if colors.title:
        variables["apekey-title"] = colors.title
    if colors.section:
        variables["apekey-section"] = colors.section
    if colors.scrollbar:
        variables["scrollbar"] = colors.scrollbar
    return Theme(
        name=USER_THEME_NAME,
        primary=colors.keybind or base.primary,
        secondary=colors.scrollbar or base.secondary,
        accent=base.accent,
        foreground=colors.fg or base.foreground,
        background=colors.bg or base.background,
        surface=base.surface,
        panel=base.panel,
        error=colors.error or base.error,
        dark=base.dark,
        variables=variables,
    )


def register_all_themes(app: Any, theme: Theme) -> None:
    """
    Register the base themes and the user theme with the app.

    Args:
        app: The Textual App instance
        theme: The user theme from ``build_theme``
    """
    for base in APEKEY_THEMES.values():
        app.register_theme(base)
    app.register_theme(theme)
