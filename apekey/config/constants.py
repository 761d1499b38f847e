"""
Centralized constants for apekey.

Defaults for the user config, the environment variables apekey reads, and
logging limits.
"""

# =============================================================================
# PATHS
# =============================================================================

CONFIG_DIRNAME = "apekey"
USER_CONFIG_FILENAME = "apekey.yaml"
LOG_FILENAME = "apekey.log"

DEFAULT_XMONAD_CONFIG = "~/.xmonad/xmonad.hs"

# =============================================================================
# LOGGING
# =============================================================================

MAX_LOG_BYTES = 5 * 1024 * 1024  # 5MB per log file
LOG_BACKUP_COUNT = 2
DEFAULT_LOG_LEVEL = "warning"
LOG_LEVELS = ["debug", "info", "warning", "error"]

# =============================================================================
# UI
# =============================================================================

DEFAULT_TITLE = "Key bindings"
DEFAULT_THEME = "dark"
THEMES = ["dark", "light"]
SEARCH_DEBOUNCE_MS = 80  # Wait for the user to stop typing

# Original apekey palette
BG_COLOR = "#2A211C"
FG_COLOR = "#BDAE9D"
KEYBIND_COLOR = "#C5656B"
SCROLLBAR_COLOR = "#7F4A2B"
ERROR_COLOR = "#E53935"

# =============================================================================
# ENVIRONMENT VARIABLES
# =============================================================================

ENV_VAR_DEFINITIONS = {
    "APEKEY_XMONAD_CONFIG": {
        "description": "Path of the annotated xmonad.hs, overrides the user config",
        "default": None,
        "valid_values": None,
    },
    "APEKEY_LOG_LEVEL": {
        "description": "Log level written to the apekey log file",
        "default": DEFAULT_LOG_LEVEL,
        "valid_values": LOG_LEVELS,
    },
    "XDG_CONFIG_HOME": {
        "description": "Base directory of the apekey config and log files",
        "default": None,
        "valid_values": None,
    },
}
