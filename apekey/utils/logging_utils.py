"""Logging setup for apekey.

Modules use the standard pattern:

    import logging
    logger = logging.getLogger(__name__)

``setup_logging`` is called once by the CLI. It writes to a rotating file in
the apekey config directory rather than the console so log lines never draw
over the TUI.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from apekey.config.constants import DEFAULT_LOG_LEVEL, LOG_BACKUP_COUNT, MAX_LOG_BYTES
from apekey.config.settings import get_log_path

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def resolve_level(level: Optional[str]) -> int:
    """Map a level name (debug, info, ...) to its logging constant."""
    name = (level or DEFAULT_LOG_LEVEL).upper()
    value = logging.getLevelName(name)
    return value if isinstance(value, int) else logging.WARNING


def setup_logging(level: Optional[str] = None, log_file: Optional[Path] = None) -> logging.Logger:
    """
    Configure the ``apekey`` logger.

    Args:
        level: Level name; defaults to warning.
        log_file: Override of the log file path.

    Returns:
        The configured ``apekey`` logger.
    """
    logger = logging.getLogger("apekey")
    logger.setLevel(resolve_level(level))

    # Only configure handlers once
    if logger.handlers:
        return logger

    try:
        path = log_file or get_log_path()
        path.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = RotatingFileHandler(
            path, maxBytes=MAX_LOG_BYTES, backupCount=LOG_BACKUP_COUNT, encoding="utf-8"
        )
    except OSError as e:
        # We can't log this failure since logging is what's failing
        print(f"Warning: logging setup failed, using stderr: {e}", file=sys.stderr)
        handler = logging.StreamHandler(sys.stderr)

    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)
    return logger
