"""Reading the keymap source text."""

import logging
from pathlib import Path
from typing import Union

from apekey.exceptions import FileReadError

logger = logging.getLogger(__name__)


def read_config(config_path: Union[str, Path]) -> str:
    """Read the annotated config file as UTF-8 text.

    ``~`` is expanded. Any I/O or decoding failure is raised as
    ``FileReadError`` carrying the path and the cause.
    """
    path = Path(config_path).expanduser()
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise FileReadError(path=str(path), cause=str(e)) from e
    logger.info(f"Read {len(content)} characters from {path}")
    return content
