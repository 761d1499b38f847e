"""Shared pytest fixtures for apekey tests."""

import logging
from pathlib import Path

import pytest

SAMPLE_KEYMAP = """\
import XMonad
import qualified Data.Map as M

-- # XMonad keys
myKeys conf = M.fromList $
  -- ## Launching
  -- Launch a terminal
  [ ((modMask, xK_Return), spawn myTerminal)
  -- Launch dmenu
  , ("M-p", spawn "dmenu_run")
  -- "M-S-q" Quit xmonad

  -- ## Windows
  -- Close the focused window
  , ("M-S-c", kill)
  -- ! Debug binding, not listed
  , ("M-d", spawn "xmessage debug")
  -- Swap the focused window with the master
  , ("M-<Return>",
      windows W.swapMaster)
  -- "M-j" Focus next window
  -- "M-k" Focus previous window
  -- #

main = xmonad def
"""


@pytest.fixture(autouse=True)
def isolated_config_home(tmp_path, monkeypatch):
    """Point XDG_CONFIG_HOME at a temp dir so tests never touch ~/.config."""
    config_home = tmp_path / "config"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    monkeypatch.delenv("APEKEY_XMONAD_CONFIG", raising=False)
    monkeypatch.delenv("APEKEY_LOG_LEVEL", raising=False)
    yield config_home


@pytest.fixture(autouse=True)
def reset_apekey_logger():
    """Undo handlers and levels installed by setup_logging."""
    yield
    logger = logging.getLogger("apekey")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def sample_text() -> str:
    return SAMPLE_KEYMAP


@pytest.fixture
def keymap_file(tmp_path) -> Path:
    """An annotated xmonad.hs on disk."""
    path = tmp_path / "xmonad.hs"
    path.write_text(SAMPLE_KEYMAP, encoding="utf-8")
    return path
