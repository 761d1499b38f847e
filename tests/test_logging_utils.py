"""Tests for logging setup."""

import logging
from logging.handlers import RotatingFileHandler

from apekey.utils.logging_utils import resolve_level, setup_logging


def test_resolve_level():
    assert resolve_level("debug") == logging.DEBUG
    assert resolve_level("INFO") == logging.INFO
    assert resolve_level(None) == logging.WARNING
    assert resolve_level("nonsense") == logging.WARNING


def test_setup_writes_to_config_dir(isolated_config_home):
    logger = setup_logging("info")
    assert logger.name == "apekey"
    assert logger.level == logging.INFO

    handler = logger.handlers[0]
    assert isinstance(handler, RotatingFileHandler)
    assert handler.baseFilename == str(isolated_config_home / "apekey" / "apekey.log")

    logging.getLogger("apekey.parsing").info("hello from the parser")
    handler.flush()
    content = (isolated_config_home / "apekey" / "apekey.log").read_text(encoding="utf-8")
    assert "apekey.parsing - INFO - hello from the parser" in content


def test_setup_configures_handlers_once(tmp_path):
    setup_logging("info", tmp_path / "a.log")
    logger = setup_logging("debug", tmp_path / "b.log")
    assert len(logger.handlers) == 1
    assert logger.level == logging.DEBUG


def test_unwritable_log_falls_back_to_stderr(tmp_path, capsys):
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    logger = setup_logging("info", blocker / "apekey.log")
    assert type(logger.handlers[0]) is logging.StreamHandler
    assert "logging setup failed" in capsys.readouterr().err
