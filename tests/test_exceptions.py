"""Tests for the apekey exception hierarchy."""

import pytest

from apekey.exceptions import (
    ApekeyError,
    ConfigurationError,
    FileOperationError,
    FileReadError,
    MissingBoundaryError,
    ParseError,
)


@pytest.mark.parametrize(
    "error_class,parent",
    [
        (FileOperationError, ApekeyError),
        (FileReadError, FileOperationError),
        (ParseError, ApekeyError),
        (MissingBoundaryError, ParseError),
        (ConfigurationError, ApekeyError),
    ],
)
def test_hierarchy(error_class, parent):
    assert issubclass(error_class, parent)


def test_message_without_context():
    error = ApekeyError("Something broke")
    assert str(error) == "Something broke"
    assert error.context == {}


def test_message_with_context():
    error = ApekeyError("Something broke", path="/tmp/x", line=3)
    assert str(error) == "Something broke (path='/tmp/x', line=3)"


def test_file_read_error_context():
    error = FileReadError(path="/home/u/.xmonad/xmonad.hs", cause="No such file")
    assert error.message == "Failed to read the config file"
    assert error.context == {"path": "/home/u/.xmonad/xmonad.hs", "cause": "No such file"}


def test_missing_boundary_default_message():
    assert "'-- #'" in str(MissingBoundaryError())


def test_configuration_error_setting():
    error = ConfigurationError("Bad theme", setting="theme")
    assert str(error) == "Bad theme (setting='theme')"
