"""Pilot-based tests for ApekeyApp and the keymap screen."""

from __future__ import annotations

from collections.abc import Callable

import pytest
from textual.pilot import Pilot
from textual.widgets import Input

from apekey.config.user_config import Colors, UserConfig
from apekey.ui.app import ApekeyApp
from apekey.ui.keymap import AppState
from apekey.ui.themes import USER_THEME_NAME

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


async def _wait_for(pilot: Pilot, condition: Callable[[], bool], timeout: float = 5.0) -> None:
    """Pause the pilot until ``condition`` holds."""
    for _ in range(int(timeout / 0.05)):
        if condition():
            return
        await pilot.pause(0.05)
    raise AssertionError("condition not reached before timeout")


def _query(app: ApekeyApp) -> str:
    return app.keymap_screen.presenter.state.query


# ---------------------------------------------------------------------------
# Tests: Loading
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
async def test_loads_keymap_and_focuses_search(keymap_file):
    app = ApekeyApp(keymap_file)
    async with app.run_test() as pilot:
        await _wait_for(pilot, lambda: app.state == AppState.READY)
        await _wait_for(pilot, lambda: isinstance(app.focused, Input))

        state = app.keymap_screen.presenter.state
        assert state.title == "XMonad keys"
        assert state.document.section_count == 2
        assert not app.query_one("#search-input", Input).disabled


@pytest.mark.asyncio
async def test_missing_file_shows_error(tmp_path):
    app = ApekeyApp(tmp_path / "missing.hs")
    async with app.run_test() as pilot:
        await _wait_for(pilot, lambda: app.state == AppState.ERROR)
        await pilot.pause()

        assert "missing.hs" in app.keymap_screen.presenter.state.error
        assert app.query_one("#search-input", Input).disabled


@pytest.mark.asyncio
async def test_applies_user_theme(keymap_file):
    config = UserConfig(theme="light", colors=Colors(keybind="#00FF00"))
    app = ApekeyApp(keymap_file, config)
    async with app.run_test() as pilot:
        await pilot.pause()
        assert app.theme == USER_THEME_NAME
        assert app.get_css_variables()["primary"].upper() == "#00FF00"


# ---------------------------------------------------------------------------
# Tests: Searching
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
async def test_typing_filters_keybinds(keymap_file):
    app = ApekeyApp(keymap_file)
    async with app.run_test() as pilot:
        await _wait_for(pilot, lambda: isinstance(app.focused, Input))

        await pilot.press("q", "u", "i", "t")
        await _wait_for(pilot, lambda: _query(app) == "quit")

        results = app.keymap_screen.presenter.state.results
        assert [r.keys for r in results] == ["M-S-q"]


@pytest.mark.asyncio
async def test_escape_clears_search(keymap_file):
    app = ApekeyApp(keymap_file)
    async with app.run_test() as pilot:
        await _wait_for(pilot, lambda: isinstance(app.focused, Input))

        await pilot.press("w", "i", "n")
        await _wait_for(pilot, lambda: _query(app) == "win")

        await pilot.press("escape")
        await _wait_for(pilot, lambda: _query(app) == "")

        assert app.query_one("#search-input", Input).value == ""
        assert len(app.keymap_screen.presenter.state.results) == 6
