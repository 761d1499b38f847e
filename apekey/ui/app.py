"""
The apekey TUI application.

A single screen: the keymap with its search bar. The keymap is read and
parsed in a worker once the app is mounted, so the window shows up before
a large config file is done.
"""

import logging
from pathlib import Path
from typing import Optional

from textual.app import App, ComposeResult
from textual.binding import Binding

from apekey.config.user_config import UserConfig

from .keymap import AppState, KeymapScreen
from .themes import USER_THEME_NAME, build_theme, register_all_themes

logger = logging.getLogger(__name__)


class ApekeyApp(App[None]):
    """Searchable cheat sheet of the keybinds annotated in an xmonad config."""

    TITLE = "apekey"

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit"),
    ]

    CSS = """
    Screen {
        layout: vertical;
    }

    KeymapScreen {
        height: 1fr;
    }
    """

    def __init__(self, source_path: Path, config: Optional[UserConfig] = None, **kwargs) -> None:
        super().__init__(**kwargs)
        self.source_path = source_path
        self.user_config = config or UserConfig()
        register_all_themes(self, build_theme(self.user_config.theme, self.user_config.colors))

    def compose(self) -> ComposeResult:
        yield KeymapScreen(self.source_path, id="keymap-screen")

    def on_mount(self) -> None:
        logger.info(f"Starting apekey for {self.source_path}")
        self.theme = USER_THEME_NAME

    @property
    def keymap_screen(self) -> KeymapScreen:
        return self.query_one("#keymap-screen", KeymapScreen)

    @property
    def state(self) -> AppState:
        """Current load state of the keymap."""
        return self.keymap_screen.presenter.state.app_state


def run_app(source_path: Path, config: Optional[UserConfig] = None) -> None:
    """Run the TUI until the user quits."""
    ApekeyApp(source_path, config).run()
