"""
Keymap Screen - the keybind list with live fuzzy search.

Layout:
- Title of the keymap
- Search input
- Scrollable keymap: grouped by section, or a ranked list while searching
- Status bar
"""

import asyncio
import logging
from pathlib import Path
from typing import Any

from rich.text import Text
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import VerticalScroll
from textual.timer import Timer
from textual.widget import Widget
from textual.widgets import Input, Static

from ..formatting import KeymapPalette, render_document, render_results
from .keymap_presenter import AppState, KeymapPresenter, KeymapStateVM

logger = logging.getLogger(__name__)


class KeymapScreen(Widget):
    """Full-screen keymap widget with a persistent search bar."""

    BINDINGS = [
        Binding("escape", "clear_or_quit", "Clear / Quit"),
        Binding("slash", "focus_search", "Search", show=False),
    ]

    DEFAULT_CSS = """
    KeymapScreen {
        layout: grid;
        grid-size: 1;
        grid-rows: 1 3 1fr 1;
    }

    #keymap-title {
        height: 1;
        padding: 0 1;
        text-align: center;
    }

    #search-input {
        width: 1fr;
        border: solid $primary-darken-1;
    }

    #search-input:focus {
        border: solid $primary;
    }

    #keymap-view {
        height: 1fr;
        padding: 0 2;
        scrollbar-color: $secondary;
        scrollbar-gutter: stable;
    }

    #keymap-status {
        height: 1;
        background: $surface;
        padding: 0 1;
    }
    """

    def __init__(self, source_path: Path, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.presenter = KeymapPresenter(source_path, on_state_update=self._on_state_update)
        self._debounce_timer: Timer | None = None
        self._search_task: asyncio.Task | None = None
        self._current_vm: KeymapStateVM | None = None

    def compose(self) -> ComposeResult:
        yield Static("", id="keymap-title")
        yield Input(placeholder="Search keybinds...", id="search-input", disabled=True)
        with VerticalScroll(id="keymap-view"):
            yield Static("", id="keymap-content")
        yield Static("Loading...", id="keymap-status")

    def on_mount(self) -> None:
        logger.info("KeymapScreen mounted")
        self.run_worker(self.presenter.load(), exclusive=True, group="load")

    @property
    def palette(self) -> KeymapPalette:
        return KeymapPalette.from_css_variables(self.app.get_css_variables())

    async def _on_state_update(self, state: KeymapStateVM) -> None:
        """Handle state updates from presenter."""
        self._current_vm = state
        self.call_later(self._render_state_sync, state)

    def _render_state_sync(self, state: KeymapStateVM) -> None:
        """Render the current state to the UI."""
        palette = self.palette
        self.query_one("#keymap-title", Static).update(Text(state.title, style=palette.title))
        self.query_one("#keymap-status", Static).update(state.status_text)

        content = self.query_one("#keymap-content", Static)
        search_input = self.query_one("#search-input", Input)

        if state.app_state == AppState.ERROR:
            content.update(Text(state.error or "Unknown error", style=palette.error))
            return
        if state.app_state != AppState.READY or state.document is None:
            content.update(Text(state.status_text, style="dim"))
            return

        if search_input.disabled:
            search_input.disabled = False
            search_input.focus()

        if state.is_filtered:
            content.update(render_results(state.results, palette))
        else:
            content.update(render_document(state.document, palette))

    def on_input_changed(self, event: Input.Changed) -> None:
        """Handle search input changes with debouncing."""
        if event.input.id != "search-input":
            return

        query = event.value

        if self._debounce_timer:
            self._debounce_timer.stop()
            self._debounce_timer = None

        def do_search() -> None:
            self._debounce_timer = None
            if self._search_task and not self._search_task.done():
                self._search_task.cancel()
            self._search_task = asyncio.create_task(self.presenter.search(query))

        self._debounce_timer = self.set_timer(self.presenter.DEBOUNCE_MS / 1000, do_search)

    def action_clear_or_quit(self) -> None:
        """Clear the search, or quit when it is already empty."""
        search_input = self.query_one("#search-input", Input)
        if search_input.value:
            search_input.value = ""
        else:
            self.app.exit()

    def action_focus_search(self) -> None:
        """Focus the search input."""
        self.query_one("#search-input", Input).focus()
