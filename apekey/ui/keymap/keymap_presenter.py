"""
Presenter for the Keymap Screen.

Owns the loaded keymap and the search state. Reading and parsing run once at
startup in a worker thread; each search runs in a worker thread too and only
the newest one is allowed to publish its results.
"""

import asyncio
import logging
import time
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from apekey.config.constants import DEFAULT_TITLE, SEARCH_DEBOUNCE_MS
from apekey.exceptions import FileReadError, ParseError
from apekey.models.keymap import Document, Keybind, ScoredKeybind
from apekey.parsing import parse_document, read_config
from apekey.services.keybind_search import flatten, search

logger = logging.getLogger(__name__)


class AppState(Enum):
    """Lifecycle of the keymap view."""

    READING = "reading"
    PARSING = "parsing"
    READY = "ready"
    ERROR = "error"


@dataclass
class KeymapStateVM:
    """Complete keymap state for the UI."""

    app_state: AppState = AppState.READING
    title: str = DEFAULT_TITLE
    document: Document | None = None
    query: str = ""
    results: list[ScoredKeybind] = field(default_factory=list)
    is_searching: bool = False
    search_time_ms: int = 0
    error: str | None = None
    status_text: str = ""

    @property
    def is_filtered(self) -> bool:
        """True when a query is active and results are a ranked list."""
        return self.query != ""


class KeymapPresenter:
    """
    Handles keymap screen business logic.

    The document is never mutated after parsing; searches read the flattened
    keybind list built once in ``set_document``.
    """

    DEBOUNCE_MS = SEARCH_DEBOUNCE_MS

    def __init__(
        self,
        source_path: Path,
        on_state_update: Callable[[KeymapStateVM], Awaitable[None]] | None = None,
    ):
        self.source_path = source_path
        self.on_state_update = on_state_update
        self._state = KeymapStateVM()
        self._keybinds: tuple[Keybind, ...] = ()
        self._generation = 0

    @property
    def state(self) -> KeymapStateVM:
        """Get current state."""
        return self._state

    @property
    def generation(self) -> int:
        """Number of searches issued so far."""
        return self._generation

    async def _notify_update(self) -> None:
        if self.on_state_update:
            await self.on_state_update(self._state)

    async def load(self) -> None:
        """Read and parse the keymap source, ending in READY or ERROR."""
        self._state.app_state = AppState.READING
        self._state.status_text = f"Reading {self.source_path}"
        await self._notify_update()

        try:
            text = await asyncio.to_thread(read_config, self.source_path)

            self._state.app_state = AppState.PARSING
            self._state.status_text = "Parsing keymap"
            await self._notify_update()

            document = await asyncio.to_thread(parse_document, text)
        except (FileReadError, ParseError) as e:
            logger.error(f"Failed to load keymap from {self.source_path}: {e}")
            self._state.app_state = AppState.ERROR
            self._state.error = str(e)
            self._state.status_text = "Error"
            await self._notify_update()
            return

        self.set_document(document)
        await self._notify_update()

    def set_document(self, document: Document) -> None:
        """Install a parsed document and show it unfiltered."""
        self._keybinds = tuple(flatten(document))
        self._state.app_state = AppState.READY
        self._state.document = document
        self._state.title = document.title or DEFAULT_TITLE
        self._state.query = ""
        self._state.results = [ScoredKeybind.from_keybind(kb) for kb in self._keybinds]
        self._state.error = None
        self._state.status_text = self._summary()

    def _summary(self) -> str:
        document = self._state.document
        if document is None:
            return ""
        return f"{document.section_count} sections, {document.keybind_count} keybinds"

    async def search(self, query: str) -> None:
        """
        Filter the keybinds by ``query``.

        A search that finishes after a newer one was issued is discarded, so
        the view always reflects the last keystroke.
        """
        self._generation += 1
        generation = self._generation

        if self._state.app_state != AppState.READY:
            return

        self._state.is_searching = True
        start_time = time.perf_counter()
        results = await asyncio.to_thread(search, self._keybinds, query)

        if generation != self._generation:
            logger.debug(f"Dropping stale results for {query!r}")
            return

        self._state.query = query
        self._state.results = results
        self._state.is_searching = False
        self._state.search_time_ms = int((time.perf_counter() - start_time) * 1000)
        if query:
            self._state.status_text = (
                f"{len(results)} of {len(self._keybinds)} keybinds | {self._state.search_time_ms}ms"
            )
        else:
            self._state.status_text = self._summary()
        await self._notify_update()
