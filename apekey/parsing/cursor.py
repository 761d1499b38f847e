"""Position-carrying cursor over the raw keymap source.

Every grammar rule takes a ``Cursor`` and returns either a new cursor (plus a
value) on success or ``None`` on failure. Cursors are immutable, so
backtracking is simply trying the next alternative with the cursor you
already hold.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple, TypeVar

HORIZONTAL_WHITESPACE = " \t"
LINE_BREAKS = "\r\n"


@dataclass(frozen=True)
class Cursor:
    """An offset into ``text``."""

    text: str
    pos: int = 0

    @property
    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    @property
    def rest(self) -> str:
        return self.text[self.pos :]

    def peek(self, length: int = 1) -> str:
        return self.text[self.pos : self.pos + length]

    def startswith(self, prefix: str) -> bool:
        return self.text.startswith(prefix, self.pos)

    def advance(self, count: int) -> Cursor:
        return Cursor(self.text, min(self.pos + count, len(self.text)))

    def moved_to(self, pos: int) -> Cursor:
        return Cursor(self.text, min(pos, len(self.text)))

    def skip(self, chars: str) -> Cursor:
        """Skip any run of characters from ``chars``."""
        pos = self.pos
        while pos < len(self.text) and self.text[pos] in chars:
            pos += 1
        return self.moved_to(pos)

    def skip_spaces(self) -> Cursor:
        return self.skip(HORIZONTAL_WHITESPACE)

    def skip_whitespace(self) -> Cursor:
        return self.skip(HORIZONTAL_WHITESPACE + LINE_BREAKS)

    def line_end(self) -> int:
        """Offset of the next line break (or end of text)."""
        pos = self.pos
        while pos < len(self.text) and self.text[pos] not in LINE_BREAKS:
            pos += 1
        return pos

    def take_line(self) -> tuple[str, Cursor]:
        """Return the rest of the current line and a cursor past its line break."""
        end = self.line_end()
        line = self.text[self.pos : end]
        return line, self.moved_to(end).skip_line_break()

    def skip_line_break(self) -> Cursor:
        if self.startswith("\r\n"):
            return self.advance(2)
        if self.peek() in ("\r", "\n"):
            return self.advance(1)
        return self

    @property
    def line_number(self) -> int:
        """1-based line number of the cursor, for log messages."""
        return self.text.count("\n", 0, self.pos) + 1


T = TypeVar("T")

# A successful rule yields its value and the cursor after it; a failed rule
# yields None and the caller keeps its own cursor.
ParseResult = Optional[Tuple[T, Cursor]]
