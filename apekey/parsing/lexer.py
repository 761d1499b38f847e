"""Lexical primitives for keymap annotations.

The annotations live in Haskell line comments::

    -- # Title              boundary marker (opens / closes the keymap)
    -- ## Section           section tag
    -- "M-p" Launch menu    inline keybind
    -- Launch menu          two-line keybind, keys on the next line
    , ("M-p", spawn "dmenu_run")
    -- ! Not listed         ignored

All recognizers tolerate surrounding whitespace and return ``None`` when they
do not match, leaving the caller's cursor untouched.
"""

from __future__ import annotations

from typing import Optional

from .cursor import Cursor, ParseResult

COMMENT_SEQUENCE = "--"
COMMENT_GUARD = ">"  # "-->" is an operator, not a comment
BOUNDARY_MARKER = "#"
SECTION_MARKER = "##"
IGNORE_MARKER = "!"
QUOTE = '"'


def comment_sequence(cursor: Cursor) -> Optional[Cursor]:
    """Match optional leading whitespace, ``--`` and trailing spaces."""
    cursor = cursor.skip_whitespace()
    if not cursor.startswith(COMMENT_SEQUENCE):
        return None
    cursor = cursor.advance(len(COMMENT_SEQUENCE))
    if cursor.startswith(COMMENT_GUARD):
        return None
    return cursor.skip_spaces()


def _capture_title(cursor: Cursor) -> tuple[Optional[str], Cursor]:
    line, cursor = cursor.skip_spaces().take_line()
    return line.strip() or None, cursor


def boundary(cursor: Cursor) -> ParseResult[Optional[str]]:
    """Match a boundary marker line and capture its title.

    ``-- #`` is a boundary, ``-- ##`` is not (it is a section tag).
    """
    after = comment_sequence(cursor)
    if after is None or after.startswith(SECTION_MARKER):
        return None
    if not after.startswith(BOUNDARY_MARKER):
        return None
    return _capture_title(after.advance(len(BOUNDARY_MARKER)))


def section_tag(cursor: Cursor) -> ParseResult[Optional[str]]:
    """Match a section tag line and capture its title."""
    after = comment_sequence(cursor)
    if after is None or not after.startswith(SECTION_MARKER):
        return None
    return _capture_title(after.advance(len(SECTION_MARKER)))


def ignore_marker(cursor: Cursor) -> Optional[Cursor]:
    """Match ``--`` directly followed by the ignore marker."""
    after = comment_sequence(cursor)
    if after is None or not after.startswith(IGNORE_MARKER):
        return None
    return after.advance(len(IGNORE_MARKER))


def annotation_body(cursor: Cursor) -> Optional[Cursor]:
    """Match the start of a comment that may carry a keybind.

    Boundary markers, section tags and ignored comments are rejected here so
    neither keybind form can swallow them.
    """
    after = comment_sequence(cursor)
    if after is None:
        return None
    if after.startswith(BOUNDARY_MARKER) or after.startswith(IGNORE_MARKER):
        return None
    return after


def quoted(cursor: Cursor) -> ParseResult[str]:
    """Match a non-empty double-quoted literal on the current line.

    The capture stops at the nearest closing quote; escaped quotes are not
    supported.
    """
    if not cursor.startswith(QUOTE):
        return None
    start = cursor.pos + len(QUOTE)
    close = cursor.text.find(QUOTE, start, cursor.line_end())
    if close <= start:
        return None
    return cursor.text[start:close], cursor.moved_to(close + len(QUOTE))
