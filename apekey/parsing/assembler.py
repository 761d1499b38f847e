"""Section and document assembly.

Grammar, in terms of the primitives in ``lexer`` and ``keybinds``::

    document := filler* boundary section* (boundary | end)
    section  := section_tag? (keybind | filler)*   -- until boundary, tag or end

A section ends wherever the next thing starts: a section tag, a boundary
marker, or the end of input. None of those is consumed by the section, so an
explicit ``-- ##`` close is optional. Such a close shows up as an untitled,
empty section and is dropped.
"""

import logging
from typing import Optional

from apekey.exceptions import MissingBoundaryError
from apekey.models.keymap import Document, Keybind, Section

from .cursor import Cursor, ParseResult
from .keybinds import keybind
from .lexer import boundary, ignore_marker, section_tag

logger = logging.getLogger(__name__)


def _at_end(cursor: Cursor) -> bool:
    return cursor.skip_whitespace().at_end


def section_stop(cursor: Cursor) -> bool:
    """Lookahead: does the current section end here?"""
    return _at_end(cursor) or boundary(cursor) is not None or section_tag(cursor) is not None


def filler_line(cursor: Cursor) -> Cursor:
    """Discard the rest of the current line."""
    _, after = cursor.take_line()
    return after


def section(cursor: Cursor) -> ParseResult[Section]:
    """Assemble one section starting at ``cursor``.

    The section tag is optional; without one the section is untitled. Always
    succeeds, possibly with an empty section.
    """
    title: Optional[str] = None
    tag = section_tag(cursor)
    if tag is not None:
        title, cursor = tag

    keybinds: list[Keybind] = []
    while not section_stop(cursor):
        if ignore_marker(cursor) is not None:
            cursor = cursor.skip_whitespace()
            # line_number scans from the start of the text
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug(f"Skipping ignored comment on line {cursor.line_number}")
            cursor = filler_line(cursor)
            continue
        match = keybind(cursor)
        if match is not None:
            found, cursor = match
            keybinds.append(found)
            continue
        cursor = filler_line(cursor)

    return Section(title=title, keybinds=tuple(keybinds)), cursor


def _is_close_marker(found: Section) -> bool:
    return found.title is None and not found.keybinds


def _find_opening_boundary(cursor: Cursor) -> ParseResult[Optional[str]]:
    while not _at_end(cursor):
        match = boundary(cursor)
        if match is not None:
            return match
        cursor = filler_line(cursor)
    return None


def document(cursor: Cursor) -> Document:
    """Assemble the keymap document.

    Raises:
        MissingBoundaryError: no opening boundary marker exists in the input.
    """
    opening = _find_opening_boundary(cursor)
    if opening is None:
        raise MissingBoundaryError()
    title, cursor = opening
    logger.debug(f"Opening boundary found, title={title!r}")

    sections: list[Section] = []
    while True:
        if _at_end(cursor):
            logger.warning("The keymap has no closing boundary marker, parsed up to end of input")
            break
        if boundary(cursor) is not None:
            logger.debug("Closing boundary found")
            break
        found, cursor = section(cursor)
        if _is_close_marker(found):
            continue
        logger.debug(f"Section {found.title!r} with {len(found.keybinds)} keybinds")
        sections.append(found)

    return Document(title=title, sections=tuple(sections))


def parse_document(text: str) -> Document:
    """Parse annotated source text into a ``Document``.

    Raises:
        MissingBoundaryError: the text contains no opening boundary marker.
    """
    result = document(Cursor(text))
    logger.info(
        f"Parsing done, sections {result.section_count}, keybinds {result.keybind_count}"
    )
    return result
