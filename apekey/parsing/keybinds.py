"""Keybind extraction.

A keybind is written in one of two ways. The two-line declaration documents
the binding right above its definition::

    -- Launch a terminal
    , ("M-<Return>", spawn myTerminal)

The inline form carries the keys in the comment itself::

    -- "M-<[]>" Move to next/previous screen

``keybind`` tries the two-line declaration first and the inline form second.
A description line never starts with a quote, so the two forms cannot both
match the same text.
"""

import logging
from typing import Optional

from apekey.models.keymap import Keybind

from .cursor import Cursor, ParseResult
from .lexer import QUOTE, annotation_body, boundary, quoted, section_tag

logger = logging.getLogger(__name__)

OPEN_PAREN = "("
CLOSE_PAREN = ")"
ESCAPE = "\\"


def description_line(cursor: Cursor) -> ParseResult[str]:
    """Match the comment line of a two-line declaration."""
    body = annotation_body(cursor)
    if body is None or body.startswith(QUOTE):
        return None
    line, after = body.take_line()
    return line.strip(), after


def _at_marker(cursor: Cursor) -> bool:
    return boundary(cursor) is not None or section_tag(cursor) is not None


def _closing_paren(cursor: Cursor) -> int:
    """Offset of the parenthesis closing the one just before ``cursor``.

    String literals are skipped. The scan gives up (-1) at the end of input or
    when a line holding a boundary marker or section tag is reached.
    """
    text = cursor.text
    depth = 1
    in_string = False
    pos = cursor.pos
    while pos < len(text):
        char = text[pos]
        if char == "\n":
            in_string = False
            if _at_marker(cursor.moved_to(pos + 1)):
                return -1
        elif in_string:
            if char == ESCAPE:
                pos += 1
            elif char == QUOTE:
                in_string = False
        elif char == QUOTE:
            in_string = True
        elif char == OPEN_PAREN:
            depth += 1
        elif char == CLOSE_PAREN:
            depth -= 1
            if depth == 0:
                return pos
        pos += 1
    return -1


def key_definition(cursor: Cursor) -> ParseResult[str]:
    """Match the keys of a binding tuple starting on the current line.

    The keys are the first quoted literal after the opening parenthesis; the
    tuple may span several lines and is consumed up to its closing
    parenthesis and the end of that line.
    """
    open_paren = cursor.text.find(OPEN_PAREN, cursor.pos, cursor.line_end())
    if open_paren < 0:
        return None
    inner = cursor.moved_to(open_paren + len(OPEN_PAREN)).skip_spaces()
    match = quoted(inner)
    if match is None:
        return None
    keys, after = match
    keys = keys.strip()
    if not keys:
        return None

    close = _closing_paren(after)
    if close < 0:
        if logger.isEnabledFor(logging.INFO):
            logger.info(
                f"Ignoring keybind {keys!r} on line {after.line_number}: "
                "unterminated argument list"
            )
        return None
    _, after = after.moved_to(close + len(CLOSE_PAREN)).take_line()
    return keys, after


def keybind_declaration(cursor: Cursor) -> ParseResult[Keybind]:
    """Match a description comment followed by a binding tuple on the next line."""
    match = description_line(cursor)
    if match is None:
        return None
    description, after = match
    definition = key_definition(after)
    if definition is None:
        return None
    keys, after = definition
    return Keybind(keys=keys, description=description), after


def inline_keybind(cursor: Cursor) -> ParseResult[Keybind]:
    """Match ``-- "keys" description`` on a single line."""
    body = annotation_body(cursor)
    if body is None or not body.startswith(QUOTE):
        return None
    match = quoted(body)
    if match is None:
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"Unterminated or empty key literal on line {body.line_number}")
        return None
    keys, after = match
    keys = keys.strip()
    if not keys:
        return None
    description, after = after.take_line()
    description = description.strip()
    if not description:
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"Ignoring {keys!r} on line {body.line_number}: no description")
        return None
    return Keybind(keys=keys, description=description), after


KEYBIND_FORMS = (keybind_declaration, inline_keybind)


def keybind(cursor: Cursor) -> Optional[tuple[Keybind, Cursor]]:
    """Try each keybind form in precedence order; first match wins."""
    for form in KEYBIND_FORMS:
        result = form(cursor)
        if result is not None:
            return result
    return None
