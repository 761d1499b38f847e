"""Tests for rendering a Document back to annotated source."""

import pytest

from apekey.models.keymap import Document, Keybind, Section
from apekey.parsing import dump_document, parse_document
from apekey.parsing.serializer import dump_keybind

DOCUMENT = Document(
    title="XMonad keys",
    sections=(
        Section(
            title="Launching",
            keybinds=(
                Keybind("M-<Return>", "Launch a terminal"),
                Keybind("M-p", "Launch dmenu (run prompt)"),
            ),
        ),
        Section(title="Empty", keybinds=()),
        Section(
            title="Windows",
            keybinds=(
                Keybind("M-S-c", "Close the focused window"),
                Keybind("M-<Tab>", "Focus next window -- cycles"),
            ),
        ),
    ),
)


def test_dump_two_line_keybind():
    assert dump_keybind(Keybind("M-p", "Launch dmenu")) == [
        "  -- Launch dmenu",
        '  , ("M-p", return ())',
    ]


def test_dump_inline_keybind():
    assert dump_keybind(Keybind("M-p", "Launch dmenu"), inline=True) == ['-- "M-p" Launch dmenu']


def test_dump_document_layout():
    text = dump_document(Document(title="Keys", sections=(Section("A", (Keybind("a", "one"),)),)))
    assert text == '-- # Keys\n-- ## A\n  -- one\n  , ("a", return ())\n\n-- #\n'


@pytest.mark.parametrize("inline", [False, True])
def test_round_trip(inline):
    assert parse_document(dump_document(DOCUMENT, inline=inline)) == DOCUMENT


def test_round_trip_untitled():
    document = Document(title=None, sections=(Section(None, (Keybind("M-a", "A"),)),))
    assert parse_document(dump_document(document)) == document


def test_round_trip_of_parsed_sample(sample_text):
    document = parse_document(sample_text)
    assert parse_document(dump_document(document)) == document
