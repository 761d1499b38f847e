"""Tests for section and document assembly."""

import logging

import pytest

from apekey.exceptions import MissingBoundaryError, ParseError
from apekey.models.keymap import Document, Keybind, Section
from apekey.parsing import parse_document
from apekey.parsing.assembler import section
from apekey.parsing.cursor import Cursor


def _generate(sections: int, keybinds: int) -> str:
    lines = ["module Main where", "", "-- # Generated"]
    for s in range(sections):
        lines.append(f"  -- ## Section {s}")
        for k in range(keybinds):
            lines.append(f"  -- Action {s}.{k}")
            lines.append(f'  , ("M-{s}-{k}", spawn "action {s} {k}")')
        lines.append("")
    lines.append("  -- #")
    lines.append("main = xmonad def")
    return "\n".join(lines)


class TestScenarios:
    def test_single_inline_keybind(self):
        document = parse_document('-- # Menu\n-- ## Apps\n-- "M-p" Launch menu\n-- #')
        assert document == Document(
            title="Menu",
            sections=(Section(title="Apps", keybinds=(Keybind("M-p", "Launch menu"),)),),
        )

    def test_ignore_marker_hides_declaration(self):
        document = parse_document('-- # Keys\n-- ! skip\n("M-x", kill)\n-- #')
        assert document.keybind_count == 0

    def test_sample_keymap(self, sample_text):
        document = parse_document(sample_text)
        assert document.title == "XMonad keys"
        assert [s.title for s in document.sections] == ["Launching", "Windows"]
        assert document.sections[0].keybinds == (
            Keybind("M-p", "Launch dmenu"),
            Keybind("M-S-q", "Quit xmonad"),
        )
        assert document.sections[1].keybinds == (
            Keybind("M-S-c", "Close the focused window"),
            Keybind("M-<Return>", "Swap the focused window with the master"),
            Keybind("M-j", "Focus next window"),
            Keybind("M-k", "Focus previous window"),
        )


class TestSectionCounts:
    @pytest.mark.parametrize("sections,keybinds", [(1, 1), (3, 4), (5, 0), (2, 10)])
    def test_n_sections_of_k_keybinds(self, sections, keybinds):
        document = parse_document(_generate(sections, keybinds))
        assert document.section_count == sections
        for index, found in enumerate(document.sections):
            assert found.title == f"Section {index}"
            assert [kb.keys for kb in found.keybinds] == [
                f"M-{index}-{k}" for k in range(keybinds)
            ]


class TestSection:
    def test_stops_at_next_tag_without_consuming_it(self):
        text = '-- ## A\n-- "a" one\n-- ## B\n-- "b" two'
        found, after = section(Cursor(text))
        assert found == Section("A", (Keybind("a", "one"),))
        assert after.rest.startswith("-- ## B")

    def test_stops_at_boundary(self):
        found, after = section(Cursor('-- ## A\n-- "a" one\n-- #\n-- "b" two'))
        assert found.keybinds == (Keybind("a", "one"),)
        assert after.rest.startswith("-- #")

    def test_untitled_section(self):
        found, _ = section(Cursor('-- "a" one\n-- "b" two'))
        assert found.title is None
        assert len(found.keybinds) == 2

    def test_skips_filler(self):
        text = '-- ## A\nfoo = 1\n-- plain remark\n\n-- "a" one\nbar = 2'
        found, _ = section(Cursor(text))
        assert found.keybinds == (Keybind("a", "one"),)

    def test_ignore_marker_logs_debug(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="apekey"):
            found, _ = section(Cursor('-- ## A\n-- ! "x" hidden\n-- "a" one'))
        assert found.keybinds == (Keybind("a", "one"),)
        assert "Skipping ignored comment on line 2" in caplog.text


class TestDocument:
    def test_text_before_opening_boundary_is_ignored(self):
        text = '-- "M-z" Outside\nimport XMonad\n-- # Keys\n-- "M-a" Inside\n-- #'
        document = parse_document(text)
        assert document.keybinds() == [Keybind("M-a", "Inside")]

    def test_text_after_closing_boundary_is_ignored(self):
        text = '-- # Keys\n-- "M-a" Inside\n-- #\n-- ## Later\n-- "M-z" Outside'
        document = parse_document(text)
        assert document.keybinds() == [Keybind("M-a", "Inside")]

    def test_untitled_document(self):
        document = parse_document('-- #\n-- "M-a" A\n-- #')
        assert document.title is None

    def test_leading_keybinds_form_untitled_section(self):
        document = parse_document('-- # Keys\n-- "M-a" A\n-- ## Named\n-- "M-b" B\n-- #')
        assert document.sections == (
            Section(None, (Keybind("M-a", "A"),)),
            Section("Named", (Keybind("M-b", "B"),)),
        )

    def test_explicit_section_close_is_dropped(self):
        text = (
            "-- # Keys\n"
            "-- ## A\n"
            '-- "a" one\n'
            "-- ##\n"
            "someCode = 1\n"
            "-- ## B\n"
            '-- "b" two\n'
            "-- #"
        )
        document = parse_document(text)
        assert [s.title for s in document.sections] == ["A", "B"]

    def test_empty_titled_section_is_kept(self):
        document = parse_document("-- # Keys\n-- ## Empty\n-- ## Full\n-- \"a\" one\n-- #")
        assert document.sections == (Section("Empty", ()), Section("Full", (Keybind("a", "one"),)))

    def test_arrow_operator_is_not_a_comment(self):
        document = parse_document('-- # Keys\nx = y --> "M-a" not a keybind\n-- #')
        assert document.sections == ()

    def test_crlf_line_endings(self):
        text = '-- # Menu\r\n-- ## Apps\r\n-- Launch\r\n, ("M-p", spawn "x")\r\n-- #\r\n'
        document = parse_document(text)
        assert document.title == "Menu"
        assert document.keybinds() == [Keybind("M-p", "Launch")]

    def test_malformed_declaration_does_not_stop_parsing(self):
        text = (
            "-- # Keys\n"
            "-- ## A\n"
            "-- Broken\n"
            '  , ("M-b", spawn\n'
            "-- ## B\n"
            '-- "M-n" Next\n'
            "-- #"
        )
        document = parse_document(text)
        assert document.sections == (Section("A", ()), Section("B", (Keybind("M-n", "Next"),)))


class TestBoundaryLeniency:
    def test_missing_closing_boundary_keeps_sections(self, caplog):
        text = '-- # Keys\n-- ## A\n-- "a" one\n-- ## B\n-- "b" two\n'
        with caplog.at_level(logging.WARNING, logger="apekey"):
            document = parse_document(text)
        assert [s.title for s in document.sections] == ["A", "B"]
        assert document.keybind_count == 2
        assert "no closing boundary marker" in caplog.text

    def test_closed_keymap_does_not_warn(self, caplog):
        with caplog.at_level(logging.WARNING, logger="apekey"):
            parse_document('-- # Keys\n-- "a" one\n-- #')
        assert caplog.records == []

    def test_missing_opening_boundary_fails(self):
        with pytest.raises(MissingBoundaryError) as exc_info:
            parse_document('-- ## A\n-- "a" one\n')
        assert isinstance(exc_info.value, ParseError)
        assert "opening boundary marker" in str(exc_info.value)

    def test_empty_input_fails(self):
        with pytest.raises(MissingBoundaryError):
            parse_document("")

    def test_parse_summary_is_logged(self, caplog, sample_text):
        with caplog.at_level(logging.INFO, logger="apekey"):
            parse_document(sample_text)
        assert "Parsing done, sections 2, keybinds 6" in caplog.text
