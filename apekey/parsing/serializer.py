"""Render a ``Document`` back into annotated source.

Output re-parses into an equal ``Document`` as long as titles, keys and
descriptions hold no quotes or line breaks, and descriptions are non-empty
and do not start with ``#`` or ``!``.
"""

from apekey.models.keymap import Document, Keybind, Section

from .lexer import BOUNDARY_MARKER, COMMENT_SEQUENCE, QUOTE, SECTION_MARKER


def _tag_line(marker: str, title: str | None) -> str:
    if title:
        return f"{COMMENT_SEQUENCE} {marker} {title}"
    return f"{COMMENT_SEQUENCE} {marker}"


def dump_keybind(keybind: Keybind, inline: bool = False) -> list[str]:
    if inline:
        return [f"{COMMENT_SEQUENCE} {QUOTE}{keybind.keys}{QUOTE} {keybind.description}"]
    return [
        f"  {COMMENT_SEQUENCE} {keybind.description}",
        f"  , ({QUOTE}{keybind.keys}{QUOTE}, return ())",
    ]


def dump_section(section: Section, inline: bool = False) -> list[str]:
    lines = [_tag_line(SECTION_MARKER, section.title)]
    for keybind in section.keybinds:
        lines.extend(dump_keybind(keybind, inline=inline))
    return lines


def dump_document(document: Document, inline: bool = False) -> str:
    """Serialize ``document``, in the two-line form unless ``inline`` is set."""
    lines = [_tag_line(BOUNDARY_MARKER, document.title)]
    for section in document.sections:
        lines.extend(dump_section(section, inline=inline))
        lines.append("")
    lines.append(_tag_line(BOUNDARY_MARKER, None))
    return "\n".join(lines) + "\n"
