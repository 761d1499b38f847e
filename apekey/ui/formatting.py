"""Rich renderables for the keymap view.

Kept free of widget code so the layout can be tested without running the app.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass

from rich.console import Group, RenderableType
from rich.style import Style, StyleType
from rich.table import Table
from rich.text import Text
from textual.color import Color, ColorParseError

from apekey.models.keymap import Document, Keybind, ScoredKeybind
from apekey.services.fuzzy_matcher import split_positions


@dataclass(frozen=True)
class KeymapPalette:
    """Styles for each part of the keymap."""

    title: StyleType = "bold"
    section: StyleType = "bold"
    keys: StyleType = "bold red"
    description: StyleType = ""
    highlight: StyleType = "bold underline yellow"
    error: StyleType = "bold red"

    @classmethod
    def from_css_variables(cls, variables: Mapping[str, str]) -> KeymapPalette:
        """Build a palette from the app's theme variables."""
        foreground = variables.get("foreground")
        return cls(
            title=_style(variables.get("apekey-title", foreground), bold=True),
            section=_style(variables.get("apekey-section", foreground), bold=True),
            keys=_style(variables.get("primary"), bold=True),
            description=_style(foreground),
            highlight=_style(variables.get("accent"), bold=True, underline=True),
            error=_style(variables.get("error"), bold=True),
        )


def _style(value: str | None, **attributes: bool) -> Style:
    """Rich style for a theme color; alpha is dropped, unparsable colors are left unset."""
    color = None
    if value:
        try:
            color = Color.parse(value).rich_color
        except ColorParseError:
            color = None
    return Style(color=color, **attributes)


def highlight(text: str, positions: Iterable[int], base: StyleType, style: StyleType) -> Text:
    """Return ``text`` styled with ``base`` and ``style`` on the matched positions."""
    rendered = Text(text, style=base)
    for position in positions:
        if 0 <= position < len(text):
            rendered.stylize(style, position, position + 1)
    return rendered


def _keybind_table() -> Table:
    table = Table.grid(padding=(0, 3))
    table.add_column("keys", no_wrap=True)
    table.add_column("description", ratio=1)
    return table


def render_keybinds(keybinds: Sequence[Keybind], palette: KeymapPalette) -> Table:
    table = _keybind_table()
    for keybind in keybinds:
        table.add_row(
            Text(keybind.keys, style=palette.keys),
            Text(keybind.description, style=palette.description),
        )
    return table


def render_document(document: Document, palette: KeymapPalette) -> RenderableType:
    """The full keymap, grouped by section."""
    parts: list[RenderableType] = []
    for section in document.sections:
        if section.title:
            parts.append(Text(section.title, style=palette.section))
        parts.append(render_keybinds(section.keybinds, palette))
        parts.append(Text(""))
    if not parts:
        return Text("No keybinds found", style="dim")
    return Group(*parts)


def render_results(results: Sequence[ScoredKeybind], palette: KeymapPalette) -> RenderableType:
    """Search results, best match first, matched characters highlighted."""
    if not results:
        return Text("No matching keybinds", style="dim")
    table = _keybind_table()
    for result in results:
        positions = result.score.positions if result.score else ()
        in_keys, in_description = split_positions(positions, result.keys)
        table.add_row(
            highlight(result.keys, in_keys, palette.keys, palette.highlight),
            highlight(result.description, in_description, palette.description, palette.highlight),
        )
    return table
