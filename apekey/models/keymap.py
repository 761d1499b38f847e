"""Keymap data model.

A ``Document`` is built once per parse and never mutated afterwards: all
containers are tuples and every dataclass is frozen. Re-parsing replaces the
document wholesale.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple


class MatchScore(NamedTuple):
    """Fuzzy match result: a rank and the matched character positions."""

    rank: int
    positions: tuple[int, ...]


@dataclass(frozen=True)
class Keybind:
    """A (keys, description) pair extracted from an annotated comment."""

    keys: str
    description: str

    def __str__(self) -> str:
        return f"{self.keys} {self.description}"

    def to_dict(self) -> dict[str, str]:
        return {"keys": self.keys, "description": self.description}


@dataclass(frozen=True)
class Section:
    """A named group of keybinds, in appearance order."""

    title: str | None = None
    keybinds: tuple[Keybind, ...] = ()

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "keybinds": [k.to_dict() for k in self.keybinds],
        }


@dataclass(frozen=True)
class Document:
    """The parsed keymap: an optional title and its ordered sections."""

    title: str | None = None
    sections: tuple[Section, ...] = ()

    @property
    def section_count(self) -> int:
        return len(self.sections)

    @property
    def keybind_count(self) -> int:
        return sum(len(s.keybinds) for s in self.sections)

    def keybinds(self) -> list[Keybind]:
        """All keybinds of all sections, in document order."""
        return [k for section in self.sections for k in section.keybinds]

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "sections": [s.to_dict() for s in self.sections],
        }


@dataclass(frozen=True)
class ScoredKeybind:
    """A keybind as shown in search results.

    ``score`` is None for the unfiltered (empty query) listing.
    """

    keys: str
    description: str
    score: MatchScore | None = None

    @classmethod
    def from_keybind(cls, keybind: Keybind, score: MatchScore | None = None) -> ScoredKeybind:
        return cls(keys=keybind.keys, description=keybind.description, score=score)

    def __str__(self) -> str:
        return f"{self.keys} {self.description}"

    def to_dict(self) -> dict:
        data: dict = {"keys": self.keys, "description": self.description}
        if self.score is not None:
            data["rank"] = self.score.rank
            data["positions"] = list(self.score.positions)
        return data
