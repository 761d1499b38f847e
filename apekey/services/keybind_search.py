"""
Keybind search over a parsed keymap.

Every call works on the immutable flattened keybind list it is given and
keeps no state between calls.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from apekey.models.keymap import Document, Keybind, ScoredKeybind

from .fuzzy_matcher import fuzzy_match

logger = logging.getLogger(__name__)


def flatten(document: Document) -> list[Keybind]:
    """Concatenate the keybinds of every section, in document order."""
    return document.keybinds()


def search(keybinds: Sequence[Keybind], pattern: str) -> list[ScoredKeybind]:
    """
    Filter and rank keybinds against ``pattern``.

    An empty pattern returns every keybind unscored, in original order.
    Otherwise keybinds whose ``"{keys} {description}"`` does not fuzzy-match
    are dropped and the rest are sorted by descending rank; equal ranks keep
    their document order.
    """
    if not pattern:
        return [ScoredKeybind.from_keybind(k) for k in keybinds]

    matches: list[ScoredKeybind] = []
    for keybind in keybinds:
        score = fuzzy_match(pattern, str(keybind))
        if score is not None:
            matches.append(ScoredKeybind.from_keybind(keybind, score))

    # sorted() is stable: ties stay in document order
    ranked = sorted(matches, key=lambda m: -m.score.rank)
    logger.debug(f"Search {pattern!r}: {len(ranked)} of {len(keybinds)} keybinds match")
    return ranked
