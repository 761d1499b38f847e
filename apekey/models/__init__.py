"""Data models for apekey.

- keymap: the parsed keymap (Document, Section, Keybind) and the
  per-search ScoredKeybind records built from it
"""

from apekey.models.keymap import Document, Keybind, MatchScore, ScoredKeybind, Section

__all__ = ["Document", "Keybind", "MatchScore", "ScoredKeybind", "Section"]
