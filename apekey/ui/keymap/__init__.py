"""Keymap view: the presenter holding the parsed keymap and the screen showing it."""

from .keymap_presenter import AppState, KeymapPresenter, KeymapStateVM
from .keymap_screen import KeymapScreen

__all__ = ["AppState", "KeymapPresenter", "KeymapScreen", "KeymapStateVM"]
