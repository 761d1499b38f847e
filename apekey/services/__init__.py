"""Services layer for apekey: fuzzy matching and keybind search."""

from .fuzzy_matcher import fuzzy_match, split_positions
from .keybind_search import flatten, search

__all__ = ["flatten", "fuzzy_match", "search", "split_positions"]
