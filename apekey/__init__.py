"""
apekey - searchable cheat sheet for the keybinds annotated in an xmonad config
"""

__version__ = "0.1.0"
