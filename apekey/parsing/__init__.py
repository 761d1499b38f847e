"""Keymap annotation parsing.

- cursor: immutable position-carrying cursor used by every rule
- lexer: comment, boundary, section-tag and ignore recognizers
- keybinds: the two-line and inline keybind forms
- assembler: section and document assembly, ``parse_document`` entry point
- source: reading the config file
- serializer: rendering a document back to annotated source
"""

from .assembler import parse_document
from .serializer import dump_document
from .source import read_config

__all__ = ["dump_document", "parse_document", "read_config"]
