"""Argument parsing subsystem for weighted-picker.

Turns raw command-line words into tokens, then into ``(name, quality)``
entries ready for a weighted draw.
"""

from weighted_picker.parsing.entries import build_entries, parse_entries
from weighted_picker.parsing.tokenizer import parse_quality, tokenize
from weighted_picker.parsing.types import DEFAULT_QUALITY, Entry, Name, Quality, Token

__all__ = [
    "DEFAULT_QUALITY",
    "Entry",
    "Name",
    "Quality",
    "Token",
    "build_entries",
    "parse_entries",
    "parse_quality",
    "tokenize",
]
