"""Utility functions for lineup."""

from lineup.utils.text import (
    pad_item,
    parse_item_separator,
    parse_line_separator,
    unescape,
)

__all__ = [
    "pad_item",
    "parse_item_separator",
    "parse_line_separator",
    "unescape",
]
