"""Data models for lineup."""

from lineup.models.format import (
    Anchor,
    ByteCountSeparator,
    EmptyItemPolicy,
    ExplicitSeparator,
    InFormat,
    ItemSeparator,
    ItemSpan,
    LineSeparator,
    OutFormat,
    default_in_format,
    default_out_format,
)

__all__ = [
    "Anchor",
    "ByteCountSeparator",
    "EmptyItemPolicy",
    "ExplicitSeparator",
    "InFormat",
    "ItemSeparator",
    "ItemSpan",
    "LineSeparator",
    "OutFormat",
    "default_in_format",
    "default_out_format",
]
