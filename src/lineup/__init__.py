"""
lineup - Re-tokenize delimited text items and lay them out again.

This package cuts text into items, either on an explicit separator or on a
fixed byte count, and writes the items back with a different separator,
optional fixed-width padding and optional grouping of N items per line.
"""

__version__ = "0.1.0"
__license__ = "MIT"

from lineup.config import Config
from lineup.core import read, reformat, write
from lineup.exceptions import EncodingBoundaryError, FormatError, LineupError
from lineup.formats import ItemReader, ItemWriter
from lineup.models import (
    Anchor,
    ByteCountSeparator,
    EmptyItemPolicy,
    ExplicitSeparator,
    InFormat,
    ItemSpan,
    LineSeparator,
    OutFormat,
    default_in_format,
    default_out_format,
)

__all__ = [
    "Anchor",
    "ByteCountSeparator",
    "Config",
    "EmptyItemPolicy",
    "EncodingBoundaryError",
    "ExplicitSeparator",
    "FormatError",
    "InFormat",
    "ItemReader",
    "ItemSpan",
    "ItemWriter",
    "LineSeparator",
    "LineupError",
    "OutFormat",
    "default_in_format",
    "default_out_format",
    "read",
    "reformat",
    "write",
    "__version__",
]
