"""Text parsing and padding utilities."""

import re
from typing import Optional

from lineup.exceptions import FormatError
from lineup.models.format import (
    ByteCountSeparator,
    ExplicitSeparator,
    ItemSeparator,
    ItemSpan,
    LineSeparator,
    Anchor,
)

_ESCAPES = {
    'n': '\n',
    't': '\t',
    'r': '\r',
    '0': '\0',
    '\\': '\\',
}

_ESCAPE_RE = re.compile(r'\\(.)', re.DOTALL)


def unescape(text: str) -> str:
    r"""Replace backslash escape sequences typed on a command line.

    Supported sequences are \n, \t, \r, \0 and \\. Any other backslash
    sequence is kept as is.

    Args:
        text: Text possibly containing escape sequences

    Returns:
        Text with escape sequences replaced

    Examples:
        >>> unescape(r'a\tb')
        'a\tb'
        >>> unescape(r'C:\dir')
        'C:\\dir'
    """
    return _ESCAPE_RE.sub(lambda m: _ESCAPES.get(m.group(1), m.group(0)), text)


def parse_item_separator(arg: str) -> ItemSeparator:
    """Parse an input item separator argument.

    A string of ASCII digits is a byte count per item, anything else is an
    explicit separator string. Explicit separators therefore cannot consist
    of digits only.

    Args:
        arg: Separator argument (e.g., '4', ',', 'SEP')

    Returns:
        ByteCountSeparator or ExplicitSeparator

    Raises:
        FormatError: If the byte count is 0 or the separator is empty
    """
    if arg and arg.isascii() and arg.isdigit():
        count = int(arg)
        if count <= 0:
            raise FormatError("Number of bytes per item must be > 0")
        return ByteCountSeparator(count)
    return ExplicitSeparator(arg)


def parse_line_separator(items_per_line: int, separator: str) -> Optional[LineSeparator]:
    """Build a line separator; 0 items per line means no line grouping."""
    if items_per_line < 0:
        raise FormatError(f"Items per line must be >= 0, got {items_per_line}")
    if items_per_line == 0:
        return None
    return LineSeparator(items_per_line, separator)


def pad_item(item: str, span: Optional[ItemSpan]) -> str:
    """Pad an item to the span width.

    Length is counted in Unicode code points. Items already as wide as the
    span, or wider, are returned unchanged; they are never truncated.

    Args:
        item: Item text
        span: Span to apply, or None for no padding

    Returns:
        Padded item
    """
    if span is None:
        return item

    length = len(item)
    if length >= span.width:
        return item

    pad = span.pad * (span.width - length)
    if span.anchor is Anchor.LEFT:
        return item + pad
    return pad + item
