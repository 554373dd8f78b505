"""Top-level read and write functions.

This is the main entry point for library usage.
"""

import io
import logging
from typing import BinaryIO, Iterable, Optional

from lineup.formats.reader import ItemReader
from lineup.formats.writer import ItemWriter
from lineup.models.format import InFormat, OutFormat, default_in_format, default_out_format

logger = logging.getLogger(__name__)


def read(text: str, fmt: Optional[InFormat] = None) -> ItemReader:
    """Get an iterator over the items of a text.

    Args:
        text: Complete input text
        fmt: Input format (default: comma separated)

    Returns:
        Lazy, one-shot iterator of items

    Example:
        >>> from lineup import read, InFormat, ByteCountSeparator
        >>> list(read("aabbccdd", InFormat(item_separator=ByteCountSeparator(2))))
        ['aa', 'bb', 'cc', 'dd']
    """
    if fmt is None:
        fmt = default_in_format()
    return ItemReader(text, fmt)


def write(
    items: Iterable[str],
    stream: BinaryIO,
    fmt: Optional[OutFormat] = None,
) -> int:
    """Write all items to a binary stream as per an output format.

    Stops at the first error raised by the items iterable or the stream
    and propagates it.

    Args:
        items: Items to write
        stream: Destination accepting bytes
        fmt: Output format (default: space separated, no padding)

    Returns:
        Number of items written
    """
    if fmt is None:
        fmt = default_out_format()

    writer = ItemWriter(fmt)
    for item in items:
        writer.write(item, stream)

    logger.info(f"Wrote {writer.items_written} items")
    return writer.items_written


def reformat(
    text: str,
    in_fmt: Optional[InFormat] = None,
    out_fmt: Optional[OutFormat] = None,
) -> str:
    """Re-tokenize a text and return it in the output format.

    Example:
        >>> reformat("a,b,c")
        'a b c'
    """
    buffer = io.BytesIO()
    write(read(text, in_fmt), buffer, out_fmt)
    return buffer.getvalue().decode('utf-8')
