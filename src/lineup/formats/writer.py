"""
Item writer: renders items to a binary stream.

The separator in front of an item is decided after the previous item was
written, so no separator ever follows the last item.
"""

import logging
from enum import Enum
from typing import BinaryIO

from lineup.formats.base import ItemSink
from lineup.models.format import OutFormat
from lineup.utils.text import pad_item

logger = logging.getLogger(__name__)


class PendingSeparator(Enum):
    """Separator to emit before the next item."""

    NONE = 0
    ITEM = 1
    LINE = 2


class ItemWriter(ItemSink[OutFormat]):
    """Write items one at a time as per an output format.

    Example:
        >>> import io
        >>> from lineup import Anchor, ItemSpan, LineSeparator
        >>> fmt = OutFormat(
        ...     span=ItemSpan(4, '_', Anchor.RIGHT),
        ...     item_separator='|',
        ...     line_separator=LineSeparator(2, ';'),
        ... )
        >>> writer = ItemWriter(fmt)
        >>> out = io.BytesIO()
        >>> for item in ['001', '01', '1']:
        ...     writer.write(item, out)
        >>> out.getvalue().decode('utf-8')
        '_001|__01;___1'
    """

    def __init__(self, fmt: OutFormat):
        self._fmt = fmt
        self._pending = PendingSeparator.NONE
        self._items_in_line = 0
        self._items_written = 0

        self._item_separator = fmt.item_separator.encode('utf-8')
        self._line_separator = (
            fmt.line_separator.separator.encode('utf-8')
            if fmt.line_separator is not None
            else b''
        )

        logger.debug(
            f"Writing with span {fmt.span}, item separator {fmt.item_separator!r}, "
            f"line separator {fmt.line_separator}"
        )

    @property
    def format(self) -> OutFormat:
        return self._fmt

    @property
    def items_written(self) -> int:
        """Number of items written so far."""
        return self._items_written

    def write(self, item: str, stream: BinaryIO) -> None:
        """Write one item, preceded by the separator due from the previous call.

        Args:
            item: Item to write
            stream: Binary stream; write errors propagate unchanged
        """
        if self._pending is PendingSeparator.ITEM:
            stream.write(self._item_separator)
        elif self._pending is PendingSeparator.LINE:
            stream.write(self._line_separator)

        stream.write(pad_item(item, self._fmt.span).encode('utf-8'))
        self._items_written += 1

        line_separator = self._fmt.line_separator
        if line_separator is None:
            self._pending = PendingSeparator.ITEM
        elif self._items_in_line + 1 < line_separator.items_per_line:
            self._pending = PendingSeparator.ITEM
            self._items_in_line += 1
        else:
            self._pending = PendingSeparator.LINE
            self._items_in_line = 0
