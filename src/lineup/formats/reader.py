"""
Item reader: cuts input text into items.

The reader walks the UTF-8 encoding of the input with a byte cursor.
Searching for an explicit separator in UTF-8 bytes always lands on a
character boundary, so only byte-count splits need a boundary check.
"""

import logging
from typing import Optional

from lineup.exceptions import EncodingBoundaryError
from lineup.formats.base import ItemSource
from lineup.models.format import (
    ByteCountSeparator,
    EmptyItemPolicy,
    ExplicitSeparator,
    InFormat,
    ItemSeparator,
)

logger = logging.getLogger(__name__)


class ItemReader(ItemSource[InFormat]):
    """Lazy iterator over the items of an input text.

    Example:
        >>> from lineup import ExplicitSeparator
        >>> fmt = InFormat(item_separator=ExplicitSeparator("SEP"))
        >>> list(ItemReader("AAASEPBBSEPCSEPDDD", fmt))
        ['AAA', 'BB', 'C', 'DDD']
    """

    def __init__(self, text: str, fmt: InFormat):
        self._fmt = fmt
        self._data = text.encode('utf-8')
        self._pos = 0
        self._items_in_line = 0
        self._exhausted = False

        logger.debug(
            f"Reading {len(self._data)} bytes, item separator {fmt.item_separator}, "
            f"line separator {fmt.line_separator}, empty items {fmt.empty_items.value}"
        )

    @property
    def format(self) -> InFormat:
        return self._fmt

    @property
    def consumed(self) -> int:
        """Number of input bytes consumed so far."""
        return self._pos

    def __next__(self) -> str:
        while not self._exhausted:
            item = self._next_item(self._next_separator())
            if item is None:
                continue
            return item
        raise StopIteration

    def _next_separator(self) -> ItemSeparator:
        """Pick the separator for the next item and advance the line counter."""
        line_separator = self._fmt.line_separator
        if line_separator is None:
            return self._fmt.item_separator

        if self._items_in_line == line_separator.items_per_line - 1:
            self._items_in_line = 0
            return ExplicitSeparator(line_separator.separator)

        self._items_in_line += 1
        return self._fmt.item_separator

    def _next_item(self, separator: ItemSeparator) -> Optional[str]:
        """Cut one item off the remaining input.

        Returns:
            The item, or None when an empty item was skipped. Sets
            _exhausted when no further items can be produced.
        """
        if self._pos >= len(self._data):
            self._exhausted = True
            return None

        if isinstance(separator, ByteCountSeparator):
            return self._cut_bytes(separator.count)
        return self._cut_explicit(separator.delimiter)

    def _cut_explicit(self, delimiter: str) -> Optional[str]:
        needle = delimiter.encode('utf-8')
        start = self._pos
        index = self._data.find(needle, start)

        if index < 0:
            # no more separators: the remainder is the last item
            self._pos = len(self._data)
            return self._data[start:].decode('utf-8')

        self._pos = index + len(needle)
        if index > start:
            return self._data[start:index].decode('utf-8')

        policy = self._fmt.empty_items
        if policy is EmptyItemPolicy.KEEP:
            return ""
        if policy is EmptyItemPolicy.STOP:
            logger.debug(f"Empty item at byte {start}, stopping")
            self._exhausted = True
        return None

    def _cut_bytes(self, count: int) -> Optional[str]:
        start = self._pos
        end = start + count

        if end > len(self._data):
            logger.debug(f"Discarding {len(self._data) - start} trailing bytes")
            self._pos = len(self._data)
            self._exhausted = True
            return None

        try:
            item = self._data[start:end].decode('utf-8')
        except UnicodeDecodeError:
            self._exhausted = True
            logger.error(f"Byte count {count} splits a character at byte {end}")
            raise EncodingBoundaryError(end, count)

        self._pos = end
        return item
