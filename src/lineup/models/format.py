"""
Format models for reading and writing items.

An InFormat describes how raw input text is cut into items; an OutFormat
describes how items are rendered. Both are immutable and validated on
construction, so a reader or writer never sees an invalid format.

Use default_in_format() and default_out_format() for the defaults.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from lineup.exceptions import FormatError


class Anchor(str, Enum):
    """Side an item is anchored to when padding is needed."""

    LEFT = "left"    # item first, pad after
    RIGHT = "right"  # pad first, item after


class EmptyItemPolicy(str, Enum):
    """What the reader does with an empty item between two separators.

    STOP ends the iteration at the first empty item, which is how lineup
    has always behaved (splitting "a,,b" on "," yields only "a").
    """

    STOP = "stop"
    SKIP = "skip"
    KEEP = "keep"


@dataclass(frozen=True)
class ExplicitSeparator:
    """Items are separated by a literal, non-empty delimiter."""

    delimiter: str

    def __post_init__(self):
        if not isinstance(self.delimiter, str):
            raise FormatError(f"Delimiter must be a string, got {type(self.delimiter).__name__}")
        if not self.delimiter:
            raise FormatError("Delimiter must not be empty")

    def __str__(self) -> str:
        return repr(self.delimiter)


@dataclass(frozen=True)
class ByteCountSeparator:
    """Items have a fixed size in bytes and no explicit separator.

    Every split point must fall on a UTF-8 character boundary.
    """

    count: int

    def __post_init__(self):
        if isinstance(self.count, bool) or not isinstance(self.count, int):
            raise FormatError(f"Byte count must be an integer, got {self.count!r}")
        if self.count <= 0:
            raise FormatError(f"Number of bytes per item must be > 0, got {self.count}")

    def __str__(self) -> str:
        return f"{self.count} bytes"


ItemSeparator = Union[ExplicitSeparator, ByteCountSeparator]


@dataclass(frozen=True)
class LineSeparator:
    """Every items_per_line-th boundary uses separator instead of the item separator."""

    items_per_line: int
    separator: str

    def __post_init__(self):
        if isinstance(self.items_per_line, bool) or not isinstance(self.items_per_line, int):
            raise FormatError(f"Items per line must be an integer, got {self.items_per_line!r}")
        if self.items_per_line <= 0:
            raise FormatError(f"Items per line must be > 0, got {self.items_per_line}")
        if not isinstance(self.separator, str):
            raise FormatError(f"Line separator must be a string, got {type(self.separator).__name__}")


@dataclass(frozen=True)
class ItemSpan:
    """Fixed output width for items.

    Attributes:
        width: Characters an item should occupy; shorter items are padded
        pad: Single pad character
        anchor: Keep the item on the left or on the right of the field
    """

    width: int
    pad: str = " "
    anchor: Anchor = Anchor.LEFT

    def __post_init__(self):
        if isinstance(self.width, bool) or not isinstance(self.width, int):
            raise FormatError(f"Span width must be an integer, got {self.width!r}")
        if self.width <= 0:
            raise FormatError(f"Span width must be > 0, got {self.width}")
        if not isinstance(self.pad, str) or len(self.pad) != 1:
            raise FormatError(f"Pad must be a single character, got {self.pad!r}")
        try:
            anchor = Anchor(self.anchor)
        except ValueError:
            raise FormatError(f"Invalid anchor: {self.anchor!r}")
        # frozen dataclass: normalize "left"/"right" strings to the enum
        object.__setattr__(self, 'anchor', anchor)


@dataclass(frozen=True)
class InFormat:
    """Input format: how raw text is cut into items."""

    item_separator: ItemSeparator = ExplicitSeparator(",")
    line_separator: Optional[LineSeparator] = None
    empty_items: EmptyItemPolicy = EmptyItemPolicy.STOP

    def __post_init__(self):
        if not isinstance(self.item_separator, (ExplicitSeparator, ByteCountSeparator)):
            raise FormatError(f"Invalid item separator: {self.item_separator!r}")
        if self.line_separator is not None and not self.line_separator.separator:
            raise FormatError("Input line separator must not be empty")
        try:
            policy = EmptyItemPolicy(self.empty_items)
        except ValueError:
            raise FormatError(f"Invalid empty item policy: {self.empty_items!r}")
        object.__setattr__(self, 'empty_items', policy)


@dataclass(frozen=True)
class OutFormat:
    """Output format: how items are rendered.

    Attributes:
        span: Optional fixed width (see ItemSpan); None disables padding
        item_separator: Separator for items within a line
        line_separator: Optional line grouping; None puts all items on one line
    """

    span: Optional[ItemSpan] = None
    item_separator: str = " "
    line_separator: Optional[LineSeparator] = None

    def __post_init__(self):
        if not isinstance(self.item_separator, str):
            raise FormatError(
                f"Item separator must be a string, got {type(self.item_separator).__name__}"
            )


def default_in_format() -> InFormat:
    """Return the default input format: comma separated, no line grouping."""
    return InFormat(item_separator=ExplicitSeparator(","))


def default_out_format() -> OutFormat:
    """Return the default output format: space separated, no padding, single line."""
    return OutFormat(span=None, item_separator=" ", line_separator=None)
