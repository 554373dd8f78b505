"""Configuration management for lineup."""

from dataclasses import dataclass
from typing import Optional

from lineup.exceptions import FormatError
from lineup.models.format import (
    Anchor,
    EmptyItemPolicy,
    InFormat,
    ItemSeparator,
    ItemSpan,
    LineSeparator,
    OutFormat,
)
from lineup.utils.text import parse_item_separator, parse_line_separator, unescape


@dataclass
class Config:
    """Configuration for one lineup run.

    This class holds command-line level settings and resolves them into
    an InFormat and an OutFormat. Separator strings may contain escape
    sequences such as \\n and \\t (see lineup.utils.text.unescape).
    """

    # Input format
    in_separator: str = ","  # "N" = N bytes per item, anything else = separator string
    in_line_n: int = 0  # 0 = no line grouping
    in_line_separator: str = "\n"
    in_empty: str = "stop"  # stop, skip or keep

    # Output format
    out_span: int = 0  # 0 = no padding
    out_pad: str = " "
    out_anchor: str = "left"
    out_separator: str = " "
    out_line_n: int = 0  # 0 = all items on a single line
    out_line_separator: str = "\n"

    # Encoding of the raw input
    encoding: str = "utf-8"

    # Resolved values, set in __post_init__
    item_separator: Optional[ItemSeparator] = None
    span: Optional[ItemSpan] = None

    def __post_init__(self):
        """Parse and validate configuration."""
        self.item_separator = parse_item_separator(unescape(self.in_separator))
        self.span = self._parse_span()

        # Validate the rest eagerly so errors surface before any input is read
        self.in_format()
        self.out_format()

    def _parse_span(self) -> Optional[ItemSpan]:
        """Parse span settings; a span of 0 disables padding."""
        if self.out_span < 0:
            raise FormatError(f"Span must be >= 0, got {self.out_span}")
        if self.out_span == 0:
            return None

        pad = unescape(self.out_pad)
        try:
            anchor = Anchor(self.out_anchor.lower())
        except ValueError:
            raise FormatError(f"Invalid anchor: {self.out_anchor}")
        return ItemSpan(self.out_span, pad, anchor)

    def in_line(self) -> Optional[LineSeparator]:
        return parse_line_separator(self.in_line_n, unescape(self.in_line_separator))

    def out_line(self) -> Optional[LineSeparator]:
        return parse_line_separator(self.out_line_n, unescape(self.out_line_separator))

    def in_format(self) -> InFormat:
        """Build the input format."""
        try:
            policy = EmptyItemPolicy(self.in_empty.lower())
        except ValueError:
            raise FormatError(f"Invalid empty item policy: {self.in_empty}")
        return InFormat(
            item_separator=self.item_separator,
            line_separator=self.in_line(),
            empty_items=policy,
        )

    def out_format(self) -> OutFormat:
        """Build the output format."""
        return OutFormat(
            span=self.span,
            item_separator=unescape(self.out_separator),
            line_separator=self.out_line(),
        )
