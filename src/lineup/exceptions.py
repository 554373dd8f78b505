"""Exceptions raised by lineup."""

from typing import Optional


class LineupError(Exception):
    """Base exception for all lineup errors."""

    pass


class FormatError(LineupError, ValueError):
    """Raised when a format or configuration value is invalid.

    This is a construction-time error: it is raised before any input
    is processed.
    """

    pass


class EncodingBoundaryError(LineupError, ValueError):
    """Raised when a byte-count split falls inside a multi-byte character.

    Attributes:
        offset: Absolute byte offset of the offending split point
        count: Configured number of bytes per item
    """

    def __init__(self, offset: int, count: int, message: Optional[str] = None):
        self.offset = offset
        self.count = count
        if message is None:
            message = (
                f"Split point at byte {offset} is not on a UTF-8 character boundary "
                f"({count} bytes per item)"
            )
        super().__init__(message)
