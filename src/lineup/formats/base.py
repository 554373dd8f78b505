"""
Abstract base classes for item readers and writers.

This module defines the interfaces the reading and writing sides implement.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import BinaryIO, Generic, TypeVar


# Type variable for the format a reader or writer is parametrized by
F = TypeVar('F')


class ItemSource(Iterator, Generic[F]):
    """Abstract base class for item sources.

    A source is a one-shot iterator: once exhausted it stays exhausted.

    Type Parameters:
        F: Format type (e.g., InFormat)
    """

    @property
    @abstractmethod
    def format(self) -> F:
        """Return the format this source was created with."""
        pass

    def __iter__(self) -> "ItemSource[F]":
        return self

    @abstractmethod
    def __next__(self) -> str:
        """Return the next item.

        Raises:
            StopIteration: When no more items are available
        """
        pass


class ItemSink(ABC, Generic[F]):
    """Abstract base class for item sinks.

    Sinks are stateful: write() must be called once per item, in order.

    Type Parameters:
        F: Format type (e.g., OutFormat)
    """

    @property
    @abstractmethod
    def format(self) -> F:
        """Return the format this sink was created with."""
        pass

    @abstractmethod
    def write(self, item: str, stream: BinaryIO) -> None:
        """Write one item to a binary stream.

        Args:
            item: Item to write
            stream: Destination accepting bytes

        Raises:
            OSError: If the stream cannot be written
        """
        pass
