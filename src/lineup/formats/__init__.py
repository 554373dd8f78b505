"""
Item readers and writers.

- ItemReader cuts input text into items as per an InFormat
- ItemWriter renders items to a binary stream as per an OutFormat

Usage:
    from lineup.formats import ItemReader, ItemWriter

    reader = ItemReader(text, in_format)
    writer = ItemWriter(out_format)
    for item in reader:
        writer.write(item, stream)
"""

from lineup.formats.base import ItemSink, ItemSource
from lineup.formats.reader import ItemReader
from lineup.formats.writer import ItemWriter

__all__ = [
    "ItemSink",
    "ItemSource",
    "ItemReader",
    "ItemWriter",
]
