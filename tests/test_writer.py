"""
Unit tests for ItemWriter.

Run with: pytest tests/test_writer.py -v
"""

import io

import pytest

from lineup.formats import ItemWriter
from lineup.models import Anchor, ItemSpan, LineSeparator, OutFormat


def render(items, fmt):
    writer = ItemWriter(fmt)
    out = io.BytesIO()
    for item in items:
        writer.write(item, out)
    return out.getvalue().decode("utf-8")


class FailingStream:
    """Binary stream that fails after a number of writes."""

    def __init__(self, fail_after):
        self.fail_after = fail_after
        self.chunks = []

    def write(self, data):
        if len(self.chunks) >= self.fail_after:
            raise OSError("disk full")
        self.chunks.append(data)
        return len(data)


class TestSeparators:
    """Test separators between items."""

    def test_default_format(self):
        assert render(["a", "b", "c"], OutFormat()) == "a b c"

    def test_single_item(self):
        """Test that no separator is written around a single item."""
        assert render(["a"], OutFormat(item_separator="|")) == "a"

    def test_no_items(self):
        assert render([], OutFormat()) == ""

    def test_empty_item_separator(self):
        assert render(["a", "b"], OutFormat(item_separator="")) == "ab"

    def test_line_grouping(self):
        fmt = OutFormat(item_separator=",", line_separator=LineSeparator(2, "\n"))
        assert render(["1", "2", "3", "4", "5"], fmt) == "1,2\n3,4\n5"

    def test_no_trailing_line_separator(self):
        """Test that a full last line is not followed by the line separator."""
        fmt = OutFormat(item_separator=",", line_separator=LineSeparator(2, "\n"))
        assert render(["1", "2", "3", "4"], fmt) == "1,2\n3,4"

    def test_one_item_per_line(self):
        fmt = OutFormat(line_separator=LineSeparator(1, "\n"))
        assert render(["a", "b", "c"], fmt) == "a\nb\nc"

    def test_empty_items(self):
        assert render(["", "a", ""], OutFormat(item_separator="|")) == "|a|"


class TestSpan:
    """Test padding and anchoring."""

    def test_right_anchor_with_lines(self):
        fmt = OutFormat(
            span=ItemSpan(4, "_", Anchor.RIGHT),
            item_separator="|",
            line_separator=LineSeparator(2, ";"),
        )
        assert render(["001", "01", "1"], fmt) == "_001|__01;___1"

    def test_multibyte(self):
        """Test that padding counts characters, not bytes."""
        fmt = OutFormat(
            span=ItemSpan(4, "👉", Anchor.RIGHT),
            item_separator="🖖",
            line_separator=LineSeparator(2, "🔩\n"),
        )
        expected = "👉👉😊😊🖖👉👉👉👶🔩\n👉💼💼💼"
        assert render(["😊😊", "👶", "💼💼💼"], fmt) == expected

    def test_left_anchor(self):
        fmt = OutFormat(span=ItemSpan(3, "."), item_separator="|")
        assert render(["a", "bb", "ccc"], fmt) == "a..|bb.|ccc"

    def test_no_truncation(self):
        """Test that items wider than the span are written unchanged."""
        for anchor in Anchor:
            fmt = OutFormat(span=ItemSpan(2, "_", anchor))
            assert render(["abcd"], fmt) == "abcd"

    def test_empty_item_padded(self):
        fmt = OutFormat(span=ItemSpan(2, "0", Anchor.RIGHT))
        assert render([""], fmt) == "00"

    def test_padded_width(self):
        """Test that padded items are exactly the span width."""
        items = ["", "a", "bb", "ccc", "éé", "🍺"]
        for anchor in Anchor:
            fmt = OutFormat(span=ItemSpan(3, "-", anchor), item_separator="|")
            rendered = render(items, fmt).split("|")
            assert [len(item) for item in rendered] == [3] * len(items)


class TestState:
    """Test writer state and error propagation."""

    def test_items_written(self):
        writer = ItemWriter(OutFormat())
        out = io.BytesIO()
        writer.write("a", out)
        writer.write("b", out)
        assert writer.items_written == 2

    def test_writes_utf8_bytes(self):
        writer = ItemWriter(OutFormat())
        out = io.BytesIO()
        writer.write("é", out)
        assert out.getvalue() == b"\xc3\xa9"

    def test_stream_error_propagates(self):
        writer = ItemWriter(OutFormat())
        stream = FailingStream(fail_after=1)
        writer.write("a", stream)
        with pytest.raises(OSError, match="disk full"):
            writer.write("b", stream)
        assert stream.chunks == [b"a"]
