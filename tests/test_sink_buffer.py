"""Tests for BufferSink, the captured output buffer.

Tests verify:
- UTF-8 encoding of text writes, verbatim byte writes
- size <= capacity at every point
- Pre-sizing from a size hint and doubling growth
- take() truncation and reset
- Exclusivity through the sink protocol
"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from printkit.sinks import BufferSink, Sink, exclusive


class TestBufferSinkWrites:
    """Test basic write behavior."""

    def test_write_text_returns_byte_count(self) -> None:
        """Text is encoded as UTF-8 and the byte count returned."""
        buf = BufferSink()
        assert buf.write("abc") == 3
        assert buf.write("é") == 2
        assert len(buf) == 5

    def test_write_bytes_verbatim(self) -> None:
        """Bytes are stored as given."""
        buf = BufferSink()
        buf.write(b"\x00\xff")
        assert buf.take_bytes() == b"\x00\xff"

    def test_write_empty_is_noop(self) -> None:
        """Empty writes allocate nothing."""
        buf = BufferSink()
        assert buf.write("") == 0
        assert buf.capacity == 0

    def test_writes_keep_order(self) -> None:
        """Mixed text and byte writes appear in call order."""
        buf = BufferSink()
        buf.write("a")
        buf.write(b"b")
        buf.write("c")
        assert buf.getvalue() == "abc"

    def test_is_a_sink(self) -> None:
        """BufferSink satisfies the Sink protocol."""
        assert isinstance(BufferSink(), Sink)


class TestBufferSinkCapacity:
    """Test size hints, growth and the size <= capacity invariant."""

    def test_sizehint_preallocates(self) -> None:
        """The initial capacity equals the size hint."""
        buf = BufferSink(sizehint=32)
        assert buf.capacity == 32
        assert buf.size == 0

    def test_negative_sizehint_rejected(self) -> None:
        """Negative size hints raise ValueError."""
        with pytest.raises(ValueError, match="non-negative"):
            BufferSink(sizehint=-1)

    def test_growth_doubles(self) -> None:
        """Overflowing writes at least double the capacity."""
        buf = BufferSink(sizehint=16)
        buf.write("x" * 17)
        assert buf.capacity >= 32

    def test_minimum_growth_step(self) -> None:
        """Growth from empty allocates at least the minimum step."""
        buf = BufferSink()
        buf.write("x")
        assert buf.capacity >= 16

    @given(
        hint=st.integers(min_value=0, max_value=64),
        chunks=st.lists(st.text(max_size=20), max_size=20),
    )
    def test_size_never_exceeds_capacity(self, hint: int, chunks: list[str]) -> None:
        """size <= capacity after every write."""
        buf = BufferSink(sizehint=hint)
        for chunk in chunks:
            buf.write(chunk)
            assert buf.size <= buf.capacity
        assert buf.take() == "".join(chunks)


class TestBufferSinkTake:
    """Test materialization."""

    def test_take_returns_contents_and_resets(self) -> None:
        """take() returns everything written and leaves the buffer empty."""
        buf = BufferSink(sizehint=100)
        buf.write("hello")
        assert buf.take() == "hello"
        assert len(buf) == 0
        assert buf.capacity == 0

    def test_take_truncates_to_logical_size(self) -> None:
        """Unused pre-allocated capacity never leaks into the result."""
        buf = BufferSink(sizehint=64)
        buf.write("ab")
        assert buf.take_bytes() == b"ab"

    def test_take_twice(self) -> None:
        """A second take() returns only what was written since the first."""
        buf = BufferSink()
        buf.write("one")
        buf.take()
        buf.write("two")
        assert buf.take() == "two"

    def test_getvalue_does_not_consume(self) -> None:
        """getvalue() leaves the contents in place."""
        buf = BufferSink()
        buf.write("keep")
        assert buf.getvalue() == "keep"
        assert buf.take() == "keep"

    def test_clear_keeps_allocation(self) -> None:
        """clear() resets the size but not the capacity."""
        buf = BufferSink(sizehint=8)
        buf.write("data")
        buf.clear()
        assert len(buf) == 0
        assert buf.capacity == 8

    def test_take_invalid_utf8_raises(self) -> None:
        """Raw bytes that are not UTF-8 fail on text materialization."""
        buf = BufferSink()
        buf.write(b"\xff")
        with pytest.raises(UnicodeDecodeError):
            buf.take()

    def test_repr(self) -> None:
        """repr shows size and capacity."""
        buf = BufferSink(sizehint=4)
        buf.write("ab")
        assert repr(buf) == "BufferSink(size=2, capacity=4)"


class TestBufferSinkExclusive:
    """Test exclusivity through the sink protocol."""

    def test_exclusive_releases_on_exit(self) -> None:
        """The lock is free after the with-block."""
        buf = BufferSink()
        with exclusive(buf) as out:
            out.write("x")
        buf.acquire_exclusive(timeout=0)
        buf.release_exclusive()

    def test_exclusive_releases_on_error(self) -> None:
        """The lock is released when the block raises."""
        buf = BufferSink()
        with pytest.raises(KeyError), exclusive(buf):
            raise KeyError("boom")
        buf.acquire_exclusive(timeout=0)
        buf.release_exclusive()

    def test_nested_acquire_rejected(self) -> None:
        """Re-acquiring from the owning thread raises RuntimeError."""
        buf = BufferSink()
        with exclusive(buf), pytest.raises(RuntimeError, match="already holding"):
            buf.acquire_exclusive()
