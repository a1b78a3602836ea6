"""Growable byte buffer used to capture rendered output.

BufferSink is the captured buffer behind sprint() and unindent(): an
exclusively owned bytearray with a logical size and a capacity pre-sized
from a size hint.

Invariants:
    size <= capacity at every point.
    take() truncates the storage to the logical size exactly once and
    leaves the buffer empty.
    clear() resets the logical size but keeps the allocation for reuse.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from printkit.constants import MIN_BUFFER_GROWTH

from .lock import SinkLock

__all__ = ["BufferSink"]


class BufferSink:
    """In-memory sink accumulating UTF-8 bytes.

    Text writes are encoded as UTF-8; byte writes are stored verbatim.
    Doubling growth keeps total copying linear in the output size.

    Usage:
        >>> buf = BufferSink(sizehint=16)
        >>> buf.write("héllo")
        6
        >>> len(buf), buf.capacity
        (6, 16)
        >>> buf.take()
        'héllo'
        >>> len(buf)
        0

    Thread Safety:
        Writes are not internally synchronized. Callers that share a buffer
        between threads hold acquire_exclusive() around their writes, as
        print_() does.
    """

    __slots__ = ("_data", "_lock", "_size")

    def __init__(self, sizehint: int = 0) -> None:
        """Create an empty buffer with room for sizehint bytes.

        Args:
            sizehint: Initial capacity in bytes (0 = allocate on first write)

        Raises:
            ValueError: If sizehint is negative
        """
        if sizehint < 0:
            msg = f"sizehint must be non-negative, got {sizehint}"
            raise ValueError(msg)
        self._data = bytearray(sizehint)
        self._size = 0
        self._lock = SinkLock()

    def write(self, data: str | bytes | bytearray, /) -> int:
        """Append text (as UTF-8) or raw bytes.

        Returns:
            Number of bytes appended
        """
        if isinstance(data, str):
            data = data.encode("utf-8")
        n = len(data)
        if n == 0:
            return 0
        end = self._size + n
        if end > len(self._data):
            self._grow(end)
        self._data[self._size:end] = data
        self._size = end
        return n

    def _grow(self, needed: int) -> None:
        capacity = max(needed, 2 * len(self._data), MIN_BUFFER_GROWTH)
        self._data.extend(bytes(capacity - len(self._data)))

    def getvalue(self) -> str:
        """Decode the current contents without consuming them."""
        return self._data[: self._size].decode("utf-8")

    def take_bytes(self) -> bytes:
        """Return the contents as bytes and reset the buffer to empty."""
        del self._data[self._size :]
        result = bytes(self._data)
        self._data = bytearray()
        self._size = 0
        return result

    def take(self) -> str:
        """Return the contents as a string and reset the buffer to empty.

        Raises:
            UnicodeDecodeError: If raw byte writes left invalid UTF-8
        """
        return self.take_bytes().decode("utf-8")

    def clear(self) -> None:
        """Discard the contents, keeping the allocation."""
        self._size = 0

    @property
    def capacity(self) -> int:
        """Bytes currently allocated."""
        return len(self._data)

    @property
    def size(self) -> int:
        """Bytes currently written (alias for len())."""
        return self._size

    def __len__(self) -> int:
        """Return the logical size in bytes."""
        return self._size

    def acquire_exclusive(self, timeout: float | None = None) -> None:
        """Acquire this buffer's SinkLock."""
        self._lock.acquire(timeout)

    def release_exclusive(self) -> None:
        """Release this buffer's SinkLock."""
        self._lock.release()

    def __repr__(self) -> str:
        """Return detailed representation for debugging."""
        return f"BufferSink(size={self._size}, capacity={len(self._data)})"
