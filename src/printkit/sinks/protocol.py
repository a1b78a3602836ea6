"""Sink protocol and the scoped exclusivity guard.

A sink is any ordered destination for text and bytes. printkit never
buffers on a sink's behalf: every write is forwarded immediately and bytes
appear in call order.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Generator

__all__ = ["Sink", "exclusive"]


@runtime_checkable
class Sink(Protocol):
    """Destination for rendered output.

    Implementations must:
    - accept both str (encoded as UTF-8 where bytes are stored) and bytes
    - return the number of units written (bytes for byte stores, the
      underlying stream's count for streams)
    - pair every acquire_exclusive with exactly one release_exclusive
    """

    def write(self, data: str | bytes, /) -> int:
        """Write data, returning the count written."""
        ...  # pragma: no cover  # Protocol stub - not executable

    def acquire_exclusive(self, timeout: float | None = None) -> None:
        """Block until the calling thread has exclusive access."""
        ...  # pragma: no cover  # Protocol stub - not executable

    def release_exclusive(self) -> None:
        """Give up exclusive access."""
        ...  # pragma: no cover  # Protocol stub - not executable


@contextmanager
def exclusive(sink: Sink, timeout: float | None = None) -> Generator[Sink]:
    """Hold exclusive access to sink for the duration of the with-block.

    Acquisition happens before the first write. Release runs on every exit
    path, including exceptions raised by renderers or by the sink itself.

    Args:
        sink: Sink to lock
        timeout: Maximum seconds to wait (None waits indefinitely)

    Yields:
        The same sink, for convenience

    Example:
        >>> buf = BufferSink()
        >>> with exclusive(buf) as out:
        ...     out.write("a")
        ...     out.write("b")
        1
        1
    """
    sink.acquire_exclusive(timeout)
    try:
        yield sink
    finally:
        sink.release_exclusive()
