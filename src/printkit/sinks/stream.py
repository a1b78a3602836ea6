"""Sink adapter over Python file-like streams.

StreamSink forwards every write to an underlying text or binary stream and
owns the SinkLock that serializes concurrent print calls. It never flushes
on its own; flushing and durability belong to the stream.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import io
import sys
import threading
from typing import IO

from .lock import SinkLock

__all__ = ["StreamSink", "stdout_sink"]


class StreamSink:
    """Sink writing to a file-like object.

    Text streams receive str; binary streams receive UTF-8 bytes. Bytes
    written to a text stream are decoded as UTF-8 first.

    Args:
        stream: Open text or binary stream
        binary: Force binary mode (None = detect from the stream type)
        lock: SinkLock to share with other sinks (None = a private one)

    Example:
        >>> import io
        >>> out = io.StringIO()
        >>> sink = StreamSink(out)
        >>> sink.write("hello")
        5
        >>> out.getvalue()
        'hello'
    """

    __slots__ = ("_binary", "_lock", "stream")

    def __init__(
        self,
        stream: IO[str] | IO[bytes],
        *,
        binary: bool | None = None,
        lock: SinkLock | None = None,
    ) -> None:
        """Wrap stream, detecting text vs binary unless binary is given."""
        self.stream = stream
        self._binary = (
            binary if binary is not None else not isinstance(stream, io.TextIOBase)
        )
        self._lock = lock if lock is not None else SinkLock()

    @property
    def binary(self) -> bool:
        """True if the underlying stream takes bytes."""
        return self._binary

    def write(self, data: str | bytes | bytearray, /) -> int:
        """Forward data to the stream, converting between str and bytes as needed.

        Returns:
            Count reported by the stream's write()
        """
        if self._binary:
            if isinstance(data, str):
                data = data.encode("utf-8")
        elif not isinstance(data, str):
            data = bytes(data).decode("utf-8")
        return self.stream.write(data)  # type: ignore[arg-type]

    def flush(self) -> None:
        """Flush the underlying stream."""
        self.stream.flush()

    def acquire_exclusive(self, timeout: float | None = None) -> None:
        """Acquire this sink's SinkLock."""
        self._lock.acquire(timeout)

    def release_exclusive(self) -> None:
        """Release this sink's SinkLock."""
        self._lock.release()

    def __repr__(self) -> str:
        """Return detailed representation for debugging."""
        mode = "binary" if self._binary else "text"
        return f"StreamSink({self.stream!r}, {mode})"


_stdout_lock = threading.Lock()
_stdout_sink_lock = SinkLock()
_stdout_sink: StreamSink | None = None


def stdout_sink() -> StreamSink:
    """Return the process-wide sink for sys.stdout.

    Created lazily and shared, so every caller contends on the same lock.
    The sink is rebuilt if sys.stdout has been replaced since it was created.
    Every rebuild shares one SinkLock, so a thread holding an earlier sink
    still excludes writers on the new one.
    """
    global _stdout_sink  # noqa: PLW0603
    with _stdout_lock:
        if _stdout_sink is None or _stdout_sink.stream is not sys.stdout:
            _stdout_sink = StreamSink(sys.stdout, lock=_stdout_sink_lock)
        return _stdout_sink
