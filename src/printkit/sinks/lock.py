"""Exclusive lock guarding a shared sink.

This module provides the mutual-exclusion lock every sink owns so that two
threads printing to the same sink cannot interleave their output:
- One owner at a time, tracked by thread id
- Optional timeout for acquisition (raises TimeoutError)
- Nested acquisition by the owner is rejected (raises RuntimeError)
- Release by a thread that does not own the lock is rejected

Architecture:
    SinkLock uses a condition variable to coordinate waiting threads. The
    owner check lives inside the condition so ownership and the waiting
    count are always observed together.

Reentrancy:
    A print call acquires its sink once and holds it for every argument.
    Renderers invoked inside that call write through render_plain and
    render_literal, which never lock. A second acquisition from the owning
    thread therefore means a renderer called print_ on its own sink, which
    would otherwise split one logical print into two critical sections.

Python 3.13+.
"""

from __future__ import annotations

import logging
import threading
import time
from contextlib import contextmanager
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Generator

__all__ = ["SinkLock"]

logger = logging.getLogger(__name__)


class SinkLock:
    """Non-reentrant exclusive lock with owner tracking.

    Thread Safety:
        All methods are thread-safe.

    Limitations:
        Nested acquisition by the owning thread raises RuntimeError.
        Release from a non-owning thread raises RuntimeError.

    Example:
        >>> lock = SinkLock()
        >>> with lock.held():
        ...     # Exclusive access to the sink
        ...     pass
        >>> with lock.held(timeout=1.0):
        ...     # Acquired within 1 second or TimeoutError raised
        ...     pass
    """

    __slots__ = ("_condition", "_owner", "_waiting")

    def __init__(self) -> None:
        """Initialize an unlocked SinkLock."""
        self._condition = threading.Condition(threading.Lock())

        # Thread id of the current owner, None when unlocked
        self._owner: int | None = None

        # Threads blocked in acquire()
        self._waiting: int = 0

    @contextmanager
    def held(self, timeout: float | None = None) -> Generator[None]:
        """Hold the lock for the duration of the with-block.

        Args:
            timeout: Maximum seconds to wait for acquisition.
                None (default) waits indefinitely. 0.0 is a non-blocking attempt.

        Raises:
            RuntimeError: If the calling thread already holds the lock.
            TimeoutError: If the lock cannot be acquired within timeout.
            ValueError: If timeout is negative.

        Yields:
            None
        """
        self.acquire(timeout)
        try:
            yield
        finally:
            self.release()

    def acquire(self, timeout: float | None = None) -> None:
        """Acquire the lock, blocking while another thread owns it.

        Args:
            timeout: Maximum seconds to wait. None waits indefinitely.

        Raises:
            RuntimeError: If the calling thread already holds the lock.
            TimeoutError: If the lock cannot be acquired within timeout.
            ValueError: If timeout is negative.
        """
        if timeout is not None and timeout < 0:
            msg = f"Timeout must be non-negative, got {timeout}"
            raise ValueError(msg)

        current_thread_id = threading.get_ident()

        with self._condition:
            if self._owner == current_thread_id:
                msg = (
                    "Cannot acquire sink lock: already holding it. "
                    "Renderers must write with render_plain/render_literal, not print_."
                )
                raise RuntimeError(msg)

            deadline = time.monotonic() + timeout if timeout is not None else None

            self._waiting += 1
            try:
                while self._owner is not None:
                    if deadline is not None:
                        remaining = deadline - time.monotonic()
                        if remaining <= 0:
                            logger.debug("Timed out after %.3fs waiting for sink lock", timeout)
                            msg = "Timed out waiting for sink lock"
                            raise TimeoutError(msg)
                        self._condition.wait(timeout=remaining)
                    else:
                        self._condition.wait()

                self._owner = current_thread_id
            finally:
                self._waiting -= 1

    def release(self) -> None:
        """Release the lock and wake one waiting thread.

        Raises:
            RuntimeError: If the calling thread does not hold the lock.
        """
        current_thread_id = threading.get_ident()

        with self._condition:
            if self._owner != current_thread_id:
                msg = "Thread does not hold sink lock"
                raise RuntimeError(msg)

            self._owner = None
            self._condition.notify()

    @property
    def locked(self) -> bool:
        """True if any thread currently holds the lock (point-in-time snapshot)."""
        with self._condition:
            return self._owner is not None

    @property
    def waiting(self) -> int:
        """Number of threads currently blocked waiting to acquire (point-in-time snapshot)."""
        with self._condition:
            return self._waiting
