"""Depth limiting and cycle tracking for recursive rendering.

Provides reusable depth tracking to prevent stack overflow from:
- Deeply nested containers rendered in literal form
- Self-referential containers (a list that contains itself)
- User renderers that recurse into render_literal

Thread-safe: uses explicit state, no thread-local storage. The dispatch
protocol keeps one guard per top-level render call in a ContextVar.
Python 3.13+.
"""

from __future__ import annotations

import logging
import sys
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from printkit.constants import MAX_DEPTH
from printkit.diagnostics import RenderError
from printkit.diagnostics.templates import ErrorTemplate

if TYPE_CHECKING:
    from collections.abc import Generator

__all__ = ["DepthGuard", "DepthLimitExceededError", "depth_clamp"]

logger = logging.getLogger(__name__)

# Interpreter frames consumed by one level of container rendering.
_FRAMES_PER_LEVEL: int = 4


class DepthLimitExceededError(RenderError):
    """Raised when container nesting exceeds the configured depth.

    This error indicates either:
    - A value nested far deeper than any readable output
    - A renderer that recurses without making progress
    """


@dataclass(slots=True)
class DepthGuard:
    """Context manager for tracking and limiting recursion depth.

    Usage:
        guard = DepthGuard(max_depth=50)
        with guard.visiting(container):
            for item in container:
                render_item(item)

    Mutability Note:
        Intentionally mutable (not frozen=True) to enable stateful depth
        tracking via context manager protocol.

    Attributes:
        max_depth: Maximum allowed depth (default: MAX_DEPTH)
        current_depth: Current recursion depth
    """

    max_depth: int = MAX_DEPTH
    current_depth: int = field(default=0, init=False)
    _active: set[int] = field(default_factory=set, init=False, repr=False)

    def __post_init__(self) -> None:
        """Clamp max_depth against Python recursion limit."""
        self.max_depth = depth_clamp(self.max_depth)

    def __enter__(self) -> DepthGuard:
        """Enter guarded section, increment depth.

        Validates the limit BEFORE incrementing: __exit__ is not called when
        __enter__ raises, so incrementing first would leave current_depth
        permanently elevated.
        """
        self.check()
        self.current_depth += 1
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        """Exit guarded section, decrement depth."""
        self.current_depth -= 1

    @contextmanager
    def visiting(self, value: object) -> Generator[None]:
        """Enter one level and mark value as being rendered.

        Raises:
            DepthLimitExceededError: If depth limit exceeded
        """
        with self:
            key = id(value)
            self._active.add(key)
            try:
                yield
            finally:
                self._active.discard(key)

    def is_visiting(self, value: object) -> bool:
        """True if value is already being rendered further up the stack."""
        return id(value) in self._active

    @property
    def depth(self) -> int:
        """Current depth (alias for current_depth)."""
        return self.current_depth

    def check(self) -> None:
        """Explicitly check depth and raise if exceeded.

        Raises:
            DepthLimitExceededError: If depth limit exceeded
        """
        if self.current_depth >= self.max_depth:
            raise DepthLimitExceededError(ErrorTemplate.render_depth_exceeded(self.max_depth))


def depth_clamp(requested_depth: int, reserve_frames: int = 50) -> int:
    """Clamp requested depth against Python recursion limit.

    Each rendering level costs several interpreter frames, so the clamp
    keeps a reserve below sys.getrecursionlimit(). Logs a warning if
    clamping occurs.

    Args:
        requested_depth: Desired maximum depth
        reserve_frames: Stack frames to reserve for call overhead (default: 50)

    Returns:
        Safe depth value, clamped if necessary
    """
    max_safe_depth = (sys.getrecursionlimit() - reserve_frames) // _FRAMES_PER_LEVEL
    if requested_depth > max_safe_depth:
        logger.warning(
            "Requested depth %d exceeds what the recursion limit (%d) allows. "
            "Clamping to %d to prevent RecursionError.",
            requested_depth,
            sys.getrecursionlimit(),
            max_safe_depth,
        )
        return max_safe_depth
    return requested_depth
