"""Sink wrapper attaching a RenderConfig.

RenderContext lets rendering properties travel with the output destination
instead of being threaded through every render call. Writes and
exclusivity are delegated to the wrapped sink, so locking a context locks
the real destination.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .render_config import DEFAULT_CONFIG, RenderConfig

if TYPE_CHECKING:
    from printkit.sinks.protocol import Sink

__all__ = ["RenderContext", "config_of"]


class RenderContext:
    """A sink paired with rendering properties.

    Wrapping another RenderContext unwraps it and inherits its config.
    An explicit config replaces the inherited one whole; keyword overrides
    then change single fields of whichever config is in effect.

    Args:
        sink: Destination sink (may itself be a RenderContext)
        config: Properties to apply (None = inherit the wrapped context's)
        **overrides: Individual RenderConfig fields to change

    Example:
        >>> buf = BufferSink()
        >>> ctx = RenderContext(buf, compact=True)
        >>> show(ctx, (1, 2))
        >>> buf.take()
        '(1,2)'
    """

    __slots__ = ("config", "sink")

    def __init__(
        self,
        sink: Sink,
        config: RenderConfig | None = None,
        **overrides: object,
    ) -> None:
        """Wrap sink, inheriting the config of an enclosing context."""
        base = DEFAULT_CONFIG
        if isinstance(sink, RenderContext):
            base = sink.config
            sink = sink.sink
        if config is not None:
            base = config
        if overrides:
            base = base.replace(**overrides)
        self.sink: Sink = sink
        self.config: RenderConfig = base

    def write(self, data: str | bytes, /) -> int:
        """Forward data to the wrapped sink."""
        return self.sink.write(data)

    def acquire_exclusive(self, timeout: float | None = None) -> None:
        """Acquire the wrapped sink."""
        self.sink.acquire_exclusive(timeout)

    def release_exclusive(self) -> None:
        """Release the wrapped sink."""
        self.sink.release_exclusive()

    def __repr__(self) -> str:
        """Return detailed representation for debugging."""
        return f"RenderContext({self.sink!r}, {self.config!r})"


def config_of(sink: Sink) -> RenderConfig:
    """Return the RenderConfig in effect for sink (defaults for bare sinks)."""
    if isinstance(sink, RenderContext):
        return sink.config
    return DEFAULT_CONFIG
