"""Rendering configuration carried by a sink.

Provides a single frozen dataclass holding the properties that change how
values render: separator spacing, element limits, number locale and the
container depth limit. A RenderContext attaches one to any sink.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from printkit.constants import MAX_DEPTH
from printkit.diagnostics.templates import ErrorTemplate

__all__ = ["DEFAULT_CONFIG", "RenderConfig"]


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Immutable rendering properties.

    All fields have defaults; ``RenderConfig()`` reproduces the behavior of a
    bare sink.

    Attributes:
        compact: Omit the space after separators in container literals
            (``[1,2]`` instead of ``[1, 2]``).
        limit: Render at most this many container elements, followed by an
            ellipsis (None = unlimited).
        locale: Locale for plain rendering of numbers, e.g. ``"de_DE"``
            (None = locale-independent). Requires Babel.
        max_depth: Maximum container nesting in literal rendering.

    Example:
        >>> config = RenderConfig(compact=True, limit=3)
        >>> repr_([1, 2, 3, 4, 5], config=config)
        '[1,2,3,…]'
    """

    compact: bool = False
    limit: int | None = None
    locale: str | None = None
    max_depth: int = MAX_DEPTH

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If limit is negative, max_depth is not positive,
                or locale is an empty string.
        """
        if self.limit is not None and self.limit < 0:
            raise ValueError(ErrorTemplate.config_invalid("limit", "non-negative", self.limit).message)
        if self.max_depth <= 0:
            raise ValueError(
                ErrorTemplate.config_invalid("max_depth", "positive", self.max_depth).message
            )
        if self.locale is not None and not self.locale.strip():
            raise ValueError(
                ErrorTemplate.config_invalid("locale", "a non-empty locale code", self.locale).message
            )

    def replace(self, **changes: object) -> RenderConfig:
        """Return a copy with the given fields changed (validated again)."""
        return replace(self, **changes)  # type: ignore[arg-type]


DEFAULT_CONFIG = RenderConfig()
