"""Renderer registry: render functions for types you do not own.

Types you define can implement render_plain / render_literal methods
directly. For third-party or built-in types, register functions here
instead; registered renderers take precedence over methods and built-in
forms.

Lookup walks the value's MRO, so a renderer registered for a base class
applies to its subclasses unless a subclass has its own entry.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeAlias

from printkit.diagnostics.templates import ErrorTemplate
from printkit.enums import RenderMode

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

    from printkit.sinks.protocol import Sink

    RenderFunction: TypeAlias = Callable[[Sink, object], None]

__all__ = ["RendererEntry", "RendererRegistry", "get_shared_registry", "renders"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RendererEntry:
    """Render functions registered for one type.

    Attributes:
        cls: The registered type
        plain: Plain-form renderer, or None to fall back to literal
        literal: Literal-form renderer, or None to use the next lookup stage
    """

    cls: type
    plain: RenderFunction | None = None
    literal: RenderFunction | None = None

    def __post_init__(self) -> None:
        """Reject entries that render nothing."""
        if self.plain is None and self.literal is None:
            raise ValueError(ErrorTemplate.renderer_invalid(self.cls.__qualname__).message)


class RendererRegistry:
    """Maps types to render functions.

    Supports dict-like introspection:
        - __iter__: Iterate over registered types
        - __len__: Count registered types
        - __contains__: Check if a type has its own entry

    Thread Safety:
        Registration and lookup take an internal lock, so types can be
        registered while other threads render.

    Example:
        >>> registry = RendererRegistry()
        >>> registry.register(Point, plain=lambda sink, p: sink.write(f"{p.x},{p.y}"))
        >>> Point in registry
        True
        >>> len(registry)
        1
    """

    __slots__ = ("_entries", "_lock")

    def __init__(self) -> None:
        """Initialize empty registry."""
        self._entries: dict[type, RendererEntry] = {}
        self._lock = threading.Lock()

    def register(
        self,
        cls: type,
        *,
        plain: RenderFunction | None = None,
        literal: RenderFunction | None = None,
    ) -> None:
        """Register render functions for cls.

        Registering an already registered type updates only the modes given;
        the other mode keeps its previous renderer.

        Args:
            cls: Type to render
            plain: Renderer for the plain form
            literal: Renderer for the literal form

        Raises:
            ValueError: If neither plain nor literal is given
        """
        with self._lock:
            previous = self._entries.get(cls)
            if previous is not None:
                plain = plain if plain is not None else previous.plain
                literal = literal if literal is not None else previous.literal
            self._entries[cls] = RendererEntry(cls, plain=plain, literal=literal)
        logger.debug("Registered renderer for %s", cls.__qualname__)

    def unregister(self, cls: type) -> bool:
        """Remove the entry for cls.

        Returns:
            True if an entry was removed, False if cls was not registered
        """
        with self._lock:
            removed = self._entries.pop(cls, None) is not None
        if removed:
            logger.debug("Unregistered renderer for %s", cls.__qualname__)
        return removed

    def renders(
        self, cls: type, mode: RenderMode = RenderMode.PLAIN
    ) -> Callable[[RenderFunction], RenderFunction]:
        """Decorator form of register for a single mode.

        Example:
            >>> @registry.renders(Point, RenderMode.LITERAL)
            ... def _(sink, p):
            ...     sink.write(f"Point({p.x}, {p.y})")
        """

        def decorator(func: RenderFunction) -> RenderFunction:
            if mode is RenderMode.PLAIN:
                self.register(cls, plain=func)
            else:
                self.register(cls, literal=func)
            return func

        return decorator

    def lookup(self, cls: type) -> RendererEntry | None:
        """Return the nearest entry along cls's MRO, or None."""
        with self._lock:
            if not self._entries:
                return None
            for base in cls.__mro__:
                entry = self._entries.get(base)
                if entry is not None:
                    return entry
        return None

    def __contains__(self, cls: object) -> bool:
        """True if cls has its own entry (bases are not consulted)."""
        return cls in self._entries

    def __len__(self) -> int:
        """Count of registered types."""
        return len(self._entries)

    def __iter__(self) -> Iterator[type]:
        """Iterate over registered types (snapshot)."""
        with self._lock:
            return iter(list(self._entries))

    def __repr__(self) -> str:
        """Return detailed representation for debugging."""
        return f"RendererRegistry(types={len(self._entries)})"


# Module-level registry consulted by render_plain and render_literal.
# Created lazily on first access to avoid import-time side effects.
_SHARED_REGISTRY: RendererRegistry | None = None
_SHARED_LOCK = threading.Lock()


def get_shared_registry() -> RendererRegistry:
    """Get the process-wide registry used by the dispatch protocol.

    Unlike per-call registries, entries added here affect every render in
    the process. Libraries should register only types they own or wrap.
    """
    global _SHARED_REGISTRY  # noqa: PLW0603 - lazy singleton
    if _SHARED_REGISTRY is None:
        with _SHARED_LOCK:
            if _SHARED_REGISTRY is None:
                _SHARED_REGISTRY = RendererRegistry()
    return _SHARED_REGISTRY


def renders(
    cls: type, mode: RenderMode = RenderMode.PLAIN
) -> Callable[[RenderFunction], RenderFunction]:
    """Decorator registering a renderer in the shared registry.

    Example:
        >>> @renders(Fraction)
        ... def _(sink, value):
        ...     sink.write(f"{value.numerator}/{value.denominator}")
    """
    return get_shared_registry().renders(cls, mode)
