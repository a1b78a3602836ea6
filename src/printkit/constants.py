"""Shared constants for printkit.

This module provides centralized configuration constants used across
the sinks, runtime and syntax packages. Placing constants here avoids
circular imports and provides a single source of truth.

Constants are grouped by domain:
- Layout: tab stops used by the dedenter
- Size hints: buffer pre-sizing heuristics for the string builder
- Depth limits: recursion protection for container rendering
- Literal text: fixed spellings used by the built-in renderers

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Layout
    "DEFAULT_TABWIDTH",
    # Size hints
    "SIZEHINT_UNSET",
    "SIZEHINT_FLOAT",
    "MIN_BUFFER_GROWTH",
    # Depth limits
    "MAX_DEPTH",
    # Literal text
    "QUOTE",
    "ELLIPSIS",
    "CYCLE_MARKER",
    "TRUE_TEXT",
    "FALSE_TEXT",
    "NONE_TEXT",
    "DEFAULT_LOCALE",
    # Cache limits
    "MAX_LOCALE_CACHE_SIZE",
]

# ============================================================================
# LAYOUT
# ============================================================================

# Column rounding unit for tab characters in indentation measurement.
# A tab advances the column to the next multiple of this value.
DEFAULT_TABWIDTH: int = 8

# ============================================================================
# SIZE HINTS
# ============================================================================
#
# Size hints only decide how many bytes the captured buffer allocates up
# front. The buffer always truncates to its logical size before it is
# materialized, so a wrong hint costs an allocation, never correctness.

# No estimate available (opaque values, containers, user types).
SIZEHINT_UNSET: int = 0

# Longest shortest-round-trip repr of a binary64 float ("-2.2250738585072014e-308").
SIZEHINT_FLOAT: int = 20

# Smallest step by which a BufferSink grows when a write overflows capacity.
MIN_BUFFER_GROWTH: int = 16

# ============================================================================
# DEPTH LIMITS
# ============================================================================

# Maximum nesting of containers rendered in literal form.
# 100 levels is far beyond any readable debug output and keeps a safe margin
# below Python's default recursion limit of 1000.
MAX_DEPTH: int = 100

# ============================================================================
# LITERAL TEXT
# ============================================================================

QUOTE: str = '"'

# Marker written after the last element shown when RenderConfig.limit truncates.
ELLIPSIS: str = "…"

# Written in place of a container that is already being rendered higher up.
CYCLE_MARKER: str = "..."

TRUE_TEXT: str = "true"
FALSE_TEXT: str = "false"
NONE_TEXT: str = "nothing"

# Fallback locale when a requested locale is unknown to CLDR.
DEFAULT_LOCALE: str = "en_US"

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum cached Babel Locale instances.
# 128 covers typical multi-region applications (major locales + variants).
MAX_LOCALE_CACHE_SIZE: int = 128
