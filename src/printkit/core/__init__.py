"""Core utilities shared across the sinks, runtime and syntax layers.

By isolating these utilities here, we maintain a clean dependency graph:

    core <- sinks <- runtime
    core <- syntax

Exports:
    DepthGuard: Context manager for recursion depth limiting and cycle tracking
    DepthLimitExceededError: Exception raised when depth limit exceeded
    BabelImportError: Raised when a locale-aware feature runs without Babel

Python 3.13+.
"""

from .babel_compat import BabelImportError
from .depth_guard import DepthGuard, DepthLimitExceededError

__all__ = ["BabelImportError", "DepthGuard", "DepthLimitExceededError"]
