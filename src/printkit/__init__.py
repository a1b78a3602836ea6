"""printkit - two-mode text rendering, string building, escaping and dedent.

Every value has a plain form (canonical text) and a literal form
(self-describing debug text). printkit writes either form to a sink,
captures output into strings, quotes and escapes string literals, and
strips common indentation from tab-indented text blocks.

Public API:
    print_, println, show - Atomic output to a sink
    render_plain, render_literal - Dispatch protocol for use inside renderers
    Renderable - Protocol for types that render themselves
    sprint, string, string_with_config, repr_ - String builder
    join, join_to - Delimited output
    quote, escape_string, unescape_string - String literal escaping
    indentation, unindent, dedent - Tab-aware block dedent
    BufferSink, StreamSink - Sinks
    RenderContext, RenderConfig - Rendering properties

Exceptions:
    PrintkitError - Base exception class

Submodules:
    printkit.sinks - Sink protocol, locking and implementations
    printkit.runtime - Registry, builder and locale-aware numbers
    printkit.syntax - Escapes and dedent
    printkit.diagnostics - Diagnostics and exception hierarchy
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .diagnostics import PrintkitError
from .runtime import (
    RenderConfig,
    RenderContext,
    Renderable,
    join,
    join_to,
    print_,
    println,
    render_literal,
    render_plain,
    repr_,
    show,
    sprint,
    string,
    string_with_config,
)
from .sinks import BufferSink, StreamSink
from .syntax import dedent, escape_string, indentation, quote, unescape_string, unindent

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    __version__ = _get_version("printkit")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "BufferSink",
    "PrintkitError",
    "RenderConfig",
    "RenderContext",
    "Renderable",
    "StreamSink",
    "__version__",
    "dedent",
    "escape_string",
    "indentation",
    "join",
    "join_to",
    "print_",
    "println",
    "quote",
    "render_literal",
    "render_plain",
    "repr_",
    "show",
    "sprint",
    "string",
    "string_with_config",
    "unescape_string",
    "unindent",
]
