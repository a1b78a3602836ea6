"""Diagnostic system for printkit errors.

Provides structured error diagnostics with codes, offsets and hints.
Inspired by Rust compiler diagnostics.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import EscapeError, PrintkitError, RenderError
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "EscapeError",
    "OutputFormat",
    "PrintkitError",
    "RenderError",
]
