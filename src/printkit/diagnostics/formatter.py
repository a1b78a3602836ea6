"""Diagnostic formatting service.

Centralizes diagnostic output formatting with configurable options.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import StrEnum

from .codes import Diagnostic

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]


class OutputFormat(StrEnum):
    """Output format options for diagnostic formatting."""

    RUST = "rust"  # Rust compiler-style output (default)
    SIMPLE = "simple"  # Single-line format
    JSON = "json"  # JSON format for tooling integration


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Diagnostic formatting service.

    Message and hint text is passed through escape_string so control
    characters taken from user input cannot forge extra log lines.

    Attributes:
        output_format: Output style (rust, simple, json)
        max_content_length: Maximum message length before truncation (None = unlimited)

    Example:
        >>> formatter = DiagnosticFormatter()
        >>> diagnostic = ErrorTemplate.tabwidth_invalid(0)
        >>> print(formatter.format(diagnostic))
        error[TABWIDTH_INVALID]: tabwidth must be a positive integer, got 0
          = help: Use the default tab stop of 8 unless the source uses another one

        >>> formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        >>> print(formatter.format(diagnostic))
        TABWIDTH_INVALID: tabwidth must be a positive integer, got 0
    """

    output_format: OutputFormat = OutputFormat.RUST
    max_content_length: int | None = None

    def format(self, diagnostic: Diagnostic) -> str:
        """Format a single diagnostic.

        Args:
            diagnostic: Diagnostic to format

        Returns:
            Formatted diagnostic string
        """
        match self.output_format:
            case OutputFormat.RUST:
                return self._format_rust(diagnostic)
            case OutputFormat.SIMPLE:
                return self._format_simple(diagnostic)
            case OutputFormat.JSON:
                return self._format_json(diagnostic)

    def _format_rust(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic in Rust compiler style."""
        severity = diagnostic.severity if diagnostic.severity == "warning" else "error"
        message = self._sanitize(diagnostic.message)

        parts = [f"{severity}[{diagnostic.code.name}]: {message}"]

        if diagnostic.offset is not None:
            parts.append(f"  --> offset {diagnostic.offset}")

        if diagnostic.hint:
            parts.append(f"  = help: {self._sanitize(diagnostic.hint)}")

        if diagnostic.help_url:
            parts.append(f"  = note: see {diagnostic.help_url}")

        return "\n".join(parts)

    def _format_simple(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic in single-line format."""
        return f"{diagnostic.code.name}: {self._sanitize(diagnostic.message)}"

    def _format_json(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic as JSON."""
        import json  # noqa: PLC0415

        data: dict[str, str | int | None] = {
            "code": diagnostic.code.name,
            "code_value": diagnostic.code.value,
            "message": self._sanitize(diagnostic.message),
            "severity": diagnostic.severity,
        }
        if diagnostic.offset is not None:
            data["offset"] = diagnostic.offset
        if diagnostic.hint:
            data["hint"] = self._sanitize(diagnostic.hint)
        if diagnostic.help_url:
            data["help_url"] = diagnostic.help_url

        return json.dumps(data, ensure_ascii=False)

    def _sanitize(self, text: str) -> str:
        """Escape control characters, then truncate if a limit is set."""
        from printkit.syntax.escapes import escape_string  # noqa: PLC0415 - circular

        text = escape_string(text)
        if self.max_content_length is not None and len(text) > self.max_content_length:
            return text[: self.max_content_length] + "..."
        return text
