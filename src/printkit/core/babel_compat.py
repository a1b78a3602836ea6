"""Lazy access to Babel, the optional locale data dependency.

printkit installs without Babel. Only plain rendering of numbers through a
RenderConfig with a locale needs it, so Babel is imported on first use and
a missing installation surfaces as BabelImportError naming the feature and
the extra to install.

    - Core only: `pip install printkit`
    - Locale-aware numbers: `pip install printkit[babel]`

Python 3.13+.
"""

from __future__ import annotations

from functools import lru_cache
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

    from babel import Locale
    from babel.core import UnknownLocaleError as UnknownLocaleErrorType

__all__ = [
    "BabelImportError",
    "get_format_decimal",
    "get_locale_class",
    "get_unknown_locale_error",
    "require_babel",
]


@lru_cache(maxsize=1)
def _check_babel_available() -> bool:
    """Import Babel once and remember whether it worked."""
    try:
        import babel  # noqa: F401, PLC0415  # pylint: disable=unused-import

        return True
    except ImportError:
        return False


class BabelImportError(ImportError):
    """Raised when a locale feature is used without Babel installed.

    Attributes:
        feature: Name of the printkit feature that needed Babel
    """

    def __init__(self, feature: str) -> None:
        """Create error naming the feature and the install command."""
        message = (
            f"{feature} requires Babel for CLDR locale data. "
            "Install with: pip install printkit[babel]"
        )
        super().__init__(message)
        self.feature = feature


def require_babel(feature: str) -> None:
    """Raise BabelImportError for feature unless Babel is importable."""
    if not _check_babel_available():
        raise BabelImportError(feature)


def get_locale_class() -> type[Locale]:
    """Return babel.Locale.

    Raises:
        BabelImportError: If Babel is not installed
    """
    require_babel("format_number")
    from babel import Locale  # noqa: PLC0415

    return Locale


def get_unknown_locale_error() -> type[UnknownLocaleErrorType]:
    """Return babel.core.UnknownLocaleError."""
    require_babel("format_number")
    from babel.core import UnknownLocaleError  # noqa: PLC0415

    return UnknownLocaleError


def get_format_decimal() -> Callable[..., str]:
    """Return babel.numbers.format_decimal.

    Raises:
        BabelImportError: If Babel is not installed
    """
    require_babel("format_number")
    from babel.numbers import format_decimal  # noqa: PLC0415

    return format_decimal
