"""Locale-aware number formatting for plain rendering.

Used when a sink's RenderConfig names a locale: ints, floats and Decimals
are then written with the locale's grouping and decimal separators instead
of Python's locale-independent text.

Architecture:
    - Babel Locale objects are parsed once per locale code and cached
    - Unknown locale codes fall back to en_US with a logged warning
    - Babel is imported lazily through core.babel_compat

Python 3.13+. Uses Babel for CLDR data.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from functools import lru_cache
from typing import TYPE_CHECKING

from printkit.constants import DEFAULT_LOCALE, MAX_LOCALE_CACHE_SIZE
from printkit.core.babel_compat import (
    get_format_decimal,
    get_locale_class,
    get_unknown_locale_error,
)
from printkit.diagnostics.templates import ErrorTemplate

if TYPE_CHECKING:
    from babel import Locale

__all__ = ["format_number", "resolve_locale"]

logger = logging.getLogger(__name__)


@lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def resolve_locale(locale_code: str) -> Locale:
    """Parse locale_code into a Babel Locale, falling back to en_US.

    Accepts both BCP 47 ("de-DE") and POSIX ("de_DE") spellings.

    Raises:
        BabelImportError: If Babel is not installed
    """
    locale_class = get_locale_class()
    unknown_locale_error = get_unknown_locale_error()
    normalized = locale_code.replace("-", "_")
    try:
        return locale_class.parse(normalized)
    except (unknown_locale_error, ValueError) as e:
        diagnostic = ErrorTemplate.locale_unavailable(locale_code, DEFAULT_LOCALE)
        logger.warning("%s: %s", diagnostic.message, e)
        return locale_class.parse(DEFAULT_LOCALE)


def format_number(value: int | float | Decimal, locale_code: str) -> str:
    """Format value with the locale's separators using CLDR's decimal pattern.

    Args:
        value: Number to format
        locale_code: Locale identifier, e.g. "en_US" or "de-DE"

    Returns:
        Localized number text

    Raises:
        BabelImportError: If Babel is not installed

    Examples:
        >>> format_number(1234567, "en_US")
        '1,234,567'
        >>> format_number(1234.5, "de_DE")
        '1.234,5'
    """
    format_decimal = get_format_decimal()
    return format_decimal(value, locale=resolve_locale(locale_code))
