"""Babel compatibility layer for optional dependency handling.

Provides centralized, lazy import infrastructure for Babel so that
locale-aware parsers give consistent error messages when it is missing.

Design Rationale:
    parsecraft supports two installation modes:
    - Core only: `pip install parsecraft` (no external dependencies)
    - Locale-aware: `pip install parsecraft[babel]` (adds decimal_number)

    This module ensures that:
    1. Core installations never trigger Babel imports
    2. Locale-aware parsers get a helpful error when Babel is missing
    3. Babel types are available for TYPE_CHECKING without runtime import

Usage Pattern:
    from parsecraft.core.babel_compat import require_babel

    def my_parser(locale_code: str) -> Parser[Decimal]:
        require_babel("my_parser")  # Raises BabelImportError if missing
        numbers = get_babel_numbers()
        ...

Python 3.13+.
"""

from __future__ import annotations

from decimal import Decimal
from functools import lru_cache
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from babel import Locale
    from babel.core import UnknownLocaleError as UnknownLocaleErrorType
    from babel.numbers import NumberFormatError as NumberFormatErrorType


# pylint: disable=unnecessary-ellipsis
class BabelNumbersProtocol(Protocol):
    """Protocol for the subset of babel.numbers used by parsecraft."""

    def parse_decimal(
        self, string: str, locale: Locale | str | None = None, strict: bool = False
    ) -> Decimal:
        """Parse a locale-formatted decimal string."""
        ...

    def get_decimal_symbol(self, locale: Locale | str | None = None) -> str:
        """Locale decimal separator."""
        ...

    def get_group_symbol(self, locale: Locale | str | None = None) -> str:
        """Locale grouping separator."""
        ...

    def get_minus_sign_symbol(self, locale: Locale | str | None = None) -> str:
        """Locale minus sign."""
        ...
# pylint: enable=unnecessary-ellipsis


__all__ = [
    "BabelImportError",
    "BabelNumbersProtocol",
    "get_babel_numbers",
    "get_locale_class",
    "get_number_format_error",
    "get_unknown_locale_error",
    "is_babel_available",
    "require_babel",
]


@lru_cache(maxsize=1)
def _check_babel_available() -> bool:
    """Check if Babel is installed (computed once, cached via lru_cache)."""
    try:
        import babel  # noqa: F401, PLC0415  # pylint: disable=unused-import

        return True
    except ImportError:
        return False


class BabelImportError(ImportError):
    """Raised when Babel is required but not installed."""

    def __init__(self, feature: str) -> None:
        """Create error with feature-specific message.

        Args:
            feature: Name of the feature/function requiring Babel
        """
        message = (
            f"{feature} requires Babel for CLDR locale data. "
            "Install with: pip install parsecraft[babel]"
        )
        super().__init__(message)
        self.feature = feature


def is_babel_available() -> bool:
    """True if Babel is installed and importable (cached)."""
    return _check_babel_available()


def require_babel(feature: str) -> None:
    """Assert that Babel is available.

    Args:
        feature: Name of the feature requiring Babel (for error message)

    Raises:
        BabelImportError: If Babel is not installed
    """
    if not _check_babel_available():
        raise BabelImportError(feature)


def get_locale_class() -> type[Locale]:
    """The Babel Locale class.

    Raises:
        BabelImportError: If Babel is not installed
    """
    require_babel("get_locale_class")
    from babel import Locale  # noqa: PLC0415

    return Locale


def get_unknown_locale_error() -> type[UnknownLocaleErrorType]:
    """The Babel UnknownLocaleError exception class.

    Raises:
        BabelImportError: If Babel is not installed
    """
    require_babel("get_unknown_locale_error")
    from babel.core import UnknownLocaleError  # noqa: PLC0415

    return UnknownLocaleError


def get_number_format_error() -> type[NumberFormatErrorType]:
    """The Babel NumberFormatError exception class.

    Raises:
        BabelImportError: If Babel is not installed
    """
    require_babel("get_number_format_error")
    from babel.numbers import NumberFormatError  # noqa: PLC0415

    return NumberFormatError


def get_babel_numbers() -> BabelNumbersProtocol:
    """The babel.numbers module.

    Raises:
        BabelImportError: If Babel is not installed
    """
    require_babel("get_babel_numbers")
    from babel import numbers  # noqa: PLC0415

    return numbers
