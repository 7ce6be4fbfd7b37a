"""Locale-aware decimal parser.

decimal_number() is the locale-aware sibling of double: it collects a run
of ASCII digits and the locale's decimal and group separators (with an
optional leading locale minus sign) and interprets it with
babel.numbers.parse_decimal. Like double, a run that is collected but
cannot be interpreted fails WITHOUT consuming input.

Babel Dependency:
    Requires Babel for CLDR data. Import is deferred to construction
    time so core installations never load it. Raises BabelImportError
    with an install hint when Babel is missing.

Thread-safe. The built parser holds only immutable locale data.

Python 3.13+.
"""

from __future__ import annotations

import logging
from decimal import Decimal, InvalidOperation
from typing import TYPE_CHECKING

from parsecraft.constants import ASCII_DIGITS, DEFAULT_LOCALE, GROUP_SPACE_CHARS
from parsecraft.core.babel_compat import (
    get_babel_numbers,
    get_locale_class,
    get_number_format_error,
    get_unknown_locale_error,
    require_babel,
)
from parsecraft.diagnostics import ErrorTemplate, ParseFailure
from parsecraft.syntax.cursor import Cursor, ParseResult
from parsecraft.syntax.parser import Parser, lift_a2, one_of, string

if TYPE_CHECKING:
    from babel import Locale

__all__ = ["decimal_number"]

logger = logging.getLogger(__name__)


def _normalize_locale(locale_code: str) -> str:
    """Convert BCP 47 separators to Babel's POSIX form (en-US -> en_US)."""
    return locale_code.replace("-", "_")


def _resolve_locale(locale_code: str) -> Locale:
    locale_class = get_locale_class()
    unknown_locale_error = get_unknown_locale_error()
    try:
        return locale_class.parse(_normalize_locale(locale_code))
    except (unknown_locale_error, ValueError, TypeError) as e:
        raise ValueError(ErrorTemplate.unknown_locale(locale_code)) from e


def _is_space_group(group_symbol: str) -> bool:
    return len(group_symbol) == 1 and group_symbol in GROUP_SPACE_CHARS


def _number_body(decimal_symbol: str, group_symbol: str) -> Parser[list[str]]:
    """Collect the unsigned run of digits and separators.

    When the group separator is a space variant, any of GROUP_SPACE_CHARS
    may stand in for it, but only between digit runs: a trailing space
    stays in the input.
    """
    if not _is_space_group(group_symbol):
        return one_of(ASCII_DIGITS + decimal_symbol + group_symbol).one_or_more()

    run = one_of(ASCII_DIGITS + decimal_symbol).one_or_more()
    gap = one_of(GROUP_SPACE_CHARS).one_or_more()
    groups = (gap + run).zero_or_more().map(lambda chunks: sum(chunks, []))
    return run + groups


def decimal_number(
    locale_code: str = DEFAULT_LOCALE, *, strict: bool = False
) -> Parser[Decimal]:
    """Build a parser for a locale-formatted decimal number.

    Locales that group with a no-break or narrow space (fr_FR, lv_LV)
    also accept a plain space between digit groups.

    Args:
        locale_code: BCP 47 or POSIX locale identifier (e.g. "de-DE", "lv_LV")
        strict: Passed to babel.numbers.parse_decimal; rejects misplaced
            group separators when True

    Returns:
        Parser producing a Decimal

    Raises:
        BabelImportError: If Babel is not installed
        ValueError: If the locale is unknown

    Examples:
        >>> decimal_number("en_US").run("1,234.56 USD")
        (Decimal('1234.56'), ' USD')
        >>> decimal_number("de_DE").run("1.234,5 EUR")
        (Decimal('1234.5'), ' EUR')
    """
    require_babel("decimal_number")
    numbers = get_babel_numbers()
    number_format_error = get_number_format_error()
    locale = _resolve_locale(locale_code)

    decimal_symbol = numbers.get_decimal_symbol(locale)
    group_symbol = numbers.get_group_symbol(locale)
    minus_symbol = numbers.get_minus_sign_symbol(locale)
    logger.debug(
        "decimal_number(%s): decimal=%r group=%r minus=%r",
        locale_code,
        decimal_symbol,
        group_symbol,
        minus_symbol,
    )

    def normalize(text: str) -> str:
        if not _is_space_group(group_symbol):
            return text
        return "".join(group_symbol if c in GROUP_SPACE_CHARS else c for c in text)

    def interpret(signed: tuple[bool, str]) -> Parser[Decimal]:
        negative, text = signed
        normalized = normalize(text)

        def parse(cursor: Cursor) -> ParseResult[Decimal]:
            try:
                value = numbers.parse_decimal(normalized, locale=locale, strict=strict)
            except (number_format_error, InvalidOperation, ValueError) as e:
                raise ParseFailure(
                    ErrorTemplate.invalid_decimal(text, locale_code, str(e))
                ) from None
            return ParseResult(-value if negative else value, cursor)

        return Parser(parse)

    body = _number_body(decimal_symbol, group_symbol)
    signed = lift_a2(
        lambda negative, symbols: (negative, "".join(symbols)),
        string(minus_symbol).as_bool(),
        body,
    )
    return signed.flat_map(interpret).named(f"decimal_number({locale_code})")
