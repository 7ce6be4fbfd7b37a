"""Locale Numbers Example - CLDR-Aware Decimal Parsing.

REQUIRES BABEL: Install with:
    pip install parsecraft[babel]

Demonstrates decimal_number(), the locale-aware counterpart of double:

1. Locale separators from CLDR data
2. Combining locale numbers with core parsers
3. Non-consuming failure on uninterpretable runs

Python 3.13+.
"""

from __future__ import annotations

from decimal import Decimal

from parsecraft import lift_a2, string, whitespace
from parsecraft.parsing import decimal_number


def example_1_locales() -> None:
    """Same quantity, different locales."""
    print("=" * 60)
    print("Example 1: Locale Separators")
    print("=" * 60)

    for locale_code, text in [
        ("en_US", "1,234.56"),
        ("de_DE", "1.234,56"),
        ("lv-LV", "1234,56"),
    ]:
        value, _ = decimal_number(locale_code).run(text)
        print(f"{locale_code:6} {text!r:12} -> {value}")
    print()


def example_2_price_tags() -> None:
    """A number followed by a currency code."""
    print("=" * 60)
    print("Example 2: Price Tags")
    print("=" * 60)

    code = string("EUR") | string("USD")
    price = lift_a2(
        lambda amount, currency: (amount, currency),
        decimal_number("de_DE") << whitespace.zero_or_more(),
        code,
    )
    print(price.run("1.299,00 EUR"))
    print()


def example_3_recovery() -> None:
    """A rejected run is left in the input."""
    print("=" * 60)
    print("Example 3: Recovery")
    print("=" * 60)

    lenient = decimal_number("en_US").fallback(Decimal(0))
    print(lenient.run(",,,x"))
    print()


def main() -> None:
    """Run all locale examples."""
    print()
    print("parsecraft Locale Examples")
    print()

    example_1_locales()
    example_2_price_tags()
    example_3_recovery()


if __name__ == "__main__":
    main()
