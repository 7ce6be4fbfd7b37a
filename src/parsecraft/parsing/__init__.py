"""Locale-aware parsers backed by Babel CLDR data.

Public API:
    decimal_number - Parser[Decimal] for locale-formatted numbers

Example:
    >>> from parsecraft.parsing import decimal_number
    >>> decimal_number("lv-LV").run("12,5 kg")
    (Decimal('12.5'), ' kg')

Python 3.13+. Requires the [babel] extra.
"""

from .numbers import decimal_number

__all__ = ["decimal_number"]
