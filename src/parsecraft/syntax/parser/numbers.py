"""Numeric literal parser.

double collects a run of digits and decimal points, then interprets the
whole run with float(). Interpretation happens in a second flat_map stage;
when it fails the whole parser fails, and because the caller still holds
its starting cursor the collected symbols are NOT consumed. That keeps
double composable with fallback() and ordered choice:

    >>> from parsecraft import string
    >>> (double.fallback(-1.0) >> string("..00")).run("..00qq")
    ('..00', 'qq')
"""

from parsecraft.constants import DOUBLE_CHARS
from parsecraft.diagnostics import ErrorTemplate, ParseFailure
from parsecraft.syntax.cursor import Cursor, ParseResult
from parsecraft.syntax.parser.core import Parser
from parsecraft.syntax.parser.primitives import one_of

__all__ = ["double", "interpret_double"]


def interpret_double(symbols: list[str]) -> Parser[float]:
    """Parser that consumes nothing and yields float("".join(symbols)).

    Fails with an invalid-number message when the text is not a float
    (e.g. "..00" or "1.2.3").
    """
    text = "".join(symbols)

    def parse(cursor: Cursor) -> ParseResult[float]:
        try:
            value = float(text)
        except ValueError:
            raise ParseFailure(ErrorTemplate.invalid_number(text)) from None
        return ParseResult(value, cursor)

    return Parser(parse)


double: Parser[float] = (
    one_of(DOUBLE_CHARS).one_or_more().flat_map(interpret_double).named("double")
)
