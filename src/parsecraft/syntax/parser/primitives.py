"""Primitive parsers built directly from predicates and literals.

Every other parser in parsecraft is composed from these. They work over
any Cursor source: for str input a symbol is a one-character string, for
bytes an int, for a token tuple whatever the tokens are.
"""

from collections.abc import Callable, Iterable, Sequence
from typing import Any

from parsecraft.diagnostics import ErrorTemplate, ParseFailure
from parsecraft.syntax.cursor import Cursor, ParseResult
from parsecraft.syntax.parser.core import Parser

__all__ = [
    "any_symbol",
    "character_that",
    "end_of_input",
    "none_of",
    "one_of",
    "string",
]


def character_that(predicate: Callable[[Any], bool]) -> Parser[Any]:
    """Consume one symbol if `predicate` accepts it.

    Fails at end of input or when the predicate returns False. The failure
    message carries a bounded snippet of the upcoming input.

    Args:
        predicate: Test applied to the first unconsumed symbol

    Returns:
        Parser producing the consumed symbol

    Example:
        >>> character_that(str.isupper).run("Xyz")
        ('X', 'yz')
    """

    def parse(cursor: Cursor) -> ParseResult[Any]:
        if cursor.is_eof or not predicate(cursor.current):
            raise ParseFailure(ErrorTemplate.predicate_failed(cursor.snippet()))
        return ParseResult(cursor.current, cursor.advance())

    return Parser(parse)


def none_of(symbols: Iterable[Any]) -> Parser[Any]:
    """Consume one symbol that is NOT in `symbols`.

    Example:
        >>> none_of("Xy").run("abc")
        ('a', 'bc')
    """
    excluded = frozenset(symbols)
    return character_that(lambda symbol: symbol not in excluded)


def one_of(symbols: Iterable[Any]) -> Parser[Any]:
    """Consume one symbol that is in `symbols`.

    Example:
        >>> one_of("abc").run("babx")
        ('b', 'abx')
    """
    allowed = frozenset(symbols)
    return character_that(lambda symbol: symbol in allowed)


def string[S: Sequence[Any]](literal: S) -> Parser[S]:
    """Consume `literal` if the remaining input starts with it.

    Consumes exactly len(literal) symbols and produces the literal itself.
    An empty literal always succeeds without consuming anything.

    Args:
        literal: Expected prefix, same sequence type as the input

    Example:
        >>> string("Xy").run("Xyzzz")
        ('Xy', 'zzz')
    """

    def parse(cursor: Cursor) -> ParseResult[S]:
        if not cursor.has_prefix(literal):
            raise ParseFailure(
                ErrorTemplate.expected_prefix(literal, cursor.snippet())
            )
        return ParseResult(literal, cursor.advance(len(literal)))

    return Parser(parse)


def _end_of_input(cursor: Cursor) -> ParseResult[None]:
    if not cursor.is_eof:
        raise ParseFailure(ErrorTemplate.expected_end_of_input(cursor.snippet()))
    return ParseResult(None, cursor)


# Any single symbol; fails only at end of input.
any_symbol: Parser[Any] = character_that(lambda _: True).named("any_symbol")

# Succeeds with None only when no input remains.
end_of_input: Parser[None] = Parser(_end_of_input, "end_of_input")
