"""Free-function combinators over Parser.

Function forms of the Parser methods, plus the constructors that have no
receiver: pure(), fail(), empty(), lazy(), and the n-ary sequence(),
choice() and concat().

Monoid Combination:
    Python has no implicit type-capability lookup, so monoid combination
    takes an explicit combine function and identity value. The default
    operator.add covers str, list and tuple results:

        >>> from parsecraft import string
        >>> word = concat([string("ab"), string("cd")], "")
        >>> word.run("abcdef")
        ('abcd', 'ef')
"""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable
from functools import reduce
from typing import Any

from parsecraft.diagnostics import ErrorTemplate, ParseFailure
from parsecraft.syntax.cursor import Cursor, ParseResult
from parsecraft.syntax.parser.core import Parser

__all__ = [
    "apply",
    "choice",
    "combine",
    "concat",
    "discard_left",
    "discard_right",
    "empty",
    "fail",
    "lazy",
    "lift_a2",
    "lift_a3",
    "pure",
    "sequence",
]


def pure[A](value: A) -> Parser[A]:
    """Always succeed with `value`, consuming nothing."""
    return Parser(lambda cursor: ParseResult(value, cursor))


def fail(message: str) -> Parser[Any]:
    """Always fail with `message`, consuming nothing."""

    def parse(cursor: Cursor) -> ParseResult[Any]:
        raise ParseFailure(message)

    return Parser(parse)


def apply[B, C](transform: Parser[Callable[[B], C]], argument: Parser[B]) -> Parser[C]:
    """Run `transform` then `argument`; apply the parsed function to the parsed value."""
    return transform.apply(argument)


def discard_left[B](lhs: Parser[Any], rhs: Parser[B]) -> Parser[B]:
    """Run both in order and keep the right value (``lhs >> rhs``)."""
    return lhs.then(rhs)


def discard_right[A](lhs: Parser[A], rhs: Parser[Any]) -> Parser[A]:
    """Run both in order and keep the left value (``lhs << rhs``)."""
    return lhs.skip(rhs)


def sequence(*parsers: Parser[Any]) -> Parser[tuple[Any, ...]]:
    """Run parsers left to right and return a tuple of their values.

    Fails with the first failing parser's failure.
    """

    def parse(cursor: Cursor) -> ParseResult[tuple[Any, ...]]:
        values = []
        for parser in parsers:
            result = parser.fn(cursor)
            values.append(result.value)
            cursor = result.cursor
        return ParseResult(tuple(values), cursor)

    return Parser(parse)


def lift_a2[A, B, C](
    transform: Callable[[A, B], C], first: Parser[A], second: Parser[B]
) -> Parser[C]:
    """Lift a 2-ary function over two sequential parsers.

    Example:
        >>> from parsecraft import none_of, string
        >>> name = none_of(",;").zero_or_more().map("".join)
        >>> pair = lift_a2(lambda last, first: (first, last), name << string(","), name)
        >>> pair.run("McPerson,John;")
        (('John', 'McPerson'), ';')
    """
    curried = pure(lambda a: lambda b: transform(a, b))
    return curried.apply(first).apply(second)


def lift_a3[A, B, C, D](
    transform: Callable[[A, B, C], D],
    first: Parser[A],
    second: Parser[B],
    third: Parser[C],
) -> Parser[D]:
    """Lift a 3-ary function over three sequential parsers."""
    curried = pure(lambda a: lambda b: lambda c: transform(a, b, c))
    return curried.apply(first).apply(second).apply(third)


def choice(*parsers: Parser[Any]) -> Parser[Any]:
    """Ordered choice over any number of alternatives.

    Each alternative is tried against the original cursor; the first
    success wins and the last alternative's failure propagates.

    Raises:
        ValueError: If no parsers are given
    """
    if not parsers:
        raise ValueError(ErrorTemplate.empty_choice())
    return reduce(Parser.or_else, parsers)


def combine[A](
    lhs: Parser[A], rhs: Parser[A], op: Callable[[A, A], A] = operator.add
) -> Parser[A]:
    """Run lhs then rhs and merge their values with the associative `op`."""
    return lhs.combine(rhs, op)


def empty[A](identity: A) -> Parser[A]:
    """Monoid identity for combine(): succeed with `identity`, consume nothing."""
    return pure(identity)


def concat[A](
    parsers: Iterable[Parser[A]], identity: A, op: Callable[[A, A], A] = operator.add
) -> Parser[A]:
    """Fold parsers with combine(), starting from empty(identity).

    An empty iterable gives empty(identity).
    """
    return reduce(lambda acc, parser: combine(acc, parser, op), parsers, empty(identity))


def lazy[A](factory: Callable[[], Parser[A]]) -> Parser[A]:
    """Defer parser construction to parse time, for recursive grammars.

    `factory` is called on every parse, so it should just return an
    already-built parser (typically a module-level name defined later).
    Recursion depth equals the nesting depth of the input.

    Example:
        >>> from parsecraft import string
        >>> nested = lazy(lambda: (string("(") >> nested << string(")")) | string("x"))
        >>> nested.run("((x))!")
        ('x', '!')
    """
    return Parser(lambda cursor: factory().fn(cursor))
