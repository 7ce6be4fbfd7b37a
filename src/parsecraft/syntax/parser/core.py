"""Parser value type and its combinator algebra.

A Parser wraps a total function from Cursor to ParseResult. Failure is
signalled by raising ParseFailure. Parsers hold no state and never keep a
cursor between invocations, so one parser value can be built once (usually
at import time) and run any number of times, from any number of threads.

Architecture:
    Combinators are methods that return NEW parsers closing over their
    inputs; nothing runs at build time. Running a composite parser recurses
    through those closures, each layer handing its remaining cursor to the
    next. Because cursors are immutable values, ordered choice and fallback
    retry from the cursor they were given: there is nothing to roll back.

Failure Propagation:
    Every combinator re-raises an inner ParseFailure unchanged, except:
    - fallback() and as_bool(), which replace it with a default value
    - or_else() / ``|``, which retry the right-hand parser
    - the repetition loops, which stop at the first failure

    Only ParseFailure is caught. Exceptions raised by user predicates or
    mapping functions propagate as-is.

Recursion:
    zero_or_more(), one_or_more() and repeated() are iterative. flat_map()
    chains and recursive grammars built with lazy() use one Python stack
    frame per nesting level, so pathologically deep input raises
    RecursionError.

Operators:
    a | b   ordered choice (or_else)
    a << b  run both, keep the left value (skip)
    a >> b  run both, keep the right value (then)
    a + b   run both, combine values with ``+`` (monoid combination)
"""

from __future__ import annotations

import logging
import operator
from collections.abc import Callable, Sequence
from dataclasses import dataclass, replace
from typing import Any

from parsecraft.diagnostics import ErrorTemplate, ParseFailure
from parsecraft.syntax.cursor import Cursor, ParseResult

__all__ = ["Parser"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Parser[A]:
    """Immutable parser producing values of type A.

    Attributes:
        fn: Parse function; returns ParseResult or raises ParseFailure
        name: Optional label used in repr() and traced() output

    Example:
        >>> from parsecraft import one_of, string
        >>> digits = one_of("0123456789").one_or_more().map("".join)
        >>> digits.run("42 apples")
        ('42', ' apples')
        >>> (string("peter") | string("pete")).run("pete hello")
        ('pete', ' hello')
    """

    fn: Callable[[Cursor], ParseResult[A]]
    name: str = ""

    def __repr__(self) -> str:
        return f"Parser({self.name})" if self.name else "Parser(<anonymous>)"

    # ------------------------------------------------------------------
    # Running
    # ------------------------------------------------------------------

    def parse(self, cursor: Cursor) -> ParseResult[A]:
        """Run against a cursor.

        Args:
            cursor: Input position to start from

        Returns:
            ParseResult with the value and the remaining cursor

        Raises:
            ParseFailure: If the input does not match
        """
        return self.fn(cursor)

    def run(self, source: Sequence[Any] | Cursor) -> tuple[A, Sequence[Any]]:
        """Run against a whole input and return (value, remaining input).

        The remaining input has the same type as the source (str in,
        str out; tuple in, tuple out).

        Args:
            source: Raw symbol sequence, or a Cursor into one

        Returns:
            Tuple of parsed value and unconsumed suffix

        Raises:
            ParseFailure: If the input does not match
        """
        cursor = source if isinstance(source, Cursor) else Cursor(source)
        try:
            result = self.fn(cursor)
        except ParseFailure as failure:
            logger.debug("%r failed: %s", self, failure.message)
            raise
        return result.value, result.cursor.remaining

    # ------------------------------------------------------------------
    # Mapping and chaining
    # ------------------------------------------------------------------

    def map[B](self, transform: Callable[[A], B]) -> Parser[B]:
        """Apply a pure function to the parsed value.

        The cursor passes through unchanged; failures propagate unchanged.
        """

        def parse(cursor: Cursor) -> ParseResult[B]:
            result = self.fn(cursor)
            return ParseResult(transform(result.value), result.cursor)

        return Parser(parse)

    def flat_map[B](self, transform: Callable[[A], Parser[B]]) -> Parser[B]:
        """Monadic bind: choose the next parser from the parsed value.

        The parser returned by `transform` runs on the remaining cursor.
        If either stage fails the whole parser fails, and since the
        caller still holds its original cursor nothing is consumed.

        Example:
            >>> from parsecraft import one_of, string
            >>> count = one_of("123").map(int)
            >>> stars = count.flat_map(lambda n: string("*").repeated(n))
            >>> stars.run("3***!")
            (['*', '*', '*'], '!')
        """

        def parse(cursor: Cursor) -> ParseResult[B]:
            result = self.fn(cursor)
            return transform(result.value).fn(result.cursor)

        return Parser(parse)

    # ------------------------------------------------------------------
    # Applicative sequencing
    # ------------------------------------------------------------------

    def apply[B, C](self: Parser[Callable[[B], C]], argument: Parser[B]) -> Parser[C]:
        """Apply a parsed function to a parsed argument.

        The function parser always runs first, then `argument` on the
        remaining input.
        """
        return self.flat_map(lambda transform: argument.map(transform))

    def then[B](self, other: Parser[B]) -> Parser[B]:
        """Run self then other, keep other's value (discard left)."""
        return self.flat_map(lambda _: other)

    def skip(self, other: Parser[Any]) -> Parser[A]:
        """Run self then other, keep self's value (discard right).

        Used to enforce a delimiter without keeping it.
        """
        return self.flat_map(lambda value: other.map(lambda _: value))

    def between(self, open_: Parser[Any], close: Parser[Any]) -> Parser[A]:
        """Run open, self, close; keep only self's value.

        Example:
            >>> from parsecraft import string
            >>> string("foo").between(string("["), string("]")).run("[foo] xyz!")
            ('foo', ' xyz!')
        """
        return open_.then(self).skip(close)

    def combine(
        self, other: Parser[A], op: Callable[[A, A], A] = operator.add
    ) -> Parser[A]:
        """Run self then other and merge both values with `op`.

        `op` should be associative; together with a parser that always
        succeeds with op's identity (see combinators.empty) this forms a
        monoid over parsers.
        """
        return self.flat_map(lambda left: other.map(lambda right: op(left, right)))

    # ------------------------------------------------------------------
    # Choice and recovery
    # ------------------------------------------------------------------

    def or_else[B](self, other: Parser[B]) -> Parser[A | B]:
        """Ordered choice: try self, and on failure try other from the same cursor.

        First match wins: if self succeeds its result is returned even when
        other could consume more. other's failure propagates unchanged.
        """

        def parse(cursor: Cursor) -> ParseResult[A | B]:
            try:
                return self.fn(cursor)
            except ParseFailure:
                return other.fn(cursor)

        return Parser(parse)

    def fallback(self, default: A) -> Parser[A]:
        """Return `default` without consuming anything if self fails.

        Example:
            >>> from parsecraft import string
            >>> string("peter").fallback("someone").run("yadda")
            ('someone', 'yadda')
        """

        def parse(cursor: Cursor) -> ParseResult[A]:
            try:
                return self.fn(cursor)
            except ParseFailure:
                return ParseResult(default, cursor)

        return Parser(parse)

    def as_true(self) -> Parser[bool]:
        """True when self succeeds; self's failure propagates."""
        return self.map(lambda _: True)

    def as_false(self) -> Parser[bool]:
        """False when self succeeds (the token marks falsehood); failure propagates."""
        return self.map(lambda _: False)

    def as_bool(self) -> Parser[bool]:
        """True when self succeeds, False (consuming nothing) when it fails."""
        return self.as_true().fallback(False)

    # ------------------------------------------------------------------
    # Repetition
    # ------------------------------------------------------------------

    def zero_or_more(self) -> Parser[list[A]]:
        """Collect matches until the first failure. Never fails.

        The remaining cursor is the one after the last success. A match that
        consumes nothing is collected and then ends the loop, so zero-width
        inner parsers cannot spin forever.

        Example:
            >>> from parsecraft import one_of
            >>> one_of("abc").zero_or_more().run("abcxab")
            (['a', 'b', 'c'], 'xab')
        """

        def parse(cursor: Cursor) -> ParseResult[list[A]]:
            values: list[A] = []
            return ParseResult(values, _collect(self, cursor, values))

        return Parser(parse)

    def one_or_more(self) -> Parser[list[A]]:
        """Like zero_or_more(), but the first attempt's failure propagates."""

        def parse(cursor: Cursor) -> ParseResult[list[A]]:
            first = self.fn(cursor)
            values = [first.value]
            if first.cursor.pos == cursor.pos:
                return ParseResult(values, first.cursor)
            return ParseResult(values, _collect(self, first.cursor, values))

        return Parser(parse)

    def repeated(self, times: int) -> Parser[list[A]]:
        """Match exactly `times` occurrences.

        All or nothing: if fewer than `times` matches are possible the
        parser fails, reporting the requested and achieved counts, the
        partial values and the residual input in the message. The partial
        values are never returned as a result.

        Raises:
            ValueError: If times is negative (at construction)

        Example:
            >>> from parsecraft import string
            >>> string("blob").repeated(2).run("blobblob!")
            (['blob', 'blob'], '!')
        """
        if times < 0:
            raise ValueError(ErrorTemplate.negative_repetition(times))

        def parse(cursor: Cursor) -> ParseResult[list[A]]:
            values: list[A] = []
            rest = cursor
            while len(values) < times:
                try:
                    result = self.fn(rest)
                except ParseFailure:
                    break
                values.append(result.value)
                rest = result.cursor
            if len(values) != times:
                raise ParseFailure(
                    ErrorTemplate.repetition_short(
                        times, len(values), values, rest.snippet()
                    )
                )
            return ParseResult(values, rest)

        return Parser(parse)

    def once(self) -> Parser[list[A]]:
        """repeated(1)."""
        return self.repeated(1)

    # ------------------------------------------------------------------
    # Diagnostics
    # ------------------------------------------------------------------

    def named(self, name: str) -> Parser[A]:
        """Same parser, labelled for repr() and logging."""
        return replace(self, name=name)

    def traced(self, label: str | None = None) -> Parser[A]:
        """Same parser, logging every attempt at DEBUG level.

        Logs the upcoming input on entry, the value and consumed count on
        success, and the failure message on failure (which is re-raised).
        """
        tag = label or self.name or "parser"

        def parse(cursor: Cursor) -> ParseResult[A]:
            logger.debug("%s: trying at %r", tag, cursor.snippet())
            try:
                result = self.fn(cursor)
            except ParseFailure as failure:
                logger.debug("%s: failed: %s", tag, failure.message)
                raise
            logger.debug(
                "%s: matched %r, consumed %d",
                tag,
                result.value,
                result.cursor.pos - cursor.pos,
            )
            return result

        return Parser(parse, tag)

    # ------------------------------------------------------------------
    # Operators
    # ------------------------------------------------------------------

    def __or__[B](self, other: Parser[B]) -> Parser[A | B]:
        return self.or_else(other)

    def __lshift__(self, other: Parser[Any]) -> Parser[A]:
        return self.skip(other)

    def __rshift__[B](self, other: Parser[B]) -> Parser[B]:
        return self.then(other)

    def __add__(self, other: Parser[A]) -> Parser[A]:
        return self.combine(other)


def _collect[A](parser: Parser[A], cursor: Cursor, values: list[A]) -> Cursor:
    """Append matches of `parser` to `values` until it fails; return the final cursor.

    Stops after a match that consumed nothing.
    """
    while True:
        try:
            result = parser.fn(cursor)
        except ParseFailure:
            return cursor
        values.append(result.value)
        if result.cursor.pos == cursor.pos:
            return result.cursor
        cursor = result.cursor
