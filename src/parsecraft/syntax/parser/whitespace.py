"""Whitespace parsers."""

from parsecraft.constants import WHITESPACE_CHARS
from parsecraft.syntax.parser.core import Parser
from parsecraft.syntax.parser.primitives import one_of, string

__all__ = ["string_ignoring_trailing_whitespace", "whitespace"]

# One blank symbol: space, tab, newline or carriage return.
whitespace: Parser[str] = one_of(WHITESPACE_CHARS).named("whitespace")


def string_ignoring_trailing_whitespace(literal: str) -> Parser[str]:
    """Match `literal`, then consume any trailing whitespace.

    The whitespace stage never fails, so this fails only when the literal
    itself does not match.

    Example:
        >>> string_ignoring_trailing_whitespace("foo").run("foo   bar")
        ('foo', 'bar')
    """
    return string(literal).skip(whitespace.zero_or_more())
