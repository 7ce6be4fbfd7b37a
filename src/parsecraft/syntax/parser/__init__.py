"""Parser abstraction, combinators, and the parsers built from them.

Module Organization:
- core.py: Parser value type and its method algebra
- combinators.py: Free-function combinators (pure, lift_a2, choice, concat, ...)
- primitives.py: Parsers built from predicates and literals
- whitespace.py: Whitespace and trailing-whitespace parsers
- numbers.py: Numeric literal parser (double)
"""

from parsecraft.syntax.parser.combinators import (
    apply,
    choice,
    combine,
    concat,
    discard_left,
    discard_right,
    empty,
    fail,
    lazy,
    lift_a2,
    lift_a3,
    pure,
    sequence,
)
from parsecraft.syntax.parser.core import Parser
from parsecraft.syntax.parser.numbers import double
from parsecraft.syntax.parser.primitives import (
    any_symbol,
    character_that,
    end_of_input,
    none_of,
    one_of,
    string,
)
from parsecraft.syntax.parser.whitespace import (
    string_ignoring_trailing_whitespace,
    whitespace,
)

__all__ = [
    "Parser",
    "any_symbol",
    "apply",
    "character_that",
    "choice",
    "combine",
    "concat",
    "discard_left",
    "discard_right",
    "double",
    "empty",
    "end_of_input",
    "fail",
    "lazy",
    "lift_a2",
    "lift_a3",
    "none_of",
    "one_of",
    "pure",
    "sequence",
    "string",
    "string_ignoring_trailing_whitespace",
    "whitespace",
]
