"""parsecraft - composable parser combinators over immutable cursors.

Small primitive recognizers are assembled into larger parsers with a fixed
combinator algebra: sequencing, ordered choice with backtracking, bounded
and unbounded repetition, default-on-failure recovery, and monoid-based
result combination. A parser is an immutable value; running it against an
input either returns (value, remaining input) or raises ParseFailure.

Public API:
    Parser - Composable parser value (map, flat_map, |, <<, >>, +, ...)
    Cursor / ParseResult - Immutable input view and parse result
    ParseFailure - The single parse-failure exception
    character_that, one_of, none_of, string - Primitive parsers
    whitespace, double, string_ignoring_trailing_whitespace - Semantic parsers
    pure, apply, sequence, lift_a2, lift_a3, choice, combine, concat, ... - Combinators

Submodules:
    parsecraft.parsing - Locale-aware parsers (requires the [babel] extra)
    parsecraft.constants - Snippet bounds and symbol sets

Example:
    >>> from parsecraft import double, lift_a2, string_ignoring_trailing_whitespace
    >>> kv = lift_a2(lambda k, v: (k, v), string_ignoring_trailing_whitespace("x ="), double)
    >>> kv.run("x = 1.5;")
    (('x =', 1.5), ';')
"""

from .diagnostics import ParseFailure, ParsecraftError
from .syntax.cursor import Cursor, ParseResult
from .syntax.parser import (
    Parser,
    any_symbol,
    apply,
    character_that,
    choice,
    combine,
    concat,
    discard_left,
    discard_right,
    double,
    empty,
    end_of_input,
    fail,
    lazy,
    lift_a2,
    lift_a3,
    none_of,
    one_of,
    pure,
    sequence,
    string,
    string_ignoring_trailing_whitespace,
    whitespace,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("parsecraft")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "Cursor",
    "ParseFailure",
    "ParseResult",
    "ParsecraftError",
    "Parser",
    "__version__",
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
