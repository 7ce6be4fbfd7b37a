"""Immutable cursor infrastructure for combinator parsing.

Implements the immutable cursor pattern: a cursor is a view (source plus
offset) over a sequence of symbols, never a buffer. Consuming input yields
a NEW cursor that is always a suffix of the old one, so backtracking needs
no save/restore: a failed alternative simply leaves the caller holding the
cursor it started with.

Python 3.13+. Zero external dependencies.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - Any Sequence works as source: str, bytes, tuple, list of tokens
    - EOF is a state (is_eof), not a return value
    - Every advance() returns NEW cursor (prevents infinite loops)
    - Symbols are never reordered, inserted or duplicated; only a prefix
      is ever dropped
"""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from parsecraft.constants import SNIPPET_ELLIPSIS, SNIPPET_LENGTH

__all__ = ["Cursor", "ParseResult"]


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable view over the unconsumed part of a symbol sequence.

    Example:
        >>> cursor = Cursor("hello")
        >>> cursor.current
        'h'
        >>> rest = cursor.advance(2)
        >>> rest.remaining
        'llo'
        >>> cursor.remaining  # Original unchanged (immutability)
        'hello'
        >>> Cursor("hi", 2).is_eof
        True
    """

    source: Sequence[Any]
    pos: int = 0

    def __post_init__(self) -> None:
        """Reject negative offsets."""
        if self.pos < 0:
            msg = f"Cursor position must be >= 0, got {self.pos}"
            raise ValueError(msg)

    @property
    def is_eof(self) -> bool:
        """True when no symbols remain.

        Use in while loops: `while not cursor.is_eof:`
        """
        return self.pos >= len(self.source)

    @property
    def is_empty(self) -> bool:
        """Alias for is_eof."""
        return self.is_eof

    @property
    def current(self) -> Any:
        """First unconsumed symbol.

        Raises:
            EOFError: If at end of input
        """
        if self.is_eof:
            msg = f"Unexpected EOF at position {self.pos}"
            raise EOFError(msg)
        return self.source[self.pos]

    def peek(self, offset: int = 0) -> Any | None:
        """Symbol at current position + offset, or None beyond EOF.

        Note:
            None is ambiguous for token sequences that contain None;
            prefer is_eof plus current there.
        """
        target_pos = self.pos + offset
        if target_pos >= len(self.source):
            return None
        return self.source[target_pos]

    def advance(self, count: int = 1) -> "Cursor":
        """Return new cursor with the first `count` symbols dropped.

        Clamped at end of input; the original cursor is unchanged.

        Raises:
            ValueError: If count is negative

        Example:
            >>> cursor = Cursor("hello")
            >>> cursor.advance().pos
            1
            >>> cursor.advance(10).pos
            5
        """
        if count < 0:
            msg = f"Advance count must be >= 0, got {count}"
            raise ValueError(msg)
        new_pos = min(self.pos + count, len(self.source))
        return Cursor(self.source, new_pos)

    def drop_first(self, count: int = 1) -> "Cursor":
        """Alias for advance()."""
        return self.advance(count)

    def has_prefix(self, literal: Sequence[Any]) -> bool:
        """True if `literal` is a prefix of the remaining input.

        `literal` must be the same kind of sequence as the source
        (a str for str sources, a tuple for tuple sources, and so on).

        Example:
            >>> Cursor("Xyzzz").has_prefix("Xy")
            True
            >>> Cursor("Xyzzz", 1).has_prefix("Xy")
            False
        """
        end = self.pos + len(literal)
        if end > len(self.source):
            return False
        return self.source[self.pos : end] == literal

    def slice_ahead(self, n: int) -> Sequence[Any]:
        """Up to n upcoming symbols without advancing.

        May return fewer symbols near EOF.

        Example:
            >>> Cursor("hello").slice_ahead(3)
            'hel'
            >>> Cursor("hello").slice_ahead(10)
            'hello'
        """
        return self.source[self.pos : self.pos + n]

    def take_prefix(self, n: int) -> Sequence[Any]:
        """Alias for slice_ahead()."""
        return self.slice_ahead(n)

    @property
    def remaining(self) -> Sequence[Any]:
        """Unconsumed suffix, with the same type as source."""
        return self.source[self.pos :]

    def __len__(self) -> int:
        """Number of unconsumed symbols."""
        return max(len(self.source) - self.pos, 0)

    def snippet(self, limit: int = SNIPPET_LENGTH) -> str:
        """Bounded, printable rendering of upcoming input for diagnostics.

        Example:
            >>> Cursor("abc").snippet()
            'abc'
            >>> Cursor("a" * 30).snippet(5)
            'aaaaa...'
        """
        ahead = self.slice_ahead(limit)
        if isinstance(ahead, str):
            text = ahead
        elif isinstance(ahead, bytes | bytearray):
            text = bytes(ahead).decode("utf-8", errors="replace")
        else:
            text = repr(list(ahead))
        if len(self) > limit:
            text += SNIPPET_ELLIPSIS
        return text


@dataclass(frozen=True, slots=True)
class ParseResult[T]:
    """Parser result containing parsed value and new cursor position.

    Type Parameters:
        T: The type of the parsed value

    Design:
        - Generic over result type T
        - Frozen for immutability
        - Contains BOTH parsed value AND new cursor
        - cursor is always a suffix of the cursor the parser was given

    Example:
        >>> cursor = Cursor("hello")
        >>> result = ParseResult("h", cursor.advance())
        >>> result.value
        'h'
        >>> result.cursor.remaining
        'ello'
    """

    value: T
    cursor: Cursor
