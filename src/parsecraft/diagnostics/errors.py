"""parsecraft exception hierarchy.

A single parse-failure kind carries a rendered, human-readable message.
There is no error-code taxonomy: combinators either absorb a failure
(fallback, ordered choice, repetition) or re-raise it unchanged.

Python 3.13+. Zero external dependencies.
"""

__all__ = ["ParseFailure", "ParsecraftError"]


class ParsecraftError(Exception):
    """Base exception for all parsecraft errors."""


class ParseFailure(ParsecraftError):
    """Raised when a parser does not match its input.

    The failure is terminal and immutable: it carries only the rendered
    description, which may embed a short snippet of upcoming input and
    counts. No partial result is ever returned alongside it.

    Attributes:
        message: Human-readable description of the mismatch

    Example:
        >>> from parsecraft import string
        >>> try:
        ...     string("Xy").run("abababa")
        ... except ParseFailure as failure:
        ...     print(failure.message)
        Expected prefix 'Xy' but found 'abababa'
    """

    __slots__ = ("_message",)

    def __init__(self, message: str) -> None:
        """Initialize ParseFailure.

        Args:
            message: Rendered failure description (see ErrorTemplate)
        """
        super().__init__(message)
        self._message = message

    @property
    def message(self) -> str:
        """Rendered failure description."""
        return self._message

    def __repr__(self) -> str:
        return f"ParseFailure({self._message!r})"
