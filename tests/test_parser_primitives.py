"""Tests for syntax.parser.primitives module.

Primitive parsers: character_that, one_of, none_of, string, any_symbol,
end_of_input. Covers success/failure scenarios, message shapes, and the
suffix invariant on non-text inputs.
"""

from __future__ import annotations

import pytest
from hypothesis import event, example, given
from hypothesis import strategies as st

from parsecraft import ParseFailure
from parsecraft.constants import SNIPPET_LENGTH
from parsecraft.syntax.cursor import Cursor
from parsecraft.syntax.parser.primitives import (
    any_symbol,
    character_that,
    end_of_input,
    none_of,
    one_of,
    string,
)

# ============================================================================
# character_that
# ============================================================================


class TestCharacterThat:
    """Single-symbol predicate match."""

    def test_succeeds_on_matching_symbol(self) -> None:
        """Consumes exactly the matched symbol."""
        parser = character_that(lambda c: c == "X")

        assert parser.run("Xyz") == ("X", "yz")

    def test_fails_on_mismatch(self) -> None:
        """Failure message names the predicate and shows upcoming input."""
        parser = character_that(lambda c: c == "X")

        with pytest.raises(ParseFailure) as exc_info:
            parser.run("QQQQQQ")

        assert exc_info.value.message == "Predicate failed, found 'QQQQQQ'"

    def test_fails_on_empty_input(self) -> None:
        """Empty input never satisfies a predicate; predicate is not called."""
        calls: list[str] = []

        def predicate(symbol: str) -> bool:
            calls.append(symbol)
            return True

        with pytest.raises(ParseFailure, match="Predicate failed"):
            character_that(predicate).run("")
        assert calls == []

    def test_snippet_is_bounded(self) -> None:
        """Long upcoming input is truncated in the message."""
        text = "Q" * 100

        with pytest.raises(ParseFailure) as exc_info:
            character_that(str.isdigit).run(text)

        assert "Q" * SNIPPET_LENGTH + "..." in exc_info.value.message
        assert "Q" * (SNIPPET_LENGTH + 1) not in exc_info.value.message

    def test_predicate_exception_propagates(self) -> None:
        """Errors raised by the predicate are not turned into parse failures."""

        def broken(_: str) -> bool:
            msg = "boom"
            raise RuntimeError(msg)

        with pytest.raises(RuntimeError, match="boom"):
            character_that(broken).run("a")

    def test_parse_returns_parse_result(self) -> None:
        """parse() works directly on a cursor."""
        result = character_that(str.isalpha).parse(Cursor("ab", 1))

        assert result.value == "b"
        assert result.cursor.is_eof


# ============================================================================
# one_of / none_of
# ============================================================================


class TestOneOfNoneOf:
    """Set-membership wrappers over character_that."""

    def test_none_of_succeeds(self) -> None:
        """Symbol outside the set is consumed."""
        assert none_of("Xy").run("abc") == ("a", "bc")

    def test_none_of_fails(self) -> None:
        """Symbol inside the set is rejected."""
        with pytest.raises(ParseFailure):
            none_of("Xy").run("Xy")

    def test_one_of_succeeds(self) -> None:
        """Symbol inside the set is consumed."""
        assert one_of("abc").run("babababcaxbacx") == ("b", "abababcaxbacx")

    def test_one_of_fails(self) -> None:
        """Symbol outside the set is rejected."""
        with pytest.raises(ParseFailure):
            one_of("abc").run("Xyz")

    def test_one_of_many(self) -> None:
        """one_of(...).zero_or_more() collects the longest run."""
        parser = one_of("abc").zero_or_more()

        assert parser.run("babababcaxbacx") == (
            ["b", "a", "b", "a", "b", "a", "b", "c", "a"],
            "xbacx",
        )

    def test_one_of_tokens(self) -> None:
        """Sets of arbitrary hashable tokens work over token sequences."""
        parser = one_of({"+", "-"})

        assert parser.run(("+", 1, 2)) == ("+", (1, 2))

    @given(symbols=st.text(min_size=1, max_size=5), ch=st.characters())
    @example(symbols="abc", ch="a")
    def test_one_of_and_none_of_are_complementary(self, symbols: str, ch: str) -> None:
        """PROPERTY: exactly one of one_of/none_of accepts any symbol."""
        accepted = 0
        for parser in (one_of(symbols), none_of(symbols)):
            try:
                parser.run(ch)
                accepted += 1
            except ParseFailure:
                pass
        event(f"member={ch in symbols}")
        assert accepted == 1


# ============================================================================
# string
# ============================================================================


class TestString:
    """Literal-sequence match."""

    def test_succeeds_on_prefix(self) -> None:
        """Consumes exactly the literal."""
        assert string("Xy").run("Xyzzz") == ("Xy", "zzz")

    def test_fails_when_not_prefix(self) -> None:
        """Failure message names the literal and what was found."""
        with pytest.raises(ParseFailure) as exc_info:
            string("Xy").run("abababa")

        assert exc_info.value.message == "Expected prefix 'Xy' but found 'abababa'"

    def test_fails_on_partial_prefix_at_end(self) -> None:
        """A truncated literal at end of input does not match."""
        with pytest.raises(ParseFailure):
            string("blob").run("blo")

    def test_empty_literal_always_succeeds(self) -> None:
        """Empty literal consumes nothing."""
        assert string("").run("abc") == ("", "abc")
        assert string("").run("") == ("", "")

    def test_bytes_literal(self) -> None:
        """Byte literals match byte input."""
        assert string(b"GET").run(b"GET /") == (b"GET", b" /")

    def test_bytes_literal_failure_rendering(self) -> None:
        """Byte literals render as bytes in the message."""
        with pytest.raises(ParseFailure, match="Expected prefix b'GET'"):
            string(b"GET").run(b"POST")

    def test_token_literal(self) -> None:
        """Tuple literals match token tuples."""
        assert string(("let", "x")).run(("let", "x", "=")) == (("let", "x"), ("=",))


# ============================================================================
# any_symbol / end_of_input
# ============================================================================


class TestAnySymbolEndOfInput:
    """Supplementary primitives."""

    def test_any_symbol_consumes_one(self) -> None:
        """any_symbol matches whatever comes next."""
        assert any_symbol.run("?!") == ("?", "!")

    def test_any_symbol_fails_at_eof(self) -> None:
        """any_symbol fails only on empty input."""
        with pytest.raises(ParseFailure):
            any_symbol.run("")

    def test_end_of_input_succeeds_on_empty(self) -> None:
        """end_of_input yields None at EOF."""
        assert end_of_input.run("") == (None, "")

    def test_end_of_input_fails_with_leftover(self) -> None:
        """Leftover input is reported."""
        with pytest.raises(ParseFailure) as exc_info:
            end_of_input.run("tail")

        assert exc_info.value.message == "Expected end of input but found 'tail'"

    def test_anchoring_a_parser(self) -> None:
        """p << end_of_input rejects trailing garbage."""
        parser = string("abc") << end_of_input

        assert parser.run("abc") == ("abc", "")
        with pytest.raises(ParseFailure):
            parser.run("abcd")
