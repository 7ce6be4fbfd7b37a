"""Contact Card Example - A Small Grammar From Primitives.

CORE ONLY: This example works WITHOUT Babel. Install with:
    pip install parsecraft

Demonstrates how the combinator algebra composes:

1. Primitive recognizers (none_of, one_of, string)
2. Applicative assembly into records (lift_a2)
3. Bounded and unbounded repetition
4. Ordered choice and recovery
5. Reading failure messages

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass

from parsecraft import (
    ParseFailure,
    Parser,
    double,
    lift_a2,
    none_of,
    one_of,
    string,
    string_ignoring_trailing_whitespace,
)

EXAMPLE_DATA = """McPerson,John Jr.;555-123-9090
St. Personson,Alicia;555-789-1111
"""


@dataclass(frozen=True)
class Person:
    first_name: str
    last_name: str


@dataclass(frozen=True)
class ContactCard:
    person: Person
    phone_number: str


def build_grammar() -> Parser[ContactCard]:
    """One card per line: last,first;phone."""
    name = none_of(",;\n").zero_or_more().map("".join)
    person = lift_a2(lambda last, first: Person(first, last), name << string(","), name)
    phone = one_of("1234567890-").repeated(12).map("".join)
    return lift_a2(
        ContactCard,
        person << string(";"),
        phone << string("\n").zero_or_more(),
    )


def example_1_contact_cards() -> None:
    """Parse the two-line contact file."""
    print("=" * 60)
    print("Example 1: Contact Cards")
    print("=" * 60)

    cards, rest = build_grammar().zero_or_more().run(EXAMPLE_DATA)
    for card in cards:
        print(f"{card.person.first_name} {card.person.last_name}: {card.phone_number}")
    print(f"Remaining input: {rest!r}")
    print()


def example_2_choice_and_recovery() -> None:
    """Ordered choice, fallback and boolean projection."""
    print("=" * 60)
    print("Example 2: Choice and Recovery")
    print("=" * 60)

    unit = string("kg") | string("g") | string("lb")
    weight = lift_a2(lambda n, u: (n, u), double, unit.fallback("kg"))
    for text in ["12.5kg", "300g", "7"]:
        print(f"{text!r:10} -> {weight.run(text)}")

    negated = string("-").as_bool()
    print(f"'-5' negated? {negated.run('-5')[0]}")
    print()


def example_3_failures() -> None:
    """What a ParseFailure message looks like."""
    print("=" * 60)
    print("Example 3: Failure Messages")
    print("=" * 60)

    keyword = string_ignoring_trailing_whitespace("let")
    for parser, text in [
        (keyword, "var x = 1"),
        (string("blob").repeated(4), "blobblobblob foo"),
        (double, "..00"),
    ]:
        try:
            parser.run(text)
        except ParseFailure as failure:
            print(f"{parser!r}: {failure.message}")
    print()


def main() -> None:
    """Run all core examples."""
    print()
    print("parsecraft Core Examples")
    print()

    example_1_contact_cards()
    example_2_choice_and_recovery()
    example_3_failures()

    print("=" * 60)
    print("All examples completed successfully!")
    print("=" * 60)


if __name__ == "__main__":
    main()
