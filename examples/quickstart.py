"""Quickstart example for tokencomb.

This example demonstrates the core combinators over a stream of
single-character tokens.

Note: Examples print ``None`` for failed matches. A failed match is never an
exception; only misuse of the library raises.
"""

import operator
from functools import partial

from tokencomb import (
    Combinator,
    ConsumeOne,
    Cursor,
    Filter,
    OrderedChoice,
    RepeatOneOrMore,
    RepeatZeroOrMore,
    Select,
    Sequence,
    accept,
    parse,
    parse_all,
    reject,
)
from tokencomb.outcome import Outcome


def literal(token: str) -> Combinator:
    """Combinator matching exactly ``token``."""
    return ConsumeOne()[Filter(partial(operator.eq, token))]


# Example 1: Sequencing
print("=" * 50)
print("Example 1: Sequence")
print("=" * 50)

one = ConsumeOne()
result = parse(Sequence(one, one, one), ["A", "B", "C"])
print(result.value, result.cursor.is_eof)
# Output: ValueGroup('A', 'B', 'C') True

# Example 2: Ordered choice
print("\n" + "=" * 50)
print("Example 2: Ordered Choice")
print("=" * 50)

pair_or_single = OrderedChoice(Sequence(one, one), one)
print(parse(pair_or_single, ["X"]).value)
# Output: X
print(parse(pair_or_single, ["X", "Y"]).value)
# Output: ValueGroup('X', 'Y')

# Example 3: Operators
print("\n" + "=" * 50)
print("Example 3: Surface Operators")
print("=" * 50)

# ~c Optional, a & b Sequence, a | b OrderedChoice, c[f] Map
signed = (~(literal("+") | literal("-")) & one)[
    lambda sign, digit: -int(digit) if sign == "-" else int(digit)
]
print(parse(signed, "-7").value, parse(signed, "7").value)
# Output: -7 7

# Example 4: Fallible transforms
print("\n" + "=" * 50)
print("Example 4: Fallible Map")
print("=" * 50)


def digit_value(token: str) -> Outcome[int]:
    """Accept decimal digits, reject anything else."""
    return accept(int(token)) if token.isdigit() else reject()


digit = one[digit_value]
print(parse(digit, "5").value)
# Output: 5
print(parse(digit, "x"))
# Output: None

# Example 5: Repetition and Select
print("\n" + "=" * 50)
print("Example 5: Repetition")
print("=" * 50)

is_one = Filter(partial(operator.eq, 1))
ones = RepeatZeroOrMore(one[is_one])
result = parse(ones, [1, 1, 1, 2])
print(result.value, result.cursor.current)
# Output: [1, 1, 1] 2

print(parse(RepeatOneOrMore(one), []))
# Output: None

bracketed = (literal("[") & RepeatZeroOrMore(digit) & literal("]"))[Select(1)]
print(parse_all(bracketed, "[123]").value)
# Output: [1, 2, 3]

print("\n" + "=" * 50)
print("Quickstart complete!")
print("=" * 50)
