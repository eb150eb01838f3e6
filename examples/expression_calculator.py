"""Expression calculator built with Grammar.

Demonstrates a complete recursive grammar over lexer tokens:

1. A regex lexer producing (kind, text) tokens
2. Grammar rules bound to one cursor type
3. Recursion through a Deferred rule (parenthesized sub-expressions)
4. Left-associative folds for + - * / and a right-associative fold for ^
5. parse_all() rejecting trailing input

Python 3.13+.
"""

from __future__ import annotations

import logging
import operator
import re
from typing import Any

from tokencomb import Cursor, FoldRight, Grammar, IncompleteParseError, parse_all

Token = tuple[str, str]

_TOKEN_RE = re.compile(r"\s*(?:(?P<number>\d+)|(?P<op>[-+*/^()]))")

_BINARY = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": operator.truediv,
}


def tokenize(source: str) -> list[Token]:
    """Split ``source`` into (kind, text) tokens."""
    tokens: list[Token] = []
    pos = 0
    source = source.rstrip()
    while pos < len(source):
        match = _TOKEN_RE.match(source, pos)
        if match is None:
            msg = f"Unexpected character at {pos}: {source[pos]!r}"
            raise ValueError(msg)
        kind = match.lastgroup or "op"
        tokens.append((kind, match.group(kind)))
        pos = match.end()
    return tokens


def _fold(acc: float, step: tuple[str, float]) -> float:
    op, rhs = step
    return _BINARY[op](acc, rhs)


def _power(first: float, rest: list[tuple[str, float]]) -> float:
    """Right-associative ``first ^ e1 ^ e2 ...``."""
    operands = [first, *(exponent for _, exponent in rest)]
    return FoldRight(operator.pow)(operands[-1], operands[:-1])


def build_calculator() -> Any:
    """Grammar for arithmetic expressions, evaluating as it parses.

    expr   := term (("+" | "-") term)*
    term   := power (("*" | "/") power)*
    power  := atom ("^" atom)*
    atom   := NUMBER | "(" expr ")"
    """
    g = Grammar(Cursor)

    def op(symbol: str) -> Any:
        return g.map(g.one, g.filter(lambda token: token == ("op", symbol)))[
            lambda token: token[1]
        ]

    number = g.map(g.one, g.filter(lambda token: token[0] == "number"))[
        lambda token: int(token[1])
    ]

    expr = g.rule("expr")
    atom = number | g.map(op("(") & expr & op(")"), g.select(1))
    power = g.map(atom & g.rep(op("^") & atom), _power)
    term = g.map(power & g.rep((op("*") | op("/")) & power), g.foldl(_fold))
    expr.define(g.map(term & g.rep((op("+") | op("-")) & term), g.foldl(_fold)))
    return expr


def main() -> None:
    """Evaluate a few expressions."""
    logging.basicConfig(level=logging.INFO)
    calculator = build_calculator()

    print("=" * 60)
    print("Expression Calculator")
    print("=" * 60)

    for source in ["1 + 2 * 3", "(1 + 2) * 3", "2 ^ 3 ^ 2", "10 - 4 - 3", "7 / 2"]:
        result = parse_all(calculator, tokenize(source))
        print(f"{source:>14} = {result.value if result else 'no match'}")

    print()
    print("Trailing input is reported, not ignored:")
    try:
        parse_all(calculator, tokenize("(1 + 2) 3"))
    except IncompleteParseError as e:
        print(e)
        print(f"Prefix value: {e.result.value}")  # type: ignore[union-attr]


if __name__ == "__main__":
    main()
