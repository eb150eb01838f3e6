"""Running combinators over a user-defined cursor.

The combinators never assume the stock Cursor. Any immutable value with
``is_eof``, ``current`` and ``advance()`` works, so grammars can run
directly over a lexer's own token structure. Here the tokens live in a
linked list, and every token carries its source line for error reports.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from tokencomb import CompositionError, Cursor, Grammar, TokenCursor, parse


@dataclass(frozen=True, slots=True)
class Node:
    text: str
    line: int
    rest: Node | None


@dataclass(frozen=True, slots=True)
class LineCursor:
    """Cursor over a linked list of (text, line) tokens."""

    node: Node | None

    @classmethod
    def from_lines(cls, source: str) -> LineCursor:
        words = [
            (word, number)
            for number, line in enumerate(source.splitlines(), start=1)
            for word in line.split()
        ]
        node: Node | None = None
        for text, line in reversed(words):
            node = Node(text, line, node)
        return cls(node)

    @property
    def is_eof(self) -> bool:
        return self.node is None

    @property
    def current(self) -> Node:
        if self.node is None:
            raise EOFError("end of input")
        return self.node

    def advance(self) -> LineCursor:
        return self if self.node is None else LineCursor(self.node.rest)


def build_assignments() -> Any:
    """assignment := NAME "=" NAME ";" ; program := assignment*"""
    g = Grammar(LineCursor)
    word = g.map(g.one, lambda node: node.text)

    def keyword(text: str) -> Any:
        return g.map(word, g.filter(lambda value: value == text))

    assignment = g.map(
        g.seq(word, keyword("="), word, keyword(";")),
        lambda name, _eq, value, _semi: (name, value),
    )
    return g.map(g.rep(assignment), dict)


def main() -> None:
    """Parse assignments from a multi-line source."""
    source = "a = one ;\nb = two ;\nc = three ;"
    cursor = LineCursor.from_lines(source)
    print(f"LineCursor satisfies TokenCursor: {isinstance(cursor, TokenCursor)}")

    result = parse(build_assignments(), cursor)
    print(result.value)  # type: ignore[union-attr]
    # Output: {'a': 'one', 'b': 'two', 'c': 'three'}

    print()
    print("Mixing cursor types is rejected when the grammar is built:")
    try:
        _ = Grammar(LineCursor).one & Grammar(Cursor).one
    except CompositionError as e:
        print(e)


if __name__ == "__main__":
    main()
