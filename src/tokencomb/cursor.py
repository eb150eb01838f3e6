"""Immutable cursor infrastructure for combinator parsing.

Implements the immutable cursor pattern every combinator relies on.
Python 3.13+. Zero external dependencies.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - EOF is a state (is_eof), not a return value
    - Every advance() returns NEW cursor (the caller's cursor never moves)
    - A Result is ``ParseResult | None``; failure carries no cursor

Any object satisfying the TokenCursor protocol can drive the combinators,
so grammar authors may bring their own cursor over lexer output. Cursor
below is the stock implementation over an in-memory sequence.

Pattern Reference:
    - Haskell Parsec
    - Rust nom parser combinator library
"""

from collections.abc import Hashable, Iterable, Sequence
from dataclasses import dataclass
from typing import Protocol, Self, runtime_checkable

from tokencomb.diagnostics import ErrorTemplate

__all__ = ["Cursor", "ParseResult", "Result", "TokenCursor"]


@runtime_checkable
class TokenCursor[T](Protocol):
    """Capabilities the combinator core requires of a cursor.

    Implementations must be immutable values: advance() returns a new
    cursor and two cursors at the same position compare equal.
    """

    @property
    def is_eof(self) -> bool:
        """True when no token is left to read."""
        ...

    @property
    def current(self) -> T:
        """The token under the cursor (undefined at EOF)."""
        ...

    def advance(self) -> Self:
        """Return a cursor one token further on."""
        ...


@dataclass(frozen=True, slots=True)
class Cursor[T]:
    """Immutable position in an already-materialized token sequence.

    Key Design Decisions:
        1. Frozen dataclass - Immutability enforced by Python
        2. Slots - Memory efficiency (one cursor per successful step)
        3. Simple position - Just an integer offset
        4. EOF is a property - Not a return value
        5. current raises - No None handling needed

    Equality compares both the source and the position, so cursors over
    different streams never compare equal. Comparing cursors over distinct
    but equal sources walks both sources; cursors advanced from one start
    share the same source object and compare in constant time.

    Example:
        >>> cursor = Cursor.start("abc")
        >>> cursor.current
        'a'
        >>> new_cursor = cursor.advance()
        >>> new_cursor.current
        'b'
        >>> cursor.current  # Original unchanged (immutability)
        'a'
        >>> Cursor.start("").current
        Traceback (most recent call last):
        ...
        EOFError: Unexpected end of input at position 0
    """

    source: Sequence[T]
    pos: int = 0

    @classmethod
    def start(cls, tokens: Iterable[T]) -> "Cursor[T]":
        """Build a cursor at the first token.

        Immutable sequences (str, tuple, range, ...) are used in place; any
        other iterable, lists included, is copied into a tuple first so that
        the cursor stays hashable and unaffected by later list mutation.
        """
        if isinstance(tokens, Sequence) and isinstance(tokens, Hashable):
            source: Sequence[T] = tokens
        else:
            source = tuple(tokens)
        return cls(source, 0)

    @property
    def is_eof(self) -> bool:
        """Check if at end of input.

        Returns:
            True if position >= source length
        """
        return self.pos >= len(self.source)

    @property
    def current(self) -> T:
        """Get current token.

        Raises:
            EOFError: If at end of input
        """
        if self.is_eof:
            raise EOFError(ErrorTemplate.unexpected_eof(self.pos).message)
        return self.source[self.pos]

    @property
    def remaining(self) -> int:
        """Number of tokens left to read."""
        return max(len(self.source) - self.pos, 0)

    def peek(self, offset: int = 0) -> T | None:
        """Peek at token with offset without advancing.

        Returns:
            Token at position + offset, or None if beyond EOF
        """
        target_pos = self.pos + offset
        if target_pos < 0 or target_pos >= len(self.source):
            return None
        return self.source[target_pos]

    def advance(self, count: int = 1) -> "Cursor[T]":
        """Return new cursor advanced by count positions.

        The new position is clamped at end of input.

        Example:
            >>> cursor = Cursor.start([1, 2, 3])
            >>> cursor.advance().pos
            1
            >>> cursor.pos
            0
        """
        new_pos = min(self.pos + count, len(self.source))
        return Cursor(self.source, new_pos)

    def slice_to(self, end: "Cursor[T] | int") -> Sequence[T]:
        """Tokens between this cursor and ``end`` (exclusive).

        Handy inside Wrap'd functions to recover the matched span:

            >>> start = Cursor.start("hello world")
            >>> start.slice_to(start.advance(5))
            'hello'
        """
        end_pos = end.pos if isinstance(end, Cursor) else end
        return self.source[self.pos : end_pos]


@dataclass(frozen=True, slots=True)
class ParseResult[V, C = Cursor]:
    """Successful match: produced value and the cursor after it.

    Type Parameters:
        V: The type of the produced value
        C: The cursor type

    Pattern:
        Every combinator has signature:
            def combinator(cursor: C) -> ParseResult[V, C] | None

    Example:
        >>> cursor = Cursor.start("hello")
        >>> result = ParseResult("h", cursor.advance())
        >>> result.value
        'h'
        >>> result.cursor.pos
        1
    """

    value: V
    cursor: C


# Outcome of running a combinator: a ParseResult, or None for no match.
type Result[V, C = Cursor] = ParseResult[V, C] | None
