"""Composite combinators.

Built purely from their children's Results:

- Optional: always matches; None when the child fails
- Sequence: all children in order, values concatenated into one flat group
- OrderedChoice: first matching child wins
- RepeatZeroOrMore / RepeatOneOrMore: collect child values until it fails

Failure carries no cursor, so progress made by a failing child is simply
dropped; every alternative and every retry starts from the cursor the
composite itself received.

Termination:
    Repetition stops only when its child fails. A child that succeeds
    without consuming (Optional, Succeed, RepeatZeroOrMore, ...) loops
    forever; keeping repetition bodies consuming is the grammar author's
    job.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, ClassVar

from tokencomb.combinators.base import Combinator, unify_cursor_types
from tokencomb.cursor import ParseResult
from tokencomb.diagnostics import CompositionError, ErrorTemplate
from tokencomb.groups import as_datum, concat_groups

__all__ = [
    "Optional",
    "OrderedChoice",
    "RepeatOneOrMore",
    "RepeatZeroOrMore",
    "Sequence",
]


@dataclass(frozen=True, slots=True)
class Optional(Combinator):
    """Match ``inner`` if possible; never fail.

    Produces the child's value (a multi-value group is kept as one plain
    tuple) or None with the cursor unchanged. A child that matches and
    produces None is therefore indistinguishable from absence by value
    alone; compare the result cursor with the input cursor to tell them
    apart.

    Example:
        >>> from tokencomb.combinators.primitives import ConsumeOne
        >>> from tokencomb.cursor import Cursor
        >>> Optional(ConsumeOne())(Cursor.start("")).value is None
        True
    """

    inner: Combinator
    cursor_type: type | None = field(default=None, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "cursor_type", unify_cursor_types((self.inner,), "Optional")
        )

    def parse(self, cursor: Any) -> ParseResult[Any, Any]:
        result = self.inner.parse(cursor)
        if result is None:
            return ParseResult(None, cursor)
        return ParseResult(as_datum(result.value), result.cursor)


@dataclass(frozen=True, slots=True, init=False)
class Sequence(Combinator):
    """Match every child in order.

    The value is the concatenation of the children's value groups, with
    the one-element group unwrapped. ``Sequence()`` is the identity: it
    matches with the empty group and leaves the cursor where it was.

    Example:
        >>> from tokencomb.combinators.primitives import ConsumeOne
        >>> from tokencomb.cursor import Cursor
        >>> Sequence(ConsumeOne(), ConsumeOne())(Cursor.start("ab")).value
        ValueGroup('a', 'b')
    """

    children: tuple[Combinator, ...]
    cursor_type: type | None = field(default=None, repr=False, compare=False)

    def __init__(self, *children: Combinator) -> None:
        cursor_type = unify_cursor_types(children, "Sequence")
        object.__setattr__(self, "children", tuple(children))
        object.__setattr__(self, "cursor_type", cursor_type)

    def parse(self, cursor: Any) -> ParseResult[Any, Any] | None:
        values: list[Any] = []
        for child in self.children:
            result = child.parse(cursor)
            if result is None:
                return None
            values.append(result.value)
            cursor = result.cursor
        return ParseResult(concat_groups(*values), cursor)


@dataclass(frozen=True, slots=True, init=False)
class OrderedChoice(Combinator):
    """Return the Result of the first child that matches.

    Every child is tried from the same starting cursor. Later children
    are not consulted once one matches, even if they would match too.
    With no children it never matches.
    """

    children: tuple[Combinator, ...]
    cursor_type: type | None = field(default=None, repr=False, compare=False)

    def __init__(self, *children: Combinator) -> None:
        cursor_type = unify_cursor_types(children, "OrderedChoice")
        object.__setattr__(self, "children", tuple(children))
        object.__setattr__(self, "cursor_type", cursor_type)

    def parse(self, cursor: Any) -> ParseResult[Any, Any] | None:
        for child in self.children:
            result = child.parse(cursor)
            if result is not None:
                return result
        return None


@dataclass(frozen=True, slots=True)
class RepeatZeroOrMore(Combinator):
    """Apply ``inner`` until it fails, collecting each value.

    Always matches. The value is a fresh collection built by calling
    ``collection()`` (default ``list``) and appending each child value in
    order; the cursor is the one after the last successful match.

    Example:
        >>> from tokencomb.combinators.primitives import ConsumeOne
        >>> from tokencomb.cursor import Cursor
        >>> result = RepeatZeroOrMore(ConsumeOne())(Cursor.start("abc"))
        >>> result.value, result.cursor.is_eof
        (['a', 'b', 'c'], True)
    """

    minimum: ClassVar[int] = 0

    inner: Combinator
    collection: Callable[[], Any] = list
    cursor_type: type | None = field(default=None, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not callable(self.collection):
            raise CompositionError(ErrorTemplate.invalid_collection(self.collection))
        object.__setattr__(
            self,
            "cursor_type",
            unify_cursor_types((self.inner,), type(self).__name__),
        )

    def parse(self, cursor: Any) -> ParseResult[Any, Any] | None:
        collected = self.collection()
        count = 0
        while (result := self.inner.parse(cursor)) is not None:
            collected.append(as_datum(result.value))
            cursor = result.cursor
            count += 1
        if count < self.minimum:
            return None
        return ParseResult(collected, cursor)


@dataclass(frozen=True, slots=True)
class RepeatOneOrMore(RepeatZeroOrMore):
    """As RepeatZeroOrMore, but fail unless ``inner`` matches at least once."""

    minimum: ClassVar[int] = 1
