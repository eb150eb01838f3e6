"""Grammar construction namespace bound to one cursor type.

Grammar mirrors the combinator constructors with the cursor type filled
in, so every primitive built through it carries the same ``cursor_type``
and composition with combinators over another cursor type is rejected at
construction.

Example:
    >>> from tokencomb.cursor import Cursor
    >>> g = Grammar(Cursor)
    >>> digit = g.map(g.one, g.filter(str.isdigit))
    >>> number = g.map(g.rep1(digit), lambda ds: int("".join(ds)))
    >>> number(Cursor.start("42+")).value
    42
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from tokencomb.combinators import (
    Combinator,
    ConsumeOne,
    Deferred,
    Filter,
    FoldLeft,
    FoldRight,
    Map,
    Optional,
    OrderedChoice,
    RepeatOneOrMore,
    RepeatZeroOrMore,
    Select,
    Sequence,
    Succeed,
    Wrap,
)
from tokencomb.cursor import Cursor, ParseResult
from tokencomb.outcome import accept, reject

__all__ = ["Grammar"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Grammar:
    """Constructors for combinators over ``cursor_type``.

    Attributes:
        cursor_type: Cursor class shared by every primitive built here
        succ: Succeed bound to cursor_type
        one: ConsumeOne bound to cursor_type
    """

    cursor_type: type = Cursor
    succ: Succeed = field(init=False, repr=False, compare=False)
    one: ConsumeOne = field(init=False, repr=False, compare=False)

    # Plain transforms are cursor-independent.
    accept = staticmethod(accept)
    reject = staticmethod(reject)
    filter = Filter
    select = Select
    foldl = FoldLeft
    foldr = FoldRight

    def __post_init__(self) -> None:
        object.__setattr__(self, "succ", Succeed(self.cursor_type))
        object.__setattr__(self, "one", ConsumeOne(self.cursor_type))

    def opt(self, inner: Combinator) -> Optional:
        return Optional(inner)

    def seq(self, *children: Combinator) -> Sequence:
        if not children:
            return Sequence(self.succ)
        return Sequence(*children)

    def alt(self, *children: Combinator) -> OrderedChoice:
        return OrderedChoice(*children)

    def rep(
        self, inner: Combinator, collection: Callable[[], Any] = list
    ) -> RepeatZeroOrMore:
        return RepeatZeroOrMore(inner, collection)

    def rep1(
        self, inner: Combinator, collection: Callable[[], Any] = list
    ) -> RepeatOneOrMore:
        return RepeatOneOrMore(inner, collection)

    def map(
        self,
        inner: Combinator,
        mapper: Callable[..., Any],
        *,
        fallible: bool | None = None,
    ) -> Map:
        return Map(inner, mapper, fallible)

    def wrap(self, fn: Callable[[Any], ParseResult[Any, Any] | None]) -> Wrap:
        """Lift a hand-written parsing function over this grammar's cursor."""
        return Wrap(fn, self.cursor_type)

    def rule(self, name: str) -> Deferred:
        """Declare a recursive rule; bind it later with ``.define(...)``."""
        logger.debug("Declaring rule %r over %s", name, self.cursor_type.__name__)
        return Deferred(name, self.cursor_type)
