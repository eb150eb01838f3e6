"""Primitive combinators.

- Succeed: always matches, consumes nothing, produces the empty group
- ConsumeOne: consumes exactly one token and produces it
- Wrap: lifts a hand-written ``cursor -> Result`` function
- Deferred: named, late-bound rule for recursive grammars

End of input:
    ConsumeOne FAILS (returns None) at end of input instead of reading past
    it. Grammars therefore need no explicit EOF checks before consuming.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from tokencomb.combinators.base import Combinator, require_callable, unify_cursor_types
from tokencomb.core.depth_guard import current_guard
from tokencomb.cursor import ParseResult
from tokencomb.diagnostics import (
    CompositionError,
    ErrorTemplate,
    TransformShapeError,
    UnresolvedRuleError,
)
from tokencomb.groups import EMPTY_GROUP

__all__ = ["ConsumeOne", "Deferred", "Succeed", "Wrap"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Succeed(Combinator):
    """Match without consuming anything.

    The identity element of Sequence: ``Sequence(Succeed(), x)`` behaves
    exactly like ``x``.

    Example:
        >>> from tokencomb.cursor import Cursor
        >>> cursor = Cursor.start("ab")
        >>> Succeed()(cursor) == ParseResult((), cursor)
        True
    """

    cursor_type: type | None = None

    def parse(self, cursor: Any) -> ParseResult[Any, Any]:
        return ParseResult(EMPTY_GROUP, cursor)


@dataclass(frozen=True, slots=True)
class ConsumeOne(Combinator):
    """Consume the current token and produce it.

    Fails at end of input.

    Example:
        >>> from tokencomb.cursor import Cursor
        >>> result = ConsumeOne()(Cursor.start("ab"))
        >>> result.value, result.cursor.pos
        ('a', 1)
        >>> ConsumeOne()(Cursor.start("")) is None
        True
    """

    cursor_type: type | None = None

    def parse(self, cursor: Any) -> ParseResult[Any, Any] | None:
        if cursor.is_eof:
            return None
        return ParseResult(cursor.current, cursor.advance())


@dataclass(frozen=True, slots=True)
class Wrap(Combinator):
    """Lift a plain ``cursor -> ParseResult | None`` function.

    Use for token-level primitives that are simpler to write by hand
    (keyword tables, lookahead). The function must not mutate the cursor
    it receives.

    Example:
        >>> from tokencomb.cursor import Cursor
        >>> def digit(cursor):
        ...     if not cursor.is_eof and cursor.current.isdigit():
        ...         return ParseResult(int(cursor.current), cursor.advance())
        ...     return None
        >>> Wrap(digit)(Cursor.start("7x")).value
        7
    """

    fn: Callable[[Any], ParseResult[Any, Any] | None]
    cursor_type: type | None = None

    def __post_init__(self) -> None:
        require_callable(self.fn, "wrapped function")

    def parse(self, cursor: Any) -> ParseResult[Any, Any] | None:
        result = self.fn(cursor)
        if result is not None and not isinstance(result, ParseResult):
            raise TransformShapeError(ErrorTemplate.wrapped_result_invalid(self.fn, result))
        return result


@dataclass(frozen=True, slots=True, eq=False)
class Deferred(Combinator):
    """A named rule whose body is supplied later.

    A combinator cannot contain itself by value, so recursive grammars
    declare the rule first, use it, then bind it once with define():

        >>> from tokencomb.combinators.composite import Sequence, Optional
        >>> nested = Deferred("nested")
        >>> nested.define(Sequence(ConsumeOne(), Optional(nested)))

    Compares by identity. During a runner.parse() run each invocation
    counts against the run's DepthGuard.
    """

    name: str
    cursor_type: type | None = None
    _target: Combinator | None = field(default=None, init=False, repr=False)

    @property
    def is_defined(self) -> bool:
        return self._target is not None

    @property
    def target(self) -> Combinator:
        """The bound body.

        Raises:
            UnresolvedRuleError: If define() has not been called yet
        """
        if self._target is None:
            raise UnresolvedRuleError(ErrorTemplate.rule_unresolved(self.name))
        return self._target

    def define(self, target: Combinator) -> None:
        """Bind the rule body. Allowed exactly once.

        Raises:
            CompositionError: If already defined, if ``target`` is not a
                combinator, or if its cursor type conflicts with the rule's
        """
        if self.is_defined:
            raise CompositionError(ErrorTemplate.rule_already_defined(self.name))
        unify_cursor_types((self, target), f"Deferred({self.name!r})")
        object.__setattr__(self, "_target", target)
        logger.debug("Rule %r bound to %r", self.name, type(target).__name__)

    def parse(self, cursor: Any) -> ParseResult[Any, Any] | None:
        target = self.target
        guard = current_guard()
        if guard is None:
            return target.parse(cursor)
        with guard:
            return target.parse(cursor)

    def __repr__(self) -> str:
        return f"Deferred({self.name!r})"
