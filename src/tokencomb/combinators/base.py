"""Combinator base class and surface operators.

A combinator is a pure, stateless callable from a cursor to a Result
(``ParseResult | None``). Combinators are immutable once built, so they can
be stored as named grammar rules and shared freely between threads.

Surface syntax:
    ~c      Optional(c)
    a & b   Sequence(a, b)
    a | b   OrderedChoice(a, b)
    c[f]    Map(c, f)

Operators only accept combinator operands; anything else makes Python
raise TypeError before a combinator is constructed.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, Any

from tokencomb.diagnostics import CompositionError, ErrorTemplate

if TYPE_CHECKING:
    from tokencomb.combinators.composite import OrderedChoice, Sequence
    from tokencomb.combinators.composite import Optional as OptionalCombinator
    from tokencomb.combinators.transform import Map
    from tokencomb.cursor import ParseResult

__all__ = ["Combinator", "require_callable", "unify_cursor_types"]


class Combinator(ABC):
    """Base class of every combinator.

    Subclasses implement parse(). Every combinator exposes ``cursor_type``:
    the cursor class it runs over, or None when it works with any cursor.
    Composition rejects operands over two different cursor types.
    """

    __slots__ = ()

    cursor_type: type | None

    @abstractmethod
    def parse(self, cursor: Any) -> ParseResult[Any, Any] | None:
        """Match at ``cursor``.

        Returns:
            ParseResult(value, next_cursor) on success, None on no match.
            The caller's cursor is never modified.
        """

    def __call__(self, cursor: Any) -> ParseResult[Any, Any] | None:
        return self.parse(cursor)

    def __invert__(self) -> OptionalCombinator:
        from tokencomb.combinators.composite import Optional  # noqa: PLC0415 - circular

        return Optional(self)

    def __and__(self, other: object) -> Sequence:
        if not isinstance(other, Combinator):
            return NotImplemented
        from tokencomb.combinators.composite import Sequence  # noqa: PLC0415 - circular

        return Sequence(*_operands(self, Sequence), *_operands(other, Sequence))

    def __or__(self, other: object) -> OrderedChoice:
        if not isinstance(other, Combinator):
            return NotImplemented
        from tokencomb.combinators.composite import OrderedChoice  # noqa: PLC0415 - circular

        return OrderedChoice(
            *_operands(self, OrderedChoice), *_operands(other, OrderedChoice)
        )

    def __getitem__(self, mapper: Callable[..., Any]) -> Map:
        from tokencomb.combinators.transform import Map  # noqa: PLC0415 - circular

        return Map(self, mapper)


def _operands(combinator: Combinator, kind: type) -> tuple[Combinator, ...]:
    """Splice same-kind operands so ``a & b & c`` builds one Sequence.

    Sequence and OrderedChoice are associative, so the flat form is
    observably identical to the nested one.
    """
    if type(combinator) is kind:
        return combinator.children  # type: ignore[attr-defined]
    return (combinator,)


def unify_cursor_types(children: Iterable[object], context: str) -> type | None:
    """Check composed operands and return their common cursor type.

    Args:
        children: Operands of the composition
        context: Constructor name, for diagnostics

    Returns:
        The shared cursor type, or None if every operand is generic

    Raises:
        CompositionError: If an operand is not a combinator, or two
            operands run over different cursor types
    """
    found: type | None = None
    for child in children:
        if not isinstance(child, Combinator):
            raise CompositionError(ErrorTemplate.not_a_combinator(child, context))
        cursor_type = child.cursor_type
        if cursor_type is None:
            continue
        if found is None:
            found = cursor_type
        elif cursor_type is not found:
            raise CompositionError(
                ErrorTemplate.cursor_type_mismatch(found, cursor_type, context, child)
            )
    return found


def require_callable(value: object, role: str) -> None:
    """Raise CompositionError unless ``value`` is callable."""
    if not callable(value):
        raise CompositionError(ErrorTemplate.not_callable(value, role))
