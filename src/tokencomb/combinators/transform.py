"""Transformation combinators and value-group transforms.

Map applies a function to the value a combinator produced. The value group
is spread into positional arguments, so a transform over
``Sequence(a, b, c)`` is written ``lambda x, y, z: ...``, and a transform's
own result goes through the same one-element unwrapping as any group.

Map has two variants with different failure behavior:

- total: ``f`` returns the new value
- fallible: ``f`` returns an Outcome; ``reject()`` turns the whole Map into
  a failure even though the inner combinator matched

The variant is fixed when the Map is built, from the declared return
annotation of ``f`` (``-> Outcome[...]``, ``-> Accepted[...]``, or a union of
those), or from the explicit ``fallible=`` keyword for unannotated
callables such as lambdas. It is never guessed from what ``f`` happens to
return at run time; a mismatch raises TransformShapeError.

Filter, Select, FoldLeft and FoldRight are ready-made transforms for Map.
"""

import inspect
import re
import types
import typing
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import Any

from tokencomb.combinators.base import Combinator, require_callable, unify_cursor_types
from tokencomb.cursor import ParseResult
from tokencomb.diagnostics import CompositionError, ErrorTemplate, TransformShapeError
from tokencomb.groups import ValueGroup, as_group, unwrap_group
from tokencomb.outcome import Accepted, Outcome, Rejected, accept, reject

__all__ = [
    "Filter",
    "FoldLeft",
    "FoldRight",
    "Map",
    "Select",
    "declares_outcome",
]

_OUTCOME_TYPES: tuple[Any, ...] = (Outcome, Accepted, Rejected)

# Fallback for string annotations that cannot be resolved (forward
# references inside closures, names missing from the function's globals).
_OUTCOME_ANNOTATION_RE = re.compile(r"^\s*(?:\w+\.)*(?:Outcome|Accepted|Rejected)\b")


def _is_outcome_annotation(annotation: Any) -> bool:
    if isinstance(annotation, str):
        return bool(_OUTCOME_ANNOTATION_RE.match(annotation))
    if any(annotation is kind for kind in _OUTCOME_TYPES):
        return True
    origin = typing.get_origin(annotation)
    if any(origin is kind for kind in _OUTCOME_TYPES):
        return True
    if origin is typing.Union or origin is types.UnionType:
        return any(_is_outcome_annotation(arg) for arg in typing.get_args(annotation))
    return False


def declares_outcome(fn: Callable[..., Any]) -> bool:
    """Whether ``fn`` is annotated to return an Outcome.

    Works for functions, methods and callable instances (via ``__call__``).
    Unannotated callables are total.

    Example:
        >>> def positive(x: int) -> Outcome[int]:
        ...     return accept(x) if x > 0 else reject()
        >>> declares_outcome(positive), declares_outcome(lambda x: x)
        (True, False)
    """
    target = fn if inspect.isroutine(fn) else getattr(type(fn), "__call__", fn)
    try:
        hints = typing.get_type_hints(target)
    except (NameError, TypeError, AttributeError):
        hints = getattr(target, "__annotations__", None) or {}
    if "return" not in hints:
        return False
    return _is_outcome_annotation(hints["return"])


@dataclass(frozen=True, slots=True)
class Map(Combinator):
    """Transform the value produced by ``inner``.

    Args:
        inner: Combinator whose value is transformed
        mapper: Transform, called with the value group spread as arguments
        fallible: Force the variant; None derives it from ``mapper``'s
            return annotation

    Example:
        >>> from tokencomb.combinators.primitives import ConsumeOne
        >>> from tokencomb.cursor import Cursor
        >>> Map(ConsumeOne(), str.upper)(Cursor.start("a")).value
        'A'
        >>> digit = Map(ConsumeOne(), lambda c: accept(int(c)) if c.isdigit() else reject(),
        ...             fallible=True)
        >>> digit(Cursor.start("x")) is None
        True
    """

    inner: Combinator
    mapper: Callable[..., Any]
    fallible: bool | None = None
    cursor_type: type | None = field(default=None, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        require_callable(self.mapper, "mapper")
        object.__setattr__(self, "cursor_type", unify_cursor_types((self.inner,), "Map"))
        if self.fallible is None:
            object.__setattr__(self, "fallible", declares_outcome(self.mapper))

    def parse(self, cursor: Any) -> ParseResult[Any, Any] | None:
        result = self.inner.parse(cursor)
        if result is None:
            return None
        transformed = self.mapper(*as_group(result.value))
        if not self.fallible:
            if isinstance(transformed, (Accepted, Rejected)):
                raise TransformShapeError(
                    ErrorTemplate.total_map_returned_outcome(self.mapper)
                )
            return ParseResult(unwrap_group(transformed), result.cursor)
        if isinstance(transformed, Accepted):
            return ParseResult(unwrap_group(transformed.value), result.cursor)
        if isinstance(transformed, Rejected):
            return None
        raise TransformShapeError(
            ErrorTemplate.fallible_map_returned_value(self.mapper, transformed)
        )


@dataclass(frozen=True, slots=True)
class Filter:
    """Fallible transform keeping values that satisfy ``predicate``.

    The predicate receives the value group spread as arguments; the group
    passes through unchanged when it holds.

    Example:
        >>> from tokencomb.combinators.primitives import ConsumeOne
        >>> from tokencomb.cursor import Cursor
        >>> vowel = ConsumeOne()[Filter(lambda c: c in "aeiou")]
        >>> vowel(Cursor.start("a")).value, vowel(Cursor.start("b"))
        ('a', None)
    """

    predicate: Callable[..., bool]

    def __post_init__(self) -> None:
        require_callable(self.predicate, "predicate")

    def __call__(self, *values: Any) -> Outcome[Any]:
        if self.predicate(*values):
            return accept(*values)
        return reject()


@dataclass(frozen=True, slots=True, init=False)
class Select:
    """Project positions of a value group into a new group.

    Indices may reorder, repeat or drop positions; negative indices count
    from the end. A single selected position is unwrapped.

    Example:
        >>> Select(2, 0)("(", "x", ")")
        ValueGroup(')', '(')
        >>> Select(1)("(", "x", ")")
        'x'
    """

    indices: tuple[int, ...]

    def __init__(self, *indices: int) -> None:
        if not indices:
            raise CompositionError(ErrorTemplate.empty_selection())
        object.__setattr__(self, "indices", tuple(indices))

    def __call__(self, *values: Any) -> Any:
        return unwrap_group(ValueGroup(values[index] for index in self.indices))


@dataclass(frozen=True, slots=True)
class FoldLeft:
    """Left-associative reduction of ``(seed, elements)``.

    ``combine(combine(combine(seed, e1), e2), e3)``

    Example:
        >>> FoldLeft(lambda acc, e: f"({acc}-{e})")(1, [2, 3])
        '((1-2)-3)'
    """

    combine: Callable[[Any, Any], Any]

    def __post_init__(self) -> None:
        require_callable(self.combine, "combine function")

    def __call__(self, seed: Any, elements: Iterable[Any]) -> Any:
        accumulator = seed
        for element in elements:
            accumulator = self.combine(accumulator, element)
        return accumulator


@dataclass(frozen=True, slots=True)
class FoldRight:
    """Right-associative reduction of ``(seed, elements)``.

    ``combine(e1, combine(e2, combine(e3, seed)))``: the seed is the
    rightmost accumulator and elements are consumed back to front.

    Example:
        >>> FoldRight(lambda e, acc: f"({e}^{acc})")(4, [2, 3])
        '(2^(3^4))'
    """

    combine: Callable[[Any, Any], Any]

    def __post_init__(self) -> None:
        require_callable(self.combine, "combine function")

    def __call__(self, seed: Any, elements: Iterable[Any]) -> Any:
        accumulator = seed
        for element in reversed(tuple(elements)):
            accumulator = self.combine(element, accumulator)
        return accumulator
