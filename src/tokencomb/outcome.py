"""Outcomes of fallible transforms.

A fallible transform (the ``f`` of a fallible Map, or a Filter) either
produces a value or declines. That decision is modeled with a dedicated
two-case type rather than ``None`` or ``typing.Optional``: a transform is
free to produce ``None`` or any optional-shaped domain value as a perfectly
good result, and that must never be mistaken for a failed transform.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from typing import Any, Final

from tokencomb.groups import ValueGroup, unwrap_group

__all__ = [
    "REJECTED",
    "Accepted",
    "Outcome",
    "Rejected",
    "accept",
    "reject",
]


@dataclass(frozen=True, slots=True)
class Accepted[T]:
    """The transform produced ``value``."""

    value: T

    def __bool__(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class Rejected:
    """The transform declined; the enclosing Map fails."""

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "REJECTED"


type Outcome[T] = Accepted[T] | Rejected

REJECTED: Final = Rejected()


def accept(*values: Any) -> Accepted[Any]:
    """Build a successful outcome.

    Several values form a value group; a single value is taken as is.

    Example:
        >>> accept(1)
        Accepted(value=1)
        >>> accept(1, 2).value
        ValueGroup(1, 2)
        >>> accept(None).value is None
        True
    """
    return Accepted(unwrap_group(ValueGroup(values)))


def reject() -> Rejected:
    """Build a failed outcome."""
    return REJECTED
