"""Value-group normalization.

A successful match produces either a single datum or a *value group*: an
ordered, fixed-arity record of data. Sequencing concatenates groups and
never nests them, and a group of one element is the same as its element.
These rules are implemented once here and reused by every combinator that
builds or consumes groups.

Groups are a dedicated tuple subclass so that tuples appearing as ordinary
data (tokens, AST nodes, Optional payloads) are never flattened by
accident.

Python 3.13+. Zero external dependencies.
"""

from typing import Any

__all__ = [
    "EMPTY_GROUP",
    "ValueGroup",
    "as_datum",
    "as_group",
    "concat_groups",
    "unwrap_group",
]


class ValueGroup(tuple):
    """Ordered, fixed-arity record of values produced by a match.

    Compares equal to a plain tuple with the same elements, so tests and
    callers can write ``result.value == ("a", "b")``.

    Example:
        >>> ValueGroup(("a", "b"))
        ValueGroup('a', 'b')
        >>> ValueGroup(("a", "b")) == ("a", "b")
        True
    """

    __slots__ = ()

    def __repr__(self) -> str:
        return f"ValueGroup({', '.join(repr(item) for item in self)})"


EMPTY_GROUP = ValueGroup()


def as_group(value: Any) -> ValueGroup:
    """View any value as a group.

    Example:
        >>> as_group("x")
        ValueGroup('x')
        >>> as_group(ValueGroup(("x", "y")))
        ValueGroup('x', 'y')
        >>> as_group(("x", "y"))  # plain tuple is one datum
        ValueGroup(('x', 'y'))
    """
    if isinstance(value, ValueGroup):
        return value
    return ValueGroup((value,))


def unwrap_group(value: Any) -> Any:
    """Collapse a one-element group to its element.

    Example:
        >>> unwrap_group(ValueGroup(("x",)))
        'x'
        >>> unwrap_group(ValueGroup(("x", "y")))
        ValueGroup('x', 'y')
        >>> unwrap_group("x")
        'x'
    """
    if isinstance(value, ValueGroup) and len(value) == 1:
        return value[0]
    return value


def concat_groups(*values: Any) -> Any:
    """Concatenate values into one flat, normalized group.

    Each value contributes its elements if it is a group, or itself
    otherwise. The result is unwrapped if it has exactly one element.

    Example:
        >>> concat_groups("a", ValueGroup(("b", "c")), EMPTY_GROUP)
        ValueGroup('a', 'b', 'c')
        >>> concat_groups(EMPTY_GROUP, "a")
        'a'
    """
    items: list[Any] = []
    for value in values:
        items.extend(as_group(value))
    return unwrap_group(ValueGroup(items))


def as_datum(value: Any) -> Any:
    """Freeze a group into a single datum.

    Multi-element groups become plain tuples; the empty group becomes
    ``()``. Used wherever a produced value is stored rather than spliced
    (Optional payloads, repetition elements).

    Example:
        >>> as_datum(ValueGroup(("a", "b")))
        ('a', 'b')
        >>> as_datum("a")
        'a'
    """
    if isinstance(value, ValueGroup):
        return tuple(value)
    return value
