"""Combinator algebra.

Module Organization:
- base.py: Combinator base class, surface operators, cursor-type checks
- primitives.py: Succeed, ConsumeOne, Wrap, Deferred
- composite.py: Optional, Sequence, OrderedChoice, RepeatZeroOrMore, RepeatOneOrMore
- transform.py: Map and the Filter, Select, FoldLeft, FoldRight transforms
"""

from tokencomb.combinators.base import Combinator
from tokencomb.combinators.composite import (
    Optional,
    OrderedChoice,
    RepeatOneOrMore,
    RepeatZeroOrMore,
    Sequence,
)
from tokencomb.combinators.primitives import ConsumeOne, Deferred, Succeed, Wrap
from tokencomb.combinators.transform import (
    Filter,
    FoldLeft,
    FoldRight,
    Map,
    Select,
    declares_outcome,
)

__all__ = [
    "Combinator",
    "ConsumeOne",
    "Deferred",
    "Filter",
    "FoldLeft",
    "FoldRight",
    "Map",
    "Optional",
    "OrderedChoice",
    "RepeatOneOrMore",
    "RepeatZeroOrMore",
    "Select",
    "Sequence",
    "Succeed",
    "Wrap",
    "declares_outcome",
]
