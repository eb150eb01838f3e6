"""tokencomb - composable recognizers over arbitrary token streams.

Grammars are assembled from small combinators with a fixed algebra:
sequencing, ordered choice, optionality, repetition and result
transformation. A combinator is a pure function from a cursor to a Result
(``ParseResult | None``); value groups produced by sequencing are kept flat.

Public API:
    Cursor, ParseResult, TokenCursor - position and result model
    Succeed, ConsumeOne, Wrap, Deferred - primitives
    Optional, Sequence, OrderedChoice, RepeatZeroOrMore, RepeatOneOrMore
    Map, Filter, Select, FoldLeft, FoldRight - transformations
    accept, reject - outcomes for fallible transforms
    Grammar - constructors bound to one cursor type
    parse, parse_all - top-level entry points with depth limiting

Exceptions:
    CombinatorError - Base exception class
    CompositionError - Invalid composition (raised at construction)
    TransformShapeError - Transform returned the wrong shape
    UnresolvedRuleError - Deferred rule used before define()
    DepthLimitExceededError - Recursion deeper than max_depth
    IncompleteParseError - parse_all() left input unconsumed

Example:
    >>> from tokencomb import ConsumeOne, OrderedChoice, Sequence, parse
    >>> one = ConsumeOne()
    >>> parse(OrderedChoice(Sequence(one, one), one), ["x"]).value
    'x'
"""

from .combinators import (
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
from .cursor import Cursor, ParseResult, Result, TokenCursor
from .diagnostics import (
    CombinatorError,
    CompositionError,
    DepthLimitExceededError,
    IncompleteParseError,
    TransformShapeError,
    UnresolvedRuleError,
)
from .grammar import Grammar
from .groups import EMPTY_GROUP, ValueGroup
from .outcome import REJECTED, Accepted, Outcome, Rejected, accept, reject
from .runner import parse, parse_all

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("tokencomb")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "EMPTY_GROUP",
    "REJECTED",
    "Accepted",
    "CombinatorError",
    "Combinator",
    "CompositionError",
    "ConsumeOne",
    "Cursor",
    "Deferred",
    "DepthLimitExceededError",
    "Filter",
    "FoldLeft",
    "FoldRight",
    "Grammar",
    "IncompleteParseError",
    "Map",
    "Optional",
    "OrderedChoice",
    "Outcome",
    "ParseResult",
    "Rejected",
    "RepeatOneOrMore",
    "RepeatZeroOrMore",
    "Result",
    "Select",
    "Sequence",
    "Succeed",
    "TokenCursor",
    "TransformShapeError",
    "UnresolvedRuleError",
    "ValueGroup",
    "Wrap",
    "__version__",
    "accept",
    "parse",
    "parse_all",
    "reject",
]
