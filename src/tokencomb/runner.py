"""Top-level entry points.

parse() and parse_all() run a combinator over a token sequence (or a
ready-made cursor) with a fresh DepthGuard installed for the run, so that
recursive grammars fail with DepthLimitExceededError instead of
exhausting the interpreter stack.

A failed match is still ``None``. parse_all() adds the one check the
combinators themselves never make: that the whole input was consumed.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from tokencomb.combinators import Combinator
from tokencomb.constants import MAX_DEPTH
from tokencomb.core import DepthGuard, active_guard
from tokencomb.cursor import Cursor, ParseResult, TokenCursor
from tokencomb.diagnostics import (
    CompositionError,
    DepthLimitExceededError,
    ErrorTemplate,
    IncompleteParseError,
)

__all__ = ["parse", "parse_all"]

logger = logging.getLogger(__name__)


def _start_cursor(tokens: Iterable[Any] | TokenCursor[Any]) -> Any:
    if isinstance(tokens, TokenCursor):
        return tokens
    return Cursor.start(tokens)


def parse(
    combinator: Combinator,
    tokens: Iterable[Any] | TokenCursor[Any],
    *,
    max_depth: int = MAX_DEPTH,
) -> ParseResult[Any, Any] | None:
    """Run ``combinator`` from the start of ``tokens``.

    Args:
        combinator: Grammar entry point
        tokens: Token sequence, iterable, or a cursor to start from
        max_depth: Maximum nesting of Deferred rule invocations

    Returns:
        ParseResult on a match (possibly of a prefix), None otherwise

    Raises:
        CompositionError: If ``combinator`` is not a combinator
        DepthLimitExceededError: If recursion exceeds ``max_depth``

    Example:
        >>> from tokencomb.combinators import ConsumeOne, Sequence
        >>> parse(Sequence(ConsumeOne(), ConsumeOne()), "abc").value
        ValueGroup('a', 'b')
    """
    if not isinstance(combinator, Combinator):
        raise CompositionError(ErrorTemplate.not_a_combinator(combinator, "parse"))
    cursor = _start_cursor(tokens)
    guard = DepthGuard(max_depth=max_depth)
    logger.debug("Running %s (max_depth=%d)", type(combinator).__name__, guard.max_depth)

    with active_guard(guard):
        try:
            result = combinator.parse(cursor)
        except DepthLimitExceededError:
            logger.warning("Rule nesting exceeded max_depth=%d", guard.max_depth)
            raise
        except RecursionError as e:
            # Deep non-recursive composition can still exhaust the stack
            # before the guard trips.
            logger.warning(
                "Interpreter recursion limit hit at rule depth %d", guard.depth
            )
            raise DepthLimitExceededError(
                ErrorTemplate.max_depth_exceeded(guard.max_depth)
            ) from e

    logger.debug(
        "%s %s (peak rule depth %d)",
        type(combinator).__name__,
        "matched" if result is not None else "did not match",
        guard.peak_depth,
    )
    return result


def parse_all(
    combinator: Combinator,
    tokens: Iterable[Any] | TokenCursor[Any],
    *,
    max_depth: int = MAX_DEPTH,
) -> ParseResult[Any, Any] | None:
    """Run ``combinator`` and require it to consume the whole input.

    Returns:
        ParseResult ending at end of input, or None if nothing matched

    Raises:
        IncompleteParseError: If the match stops before end of input;
            the prefix result is available as ``error.result``
        DepthLimitExceededError: If recursion exceeds ``max_depth``
    """
    result = parse(combinator, tokens, max_depth=max_depth)
    if result is None or result.cursor.is_eof:
        return result

    remaining = 0
    tail = result.cursor
    while not tail.is_eof:
        tail = tail.advance()
        remaining += 1
    position = getattr(result.cursor, "pos", None)
    raise IncompleteParseError(
        ErrorTemplate.incomplete_parse(position, remaining), result=result
    )
