"""Depth limiting for recursive grammars.

Provides depth tracking to prevent stack overflow from:
- Deeply nested input driving a recursive rule
- Left-recursive rules (which re-enter themselves without consuming)

A guard is per-run state. The runner installs a fresh guard in a
ContextVar for the duration of one parse, and Deferred rules enter it, so
combinators themselves stay stateless and safe to share across threads.

Python 3.13+.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field

from tokencomb.constants import MAX_DEPTH, RECURSION_RESERVE_FRAMES
from tokencomb.diagnostics import DepthLimitExceededError, ErrorTemplate

__all__ = ["DepthGuard", "active_guard", "current_guard", "depth_clamp"]

logger = logging.getLogger(__name__)

_ACTIVE_GUARD: ContextVar[DepthGuard | None] = ContextVar(
    "tokencomb_active_guard", default=None
)


@dataclass(slots=True)
class DepthGuard:
    """Context manager for tracking and limiting recursion depth.

    Usage:
        guard = DepthGuard(max_depth=50)
        with guard:
            result = rule(cursor)

    Mutability Note:
        Intentionally mutable (not frozen=True) to enable stateful depth
        tracking via context manager protocol. The current_depth field is
        incremented/decremented on __enter__/__exit__.

    Attributes:
        max_depth: Maximum allowed depth (default: MAX_DEPTH)
        current_depth: Current recursion depth
        peak_depth: Deepest level reached since construction or reset()
    """

    max_depth: int = MAX_DEPTH
    current_depth: int = field(default=0, init=False)
    peak_depth: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        """Clamp max_depth against Python recursion limit."""
        self.max_depth = depth_clamp(self.max_depth)

    def __enter__(self) -> DepthGuard:
        """Enter guarded section, increment depth.

        Validates the limit BEFORE incrementing: __exit__ is not called when
        __enter__ raises, so incrementing first would leave the depth
        permanently elevated.
        """
        self.check()
        self.current_depth += 1
        self.peak_depth = max(self.peak_depth, self.current_depth)
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        """Exit guarded section, decrement depth."""
        self.current_depth -= 1

    @property
    def depth(self) -> int:
        """Current depth (alias for current_depth)."""
        return self.current_depth

    def is_exceeded(self) -> bool:
        """Check if depth limit has been reached."""
        return self.current_depth >= self.max_depth

    def check(self) -> None:
        """Explicitly check depth and raise if exceeded.

        Raises:
            DepthLimitExceededError: If depth limit exceeded
        """
        if self.is_exceeded():
            raise DepthLimitExceededError(
                ErrorTemplate.max_depth_exceeded(self.max_depth)
            )

    def reset(self) -> None:
        """Reset depth counters to zero (useful for reuse across runs)."""
        self.current_depth = 0
        self.peak_depth = 0


def depth_clamp(
    requested_depth: int, reserve_frames: int = RECURSION_RESERVE_FRAMES
) -> int:
    """Clamp requested depth against Python recursion limit.

    Validates requested depth against sys.getrecursionlimit() to prevent
    RecursionError on systems with constrained stack limits. Logs warning
    if clamping occurs.

    Args:
        requested_depth: Desired maximum depth
        reserve_frames: Stack frames to reserve for call overhead

    Returns:
        Safe depth value, clamped if necessary
    """
    max_safe_depth = sys.getrecursionlimit() - reserve_frames
    if requested_depth > max_safe_depth:
        logger.warning(
            "Requested depth %d exceeds Python recursion limit (%d). "
            "Clamping to %d to prevent RecursionError. "
            "Consider increasing sys.setrecursionlimit() if needed.",
            requested_depth,
            sys.getrecursionlimit(),
            max_safe_depth,
        )
        return max_safe_depth
    return requested_depth


def current_guard() -> DepthGuard | None:
    """The guard of the parse run in progress, if any."""
    return _ACTIVE_GUARD.get()


@contextmanager
def active_guard(guard: DepthGuard) -> Iterator[DepthGuard]:
    """Install ``guard`` for the current context until the block exits.

    Nested runs (a Wrap'd function calling parse() itself) get their own
    guard and restore the outer one afterwards.
    """
    token = _ACTIVE_GUARD.set(guard)
    try:
        yield guard
    finally:
        _ACTIVE_GUARD.reset(token)
