"""Shared constants for tokencomb.

This module provides centralized configuration constants used across
the combinator, runner and depth-guard modules. Placing constants here
avoids circular imports and provides a single source of truth.

Python 3.13+. Zero external dependencies.
"""

__all__ = [
    "MAX_DEPTH",
    "RECURSION_RESERVE_FRAMES",
]

# ============================================================================
# DEPTH LIMITS
# ============================================================================
#
# Only deferred (recursive) rules consume depth budget. Plain composition
# nests Python calls as deep as the grammar is written, which is bounded by
# the grammar author, while a recursive rule re-enters itself once per
# nesting level of the INPUT and is therefore driven by untrusted data.

# Maximum nesting of deferred rule invocations during one parse() run.
MAX_DEPTH: int = 100

# Stack frames kept free below sys.getrecursionlimit() when clamping.
# Each deferred level costs several Python frames (Deferred -> Sequence ->
# child ...), so the effective budget is much smaller than the raw limit.
RECURSION_RESERVE_FRAMES: int = 50
