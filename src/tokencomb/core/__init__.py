"""Core utilities shared by the combinators and the runner.

Exports:
    DepthGuard: Context manager for recursion depth limiting
    active_guard: Install a DepthGuard for the current parse run
    current_guard: The DepthGuard of the run in progress
    depth_clamp: Clamp a depth limit to the interpreter recursion limit

Python 3.13+.
"""

from .depth_guard import DepthGuard, active_guard, current_guard, depth_clamp

__all__ = ["DepthGuard", "active_guard", "current_guard", "depth_clamp"]
