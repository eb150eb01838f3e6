"""Diagnostic system for tokencomb errors.

Provides structured error diagnostics with codes and hints.
Inspired by Rust compiler diagnostics.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    CombinatorError,
    CompositionError,
    DepthLimitExceededError,
    IncompleteParseError,
    TransformShapeError,
    UnresolvedRuleError,
)
from .templates import ErrorTemplate

__all__ = [
    "CombinatorError",
    "CompositionError",
    "DepthLimitExceededError",
    "Diagnostic",
    "DiagnosticCode",
    "ErrorTemplate",
    "IncompleteParseError",
    "TransformShapeError",
    "UnresolvedRuleError",
]
