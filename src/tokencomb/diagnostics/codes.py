"""Diagnostic codes and data structures.

Defines error codes and structured diagnostic messages for the
programming errors the combinator core can raise. A failed match is
never a diagnostic: it is the absent Result (``None``).

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Composition errors (raised while building combinators)
        2000-2999: Transform errors (raised while running a transform)
        3000-3999: Rule errors (deferred rule binding and recursion)
        4000-4999: Input errors (cursor access and top-level parse entry points)
    """

    # Composition errors (1000-1999)
    NOT_A_COMBINATOR = 1001
    CURSOR_TYPE_MISMATCH = 1002
    EMPTY_SELECTION = 1003
    INVALID_COLLECTION = 1004
    NOT_CALLABLE = 1005

    # Transform errors (2000-2999)
    TOTAL_MAP_RETURNED_OUTCOME = 2001
    FALLIBLE_MAP_RETURNED_VALUE = 2002
    WRAPPED_RESULT_INVALID = 2003

    # Rule errors (3000-3999)
    RULE_UNRESOLVED = 3001
    RULE_ALREADY_DEFINED = 3002
    MAX_DEPTH_EXCEEDED = 3003

    # Input errors (4000-4999)
    INCOMPLETE_PARSE = 4001
    UNEXPECTED_EOF = 4002


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        combinator: repr() of the combinator involved, when there is one
        position: Cursor position involved, when there is one
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    combinator: str | None = None
    position: int | None = None

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[CURSOR_TYPE_MISMATCH]: Sequence cannot compose combinators over Cursor and Other
              --> ConsumeOne(cursor_type=<class 'Other'>)
              = help: All operands of a composition must share one cursor type

        Returns:
            Formatted error message
        """
        lines = [f"error[{self.code.name}]: {_escape(self.message)}"]
        if self.combinator is not None:
            lines.append(f"  --> {_escape(self.combinator)}")
        if self.position is not None:
            lines.append(f"  = position: {self.position}")
        if self.hint is not None:
            lines.append(f"  = help: {_escape(self.hint)}")
        return "\n".join(lines)


def _escape(text: str) -> str:
    """Escape control characters so user tokens cannot forge log lines."""
    return text.replace("\r", "\\r").replace("\n", "\\n").replace("\x1b", "\\x1b")
