"""tokencomb exception hierarchy with structured diagnostics.

A failed match is NOT an exception: combinators report it by returning
``None``. The exceptions below signal programming errors in how a grammar
was composed or run.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class CombinatorError(Exception):
    """Base exception for all tokencomb errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize CombinatorError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class CompositionError(CombinatorError, TypeError):
    """Combinators cannot be composed as requested.

    Raised at construction time, never while matching:
    - operands that are not combinators
    - operands over different cursor types
    - malformed arguments (empty Select, unusable collection factory)
    """


class TransformShapeError(CombinatorError, TypeError):
    """A transform or wrapped function returned the wrong shape.

    Examples:
    - A total Map's transform returned an Outcome
    - A fallible Map's transform returned a bare value
    - A Wrap'd function returned something other than ParseResult | None
    """


class UnresolvedRuleError(CombinatorError, LookupError):
    """A Deferred rule was invoked before define() bound it."""


class DepthLimitExceededError(CombinatorError, RecursionError):
    """Maximum rule nesting depth exceeded.

    This error indicates either:
    - Adversarial input designed to cause stack overflow
    - A left-recursive rule (unsupported; it never consumes input)
    - Legitimately deep input with a too-small max_depth
    """


class IncompleteParseError(CombinatorError, ValueError):
    """parse_all() matched, but input tokens remain.

    Attributes:
        result: The prefix ParseResult that was matched
    """

    def __init__(self, message: str | Diagnostic, result: object = None) -> None:
        """Initialize IncompleteParseError.

        Args:
            message: Error message string OR Diagnostic object
            result: The ParseResult covering the matched prefix
        """
        super().__init__(message)
        self.result = result
