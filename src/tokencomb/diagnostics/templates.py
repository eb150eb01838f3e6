"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This keeps messages testable and documents every error case in one place.
    """

    # =========================================================================
    # COMPOSITION ERRORS (1000-1999)
    # =========================================================================

    @staticmethod
    def not_a_combinator(operand: object, context: str) -> Diagnostic:
        """A non-combinator value was passed where a combinator is required.

        Args:
            operand: The offending value
            context: Name of the constructor that received it

        Returns:
            Diagnostic for NOT_A_COMBINATOR
        """
        msg = f"{context} expects combinators, got {type(operand).__name__}"
        return Diagnostic(
            code=DiagnosticCode.NOT_A_COMBINATOR,
            message=msg,
            combinator=repr(operand),
            hint="Lift plain functions with Wrap(fn) before composing them",
        )

    @staticmethod
    def cursor_type_mismatch(
        first: type, second: type, context: str, offender: object
    ) -> Diagnostic:
        """Composed combinators run over different cursor types.

        Args:
            first: Cursor type of the earlier operand
            second: Conflicting cursor type of a later operand
            context: Name of the composing constructor
            offender: The operand over ``second``

        Returns:
            Diagnostic for CURSOR_TYPE_MISMATCH
        """
        msg = (
            f"{context} cannot compose combinators over "
            f"{first.__name__} and {second.__name__}"
        )
        return Diagnostic(
            code=DiagnosticCode.CURSOR_TYPE_MISMATCH,
            message=msg,
            combinator=repr(offender),
            hint="All operands of a composition must share one cursor type",
        )

    @staticmethod
    def empty_selection() -> Diagnostic:
        """Select() was built without indices.

        Returns:
            Diagnostic for EMPTY_SELECTION
        """
        return Diagnostic(
            code=DiagnosticCode.EMPTY_SELECTION,
            message="Select requires at least one index",
            hint="Use Map(inner, lambda *_: accept()) to discard a value group",
        )

    @staticmethod
    def invalid_collection(factory: object) -> Diagnostic:
        """A repetition collection factory is unusable.

        Args:
            factory: The offending factory

        Returns:
            Diagnostic for INVALID_COLLECTION
        """
        msg = f"Collection factory {factory!r} must be callable with no arguments"
        return Diagnostic(
            code=DiagnosticCode.INVALID_COLLECTION,
            message=msg,
            hint="Pass a type such as list or collections.deque",
        )

    @staticmethod
    def not_callable(value: object, role: str) -> Diagnostic:
        """A transform, predicate or combine function is not callable.

        Args:
            value: The offending value
            role: What the value was meant to be ("mapper", "predicate", ...)

        Returns:
            Diagnostic for NOT_CALLABLE
        """
        msg = f"Expected a callable {role}, got {type(value).__name__}"
        return Diagnostic(code=DiagnosticCode.NOT_CALLABLE, message=msg)

    # =========================================================================
    # TRANSFORM ERRORS (2000-2999)
    # =========================================================================

    @staticmethod
    def total_map_returned_outcome(mapper: object) -> Diagnostic:
        """A total Map's transform returned an Outcome.

        Args:
            mapper: The transform function

        Returns:
            Diagnostic for TOTAL_MAP_RETURNED_OUTCOME
        """
        msg = f"Total transform {_name(mapper)} returned an Outcome"
        return Diagnostic(
            code=DiagnosticCode.TOTAL_MAP_RETURNED_OUTCOME,
            message=msg,
            hint="Annotate the transform with '-> Outcome' or pass fallible=True",
        )

    @staticmethod
    def fallible_map_returned_value(mapper: object, value: object) -> Diagnostic:
        """A fallible Map's transform returned a bare value.

        Args:
            mapper: The transform function
            value: What it returned

        Returns:
            Diagnostic for FALLIBLE_MAP_RETURNED_VALUE
        """
        msg = (
            f"Fallible transform {_name(mapper)} returned "
            f"{type(value).__name__} instead of an Outcome"
        )
        return Diagnostic(
            code=DiagnosticCode.FALLIBLE_MAP_RETURNED_VALUE,
            message=msg,
            hint="Return accept(value) or reject()",
        )

    @staticmethod
    def wrapped_result_invalid(fn: object, value: object) -> Diagnostic:
        """A wrapped user function returned something other than a Result.

        Args:
            fn: The wrapped function
            value: What it returned

        Returns:
            Diagnostic for WRAPPED_RESULT_INVALID
        """
        msg = (
            f"Wrapped function {_name(fn)} returned {type(value).__name__}, "
            "expected ParseResult or None"
        )
        return Diagnostic(code=DiagnosticCode.WRAPPED_RESULT_INVALID, message=msg)

    # =========================================================================
    # RULE ERRORS (3000-3999)
    # =========================================================================

    @staticmethod
    def rule_unresolved(name: str) -> Diagnostic:
        """A deferred rule was invoked before being defined.

        Args:
            name: Rule name

        Returns:
            Diagnostic for RULE_UNRESOLVED
        """
        msg = f"Rule '{name}' was used before it was defined"
        return Diagnostic(
            code=DiagnosticCode.RULE_UNRESOLVED,
            message=msg,
            hint=f"Call {name}.define(...) before running the grammar",
        )

    @staticmethod
    def rule_already_defined(name: str) -> Diagnostic:
        """A deferred rule was defined twice.

        Args:
            name: Rule name

        Returns:
            Diagnostic for RULE_ALREADY_DEFINED
        """
        msg = f"Rule '{name}' is already defined"
        return Diagnostic(
            code=DiagnosticCode.RULE_ALREADY_DEFINED,
            message=msg,
            hint="Rules are immutable once bound; build a new Deferred instead",
        )

    @staticmethod
    def max_depth_exceeded(max_depth: int) -> Diagnostic:
        """Recursive rule nesting exceeded the configured depth.

        Args:
            max_depth: The depth limit that was hit

        Returns:
            Diagnostic for MAX_DEPTH_EXCEEDED
        """
        msg = f"Maximum rule nesting depth ({max_depth}) exceeded"
        return Diagnostic(
            code=DiagnosticCode.MAX_DEPTH_EXCEEDED,
            message=msg,
            hint="The input nests deeper than allowed; raise max_depth if this is legitimate",
        )

    # =========================================================================
    # INPUT ERRORS (4000-4999)
    # =========================================================================

    @staticmethod
    def incomplete_parse(position: int | None, remaining: int) -> Diagnostic:
        """A complete parse matched only a prefix of the input.

        Args:
            position: Position where matching stopped (None if the cursor has no pos)
            remaining: Number of unconsumed tokens

        Returns:
            Diagnostic for INCOMPLETE_PARSE
        """
        msg = f"Input not fully consumed: {remaining} token(s) left at position {position}"
        return Diagnostic(
            code=DiagnosticCode.INCOMPLETE_PARSE,
            message=msg,
            position=position,
            hint="Use parse() to accept a prefix match",
        )

    @staticmethod
    def unexpected_eof(position: int) -> Diagnostic:
        """Token read past the end of input.

        Args:
            position: The position where EOF was encountered

        Returns:
            Diagnostic for UNEXPECTED_EOF
        """
        msg = f"Unexpected end of input at position {position}"
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED_EOF,
            message=msg,
            position=position,
            hint="Check cursor.is_eof before reading cursor.current",
        )


def _name(fn: object) -> str:
    return getattr(fn, "__qualname__", None) or repr(fn)
