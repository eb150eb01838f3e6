"""Tests for primitive combinators: Succeed, ConsumeOne, Wrap, Deferred."""

from __future__ import annotations

import logging

import pytest

from tests.helpers.cursors import LinkedCursor
from tokencomb.combinators import (
    ConsumeOne,
    Deferred,
    Filter,
    Map,
    Optional,
    OrderedChoice,
    Sequence,
    Succeed,
    Wrap,
)
from tokencomb.cursor import Cursor, ParseResult
from tokencomb.diagnostics import (
    CompositionError,
    DiagnosticCode,
    TransformShapeError,
    UnresolvedRuleError,
)
from tokencomb.groups import EMPTY_GROUP

# ============================================================================
# SUCCEED
# ============================================================================


class TestSucceed:
    def test_matches_without_consuming(self) -> None:
        cursor = Cursor.start("abc")
        result = Succeed()(cursor)

        assert result == ParseResult(EMPTY_GROUP, cursor)

    def test_matches_at_eof(self) -> None:
        cursor = Cursor.start("")
        assert Succeed()(cursor) == ParseResult((), cursor)

    def test_returns_same_cursor_object(self) -> None:
        cursor = Cursor.start("abc")
        assert Succeed()(cursor).cursor is cursor  # type: ignore[union-attr]


# ============================================================================
# CONSUME ONE
# ============================================================================


class TestConsumeOne:
    def test_consumes_current_token(self) -> None:
        result = ConsumeOne()(Cursor.start(["A", "B"]))

        assert result is not None
        assert result.value == "A"
        assert result.cursor.pos == 1

    def test_does_not_move_caller_cursor(self) -> None:
        cursor = Cursor.start(["A", "B"])
        ConsumeOne()(cursor)

        assert cursor.pos == 0

    def test_fails_cleanly_at_eof(self) -> None:
        """End of input is a no-match, never an exception."""
        assert ConsumeOne()(Cursor.start([])) is None
        assert ConsumeOne()(Cursor.start("a").advance()) is None

    def test_token_may_be_any_object(self) -> None:
        token = ("kw", "if")
        result = ConsumeOne()(Cursor.start([token]))

        assert result is not None
        assert result.value is token

    def test_works_with_user_cursor(self) -> None:
        result = ConsumeOne()(LinkedCursor.of(7, 8))

        assert result is not None
        assert result.value == 7
        assert result.cursor == LinkedCursor.of(7, 8).advance()

    def test_call_and_parse_agree(self) -> None:
        cursor = Cursor.start("x")
        assert ConsumeOne()(cursor) == ConsumeOne().parse(cursor)


# ============================================================================
# WRAP
# ============================================================================


def _digit(cursor: Cursor[str]) -> ParseResult[int, Cursor[str]] | None:
    if not cursor.is_eof and cursor.current.isdigit():
        return ParseResult(int(cursor.current), cursor.advance())
    return None


class TestWrap:
    def test_lifts_function(self) -> None:
        result = Wrap(_digit)(Cursor.start("4x"))

        assert result is not None
        assert result.value == 4

    def test_passes_through_no_match(self) -> None:
        assert Wrap(_digit)(Cursor.start("x")) is None

    def test_composes_like_any_combinator(self) -> None:
        digit = Wrap(_digit)
        result = Sequence(digit, digit)(Cursor.start("12"))

        assert result is not None
        assert result.value == (1, 2)

    def test_rejects_non_result_return(self) -> None:
        bogus = Wrap(lambda cursor: (cursor.current, cursor.advance()))

        with pytest.raises(TransformShapeError) as exc_info:
            bogus(Cursor.start("a"))
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.WRAPPED_RESULT_INVALID

    def test_requires_callable(self) -> None:
        with pytest.raises(CompositionError):
            Wrap("not a function")  # type: ignore[arg-type]


# ============================================================================
# DEFERRED
# ============================================================================


class TestDeferred:
    def test_unbound_rule_raises(self) -> None:
        rule = Deferred("expr")

        assert not rule.is_defined
        with pytest.raises(UnresolvedRuleError, match="expr"):
            rule(Cursor.start("a"))

    def test_delegates_once_defined(self) -> None:
        rule = Deferred("any")
        rule.define(ConsumeOne())

        assert rule.is_defined
        assert rule(Cursor.start("a")) == ConsumeOne()(Cursor.start("a"))

    def test_define_twice_rejected(self) -> None:
        rule = Deferred("x")
        rule.define(Succeed())

        with pytest.raises(CompositionError) as exc_info:
            rule.define(ConsumeOne())
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.RULE_ALREADY_DEFINED

    def test_rejected_body_leaves_rule_unbound(self) -> None:
        rule = Deferred("x", Cursor)

        with pytest.raises(CompositionError):
            rule.define(ConsumeOne(LinkedCursor))
        assert not rule.is_defined

        rule.define(ConsumeOne(Cursor))
        assert rule.is_defined
        assert rule(Cursor.start("a")).value == "a"  # type: ignore[union-attr]

    def test_define_requires_combinator(self) -> None:
        with pytest.raises(CompositionError):
            Deferred("x").define(lambda cursor: None)  # type: ignore[arg-type]

    def test_define_checks_cursor_type(self) -> None:
        rule = Deferred("x", Cursor)

        with pytest.raises(CompositionError):
            rule.define(ConsumeOne(LinkedCursor))

    def test_recursive_rule(self) -> None:
        """parens := '(' parens? ')'  counts nesting depth."""
        open_paren = ConsumeOne()[Filter(lambda t: t == "(")]
        close_paren = ConsumeOne()[Filter(lambda t: t == ")")]
        parens = Deferred("parens")
        parens.define(
            Map(
                Sequence(open_paren, Optional(parens), close_paren),
                lambda _open, inner, _close: 1 + (inner or 0),
            )
        )

        result = parens(Cursor.start("(())"))

        assert result is not None
        assert result.value == 2
        assert result.cursor.is_eof

    def test_can_be_referenced_before_definition(self) -> None:
        rule = Deferred("late")
        either = OrderedChoice(rule, Succeed())
        rule.define(ConsumeOne())

        assert either(Cursor.start("z")).value == "z"  # type: ignore[union-attr]

    def test_identity_semantics(self) -> None:
        assert Deferred("a") != Deferred("a")
        rule = Deferred("a")
        assert rule == rule
        assert len({rule, rule}) == 1

    def test_repr_is_not_recursive(self) -> None:
        rule = Deferred("loop")
        rule.define(Sequence(ConsumeOne(), Optional(rule)))

        assert repr(rule) == "Deferred('loop')"
        assert "Deferred('loop')" in repr(rule.target)

    def test_define_logs(self, caplog: pytest.LogCaptureFixture) -> None:
        rule = Deferred("logged")
        with caplog.at_level(logging.DEBUG, logger="tokencomb.combinators.primitives"):
            rule.define(ConsumeOne())

        assert "logged" in caplog.text
