"""Tests for Grammar, the cursor-bound construction namespace."""

from __future__ import annotations

import logging
from collections import deque

import pytest

from tests.helpers.cursors import LinkedCursor
from tokencomb import (
    ConsumeOne,
    Cursor,
    Deferred,
    Filter,
    FoldLeft,
    FoldRight,
    Grammar,
    Map,
    Optional,
    OrderedChoice,
    ParseResult,
    RepeatOneOrMore,
    RepeatZeroOrMore,
    Select,
    Sequence,
    Succeed,
    Wrap,
)
from tokencomb.diagnostics import CompositionError, DiagnosticCode
from tokencomb.outcome import Outcome


class TestGrammarPrimitives:
    def test_default_cursor_type(self) -> None:
        assert Grammar().cursor_type is Cursor

    def test_primitives_are_bound(self) -> None:
        g = Grammar(LinkedCursor)

        assert g.succ == Succeed(LinkedCursor)
        assert g.one == ConsumeOne(LinkedCursor)
        assert g.one.cursor_type is LinkedCursor

    def test_transforms_are_shared(self) -> None:
        g = Grammar()

        assert g.filter is Filter
        assert g.select is Select
        assert g.foldl is FoldLeft
        assert g.foldr is FoldRight
        assert g.accept("x").value == "x"
        assert not g.reject()

    def test_grammars_are_values(self) -> None:
        assert Grammar(Cursor) == Grammar(Cursor)
        assert Grammar(Cursor) != Grammar(LinkedCursor)


class TestGrammarConstructors:
    g = Grammar(Cursor)

    def test_constructors_build_core_combinators(self) -> None:
        g = self.g
        one = g.one

        assert g.opt(one) == Optional(one)
        assert g.seq(one, one) == Sequence(one, one)
        assert g.alt(one, g.succ) == OrderedChoice(one, g.succ)
        assert g.rep(one) == RepeatZeroOrMore(one)
        assert g.rep1(one) == RepeatOneOrMore(one)
        assert g.map(one, str.upper) == Map(one, str.upper)

    def test_empty_seq_is_bound_identity(self) -> None:
        seq = self.g.seq()
        cursor = Cursor.start("ab")

        assert seq.cursor_type is Cursor
        assert seq(cursor) == ParseResult((), cursor)

    def test_rep_with_custom_collection(self) -> None:
        result = self.g.rep(self.g.one, deque)(Cursor.start("ab"))

        assert result is not None
        assert isinstance(result.value, deque)
        assert list(result.value) == ["a", "b"]

    def test_map_fallible_keyword(self) -> None:
        digit = self.g.map(
            self.g.one,
            lambda c: self.g.accept(int(c)) if c.isdigit() else self.g.reject(),
            fallible=True,
        )

        assert digit(Cursor.start("7")).value == 7  # type: ignore[union-attr]
        assert digit(Cursor.start("x")) is None

    def test_map_detects_annotation(self) -> None:
        def vowel(c: str) -> Outcome[str]:
            return self.g.accept(c) if c in "aeiou" else self.g.reject()

        assert self.g.map(self.g.one, vowel).fallible is True

    def test_wrap_is_bound(self) -> None:
        def pair(cursor: Cursor[str]) -> ParseResult[str, Cursor[str]] | None:
            if cursor.remaining < 2:
                return None
            end = cursor.advance(2)
            return ParseResult("".join(cursor.slice_to(end)), end)

        wrapped = self.g.wrap(pair)

        assert isinstance(wrapped, Wrap)
        assert wrapped.cursor_type is Cursor
        assert wrapped(Cursor.start("abc")).value == "ab"  # type: ignore[union-attr]


class TestGrammarRules:
    def test_rule_is_bound_deferred(self) -> None:
        rule = Grammar(LinkedCursor).rule("item")

        assert isinstance(rule, Deferred)
        assert rule.name == "item"
        assert rule.cursor_type is LinkedCursor
        assert not rule.is_defined

    def test_rule_logs_declaration(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="tokencomb.grammar"):
            Grammar(Cursor).rule("expr")

        assert "expr" in caplog.text
        assert "Cursor" in caplog.text

    def test_rule_rejects_foreign_body(self) -> None:
        rule = Grammar(Cursor).rule("item")

        with pytest.raises(CompositionError) as exc_info:
            rule.define(Grammar(LinkedCursor).one)
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.CURSOR_TYPE_MISMATCH

    def test_grammars_over_different_cursors_do_not_mix(self) -> None:
        with pytest.raises(CompositionError):
            Grammar(Cursor).seq(Grammar(Cursor).one, Grammar(LinkedCursor).one)

    def test_recursive_list_over_user_cursor(self) -> None:
        """items := one ("," items)?  over a linked-list cursor."""
        g = Grammar(LinkedCursor)
        comma = g.map(g.one, g.filter(lambda t: t == ","))
        items = g.rule("items")
        items.define(
            g.map(
                g.seq(g.one, g.opt(g.map(g.seq(comma, items), g.select(1)))),
                lambda head, tail: [head, *(tail or [])],
            )
        )

        result = items(LinkedCursor.of("a", ",", "b", ",", "c"))

        assert result is not None
        assert result.value == ["a", "b", "c"]
        assert result.cursor.is_eof
