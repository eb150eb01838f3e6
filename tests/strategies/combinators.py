"""Hypothesis strategies for combinator-algebra property testing.

Token streams draw from a three-letter alphabet so that literal
combinators match often enough to exercise both success and failure
paths.

Event-Emitting Strategies (HypoFuzz-Optimized):
    - comb_root={kind}: class of the generated combinator tree's root
    - comb_tokens={empty|short|long}: token stream length bucket

Repetition is only generated over combinators that always consume on
success; a zero-width body would make RepeatZeroOrMore loop forever.
"""

from __future__ import annotations

import operator
from functools import partial
from typing import Any

from hypothesis import event
from hypothesis import strategies as st

from tokencomb import (
    Combinator,
    ConsumeOne,
    Filter,
    Map,
    Optional,
    OrderedChoice,
    RepeatOneOrMore,
    RepeatZeroOrMore,
    Sequence,
    Succeed,
)

ALPHABET = "abc"


def literal(token: Any) -> Combinator:
    """Combinator matching exactly ``token``."""
    return ConsumeOne()[Filter(partial(operator.eq, token))]


def tag(*values: Any) -> tuple[str, tuple[Any, ...]]:
    """Total transform recording the group it received."""
    return ("tag", values)


@st.composite
def token_lists(draw: st.DrawFn, max_size: int = 8) -> list[str]:
    """Token streams over ALPHABET.

    Events emitted:
    - comb_tokens={empty|short|long}
    """
    tokens = draw(st.lists(st.sampled_from(ALPHABET), max_size=max_size))
    bucket = "empty" if not tokens else "short" if len(tokens) <= 3 else "long"
    event(f"comb_tokens={bucket}")
    return tokens


literals = st.sampled_from(ALPHABET).map(literal)

# Combinators that consume at least one token whenever they succeed.
consuming = st.one_of(st.just(ConsumeOne()), literals)


def _extend(children: st.SearchStrategy[Combinator]) -> st.SearchStrategy[Combinator]:
    return st.one_of(
        children.map(Optional),
        st.lists(children, max_size=3).map(lambda cs: Sequence(*cs)),
        st.lists(children, min_size=1, max_size=3).map(lambda cs: OrderedChoice(*cs)),
        consuming.map(RepeatZeroOrMore),
        consuming.map(RepeatOneOrMore),
        children.map(lambda c: Map(c, tag)),
    )


_trees = st.recursive(st.one_of(consuming, st.just(Succeed())), _extend, max_leaves=8)


@st.composite
def combinator_trees(draw: st.DrawFn) -> Combinator:
    """Arbitrary terminating combinator trees.

    Events emitted:
    - comb_root={kind}
    """
    tree = draw(_trees)
    event(f"comb_root={type(tree).__name__}")
    return tree
