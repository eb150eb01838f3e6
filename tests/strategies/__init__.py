"""Hypothesis strategies for tokencomb property-based testing.

Usage:
    from tests.strategies import combinator_trees, token_lists, literal
"""

from .combinators import (
    ALPHABET,
    combinator_trees,
    consuming,
    literal,
    literals,
    tag,
    token_lists,
)

__all__ = [
    "ALPHABET",
    "combinator_trees",
    "consuming",
    "literal",
    "literals",
    "tag",
    "token_lists",
]
