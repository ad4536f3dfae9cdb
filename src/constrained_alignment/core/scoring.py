"""
Scoring function factories.

Every factory returns a plain callable ``score(source_item, reference_item)``
returning an int, ready to pass to ``NeedlemanWunsch.align``.
"""

from typing import Any, Callable


def match_mismatch(match: int = 1, mismatch: int = -1) -> Callable[[Any, Any], int]:
    """Score ``match`` for equal elements and ``mismatch`` otherwise."""
    def score(a, b):
        return match if a == b else mismatch
    return score


def predicate_score(
    predicate: Callable[[Any], Any],
    match: int = 2,
    mismatch: int = -2
) -> Callable[[Any, Any], int]:
    """
    Compare a property of the source element against a reference label.

    Useful when the reference is a structural template rather than text,
    e.g. ``predicate_score(str.isdigit)`` against a list of booleans.
    """
    def score(a, label):
        return match if predicate(a) == label else mismatch
    return score


def wildcard_score(
    wildcard: str = '*',
    match: int = 1,
    mismatch: int = -1,
    wildcard_value: int = 0
) -> Callable[[Any, Any], int]:
    """Equality scoring where a wildcard reference position scores ``wildcard_value``."""
    def score(a, b):
        if b == wildcard:
            return wildcard_value
        return match if a == b else mismatch
    return score


__all__ = [
    'match_mismatch',
    'predicate_score',
    'wildcard_score',
]
