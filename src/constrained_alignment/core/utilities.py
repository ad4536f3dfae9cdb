"""
Utility functions built on top of the alignment engine: text helpers,
wildcard template merging and alignment statistics.
"""

import logging
from typing import Callable, Dict, Iterable, Optional, Sequence

from .exceptions import AlignmentError
from .scoring import wildcard_score
from ..algorithms.score_matrix import DEFAULT_GAP_PENALTY

logger = logging.getLogger('constrained_alignment.utilities')


def align_text(source: str, reference: str, score: Callable, placeholder: str,
               gap_penalty: int = DEFAULT_GAP_PENALTY, engine=None) -> str:
    """Align two strings and return the aligned source as a string."""
    if engine is None:
        from ..algorithms.nw_constrained import NeedlemanWunsch
        engine = NeedlemanWunsch(gap_penalty)
    return ''.join(engine.align(source, reference, score, placeholder))


def _check_wildcard(wildcard):
    if not isinstance(wildcard, str) or len(wildcard) != 1:
        raise ValueError(f"wildcard should be a single character, got {wildcard!r}")


def strip_wildcards(template: str, wildcard: str = '*') -> str:
    return template.replace(wildcard, '')


def merge_aligned(previous: str, aligned: str, wildcard: str = '*') -> str:
    """
    Fill wildcard positions of ``previous`` with characters from ``aligned``.

    Positions already known in ``previous`` are kept; a wildcard in
    ``aligned`` never overwrites anything.
    """
    _check_wildcard(wildcard)
    if len(previous) != len(aligned):
        raise AlignmentError(
            f"Cannot merge sequences of different length: {len(previous)} != {len(aligned)}"
        )
    return ''.join(
        new if old == wildcard else old
        for old, new in zip(previous, aligned)
    )


def merge_templates(
    templates: Iterable[str],
    wildcard: str = '*',
    gap_penalty: int = DEFAULT_GAP_PENALTY,
    max_rounds: int = 10,
    score: Optional[Callable] = None,
    engine=None
) -> str:
    """
    Merge partially wildcarded readings of the same string.

    The first template fixes the output length. Every other template is
    stripped of its wildcards, aligned onto the running result and merged
    into it. Rounds repeat until one leaves the result unchanged or
    ``max_rounds`` is reached.

    Args:
        templates: Strings of any length using ``wildcard`` for unknown characters
        wildcard: Single wildcard character, also used as the alignment placeholder
        gap_penalty: Linear gap penalty
        max_rounds: Upper bound on merge rounds
        score: Scoring callable; defaults to ``wildcard_score(wildcard)``
        engine: Alignment engine to reuse

    Returns:
        The merged string

    Examples:
        >>> merge_templates(["*12*bc777*", "a1***b771*", "a2**bc77*7", "*3**c*77**"])
        'a123bc7771'
    """
    _check_wildcard(wildcard)
    templates = list(templates)
    if not templates:
        return ''

    if engine is None:
        from ..algorithms.nw_constrained import NeedlemanWunsch
        engine = NeedlemanWunsch(gap_penalty)
    if score is None:
        score = wildcard_score(wildcard)

    merged = templates[0]
    stripped = [strip_wildcards(t, wildcard) for t in templates[1:]]

    for round_no in range(1, max_rounds + 1):
        before = merged
        for text in stripped:
            aligned = ''.join(engine.align(text, merged, score, wildcard))
            merged = merge_aligned(merged, aligned, wildcard)
        logger.debug(f"Merge round {round_no}: {merged}")
        if merged == before:
            break
    else:
        logger.warning(f"Template merge did not converge after {max_rounds} rounds")

    return merged


def compute_alignment_stats(
    aligned: Sequence,
    source: Sequence,
    reference: Sequence,
    placeholder,
    score: Optional[Callable] = None,
    fill_mask: Optional[Sequence[bool]] = None
) -> Dict:
    """
    Summarise an aligned sequence.

    Filled positions are taken from ``fill_mask`` (as recorded in
    ``NeedlemanWunsch.last_fill_mask``) when given. Without it they are
    counted by comparing against ``placeholder``, which miscounts source
    elements equal to the placeholder.

    Returns:
        Dictionary with:
        - filled: positions carrying a source element
        - placeholders: positions carrying the placeholder
        - dropped: source elements that did not make it into the output
        - fill_fraction: filled / reference length
        - positive_matches: filled positions scoring > 0 (only with ``score``)
    """
    if len(aligned) != len(reference):
        raise AlignmentError(
            f"Aligned length {len(aligned)} does not match reference length {len(reference)}"
        )

    if fill_mask is None:
        fill_mask = [x != placeholder for x in aligned]
    elif len(fill_mask) != len(aligned):
        raise AlignmentError(
            f"Fill mask length {len(fill_mask)} does not match aligned length {len(aligned)}"
        )

    filled = sum(1 for f in fill_mask if f)
    placeholders = len(aligned) - filled

    stats = {
        "reference_length": len(reference),
        "source_length": len(source),
        "filled": filled,
        "placeholders": placeholders,
        "dropped": max(0, len(source) - filled),
        "fill_fraction": filled / len(reference) if len(reference) else 0.0,
    }

    if score is not None:
        stats["positive_matches"] = sum(
            1 for x, ref, f in zip(aligned, reference, fill_mask)
            if f and score(x, ref) > 0
        )

    return stats


__all__ = [
    'align_text',
    'strip_wildcards',
    'merge_aligned',
    'merge_templates',
    'compute_alignment_stats',
]
