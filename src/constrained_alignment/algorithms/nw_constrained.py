"""
Reference-shaped Needleman-Wunsch alignment.

The source sequence is fitted onto the reference: the result always has the
reference's length, holding either source elements or the caller's
placeholder. Source and reference elements may be of different types as
long as the scoring function can compare them.
"""

import logging
import numbers
from typing import Callable, List, MutableSequence, Optional, Sequence

from .backtrack import reconstruct
from .score_matrix import DEFAULT_GAP_PENALTY, ScoreMatrix, build_score_matrix
from ..core.exceptions import AlignmentError

logger = logging.getLogger('constrained_alignment.nw_constrained')


def _validate_gap_penalty(gap_penalty):
    if isinstance(gap_penalty, bool) or not isinstance(gap_penalty, numbers.Integral):
        raise ValueError(f"gap_penalty should be an integer, got {gap_penalty!r}")
    if gap_penalty >= 0:
        raise ValueError(f"gap_penalty should be negative, got {gap_penalty}")
    return int(gap_penalty)


class NeedlemanWunsch:
    """
    Alignment engine owning a reusable score matrix.

    The matrix buffer is kept between calls and grows to the largest
    alignment seen, so repeated alignments of similar sizes do not
    reallocate. After each ``align`` call ``last_score`` holds the optimal
    score and ``last_fill_mask`` flags the output positions that carry a
    source element rather than the placeholder.

    An instance must not be shared between threads without
    external locking; separate instances share no state.

    Examples:
        >>> nw = NeedlemanWunsch()
        >>> ''.join(nw.align("aabcd", "aaabbbccd", lambda a, b: 1 if a == b else -1, '*'))
        '*aa**b*cd'
    """

    def __init__(self, gap_penalty: int = DEFAULT_GAP_PENALTY, max_cells: Optional[int] = None):
        self.gap_penalty = _validate_gap_penalty(gap_penalty)
        self.matrix = ScoreMatrix(max_cells=max_cells)
        self.last_score = None
        self.last_fill_mask = None

    def __repr__(self):
        return f"NeedlemanWunsch(gap_penalty={self.gap_penalty}, matrix={self.matrix!r})"

    def score_of(self, source: Sequence, reference: Sequence, score: Callable) -> int:
        """Optimal global score of ``source`` against ``reference``, without traceback."""
        table = build_score_matrix(source, reference, score, self.gap_penalty, self.matrix)
        return int(table[len(source), len(reference)])

    def align(
        self,
        source: Sequence,
        reference: Sequence,
        score: Callable,
        placeholder,
        out: Optional[MutableSequence] = None
    ) -> List:
        """
        Align ``source`` onto the shape of ``reference``.

        Args:
            source: Sequence to fit
            reference: Sequence defining the output length
            score: Callable ``score(source_item, reference_item) -> int``
            placeholder: Value emitted where no source element fits
            out: Optional pre-sized container; must have ``len(reference)``
                 elements and is overwritten in place

        Returns:
            The aligned elements (``out`` when it was given)

        Raises:
            AlignmentError: ``out`` has the wrong length
            ScoringError: ``score`` returned a non-integer or a value outside
                          int64
            SequenceTooLargeError: the matrix would exceed ``max_cells``
        """
        m = len(reference)
        if out is not None and len(out) != m:
            raise AlignmentError(
                f"Output container holds {len(out)} elements, reference has {m}"
            )

        table = build_score_matrix(source, reference, score, self.gap_penalty, self.matrix)
        self.last_score = int(table[len(source), m])

        fill_mask = []
        aligned = reconstruct(table, source, reference, score, placeholder,
                              self.gap_penalty, fill_mask=fill_mask)
        if len(aligned) != m:
            raise AlignmentError(f"Traceback produced {len(aligned)} elements, expected {m}")
        self.last_fill_mask = fill_mask

        if out is None:
            return aligned
        out[:] = aligned
        return out


def align(
    source: Sequence,
    reference: Sequence,
    score: Callable,
    placeholder,
    gap_penalty: int = DEFAULT_GAP_PENALTY,
    out: Optional[MutableSequence] = None
) -> List:
    """Align with a throwaway engine. See ``NeedlemanWunsch.align``."""
    return NeedlemanWunsch(gap_penalty).align(source, reference, score, placeholder, out=out)


__all__ = [
    'NeedlemanWunsch',
    'align',
]
