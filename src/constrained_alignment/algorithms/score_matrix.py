"""
Score matrix construction for reference-shaped Needleman-Wunsch alignment.

The table has (n+1) rows for the source sequence and (m+1) columns for the
reference sequence. Building it costs O(n*m) time and O(n*m) memory; callers
aligning long sequences should bound n*m up front (see ``max_cells``).
"""

import logging
import numbers
from typing import Callable, Optional, Sequence

import numpy as np

from ..core.exceptions import ScoringError, SequenceTooLargeError

logger = logging.getLogger('constrained_alignment.score_matrix')

DEFAULT_GAP_PENALTY = -1

SCORE_MIN = int(np.iinfo(np.int64).min)
SCORE_MAX = int(np.iinfo(np.int64).max)


def check_score(value, a, b) -> int:
    """
    Return ``value`` as a Python int or raise ScoringError.

    Scores must be integers within the int64 range of the score matrix.
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise ScoringError(
            f"Scoring function must return an integer, got {type(value).__name__} "
            f"for pair ({a!r}, {b!r})"
        )
    value = int(value)
    if not SCORE_MIN <= value <= SCORE_MAX:
        raise ScoringError(
            f"Score {value} for pair ({a!r}, {b!r}) is outside the int64 range "
            f"[{SCORE_MIN}, {SCORE_MAX}]"
        )
    return value


class ScoreMatrix:
    """
    Reusable scratch buffer holding the dynamic-programming table.

    The underlying storage only grows: ``reset`` reallocates when a request
    needs more cells than the current capacity and otherwise reuses the
    existing buffer. Every cell of the returned view is written before it is
    read, so stale values from earlier calls never leak.

    Examples:
        >>> matrix = ScoreMatrix()
        >>> table = matrix.reset(2, 3, -1)
        >>> table.shape
        (3, 4)
    """
    _DTYPE = np.int64

    def __init__(self, max_cells: Optional[int] = None):
        if max_cells is not None and max_cells <= 0:
            raise ValueError(f"max_cells should be positive, got {max_cells}")
        self.max_cells = max_cells
        self._data = np.empty(0, dtype=self._DTYPE)
        self._shape = (0, 0)

    def __repr__(self):
        return f"ScoreMatrix(shape={self._shape}, capacity={self.capacity})"

    @property
    def capacity(self) -> int:
        return self._data.size

    @property
    def shape(self):
        return self._shape

    def view(self) -> np.ndarray:
        """Table populated by the most recent ``reset``/build."""
        rows, cols = self._shape
        return self._data[:rows * cols].reshape(rows, cols)

    def reset(self, n: int, m: int, gap_penalty: int = DEFAULT_GAP_PENALTY) -> np.ndarray:
        """
        Size the buffer for an n x m alignment and write the border cells.

        Args:
            n: Source length
            m: Reference length
            gap_penalty: Linear penalty charged per insertion or deletion

        Returns:
            A (n+1, m+1) view with ``M[i][0] = i*d`` and ``M[0][j] = j*d``
        """
        rows, cols = n + 1, m + 1
        needed = rows * cols

        if self.max_cells is not None and needed > self.max_cells:
            raise SequenceTooLargeError(
                f"Score matrix of {rows}x{cols} ({needed:,} cells) exceeds "
                f"the limit of {self.max_cells:,} cells"
            )

        if needed > self.capacity:
            logger.debug(f"Growing score matrix buffer from {self.capacity:,} to {needed:,} cells")
            self._data = np.empty(needed, dtype=self._DTYPE)

        self._shape = (rows, cols)
        table = self.view()
        table[:, 0] = np.arange(rows, dtype=self._DTYPE) * gap_penalty
        table[0, :] = np.arange(cols, dtype=self._DTYPE) * gap_penalty
        return table


def build_score_matrix(
    source: Sequence,
    reference: Sequence,
    score: Callable,
    gap_penalty: int = DEFAULT_GAP_PENALTY,
    matrix: Optional[ScoreMatrix] = None
) -> np.ndarray:
    """
    Fill the global alignment table of ``source`` against ``reference``.

    Each interior cell takes the best of three moves:
    diagonal (``score(source[i-1], reference[j-1])``), dropping a source
    element (``M[i-1][j] + d``) and padding a reference position
    (``M[i][j-1] + d``). ``M[n][m]`` is the optimal score of any monotone
    path from (0, 0) to (n, m).

    Runs in O(n*m) time and memory. Scores and accumulated totals must fit
    in int64; anything larger raises ScoringError.

    Args:
        source: Source elements (rows)
        reference: Reference elements (columns)
        score: Callable ``score(a, b) -> int``
        gap_penalty: Linear gap penalty d
        matrix: Scratch buffer to reuse; a fresh one is created when omitted

    Returns:
        The populated (n+1, m+1) table
    """
    if matrix is None:
        matrix = ScoreMatrix()

    n, m = len(source), len(reference)
    table = matrix.reset(n, m, gap_penalty)
    d = gap_penalty

    # Work on Python ints row by row, then store the finished row
    prev_row = table[0].tolist()
    for i in range(1, n + 1):
        a = source[i - 1]
        row = [i * d] + [0] * m
        for j in range(1, m + 1):
            b = reference[j - 1]
            best = prev_row[j - 1] + check_score(score(a, b), a, b)
            drop = prev_row[j] + d
            if drop > best:
                best = drop
            pad = row[j - 1] + d
            if pad > best:
                best = pad
            row[j] = best
        if min(row) < SCORE_MIN or max(row) > SCORE_MAX:
            raise ScoringError(
                f"Accumulated score in row {i} overflows the int64 score matrix"
            )
        table[i, :] = row
        prev_row = row

    logger.debug(f"Built {n + 1}x{m + 1} score matrix, optimal score {int(table[n, m])}")
    return table


__all__ = [
    'DEFAULT_GAP_PENALTY',
    'ScoreMatrix',
    'build_score_matrix',
    'check_score',
    'SCORE_MIN',
    'SCORE_MAX',
]
