"""
Traceback over a populated score matrix.
"""

from typing import Callable, List, Optional, Sequence

import numpy as np

from .score_matrix import DEFAULT_GAP_PENALTY, check_score


def reconstruct(
    table: np.ndarray,
    source: Sequence,
    reference: Sequence,
    score: Callable,
    placeholder,
    gap_penalty: int = DEFAULT_GAP_PENALTY,
    fill_mask: Optional[List[bool]] = None
) -> List:
    """
    Walk ``table`` from (n, m) back to (0, 0) and rebuild the aligned source.

    When several moves reproduce a cell the first one wins, in this order:
    diagonal (emit ``source[i-1]``), drop ``source[i-1]``, emit ``placeholder``.
    Source elements left over once the reference is exhausted are discarded;
    reference positions left over once the source is exhausted are padded.

    When ``fill_mask`` is given it is cleared and filled with one flag per
    output position: True where a source element was emitted, False where
    the placeholder was.

    Returns:
        List with exactly ``len(reference)`` elements
    """
    n, m = len(source), len(reference)
    if table.shape != (n + 1, m + 1):
        raise ValueError(f"Score matrix shape {table.shape} does not match ({n + 1}, {m + 1})")

    d = gap_penalty
    aligned = []
    filled = []
    i, j = n, m

    while i > 0 and j > 0:
        current = int(table[i, j])
        a = source[i - 1]
        b = reference[j - 1]

        if current == int(table[i - 1, j - 1]) + check_score(score(a, b), a, b):
            aligned.append(a)
            filled.append(True)
            i -= 1
            j -= 1
        elif current == int(table[i - 1, j]) + d:
            i -= 1
        else:
            aligned.append(placeholder)
            filled.append(False)
            j -= 1

    # Remaining source elements (i > 0) have no reference position left
    aligned.extend([placeholder] * j)
    filled.extend([False] * j)

    aligned.reverse()
    if fill_mask is not None:
        filled.reverse()
        fill_mask[:] = filled
    return aligned


__all__ = [
    'reconstruct',
]
