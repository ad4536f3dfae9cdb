import numpy as np
import pytest

from constrained_alignment.algorithms.score_matrix import (
    SCORE_MAX,
    SCORE_MIN,
    ScoreMatrix,
    build_score_matrix,
    check_score
)
from constrained_alignment.algorithms.backtrack import reconstruct
from constrained_alignment.core.exceptions import ScoringError, SequenceTooLargeError


def equal_score(a, b):
    return 1 if a == b else -1


def test_matrix_dimensions_and_borders():
    """The table is (n+1) x (m+1) with linear-penalty borders."""
    table = build_score_matrix("ab", "abc", equal_score, gap_penalty=-2)

    assert table.shape == (3, 4)
    assert table[:, 0].tolist() == [0, -2, -4]
    assert table[0, :].tolist() == [0, -2, -4, -6]

def test_matrix_optimal_score():
    """The bottom-right cell holds the optimal global score."""
    # Two matches then one padded reference position: 1 + 1 - 2
    table = build_score_matrix("ab", "abc", equal_score, gap_penalty=-2)
    assert table[2, 3] == 0

    table = build_score_matrix("aabcd", "aaabbbccd", equal_score)
    assert table[5, 9] == 1

def test_matrix_recurrence():
    """Every interior cell is the best of its three predecessors."""
    source, reference, d = "gattaca", "gcatgcu", -1
    table = build_score_matrix(source, reference, equal_score, gap_penalty=d)

    for i in range(1, len(source) + 1):
        for j in range(1, len(reference) + 1):
            expected = max(
                table[i - 1, j - 1] + equal_score(source[i - 1], reference[j - 1]),
                table[i - 1, j] + d,
                table[i, j - 1] + d,
            )
            assert table[i, j] == expected

def test_empty_inputs():
    """Empty sequences only produce border cells."""
    table = build_score_matrix("", "abc", equal_score)
    assert table.tolist() == [[0, -1, -2, -3]]

    table = build_score_matrix("ab", "", equal_score)
    assert table.tolist() == [[0], [-1], [-2]]

def test_buffer_grows_but_never_shrinks():
    """The scratch buffer keeps its largest capacity."""
    matrix = ScoreMatrix()

    build_score_matrix("abcdef", "abcdef", equal_score, matrix=matrix)
    assert matrix.capacity == 49
    assert matrix.shape == (7, 7)

    table = build_score_matrix("ab", "a", equal_score, matrix=matrix)
    assert matrix.capacity == 49
    assert matrix.shape == (3, 2)
    assert table.shape == (3, 2)

def test_buffer_reuse_overwrites_cells():
    """A reused buffer gives the same table as a fresh one."""
    matrix = ScoreMatrix()
    build_score_matrix("zzzzzzzz", "zzzzzzzz", equal_score, matrix=matrix)

    reused = build_score_matrix("abc", "cab", equal_score, matrix=matrix)
    fresh = build_score_matrix("abc", "cab", equal_score)

    assert np.array_equal(reused, fresh)
    assert np.array_equal(matrix.view(), fresh)

def test_max_cells():
    """Requests above max_cells raise before allocation."""
    matrix = ScoreMatrix(max_cells=12)

    with pytest.raises(SequenceTooLargeError):
        matrix.reset(3, 3)
    assert matrix.capacity == 0

    table = matrix.reset(2, 3)
    assert table.shape == (3, 4)

    with pytest.raises(ValueError):
        ScoreMatrix(max_cells=0)

def test_check_score():
    """Only integers pass the scoring contract."""
    assert check_score(3, 'a', 'b') == 3
    assert check_score(np.int64(-2), 'a', 'b') == -2
    assert isinstance(check_score(np.int8(1), 'a', 'b'), int)

    for bad in (1.0, True, None, "1"):
        with pytest.raises(ScoringError):
            check_score(bad, 'a', 'b')

def test_reconstruct_shape_mismatch():
    """Traceback refuses a table built for other sequences."""
    table = build_score_matrix("ab", "ab", equal_score)

    with pytest.raises(ValueError):
        reconstruct(table, "abc", "ab", equal_score, '*')

def test_reconstruct_from_built_table():
    """Builder and traceback together reproduce the engine result."""
    table = build_score_matrix("aabcd", "aaabbbccd", equal_score)
    res = reconstruct(table, "aabcd", "aaabbbccd", equal_score, '*')

    assert ''.join(res) == "*aa**b*cd"

def test_check_score_int64_range():
    """Scores must fit the int64 score matrix."""
    assert check_score(SCORE_MAX, 'a', 'b') == 2**63 - 1
    assert check_score(SCORE_MIN, 'a', 'b') == -2**63

    for bad in (2**63, -2**63 - 1, 10**30):
        with pytest.raises(ScoringError):
            check_score(bad, 'a', 'b')

def test_accumulated_score_overflow():
    """Totals leaving int64 raise ScoringError instead of wrapping."""
    def score(a, b):
        return SCORE_MAX if a == b else -1

    # Row 1 still fits, the second diagonal step doubles SCORE_MAX
    with pytest.raises(ScoringError):
        build_score_matrix("aa", "aa", score)

def test_reconstruct_fill_mask():
    """The fill mask flags output positions holding source elements."""
    table = build_score_matrix("aabcd", "aaabbbccd", equal_score)
    mask = ['stale']
    res = reconstruct(table, "aabcd", "aaabbbccd", equal_score, '*', fill_mask=mask)

    assert ''.join(res) == "*aa**b*cd"
    assert mask == [False, True, True, False, False, True, False, True, True]

if __name__ == "__main__":
    pytest.main([__file__, "-v"])
