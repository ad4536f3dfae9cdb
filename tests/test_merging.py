import inspect

import pytest

from constrained_alignment.algorithms.nw_constrained import NeedlemanWunsch
from constrained_alignment.algorithms.score_matrix import DEFAULT_GAP_PENALTY
from constrained_alignment.core.exceptions import AlignmentError
from constrained_alignment.core.scoring import match_mismatch, wildcard_score
from constrained_alignment.core.utilities import (
    align_text,
    compute_alignment_stats,
    merge_aligned,
    merge_templates,
    strip_wildcards
)

TEMPLATES = ["*12*bc777*", "a1***b771*", "a2**bc77*7", "*3**c*77**"]


def test_align_text():
    """align_text returns a plain string."""
    assert align_text("aabcd", "aaabbbccd", match_mismatch(), '*') == "*aa**b*cd"
    assert align_text("aaabbbccd", "aabcd", match_mismatch(), '*') == "aabcd"

def test_strip_wildcards():
    assert strip_wildcards("a1***b771*") == "a1b771"
    assert strip_wildcards("a?b", wildcard='?') == "ab"
    assert strip_wildcards("****") == ""

def test_wildcard_score():
    """Wildcard reference positions are neutral."""
    score = wildcard_score('*')

    assert score('a', '*') == 0
    assert score('a', 'a') == 1
    assert score('a', 'b') == -1

    score = wildcard_score('?', match=3, mismatch=-3, wildcard_value=1)
    assert score('x', '?') == 1
    assert score('x', 'x') == 3

def test_merge_aligned():
    """New characters only fill wildcard positions."""
    assert merge_aligned("*12*bc777*", "a1**b**771") == "a12*bc7771"

    # Known characters are never overwritten
    assert merge_aligned("ab*", "xyz") == "abz"

    # Wildcards in the new alignment change nothing
    assert merge_aligned("a*c", "***") == "a*c"

def test_merge_aligned_length_mismatch():
    with pytest.raises(AlignmentError):
        merge_aligned("abc", "ab")

def test_merge_templates_converges():
    """Wildcard readings of the same string merge into one reading."""
    assert merge_templates(TEMPLATES) == "a123bc7771"

def test_merge_templates_fixed_point():
    """Merging again on top of the converged result changes nothing."""
    merged = merge_templates(TEMPLATES)

    assert merge_templates([merged] + TEMPLATES[1:]) == merged

def test_merge_templates_step_by_step():
    """Each template contributes the characters it knows."""
    nw = NeedlemanWunsch()
    score = wildcard_score('*')

    merged = TEMPLATES[0]
    aligned = ''.join(nw.align(strip_wildcards(TEMPLATES[1]), merged, score, '*'))
    assert aligned == "a1**b**771"

    merged = merge_aligned(merged, aligned)
    assert merged == "a12*bc7771"

    aligned = ''.join(nw.align(strip_wildcards(TEMPLATES[3]), merged, score, '*'))
    assert merge_aligned(merged, aligned) == "a123bc7771"

def test_merge_templates_edge_cases():
    assert merge_templates([]) == ""
    assert merge_templates(["a*c"]) == "a*c"
    assert merge_templates(["a*c", "abc"]) == "abc"

def test_merge_templates_reuses_engine():
    """A supplied engine keeps its buffer across templates."""
    nw = NeedlemanWunsch()
    merge_templates(TEMPLATES, engine=nw)

    assert nw.matrix.capacity >= (len("a1b771") + 1) * (len(TEMPLATES[0]) + 1)

def test_compute_alignment_stats():
    """Statistics for padded and truncated alignments."""
    stats = compute_alignment_stats("*aa**b*cd", "aabcd", "aaabbbccd", '*', match_mismatch())

    assert stats["filled"] == 5
    assert stats["placeholders"] == 4
    assert stats["dropped"] == 0
    assert stats["fill_fraction"] == pytest.approx(5 / 9)
    assert stats["positive_matches"] == 5

    stats = compute_alignment_stats("aabcd", "aaabbbccd", "aabcd", '*')
    assert stats["filled"] == 5
    assert stats["dropped"] == 4
    assert "positive_matches" not in stats

def test_compute_alignment_stats_empty_reference():
    stats = compute_alignment_stats("", "abc", "", '*')

    assert stats["fill_fraction"] == 0.0
    assert stats["dropped"] == 3

def test_compute_alignment_stats_length_mismatch():
    with pytest.raises(AlignmentError):
        compute_alignment_stats("ab", "ab", "abc", '*')

def test_compute_alignment_stats_with_fill_mask():
    """Source elements equal to the placeholder count as filled."""
    nw = NeedlemanWunsch()
    score = match_mismatch()
    aligned = ''.join(nw.align("a*b", "a*b", score, '*'))

    stats = compute_alignment_stats(aligned, "a*b", "a*b", '*', score, fill_mask=nw.last_fill_mask)

    assert stats["filled"] == 3
    assert stats["placeholders"] == 0
    assert stats["dropped"] == 0
    assert stats["positive_matches"] == 3

    with pytest.raises(AlignmentError):
        compute_alignment_stats(aligned, "a*b", "a*b", '*', fill_mask=[True])

def test_wildcard_must_be_single_character():
    with pytest.raises(ValueError):
        merge_templates(["a??c", "abc"], wildcard='??')

    with pytest.raises(ValueError):
        merge_templates([], wildcard='')

    with pytest.raises(ValueError):
        merge_aligned("a??c", "abcd", wildcard='??')

def test_utilities_share_engine_gap_penalty_default():
    for func in (align_text, merge_templates):
        assert inspect.signature(func).parameters['gap_penalty'].default == DEFAULT_GAP_PENALTY

if __name__ == "__main__":
    pytest.main([__file__, "-v"])
