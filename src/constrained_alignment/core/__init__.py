"""
Core helpers for the constrained alignment package.
"""

from .exceptions import (
    AlignmentError,
    ScoringError,
    SequenceTooLargeError,
    ConfigError
)

from .scoring import (
    match_mismatch,
    predicate_score,
    wildcard_score
)

from .utilities import (
    align_text,
    strip_wildcards,
    merge_aligned,
    merge_templates,
    compute_alignment_stats
)

__all__ = [
    # Exceptions
    'AlignmentError',
    'ScoringError',
    'SequenceTooLargeError',
    'ConfigError',

    # Scoring functions
    'match_mismatch',
    'predicate_score',
    'wildcard_score',

    # Utility functions
    'align_text',
    'strip_wildcards',
    'merge_aligned',
    'merge_templates',
    'compute_alignment_stats',
]
