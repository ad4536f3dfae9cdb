"""
Reference-shaped Needleman-Wunsch alignment with caller-defined scoring.
"""

# Version info - keep at top
__version__ = "1.0.0"
__description__ = "Constrained global alignment of a source sequence onto a fixed-length reference"

from .core.exceptions import (
    AlignmentError,
    ScoringError,
    SequenceTooLargeError,
    ConfigError
)

from .algorithms.nw_constrained import NeedlemanWunsch, align
from .algorithms.score_matrix import DEFAULT_GAP_PENALTY, ScoreMatrix

from .core.scoring import match_mismatch, predicate_score, wildcard_score
from .core.utilities import align_text, merge_aligned, merge_templates

__all__ = [
    # Alignment
    'NeedlemanWunsch',
    'align',
    'align_text',
    'ScoreMatrix',
    'DEFAULT_GAP_PENALTY',

    # Scoring functions
    'match_mismatch',
    'predicate_score',
    'wildcard_score',

    # Merging
    'merge_aligned',
    'merge_templates',

    # Exceptions
    'AlignmentError',
    'ScoringError',
    'SequenceTooLargeError',
    'ConfigError',

    # Version info
    '__version__',
    '__description__',
]
