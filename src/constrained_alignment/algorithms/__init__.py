from .score_matrix import *
from .backtrack import *
from .nw_constrained import *

__all__ = [
    # Score matrix
    'DEFAULT_GAP_PENALTY',
    'ScoreMatrix',
    'build_score_matrix',
    'check_score',
    'SCORE_MIN',
    'SCORE_MAX',

    # Traceback
    'reconstruct',

    # Engine
    'NeedlemanWunsch',
    'align',
]
