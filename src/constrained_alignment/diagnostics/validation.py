"""
Input and configuration validation.
"""

from typing import Dict, List, Tuple

from ..core.exceptions import SequenceTooLargeError


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_configuration(config: Dict) -> Tuple[bool, List[str]]:
    """
    Validate alignment configuration.

    Args:
        config: Configuration dictionary

    Returns:
        Tuple of (is_valid, error_messages)
    """
    errors = []

    for section in ('alignment', 'limits'):
        if section not in config:
            errors.append(f"Missing configuration section: {section}")

    align_config = config.get('alignment', {})
    if align_config:
        gap_penalty = align_config.get('gap_penalty', -1)
        if not _is_int(gap_penalty) or gap_penalty >= 0:
            errors.append(f"gap_penalty should be a negative integer, got {gap_penalty!r}")

        for key in ('placeholder', 'wildcard'):
            value = align_config.get(key, '*')
            if not isinstance(value, str) or len(value) != 1:
                errors.append(f"{key} should be a single character, got {value!r}")

        for key in ('match_score', 'mismatch_score', 'wildcard_score'):
            if key in align_config and not _is_int(align_config[key]):
                errors.append(f"{key} should be an integer, got {align_config[key]!r}")

        match = align_config.get('match_score', 1)
        if _is_int(match) and _is_int(gap_penalty) and match <= gap_penalty:
            errors.append(f"match_score {match} should exceed gap_penalty {gap_penalty}")

    limits = config.get('limits', {})
    if limits:
        max_cells = limits.get('max_matrix_cells')
        if max_cells is not None and (not _is_int(max_cells) or max_cells <= 0):
            errors.append(f"max_matrix_cells should be a positive integer or null, got {max_cells!r}")

        rounds = limits.get('max_merge_rounds', 10)
        if not _is_int(rounds) or rounds <= 0:
            errors.append(f"max_merge_rounds should be a positive integer, got {rounds!r}")

    return len(errors) == 0, errors


def check_alignment_size(n: int, m: int, max_cells) -> int:
    """
    Raise SequenceTooLargeError when an n x m alignment needs more than ``max_cells``.

    Returns:
        Number of score matrix cells required
    """
    cells = (n + 1) * (m + 1)
    if max_cells is not None and cells > max_cells:
        raise SequenceTooLargeError(
            f"Aligning {n:,} against {m:,} elements needs {cells:,} matrix cells, "
            f"limit is {max_cells:,}"
        )
    return cells


__all__ = [
    'validate_configuration',
    'check_alignment_size',
]
