"""
Configured front-ends for aligning strings and merging wildcard templates.
"""

import logging
from pathlib import Path
from typing import Dict, Any, List, Optional

from ..algorithms.nw_constrained import NeedlemanWunsch
from ..config.config_loader import load_config
from ..core.scoring import match_mismatch, wildcard_score
from ..core.utilities import compute_alignment_stats, merge_templates
from ..diagnostics.performance import PerformanceMonitor
from ..diagnostics.validation import check_alignment_size

LOGGER_NAME = 'constrained_alignment'


def setup_logging(config: Dict[str, Any]) -> logging.Logger:
    """Setup logging configuration."""
    log_level_str = config.get('debug', {}).get('log_level', 'INFO')
    log_level = getattr(logging, str(log_level_str).upper(), logging.INFO)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(log_level)

    # Remove existing handlers
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    # Console handler
    ch = logging.StreamHandler()
    ch.setLevel(log_level)
    ch.setFormatter(formatter)
    logger.addHandler(ch)

    # File handler
    logs_dir = config.get('io', {}).get('logs_dir')
    if logs_dir:
        log_dir = Path(logs_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(log_dir / 'alignment.log')
        fh.setLevel(log_level)
        fh.setFormatter(formatter)
        logger.addHandler(fh)

    return logger


def build_engine(config: Dict[str, Any]) -> NeedlemanWunsch:
    """Create an alignment engine from the ``alignment`` and ``limits`` sections."""
    return NeedlemanWunsch(
        gap_penalty=config['alignment']['gap_penalty'],
        max_cells=config.get('limits', {}).get('max_matrix_cells'),
    )


def run_alignment(
    source: str,
    reference: str,
    config: Optional[Dict[str, Any]] = None,
    engine: Optional[NeedlemanWunsch] = None
) -> Dict[str, Any]:
    """
    Align ``source`` onto ``reference`` with match/mismatch scoring.

    Returns:
        Dictionary with the aligned string, optimal score, statistics and
        performance report
    """
    config = config or load_config()
    logger = logging.getLogger(LOGGER_NAME)
    params = config['alignment']

    check_alignment_size(len(source), len(reference), config.get('limits', {}).get('max_matrix_cells'))
    engine = engine or build_engine(config)
    score = match_mismatch(params['match_score'], params['mismatch_score'])
    placeholder = params['placeholder']

    logger.info(f"Aligning {len(source)} source characters onto a reference of {len(reference)}")
    with PerformanceMonitor() as monitor:
        aligned = ''.join(engine.align(source, reference, score, placeholder))
        monitor.checkpoint('aligned')

    stats = compute_alignment_stats(aligned, source, reference, placeholder, score,
                                    fill_mask=engine.last_fill_mask)
    logger.info(f"Alignment score {engine.last_score}, "
                f"{stats['filled']}/{stats['reference_length']} positions filled, "
                f"{stats['dropped']} source characters dropped")

    return {
        'source': source,
        'reference': reference,
        'aligned': aligned,
        'score': engine.last_score,
        'stats': stats,
        'performance': monitor.get_report(),
    }


def run_merge(
    templates: List[str],
    config: Optional[Dict[str, Any]] = None,
    engine: Optional[NeedlemanWunsch] = None
) -> Dict[str, Any]:
    """
    Merge wildcard templates into a single reading.

    Returns:
        Dictionary with the merged string, remaining wildcard count and
        performance report
    """
    config = config or load_config()
    logger = logging.getLogger(LOGGER_NAME)
    params = config['alignment']
    limits = config.get('limits', {})
    wildcard = params['wildcard']

    if templates:
        longest = max(len(t) for t in templates)
        check_alignment_size(longest, len(templates[0]), limits.get('max_matrix_cells'))
    engine = engine or build_engine(config)
    score = wildcard_score(
        wildcard,
        match=params['match_score'],
        mismatch=params['mismatch_score'],
        wildcard_value=params['wildcard_score'],
    )

    logger.info(f"Merging {len(templates)} templates")
    with PerformanceMonitor() as monitor:
        merged = merge_templates(
            templates,
            wildcard=wildcard,
            max_rounds=limits.get('max_merge_rounds', 10),
            score=score,
            engine=engine,
        )
        monitor.checkpoint('merged')

    unresolved = merged.count(wildcard)
    if unresolved:
        logger.warning(f"{unresolved} positions still unknown after merging")
    logger.info(f"Merged result: {merged}")

    return {
        'templates': list(templates),
        'merged': merged,
        'unresolved': unresolved,
        'performance': monitor.get_report(),
    }


__all__ = [
    'setup_logging',
    'build_engine',
    'run_alignment',
    'run_merge',
]
