__description__ = "Test suite for constrained alignment"

TEST_CATEGORIES = {
    'alignment': 'Engine behaviour, tie-breaking and contracts (test_alignment.py)',
    'score_matrix': 'Score matrix construction and buffer reuse (test_score_matrix.py)',
    'merging': 'Wildcard template merging and statistics (test_merging.py)',
    'config': 'Configuration loading and validation (test_config.py)',
    'integration': 'Pipeline front-ends and CLI (test_integration.py)',
}
