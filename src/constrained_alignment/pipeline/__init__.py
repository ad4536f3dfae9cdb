from .main_pipeline import *

__all__ = [
    'setup_logging',
    'build_engine',
    'run_alignment',
    'run_merge',
]
