from .run_alignment import main as run_alignment_main

__all__ = [
    'run_alignment_main',
]
