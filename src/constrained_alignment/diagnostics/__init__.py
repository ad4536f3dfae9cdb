"""
Diagnostic modules for constrained alignment.
"""

from .performance import *
from .validation import *

__all__ = [
    'PerformanceMetrics',
    'PerformanceMonitor',
    'validate_configuration',
    'check_alignment_size',
]
