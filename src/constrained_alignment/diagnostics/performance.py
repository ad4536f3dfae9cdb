"""
Performance monitoring for alignment runs.
"""

import time
from datetime import datetime
from typing import Dict, List, Optional
from dataclasses import dataclass, field

import psutil


def _rss_mb() -> float:
    return psutil.Process().memory_info().rss / (1024 * 1024)


@dataclass
class PerformanceMetrics:
    """Performance metrics container."""
    start_time: float
    end_time: Optional[float] = None
    start_memory_mb: float = 0.0
    peak_memory_mb: float = 0.0
    checkpoints: List[Dict] = field(default_factory=list)

    @property
    def total_time(self) -> float:
        """Total execution time in seconds."""
        if self.end_time is None:
            return 0.0
        return self.end_time - self.start_time


class PerformanceMonitor:
    """
    Record wall time and resident memory around alignment work.

    Memory is sampled at ``start``, at every ``checkpoint`` and at ``stop``;
    alignment is synchronous so no background sampling thread is needed.

    Examples:
        >>> with PerformanceMonitor() as monitor:
        ...     monitor.checkpoint("scored")
        >>> report = monitor.get_report()
    """

    def __init__(self):
        self.metrics = PerformanceMetrics(start_time=time.time())

    def __enter__(self):
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.stop()
        return False

    def _sample(self) -> float:
        memory_mb = _rss_mb()
        if memory_mb > self.metrics.peak_memory_mb:
            self.metrics.peak_memory_mb = memory_mb
        return memory_mb

    def start(self):
        """Start performance monitoring."""
        memory_mb = _rss_mb()
        self.metrics = PerformanceMetrics(
            start_time=time.time(),
            start_memory_mb=memory_mb,
            peak_memory_mb=memory_mb,
        )

    def checkpoint(self, label: str):
        self.metrics.checkpoints.append({
            'label': label,
            'elapsed_time': time.time() - self.metrics.start_time,
            'memory_mb': self._sample(),
        })

    def stop(self):
        """Stop performance monitoring."""
        self._sample()
        self.metrics.end_time = time.time()

    def get_report(self) -> Dict:
        """Get performance report."""
        return {
            'total_time_seconds': self.metrics.total_time,
            'start_memory_mb': self.metrics.start_memory_mb,
            'peak_memory_mb': self.metrics.peak_memory_mb,
            'start_time': datetime.fromtimestamp(self.metrics.start_time).isoformat(),
            'end_time': datetime.fromtimestamp(self.metrics.end_time).isoformat() if self.metrics.end_time else None,
            'checkpoints': list(self.metrics.checkpoints),
        }


__all__ = [
    'PerformanceMetrics',
    'PerformanceMonitor',
]
