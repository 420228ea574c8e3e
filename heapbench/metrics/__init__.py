from .tracker import MetricSnapshot, NullTracker, PerformanceTracker

__all__ = [
    "MetricSnapshot",
    "NullTracker",
    "PerformanceTracker",
]
