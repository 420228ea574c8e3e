"""Indexed binary min-heap with decrease-key, merge and benchmarking tools."""

from .datastructures import IndexedMinHeap
from .metrics import PerformanceTracker

__all__ = [
    "IndexedMinHeap",
    "PerformanceTracker",
]

__version__ = "0.1.0"
