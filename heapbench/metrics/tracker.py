"""Operation counters for heap instrumentation.

A heap is handed a tracker at construction and calls its ``increment_*``
hooks as it compares, swaps, reads/writes storage and allocates. The heap
never depends on the counts: :class:`NullTracker` accepts the same calls
and does nothing, and is what a heap uses when no tracker is supplied.
"""

from __future__ import annotations

import csv
import time
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, List

CSV_HEADER = ["Operation", "HeapSize", "Comparisons", "Swaps", "ArrayAccesses", "TimeNanos"]


@dataclass(frozen=True)
class MetricSnapshot:
    operation: str
    heap_size: int
    comparisons: int
    swaps: int
    array_accesses: int
    time_nanos: int

    def as_row(self) -> List[object]:
        return [
            self.operation,
            self.heap_size,
            self.comparisons,
            self.swaps,
            self.array_accesses,
            self.time_nanos,
        ]


class NullTracker:
    """Tracker that ignores every hook."""

    __slots__ = ()

    def increment_comparisons(self) -> None:
        pass

    def increment_swaps(self) -> None:
        pass

    def increment_array_accesses(self, count: int = 1) -> None:
        pass

    def increment_memory_allocations(self) -> None:
        pass


class PerformanceTracker:
    """Counts comparisons, swaps, array accesses and allocations.

    Also keeps a wall-clock timer and a list of snapshots that can be
    exported to CSV. Counting can be paused with ``tracking_enabled``.
    """

    def __init__(self) -> None:
        self.comparisons = 0
        self.swaps = 0
        self.array_accesses = 0
        self.memory_allocations = 0
        self.tracking_enabled = True
        self._start_ns = 0
        self._end_ns = 0
        self.snapshots: List[MetricSnapshot] = []

    # -----------------------------
    # Counting hooks
    # -----------------------------
    def increment_comparisons(self) -> None:
        if self.tracking_enabled:
            self.comparisons += 1

    def increment_swaps(self) -> None:
        if self.tracking_enabled:
            self.swaps += 1

    def increment_array_accesses(self, count: int = 1) -> None:
        if self.tracking_enabled:
            self.array_accesses += count

    def increment_memory_allocations(self) -> None:
        if self.tracking_enabled:
            self.memory_allocations += 1

    def reset(self) -> None:
        """Zero all counters and the timer. Snapshots are kept."""
        self.comparisons = 0
        self.swaps = 0
        self.array_accesses = 0
        self.memory_allocations = 0
        self._start_ns = 0
        self._end_ns = 0

    # -----------------------------
    # Timing
    # -----------------------------
    def start_timer(self) -> None:
        self._start_ns = time.perf_counter_ns()

    def stop_timer(self) -> None:
        self._end_ns = time.perf_counter_ns()

    @contextmanager
    def timed(self) -> Iterator["PerformanceTracker"]:
        """Time the body of a ``with`` block."""
        self.start_timer()
        try:
            yield self
        finally:
            self.stop_timer()

    @property
    def elapsed_nanos(self) -> int:
        return self._end_ns - self._start_ns

    @property
    def elapsed_millis(self) -> float:
        return self.elapsed_nanos / 1_000_000.0

    # -----------------------------
    # Reporting
    # -----------------------------
    def take_snapshot(self, operation: str, heap_size: int) -> MetricSnapshot:
        snap = MetricSnapshot(
            operation,
            heap_size,
            self.comparisons,
            self.swaps,
            self.array_accesses,
            self.elapsed_nanos,
        )
        self.snapshots.append(snap)
        return snap

    def export_csv(self, path: str) -> None:
        """Write every snapshot to ``path`` as CSV."""
        with open(path, "w", newline="") as f:
            writer = csv.writer(f)
            writer.writerow(CSV_HEADER)
            for snap in self.snapshots:
                writer.writerow(snap.as_row())

    def summary(self) -> str:
        return (
            "Performance Metrics:\n"
            f"  Comparisons: {self.comparisons:,}\n"
            f"  Swaps: {self.swaps:,}\n"
            f"  Array Accesses: {self.array_accesses:,}\n"
            f"  Memory Allocations: {self.memory_allocations:,}\n"
            f"  Time: {self.elapsed_millis:.3f} ms\n"
        )

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return (
            f"PerformanceTracker(comparisons={self.comparisons}, swaps={self.swaps}, "
            f"array_accesses={self.array_accesses}, "
            f"memory_allocations={self.memory_allocations})"
        )
