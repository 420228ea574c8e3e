"""
Benchmark harness for IndexedMinHeap.

Two kinds of measurements are provided:

- Instrumented benchmarks (``benchmark_*``, ``run_suite``,
  ``run_scalability``) that run one operation type over ``n`` values with a
  PerformanceTracker attached and report time, comparisons and swaps.
- Repeated timing (``measure_operation_time``, ``run_timing``) that runs a
  plain operation several times on fresh random input and reports the mean
  and standard deviation in milliseconds.

All randomness comes from a seeded ``random.Random`` so runs are repeatable.
"""

from __future__ import annotations

import csv
import random
import statistics
import time
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Sequence, Tuple

from .config import DEFAULT_SEED, MAX_DECREASE_KEY_OPS
from .datastructures import IndexedMinHeap
from .logger import init_logger
from .metrics import PerformanceTracker

logger = init_logger(__name__)

RESULT_HEADER = ["Operation", "Size", "Operations", "TimeMs", "Comparisons", "Swaps", "ResultSize"]
SCALABILITY_HEADER = ["Size", "TimeMs", "Comparisons", "Swaps", "ComparisonsPerOp"]
TIMING_HEADER = ["Input Size", "Operation", "Average Time (ms)", "Standard Deviation (ms)"]


@dataclass(frozen=True)
class BenchmarkResult:
    operation: str
    size: int
    operations: int
    time_ms: float
    comparisons: int
    swaps: int
    result_size: int

    @property
    def comparisons_per_op(self) -> float:
        return self.comparisons / self.operations if self.operations else 0.0

    @property
    def swaps_per_op(self) -> float:
        return self.swaps / self.operations if self.operations else 0.0

    def as_row(self) -> List[object]:
        return [
            self.operation,
            self.size,
            self.operations,
            f"{self.time_ms:.3f}",
            self.comparisons,
            self.swaps,
            self.result_size,
        ]


@dataclass(frozen=True)
class ScalabilityRow:
    size: int
    time_ms: float
    comparisons: int
    swaps: int

    @property
    def comparisons_per_op(self) -> float:
        return self.comparisons / self.size if self.size else 0.0

    @property
    def ops_per_ms(self) -> float:
        return self.size / self.time_ms if self.time_ms > 0 else float("inf")

    def as_row(self) -> List[object]:
        return [self.size, f"{self.time_ms:.3f}", self.comparisons, self.swaps, f"{self.comparisons_per_op:.2f}"]


# ----------------------------
# Input generation
# ----------------------------

def generate_unique_values(size: int, rng: random.Random) -> List[int]:
    """Draw ``size`` distinct ints from ``[0, size * 100)``."""
    if size <= 0:
        return []
    return rng.sample(range(size * 100), size)


def _result(tracker: PerformanceTracker, operation: str, size: int, operations: int, result_size: int) -> BenchmarkResult:
    tracker.take_snapshot(operation, result_size)
    return BenchmarkResult(
        operation=operation,
        size=size,
        operations=operations,
        time_ms=tracker.elapsed_millis,
        comparisons=tracker.comparisons,
        swaps=tracker.swaps,
        result_size=result_size,
    )


# ----------------------------
# Instrumented benchmarks
# ----------------------------

def benchmark_insert(n: int, seed: int = DEFAULT_SEED) -> BenchmarkResult:
    values = generate_unique_values(n, random.Random(seed))
    tracker = PerformanceTracker()
    heap = IndexedMinHeap(max(n, 1), tracker)

    with tracker.timed():
        for v in values:
            heap.insert(v)
    return _result(tracker, "insert", n, n, len(heap))


def benchmark_extract_min(n: int, seed: int = DEFAULT_SEED) -> BenchmarkResult:
    values = generate_unique_values(n, random.Random(seed))
    tracker = PerformanceTracker()
    heap = IndexedMinHeap.from_iterable(values, tracker)

    # Only count the extractions, not the build
    tracker.reset()
    with tracker.timed():
        for _ in range(n):
            heap.extract_min()
    return _result(tracker, "extract_min", n, n, len(heap))


def benchmark_decrease_key(n: int, seed: int = DEFAULT_SEED) -> BenchmarkResult:
    """Decrease up to ``min(n // 2, MAX_DECREASE_KEY_OPS)`` random keys.

    Values are ``i * 10`` so they are unique; an attempt whose target is
    missing or whose new value is taken is skipped rather than raised.
    """
    rng = random.Random(seed)
    tracker = PerformanceTracker()
    heap = IndexedMinHeap.from_iterable((i * 10 for i in range(n)), tracker)

    tracker.reset()
    attempts = min(n // 2, MAX_DECREASE_KEY_OPS)
    applied = 0
    with tracker.timed():
        for _ in range(attempts):
            old = (rng.randrange(n // 2) + n // 2) * 10
            if old <= 0:
                continue
            new = old - rng.randrange(1, old + 1)
            if heap.contains(old) and not heap.contains(new):
                heap.decrease_key(old, new)
                applied += 1
    logger.debug("decrease_key n=%d attempted=%d applied=%d", n, attempts, applied)
    return _result(tracker, "decrease_key", n, attempts, len(heap))


def benchmark_merge(n: int, seed: int = DEFAULT_SEED) -> BenchmarkResult:
    """Merge two heaps of ``n // 2`` values drawn from disjoint ranges."""
    rng = random.Random(seed)
    half = n // 2
    left = generate_unique_values(half, rng)
    # Shift the second draw past the first range so the inputs never overlap
    right = [v + half * 100 for v in generate_unique_values(half, rng)]
    tracker = PerformanceTracker()
    a = IndexedMinHeap.from_iterable(left, tracker)
    b = IndexedMinHeap.from_iterable(right)

    tracker.reset()
    with tracker.timed():
        merged = a.merge(b)
    return _result(tracker, "merge", n, len(merged), len(merged))


def benchmark_build_heap(n: int, seed: int = DEFAULT_SEED) -> BenchmarkResult:
    values = generate_unique_values(n, random.Random(seed))
    tracker = PerformanceTracker()
    with tracker.timed():
        heap = IndexedMinHeap.from_iterable(values, tracker)
    return _result(tracker, "build_heap", n, n, len(heap))


BENCHMARKS: Dict[str, Callable[[int, int], BenchmarkResult]] = {
    "insert": benchmark_insert,
    "extract_min": benchmark_extract_min,
    "decrease_key": benchmark_decrease_key,
    "merge": benchmark_merge,
    "build_heap": benchmark_build_heap,
}


def run_suite(sizes: Iterable[int], seed: int = DEFAULT_SEED) -> List[BenchmarkResult]:
    """Run every benchmark in ``BENCHMARKS`` once per size."""
    results = []
    for size in sizes:
        logger.info("benchmarking n=%d", size)
        for bench in BENCHMARKS.values():
            results.append(bench(size, seed))
    return results


def run_scalability(sizes: Iterable[int], seed: int = DEFAULT_SEED) -> List[ScalabilityRow]:
    """Insert sweep: one instrumented insert run per size."""
    rows = []
    for size in sizes:
        r = benchmark_insert(size, seed)
        logger.info("scalability n=%d %.2f ms", size, r.time_ms)
        rows.append(ScalabilityRow(size, r.time_ms, r.comparisons, r.swaps))
    return rows


# ----------------------------
# Repeated timing
# ----------------------------

def _filled(data: Sequence[int]) -> IndexedMinHeap:
    heap = IndexedMinHeap()
    for item in data:
        heap.insert(item)
    return heap


def time_insert(data: Sequence[int]) -> IndexedMinHeap:
    return _filled(data)


def time_extract_min(data: Sequence[int]) -> IndexedMinHeap:
    heap = _filled(data)
    while heap:
        heap.extract_min()
    return heap


def time_peek(data: Sequence[int]) -> IndexedMinHeap:
    heap = _filled(data)
    for _ in range(min(3, len(data))):
        heap.peek_min()
    return heap


def time_decrease_key(data: Sequence[int]) -> IndexedMinHeap:
    # Scale values up so v * 10 - 1 can never collide with another stored value
    heap = _filled([v * 10 for v in data])
    for v in data[: len(data) // 2]:
        heap.decrease_key(v * 10, v * 10 - 1)
    return heap


TIMED_OPERATIONS: Dict[str, Callable[[Sequence[int]], IndexedMinHeap]] = {
    "insert": time_insert,
    "extract_min": time_extract_min,
    "peek": time_peek,
    "decrease_key": time_decrease_key,
}


def measure_operation_time(
    operation: Callable[[Sequence[int]], object],
    input_size: int,
    iterations: int = 5,
    seed: int = DEFAULT_SEED,
) -> Tuple[float, float]:
    """Run the operation on fresh input ``iterations`` times; return (mean ms, stdev ms)."""
    if iterations < 1:
        raise ValueError(f"iterations must be at least 1, got {iterations}")
    rng = random.Random(seed)
    times = []
    for _ in range(iterations):
        data = generate_unique_values(input_size, rng)
        start = time.perf_counter()
        operation(data)
        end = time.perf_counter()
        times.append((end - start) * 1000)  # convert to milliseconds

    avg_time = statistics.mean(times)
    std_dev = statistics.stdev(times) if len(times) > 1 else 0.0
    return avg_time, std_dev


def run_timing(
    base_input: int,
    steps: int,
    iterations: int = 5,
    seed: int = DEFAULT_SEED,
) -> List[Tuple[int, str, float, float]]:
    """Time every operation in TIMED_OPERATIONS at ``base_input * 2**i`` sizes."""
    input_sizes = [base_input * (2 ** i) for i in range(steps)]
    rows = []
    for op_name, op_func in TIMED_OPERATIONS.items():
        for size in input_sizes:
            avg_time, std_time = measure_operation_time(op_func, size, iterations, seed)
            rows.append((size, op_name, avg_time, std_time))
    return rows


# ----------------------------
# CSV export
# ----------------------------

def write_results_csv(path: str, results: Iterable[BenchmarkResult]) -> None:
    with open(path, "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerow(RESULT_HEADER)
        for r in results:
            writer.writerow(r.as_row())


def write_scalability_csv(path: str, rows: Iterable[ScalabilityRow]) -> None:
    with open(path, "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerow(SCALABILITY_HEADER)
        for r in rows:
            writer.writerow(r.as_row())


def write_timing_csv(path: str, rows: Iterable[Tuple[int, str, float, float]]) -> None:
    with open(path, "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerow(TIMING_HEADER)
        for size, op_name, avg_time, std_time in rows:
            writer.writerow([size, op_name, f"{avg_time:.3f}", f"{std_time:.3f}"])
