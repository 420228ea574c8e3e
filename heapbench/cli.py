"""
IndexedMinHeap benchmarking command-line interface (CLI)

Subcommands:
- suite:        insert / extract-min / decrease-key / merge / build-heap per size
- scalability:  insert sweep with comparisons per operation, exported to CSV
- timing:       repeated wall-clock timing (mean and stdev) at doubling sizes
- demo:         a short walkthrough of the heap API with an attached tracker

Usage examples:
    python -m heapbench.cli suite --sizes 100 1000
    python -m heapbench.cli scalability --csv results/scalability.csv
    python -m heapbench.cli timing --base-input 100 --steps 6
    python -m heapbench.cli demo
"""

import argparse
import logging
import os
import sys

from . import bench, config
from .datastructures import HeapError, IndexedMinHeap
from .logger import init_logger, set_level
from .metrics import PerformanceTracker

logger = init_logger(__name__)


def _ensure_parent(path):
    parent = os.path.dirname(os.path.abspath(path))
    os.makedirs(parent, exist_ok=True)


def positive_int(text):
    """argparse type for counts and sizes that must be at least 1."""
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {text!r}")
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value}")
    return value


# -------------------------------------------------------------------
# Command handlers
# -------------------------------------------------------------------

def cmd_suite(args):
    """Run every instrumented benchmark for each requested size."""
    print("=== IndexedMinHeap Benchmark Suite ===\n")
    results = []
    for size in args.sizes:
        print(f"Benchmarking with n = {size}")
        print("-" * 50)
        for r in bench.run_suite([size], seed=args.seed):
            results.append(r)
            print(f"{r.operation} ({r.operations} operations):")
            print(f"  Time: {r.time_ms:.3f} ms")
            print(f"  Comparisons: {r.comparisons:,} (avg: {r.comparisons_per_op:.2f} per op)")
            print(f"  Swaps: {r.swaps:,} (avg: {r.swaps_per_op:.2f} per op)")
            if r.operation == "merge":
                print(f"  Resulting heap size: {r.result_size}")
        print()

    if args.csv:
        _ensure_parent(args.csv)
        bench.write_results_csv(args.csv, results)
        print(f"Results exported to {args.csv}")


def cmd_scalability(args):
    """Insert sweep; prints a table and writes it to CSV."""
    print("Scalability Test (Insert Operation):")
    print("Size\t\tTime(ms)\tOps/ms\t\tComp/Op")
    print("-" * 60)
    rows = bench.run_scalability(args.sizes, seed=args.seed)
    for r in rows:
        print(f"{r.size:,}\t\t{r.time_ms:.2f}\t\t{r.ops_per_ms:.2f}\t\t{r.comparisons_per_op:.2f}")

    _ensure_parent(args.csv)
    bench.write_scalability_csv(args.csv, rows)
    print(f"\nResults exported to {args.csv}")


def cmd_timing(args):
    """Repeated timing of plain (uninstrumented) operations."""
    rows = bench.run_timing(args.base_input, args.steps, args.iterations, args.seed)
    for size, op_name, avg_time, std_time in rows:
        print(f"{op_name:<13} | Size: {size:<8} | Avg Time: {avg_time:.3f} ms | Std: {std_time:.3f} ms")

    _ensure_parent(args.csv)
    bench.write_timing_csv(args.csv, rows)
    print(f"\nBenchmark completed. Results saved to {args.csv}")


def cmd_demo(args):
    """Walk through insert, decrease-key, merge and extract-min."""
    tracker = PerformanceTracker()
    heap = IndexedMinHeap(tracker=tracker)
    with tracker.timed():
        for v in (15, 10, 20, 8, 25, 5, 30):
            heap.insert(v)
        print(f"after inserts:       {heap}")
        heap.decrease_key(20, 1)
        print(f"decrease 20 -> 1:    {heap}")
        merged = heap.merge(IndexedMinHeap.from_iterable([3, 12, 40]))
        print(f"merged with 3,12,40: {merged}")
        drained = [merged.extract_min() for _ in range(len(merged))]
        print(f"extracted in order:  {drained}")
    print()
    print(tracker.summary(), end="")


# -------------------------------------------------------------------
# CLI parser setup
# -------------------------------------------------------------------
def build_parser():
    """Build the argparse command-line parser with subcommands."""
    p = argparse.ArgumentParser(prog="python -m heapbench.cli", description="IndexedMinHeap benchmark CLI")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    s = sub.add_parser("suite", help="Run all benchmarks per input size")
    s.add_argument("--sizes", type=positive_int, nargs="+", default=list(config.SUITE_SIZES))
    s.add_argument("--seed", type=int, default=config.DEFAULT_SEED)
    s.add_argument("--csv", default=None, help="Optional CSV output path")
    s.set_defaults(func=cmd_suite)

    s = sub.add_parser("scalability", help="Insert scalability sweep")
    s.add_argument("--sizes", type=positive_int, nargs="+", default=list(config.SCALABILITY_SIZES))
    s.add_argument("--seed", type=int, default=config.DEFAULT_SEED)
    s.add_argument("--csv", default=config.SCALABILITY_CSV)
    s.set_defaults(func=cmd_scalability)

    s = sub.add_parser("timing", help="Mean/stdev timing at doubling sizes")
    s.add_argument("--base-input", type=positive_int, default=config.TIMING_BASE_INPUT)
    s.add_argument("--steps", type=positive_int, default=config.TIMING_STEPS)
    s.add_argument("--iterations", type=positive_int, default=config.TIMING_ITERATIONS)
    s.add_argument("--seed", type=int, default=config.DEFAULT_SEED)
    s.add_argument("--csv", default=config.TIMING_CSV)
    s.set_defaults(func=cmd_timing)

    s = sub.add_parser("demo", help="Short walkthrough with operation counts")
    s.set_defaults(func=cmd_demo)

    return p


# -------------------------------------------------------------------
# Entry point
# -------------------------------------------------------------------
def main(argv=None):
    """CLI entry point when invoked via `python -m heapbench.cli`."""
    argv = sys.argv[1:] if argv is None else argv
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.verbose:
        set_level(logging.DEBUG)
    try:
        args.func(args)
    except HeapError as exc:
        logger.debug("command %s failed", args.cmd, exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
