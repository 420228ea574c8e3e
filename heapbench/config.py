"""
Project-wide defaults for the heap and the benchmark tooling.

Values here are plain module constants. The CLI exposes most of them as
argparse defaults so they can be overridden per run; the results directory
and log level can also be set through the environment:

- ``HEAPBENCH_RESULTS_DIR``: where CSV reports are written.
- ``HEAPBENCH_LOG_LEVEL``: name of the root log level (e.g. ``DEBUG``).
"""

import os

# Reports land under the directory the CLI is run from
RESULTS_DIR = os.environ.get("HEAPBENCH_RESULTS_DIR", os.path.join(os.getcwd(), "results"))
SCALABILITY_CSV = os.path.join(RESULTS_DIR, "benchmark_results.csv")
TIMING_CSV = os.path.join(RESULTS_DIR, "min_heap_timing.csv")

LOG_LEVEL = os.environ.get("HEAPBENCH_LOG_LEVEL", "WARNING")

# Heap storage
DEFAULT_CAPACITY = 16
GROWTH_FACTOR = 2

# Benchmark inputs
DEFAULT_SEED = 42
SUITE_SIZES = (100, 1000, 10000, 100000)
SCALABILITY_SIZES = (100, 500, 1000, 5000, 10000, 50000, 100000)
MAX_DECREASE_KEY_OPS = 1000
TIMING_BASE_INPUT = 100
TIMING_STEPS = 8
TIMING_ITERATIONS = 5
