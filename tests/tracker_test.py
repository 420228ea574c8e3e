import csv

from heapbench.datastructures import IndexedMinHeap
from heapbench.metrics import NullTracker, PerformanceTracker
from heapbench.metrics.tracker import CSV_HEADER


def test_counters_increment_and_reset():
    t = PerformanceTracker()
    t.increment_comparisons()
    t.increment_swaps()
    t.increment_array_accesses()
    t.increment_array_accesses(4)
    t.increment_memory_allocations()
    assert (t.comparisons, t.swaps, t.array_accesses, t.memory_allocations) == (1, 1, 5, 1)
    t.reset()
    assert (t.comparisons, t.swaps, t.array_accesses, t.memory_allocations) == (0, 0, 0, 0)


def test_tracking_can_be_paused():
    t = PerformanceTracker()
    t.tracking_enabled = False
    t.increment_comparisons()
    t.increment_array_accesses(10)
    assert t.comparisons == 0
    assert t.array_accesses == 0


def test_timer_context_manager():
    t = PerformanceTracker()
    with t.timed():
        sum(range(1000))
    assert t.elapsed_nanos >= 0
    assert t.elapsed_millis == t.elapsed_nanos / 1_000_000.0


def test_heap_reports_to_tracker():
    t = PerformanceTracker()
    h = IndexedMinHeap(2, t)
    assert t.memory_allocations == 1
    for v in (5, 4, 3, 2, 1):
        h.insert(v)
    # two resizes: 2 -> 4 -> 8
    assert t.memory_allocations == 3
    assert t.comparisons > 0
    assert t.swaps > 0
    assert t.array_accesses > 0
    assert h.tracker is t


def test_descending_inserts_swap_to_root():
    t = PerformanceTracker()
    h = IndexedMinHeap(tracker=t)
    h.insert(2)
    h.insert(1)
    assert t.comparisons == 1
    assert t.swaps == 1


def test_results_identical_without_tracker():
    values = [17, 3, 9, 42, 8, 1, 25, 11]
    plain = IndexedMinHeap.from_iterable(values)
    tracked = IndexedMinHeap.from_iterable(values, PerformanceTracker())
    assert plain.to_list() == tracked.to_list()
    plain.decrease_key(42, 0)
    tracked.decrease_key(42, 0)
    assert plain.to_list() == tracked.to_list()
    assert plain.tracker is None


def test_merge_reports_to_receiver_tracker():
    t = PerformanceTracker()
    a = IndexedMinHeap.from_iterable([1, 5, 9], t)
    b = IndexedMinHeap.from_iterable([2, 6])
    t.reset()
    merged = a.merge(b)
    assert merged.tracker is t
    assert t.memory_allocations == 1
    assert t.array_accesses >= 5


def test_null_tracker_accepts_all_hooks():
    t = NullTracker()
    t.increment_comparisons()
    t.increment_swaps()
    t.increment_array_accesses(3)
    t.increment_memory_allocations()


def test_snapshot_and_csv_export(tmp_path):
    t = PerformanceTracker()
    h = IndexedMinHeap(tracker=t)
    for v in (3, 2, 1):
        h.insert(v)
    snap = t.take_snapshot("insert", len(h))
    assert snap.heap_size == 3
    assert snap.comparisons == t.comparisons

    path = tmp_path / "metrics.csv"
    t.export_csv(str(path))
    with open(path, newline="") as f:
        rows = list(csv.reader(f))
    assert rows[0] == CSV_HEADER
    assert rows[1][0] == "insert"
    assert rows[1][1] == "3"
    assert len(rows) == 2


def test_summary_format():
    t = PerformanceTracker()
    for _ in range(1234):
        t.increment_comparisons()
    text = t.summary()
    assert text.startswith("Performance Metrics:")
    assert "Comparisons: 1,234" in text
    assert "Time: 0.000 ms" in text
