from heapbench import IndexedMinHeap, PerformanceTracker


def test_heap_insert_extract_peek():
    h = IndexedMinHeap.from_iterable([5, 2, 9, 1])
    assert h.peek_min() == 1
    assert h.extract_min() == 1
    assert h.extract_min() == 2
    h.insert(0)
    assert h.peek_min() == 0
    assert len(h) == 3


def test_heap_decrease_and_merge_with_tracker():
    t = PerformanceTracker()
    h = IndexedMinHeap(tracker=t)
    for v in (10, 20, 15):
        h.insert(v)
    h.decrease_key(20, 5)
    merged = h.merge(IndexedMinHeap.from_iterable([3, 12]))
    assert [merged.extract_min() for _ in range(len(merged))] == [3, 5, 10, 12, 15]
    assert t.comparisons > 0
