from __future__ import annotations

import ctypes
from typing import Dict, Iterable, Iterator, List, Optional

from ..config import DEFAULT_CAPACITY, GROWTH_FACTOR
from ..logger import init_logger
from ..metrics.tracker import NullTracker, PerformanceTracker
from .errors import (
    DuplicateValue,
    EmptyHeap,
    HeapInvariantError,
    InvalidArgument,
    InvalidValueType,
    KeyNotFound,
    NotADecrease,
)

logger = init_logger(__name__)


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _check_value(value: object) -> None:
    if not _is_int(value):
        raise InvalidValueType(f"Heap values must be int, not {type(value).__name__}")


class IndexedMinHeap:
    """A binary min-heap of unique ints with O(log n) decrease-key.

    The heap is a complete binary tree laid out in a fixed-capacity buffer
    (children of ``i`` at ``2i+1`` and ``2i+2``). A parallel position map
    records the buffer index of every stored value, so a value can be
    located in O(1) and decreased in O(log n).

    Each value is its own identity: it is the key of the position map.
    Duplicate values are therefore rejected, and ``decrease_key`` and
    ``merge`` refuse any operation that would create one.

    Complexity:
    - insert / extract_min / decrease_key: O(log n)
    - peek_min / contains: O(1)
    - from_iterable (bottom-up heapify): O(n)
    - merge: O(n + m)
    """

    __slots__ = ("_buf", "_size", "_capacity", "_pos", "_tracker")

    def __init__(self, capacity: int = DEFAULT_CAPACITY, tracker: Optional[PerformanceTracker] = None) -> None:
        if not isinstance(capacity, int) or isinstance(capacity, bool) or capacity < 1:
            raise InvalidArgument("Capacity must be positive")
        self._capacity: int = capacity
        self._buf = self._make_array(capacity)
        self._size: int = 0
        # value -> index in _buf, one entry per occupied slot
        self._pos: Dict[int, int] = {}
        self._tracker = tracker if tracker is not None else NullTracker()
        self._tracker.increment_memory_allocations()

    @classmethod
    def from_iterable(cls, values: Iterable[int], tracker: Optional[PerformanceTracker] = None) -> "IndexedMinHeap":
        """Build a heap from unordered values in O(n) (bottom-up heapify).

        Raises DuplicateValue on the first repeated value.
        """
        items = list(values)
        seen = set()
        for v in items:
            _check_value(v)
            if v in seen:
                raise DuplicateValue(f"Duplicate values not allowed: {v}", v)
            seen.add(v)

        heap = cls(max(len(items), 1), tracker)
        t = heap._tracker
        buf = heap._buf
        for i, v in enumerate(items):
            buf[i] = v
        heap._size = len(items)
        t.increment_array_accesses(len(items))

        for i in range(heap._size):
            heap._pos[buf[i]] = i
            t.increment_array_accesses()

        heap._heapify()
        return heap

    # -----------------------------
    # Internal helpers
    # -----------------------------
    @staticmethod
    def _make_array(capacity: int):
        return (capacity * ctypes.py_object)()

    def _resize(self) -> None:
        """Grow the buffer by GROWTH_FACTOR. Size and position map are unchanged."""
        new_capacity = self._capacity * GROWTH_FACTOR
        new_buf = self._make_array(new_capacity)
        for i in range(self._size):
            new_buf[i] = self._buf[i]
        logger.debug("resize %d -> %d (size=%d)", self._capacity, new_capacity, self._size)
        self._buf = new_buf
        self._capacity = new_capacity
        self._tracker.increment_memory_allocations()
        self._tracker.increment_array_accesses(self._size)

    def _swap(self, i: int, j: int) -> None:
        buf = self._buf
        buf[i], buf[j] = buf[j], buf[i]
        # Both relocated values must point at their new slots
        self._pos[buf[i]] = i
        self._pos[buf[j]] = j
        self._tracker.increment_swaps()
        self._tracker.increment_array_accesses(4)

    def _sift_up(self, idx: int) -> None:
        buf = self._buf
        t = self._tracker
        while idx > 0:
            parent = (idx - 1) // 2
            t.increment_array_accesses(2)
            t.increment_comparisons()
            if buf[parent] <= buf[idx]:
                break
            self._swap(idx, parent)
            idx = parent

    def _sift_down(self, idx: int) -> None:
        buf = self._buf
        n = self._size
        t = self._tracker
        while True:
            left = 2 * idx + 1
            right = 2 * idx + 2
            smallest = idx
            if left < n:
                t.increment_array_accesses(2)
                t.increment_comparisons()
                if buf[left] < buf[smallest]:
                    smallest = left
            if right < n:
                t.increment_array_accesses(2)
                t.increment_comparisons()
                if buf[right] < buf[smallest]:
                    smallest = right
            if smallest == idx:
                break
            self._swap(idx, smallest)
            idx = smallest

    def _heapify(self) -> None:
        """Sift down every non-leaf, last to first. O(n) total."""
        for i in reversed(range(self._size // 2)):
            self._sift_down(i)

    # -----------------------------
    # Public API
    # -----------------------------
    def insert(self, value: int) -> None:
        """Insert a value not already in the heap (O(log n))."""
        _check_value(value)
        if value in self._pos:
            raise DuplicateValue(f"Duplicate values not allowed: {value}", value)

        if self._size == self._capacity:
            self._resize()

        idx = self._size
        self._buf[idx] = value
        self._pos[value] = idx
        self._size += 1
        self._tracker.increment_array_accesses()
        self._sift_up(idx)

    def extract_min(self) -> int:
        """Remove and return the smallest value (O(log n))."""
        if self._size == 0:
            raise EmptyHeap("Heap is empty")
        buf = self._buf
        top = buf[0]
        self._tracker.increment_array_accesses()
        del self._pos[top]

        self._size -= 1
        last = buf[self._size]
        buf[self._size] = None  # release the reference held past the end
        self._tracker.increment_array_accesses(2)
        if self._size > 0:
            buf[0] = last
            self._pos[last] = 0
            self._sift_down(0)
        return top

    def peek_min(self) -> int:
        """Return the smallest value without removing it (O(1))."""
        if self._size == 0:
            raise EmptyHeap("Heap is empty")
        self._tracker.increment_array_accesses()
        return self._buf[0]

    def decrease_key(self, old_value: int, new_value: int) -> None:
        """Replace ``old_value`` with the strictly smaller ``new_value`` (O(log n)).

        Raises, in this order: KeyNotFound if ``old_value`` is absent,
        InvalidValueType if ``new_value`` is not an int, NotADecrease if
        ``new_value >= old_value``, DuplicateValue if ``new_value`` is
        already stored.
        """
        if not self.contains(old_value):
            raise KeyNotFound(f"Value not in heap: {old_value}", old_value)
        _check_value(new_value)
        if new_value >= old_value:
            raise NotADecrease("New value must be smaller than old value")
        if new_value in self._pos:
            raise DuplicateValue(f"New value already exists in heap: {new_value}", new_value)

        idx = self._pos.pop(old_value)
        self._buf[idx] = new_value
        self._pos[new_value] = idx
        self._tracker.increment_array_accesses(2)
        # A smaller value can only violate the heap property upward
        self._sift_up(idx)

    def contains(self, value: int) -> bool:
        # 5.0 hashes like 5; only ints are ever stored
        return _is_int(value) and value in self._pos

    def merge(self, other: Optional["IndexedMinHeap"]) -> "IndexedMinHeap":
        """Return a new heap holding the values of both heaps (O(n + m)).

        Neither input is modified. ``merge(None)`` returns a copy. The two
        heaps must not share a value; an overlap raises DuplicateValue.
        The result reports to this heap's tracker.
        """
        if other is None:
            return self.copy()
        if not isinstance(other, IndexedMinHeap):
            raise InvalidValueType(f"Can only merge with IndexedMinHeap, not {type(other).__name__}")
        combined = self.to_list()
        combined.extend(other.to_list())
        return IndexedMinHeap.from_iterable(combined, self.tracker)

    def copy(self) -> "IndexedMinHeap":
        """Independent heap with the same capacity, layout and position map."""
        clone = IndexedMinHeap(self._capacity, self.tracker)
        for i in range(self._size):
            clone._buf[i] = self._buf[i]
        clone._size = self._size
        clone._pos = dict(self._pos)
        return clone

    def check_invariants(self) -> None:
        """Raise HeapInvariantError on the first heap-order or position-map violation."""
        buf = self._buf
        n = self._size
        for i in range(n):
            for child in (2 * i + 1, 2 * i + 2):
                if child < n and buf[i] > buf[child]:
                    raise HeapInvariantError(
                        f"Heap property violated at index {i}: {buf[i]} > {buf[child]} at {child}"
                    )
            if self._pos.get(buf[i]) != i:
                raise HeapInvariantError(f"Position map does not point {buf[i]} at index {i}")
        if len(self._pos) != n:
            raise HeapInvariantError(f"Position map has {len(self._pos)} entries for {n} values")

    # -----------------------------
    # Accessors
    # -----------------------------
    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def tracker(self) -> Optional[PerformanceTracker]:
        """The attached tracker, or None when the heap is uninstrumented."""
        return self._tracker if isinstance(self._tracker, PerformanceTracker) else None

    def is_empty(self) -> bool:
        return self._size == 0

    def to_list(self) -> List[int]:
        """Copy of the stored values in heap (array) order."""
        return [self._buf[i] for i in range(self._size)]

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def __contains__(self, value: object) -> bool:
        return self.contains(value)

    def __iter__(self) -> Iterator[int]:
        # Heap order, not sorted order
        return iter(self.to_list())

    def __str__(self) -> str:
        return "[" + ", ".join(str(v) for v in self) + "]"

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"IndexedMinHeap({self.to_list()!r})"
