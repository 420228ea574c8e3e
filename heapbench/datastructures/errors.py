"""Exceptions raised by :class:`~heapbench.datastructures.heap.IndexedMinHeap`.

Every failure is a caller-correctable precondition violation and is raised
before the heap is touched, so a failed call leaves the heap unchanged.
Each class also derives from the built-in exception a caller would
naturally expect (``IndexError`` for an empty heap, ``KeyError`` for a
missing value, and so on).
"""

from __future__ import annotations


class HeapError(Exception):
    """Base class for all heap usage errors."""


class InvalidArgument(HeapError, ValueError):
    """Non-positive capacity, or an argument of the wrong kind."""


class InvalidValueType(InvalidArgument, TypeError):
    """A stored value must be an ``int``."""


class EmptyHeap(HeapError, IndexError):
    """Peek or extract on a heap with zero elements."""


class DuplicateValue(HeapError, ValueError):
    """The value is already stored in the heap."""

    def __init__(self, message: str, value: int) -> None:
        super().__init__(message)
        self.value = value


class KeyNotFound(HeapError, KeyError):
    """Decrease-key on a value absent from the heap."""

    def __init__(self, message: str, value: int) -> None:
        super().__init__(message)
        self.value = value

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the message readable.
        return str(self.args[0])


class NotADecrease(HeapError, ValueError):
    """Decrease-key where the new value is not strictly smaller."""


class HeapInvariantError(HeapError, AssertionError):
    """Raised by ``check_invariants`` when the heap or its map is inconsistent."""
