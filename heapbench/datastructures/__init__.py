from .errors import (
    DuplicateValue,
    EmptyHeap,
    HeapError,
    HeapInvariantError,
    InvalidArgument,
    InvalidValueType,
    KeyNotFound,
    NotADecrease,
)
from .heap import IndexedMinHeap

__all__ = [
    "IndexedMinHeap",
    "HeapError",
    "InvalidArgument",
    "InvalidValueType",
    "EmptyHeap",
    "DuplicateValue",
    "KeyNotFound",
    "NotADecrease",
    "HeapInvariantError",
]
