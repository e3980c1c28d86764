"""
Binary min-heap keyed by an explicit priority.

Only priorities are ever compared, so values need not be orderable (node ids
may mix strings and integers). There is no decrease-key: the heap-based
solvers push a fresh entry on every improvement and discard stale entries
when they are popped.
"""

from __future__ import annotations

from typing import Any, Generic, NamedTuple, TypeVar

T = TypeVar("T")


class HeapEntry(NamedTuple):
    value: Any
    priority: float


class MinHeap(Generic[T]):
    """
    Array-backed binary min-heap.

    push and pop are O(log n), is_empty is O(1). Duplicate values are
    allowed.
    """

    def __init__(self) -> None:
        self._data: list[HeapEntry] = []

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"MinHeap(size={len(self._data)})"

    def is_empty(self) -> bool:
        return not self._data

    def push(self, value: T, priority: float) -> None:
        self._data.append(HeapEntry(value, priority))
        self._sift_up(len(self._data) - 1)

    def pop(self) -> HeapEntry:
        """
        Remove and return the entry with the smallest priority.

        Raises:
            IndexError: If the heap is empty
        """
        if not self._data:
            raise IndexError("pop from empty heap")
        root = self._data[0]
        last = self._data.pop()
        if self._data:
            self._data[0] = last
            self._sift_down(0)
        return root

    def peek(self) -> HeapEntry:
        if not self._data:
            raise IndexError("peek at empty heap")
        return self._data[0]

    def _sift_up(self, i: int) -> None:
        data = self._data
        while i > 0:
            parent = (i - 1) // 2
            if data[parent].priority <= data[i].priority:
                break
            data[parent], data[i] = data[i], data[parent]
            i = parent

    def _sift_down(self, i: int) -> None:
        data = self._data
        size = len(data)
        while True:
            left, right = 2 * i + 1, 2 * i + 2
            smallest = i
            if left < size and data[left].priority < data[smallest].priority:
                smallest = left
            if right < size and data[right].priority < data[smallest].priority:
                smallest = right
            if smallest == i:
                return
            data[i], data[smallest] = data[smallest], data[i]
            i = smallest
