"""A thread-safe binary heap ordered by a comparator, and heap sort."""

from __future__ import annotations

import threading
from typing import Callable, Generic, Iterable, TypeVar

T = TypeVar("T")


class HeapError(LookupError):
    """Raised when a value cannot be removed from the heap."""


class Heap(Generic[T]):
    """Binary heap where ``comp(a, b)`` true means ``a`` belongs above ``b``.

    ``lambda a, b: a < b`` gives a min heap, ``lambda a, b: a > b`` a max heap.
    """

    def __init__(self, comp: Callable[[T, T], bool]) -> None:
        self._comp = comp
        self._data: list[T] = []
        self._lock = threading.RLock()

    @classmethod
    def from_slice(cls, data: Iterable[T], comp: Callable[[T, T], bool]) -> Heap[T]:
        """Build a heap from the given values in linear time."""
        heap = cls(comp)
        heap._data = list(data)
        size = len(heap._data)
        for i in range(size // 2 - 1, -1, -1):
            heap._move_down(size, i)
        return heap

    def size(self) -> int:
        """Return the number of values in the heap."""
        with self._lock:
            return len(self._data)

    def __len__(self) -> int:
        return self.size()

    def is_empty(self) -> bool:
        """Return whether the heap holds no values."""
        with self._lock:
            return not self._data

    def clear(self) -> None:
        """Remove every value."""
        with self._lock:
            self._data = []

    def peek(self) -> T | None:
        """Return the top value without removing it, or None if empty."""
        with self._lock:
            return self._data[0] if self._data else None

    def values(self) -> list[T]:
        """Return the values in their internal heap order."""
        with self._lock:
            return list(self._data)

    def push(self, *args: T) -> None:
        """Insert the values one by one, restoring the heap order."""
        for value in args:
            with self._lock:
                self._data.append(value)
                self._move_up(len(self._data) - 1)

    def pop(self) -> T | None:
        """Remove and return the top value, or None if empty."""
        with self._lock:
            if not self._data:
                return None
            top = self._data[0]
            last = self._data.pop()
            if self._data:
                self._data[0] = last
                self._move_down(len(self._data), 0)
            return top

    def delete(self, value: T) -> bool:
        """Remove ``value``; raise HeapError if the heap is empty or lacks it.

        The removed slot is filled with the last value and the order is then
        restored downwards from the root.
        """
        with self._lock:
            if not self._data:
                raise HeapError("heap empty")
            try:
                index = self._data.index(value)
            except ValueError:
                raise HeapError(f"value not found in the heap: {value}") from None
            last = len(self._data) - 1
            self._swap(index, last)
            self._data.pop()
            self._move_down(len(self._data), 0)
            return True

    def convert(self, comp: Callable[[T, T], bool]) -> None:
        """Switch to a new comparator (e.g. min to max) and reorder."""
        with self._lock:
            self._comp = comp
            size = len(self._data)
            for i in range((size - 2) // 2, -1, -1):
                self._move_down(size, i)

    def merge(self, other: Heap[T]) -> Heap[T]:
        """Return a new heap holding the values of both, leaving them intact."""
        merged = Heap(self._comp)
        merged.push(*self.values())
        merged.push(*other.values())
        return merged

    def meld(self, other: Heap[T]) -> Heap[T]:
        """Return a new heap holding the values of both and empty the originals."""
        merged = self.merge(other)
        self.clear()
        other.clear()
        return merged

    def _swap(self, i: int, j: int) -> None:
        data = self._data
        data[i], data[j] = data[j], data[i]

    def _move_up(self, i: int) -> None:
        data = self._data
        while i > 0:
            parent = (i - 1) // 2
            if not self._comp(data[i], data[parent]):
                break
            self._swap(i, parent)
            i = parent

    def _move_down(self, n: int, i: int) -> None:
        data = self._data
        while True:
            left, right = 2 * i + 1, 2 * i + 2
            current = i
            if left < n and self._comp(data[left], data[current]):
                current = left
            if right < n and self._comp(data[right], data[current]):
                current = right
            if current == i:
                return
            self._swap(i, current)
            i = current


def heap_sort(data: Iterable[T], comp: Callable[[T, T], bool]) -> list[T]:
    """Return the values sorted; a max-heap comparator sorts ascending."""
    heap = Heap.from_slice(data, comp)
    with heap._lock:
        for i in range(len(heap._data) - 1, 0, -1):
            heap._swap(0, i)
            heap._move_down(i, 0)
        return list(heap._data)