"""Search helpers for sequences and collections of mappings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Hashable, Mapping, Sequence, TypeVar

T = TypeVar("T")


def find_index(items: Sequence[T], fn: Callable[[T], bool]) -> int:
    """Return the index of the first element satisfying ``fn``, or -1."""
    return next((i for i, item in enumerate(items) if fn(item)), -1)


def find_last_index(items: Sequence[T], fn: Callable[[T], bool]) -> int:
    """Return the index of the last element satisfying ``fn``, or -1."""
    return next(
        (i for i in reversed(range(len(items))) if fn(items[i])),
        -1,
    )


def find_all(items: Sequence[T], fn: Callable[[T], bool]) -> dict[int, T]:
    """Map the position of every element satisfying ``fn`` to the element."""
    return {i: item for i, item in enumerate(items) if fn(item)}


def find_min(items: Sequence[T]) -> T | None:
    """Return the smallest element, or None for an empty sequence."""
    return min(items, default=None)


def find_min_by(items: Sequence[T], fn: Callable[[T], Any]) -> T | None:
    """Return the element with the smallest ``fn`` result; ties keep the first."""
    return min(items, key=fn, default=None)


def find_max(items: Sequence[T]) -> T | None:
    """Return the largest element, or None for an empty sequence."""
    return max(items, default=None)


def find_max_by(items: Sequence[T], fn: Callable[[T], Any]) -> T | None:
    """Return the element with the largest ``fn`` result; ties keep the first."""
    return max(items, key=fn, default=None)


def _values_for_key(maps: Sequence[Mapping[Hashable, T]], key: Hashable) -> list[T]:
    if not maps or key not in maps[0]:
        raise KeyError("key not found")
    return [m[key] for m in maps if key in m]


def find_min_by_key(maps: Sequence[Mapping[Hashable, T]], key: Hashable) -> T:
    """Return the smallest value stored under ``key`` across the mappings."""
    return min(_values_for_key(maps, key))


def find_max_by_key(maps: Sequence[Mapping[Hashable, T]], key: Hashable) -> T:
    """Return the largest value stored under ``key`` across the mappings."""
    return max(_values_for_key(maps, key))


@dataclass(frozen=True)
class Bound:
    """An inclusive range of absolute positions."""

    min: int
    max: int

    def enclose(self, n: int) -> bool:
        """Return whether ``abs(n)`` lies within the bounds."""
        return self.min <= abs(n) <= self.max


def nth(items: Sequence[T], n: int) -> T:
    """Return the nth element; negative positions count from the end."""
    size = len(items)
    if (n >= 0 and n > size - 1) or (n < 0 and size - abs(n) < 0):
        raise IndexError(f"{n} out of slice bounds {size}")
    return items[n]