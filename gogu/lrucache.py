"""A fixed-size cache that evicts the least recently used entry."""

from __future__ import annotations

from collections import OrderedDict
from typing import Generic, Hashable, Optional, Tuple, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

Entry = Tuple[Optional[K], Optional[V], bool]


class LRUCache(Generic[K, V]):
    """LRU cache holding at most ``size`` entries.

    Methods that report an entry return ``(key, value, found)``; when there is
    no such entry the key and value are None and the flag is False.
    """

    def __init__(self, size: int) -> None:
        if size <= 0:
            raise ValueError("size must be a positive value")
        self._size = size
        # Ordered from oldest (first) to youngest (last).
        self._items: OrderedDict[K, V] = OrderedDict()

    def add(self, key: K, value: V) -> Entry:
        """Store ``value``; return the entry evicted to make room, if any."""
        if key in self._items:
            self._items[key] = value
            self._items.move_to_end(key)
            return None, None, False
        self._items[key] = value
        if len(self._items) > self._size:
            return self.remove_oldest()
        return None, None, False

    def count(self) -> int:
        """Return the number of entries."""
        return len(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, key: object) -> bool:
        return key in self._items

    def get_oldest(self) -> Entry:
        """Return the oldest entry and mark it as the most recently used."""
        if not self._items:
            return None, None, False
        key = next(iter(self._items))
        self._items.move_to_end(key)
        return key, self._items[key], True

    def get(self, key: K) -> tuple[V | None, bool]:
        """Return ``(value, True)`` and mark the entry as used, or ``(None, False)``."""
        if key not in self._items:
            return None, False
        self._items.move_to_end(key)
        return self._items[key], True

    def get_youngest(self) -> Entry:
        """Return the most recently used entry without reordering."""
        if not self._items:
            return None, None, False
        key = next(reversed(self._items))
        return key, self._items[key], True

    def remove_oldest(self) -> Entry:
        """Remove and return the least recently used entry."""
        if not self._items:
            return None, None, False
        key, value = self._items.popitem(last=False)
        return key, value, True

    def remove(self, key: K) -> tuple[V | None, bool]:
        """Remove ``key``; return ``(value, True)`` or ``(None, False)``."""
        if key not in self._items:
            return None, False
        return self._items.pop(key), True

    def remove_youngest(self) -> Entry:
        """Remove and return the most recently used entry."""
        if not self._items:
            return None, None, False
        key, value = self._items.popitem(last=True)
        return key, value, True

    def flush(self) -> None:
        """Remove every entry."""
        self._items.clear()