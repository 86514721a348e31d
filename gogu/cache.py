"""An in-memory key-value cache whose items can expire."""

from __future__ import annotations

import threading
import time
import weakref
from dataclasses import dataclass
from typing import Callable, Generic, Hashable, Mapping, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

NO_EXPIRATION: float = -1
"""Duration meaning that an item never expires."""

DEFAULT_EXPIRATION: float = 0
"""Duration meaning that the cache's own expiration time applies."""

_NEVER = -1
_NANOS_PER_SECOND = 1_000_000_000


class CacheError(LookupError):
    """Raised when a cache operation cannot be carried out."""


@dataclass
class Item(Generic[V]):
    """A cached value with its expiration time in nanoseconds (0 or -1: never)."""

    value: V
    expiration: int = 0

    def val(self) -> V:
        """Return the cached value."""
        return self.value


def _cleanup_loop(
    ref: weakref.ReferenceType[Cache], stop: threading.Event, interval: float
) -> None:
    while not stop.wait(interval):
        cache = ref()
        if cache is None:
            return
        cache.delete_expired()
        del cache


class Cache(Generic[K, V]):
    """Key-value store with per-item expiration and optional periodic cleanup.

    Durations are given in seconds. ``DEFAULT_EXPIRATION`` uses the cache's
    own expiration time and a negative duration (``NO_EXPIRATION``) keeps an
    item until it is deleted. A positive ``cleanup_interval`` starts a
    background thread that removes expired items; ``close`` stops it.
    """

    def __init__(
        self,
        expiration: float = DEFAULT_EXPIRATION,
        cleanup_interval: float = 0,
        *,
        clock: Callable[[], int] = time.time_ns,
    ) -> None:
        self._expiration = expiration
        self._clock = clock
        self._items: dict[K, Item[V]] = {}
        self._lock = threading.RLock()
        self._stop = threading.Event()
        if cleanup_interval > 0:
            worker = threading.Thread(
                target=_cleanup_loop,
                args=(weakref.ref(self), self._stop, cleanup_interval),
                daemon=True,
            )
            worker.start()
            weakref.finalize(self, self._stop.set)

    def __enter__(self) -> Cache[K, V]:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        """Stop the background cleanup, if one is running."""
        self._stop.set()

    def _is_stale(self, item: Item[V]) -> bool:
        return item.expiration > 0 and self._clock() > item.expiration

    def _add(self, key: K, value: V, duration: float) -> None:
        if duration == DEFAULT_EXPIRATION:
            duration = self._expiration
        if duration > 0:
            expiration = self._clock() + int(duration * _NANOS_PER_SECOND)
        elif duration < 0:
            expiration = _NEVER
        else:
            expiration = 0
        if isinstance(value, str) and not value:
            raise CacheError("value of type string cannot be empty")
        with self._lock:
            self._items[key] = Item(value, expiration)

    def get(self, key: K) -> Item[V]:
        """Return the item stored under ``key``; raise if missing or expired."""
        with self._lock:
            item = self._items.get(key)
        if item is None:
            raise CacheError(f"item with key '{key}' not found")
        if self._is_stale(item):
            raise CacheError(f"item with key '{key}' expired")
        return item

    def set(self, key: K, value: V, duration: float = DEFAULT_EXPIRATION) -> None:
        """Store a new item; raise if a live item with ``key`` already exists."""
        with self._lock:
            item = self._items.get(key)
            if item is not None and not self._is_stale(item):
                raise CacheError(
                    f"item with key '{key}' already exists. Use the Update method"
                )
            self._add(key, value, duration)

    def set_default(self, key: K, value: V) -> None:
        """Store a new item with the default expiration time."""
        self.set(key, value, DEFAULT_EXPIRATION)

    def update(self, key: K, value: V, duration: float = DEFAULT_EXPIRATION) -> None:
        """Store ``value`` under ``key``, replacing any existing item."""
        self._add(key, value, duration)

    def delete(self, key: K) -> None:
        """Remove the item stored under ``key``."""
        with self._lock:
            if key not in self._items:
                raise CacheError(f"item with key '{key}' does not exists")
            del self._items[key]

    def delete_expired(self) -> None:
        """Remove every expired item."""
        with self._lock:
            expired = [key for key, item in self._items.items() if self._is_stale(item)]
            for key in expired:
                del self._items[key]

    def flush(self) -> None:
        """Remove every item."""
        with self._lock:
            self._items = {}

    def list(self) -> dict[K, Item[V]]:
        """Return a snapshot of the stored items."""
        with self._lock:
            return dict(self._items)

    def count(self) -> int:
        """Return the number of stored items."""
        with self._lock:
            return len(self._items)

    def __len__(self) -> int:
        return self.count()

    def map_to_cache(
        self, mapping: Mapping[K, V], duration: float = DEFAULT_EXPIRATION
    ) -> None:
        """Store every entry of ``mapping``; raise once at the end if any failed."""
        errors: list[str] = []
        for key, value in mapping.items():
            try:
                self.set(key, value, duration)
            except CacheError as exc:
                errors.append(str(exc))
        if errors:
            raise CacheError("; ".join(errors))

    def is_expired(self, key: K) -> bool:
        """Return whether ``key`` is present but past its expiration time."""
        with self._lock:
            item = self._items.get(key)
        return item is not None and self._is_stale(item)