"""A B-tree with up to four children per node, kept in sorted key order.

The tree is not thread-safe; callers sharing it between threads must lock.
"""

from __future__ import annotations

from typing import Any, Callable, Generic, Iterator, TypeVar

K = TypeVar("K")
V = TypeVar("V")

_MAX_CHILDREN = 4


class _Entry:
    __slots__ = ("key", "value", "next", "removed")

    def __init__(
        self, key: Any, value: Any = None, next_node: _Node | None = None
    ) -> None:
        self.key = key
        self.value = value
        self.next = next_node
        self.removed = False


class _Node:
    __slots__ = ("children",)

    def __init__(self, children: list[_Entry] | None = None) -> None:
        self.children: list[_Entry] = children if children is not None else []


class BTree(Generic[K, V]):
    """A balanced search tree; removed keys are marked rather than unlinked."""

    def __init__(self) -> None:
        self._root = _Node()
        self._size = 0
        self._height = 0

    def size(self) -> int:
        """Return the number of stored keys."""
        return self._size

    def __len__(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        """Return whether the tree holds no keys."""
        return self._size == 0

    def height(self) -> int:
        """Return the number of internal levels above the leaves."""
        return self._height

    def _search(self, key: Any) -> _Entry | None:
        node = self._root
        for _ in range(self._height):
            children = node.children
            for j, entry in enumerate(children):
                if j + 1 == len(children) or key < children[j + 1].key:
                    node = entry.next
                    break
        for entry in node.children:
            if entry.key == key:
                return entry
        return None

    def get(self, key: K) -> V:
        """Return the value stored under ``key``; raise KeyError if absent."""
        entry = self._search(key)
        if entry is None or entry.removed:
            raise KeyError(key)
        return entry.value

    def __contains__(self, key: object) -> bool:
        entry = self._search(key)
        return entry is not None and not entry.removed

    def put(self, key: K, value: V) -> None:
        """Store ``value`` under ``key``, replacing any existing value."""
        existing = self._search(key)
        if existing is not None:
            existing.value = value
            if existing.removed:
                existing.removed = False
                self._size += 1
            return
        sibling = self._insert(self._root, key, value, self._height)
        self._size += 1
        if sibling is None:
            return
        self._root = _Node(
            [
                _Entry(self._root.children[0].key, next_node=self._root),
                _Entry(sibling.children[0].key, next_node=sibling),
            ]
        )
        self._height += 1

    def _insert(self, node: _Node, key: Any, value: Any, height: int) -> _Node | None:
        children = node.children
        if height == 0:
            position = next(
                (j for j, entry in enumerate(children) if key < entry.key),
                len(children),
            )
            new_entry = _Entry(key, value)
        else:
            position = len(children)
            new_entry = None
            for j, entry in enumerate(children):
                if j + 1 == len(children) or key < children[j + 1].key:
                    sibling = self._insert(entry.next, key, value, height - 1)
                    if sibling is None:
                        return None
                    position = j + 1
                    new_entry = _Entry(sibling.children[0].key, next_node=sibling)
                    break
            if new_entry is None:
                return None
        children.insert(position, new_entry)
        if len(children) < _MAX_CHILDREN:
            return None
        half = _MAX_CHILDREN // 2
        node.children = children[:half]
        return _Node(children[half:])

    def remove(self, key: K) -> None:
        """Remove ``key`` if present; absent keys are ignored."""
        entry = self._search(key)
        if entry is None or entry.removed:
            return
        entry.removed = True
        self._size -= 1

    def traverse(self, fn: Callable[[K, V], Any]) -> None:
        """Call ``fn(key, value)`` for every stored key in ascending order."""
        for key, value in self:
            fn(key, value)

    def __iter__(self) -> Iterator[tuple[K, V]]:
        yield from self._walk(self._root, self._height)

    def _walk(self, node: _Node, depth: int) -> Iterator[tuple[Any, Any]]:
        if depth == 0:
            for entry in list(node.children):
                if not entry.removed:
                    yield entry.key, entry.value
        else:
            for entry in list(node.children):
                yield from self._walk(entry.next, depth - 1)