"""A thread-safe binary search tree ordered by a comparator."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterator, TypeVar

from gogu.generic import compare

K = TypeVar("K")
V = TypeVar("V")


class NodeNotFoundError(LookupError):
    """Raised when a key is not present in the tree."""

    def __init__(self, message: str = "BST node not found") -> None:
        super().__init__(message)


@dataclass(frozen=True)
class Item(Generic[K, V]):
    """A key-value pair stored in the tree."""

    key: K
    val: V


class _Node:
    __slots__ = ("key", "val", "left", "right")

    def __init__(self, key: Any, val: Any) -> None:
        self.key = key
        self.val = val
        self.left: _Node | None = None
        self.right: _Node | None = None


class BsTree(Generic[K, V]):
    """Binary search tree; keys for which ``comp(key, node)`` holds go left."""

    def __init__(self, comp: Callable[[K, K], bool]) -> None:
        self._comp = comp
        self._root: _Node | None = None
        self._size = 0
        self._lock = threading.RLock()

    def size(self) -> int:
        """Return the number of nodes."""
        with self._lock:
            return self._size

    def get(self, key: K) -> Item[K, V]:
        """Return the item stored under ``key``."""
        with self._lock:
            node = self._root
            while node is not None:
                order = compare(key, node.key, self._comp)
                if order == 1:
                    node = node.left
                elif order == -1:
                    node = node.right
                else:
                    return Item(node.key, node.val)
            raise NodeNotFoundError()

    def upsert(self, key: K, value: V) -> None:
        """Insert ``key`` or replace the value of an existing one."""
        with self._lock:
            if self._root is None:
                self._root = _Node(key, value)
                self._size += 1
                return
            node = self._root
            while True:
                order = compare(key, node.key, self._comp)
                if order == 0:
                    node.val = value
                    return
                branch = "left" if order == 1 else "right"
                child = getattr(node, branch)
                if child is None:
                    setattr(node, branch, _Node(key, value))
                    self._size += 1
                    return
                node = child

    def delete(self, key: K) -> None:
        """Remove the node with ``key``; raise NodeNotFoundError if absent."""
        with self._lock:
            self._root = self._delete(self._root, key)
            self._size -= 1

    def _delete(self, node: _Node | None, key: Any) -> _Node | None:
        if node is None:
            raise NodeNotFoundError()
        order = compare(key, node.key, self._comp)
        if order == 1:
            node.left = self._delete(node.left, key)
            return node
        if order == -1:
            node.right = self._delete(node.right, key)
            return node
        if node.left is None:
            return node.right
        if node.right is None:
            return node.left
        successor = node.right
        while successor.left is not None:
            successor = successor.left
        node.key, node.val = successor.key, successor.val
        node.right = self._delete(node.right, successor.key)
        return node

    def traverse(self, fn: Callable[[Item[K, V]], Any]) -> None:
        """Call ``fn`` with every item in order."""
        for item in self:
            fn(item)

    def __iter__(self) -> Iterator[Item[K, V]]:
        with self._lock:
            items: list[Item[K, V]] = []
            stack: list[_Node] = []
            node = self._root
            while stack or node is not None:
                while node is not None:
                    stack.append(node)
                    node = node.left
                node = stack.pop()
                items.append(Item(node.key, node.val))
                node = node.right
        return iter(items)

    def __len__(self) -> int:
        return self.size()