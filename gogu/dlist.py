"""A doubly linked list that always holds at least one node."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Generic, Iterator, Optional, TypeVar

from gogu.slist import ListError

T = TypeVar("T")

__all__ = ["DList", "DoubleNode", "ListError"]


@dataclass(eq=False)
class DoubleNode(Generic[T]):
    """A list node holding a value and links to its neighbours."""

    value: T
    next: Optional[DoubleNode[T]] = field(default=None, repr=False)
    prev: Optional[DoubleNode[T]] = field(default=None, repr=False)


class DList(Generic[T]):
    """Doubly linked list; the sole remaining node cannot be removed."""

    def __init__(self, value: T) -> None:
        self.head: DoubleNode[T] = DoubleNode(value)

    def _nodes(self) -> Iterator[DoubleNode[T]]:
        node: DoubleNode[T] | None = self.head
        while node is not None:
            yield node
            node = node.next

    def _tail(self) -> DoubleNode[T]:
        node = self.head
        while node.next is not None:
            node = node.next
        return node

    def _require(self, node: DoubleNode[T] | None) -> DoubleNode[T]:
        if node is None:
            raise ListError("the previous node does not exists")
        if not any(n is node for n in self._nodes()):
            raise ListError("the node does not exists")
        return node

    def unshift(self, value: T) -> None:
        """Insert a node at the front."""
        node = DoubleNode(value, next=self.head)
        self.head.prev = node
        self.head = node

    def append(self, value: T) -> None:
        """Insert a node at the end."""
        tail = self._tail()
        tail.next = DoubleNode(value, prev=tail)

    def insert_before(self, node: DoubleNode[T] | None, value: T) -> None:
        """Insert a node before ``node``; raise ListError if it is not in the list."""
        node = self._require(node)
        new = DoubleNode(value, next=node, prev=node.prev)
        if node.prev is None:
            self.head = new
        else:
            node.prev.next = new
        node.prev = new

    def insert_after(self, node: DoubleNode[T] | None, value: T) -> None:
        """Insert a node after ``node``; raise ListError if it is not in the list."""
        node = self._require(node)
        new = DoubleNode(value, next=node.next, prev=node)
        if node.next is not None:
            node.next.prev = new
        node.next = new

    def replace(self, old: T, new: T) -> None:
        """Replace the first occurrence of ``old`` with ``new``."""
        for node in self._nodes():
            if node.value == old:
                node.value = new
                return
        raise ListError("requested node does not exists")

    def delete(self, node: DoubleNode[T]) -> None:
        """Unlink ``node``; the last remaining node cannot be deleted."""
        if not any(n is node for n in self._nodes()):
            raise ListError("the node to be deleted does not exists")
        if self.head.next is None:
            raise ListError(
                "cannot delete the node if there is only one element in the list"
            )
        if node.prev is None:
            self.head = node.next  # type: ignore[assignment]
            self.head.prev = None
        else:
            node.prev.next = node.next
        if node.next is not None:
            node.next.prev = node.prev
        node.next = node.prev = None

    def shift(self) -> DoubleNode[T]:
        """Remove and return the first node.

        When it is the only node, the list keeps a single node whose value
        is reset to None.
        """
        first = self.head
        if first.next is None:
            self.head = DoubleNode(None)  # type: ignore[arg-type]
        else:
            self.head = first.next
            self.head.prev = None
            first.next = None
        return first

    def pop(self) -> DoubleNode[T] | None:
        """Remove and return the last node, or None if it is the only one."""
        tail = self._tail()
        if tail.prev is None:
            return None
        tail.prev.next = None
        tail.prev = None
        return tail

    def find(self, value: T) -> DoubleNode[T] | None:
        """Return the first node holding ``value``, or None."""
        return next((n for n in self._nodes() if n.value == value), None)

    def first(self) -> T:
        """Return the value of the first node."""
        return self.head.value

    def last(self) -> T:
        """Return the value of the last node."""
        return self._tail().value

    def each(self, fn: Callable[[T], Any]) -> None:
        """Call ``fn`` with every value from front to back."""
        for value in self:
            fn(value)

    def clear(self) -> None:
        """Drop every node except the first."""
        self.head.next = None
        self.head.prev = None

    def __iter__(self) -> Iterator[T]:
        for node in self._nodes():
            yield node.value

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())