"""A singly linked list that always holds at least one node."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterator, Optional, TypeVar

T = TypeVar("T")


class ListError(LookupError):
    """Raised when a linked-list operation refers to a missing node."""


@dataclass(eq=False)
class SingleNode(Generic[T]):
    """A list node holding a value and a link to the next node."""

    value: T
    next: Optional[SingleNode[T]] = None


class SList(Generic[T]):
    """Singly linked list; the sole remaining node cannot be removed."""

    def __init__(self, value: T) -> None:
        self.head: SingleNode[T] = SingleNode(value)

    def _nodes(self) -> Iterator[SingleNode[T]]:
        node: SingleNode[T] | None = self.head
        while node is not None:
            yield node
            node = node.next

    def _contains(self, node: SingleNode[T]) -> bool:
        return any(n is node for n in self._nodes())

    def unshift(self, value: T) -> None:
        """Insert a node at the front."""
        self.head = SingleNode(value, self.head)

    def append(self, value: T) -> None:
        """Insert a node at the end."""
        tail = self.head
        while tail.next is not None:
            tail = tail.next
        tail.next = SingleNode(value)

    def insert_after(self, node: SingleNode[T] | None, value: T) -> None:
        """Insert a node after ``node``; raise ListError if it is not in the list."""
        if node is None:
            raise ListError("the provided node does not exists")
        if not self._contains(node):
            raise ListError("the node does not exists")
        node.next = SingleNode(value, node.next)

    def replace(self, old: T, new: T) -> None:
        """Replace the first occurrence of ``old`` with ``new``."""
        for node in self._nodes():
            if node.value == old:
                node.value = new
                return
        raise ListError("requested node does not exists")

    def delete(self, node: SingleNode[T]) -> None:
        """Unlink ``node``; the last remaining node cannot be deleted."""
        if node is self.head:
            if node.next is None:
                raise ListError(
                    "cannot remove the node if there is only one element in the list"
                )
            self.head = node.next
            return
        prev = next((n for n in self._nodes() if n.next is node), None)
        if prev is None:
            raise ListError("the node to be deleted does not exists")
        prev.next = node.next

    def shift(self) -> None:
        """Drop the first node, unless it is the only one."""
        if self.head.next is not None:
            self.head = self.head.next

    def pop(self) -> None:
        """Drop the last node, unless it is the only one."""
        if self.head.next is None:
            return
        node = self.head
        while node.next is not None and node.next.next is not None:
            node = node.next
        node.next = None

    def find(self, value: T) -> SingleNode[T] | None:
        """Return the first node holding ``value``, or None."""
        return next((n for n in self._nodes() if n.value == value), None)

    def each(self, fn: Callable[[T], Any]) -> None:
        """Call ``fn`` with every value from front to back."""
        for value in self:
            fn(value)

    def __iter__(self) -> Iterator[T]:
        for node in self._nodes():
            yield node.value

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())