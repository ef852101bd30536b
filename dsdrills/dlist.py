"""A circular doubly linked list with a sentinel node."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")


@dataclass(eq=False, repr=False)
class Node(Generic[T]):
    """One link of a doubly linked list; detached nodes have no neighbours."""

    value: T
    prev: Node[T] | None = None
    next: Node[T] | None = None

    def __repr__(self) -> str:
        return f"Node({self.value!r})"


class DoublyLinkedList(Generic[T]):
    """Values kept in a ring around a sentinel node."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        sentinel: Node[Any] = Node(None)
        sentinel.prev = sentinel.next = sentinel
        self._sentinel = sentinel
        for item in items:
            self.push_back(item)

    def _nodes(self) -> Iterator[Node[T]]:
        current = self._sentinel.next
        while current is not self._sentinel:
            following = current.next
            yield current
            current = following

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[T]:
        return (node.value for node in self._nodes())

    def __repr__(self) -> str:
        return f"DoublyLinkedList({list(self)!r})"

    def is_empty(self) -> bool:
        """True when only the sentinel is left."""
        return self._sentinel.next is self._sentinel

    @staticmethod
    def _link_after(pos: Node[T], value: T) -> Node[T]:
        new = Node(value, pos, pos.next)
        pos.next.prev = new
        pos.next = new
        return new

    @staticmethod
    def _unlink(node: Node[T]) -> T:
        node.prev.next = node.next
        node.next.prev = node.prev
        node.prev = node.next = None
        return node.value

    def push_back(self, value: T) -> Node[T]:
        """Append ``value`` and return its node."""
        return self._link_after(self._sentinel.prev, value)

    def push_front(self, value: T) -> Node[T]:
        """Prepend ``value`` and return its node."""
        return self._link_after(self._sentinel, value)

    def pop_back(self) -> T:
        """Remove and return the last value."""
        if self.is_empty():
            raise IndexError("pop from empty list")
        return self._unlink(self._sentinel.prev)

    def pop_front(self) -> T:
        """Remove and return the first value."""
        if self.is_empty():
            raise IndexError("pop from empty list")
        return self._unlink(self._sentinel.next)

    def find(self, value: T) -> Node[T] | None:
        """Return the first node holding ``value``, or None."""
        for node in self._nodes():
            if node.value == value:
                return node
        return None

    def insert_after(self, node: Node[T], value: T) -> Node[T]:
        """Insert ``value`` right after ``node`` and return the new node."""
        if node.next is None:
            raise ValueError("node is not linked into a list")
        return self._link_after(node, value)

    def erase(self, node: Node[T]) -> T:
        """Unlink ``node`` and return its value."""
        if node is self._sentinel or node.next is None:
            raise ValueError("node is not an element of a list")
        return self._unlink(node)

    def clear(self) -> None:
        """Unlink every node."""
        for node in self._nodes():
            node.prev = node.next = None
        self._sentinel.prev = self._sentinel.next = self._sentinel

    def render(self) -> str:
        """Return the values as ``a->b->``."""
        return "".join(f"{value}->" for value in self)