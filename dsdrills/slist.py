"""A singly linked list with node-level insertion and removal."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(eq=False, repr=False)
class Node(Generic[T]):
    """One link of a singly linked list."""

    value: T
    next: Node[T] | None = None

    def __repr__(self) -> str:
        return f"Node({self.value!r})"


class SinglyLinkedList(Generic[T]):
    """A chain of nodes reachable from ``head``."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self.head: Node[T] | None = None
        for item in reversed(list(items)):
            self.push_front(item)

    def __len__(self) -> int:
        return sum(1 for _ in self.nodes())

    def __iter__(self) -> Iterator[T]:
        return (node.value for node in self.nodes())

    def __repr__(self) -> str:
        return f"SinglyLinkedList({list(self)!r})"

    def nodes(self) -> Iterator[Node[T]]:
        """Yield the nodes from head to tail."""
        current = self.head
        while current is not None:
            yield current
            current = current.next

    def _tail(self) -> Node[T] | None:
        tail = None
        for tail in self.nodes():
            pass
        return tail

    def _predecessor(self, node: Node[T]) -> Node[T]:
        for current in self.nodes():
            if current.next is node:
                return current
        raise ValueError("node is not in this list")

    def push_back(self, value: T) -> Node[T]:
        """Append ``value`` and return its node."""
        new = Node(value)
        tail = self._tail()
        if tail is None:
            self.head = new
        else:
            tail.next = new
        return new

    def push_front(self, value: T) -> Node[T]:
        """Prepend ``value`` and return its node."""
        new = Node(value, self.head)
        self.head = new
        return new

    def pop_back(self) -> T:
        """Remove and return the last value."""
        if self.head is None:
            raise IndexError("pop from empty list")
        if self.head.next is None:
            value = self.head.value
            self.head = None
            return value
        prev = self.head
        while prev.next is not None and prev.next.next is not None:
            prev = prev.next
        last = prev.next
        prev.next = None
        return last.value

    def pop_front(self) -> T:
        """Remove and return the first value."""
        if self.head is None:
            raise IndexError("pop from empty list")
        first = self.head
        self.head = first.next
        first.next = None
        return first.value

    def find(self, value: T) -> Node[T] | None:
        """Return the first node holding ``value``, or None."""
        for node in self.nodes():
            if node.value == value:
                return node
        return None

    def insert_before(self, node: Node[T], value: T) -> Node[T]:
        """Insert ``value`` in front of ``node`` and return the new node."""
        if node is self.head:
            return self.push_front(value)
        prev = self._predecessor(node)
        new = Node(value, node)
        prev.next = new
        return new

    def insert_after(self, node: Node[T], value: T) -> Node[T]:
        """Insert ``value`` right after ``node`` and return the new node."""
        new = Node(value, node.next)
        node.next = new
        return new

    def erase(self, node: Node[T]) -> T:
        """Unlink ``node`` from the list and return its value."""
        if self.head is None:
            raise ValueError("node is not in this list")
        if node is self.head:
            return self.pop_front()
        prev = self._predecessor(node)
        prev.next = node.next
        node.next = None
        return node.value

    def erase_after(self, node: Node[T]) -> T:
        """Unlink the node following ``node`` and return its value."""
        removed = node.next
        if removed is None:
            raise ValueError("no node after the given node")
        node.next = removed.next
        removed.next = None
        return removed.value

    def clear(self) -> None:
        """Drop every node."""
        self.head = None

    def render(self) -> str:
        """Return the chain as ``a->b->NULL``."""
        return "".join(f"{value}->" for value in self) + "NULL"