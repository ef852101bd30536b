"""A sequential list stored contiguously, optionally bounded in size."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Generic, TypeVar

T = TypeVar("T")

NOT_FOUND = -1


def _show(item: object) -> str:
    """Format one element: letter codes print as letters, the rest as-is."""
    if isinstance(item, int) and not isinstance(item, bool):
        if ord("a") <= item <= ord("z") or ord("A") <= item <= ord("Z"):
            return chr(item)
    return str(item)


class SeqList(Generic[T]):
    """An ordered sequence with front/back and positional insertion and removal.

    With ``max_size`` set the list behaves like a fixed-size array and refuses
    to grow past it; without it the list grows as needed.
    """

    def __init__(self, max_size: int | None = None) -> None:
        if max_size is not None and max_size < 0:
            raise ValueError("max_size must not be negative")
        self.max_size = max_size
        self._items: list[T] = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __getitem__(self, index: int) -> T:
        return self._items[index]

    def __setitem__(self, index: int, value: T) -> None:
        self._items[index] = value

    def __repr__(self) -> str:
        return f"SeqList({self._items!r}, max_size={self.max_size!r})"

    def _ensure_room(self) -> None:
        if self.max_size is not None and len(self._items) >= self.max_size:
            raise OverflowError("sequence list is full")

    def _check_pos(self, pos: int) -> None:
        if not 0 <= pos < len(self._items):
            raise IndexError(f"position {pos} out of range")

    def push_front(self, item: T) -> None:
        """Insert ``item`` before the first element."""
        self._ensure_room()
        self._items.insert(0, item)

    def push_back(self, item: T) -> None:
        """Append ``item`` after the last element."""
        self._ensure_room()
        self._items.append(item)

    def pop_front(self) -> T:
        """Remove and return the first element."""
        if not self._items:
            raise IndexError("pop from empty list")
        return self._items.pop(0)

    def pop_back(self) -> T:
        """Remove and return the last element."""
        if not self._items:
            raise IndexError("pop from empty list")
        return self._items.pop()

    def insert(self, pos: int, item: T) -> None:
        """Insert ``item`` at an existing position ``pos``, shifting the rest right."""
        self._check_pos(pos)
        self._ensure_room()
        self._items.insert(pos, item)

    def erase(self, pos: int) -> T:
        """Remove and return the element at ``pos``."""
        self._check_pos(pos)
        return self._items.pop(pos)

    def find(self, item: T) -> int:
        """Return the index of the first element equal to ``item``, or -1."""
        for index, current in enumerate(self._items):
            if current == item:
                return index
        return NOT_FOUND

    def clear(self) -> None:
        """Remove every element."""
        self._items.clear()

    def render(self) -> str:
        """Return the elements as a line, each followed by a space."""
        return "".join(f"{_show(item)} " for item in self._items)