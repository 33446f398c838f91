"""A fixed-capacity double-ended queue on a circular array."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

DEFAULT_CAPACITY = 7


class DequeOverflow(Exception):
    """Raised when inserting into a full deque."""


class DequeUnderflow(IndexError):
    """Raised when removing from an empty deque."""


class ArrayDeque:
    """Double-ended queue stored in a ring buffer of fixed capacity."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self._items: list[Any] = [None] * capacity
        self._front = 0
        self._size = 0

    @property
    def capacity(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        return self._size == 0

    def is_full(self) -> bool:
        return self._size == self.capacity

    def push_front(self, item: Any) -> None:
        """Insert ``item`` at the front end."""
        if self.is_full():
            raise DequeOverflow("deque is full")
        self._front = 0 if self.is_empty() else (self._front - 1) % self.capacity
        self._items[self._front] = item
        self._size += 1

    def push_back(self, item: Any) -> None:
        """Insert ``item`` at the rear end."""
        if self.is_full():
            raise DequeOverflow("deque is full")
        if self.is_empty():
            self._front = 0
        self._items[(self._front + self._size) % self.capacity] = item
        self._size += 1

    def pop_front(self) -> Any:
        """Remove and return the item at the front end."""
        if self.is_empty():
            raise DequeUnderflow("deque is empty")
        item = self._items[self._front]
        self._items[self._front] = None
        self._size -= 1
        self._front = 0 if self.is_empty() else (self._front + 1) % self.capacity
        return item

    def pop_back(self) -> Any:
        """Remove and return the item at the rear end."""
        if self.is_empty():
            raise DequeUnderflow("deque is empty")
        index = (self._front + self._size - 1) % self.capacity
        item = self._items[index]
        self._items[index] = None
        self._size -= 1
        if self.is_empty():
            self._front = 0
        return item

    def __iter__(self) -> Iterator[Any]:
        for offset in range(self._size):
            yield self._items[(self._front + offset) % self.capacity]

    def __len__(self) -> int:
        return self._size