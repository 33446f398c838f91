"""Singly linked and circular linked lists with the usual pointer exercises."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class Node:
    """A list cell holding a value and a link to the next cell."""

    value: Any
    next: Node | None = None


def _reverse_groups(head: Node, k: int) -> Node:
    previous: Node | None = None
    current: Node | None = head
    count = 0
    while current is not None and count < k:
        following = current.next
        current.next = previous
        previous = current
        current = following
        count += 1
    if current is not None:
        head.next = _reverse_groups(current, k)
    assert previous is not None
    return previous


class LinkedList:
    """A singly linked list. Iteration and length do not end on a cyclic list."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: Node | None = None
        for value in values:
            self.append(value)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def _tail(self) -> Node | None:
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def _node_at(self, position: int) -> Node:
        if position >= 1:
            for index, node in enumerate(self._nodes(), start=1):
                if index == position:
                    return node
        raise IndexError(f"no node at position {position}")

    def push_front(self, value: Any) -> None:
        """Insert ``value`` before the current head."""
        self.head = Node(value, self.head)

    def append(self, value: Any) -> None:
        """Insert ``value`` after the current tail."""
        node = Node(value)
        tail = self._tail()
        if tail is None:
            self.head = node
        else:
            tail.next = node

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        return (node.value for node in self._nodes())

    def __contains__(self, value: object) -> bool:
        return any(item == value for item in self)

    def __str__(self) -> str:
        return "".join(f"{value}->" for value in self) + "NULL"

    def remove(self, value: Any) -> None:
        """Unlink the first node holding ``value``; ``ValueError`` if none does."""
        previous: Node | None = None
        for node in self._nodes():
            if node.value == value:
                if previous is None:
                    self.head = node.next
                else:
                    previous.next = node.next
                return
            previous = node
        raise ValueError(f"{value!r} not in list")

    def reverse(self) -> None:
        """Reverse the list in place."""
        previous: Node | None = None
        current = self.head
        while current is not None:
            following = current.next
            current.next = previous
            previous = current
            current = following
        self.head = previous

    def reverse_in_groups(self, k: int) -> None:
        """Reverse each consecutive block of ``k`` nodes in place."""
        if k < 1:
            raise ValueError("group size must be positive")
        if self.head is not None:
            self.head = _reverse_groups(self.head, k)

    def make_cycle(self, position: int) -> None:
        """Link the tail back to the node at 1-based ``position``."""
        target = self._node_at(position)
        tail = self._tail()
        assert tail is not None
        tail.next = target

    def _meeting_point(self) -> Node | None:
        slow = fast = self.head
        while fast is not None and fast.next is not None:
            assert slow is not None
            slow = slow.next
            fast = fast.next.next
            if slow is fast:
                return slow
        return None

    def has_cycle(self) -> bool:
        """Floyd's tortoise and hare: True when the list loops back on itself."""
        return self._meeting_point() is not None

    def remove_cycle(self) -> None:
        """Break a cycle so the list ends again; does nothing if there is none."""
        meeting = self._meeting_point()
        if meeting is None:
            return
        slow = meeting
        if slow is self.head:
            while slow.next is not self.head:
                assert slow.next is not None
                slow = slow.next
            slow.next = None
            return
        fast = self.head
        assert fast is not None
        while slow.next is not fast.next:
            assert slow.next is not None and fast.next is not None
            slow = slow.next
            fast = fast.next
        slow.next = None

    def rotate(self, k: int) -> None:
        """Move the first ``k`` (modulo length) nodes to the end, in place."""
        size = len(self)
        if size == 0:
            return
        k %= size
        if k == 0:
            return
        new_tail = self._node_at(k)
        new_head = new_tail.next
        tail = self._tail()
        assert tail is not None
        tail.next = self.head
        new_tail.next = None
        self.head = new_head


def intersect(first: LinkedList, second: LinkedList, position: int) -> None:
    """Join the tail of ``second`` to the node at 1-based ``position`` of ``first``."""
    target = first._node_at(position)
    tail = second._tail()
    if tail is None:
        second.head = target
    else:
        tail.next = target


def intersection_value(first: LinkedList, second: LinkedList) -> Any | None:
    """Value of the first node shared by both lists, or ``None`` if they never meet."""
    shared = {id(node) for node in first._nodes()}
    for node in second._nodes():
        if id(node) in shared:
            return node.value
    return None


class CircularList:
    """A circular singly linked list tracked by its last node."""

    def __init__(self) -> None:
        self._last: Node | None = None
        self._size = 0

    def push_front(self, value: Any) -> None:
        """Insert ``value`` as the new first element."""
        node = Node(value)
        if self._last is None:
            node.next = node
            self._last = node
        else:
            node.next = self._last.next
            self._last.next = node
        self._size += 1

    def __iter__(self) -> Iterator[Any]:
        if self._last is None:
            return
        first = self._last.next
        node = first
        while True:
            assert node is not None
            yield node.value
            node = node.next
            if node is first:
                break

    def __len__(self) -> int:
        return self._size