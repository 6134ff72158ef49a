"""A circular doubly linked list that keeps distinct values in ascending order."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, Optional


class _Node:
    __slots__ = ("value", "next", "prev")

    def __init__(self, value: Any) -> None:
        self.value = value
        self.next: _Node = self
        self.prev: _Node = self


class SortedRing:
    """Distinct values in a sorted ring; equal values are not inserted twice."""

    def __init__(self) -> None:
        self._head: Optional[_Node] = None
        self._size = 0

    def insert(self, value: Any) -> bool:
        """Insert ``value`` in order; return False if it was already present."""
        node = _Node(value)
        head = self._head
        if head is None:
            self._head = node
            self._size = 1
            return True

        place = head
        while True:
            if place.value == value:
                return False
            if value < place.value:
                break
            place = place.next
            if place is head:
                break

        before = place.prev
        before.next = node
        node.prev = before
        node.next = place
        place.prev = node
        if value < head.value:
            self._head = node
        self._size += 1
        return True

    def _walk(self, count: int, forwards: bool) -> list[Any]:
        if count < 0:
            raise ValueError("count must not be negative")
        if count == 0:
            return []
        if self._head is None:
            raise IndexError("the ring is empty")
        node = self._head if forwards else self._head.prev
        values = []
        for _ in range(count):
            values.append(node.value)
            node = node.next if forwards else node.prev
        return values

    def forward(self, count: int) -> list[Any]:
        """``count`` values from the smallest upwards, wrapping round the ring."""
        return self._walk(count, forwards=True)

    def backward(self, count: int) -> list[Any]:
        """``count`` values from the largest downwards, wrapping round the ring."""
        return self._walk(count, forwards=False)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        """Yield each value once, in ascending order."""
        return iter(self.forward(self._size))