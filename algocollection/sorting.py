"""Bubble sort and binary insertion sort."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any


def bubble_sort(values: Iterable[Any]) -> list[Any]:
    """Return a new list with ``values`` in ascending order."""
    items = list(values)
    for end in range(len(items) - 1, 0, -1):
        for j in range(end):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
    return items


def insertion_position(values: Sequence[Any], item: Any, low: int, high: int) -> int:
    """Index at which ``item`` goes in the sorted slice ``values[low..high]``.

    An element equal to ``item`` found on the way puts ``item`` just after it.
    """
    while high > low:
        mid = (low + high) // 2
        if item == values[mid]:
            return mid + 1
        if item > values[mid]:
            low = mid + 1
        else:
            high = mid - 1
    return low + 1 if item > values[low] else low


def binary_insertion_sort(values: Iterable[Any]) -> list[Any]:
    """Return a new sorted list, placing each element by binary search."""
    items = list(values)
    for i in range(1, len(items)):
        position = insertion_position(items, items[i], 0, i - 1)
        items.insert(position, items.pop(i))
    return items