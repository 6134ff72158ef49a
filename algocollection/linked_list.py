"""Singly linked lists: building, rotating, reversing, sorting, merging, cycles."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list. Nodes compare by identity."""

    data: Any
    next: Optional[ListNode] = None

    def __iter__(self) -> Iterator[Any]:
        """Yield the values from this node to the end of the list.

        On a list with a cycle this never ends.
        """
        node: ListNode | None = self
        while node is not None:
            yield node.data
            node = node.next


def from_iterable(values: Iterable[Any]) -> ListNode | None:
    """Build a list holding ``values`` in order; None when there are none."""
    head: ListNode | None = None
    tail: ListNode | None = None
    for value in values:
        node = ListNode(value)
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
    return head


def values_of(head: ListNode | None) -> list[Any]:
    """The values of the list in order; raises ValueError if it has a cycle."""
    if head is None:
        return []
    if has_cycle(head):
        raise ValueError("list has a cycle")
    return list(head)


def alternate_k_reverse(head: ListNode | None, k: int) -> ListNode | None:
    """Reverse the first ``k`` nodes, keep the next ``k``, and so on; return the new head."""
    if k < 1:
        raise ValueError("k must be at least 1")
    new_head: ListNode | None = None
    joint: ListNode | None = None
    current = head
    while current is not None:
        group_end = current
        reversed_head: ListNode | None = None
        for _ in range(k):
            if current is None:
                break
            following = current.next
            current.next = reversed_head
            reversed_head = current
            current = following
        if joint is None:
            new_head = reversed_head
        else:
            joint.next = reversed_head
        group_end.next = current

        for _ in range(k - 1):
            if current is None:
                break
            current = current.next
        if current is None:
            break
        joint = current
        current = current.next
    return new_head


def rotate(head: ListNode | None, k: int) -> ListNode | None:
    """Move the first ``k`` nodes to the end and return the new head.

    ``k`` of 0, or not smaller than the length, leaves the list unchanged.
    """
    if k < 0:
        raise ValueError("k must not be negative")
    if k == 0 or head is None:
        return head
    kth = head
    for _ in range(k - 1):
        kth = kth.next
        if kth is None:
            return head
    if kth.next is None:
        return head
    last = kth.next
    while last.next is not None:
        last = last.next
    new_head = kth.next
    last.next = head
    kth.next = None
    return new_head


def insertion_sort(head: ListNode | None) -> ListNode | None:
    """Sort the list by relinking its nodes and return the new head.

    Each node goes before the first already-sorted node not smaller than it,
    so equal values end up in reverse of their original order.
    """
    sorted_head: ListNode | None = None
    current = head
    while current is not None:
        following = current.next
        if sorted_head is None or sorted_head.data >= current.data:
            current.next = sorted_head
            sorted_head = current
        else:
            place = sorted_head
            while place.next is not None and place.next.data < current.data:
                place = place.next
            current.next = place.next
            place.next = current
        current = following
    return sorted_head


def has_cycle(head: ListNode | None) -> bool:
    """True when following ``next`` from ``head`` never reaches the end."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        fast = fast.next.next
        slow = slow.next
        if fast is slow:
            return True
    return False


def cycle_start(head: ListNode | None) -> ListNode | None:
    """The node at which the cycle begins, or None if the list has no cycle."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        fast = fast.next.next
        slow = slow.next
        if fast is slow:
            slow = head
            while slow is not fast:
                slow = slow.next
                fast = fast.next
            return slow
    return None


def kth_from_end(head: ListNode | None, k: int) -> Any:
    """Value of the ``k``-th node counting back from the end (the last is 1)."""
    if k < 1:
        raise ValueError("k must be at least 1")
    fast = head
    for _ in range(k):
        if fast is None:
            raise IndexError(f"{k} is larger than number of nodes in the list")
        fast = fast.next
    slow = head
    while fast is not None:
        fast = fast.next
        slow = slow.next
    return slow.data


def merge_sorted(a: ListNode | None, b: ListNode | None) -> ListNode | None:
    """Merge two sorted lists by relinking their nodes; ties take from ``b`` first."""
    anchor = ListNode(None)
    tail = anchor
    while a is not None and b is not None:
        if a.data < b.data:
            tail.next = a
            a = a.next
        else:
            tail.next = b
            b = b.next
        tail = tail.next
    tail.next = a if a is not None else b
    return anchor.next


def middle(head: ListNode | None) -> Any | None:
    """Value of the middle node (the second of two for even lengths), or None."""
    if head is None:
        return None
    slow = fast = head
    while fast is not None and fast.next is not None:
        fast = fast.next.next
        slow = slow.next
    return slow.data