"""Fixed-capacity stack and queue, and a postfix evaluator built on the stack."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterator

_POSTFIX_CAPACITY = 1000


class StackOverflowError(OverflowError):
    """Raised when pushing onto a full stack."""


class StackUnderflowError(IndexError):
    """Raised when taking from an empty stack."""


class QueueOverflowError(OverflowError):
    """Raised when the queue has used all its slots."""


class QueueUnderflowError(IndexError):
    """Raised when taking from an empty queue."""


class PostfixError(ValueError):
    """Raised for a malformed postfix expression."""


class BoundedStack:
    """A last-in, first-out stack holding at most ``capacity`` elements."""

    def __init__(self, capacity: int = 100) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: list[int] = []

    def push(self, element: int) -> None:
        """Put ``element`` on top."""
        if len(self._items) >= self.capacity:
            raise StackOverflowError("stack overflow")
        self._items.append(element)

    def pop(self) -> int:
        """Remove and return the top element."""
        if not self._items:
            raise StackUnderflowError("stack underflow")
        return self._items.pop()

    def peek(self) -> int:
        """Return the top element without removing it."""
        if not self._items:
            raise StackUnderflowError("stack underflow")
        return self._items[-1]

    def is_empty(self) -> bool:
        """Return True when the stack holds nothing."""
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        """Iterate from the top element down."""
        return reversed(self._items)


class BoundedQueue:
    """A first-in, first-out queue over ``capacity`` slots.

    Slots are used once: after ``capacity`` values have been enqueued the
    queue is full for good, however many have been dequeued since.
    """

    def __init__(self, capacity: int = 100) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._slots: list[int] = []
        self._front = 0

    def enqueue(self, value: int) -> None:
        """Add ``value`` at the back."""
        if len(self._slots) >= self.capacity:
            raise QueueOverflowError("queue overflow")
        self._slots.append(value)

    def dequeue(self) -> int:
        """Remove and return the front value."""
        if self._front >= len(self._slots):
            raise QueueUnderflowError("queue underflow")
        value = self._slots[self._front]
        self._front += 1
        return value

    def is_empty(self) -> bool:
        """Return True when no value is waiting."""
        return self._front >= len(self._slots)

    def __len__(self) -> int:
        return len(self._slots) - self._front

    def __iter__(self) -> Iterator[int]:
        """Iterate from front to back."""
        return iter(self._slots[self._front :])


def _truncating_div(left: int, right: int) -> int:
    if right == 0:
        raise PostfixError("division by zero")
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


def _int_pow(base: int, exponent: int) -> int:
    if exponent >= 0:
        return base**exponent
    if base == 0:
        raise PostfixError("zero raised to a negative power")
    return int(base**exponent)


_OPERATORS: dict[str, Callable[[int, int], int]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": _truncating_div,
    "^": _int_pow,
}


def evaluate_postfix(expression: str) -> int:
    """Evaluate a postfix expression of single-digit operands.

    Operators are ``+ - * / ^``; division truncates toward zero. Whitespace
    is skipped.
    """
    stack = BoundedStack(_POSTFIX_CAPACITY)
    for symbol in expression:
        if symbol.isspace():
            continue
        if "0" <= symbol <= "9":
            stack.push(int(symbol))
            continue
        try:
            right = stack.pop()
            left = stack.pop()
        except StackUnderflowError as exc:
            raise PostfixError("not enough operands") from exc
        apply = _OPERATORS.get(symbol)
        if apply is None:
            raise PostfixError(f"unknown operator {symbol!r}")
        stack.push(apply(left, right))
    if stack.is_empty():
        raise PostfixError("empty expression")
    if len(stack) != 1:
        raise PostfixError("too many operands")
    return stack.peek()