"""Fixed-capacity LIFO stack."""

from __future__ import annotations

from collections.abc import Iterator

DEFAULT_CAPACITY = 5


class StackOverflowError(Exception):
    """Raised when pushing onto a full stack."""


class StackUnderflowError(Exception):
    """Raised when popping or peeking an empty stack."""


class BoundedStack:
    """A stack that holds at most ``capacity`` values."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: list[int] = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        """Iterate from the top of the stack to the bottom."""
        return reversed(self._items)

    def __repr__(self) -> str:
        return f"BoundedStack({self._items!r}, capacity={self.capacity})"

    def push(self, value: int) -> None:
        """Place ``value`` on top of the stack."""
        if len(self._items) >= self.capacity:
            raise StackOverflowError("stack overflow")
        self._items.append(value)

    def pop(self) -> int:
        """Remove and return the top value."""
        if not self._items:
            raise StackUnderflowError("stack underflow")
        return self._items.pop()

    def peek(self) -> int:
        """Return the top value without removing it."""
        if not self._items:
            raise StackUnderflowError("stack underflow")
        return self._items[-1]

    def render(self) -> str:
        """Return the values from top to bottom separated by spaces."""
        if not self._items:
            return "Stack is empty"
        return " ".join(str(value) for value in self)