"""Fixed-capacity FIFO queue."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator

DEFAULT_CAPACITY = 5


class QueueFullError(Exception):
    """Raised when enqueuing onto a full queue."""


class QueueEmptyError(Exception):
    """Raised when dequeuing from an empty queue."""


class BoundedQueue:
    """A first-in first-out queue holding at most ``capacity`` values."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: deque[int] = deque()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        """Iterate from the front of the queue to the rear."""
        return iter(self._items)

    def __repr__(self) -> str:
        return f"BoundedQueue({list(self._items)!r}, capacity={self.capacity})"

    def enqueue(self, value: int) -> None:
        """Add ``value`` at the rear of the queue."""
        if len(self._items) >= self.capacity:
            raise QueueFullError("queue is full")
        self._items.append(value)

    def dequeue(self) -> int:
        """Remove and return the value at the front of the queue."""
        if not self._items:
            raise QueueEmptyError("queue is empty")
        return self._items.popleft()