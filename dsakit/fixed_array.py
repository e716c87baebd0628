"""Fixed-capacity array with shifting insert and delete operations."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

DEFAULT_CAPACITY = 10


class ArrayFullError(Exception):
    """Raised when an insertion would exceed the array's capacity."""


class ArrayEmptyError(Exception):
    """Raised when deleting from an empty array."""


class FixedArray:
    """A sequence of values that may never grow beyond a fixed capacity."""

    def __init__(self, items: Iterable[int] = (), capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        values = list(items)
        if len(values) > capacity:
            raise ArrayFullError(
                f"{len(values)} items do not fit in capacity {capacity}"
            )
        self._capacity = capacity
        self._items = values

    @property
    def capacity(self) -> int:
        """The largest number of elements the array may hold."""
        return self._capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __getitem__(self, index):
        return self._items[index]

    def __repr__(self) -> str:
        return f"FixedArray({self._items!r}, capacity={self._capacity})"

    def _require_room(self) -> None:
        if len(self._items) >= self._capacity:
            raise ArrayFullError("array is full")

    def _require_items(self) -> None:
        if not self._items:
            raise ArrayEmptyError("array is empty")

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._items):
            raise IndexError("index out of range")

    def insert_begin(self, value: int) -> None:
        """Insert ``value`` before every existing element."""
        self._require_room()
        self._items.insert(0, value)

    def insert_end(self, value: int) -> None:
        """Append ``value`` after the last element."""
        self._require_room()
        self._items.append(value)

    def insert_at(self, index: int, value: int) -> None:
        """Insert ``value`` at ``index``, shifting later elements right."""
        self._require_room()
        if not 0 <= index <= len(self._items):
            raise IndexError("index out of range")
        self._items.insert(index, value)

    def delete_begin(self) -> int:
        """Remove and return the first element."""
        self._require_items()
        return self._items.pop(0)

    def delete_end(self) -> int:
        """Remove and return the last element."""
        self._require_items()
        return self._items.pop()

    def delete_at(self, index: int) -> int:
        """Remove and return the element at ``index``."""
        self._require_items()
        self._check_index(index)
        return self._items.pop(index)

    def update(self, index: int, value: int) -> None:
        """Overwrite the element at ``index`` with ``value``."""
        self._check_index(index)
        self._items[index] = value

    def fill_range(self, count: int) -> int:
        """Replace the contents with 0, 1, ... up to ``count`` or the capacity.

        Returns the number of elements written.
        """
        written = max(0, min(count, self._capacity))
        self._items = list(range(written))
        return written

    def render(self) -> str:
        """Return the elements separated by single spaces."""
        return " ".join(str(value) for value in self._items)