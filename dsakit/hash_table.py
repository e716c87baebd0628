"""Open-addressing hash table of integer keys using linear probing."""

from __future__ import annotations

from typing import Optional

DEFAULT_SIZE = 10


class TableFullError(Exception):
    """Raised when no free slot is left for a new key."""


class LinearProbingTable:
    """A fixed-size table of integer keys placed by ``key % size``."""

    def __init__(self, size: int = DEFAULT_SIZE) -> None:
        if size <= 0:
            raise ValueError("size must be positive")
        self.size = size
        self._slots: list[Optional[int]] = [None] * size

    def __repr__(self) -> str:
        return f"LinearProbingTable({self._slots!r})"

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, int):
            return False
        try:
            self.search(key)
        except KeyError:
            return False
        return True

    def _probe(self, key: int):
        home = key % self.size
        return ((home + step) % self.size for step in range(self.size))

    def insert(self, key: int) -> int:
        """Store ``key`` in the first free slot from its home; return the slot."""
        for index in self._probe(key):
            if self._slots[index] is None:
                self._slots[index] = key
                return index
        raise TableFullError("table full")

    def search(self, key: int) -> int:
        """Return the slot index holding ``key``."""
        for index in self._probe(key):
            if self._slots[index] == key:
                return index
        raise KeyError(key)

    def delete(self, key: int) -> int:
        """Remove ``key`` from the table and return the slot it occupied."""
        index = self.search(key)
        self._slots[index] = None
        return index

    def slots(self) -> list[Optional[int]]:
        """Return a copy of all slots; empty slots are ``None``."""
        return list(self._slots)