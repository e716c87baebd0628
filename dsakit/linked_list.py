"""Singly linked list with positional insert and delete operations."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass
class Node:
    """A single list cell holding a value and a link to the next cell."""

    data: int
    next: Optional["Node"] = None


class ListEmptyError(Exception):
    """Raised when deleting from an empty list."""


class LinkedList:
    """A singly linked list of values; positions are counted from 1."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.head: Optional[Node] = None
        self._size = 0
        for value in values:
            self.insert_end(value)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        node = self.head
        while node is not None:
            yield node.data
            node = node.next

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def insert_begin(self, value: int) -> None:
        """Make ``value`` the new first element."""
        self.head = Node(value, self.head)
        self._size += 1

    def insert_end(self, value: int) -> None:
        """Make ``value`` the new last element."""
        new_node = Node(value)
        if self.head is None:
            self.head = new_node
        else:
            node = self.head
            while node.next is not None:
                node = node.next
            node.next = new_node
        self._size += 1

    def insert_at(self, value: int, position: int) -> None:
        """Insert ``value`` so that it ends up at ``position`` (1-based)."""
        if position < 1:
            raise IndexError("position out of range")
        if position == 1:
            self.insert_begin(value)
            return
        node = self.head
        steps = position - 2
        while node is not None and steps > 0:
            node = node.next
            steps -= 1
        if node is None:
            raise IndexError("position out of range")
        node.next = Node(value, node.next)
        self._size += 1

    def delete_begin(self) -> int:
        """Remove and return the first element."""
        if self.head is None:
            raise ListEmptyError("list is empty, nothing to delete")
        removed = self.head
        self.head = removed.next
        self._size -= 1
        return removed.data

    def delete_end(self) -> int:
        """Remove and return the last element."""
        if self.head is None:
            raise ListEmptyError("list is empty, nothing to delete")
        if self.head.next is None:
            return self.delete_begin()
        prev = self.head
        while prev.next is not None and prev.next.next is not None:
            prev = prev.next
        removed = prev.next
        prev.next = None
        self._size -= 1
        return removed.data

    def delete_at(self, position: int) -> int:
        """Remove and return the element at ``position`` (1-based)."""
        if self.head is None:
            raise ListEmptyError("list is empty, nothing to delete")
        if position < 1:
            raise IndexError("invalid position")
        if position == 1:
            return self.delete_begin()
        prev = self.head
        steps = position - 2
        while prev.next is not None and steps > 0:
            prev = prev.next
            steps -= 1
        if steps > 0 or prev.next is None:
            raise IndexError("position out of range")
        removed = prev.next
        prev.next = removed.next
        self._size -= 1
        return removed.data

    def render(self) -> str:
        """Return the list drawn as ``a -> b -> NULL``."""
        return "".join(f"{value} -> " for value in self) + "NULL"