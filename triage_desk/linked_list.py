"""Singly linked list with an internal cursor."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional


@dataclass
class _Node:
    data: Any
    next: Optional["_Node"] = None


class LinkedList:
    """A singly linked list that keeps a cursor for step-by-step traversal."""

    def __init__(self) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._current: Optional[_Node] = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def first(self) -> Any:
        """Move the cursor to the head and return its data, or None if empty."""
        if self._head is None:
            return None
        self._current = self._head
        return self._current.data

    def next(self) -> Any:
        """Advance the cursor and return its data, or None at the end."""
        if self._current is None or self._current.next is None:
            return None
        self._current = self._current.next
        return self._current.data

    def push_front(self, data: Any) -> None:
        node = _Node(data, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1

    def push_back(self, data: Any) -> None:
        node = _Node(data)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def push_current(self, data: Any) -> None:
        """Insert data right after the cursor."""
        if self._current is None:
            raise IndexError("no current element")
        node = _Node(data, self._current.next)
        self._current.next = node
        if self._current is self._tail:
            self._tail = node
        self._size += 1

    def sorted_insert(self, data: Any, lower_than: Callable[[Any, Any], bool]) -> None:
        """Insert data before the first element it is lower than."""
        if self._head is None or lower_than(data, self._head.data):
            self.push_front(data)
            return
        node = self._head
        while node.next is not None and not lower_than(data, node.next.data):
            node = node.next
        self._current = node
        self.push_current(data)

    def pop_front(self) -> Any:
        if self._head is None:
            raise IndexError("pop from empty list")
        node = self._head
        self._head = node.next
        if self._head is None:
            self._tail = None
        if self._current is node:
            self._current = None
        self._size -= 1
        return node.data

    def pop_back(self) -> Any:
        if self._head is None:
            raise IndexError("pop from empty list")
        if self._head is self._tail:
            return self.pop_front()
        node = self._head
        while node.next is not self._tail:
            node = node.next
        removed = self._tail
        node.next = None
        self._tail = node
        if self._current is removed:
            self._current = None
        self._size -= 1
        return removed.data

    def pop_current(self) -> Any:
        """Remove the element at the cursor; the cursor moves to its successor."""
        if self._current is None:
            raise IndexError("no current element")
        if self._current is self._head:
            data = self.pop_front()
            self._current = self._head
            return data
        previous = self._head
        while previous.next is not self._current:
            previous = previous.next
        removed = self._current
        previous.next = removed.next
        if removed is self._tail:
            self._tail = previous
        self._current = previous.next
        self._size -= 1
        return removed.data

    def clear(self) -> None:
        self._head = None
        self._tail = None
        self._current = None
        self._size = 0