"""A singly linked list of arbitrary values."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class Node:
    """One link of a LinkedList."""

    value: Any
    next: Optional[Node] = None


class LinkedList:
    """Singly linked list with constant-time insertion at both ends."""

    def __init__(self, items: Iterable[Any] | None = None) -> None:
        self._head: Node | None = None
        self._tail: Node | None = None
        self._size = 0
        for item in items or ():
            self.push_back(item)

    def push_front(self, value: Any) -> Node:
        """Insert value at the front; return its node."""
        node = Node(value, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1
        return node

    def push_back(self, value: Any) -> Node:
        """Append value at the back; return its node."""
        node = Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1
        return node

    def last(self) -> Any:
        """Return the value of the last element."""
        if self._tail is None:
            raise IndexError("last() of an empty list")
        return self._tail.value

    def clear(self, release: Callable[[Any], object] | None = None) -> None:
        """Remove every element, calling release on each value in order."""
        node = self._head
        while node is not None:
            following = node.next
            if release is not None:
                release(node.value)
            node.next = None
            node = following
        self._head = self._tail = None
        self._size = 0

    def for_each(self, func: Callable[[Any], object]) -> None:
        """Call func on every value, front to back."""
        for value in self:
            func(value)

    def map(
        self,
        func: Callable[[Any], Any],
        release: Callable[[Any], object] | None = None,
    ) -> LinkedList:
        """Return a new list of func applied to every value.

        If func raises, release is called on the values already produced
        and the exception propagates.
        """
        result = LinkedList()
        try:
            for value in self:
                result.push_back(func(value))
        except BaseException:
            result.clear(release)
            raise
        return result

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"