"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class _Node:
    content: Any
    next: Optional["_Node"] = None


class LinkedList:
    """Singly linked list that supports adding at either end."""

    def __init__(self, items: Optional[Iterable[Any]] = None) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._count = 0
        for item in items or ():
            self.add_back(item)

    def add_back(self, content: Any) -> None:
        """Append ``content`` at the end of the list."""
        node = _Node(content)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._count += 1

    def add_front(self, content: Any) -> None:
        """Insert ``content`` at the start of the list."""
        self._head = _Node(content, self._head)
        if self._tail is None:
            self._tail = self._head
        self._count += 1

    def clear(self, delete: Optional[Callable[[Any], Any]] = None) -> None:
        """Empty the list, calling ``delete`` on each content in order."""
        if delete is not None:
            for content in self:
                delete(content)
        self._head = None
        self._tail = None
        self._count = 0

    def for_each(self, func: Callable[[Any], Any]) -> None:
        """Call ``func`` on every content, front to back."""
        for content in self:
            func(content)

    def last(self) -> Any:
        """Return the content of the last node, or None if the list is empty."""
        return None if self._tail is None else self._tail.content

    def map(self, func: Callable[[Any], Any]) -> "LinkedList":
        """Return a new list holding ``func(content)`` for every content."""
        return LinkedList(func(content) for content in self)

    def size(self) -> int:
        """Return the number of nodes."""
        return self._count

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.content
            node = node.next

    def __len__(self) -> int:
        return self._count

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"