"""Unbounded queue built on linked nodes."""

from __future__ import annotations

from typing import Any, Iterator, Optional

from .core import LinkListNode


class LinkQueue:
    """A first-in first-out queue that allocates one node per element."""

    def __init__(self):
        self._head: Optional[LinkListNode] = None
        self._tail: Optional[LinkListNode] = None

    def is_empty(self) -> bool:
        return self._head is None and self._tail is None

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def clear(self) -> None:
        self._head = self._tail = None

    def enqueue(self, value: Any) -> None:
        node = LinkListNode(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node

    def dequeue(self) -> Any:
        if self._head is None:
            raise IndexError("queue is empty")
        node = self._head
        self._head = node.next
        if self._head is None:
            self._tail = None
        return node.data

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __str__(self) -> str:
        return "-".join(str(value) for value in self)