"""Doubly linked list without a sentinel head node."""

from __future__ import annotations

from typing import Any, Iterable, Iterator, Optional

from .core import DLinkListNode


class DoublyLinkedList:
    """A doubly linked list addressed by zero-based positions.

    ``insert(0, v)`` puts ``v`` at the front; for a positive ``pos`` the new
    node goes right after the node at ``pos`` (or at the end when the list
    is shorter).
    """

    def __init__(self, values: Optional[Iterable[Any]] = None):
        self._head: Optional[DLinkListNode] = None
        for pos, value in enumerate(values if values is not None else ()):
            self.insert(pos, value)

    def is_empty(self) -> bool:
        return self._head is None

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def get_node(self, pos: int) -> Optional[DLinkListNode]:
        """Return the node at ``pos``, or None when there is none."""
        if pos < 0:
            return None
        node = self._head
        for _ in range(pos):
            if node is None:
                break
            node = node.next
        return node

    def get(self, pos: int) -> Any:
        node = self.get_node(pos)
        if node is None:
            raise IndexError(f"position {pos} out of range")
        return node.data

    def set(self, pos: int, value: Any) -> None:
        node = self.get_node(pos)
        if node is None:
            raise IndexError(f"position {pos} out of range")
        node.data = value

    def insert(self, pos: int, value: Any) -> DLinkListNode:
        node = DLinkListNode(value)
        if self._head is None or pos <= 0:
            node.next = self._head
            if self._head is not None:
                self._head.prev = node
            self._head = node
            return node
        prev = self._head
        steps = 0
        while prev.next is not None and steps < pos:
            prev = prev.next
            steps += 1
        node.next = prev.next
        node.prev = prev
        if prev.next is not None:
            prev.next.prev = node
        prev.next = node
        return node

    def remove_at(self, pos: int) -> Any:
        """Remove the element at ``pos`` and return it."""
        if self._head is None or pos < 0:
            raise IndexError(f"position {pos} out of range")
        if pos == 0:
            node = self._head
            self._head = node.next
            if self._head is not None:
                self._head.prev = None
            return node.data
        prev = self.get_node(pos - 1)
        if prev is None or prev.next is None:
            raise IndexError(f"position {pos} out of range")
        node = prev.next
        prev.next = node.next
        if node.next is not None:
            node.next.prev = prev
        return node.data

    def clear(self) -> None:
        self._head = None

    def concat(self, other: "DoublyLinkedList") -> None:
        """Move all nodes of ``other`` to the end of this list, leaving it empty."""
        if self._head is None:
            self._head = other._head
        elif other._head is not None:
            node = self._head
            while node.next is not None:
                node = node.next
            node.next = other._head
            other._head.prev = node
        other._head = None

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __str__(self) -> str:
        return "-".join(str(value) for value in self)