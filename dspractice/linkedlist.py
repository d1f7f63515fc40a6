"""Singly linked list without a sentinel head node."""

from __future__ import annotations

from typing import Any, Iterable, Iterator, Optional

from .core import LinkListNode


class SinglyLinkedList:
    """A singly linked list addressed by zero-based positions."""

    def __init__(self, values: Optional[Iterable[Any]] = None):
        self._head: Optional[LinkListNode] = None
        for pos, value in enumerate(values if values is not None else ()):
            self.insert(pos, value)

    def is_empty(self) -> bool:
        return self._head is None

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def get_node(self, pos: int) -> Optional[LinkListNode]:
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

    def insert(self, pos: int, value: Any) -> LinkListNode:
        """Insert ``value`` at ``pos``; positions past the end append."""
        node = LinkListNode(value)
        if self._head is None or pos <= 0:
            node.next = self._head
            self._head = node
            return node
        prev = self._head
        steps = 0
        while prev.next is not None and steps < pos - 1:
            prev = prev.next
            steps += 1
        node.next = prev.next
        prev.next = node
        return node

    def remove_at(self, pos: int) -> Any:
        """Remove the element at ``pos`` and return it."""
        if self._head is None or pos < 0:
            raise IndexError(f"position {pos} out of range")
        if pos == 0:
            node = self._head
            self._head = node.next
            return node.data
        prev = self.get_node(pos - 1)
        if prev is None or prev.next is None:
            raise IndexError(f"position {pos} out of range")
        node = prev.next
        prev.next = node.next
        return node.data

    def clear(self) -> None:
        self._head = None

    def concat(self, other: "SinglyLinkedList") -> None:
        """Move all nodes of ``other`` to the end of this list, leaving it empty."""
        if self._head is None:
            self._head = other._head
        else:
            node = self._head
            while node.next is not None:
                node = node.next
            node.next = other._head
        other._head = None

    def search(self, value: Any, start: Optional[LinkListNode] = None) -> Optional[LinkListNode]:
        """Return the first node holding ``value`` from ``start`` (default: the head)."""
        if self._head is None:
            return None
        node = start if start is not None else self._head
        while node is not None and node.data != value:
            node = node.next
        return node

    def __contains__(self, value: Any) -> bool:
        return self.search(value) is not None

    def remove(self, value: Any) -> bool:
        """Remove the first node holding ``value``; report whether one was found."""
        if self._head is None:
            return False
        if self._head.data == value:
            self._head = self._head.next
            return True
        prev = self._head
        node = prev.next
        while node is not None and node.data != value:
            prev = node
            node = node.next
        if node is None:
            return False
        prev.next = node.next
        return True

    def find_mid(self) -> Optional[LinkListNode]:
        """Return the middle node (the second of two for an even length)."""
        slow = fast = self._head
        while fast is not None and fast.next is not None:
            slow = slow.next
            fast = fast.next.next
        return slow

    def reverse(self) -> Optional[LinkListNode]:
        """Reverse the list in place and return the new head."""
        reversed_head = None
        node = self._head
        while node is not None:
            following = node.next
            node.next = reversed_head
            reversed_head = node
            node = following
        self._head = reversed_head
        return reversed_head

    def reverse_recursive(self, head: Optional[LinkListNode] = None) -> Optional[LinkListNode]:
        """Reverse the chain starting at ``head`` recursively and return its new head.

        Without ``head`` (or with the list's own head) the list itself is reversed.
        """
        owns_chain = head is None or head is self._head
        if head is None:
            head = self._head
        new_head = self._reverse_chain(head)
        if owns_chain:
            self._head = new_head
        return new_head

    @classmethod
    def _reverse_chain(cls, head: Optional[LinkListNode]) -> Optional[LinkListNode]:
        if head is None or head.next is None:
            return head
        new_head = cls._reverse_chain(head.next)
        head.next.next = head
        head.next = None
        return new_head

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __str__(self) -> str:
        return " ".join(str(value) for value in self)