"""Circular queue stored in an array that doubles when full."""

from __future__ import annotations

from typing import Any, Iterator

from .core import MAX_SQQUEUE_SIZE


class SeqQueue:
    """A ring-buffer queue; one slot is always kept free to tell full from empty."""

    def __init__(self, size: int = MAX_SQQUEUE_SIZE):
        self._size = max(size, MAX_SQQUEUE_SIZE)
        self._data: list[Any] = [None] * self._size
        self._head = 0
        self._tail = 0

    def is_empty(self) -> bool:
        return self._head == self._tail

    def is_full(self) -> bool:
        return self._head == (self._tail + 1) % self._size

    def __len__(self) -> int:
        return (self._tail - self._head) % self._size

    def capacity(self) -> int:
        return self._size

    def head(self) -> Any:
        if self.is_empty():
            raise IndexError("queue is empty")
        return self._data[self._head]

    def tail(self) -> Any:
        if self.is_empty():
            raise IndexError("queue is empty")
        return self._data[(self._tail - 1) % self._size]

    def enqueue(self, value: Any) -> None:
        if self.is_full():
            items = list(self)
            new_size = self._size * 2
            self._data = items + [None] * (new_size - len(items))
            self._head = 0
            self._tail = len(items)
            self._size = new_size
        self._data[self._tail] = value
        self._tail = (self._tail + 1) % self._size

    def dequeue(self) -> Any:
        if self.is_empty():
            raise IndexError("queue is empty")
        value = self._data[self._head]
        self._data[self._head] = None
        self._head = (self._head + 1) % self._size
        return value

    def __iter__(self) -> Iterator[Any]:
        i = self._head
        while i != self._tail:
            yield self._data[i]
            i = (i + 1) % self._size

    def __str__(self) -> str:
        values = "-".join(str(value) for value in self)
        return f"head = {self._head} tail = {self._tail}\n{values}"