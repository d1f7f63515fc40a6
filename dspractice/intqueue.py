"""Bounded circular queue of integers."""

from __future__ import annotations

from .core import MAX_QUEUE_SIZE


class IntQueue:
    """A first-in first-out ring buffer where each slot records whether it is in use."""

    def __init__(self, max_size: int = MAX_QUEUE_SIZE):
        if max_size < 1:
            raise ValueError("queue size must be positive")
        self._max_size = max_size
        self._data = [0] * max_size
        self._used = [False] * max_size
        self._head = 0
        self._tail = 0
        self._size = 0

    def is_full(self) -> bool:
        return self._used[self._tail]

    def is_empty(self) -> bool:
        return not self._used[self._head]

    def __len__(self) -> int:
        return self._size

    def push_back(self, value: int) -> None:
        if self.is_full():
            raise OverflowError("queue is full")
        self._data[self._tail] = value
        self._used[self._tail] = True
        self._tail = (self._tail + 1) % self._max_size
        self._size += 1

    def pop_front(self) -> int:
        if self.is_empty():
            raise IndexError("pop from empty queue")
        value = self._data[self._head]
        self._data[self._head] = 0
        self._used[self._head] = False
        self._head = (self._head + 1) % self._max_size
        self._size -= 1
        return value

    def __str__(self) -> str:
        slots = " ".join(str(value) for value in self._data)
        return f"{slots} head[{self._head}] tail[{self._tail}]"