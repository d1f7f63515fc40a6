"""Bounded stack of integers."""

from __future__ import annotations

from .core import MAX_STACK_SIZE


class IntStack:
    """A last-in first-out stack with a fixed capacity."""

    def __init__(self, max_size: int = MAX_STACK_SIZE):
        self._max_size = max_size
        self._items: list[int] = []

    def is_full(self) -> bool:
        return len(self._items) >= self._max_size

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def push(self, value: int) -> None:
        if self.is_full():
            raise OverflowError("stack is full")
        self._items.append(value)

    def pop(self) -> int:
        if self.is_empty():
            raise IndexError("pop from empty stack")
        return self._items.pop()

    def top(self) -> int:
        if self.is_empty():
            raise IndexError("top of empty stack")
        return self._items[-1]

    def __str__(self) -> str:
        return " ".join(str(item) for item in self._items)