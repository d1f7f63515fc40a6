"""Bounded list of integers with one-based insertion and removal."""

from __future__ import annotations

from typing import Iterator

from .core import MAX_LIST_SIZE


class IntList:
    """A fixed-capacity list of integers.

    ``insert`` and ``remove`` take one-based positions; ``get`` and indexing
    are zero-based.
    """

    def __init__(self, max_size: int = MAX_LIST_SIZE):
        self._max_size = max_size
        self._items: list[int] = []

    def clear(self) -> None:
        self._items.clear()

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) == self._max_size

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def get(self, pos: int) -> int:
        if not 0 <= pos < len(self._items):
            raise IndexError(f"position {pos} out of range")
        return self._items[pos]

    def find(self, elem: int) -> int:
        """Return the zero-based position of the first ``elem``."""
        for i, item in enumerate(self._items):
            if item == elem:
                return i
        raise ValueError(f"{elem} is not in the list")

    def prior(self, cur: int) -> int:
        """Return the element before the first occurrence of ``cur``."""
        pos = self.find(cur)
        if pos == 0:
            raise ValueError(f"{cur} has no prior element")
        return self._items[pos - 1]

    def next_of(self, cur: int) -> int:
        """Return the element after the first occurrence of ``cur``."""
        pos = self.find(cur)
        if pos == len(self._items) - 1:
            raise ValueError(f"{cur} has no next element")
        return self._items[pos + 1]

    def insert(self, pos: int, elem: int) -> None:
        """Insert ``elem`` so that it becomes the element at one-based ``pos``."""
        if not 1 <= pos <= len(self._items) + 1:
            raise IndexError(f"position {pos} out of range")
        if self.is_full():
            raise OverflowError("list is full")
        self._items.insert(pos - 1, elem)

    def remove(self, pos: int) -> int:
        """Remove and return the element at one-based ``pos``."""
        if not 1 <= pos <= len(self._items):
            raise IndexError(f"position {pos} out of range")
        return self._items.pop(pos - 1)

    def __getitem__(self, pos: int) -> int:
        """Zero-based access that yields 0 outside the list."""
        if not 0 <= pos < len(self._items):
            return 0
        return self._items[pos]

    def __str__(self) -> str:
        return " ".join(str(item) for item in self._items)