"""Sequential list backed by a growable array."""

from __future__ import annotations

from typing import Any, Iterable, Iterator, Optional

from .core import MAX_SQLIST_SIZE


class SeqList:
    """A list stored contiguously, with a capacity that doubles when full."""

    def __init__(self, values: Optional[Iterable[Any]] = None, size: int = MAX_SQLIST_SIZE):
        items = list(values) if values is not None else []
        if items:
            self._capacity = len(items) * 2
        else:
            self._capacity = max(size, MAX_SQLIST_SIZE)
        self._items = items

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def capacity(self) -> int:
        return self._capacity

    def _check(self, pos: int) -> None:
        if not 0 <= pos < len(self._items):
            raise IndexError(f"position {pos} out of range")

    def get(self, pos: int) -> Any:
        self._check(pos)
        return self._items[pos]

    def set(self, pos: int, value: Any) -> None:
        self._check(pos)
        self._items[pos] = value

    def insert(self, pos: int, value: Any) -> None:
        """Insert before ``pos``; positions outside the list are clamped."""
        if len(self._items) >= self._capacity:
            self._capacity *= 2
        pos = min(max(pos, 0), len(self._items))
        self._items.insert(pos, value)

    def append(self, value: Any) -> None:
        self.insert(len(self._items), value)

    def remove_at(self, pos: int) -> Any:
        self._check(pos)
        return self._items.pop(pos)

    def clear(self) -> None:
        self._items.clear()

    def index(self, value: Any) -> int:
        for i, item in enumerate(self._items):
            if item == value:
                return i
        raise ValueError(f"{value!r} is not in the list")

    def __contains__(self, value: Any) -> bool:
        return any(item == value for item in self._items)

    def remove(self, value: Any) -> bool:
        """Remove the first occurrence of ``value``; report whether one was found."""
        try:
            pos = self.index(value)
        except ValueError:
            return False
        del self._items[pos]
        return True

    def remove_all(self, value: Any) -> None:
        self._items = [item for item in self._items if item != value]

    def replace(self, old: Any, new: Any) -> bool:
        """Replace the first occurrence of ``old``; report whether one was found."""
        try:
            pos = self.index(old)
        except ValueError:
            return False
        self._items[pos] = new
        return True

    def replace_all(self, old: Any, new: Any) -> None:
        self._items = [new if item == old else item for item in self._items]

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __str__(self) -> str:
        return ",".join(str(item) for item in self._items)