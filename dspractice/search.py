"""Linear search and three ways of removing every occurrence of a value."""

from __future__ import annotations

from typing import Any, MutableSequence, Sequence


def linear_search(items: Sequence[Any], key: Any) -> int:
    """Return the index of the first ``key`` in ``items``, or -1 like ``str.find``."""
    for i, item in enumerate(items):
        if item == key:
            return i
    return -1


def _require_items(data: Sequence[Any]) -> None:
    if not data:
        raise ValueError("data must not be empty")


def remove_all_lw(data: MutableSequence[int], value: int) -> int:
    """Compact the non-``value`` elements to the front and zero the rest.

    Works in one pass over runs of ``value``; returns the number of loop steps.
    """
    _require_items(data)
    n = len(data)
    removed = 0
    loops = 0
    i = 0
    while i < n - 1:
        loops += 1
        if data[i] == value:
            while i < n - 1:
                loops += 1
                if data[i + 1] != value:
                    break
                removed += 1
                i += 1
            removed += 1
        if removed > 0 and i + 1 < n:
            data[i - removed + 1] = data[i + 1]
        i += 1
    if data[n - 1] == value and n - removed - 1 >= 0:
        data[n - removed - 1] = 0
    for k in range(max(n - removed, 0), n):
        data[k] = 0
        loops += 1
    return loops


def remove_all_me(data: MutableSequence[int], value: int) -> int:
    """Delete every ``value`` by shifting the tail left, scanning from the back.

    ``data`` shrinks to the remaining elements; returns the number of loop steps.
    """
    _require_items(data)
    loops = 0
    for i in range(len(data) - 1, -1, -1):
        loops += 1
        if data[i] == value:
            loops += len(data) - i
            del data[i]
    return loops


def remove_all_zq(data: MutableSequence[int], value: int) -> int:
    """Copy the kept elements forward and fill the freed slots with ``value``.

    The last element is left where it is; returns the number of loop steps.
    """
    _require_items(data)
    n = len(data)
    loops = 0
    index = 0
    for i in range(n - 1):
        loops += 1
        if data[i] != value:
            data[index] = data[i]
            index += 1
    for i in range(index, n - 1):
        loops += 1
        data[i] = value
    return loops