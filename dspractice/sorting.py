"""Classic in-place sorting algorithms that record the sequence after every pass."""

from __future__ import annotations

import heapq
from enum import Enum
from typing import Any, List, MutableSequence, Sequence, Tuple

Passes = List[List[Any]]


class SortType(Enum):
    """The sorting algorithms provided by this module."""

    INSERT = 1
    SHELL = 2
    BUBBLE = 3
    QUICK = 4
    SELECT = 5
    HEAP = 6
    MERGE = 7

    @property
    def title(self) -> str:
        return {
            SortType.INSERT: "Straight insertion sort",
            SortType.SHELL: "Shell sort",
            SortType.BUBBLE: "Bubble sort",
            SortType.QUICK: "Quick sort",
            SortType.SELECT: "Straight selection sort",
            SortType.HEAP: "Heap sort",
            SortType.MERGE: "Merge sort",
        }[self]


def insert_sort(items: MutableSequence[Any]) -> Passes:
    """Sort ascending by straight insertion; return the initial state and each pass."""
    if not items:
        return []
    passes = [list(items)]
    for i in range(1, len(items)):
        if items[i] < items[i - 1]:
            sentry = items[i]
            k = i - 1
            while k >= 0 and sentry < items[k]:
                items[k + 1] = items[k]
                k -= 1
            items[k + 1] = sentry
        passes.append(list(items))
    return passes


def shell_sort(items: MutableSequence[Any]) -> Passes:
    """Sort ascending by Shell's method with halving gaps; one pass per gap."""
    if not items:
        return []
    n = len(items)
    passes = [list(items)]
    delta = n // 2
    while delta > 0:
        for i in range(delta, n):
            sentry = items[i]
            k = i - delta
            while k >= 0 and sentry < items[k]:
                items[k + delta] = items[k]
                k -= delta
            items[k + delta] = sentry
        passes.append(list(items))
        delta //= 2
    return passes


def bubble_sort(items: MutableSequence[Any]) -> Passes:
    """Sort ascending by bubbling, stopping early once a pass swaps nothing."""
    if not items:
        return []
    n = len(items)
    passes = [list(items)]
    exchanged = True
    i = 1
    while i < n and exchanged:
        exchanged = False
        for j in range(n - i):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
                exchanged = True
        passes.append(list(items))
        i += 1
    return passes


def quick_sort(items: MutableSequence[Any]) -> Passes:
    """Sort ascending by quicksort with the first element as pivot; one pass per partition."""
    if not items:
        return []
    n = len(items)
    passes = [list(items)]

    def partition(low: int, high: int) -> None:
        if not (0 <= low < n and 0 <= high < n and low < high):
            return
        i, j = low, high
        pivot = items[i]
        while i != j:
            while i < j and pivot < items[j]:
                j -= 1
            if i < j:
                items[i] = items[j]
                i += 1
            while i < j and items[i] <= pivot:
                i += 1
            if i < j:
                items[j] = items[i]
                j -= 1
        items[i] = pivot
        passes.append(list(items))
        partition(low, j - 1)
        partition(i + 1, high)

    partition(0, n - 1)
    return passes


def select_sort(items: MutableSequence[Any]) -> Passes:
    """Sort ascending by straight selection; n-1 passes."""
    if not items:
        return []
    n = len(items)
    passes = [list(items)]
    for i in range(n - 1):
        smallest = i
        for j in range(i + 1, n):
            if items[j] < items[smallest]:
                smallest = j
        if smallest != i:
            items[i], items[smallest] = items[smallest], items[i]
        passes.append(list(items))
    return passes


def _max_heapify(items: MutableSequence[Any], i: int, size: int) -> None:
    while True:
        left, right, largest = 2 * i + 1, 2 * i + 2, i
        if left < size and items[left] > items[largest]:
            largest = left
        if right < size and items[right] > items[largest]:
            largest = right
        if largest == i:
            return
        items[largest], items[i] = items[i], items[largest]
        i = largest


def max_heap_sort(items: MutableSequence[Any]) -> Passes:
    """Sort ascending with a max-heap; records the built heap and each extraction."""
    if not items:
        return []
    n = len(items)
    passes = [list(items)]
    for i in range(n // 2 - 1, -1, -1):
        _max_heapify(items, i, n)
    passes.append(list(items))
    for i in range(n - 1, 0, -1):
        items[0], items[i] = items[i], items[0]
        _max_heapify(items, 0, i)
        passes.append(list(items))
    return passes


def _min_heapify(items: MutableSequence[Any], start: int, end: int) -> None:
    dad = start
    son = dad * 2 + 1
    while son <= end:
        if son + 1 <= end and items[son] > items[son + 1]:
            son += 1
        if items[dad] <= items[son]:
            return
        items[dad], items[son] = items[son], items[dad]
        dad = son
        son = dad * 2 + 1


def min_heap_sort(items: MutableSequence[Any]) -> Passes:
    """Sort descending with a min-heap; records the built heap and each extraction."""
    if not items:
        return []
    n = len(items)
    passes = [list(items)]
    for i in range(n // 2 - 1, -1, -1):
        _min_heapify(items, i, n - 1)
    passes.append(list(items))
    for i in range(n - 1, 0, -1):
        items[0], items[i] = items[i], items[0]
        _min_heapify(items, 0, i - 1)
        passes.append(list(items))
    return passes


def merge_sort_recursive(items: MutableSequence[Any]) -> Passes:
    """Sort ascending by top-down two-way merging; one pass per merge."""
    if not items:
        return []
    n = len(items)
    passes = [list(items)]
    aux = list(items)

    def merge(low: int, mid: int, high: int) -> None:
        aux[low : high + 1] = items[low : high + 1]
        i, j = low, mid + 1
        for k in range(low, high + 1):
            if i > mid:
                items[k] = aux[j]
                j += 1
            elif j > high:
                items[k] = aux[i]
                i += 1
            elif aux[i] < aux[j]:
                items[k] = aux[i]
                i += 1
            else:
                items[k] = aux[j]
                j += 1

    def sort(start: int, end: int) -> None:
        if start < end:
            mid = start + (end - start) // 2
            sort(start, mid)
            sort(mid + 1, end)
            merge(start, mid, end)
            passes.append(list(items))

    sort(0, n - 1)
    return passes


def merge_sort(items: MutableSequence[Any]) -> Passes:
    """Sort ascending by bottom-up merging of runs that double in width each pass."""
    if not items:
        return []
    n = len(items)
    passes = [list(items)]
    width = 1
    while width < n:
        merged: List[Any] = []
        for start in range(0, n, 2 * width):
            left = items[start : start + width]
            right = items[start + width : start + 2 * width]
            merged.extend(heapq.merge(left, right))
        items[:] = merged
        passes.append(list(items))
        width *= 2
    return passes


def find_pairs(items: Sequence[int], limit: int) -> List[Tuple[int, int]]:
    """Return pairs (a, b), a <= b, of elements that add up to ``limit``.

    Works on a sorted copy with two pointers; each element is used at most once.
    """
    ordered = list(items)
    if not ordered:
        return []
    quick_sort(ordered)
    start, end = 0, len(ordered) - 1
    if ordered[start] >= limit:
        return []
    pairs: List[Tuple[int, int]] = []
    while start < end:
        total = ordered[start] + ordered[end]
        if total == limit:
            pairs.append((ordered[start], ordered[end]))
            start += 1
            end -= 1
        elif total > limit:
            end -= 1
        else:
            start += 1
    return pairs