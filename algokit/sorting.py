"""Comparison sorts, Shell sort, duplicate removal and quickselect.

The comparison-based sorts take ``comp(a, b)``, true when ``a`` belongs after
``b``; the default ``operator.gt`` sorts ascending.  Every function returns a
new list and leaves its input untouched.
"""

from __future__ import annotations

import operator
import random
from collections.abc import Callable, Iterable
from typing import Any

__all__ = [
    "insertion_sort",
    "bubble_sort",
    "quick_sort",
    "selection_sort",
    "merge_sort",
    "heap_sort",
    "shell_sort",
    "remove_dup",
    "random_select",
]

Comp = Callable[[Any, Any], bool]


def insertion_sort(items: Iterable[Any], comp: Comp = operator.gt) -> list[Any]:
    """Stable insertion sort."""
    result = list(items)
    for i in range(1, len(result)):
        current = result[i]
        j = i - 1
        while j >= 0 and comp(result[j], current):
            result[j + 1] = result[j]
            j -= 1
        result[j + 1] = current
    return result


def bubble_sort(items: Iterable[Any], comp: Comp = operator.gt) -> list[Any]:
    """Exchange sort: each position is swapped with every later item that belongs before it."""
    result = list(items)
    n = len(result)
    for i in range(n):
        for j in range(i + 1, n):
            if comp(result[i], result[j]):
                result[i], result[j] = result[j], result[i]
    return result


def quick_sort(items: Iterable[Any], comp: Comp = operator.gt) -> list[Any]:
    """Quicksort with a middle pivot and three-way partitioning."""

    def sort(seq: list[Any]) -> list[Any]:
        if len(seq) <= 1:
            return seq
        pivot = seq[len(seq) // 2]
        lower = [x for x in seq if comp(pivot, x)]
        upper = [x for x in seq if comp(x, pivot)]
        equal = [x for x in seq if not comp(pivot, x) and not comp(x, pivot)]
        return sort(lower) + equal + sort(upper)

    return sort(list(items))


def selection_sort(items: Iterable[Any], comp: Comp = operator.gt) -> list[Any]:
    """Selection sort: repeatedly move the smallest remaining item forward."""
    result = list(items)
    n = len(result)
    for i in range(n - 1):
        smallest = i
        for j in range(i + 1, n):
            if comp(result[smallest], result[j]):
                smallest = j
        if smallest != i:
            result[i], result[smallest] = result[smallest], result[i]
    return result


def _merge(left: list[Any], right: list[Any], comp: Comp) -> list[Any]:
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        # On ties the right-hand item goes first.
        if comp(right[j], left[i]):
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(items: Iterable[Any], comp: Comp = operator.gt) -> list[Any]:
    """Bottom-up two-way merge sort."""
    result = list(items)
    width = 1
    while width < len(result):
        merged: list[Any] = []
        for start in range(0, len(result), 2 * width):
            left = result[start:start + width]
            right = result[start + width:start + 2 * width]
            merged.extend(_merge(left, right, comp))
        result = merged
        width *= 2
    return result


def _sift_down(heap: list[Any], root: int, end: int, comp: Comp) -> None:
    while (child := 2 * root + 1) < end:
        if child + 1 < end and comp(heap[child + 1], heap[child]):
            child += 1
        if not comp(heap[child], heap[root]):
            return
        heap[root], heap[child] = heap[child], heap[root]
        root = child


def heap_sort(items: Iterable[Any], comp: Comp = operator.gt) -> list[Any]:
    """Heap sort on a max-heap ordered by ``comp``."""
    result = list(items)
    n = len(result)
    for start in range((n - 2) // 2, -1, -1):
        _sift_down(result, start, n, comp)
    for end in range(n - 1, 0, -1):
        result[0], result[end] = result[end], result[0]
        _sift_down(result, 0, end, comp)
    return result


def shell_sort(items: Iterable[Any]) -> list[Any]:
    """Shell sort with the gap sequence 1, 4, 13, 40, 121, ..."""
    result = list(items)
    n = len(result)
    gap = 1
    while gap < n // 3:
        gap = 3 * gap + 1
    while gap >= 1:
        for i in range(gap, n):
            current = result[i]
            j = i - gap
            while j >= 0 and result[j] > current:
                result[j + gap] = result[j]
                j -= gap
            result[j + gap] = current
        gap //= 3
    return result


def remove_dup(items: Iterable[Any]) -> list[Any]:
    """Return the items with later duplicates dropped, keeping first occurrences in order."""
    unique: list[Any] = []
    for item in items:
        if item not in unique:
            unique.append(item)
    return unique


def random_select(items: Iterable[Any], k: int, rng: random.Random | None = None) -> Any:
    """Return the ``k``-th smallest item (1-based) by randomised quickselect."""
    pool = list(items)
    if not 1 <= k <= len(pool):
        raise ValueError(f"k must be between 1 and {len(pool)}")
    rng = rng or random.Random()
    while True:
        pivot = rng.choice(pool)
        lower = [x for x in pool if x < pivot]
        higher = [x for x in pool if x > pivot]
        n_equal = len(pool) - len(lower) - len(higher)
        if k <= len(lower):
            pool = lower
        elif k <= len(lower) + n_equal:
            return pivot
        else:
            k -= len(lower) + n_equal
            pool = higher