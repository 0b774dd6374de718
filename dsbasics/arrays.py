"""Array insertion and in-place sorting algorithms."""

from __future__ import annotations

from collections.abc import MutableSequence
from typing import Any

__all__ = [
    "array_insert",
    "insert",
    "insertion_sort",
    "merge",
    "merge_sort",
    "counting_sort",
]


def array_insert(items: MutableSequence[Any], index: int, value: Any) -> None:
    """Insert ``value`` at ``index``, shifting later elements right."""
    if not 0 <= index <= len(items):
        raise IndexError(f"insertion index {index} out of range 0..{len(items)}")
    items.insert(index, value)


def insert(items: MutableSequence[Any], i: int) -> None:
    """Move ``items[i]`` left into place, assuming ``items[:i]`` is sorted."""
    if not 0 <= i < len(items):
        raise IndexError(f"index {i} out of range for length {len(items)}")
    for j in range(i, 0, -1):
        if items[j - 1] <= items[j]:
            return
        items[j - 1], items[j] = items[j], items[j - 1]


def insertion_sort(items: MutableSequence[Any]) -> None:
    """Sort ``items`` in place by insertion."""
    for i in range(1, len(items)):
        insert(items, i)


def merge(items: MutableSequence[Any], begin: int, middle: int, end: int) -> list[Any]:
    """Return the stable merge of the sorted runs ``items[begin:middle]`` and ``items[middle:end]``."""
    left = items[begin:middle]
    right = items[middle:end]
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(items: MutableSequence[Any], begin: int = 0, end: int | None = None) -> None:
    """Sort ``items[begin:end]`` in place by merge sort."""
    if end is None:
        end = len(items)
    if end - begin <= 1:
        return
    middle = begin + (end - begin) // 2
    merge_sort(items, begin, middle)
    merge_sort(items, middle, end)
    items[begin:end] = merge(items, begin, middle, end)


def counting_sort(items: MutableSequence[int], k: int) -> None:
    """Sort integers in ``range(k)`` in place by counting occurrences."""
    counts = [0] * k
    for value in items:
        if not 0 <= value < k:
            raise ValueError(f"value {value} outside range 0..{k - 1}")
        counts[value] += 1
    items[:] = [value for value, count in enumerate(counts) for _ in range(count)]