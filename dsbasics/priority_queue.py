"""Priority queue operations on a list kept as a heap."""

from __future__ import annotations

import operator
from collections.abc import Callable, MutableSequence
from typing import Any

from dsbasics.complete_tree import CompleteBT
from dsbasics.heap import heap_sift_down, heap_sift_up

__all__ = ["priority_enqueue", "priority_dequeue"]


def priority_enqueue(
    storage: MutableSequence[Any],
    value: Any,
    compare: Callable[[Any, Any], bool] = operator.gt,
) -> None:
    """Add ``value`` to the heap in ``storage``."""
    storage.append(value)
    size = len(storage)
    heap_sift_up(CompleteBT(storage, size - 1, size), compare)


def priority_dequeue(
    storage: MutableSequence[Any],
    compare: Callable[[Any, Any], bool] = operator.gt,
) -> Any:
    """Remove and return the top of the heap in ``storage``."""
    if not storage:
        raise IndexError("dequeue from an empty priority queue")
    storage[0], storage[-1] = storage[-1], storage[0]
    top = storage.pop()
    heap_sift_down(CompleteBT(storage, 0, len(storage)), compare)
    return top