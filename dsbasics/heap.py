"""Binary heaps on complete trees, and heap sort."""

from __future__ import annotations

import operator
from collections.abc import Callable, MutableSequence
from typing import Any

from dsbasics.complete_tree import CompleteBT

__all__ = ["heap_sift_up", "heap_sift_down", "build_heap", "heap_sort"]

Compare = Callable[[Any, Any], bool]


def heap_sift_up(tree: Any, compare: Compare = operator.gt) -> None:
    """Move the value at ``tree`` up towards the root while it beats its parent."""
    parent = tree.parent
    while parent:
        if compare(tree.value, parent.value):
            tree.value, parent.value = parent.value, tree.value
        tree, parent = parent, parent.parent


def heap_sift_down(tree: Any, compare: Compare = operator.gt) -> None:
    """Move the value at ``tree`` down while a child beats it."""
    while True:
        child = tree.left
        other = tree.right
        if not child or (other and compare(other.value, child.value)):
            child = other
        if not child:
            return
        if compare(child.value, tree.value):
            child.value, tree.value = tree.value, child.value
        tree = child


def build_heap(storage: MutableSequence[Any], compare: Compare = operator.gt) -> None:
    """Rearrange ``storage`` into a heap; the default gives a max-heap."""
    size = len(storage)
    for i in range(size // 2 - 1, -1, -1):
        heap_sift_down(CompleteBT(storage, i, size), compare)


def heap_sort(storage: MutableSequence[Any], compare: Compare = operator.gt) -> None:
    """Sort ``storage`` in place; the default order is ascending."""
    build_heap(storage, compare)
    for back in range(len(storage) - 1, 0, -1):
        storage[0], storage[back] = storage[back], storage[0]
        heap_sift_down(CompleteBT(storage, 0, back), compare)