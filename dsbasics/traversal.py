"""Height and traversals of binary trees."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterator
from typing import Any

__all__ = [
    "height",
    "iter_depth_first",
    "iter_breadth_first",
    "df_traversal",
    "bf_traversal",
]


def height(tree: Any) -> int:
    """Height of ``tree``; the empty tree has height -1."""
    if not tree:
        return -1
    return 1 + max(height(tree.left), height(tree.right))


def iter_depth_first(tree: Any) -> Iterator[Any]:
    """Yield the non-empty subtrees of ``tree`` in order (left, node, right)."""
    if not tree:
        return
    yield from iter_depth_first(tree.left)
    yield tree
    yield from iter_depth_first(tree.right)


def iter_breadth_first(tree: Any) -> Iterator[Any]:
    """Yield the non-empty subtrees of ``tree`` level by level."""
    queue = deque([tree])
    while queue:
        current = queue.popleft()
        if current:
            yield current
            queue.append(current.left)
            queue.append(current.right)


def df_traversal(tree: Any, action: Callable[[Any], Any]) -> None:
    """Call ``action`` on each subtree in depth-first (in-order) order."""
    for subtree in iter_depth_first(tree):
        action(subtree)


def bf_traversal(tree: Any, action: Callable[[Any], Any]) -> None:
    """Call ``action`` on each subtree in breadth-first order."""
    for subtree in iter_breadth_first(tree):
        action(subtree)