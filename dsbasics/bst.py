"""Binary search tree insertion and lookup."""

from __future__ import annotations

from typing import Any

from dsbasics.binary_tree import BinaryTree, make_binary_tree

__all__ = ["bst_search", "bst_insert"]


def bst_search(tree: Any, value: Any) -> Any:
    """Return the subtree holding the largest value not exceeding ``value``.

    Returns an empty tree (``None`` for linked trees) if there is none.
    """
    if not tree or value == tree.value:
        return tree
    if value < tree.value:
        return bst_search(tree.left, value)
    other = bst_search(tree.right, value)
    return other if other else tree


def bst_insert(tree: BinaryTree | None, value: Any) -> BinaryTree:
    """Insert ``value`` into ``tree`` and return the resulting tree."""
    if tree is None:
        return make_binary_tree(value, None, None)
    if value <= tree.value:
        tree.left = bst_insert(tree.left, value)
    else:
        tree.right = bst_insert(tree.right, value)
    return tree