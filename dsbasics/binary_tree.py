"""Linked binary tree nodes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

__all__ = ["BinaryTree", "make_binary_tree"]


@dataclass(eq=False)
class BinaryTree:
    """A binary tree node; an empty subtree is ``None``."""

    value: Any
    left: BinaryTree | None = None
    right: BinaryTree | None = None


def make_binary_tree(
    value: Any,
    left: BinaryTree | None = None,
    right: BinaryTree | None = None,
) -> BinaryTree:
    """Build a tree rooted at ``value`` with the given subtrees."""
    return BinaryTree(value, left, right)