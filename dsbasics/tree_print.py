"""Text drawing of binary trees."""

from __future__ import annotations

from typing import Any

from dsbasics.formatting import format_value

__all__ = ["binary_tree_lines", "print_binary_tree"]


def binary_tree_lines(tree: Any) -> list[str]:
    """Draw ``tree`` as equally wide lines of text.

    Each node is shown with its left subtree beneath it and its right
    subtree reached by an arrow ``-v`` to the right.
    """
    if not tree:
        return []
    text = format_value(tree.value)

    llines = binary_tree_lines(tree.left)
    rlines = binary_tree_lines(tree.right)

    lwidth = len(llines[0]) if llines else 0
    rwidth = len(rlines[0]) if rlines else 0

    n = max(len(llines), len(rlines))
    llines += [" " * lwidth] * (n - len(llines))
    rlines += [" " * rwidth] * (n - len(rlines))

    lwidthp = max(len(text) + 2, lwidth)
    pad = " " * (lwidthp - lwidth)
    text += " " + ("-" if rwidth else " ") * (lwidthp - len(text) - 1)
    if rwidth:
        text += "v" + " " * (rwidth - 1)

    return [text] + [a + pad + b for a, b in zip(llines, rlines)]


def print_binary_tree(tree: Any) -> None:
    """Print the drawing of ``tree``."""
    for line in binary_tree_lines(tree):
        print(line)