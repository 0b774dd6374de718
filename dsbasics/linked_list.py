"""Singly linked list built from nodes behind a sentinel head."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any

__all__ = ["Node"]


@dataclass(eq=False, repr=False)
class Node:
    """A list node; a default node serves as the list's sentinel head."""

    value: Any = None
    next: Node | None = None

    def insert_after(self, value: Any) -> Node:
        """Insert a node holding ``value`` right after this one and return it."""
        self.next = Node(value, self.next)
        return self.next

    def find_predecessor(self, predicate: Callable[[Any], bool]) -> Node | None:
        """Return the node whose successor's value satisfies ``predicate``."""
        node: Node | None = self
        while node is not None and node.next is not None:
            if predicate(node.next.value):
                return node
            node = node.next
        return None

    def to_list(self) -> list[Any]:
        """Values of the nodes following this one, in order."""
        return list(self)

    def __iter__(self) -> Iterator[Any]:
        node = self.next
        while node is not None:
            yield node.value
            node = node.next

    def __repr__(self) -> str:
        return f"Node(value={self.value!r})"