"""Hash table with separate chaining on linked lists."""

from __future__ import annotations

from collections.abc import Callable, Hashable
from dataclasses import dataclass
from typing import Any

from dsbasics.formatting import format_value
from dsbasics.linked_list import Node

__all__ = ["HashTable"]


@dataclass
class _Entry:
    key: Any
    value: Any


class HashTable:
    """A map from keys to values spread over ``num_chains`` chains.

    A key goes to chain ``hash_function(key) % num_chains``; new keys are
    placed at the front of their chain.
    """

    def __init__(
        self,
        num_chains: int,
        hash_function: Callable[[Hashable], int] = hash,
    ) -> None:
        if num_chains <= 0:
            raise ValueError("num_chains must be positive")
        self._chains = [Node() for _ in range(num_chains)]
        self._hash = hash_function

    def _head(self, key: Any) -> Node:
        return self._chains[self._hash(key) % len(self._chains)]

    def _find(self, key: Any) -> tuple[Node, Node | None]:
        head = self._head(key)
        return head, head.find_predecessor(lambda entry: entry.key == key)

    def insert(self, key: Any, value: Any) -> None:
        """Map ``key`` to ``value``, replacing any previous value."""
        head, predecessor = self._find(key)
        if predecessor is None:
            head.insert_after(_Entry(key, value))
        else:
            predecessor.next.value.value = value

    def get(self, key: Any) -> Any:
        """Return the value stored for ``key``, or ``None`` if it is absent."""
        _, predecessor = self._find(key)
        if predecessor is None:
            return None
        return predecessor.next.value.value

    def slot_sizes(self) -> list[int]:
        """Number of keys in each chain, in slot order."""
        return [sum(1 for _ in head) for head in self._chains]

    def describe(self, details: bool = False) -> str:
        """Summarise chain lengths; with ``details`` also list each chain's keys."""
        lines = []
        if details:
            for slot, head in enumerate(self._chains):
                entries = list(head)
                keys = "".join(f" '{format_value(entry.key)}'" for entry in entries)
                lines.append(f"Slot {slot} contains{keys} ({len(entries)})")
        sizes = self.slot_sizes()
        average = sum(sizes) / len(sizes)
        lines.append(
            f"Slot sizes: min: {min(sizes)}, max: {max(sizes)}, "
            f"average: {format_value(average)}"
        )
        return "\n".join(lines) + "\n"