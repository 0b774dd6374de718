"""Fixed-capacity stack."""

from __future__ import annotations

from typing import Any

__all__ = ["Stack"]


class Stack:
    """A stack that holds at most ``capacity`` values."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._storage: list[Any] = [None] * capacity
        self._head = 0

    def top(self) -> Any:
        """Return the value at the top of the stack."""
        if self._head == 0:
            raise IndexError("top of an empty stack")
        return self._storage[self._head - 1]

    def pop(self) -> Any:
        """Remove and return the value at the top of the stack."""
        if self._head == 0:
            raise IndexError("pop from an empty stack")
        self._head -= 1
        value = self._storage[self._head]
        self._storage[self._head] = None
        return value

    def push(self, value: Any) -> None:
        """Place ``value`` on top of the stack."""
        if self._head >= len(self._storage):
            raise OverflowError("push onto a full stack")
        self._storage[self._head] = value
        self._head += 1

    def is_empty(self) -> bool:
        return self._head == 0

    def is_full(self) -> bool:
        return self._head == len(self._storage)

    def __len__(self) -> int:
        return self._head