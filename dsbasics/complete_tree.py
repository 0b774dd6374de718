"""A complete binary tree laid out in a list."""

from __future__ import annotations

from typing import Any, MutableSequence

__all__ = ["CompleteBT"]


class CompleteBT:
    """View of ``storage[:size]`` as a complete binary tree rooted at ``root``.

    Node ``i`` has children ``2i+1`` and ``2i+2``. A view whose root lies
    outside ``0..size-1`` is the empty tree and is falsy.
    """

    __slots__ = ("storage", "root", "size")

    def __init__(
        self,
        storage: MutableSequence[Any],
        root: int = 0,
        size: int | None = None,
    ) -> None:
        self.storage = storage
        self.root = root
        self.size = len(storage) if size is None else size

    def subtree(self, root: int) -> CompleteBT:
        """The subtree rooted at index ``root`` within the same storage."""
        return CompleteBT(self.storage, root, self.size)

    @property
    def value(self) -> Any:
        if not self:
            raise IndexError("value of an empty tree")
        return self.storage[self.root]

    @value.setter
    def value(self, new_value: Any) -> None:
        if not self:
            raise IndexError("value of an empty tree")
        self.storage[self.root] = new_value

    @property
    def parent(self) -> CompleteBT:
        """The parent subtree; empty for the root."""
        if self.root == 0:
            return self.subtree(-1)
        return self.subtree((self.root - 1) // 2)

    @property
    def left(self) -> CompleteBT:
        return self.subtree(2 * self.root + 1)

    @property
    def right(self) -> CompleteBT:
        return self.subtree(2 * self.root + 2)

    def __bool__(self) -> bool:
        return 0 <= self.root < self.size

    def __repr__(self) -> str:
        return f"CompleteBT(root={self.root}, size={self.size})"