"""A set of integers kept in an unbalanced binary search tree."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["IntSet"]


@dataclass
class _Node:
    elem: int
    left: _Node | None = None
    right: _Node | None = None


class IntSet:
    """Set of integers backed by a binary search tree."""

    def __init__(self) -> None:
        self._root: _Node | None = None
        self._size = 0

    def insert(self, elem: int) -> None:
        """Add the element; an element already present is left alone."""
        if self._root is None:
            self._root = _Node(elem)
            self._size = 1
            return
        node = self._root
        while True:
            if elem == node.elem:
                return
            if elem < node.elem:
                if node.left is None:
                    node.left = _Node(elem)
                    break
                node = node.left
            else:
                if node.right is None:
                    node.right = _Node(elem)
                    break
                node = node.right
        self._size += 1

    def find(self, elem: int) -> bool:
        """Return True if the element is in the set."""
        node = self._root
        while node is not None:
            if elem == node.elem:
                return True
            node = node.left if elem < node.elem else node.right
        return False

    def __contains__(self, elem: object) -> bool:
        return isinstance(elem, int) and self.find(elem)

    def __len__(self) -> int:
        return self._size