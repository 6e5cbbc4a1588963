"""An unbalanced binary search tree mapping keys to values."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

__all__ = ["BST"]


@dataclass(eq=False)
class _Node:
    key: Any
    value: Any
    parent: _Node | None = None
    left: _Node | None = None
    right: _Node | None = None


class BST:
    """Binary search tree; equal keys are placed in the right subtree.

    Expected search time is logarithmic when keys arrive in random order.
    """

    def __init__(self) -> None:
        self._root: _Node | None = None

    def _find_node(self, key: Any) -> _Node | None:
        node = self._root
        while node is not None and key != node.key:
            node = node.left if key < node.key else node.right
        return node

    def find(self, key: Any) -> tuple[Any, Any] | None:
        """Return the ``(key, value)`` pair first met for ``key``, or None."""
        node = self._find_node(key)
        return None if node is None else (node.key, node.value)

    def get(self, key: Any) -> Any:
        """Return the value stored for ``key``; raise KeyError if absent."""
        node = self._find_node(key)
        if node is None:
            raise KeyError(key)
        return node.value

    def insert(self, key: Any, value: Any) -> None:
        """Insert a new entry; existing entries with the same key are kept."""
        new = _Node(key, value)
        parent: _Node | None = None
        node = self._root
        while node is not None:
            parent = node
            node = node.left if key < node.key else node.right
        new.parent = parent
        if parent is None:
            self._root = new
        elif key < parent.key:
            parent.left = new
        else:
            parent.right = new

    def delete(self, key: Any) -> bool:
        """Remove one entry for ``key``; return whether anything was removed."""
        z = self._find_node(key)
        if z is None:
            return False
        if z.left is None:
            self._transplant(z, z.right)
        elif z.right is None:
            self._transplant(z, z.left)
        else:
            y = z.right
            while y.left is not None:
                y = y.left
            if y.parent is not z:
                self._transplant(y, y.right)
                y.right = z.right
                y.right.parent = y
            self._transplant(z, y)
            y.left = z.left
            y.left.parent = y
        return True

    def _transplant(self, u: _Node, v: _Node | None) -> None:
        if u.parent is None:
            self._root = v
        elif u is u.parent.left:
            u.parent.left = v
        else:
            u.parent.right = v
        if v is not None:
            v.parent = u.parent

    def __contains__(self, key: object) -> bool:
        return self._find_node(key) is not None

    def items(self) -> Iterator[tuple[Any, Any]]:
        """Yield ``(key, value)`` pairs in key order."""
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.key, node.value
            node = node.right

    def render(self) -> str:
        """Draw the tree sideways: right subtree above, one space of indent per level."""
        lines: list[str] = []

        def walk(node: _Node | None, indent: int) -> None:
            if node is None:
                return
            walk(node.right, indent + 1)
            lines.append(f"{' ' * indent}[{node.key},{node.value}]")
            walk(node.left, indent + 1)

        walk(self._root, 0)
        return "".join(line + "\n" for line in lines)