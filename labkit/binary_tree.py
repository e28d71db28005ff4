"""An unbalanced binary search tree of distinct integers with an in-order cursor."""

from __future__ import annotations

from typing import Iterable


class Node:
    """A tree node linked to its parent and children."""

    __slots__ = ("value", "parent", "left", "right")

    def __init__(
        self,
        value: int = 0,
        parent: Node | None = None,
        left: Node | None = None,
        right: Node | None = None,
    ) -> None:
        self.value = value
        self.parent = parent
        self.left = left
        self.right = right

    def __copy__(self) -> Node:
        """Return a node with the same value and no links."""
        return Node(self.value)

    def __repr__(self) -> str:
        return f"Node({self.value!r})"


def _minimum(node: Node) -> Node:
    while node.left is not None:
        node = node.left
    return node


def _maximum(node: Node) -> Node:
    while node.right is not None:
        node = node.right
    return node


def _successor(node: Node) -> Node | None:
    if node.right is not None:
        return _minimum(node.right)
    parent = node.parent
    while parent is not None and node is parent.right:
        node, parent = parent, parent.parent
    return parent


class BinaryTree:
    """A binary search tree with a cursor that walks the values in order."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._root: Node | None = None
        self._current: Node | None = None
        for value in values:
            self.insert(value)

    def find(self, value: int) -> Node | None:
        """Return the node holding ``value``, or None."""
        node = self._root
        while node is not None and node.value != value:
            node = node.left if value < node.value else node.right
        return node

    def insert(self, value: int) -> None:
        """Insert ``value``; raises ValueError if it is already present."""
        if self.find(value) is not None:
            raise ValueError(f"value {value!r} is already in the tree")
        if self._root is None:
            self._root = Node(value)
            return
        node = self._root
        while True:
            if value < node.value:
                if node.left is None:
                    node.left = Node(value, node)
                    return
                node = node.left
            else:
                if node.right is None:
                    node.right = Node(value, node)
                    return
                node = node.right

    def delete(self, value: int) -> None:
        """Remove ``value``; raises ValueError if it is not in the tree."""
        target = self.find(value)
        if target is None:
            raise ValueError("The item being deleted is not in the tree")
        if target.left is not None and target.right is not None:
            removed = _successor(target)
            assert removed is not None
        else:
            removed = target
        child = removed.left if removed.left is not None else removed.right
        if child is not None:
            child.parent = removed.parent
        if removed.parent is None:
            self._root = child
        elif removed is removed.parent.left:
            removed.parent.left = child
        else:
            removed.parent.right = child
        if removed is not target:
            target.value = removed.value

    @property
    def value(self) -> int:
        """The value under the cursor; raises ValueError when there is none."""
        if self._current is None:
            raise ValueError("the cursor is not on a node")
        return self._current.value

    def reset(self) -> None:
        """Move the cursor to the smallest value; raises ValueError on an empty tree."""
        if self._root is None:
            raise ValueError("Can't reset an empty tree")
        self._current = _minimum(self._root)

    def set_next(self) -> None:
        """Advance the cursor to the next larger value."""
        if self._root is None:
            return
        if self._current is None:
            raise ValueError("the cursor is not on a node")
        self._current = _successor(self._current)

    def is_end(self) -> bool:
        """Return True when the cursor is on the largest value."""
        if self._root is None or self._current is None:
            raise ValueError("the cursor is not on a node")
        return self._current.value == _maximum(self._root).value