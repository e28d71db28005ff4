"""A self-balancing AVL search tree holding distinct values."""

from __future__ import annotations

from typing import Any, Generic, Iterator, TypeVar

T = TypeVar("T")


class _AVLNode(Generic[T]):
    __slots__ = ("value", "height", "left", "right")

    def __init__(self, value: T) -> None:
        self.value = value
        self.height = 0
        self.left: _AVLNode[T] | None = None
        self.right: _AVLNode[T] | None = None


def _height(node: _AVLNode[Any] | None) -> int:
    return -1 if node is None else node.height


def _update_height(node: _AVLNode[Any]) -> None:
    node.height = max(_height(node.left), _height(node.right)) + 1


def _rotate_left(node: _AVLNode[T]) -> _AVLNode[T]:
    pivot = node.right
    assert pivot is not None
    node.right = pivot.left
    pivot.left = node
    _update_height(node)
    _update_height(pivot)
    return pivot


def _rotate_right(node: _AVLNode[T]) -> _AVLNode[T]:
    pivot = node.left
    assert pivot is not None
    node.left = pivot.right
    pivot.right = node
    _update_height(node)
    _update_height(pivot)
    return pivot


def _balance(node: _AVLNode[T] | None) -> _AVLNode[T] | None:
    if node is None:
        return None
    factor = _height(node.left) - _height(node.right)
    if factor < -1:
        right = node.right
        assert right is not None
        if _height(right.right) < _height(right.left):
            node.right = _rotate_right(right)
        node = _rotate_left(node)
    elif factor > 1:
        left = node.left
        assert left is not None
        if _height(left.left) < _height(left.right):
            node.left = _rotate_left(left)
        node = _rotate_right(node)
    _update_height(node)
    return node


def _insert(node: _AVLNode[T] | None, value: T) -> _AVLNode[T] | None:
    if node is None:
        return _AVLNode(value)
    if value < node.value:  # type: ignore[operator]
        node.left = _insert(node.left, value)
    elif value > node.value:  # type: ignore[operator]
        node.right = _insert(node.right, value)
    return _balance(node)


def _leftmost(node: _AVLNode[T]) -> _AVLNode[T]:
    while node.left is not None:
        node = node.left
    return node


def _rightmost(node: _AVLNode[T]) -> _AVLNode[T]:
    while node.right is not None:
        node = node.right
    return node


def _remove(node: _AVLNode[T] | None, value: T) -> _AVLNode[T] | None:
    if node is None:
        return None
    if value == node.value:
        if node.left is None and node.right is None:
            return None
        if node.left is not None and node.right is not None:
            successor = _leftmost(node.right).value
            node.value = successor
            node.right = _remove(node.right, successor)
        else:
            return _balance(node.right if node.right is not None else node.left)
    elif value < node.value:  # type: ignore[operator]
        node.left = _remove(node.left, value)
    else:
        node.right = _remove(node.right, value)
    return _balance(node)


def _preorder(node: _AVLNode[T] | None) -> Iterator[T]:
    if node is not None:
        yield node.value
        yield from _preorder(node.left)
        yield from _preorder(node.right)


class AVLTree(Generic[T]):
    """A balanced binary search tree; inserting a value already present does nothing."""

    def __init__(self) -> None:
        self._root: _AVLNode[T] | None = None

    def contains(self, value: T) -> bool:
        """Return True if ``value`` is in the tree."""
        node = self._root
        while node is not None:
            if node.value == value:
                return True
            node = node.left if value < node.value else node.right  # type: ignore[operator]
        return False

    def insert(self, value: T) -> None:
        """Add ``value`` unless it is already present."""
        self._root = _insert(self._root, value)

    def remove(self, value: T) -> None:
        """Remove ``value`` if present."""
        self._root = _remove(self._root, value)

    def find_min(self) -> T:
        """Return the smallest value; raises ValueError on an empty tree."""
        if self._root is None:
            raise ValueError("Tree is empty, no minimum value.")
        return _leftmost(self._root).value

    def find_max(self) -> T:
        """Return the largest value; raises ValueError on an empty tree."""
        if self._root is None:
            raise ValueError("Tree is empty, no maximum value.")
        return _rightmost(self._root).value

    def format_tree(self) -> str:
        """Render the tree sideways: right subtree first, two spaces per level."""
        if self._root is None:
            return "<empty>\n"
        lines: list[str] = []

        def walk(node: _AVLNode[T] | None, depth: int) -> None:
            if node is None:
                return
            walk(node.right, depth + 1)
            lines.append(" " * (depth * 2) + f"{node.value}\n")
            walk(node.left, depth + 1)

        walk(self._root, 0)
        return "".join(lines)

    def is_empty(self) -> bool:
        """Return True if the tree holds no values."""
        return self._root is None

    def clear(self) -> None:
        """Remove every value."""
        self._root = None

    def copy(self) -> AVLTree[T]:
        """Return an independent tree with the same values."""
        clone: AVLTree[T] = AVLTree()
        for value in _preorder(self._root):
            clone.insert(value)
        return clone