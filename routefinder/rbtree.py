"""A red-black binary search tree."""

from __future__ import annotations

import enum
from collections.abc import Iterator
from typing import Any


class Color(enum.Enum):
    """Colour of a red-black tree node."""

    RED = "red"
    BLACK = "black"


class EmptyTreeError(Exception):
    """Raised when an operation needs a non-empty tree."""

    def __init__(self, message: str = "The tree is empty.") -> None:
        super().__init__(message)


class ValueNotInTreeError(KeyError):
    """Raised when a value to remove is not in the tree."""

    def __init__(self, value: Any = None) -> None:
        super().__init__(value)
        self.value = value

    def __str__(self) -> str:
        return f"Value {self.value!r} is not in the tree."


class RBTreeNode:
    """A node of a red-black tree; new nodes are red."""

    __slots__ = ("data", "left", "right", "parent", "color")

    def __init__(
        self,
        data: Any,
        left: RBTreeNode | None = None,
        right: RBTreeNode | None = None,
        parent: RBTreeNode | None = None,
    ) -> None:
        self.data = data
        self.left = left
        self.right = right
        self.parent = parent
        self.color = Color.RED

    def tree_min(self) -> RBTreeNode:
        """Return the node holding the smallest value in this subtree."""
        node = self
        while node.left is not None:
            node = node.left
        return node

    def tree_max(self) -> RBTreeNode:
        """Return the node holding the largest value in this subtree."""
        node = self
        while node.right is not None:
            node = node.right
        return node

    def pre_order(self) -> Iterator[Any]:
        """Yield the subtree's values node first, then left, then right."""
        yield self.data
        if self.left is not None:
            yield from self.left.pre_order()
        if self.right is not None:
            yield from self.right.pre_order()

    def in_order(self) -> Iterator[Any]:
        """Yield the subtree's values in ascending order."""
        if self.left is not None:
            yield from self.left.in_order()
        yield self.data
        if self.right is not None:
            yield from self.right.in_order()

    def post_order(self) -> Iterator[Any]:
        """Yield the subtree's values left, then right, then node."""
        if self.left is not None:
            yield from self.left.post_order()
        if self.right is not None:
            yield from self.right.post_order()
        yield self.data

    def __repr__(self) -> str:
        return f"RBTreeNode({self.data!r}, {self.color.name})"


def _is_black(node: RBTreeNode | None) -> bool:
    return node is None or node.color is Color.BLACK


def _copy_subtree(node: RBTreeNode | None, parent: RBTreeNode | None) -> RBTreeNode | None:
    if node is None:
        return None
    clone = RBTreeNode(node.data, parent=parent)
    clone.color = node.color
    clone.left = _copy_subtree(node.left, clone)
    clone.right = _copy_subtree(node.right, clone)
    return clone


class RBTree:
    """A self-balancing binary search tree; equal values go to the right."""

    def __init__(self) -> None:
        self.root: RBTreeNode | None = None
        self._count = 0

    def copy(self) -> RBTree:
        """Return a deep copy of the tree, colours included."""
        clone = RBTree()
        clone.root = _copy_subtree(self.root, None)
        clone._count = self._count
        return clone

    def transplant(self, old_node: RBTreeNode, new_node: RBTreeNode | None) -> None:
        """Put ``new_node`` where ``old_node`` hangs from its parent."""
        if old_node.parent is None:
            self.root = new_node
        elif old_node is old_node.parent.left:
            old_node.parent.left = new_node
        else:
            old_node.parent.right = new_node
        if new_node is not None:
            new_node.parent = old_node.parent

    def is_empty(self) -> bool:
        """Return True when the tree holds no values."""
        return self.root is None

    def __len__(self) -> int:
        return self._count

    def _left_rotate(self, node: RBTreeNode) -> None:
        pivot = node.right
        assert pivot is not None
        node.right = pivot.left
        if pivot.left is not None:
            pivot.left.parent = node
        self.transplant(node, pivot)
        pivot.left = node
        node.parent = pivot

    def _right_rotate(self, node: RBTreeNode) -> None:
        pivot = node.left
        assert pivot is not None
        node.left = pivot.right
        if pivot.right is not None:
            pivot.right.parent = node
        self.transplant(node, pivot)
        pivot.right = node
        node.parent = pivot

    def insert(self, value: Any) -> RBTreeNode:
        """Insert ``value`` and return the node that holds it."""
        node = RBTreeNode(value)
        parent = None
        current = self.root
        while current is not None:
            parent = current
            current = current.left if value < current.data else current.right
        node.parent = parent
        if parent is None:
            self.root = node
        elif value < parent.data:
            parent.left = node
        else:
            parent.right = node
        self._count += 1
        self._insert_fixup(node)
        return node

    def _insert_fixup(self, node: RBTreeNode) -> None:
        while node.parent is not None and node.parent.color is Color.RED:
            parent = node.parent
            grandparent = parent.parent
            assert grandparent is not None
            if parent is grandparent.left:
                uncle = grandparent.right
                if uncle is not None and uncle.color is Color.RED:
                    parent.color = Color.BLACK
                    uncle.color = Color.BLACK
                    grandparent.color = Color.RED
                    node = grandparent
                    continue
                if node is parent.right:
                    node = parent
                    self._left_rotate(node)
                    parent = node.parent
                    assert parent is not None
                parent.color = Color.BLACK
                grandparent.color = Color.RED
                self._right_rotate(grandparent)
            else:
                uncle = grandparent.left
                if uncle is not None and uncle.color is Color.RED:
                    parent.color = Color.BLACK
                    uncle.color = Color.BLACK
                    grandparent.color = Color.RED
                    node = grandparent
                    continue
                if node is parent.left:
                    node = parent
                    self._right_rotate(node)
                    parent = node.parent
                    assert parent is not None
                parent.color = Color.BLACK
                grandparent.color = Color.RED
                self._left_rotate(grandparent)
        assert self.root is not None
        self.root.color = Color.BLACK

    def remove(self, value: Any) -> None:
        """Remove one occurrence of ``value`` from the tree."""
        if self.root is None:
            raise EmptyTreeError()
        target = self.search(value)
        if target is None:
            raise ValueNotInTreeError(value)

        removed_color = target.color
        if target.left is None:
            moved = target.right
            moved_parent = target.parent
            self.transplant(target, target.right)
        elif target.right is None:
            moved = target.left
            moved_parent = target.parent
            self.transplant(target, target.left)
        else:
            successor = target.right.tree_min()
            removed_color = successor.color
            moved = successor.right
            if successor.parent is target:
                moved_parent = successor
            else:
                moved_parent = successor.parent
                self.transplant(successor, successor.right)
                successor.right = target.right
                successor.right.parent = successor
            self.transplant(target, successor)
            successor.left = target.left
            successor.left.parent = successor
            successor.color = target.color

        self._count -= 1
        if removed_color is Color.BLACK:
            self._delete_fixup(moved, moved_parent)

    def _delete_fixup(self, node: RBTreeNode | None, parent: RBTreeNode | None) -> None:
        while node is not self.root and _is_black(node):
            assert parent is not None
            if node is parent.left:
                sibling = parent.right
                assert sibling is not None
                if sibling.color is Color.RED:
                    sibling.color = Color.BLACK
                    parent.color = Color.RED
                    self._left_rotate(parent)
                    sibling = parent.right
                    assert sibling is not None
                if _is_black(sibling.left) and _is_black(sibling.right):
                    sibling.color = Color.RED
                    node = parent
                    parent = node.parent
                else:
                    if _is_black(sibling.right):
                        assert sibling.left is not None
                        sibling.left.color = Color.BLACK
                        sibling.color = Color.RED
                        self._right_rotate(sibling)
                        sibling = parent.right
                        assert sibling is not None
                    sibling.color = parent.color
                    parent.color = Color.BLACK
                    if sibling.right is not None:
                        sibling.right.color = Color.BLACK
                    self._left_rotate(parent)
                    node = self.root
                    parent = None
            else:
                sibling = parent.left
                assert sibling is not None
                if sibling.color is Color.RED:
                    sibling.color = Color.BLACK
                    parent.color = Color.RED
                    self._right_rotate(parent)
                    sibling = parent.left
                    assert sibling is not None
                if _is_black(sibling.left) and _is_black(sibling.right):
                    sibling.color = Color.RED
                    node = parent
                    parent = node.parent
                else:
                    if _is_black(sibling.left):
                        assert sibling.right is not None
                        sibling.right.color = Color.BLACK
                        sibling.color = Color.RED
                        self._left_rotate(sibling)
                        sibling = parent.left
                        assert sibling is not None
                    sibling.color = parent.color
                    parent.color = Color.BLACK
                    if sibling.left is not None:
                        sibling.left.color = Color.BLACK
                    self._right_rotate(parent)
                    node = self.root
                    parent = None
        if node is not None:
            node.color = Color.BLACK

    def search(self, value: Any) -> RBTreeNode | None:
        """Return a node holding ``value``, or None."""
        current = self.root
        while current is not None:
            if current.data == value:
                return current
            current = current.left if value < current.data else current.right
        return None

    def __contains__(self, value: Any) -> bool:
        return self.search(value) is not None

    def tree_min(self) -> RBTreeNode:
        """Return the node holding the smallest value."""
        if self.root is None:
            raise EmptyTreeError()
        return self.root.tree_min()

    def tree_max(self) -> RBTreeNode:
        """Return the node holding the largest value."""
        if self.root is None:
            raise EmptyTreeError()
        return self.root.tree_max()

    def pre_order(self) -> Iterator[Any]:
        """Yield the values in pre-order."""
        if self.root is not None:
            yield from self.root.pre_order()

    def in_order(self) -> Iterator[Any]:
        """Yield the values in ascending order."""
        if self.root is not None:
            yield from self.root.in_order()

    def post_order(self) -> Iterator[Any]:
        """Yield the values in post-order."""
        if self.root is not None:
            yield from self.root.post_order()

    def __iter__(self) -> Iterator[Any]:
        return self.in_order()