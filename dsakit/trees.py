"""Binary search trees: a self-balancing AVL tree, a plain BST and Morris traversal."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Optional


@dataclass(eq=False)
class TreeNode:
    """A binary tree node holding an integer value."""

    val: int
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


class Placement(Enum):
    """Where a value ended up when added to a binary search tree."""

    ROOT = "root"
    LEFT = "left"
    RIGHT = "right"
    DUPLICATE = "duplicate"


def _inorder(root: Optional[TreeNode]) -> list[int]:
    result: list[int] = []
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        result.append(node.val)
        node = node.right
    return result


def _preorder(root: Optional[TreeNode]) -> list[int]:
    result: list[int] = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        result.append(node.val)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return result


def _postorder(root: Optional[TreeNode]) -> list[int]:
    result: list[int] = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        result.append(node.val)
        if node.left is not None:
            stack.append(node.left)
        if node.right is not None:
            stack.append(node.right)
    result.reverse()
    return result


def _height(node: Optional[TreeNode]) -> int:
    if node is None:
        return 0
    return 1 + max(_height(node.left), _height(node.right))


def _difference(node: TreeNode) -> int:
    return _height(node.left) - _height(node.right)


def _rotate_left(parent: TreeNode) -> TreeNode:
    child = parent.right
    assert child is not None
    parent.right = child.left
    child.left = parent
    return child


def _rotate_right(parent: TreeNode) -> TreeNode:
    child = parent.left
    assert child is not None
    parent.left = child.right
    child.right = parent
    return child


def _balance(node: TreeNode) -> TreeNode:
    factor = _difference(node)
    if factor > 1:
        assert node.left is not None
        if _difference(node.left) > 0:
            return _rotate_right(node)
        node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if factor < -1:
        assert node.right is not None
        if _difference(node.right) > 0:
            node.right = _rotate_right(node.right)
            return _rotate_left(node)
        return _rotate_left(node)
    return node


def _avl_insert(node: Optional[TreeNode], value: int) -> TreeNode:
    if node is None:
        return TreeNode(value)
    if value < node.val:
        node.left = _avl_insert(node.left, value)
    else:
        node.right = _avl_insert(node.right, value)
    return _balance(node)


class AVLTree:
    """A height-balanced binary search tree; equal values go to the right."""

    def __init__(self) -> None:
        self.root: Optional[TreeNode] = None

    def insert(self, value: int) -> None:
        """Insert ``value`` and rebalance along the insertion path."""
        self.root = _avl_insert(self.root, value)

    def inorder(self) -> list[int]:
        """Values in ascending order."""
        return _inorder(self.root)

    def preorder(self) -> list[int]:
        """Values in node, left, right order."""
        return _preorder(self.root)

    def postorder(self) -> list[int]:
        """Values in left, right, node order."""
        return _postorder(self.root)

    def height(self) -> int:
        """Number of nodes on the longest root-to-leaf path; 0 when empty."""
        return _height(self.root)

    def render(self) -> str:
        """Show the tree sideways on one line, right subtree first, root marked."""
        parts: list[str] = []

        def walk(node: Optional[TreeNode], level: int) -> None:
            if node is None:
                return
            walk(node.right, level + 1)
            prefix = "Root -> " if node is self.root else " " * level
            parts.append(f" {prefix}{node.val}")
            walk(node.left, level + 1)

        walk(self.root, 1)
        return "".join(parts)


class BinarySearchTree:
    """An unbalanced binary search tree that rejects duplicate values."""

    def __init__(self) -> None:
        self.root: Optional[TreeNode] = None

    def add(self, value: int) -> Placement:
        """Add ``value`` and report where it was placed."""
        if self.root is None:
            self.root = TreeNode(value)
            return Placement.ROOT
        node = self.root
        while True:
            if value == node.val:
                return Placement.DUPLICATE
            if value < node.val:
                if node.left is None:
                    node.left = TreeNode(value)
                    return Placement.LEFT
                node = node.left
            else:
                if node.right is None:
                    node.right = TreeNode(value)
                    return Placement.RIGHT
                node = node.right

    def inorder(self) -> list[int]:
        """Values in ascending order."""
        return _inorder(self.root)

    def preorder(self) -> list[int]:
        """Values in node, left, right order."""
        return _preorder(self.root)

    def postorder(self) -> list[int]:
        """Values in left, right, node order."""
        return _postorder(self.root)


def morris_inorder(root: Optional[TreeNode]) -> list[int]:
    """Inorder traversal without a stack, threading and then restoring the tree."""
    result: list[int] = []
    current = root
    while current is not None:
        if current.left is None:
            result.append(current.val)
            current = current.right
            continue
        predecessor = current.left
        while predecessor.right is not None and predecessor.right is not current:
            predecessor = predecessor.right
        if predecessor.right is None:
            predecessor.right = current
            current = current.left
        else:
            predecessor.right = None
            result.append(current.val)
            current = current.right
    return result