"""Binary tree traversals and measurements, and an unbalanced binary search tree."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class TreeNode:
    """A binary tree node holding a value and optional left and right children."""

    value: Any
    left: TreeNode | None = None
    right: TreeNode | None = None


def _walk_preorder(root: TreeNode | None) -> Iterator[Any]:
    if root is not None:
        yield root.value
        yield from _walk_preorder(root.left)
        yield from _walk_preorder(root.right)


def _walk_inorder(root: TreeNode | None) -> Iterator[Any]:
    if root is not None:
        yield from _walk_inorder(root.left)
        yield root.value
        yield from _walk_inorder(root.right)


def _walk_postorder(root: TreeNode | None) -> Iterator[Any]:
    if root is not None:
        yield from _walk_postorder(root.left)
        yield from _walk_postorder(root.right)
        yield root.value


def preorder(root: TreeNode | None) -> list[Any]:
    """Values in root, left, right order."""
    return list(_walk_preorder(root))


def inorder(root: TreeNode | None) -> list[Any]:
    """Values in left, root, right order."""
    return list(_walk_inorder(root))


def postorder(root: TreeNode | None) -> list[Any]:
    """Values in left, right, root order."""
    return list(_walk_postorder(root))


def _levels(root: TreeNode | None) -> Iterator[list[TreeNode]]:
    level = [root] if root is not None else []
    while level:
        yield level
        level = [
            child
            for node in level
            for child in (node.left, node.right)
            if child is not None
        ]


def level_order(root: TreeNode | None) -> list[Any]:
    """Values level by level, each level from left to right."""
    return [node.value for level in _levels(root) for node in level]


def tree_to_string(root: TreeNode | None) -> str:
    """Bracketed preorder form, e.g. ``1(2()(4))(3)``; empty for an empty tree.

    An empty left pair ``()`` is written only when a right child follows.
    """
    if root is None:
        return ""
    text = str(root.value)
    if root.left is not None:
        text += f"({tree_to_string(root.left)})"
    if root.right is not None:
        if root.left is None:
            text += "()"
        text += f"({tree_to_string(root.right)})"
    return text


def sum_at_level(root: TreeNode | None, k: int) -> int:
    """Sum of the values at depth ``k`` (root is depth 0); -1 for an empty tree."""
    if root is None:
        return -1
    for depth, level in enumerate(_levels(root)):
        if depth == k:
            return sum(node.value for node in level)
    return 0


def count_nodes(root: TreeNode | None) -> int:
    """Number of nodes in the tree."""
    return sum(1 for _ in _walk_preorder(root))


def sum_nodes(root: TreeNode | None) -> int:
    """Sum of every value in the tree."""
    return sum(_walk_preorder(root))


def height(root: TreeNode | None) -> int:
    """Number of nodes on the longest path from the root down to a leaf."""
    if root is None:
        return 0
    return max(height(root.left), height(root.right)) + 1


def diameter(root: TreeNode | None) -> int:
    """Number of nodes on the longest path between any two nodes."""

    def measure(node: TreeNode | None) -> tuple[int, int]:
        if node is None:
            return 0, 0
        left_height, left_best = measure(node.left)
        right_height, right_best = measure(node.right)
        through = left_height + right_height + 1
        return (
            max(left_height, right_height) + 1,
            max(through, left_best, right_best),
        )

    return measure(root)[1]


class BinarySearchTree:
    """An unbalanced binary search tree; equal keys go to the right."""

    def __init__(self) -> None:
        self.root: TreeNode | None = None

    def insert(self, key: Any) -> None:
        """Add ``key`` to the tree."""
        new = TreeNode(key)
        if self.root is None:
            self.root = new
            return
        node = self.root
        while True:
            if key < node.value:
                if node.left is None:
                    node.left = new
                    return
                node = node.left
            else:
                if node.right is None:
                    node.right = new
                    return
                node = node.right

    def _path_to(self, key: Any) -> tuple[TreeNode, TreeNode | None, TreeNode | None]:
        """Find ``key``; return it with its nearest left-turn and right-turn ancestors."""
        left_turn: TreeNode | None = None
        right_turn: TreeNode | None = None
        node = self.root
        while node is not None:
            if key == node.value:
                return node, left_turn, right_turn
            if key < node.value:
                left_turn = node
                node = node.left
            else:
                right_turn = node
                node = node.right
        raise KeyError(key)

    def __contains__(self, key: object) -> bool:
        try:
            self._path_to(key)
        except KeyError:
            return False
        return True

    def __iter__(self) -> Iterator[Any]:
        return _walk_inorder(self.root)

    @staticmethod
    def _leftmost(node: TreeNode) -> TreeNode:
        while node.left is not None:
            node = node.left
        return node

    @staticmethod
    def _rightmost(node: TreeNode) -> TreeNode:
        while node.right is not None:
            node = node.right
        return node

    def minimum(self) -> Any:
        """Smallest key; ``ValueError`` when the tree is empty."""
        if self.root is None:
            raise ValueError("minimum of an empty tree")
        return self._leftmost(self.root).value

    def maximum(self) -> Any:
        """Largest key; ``ValueError`` when the tree is empty."""
        if self.root is None:
            raise ValueError("maximum of an empty tree")
        return self._rightmost(self.root).value

    def successor(self, key: Any) -> Any | None:
        """Key that follows ``key`` in order, or ``None`` if it is the last.

        Raises ``KeyError`` when ``key`` is not in the tree.
        """
        node, left_turn, _ = self._path_to(key)
        if node.right is not None:
            return self._leftmost(node.right).value
        return None if left_turn is None else left_turn.value

    def predecessor(self, key: Any) -> Any | None:
        """Key that precedes ``key`` in order, or ``None`` if it is the first.

        Raises ``KeyError`` when ``key`` is not in the tree.
        """
        node, _, right_turn = self._path_to(key)
        if node.left is not None:
            return self._rightmost(node.left).value
        return None if right_turn is None else right_turn.value

    def delete(self, key: Any) -> None:
        """Remove one occurrence of ``key``; does nothing if it is absent."""
        self.root = self._delete(self.root, key)

    def _delete(self, node: TreeNode | None, key: Any) -> TreeNode | None:
        if node is None:
            return None
        if key < node.value:
            node.left = self._delete(node.left, key)
        elif key > node.value:
            node.right = self._delete(node.right, key)
        elif node.left is None:
            return node.right
        elif node.right is None:
            return node.left
        else:
            replacement = self._leftmost(node.right).value
            node.value = replacement
            node.right = self._delete(node.right, replacement)
        return node