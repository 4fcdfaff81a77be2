"""Binary tree traversals and measures, and an unbalanced binary search tree."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional

__all__ = [
    "TreeNode",
    "BinarySearchTree",
    "preorder",
    "inorder",
    "postorder",
    "level_order",
    "sum_at_level",
    "count_nodes",
    "sum_nodes",
    "height",
    "diameter",
    "tree_to_string",
]


@dataclass(eq=False)
class TreeNode:
    """A binary tree node; nodes compare and hash by identity."""

    value: Any
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def _postorder_nodes(root: Optional[TreeNode]) -> list[TreeNode]:
    # Root-right-left preorder, reversed, gives left-right-root postorder.
    nodes: list[TreeNode] = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        nodes.append(node)
        if node.left is not None:
            stack.append(node.left)
        if node.right is not None:
            stack.append(node.right)
    nodes.reverse()
    return nodes


def preorder(root: Optional[TreeNode]) -> list[Any]:
    """Values in root-left-right order."""
    values: list[Any] = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        values.append(node.value)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return values


def inorder(root: Optional[TreeNode]) -> list[Any]:
    """Values in left-root-right order."""
    values: list[Any] = []
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        values.append(node.value)
        node = node.right
    return values


def postorder(root: Optional[TreeNode]) -> list[Any]:
    """Values in left-right-root order."""
    return [node.value for node in _postorder_nodes(root)]


def _levels(root: Optional[TreeNode]) -> Iterator[list[TreeNode]]:
    level = [root] if root is not None else []
    while level:
        yield level
        level = [
            child
            for node in level
            for child in (node.left, node.right)
            if child is not None
        ]


def level_order(root: Optional[TreeNode]) -> list[Any]:
    """Values level by level, left to right."""
    values: list[Any] = []
    queue = deque([root] if root is not None else [])
    while queue:
        node = queue.popleft()
        values.append(node.value)
        if node.left is not None:
            queue.append(node.left)
        if node.right is not None:
            queue.append(node.right)
    return values


def sum_at_level(root: Optional[TreeNode], level: int) -> Any:
    """Sum of the values on level ``level`` (the root is level 0)."""
    if root is None:
        raise ValueError("tree is empty")
    for depth, nodes in enumerate(_levels(root)):
        if depth == level:
            return sum(node.value for node in nodes)
    return 0


def count_nodes(root: Optional[TreeNode]) -> int:
    """Number of nodes in the tree."""
    return len(_postorder_nodes(root))


def sum_nodes(root: Optional[TreeNode]) -> Any:
    """Sum of all values in the tree."""
    return sum(node.value for node in _postorder_nodes(root))


def height(root: Optional[TreeNode]) -> int:
    """Number of nodes on the longest root-to-leaf path."""
    return sum(1 for _ in _levels(root))


def diameter(root: Optional[TreeNode]) -> int:
    """Number of nodes on the longest path between any two nodes."""
    heights: dict[TreeNode, int] = {}
    best = 0
    for node in _postorder_nodes(root):
        left = heights.get(node.left, 0) if node.left is not None else 0
        right = heights.get(node.right, 0) if node.right is not None else 0
        heights[node] = max(left, right) + 1
        best = max(best, left + right + 1)
    return best


def tree_to_string(root: Optional[TreeNode]) -> str:
    """Bracketed form: value, then ``(left)`` and ``(right)``; ``()`` marks a missing left."""
    if root is None:
        return ""
    text = str(root.value)
    if root.left is not None:
        text += "(" + tree_to_string(root.left) + ")"
    if root.right is not None:
        if root.left is None:
            text += "()"
        text += "(" + tree_to_string(root.right) + ")"
    return text


class BinarySearchTree:
    """An unbalanced binary search tree; equal keys go to the right."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.root: Optional[TreeNode] = None
        self._size = 0
        for value in values:
            self.insert(value)

    def __repr__(self) -> str:
        return f"BinarySearchTree({list(self)!r})"

    def insert(self, key: Any) -> None:
        """Add ``key`` to the tree."""
        node = TreeNode(key)
        self._size += 1
        if self.root is None:
            self.root = node
            return
        current = self.root
        while True:
            if key < current.value:
                if current.left is None:
                    current.left = node
                    return
                current = current.left
            else:
                if current.right is None:
                    current.right = node
                    return
                current = current.right

    def search(self, key: Any) -> Optional[TreeNode]:
        """Return the first node holding ``key``, or None."""
        current = self.root
        while current is not None and current.value != key:
            current = current.left if key < current.value else current.right
        return current

    def _require_nodes(self) -> TreeNode:
        if self.root is None:
            raise ValueError("tree is empty")
        return self.root

    def minimum(self) -> Any:
        """Smallest key in the tree."""
        node = self._require_nodes()
        while node.left is not None:
            node = node.left
        return node.value

    def maximum(self) -> Any:
        """Largest key in the tree."""
        node = self._require_nodes()
        while node.right is not None:
            node = node.right
        return node.value

    def successor(self, key: Any) -> Any:
        """Key that follows ``key`` in order, or None if ``key`` is the last."""
        current = self.root
        candidate: Optional[TreeNode] = None
        while current is not None and current.value != key:
            if key < current.value:
                candidate = current
                current = current.left
            else:
                current = current.right
        if current is None:
            raise KeyError(key)
        if current.right is not None:
            node = current.right
            while node.left is not None:
                node = node.left
            return node.value
        return candidate.value if candidate is not None else None

    def predecessor(self, key: Any) -> Any:
        """Key that precedes ``key`` in order, or None if ``key`` is the first."""
        current = self.root
        candidate: Optional[TreeNode] = None
        while current is not None and current.value != key:
            if key < current.value:
                current = current.left
            else:
                candidate = current
                current = current.right
        if current is None:
            raise KeyError(key)
        if current.left is not None:
            node = current.left
            while node.right is not None:
                node = node.right
            return node.value
        return candidate.value if candidate is not None else None

    def delete(self, key: Any) -> bool:
        """Remove one node holding ``key``; return whether one was found."""
        parent: Optional[TreeNode] = None
        node = self.root
        while node is not None and node.value != key:
            parent = node
            node = node.left if key < node.value else node.right
        if node is None:
            return False
        if node.left is not None and node.right is not None:
            successor_parent = node
            successor = node.right
            while successor.left is not None:
                successor_parent = successor
                successor = successor.left
            node.value = successor.value
            parent, node = successor_parent, successor
        child = node.left if node.left is not None else node.right
        if parent is None:
            self.root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child
        self._size -= 1
        return True

    def __iter__(self) -> Iterator[Any]:
        return iter(inorder(self.root))

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: Any) -> bool:
        return self.search(key) is not None