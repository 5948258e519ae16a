"""Unbalanced binary search trees: an integer tree and a word dictionary."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any


@dataclass
class _Node:
    key: Any
    value: Any = None
    left: _Node | None = None
    right: _Node | None = None


def _insert(root: _Node | None, node: _Node) -> _Node:
    """Attach ``node`` below ``root``; equal keys go to the left."""
    if root is None:
        return node
    current = root
    while True:
        if node.key <= current.key:
            if current.left is None:
                current.left = node
                return root
            current = current.left
        else:
            if current.right is None:
                current.right = node
                return root
            current = current.right


def _inorder(root: _Node | None) -> Iterator[_Node]:
    stack: list[_Node] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node
        node = node.right


class BinarySearchTree:
    """Binary search tree that keeps duplicate keys in the left subtree."""

    def __init__(self) -> None:
        self.root: _Node | None = None

    def insert(self, key: Any) -> None:
        self.root = _insert(self.root, _Node(key))

    def inorder(self) -> Iterator[Any]:
        """Yield keys in in-order traversal."""
        return (node.key for node in _inorder(self.root))

    def minimum(self) -> Any:
        """Return the leftmost key; raise ValueError if the tree is empty."""
        node = self.root
        if node is None:
            raise ValueError("minimum of an empty tree")
        while node.left is not None:
            node = node.left
        return node.key

    def contains(self, key: Any) -> bool:
        node = self.root
        while node is not None:
            if key < node.key:
                node = node.left
            elif key > node.key:
                node = node.right
            else:
                return True
        return False

    __contains__ = contains

    def longest_path(self) -> int:
        """Number of nodes on the longest root-to-leaf path."""
        if self.root is None:
            return 0
        depth = 0
        level: deque[_Node] = deque([self.root])
        while level:
            depth += 1
            for _ in range(len(level)):
                node = level.popleft()
                level.extend(c for c in (node.left, node.right) if c is not None)
        return depth

    def mirror(self) -> None:
        """Swap the left and right children of every node."""
        stack = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            node.left, node.right = node.right, node.left
            stack.extend(c for c in (node.left, node.right) if c is not None)


class Dictionary:
    """Word-to-meaning dictionary stored as a binary search tree on words."""

    def __init__(self) -> None:
        self.root: _Node | None = None

    def insert(self, word: str, meaning: str) -> None:
        self.root = _insert(self.root, _Node(word, meaning))

    def items(self) -> Iterator[tuple[str, str]]:
        """Yield ``(word, meaning)`` pairs in alphabetical order."""
        return ((node.key, node.value) for node in _inorder(self.root))