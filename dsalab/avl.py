"""Self-balancing AVL tree built from rotations."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any


@dataclass
class AVLNode:
    key: Any
    height: int = 1
    left: AVLNode | None = None
    right: AVLNode | None = None


def height(node: AVLNode | None) -> int:
    """Height of ``node``; an empty subtree has height 0."""
    return 0 if node is None else node.height


def balance(node: AVLNode | None) -> int:
    """Left height minus right height."""
    if node is None:
        return 0
    return height(node.left) - height(node.right)


def _refresh(node: AVLNode) -> None:
    node.height = max(height(node.left), height(node.right)) + 1


def rotate_right(node: AVLNode) -> AVLNode:
    """Rotate ``node`` right and return the new subtree root."""
    pivot = node.left
    if pivot is None:
        raise ValueError("cannot rotate right without a left child")
    node.left = pivot.right
    pivot.right = node
    _refresh(node)
    _refresh(pivot)
    return pivot


def rotate_left(node: AVLNode) -> AVLNode:
    """Rotate ``node`` left and return the new subtree root."""
    pivot = node.right
    if pivot is None:
        raise ValueError("cannot rotate left without a right child")
    node.right = pivot.left
    pivot.left = node
    _refresh(node)
    _refresh(pivot)
    return pivot


def insert(node: AVLNode | None, key: Any) -> AVLNode:
    """Insert ``key`` below ``node``, rebalancing; return the new root.

    Keys already present are ignored.
    """
    if node is None:
        return AVLNode(key)
    if key < node.key:
        node.left = insert(node.left, key)
    elif key > node.key:
        node.right = insert(node.right, key)
    else:
        return node

    _refresh(node)
    factor = balance(node)
    if factor > 1 and key < node.left.key:
        return rotate_right(node)
    if factor < -1 and key > node.right.key:
        return rotate_left(node)
    if factor < -1 and key < node.right.key:
        node.right = rotate_right(node.right)
        return rotate_left(node)
    if factor > 1 and key > node.left.key:
        node.left = rotate_left(node.left)
        return rotate_right(node)
    return node


class AVLTree:
    """An AVL tree holding unique keys."""

    def __init__(self) -> None:
        self.root: AVLNode | None = None

    def insert(self, key: Any) -> None:
        self.root = insert(self.root, key)

    def inorder(self) -> Iterator[Any]:
        """Yield keys in ascending order."""
        stack: list[AVLNode] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.key
            node = node.right

    def height(self) -> int:
        return height(self.root)

    def __len__(self) -> int:
        return sum(1 for _ in self.inorder())