import random

import pytest

from dsalab.avl import (
    AVLNode,
    AVLTree,
    balance,
    height,
    insert,
    rotate_left,
    rotate_right,
)


def _check_avl(node):
    """Return subtree height after asserting AVL and ordering invariants."""
    if node is None:
        return 0
    left = _check_avl(node.left)
    right = _check_avl(node.right)
    if node.left is not None:
        assert node.left.key < node.key
    if node.right is not None:
        assert node.right.key > node.key
    assert abs(left - right) <= 1
    assert node.height == max(left, right) + 1
    return node.height


SOURCE_KEYS = [27, 39, 40, 55, 77, 99]


def test_source_sequence_inorder():
    tree = AVLTree()
    for key in SOURCE_KEYS:
        tree.insert(key)
    assert list(tree.inorder()) == SOURCE_KEYS


def test_source_sequence_shape():
    tree = AVLTree()
    for key in SOURCE_KEYS:
        tree.insert(key)
    assert tree.root.key == 55
    assert tree.height() == 3
    _check_avl(tree.root)


def test_duplicates_ignored():
    tree = AVLTree()
    for key in [5, 5, 3, 3, 8]:
        tree.insert(key)
    assert list(tree.inorder()) == [3, 5, 8]
    assert len(tree) == 3


@pytest.mark.parametrize("seed", range(5))
def test_random_inserts_stay_balanced(seed):
    rng = random.Random(seed)
    keys = rng.sample(range(1000), 200)
    tree = AVLTree()
    for key in keys:
        tree.insert(key)
    assert list(tree.inorder()) == sorted(keys)
    assert _check_avl(tree.root) == tree.height()


def test_sorted_inserts_logarithmic_height():
    tree = AVLTree()
    for key in range(1023):
        tree.insert(key)
    assert tree.height() <= 15
    _check_avl(tree.root)


def test_height_and_balance_of_empty():
    assert height(None) == 0
    assert balance(None) == 0


def test_rotate_right_moves_left_child_up():
    low = AVLNode(1)
    top = AVLNode(3, height=3, left=AVLNode(2, height=2, left=low))
    new_root = rotate_right(top)
    assert new_root.key == 2
    assert new_root.left is low
    assert new_root.right is top
    assert _check_avl(new_root) == new_root.height


def test_rotate_left_moves_right_child_up():
    high = AVLNode(3)
    top = AVLNode(1, height=3, right=AVLNode(2, height=2, right=high))
    new_root = rotate_left(top)
    assert new_root.key == 2
    assert new_root.left is top
    assert new_root.right is high


def test_rotate_without_child_raises():
    with pytest.raises(ValueError):
        rotate_right(AVLNode(1))
    with pytest.raises(ValueError):
        rotate_left(AVLNode(1))


def test_functional_insert_returns_root():
    root = None
    for key in [3, 2, 1]:
        root = insert(root, key)
    assert root.key == 2
    assert balance(root) == 0