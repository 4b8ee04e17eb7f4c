"""Self-balancing AVL trees."""

from __future__ import annotations

from typing import Iterable, Optional, Sequence

from arbor.bst import BinarySearchTree, is_bst
from arbor.tree import Node, rotate_left, rotate_right


def is_avl(tree: Optional[Node]) -> bool:
    """True if ``tree`` is a valid binary search tree whose balance factors are within one."""
    if not is_bst(tree):
        return False
    stack = [tree]
    while stack:
        node = stack.pop()
        if abs(node.balance()) > 1:
            return False
        if node.left is not None:
            stack.append(node.left)
        if node.right is not None:
            stack.append(node.right)
    return True


def _rebalance(node: Optional[Node]) -> Optional[Node]:
    if node is None or node.is_leaf():
        return node
    node.left = _rebalance(node.left)
    node.right = _rebalance(node.right)
    factor = node.balance()
    if factor > 1:
        return rotate_right(node)
    if factor < -1:
        return rotate_left(node)
    return node


class AVLTree(BinarySearchTree):
    """A binary search tree kept balanced by rotations."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        super().__init__(values)

    def insert(self, value: int) -> Optional[Node]:
        """Insert ``value`` and rebalance; return the new node, or None for a duplicate."""
        if self.root is None:
            self.root = Node(value)
            return self.root
        created: Optional[Node] = None

        def descend(node: Optional[Node], parent: Optional[Node]) -> Node:
            nonlocal created
            if node is None:
                created = Node(value, parent=parent)
                return created
            if value < node.value:
                node.left = descend(node.left, node)
            elif value > node.value:
                node.right = descend(node.right, node)
            else:
                return node
            factor = node.balance()
            if factor > 1 and node.left.value > value:
                return rotate_right(node)
            if factor > 1 and node.left.value < value:
                node.left = rotate_left(node.left)
                return rotate_right(node)
            if factor < -1 and node.right.value < value:
                return rotate_left(node)
            if factor < -1 and node.right.value > value:
                node.right = rotate_right(node.right)
                return rotate_left(node)
            return node

        self.root = descend(self.root, None)
        return created

    def remove(self, value: int) -> bool:
        """Remove ``value`` as in a binary search tree, then rebalance bottom-up."""
        removed = super().remove(value)
        if self.root is not None:
            self.root = _rebalance(self.root)
        return removed


def sorted_array_to_avl(values: Sequence[int]) -> AVLTree:
    """Build an AVL tree from sorted values by recursively taking middle elements.

    A value equal to its would-be parent is not attached.
    """
    tree = AVLTree()
    if not values:
        return tree
    middle = (len(values) - 1) // 2
    root = Node(values[middle])

    def build(parent: Node, low: int, high: int) -> None:
        if high - low <= 1:
            return
        mid = (high - low) // 2 + low
        node = Node(values[mid], parent=parent)
        if values[mid] > parent.value:
            parent.right = node
        elif values[mid] < parent.value:
            parent.left = node
        build(node, low, mid)
        build(node, mid, high)

    build(root, -1, middle)
    build(root, middle, len(values))
    tree.root = root
    return tree