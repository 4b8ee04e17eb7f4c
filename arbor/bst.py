"""Binary search trees of distinct integers."""

from __future__ import annotations

from typing import Iterable, Iterator, Optional

from arbor.tree import Node


def is_bst(tree: Optional[Node]) -> bool:
    """True if ``tree`` is a valid binary search tree with no duplicate values.

    An empty tree is not a valid binary search tree.
    """
    if tree is None:
        return False
    stack: list[tuple[Node, Optional[int], Optional[int]]] = [(tree, None, None)]
    while stack:
        node, low, high = stack.pop()
        if low is not None and node.value <= low:
            return False
        if high is not None and node.value >= high:
            return False
        if node.left is not None:
            stack.append((node.left, low, node.value))
        if node.right is not None:
            stack.append((node.right, node.value, high))
    return True


class BinarySearchTree:
    """A binary search tree that ignores duplicate values."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.root: Optional[Node] = None
        for value in values:
            self.insert(value)

    def __iter__(self) -> Iterator[int]:
        if self.root is not None:
            yield from self.root.inorder()

    def __len__(self) -> int:
        return 0 if self.root is None else self.root.size()

    def __contains__(self, value: object) -> bool:
        return isinstance(value, int) and self.search(value) is not None

    def insert(self, value: int) -> Optional[Node]:
        """Insert ``value``; return the new node, or None if it was already present."""
        if self.root is None:
            self.root = Node(value)
            return self.root
        node = self.root
        while True:
            if value < node.value:
                if node.left is None:
                    node.left = Node(value, parent=node)
                    return node.left
                node = node.left
            elif value > node.value:
                if node.right is None:
                    node.right = Node(value, parent=node)
                    return node.right
                node = node.right
            else:
                return None

    def search(self, value: int) -> Optional[Node]:
        """Return the node holding ``value``, or None."""
        node = self.root
        while node is not None:
            if value == node.value:
                return node
            node = node.left if value < node.value else node.right
        return None

    def remove(self, value: int) -> bool:
        """Remove ``value`` from the tree; return whether it was present.

        A node with two children takes the value of its in-order successor,
        which is then unlinked in its place.
        """
        node = self.search(value)
        if node is None:
            return False
        if node.left is not None and node.right is not None:
            successor = node.right
            while successor.left is not None:
                successor = successor.left
            node.value = successor.value
            node = successor
        child = node.left if node.left is not None else node.right
        parent = node.parent
        if child is not None:
            child.parent = parent
        if parent is None:
            self.root = child
        elif parent.right is node:
            parent.right = child
        else:
            parent.left = child
        node.parent = node.left = node.right = None
        return True