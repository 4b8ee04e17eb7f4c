"""Max binary heaps stored as linked binary trees."""

from __future__ import annotations

from typing import Iterable, Iterator, Optional

from arbor.tree import Node


def is_heap(tree: Optional[Node]) -> bool:
    """True if ``tree`` is a complete binary tree where no child exceeds its parent.

    An empty tree is not a valid heap.
    """
    if tree is None or not tree.is_complete():
        return False
    stack = [tree]
    while stack:
        node = stack.pop()
        for child in (node.left, node.right):
            if child is None:
                continue
            if child.value > node.value:
                return False
            stack.append(child)
    return True


def _path(index: int) -> Iterator[str]:
    """Yield "left"/"right" steps from the root to the 1-based level-order ``index``."""
    for bit in bin(index)[3:]:
        yield "right" if bit == "1" else "left"


class MaxHeap:
    """A max binary heap kept as a complete binary tree of linked nodes."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.root: Optional[Node] = None
        for value in values:
            self.insert(value)

    def __len__(self) -> int:
        return 0 if self.root is None else self.root.size()

    def __bool__(self) -> bool:
        return self.root is not None

    def insert(self, value: int) -> Node:
        """Insert ``value`` and return the node that holds it once it has risen."""
        if self.root is None:
            self.root = Node(value)
            return self.root
        steps = list(_path(self.root.size() + 1))
        parent = self.root
        for step in steps[:-1]:
            parent = getattr(parent, step)
        node = Node(value, parent=parent)
        setattr(parent, steps[-1], node)
        while node.parent is not None and node.value > node.parent.value:
            node.value, node.parent.value = node.parent.value, node.value
            node = node.parent
        return node

    def extract(self) -> int:
        """Remove and return the largest value.

        Raises IndexError if the heap is empty.
        """
        root = self.root
        if root is None:
            raise IndexError("extract from an empty heap")
        value = root.value
        if root.is_leaf():
            self.root = None
            return value
        last = root
        for step in _path(root.size()):
            last = getattr(last, step)
        root.value = last.value
        parent = last.parent
        if parent.right is not None:
            parent.right = None
        else:
            parent.left = None
        last.parent = None
        self._sift_down(root)
        return value

    @staticmethod
    def _sift_down(node: Node) -> None:
        while node.left is not None:
            if node.right is None or node.left.value > node.right.value:
                child = node.left
            else:
                child = node.right
            if node.value > child.value:
                break
            node.value, child.value = child.value, node.value
            node = child

    def to_sorted_list(self) -> list[int]:
        """Drain the heap and return its values from largest to smallest."""
        result = []
        while self.root is not None:
            result.append(self.extract())
        return result