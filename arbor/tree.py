"""Binary tree nodes and the operations that work on any binary tree."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Iterator, Optional


@dataclass(eq=False)
class Node:
    """A binary tree node holding an integer value and links to its relatives.

    Creating a node records its parent but does not attach it as a child;
    use :meth:`insert_left` or :meth:`insert_right` for that.
    """

    value: int
    parent: Optional[Node] = field(default=None, repr=False)
    left: Optional[Node] = field(default=None, repr=False)
    right: Optional[Node] = field(default=None, repr=False)

    def insert_left(self, value: int) -> Node:
        """Insert a new left child; any existing left child becomes its left child."""
        new = Node(value, parent=self, left=self.left)
        self.left = new
        if new.left is not None:
            new.left.parent = new
        return new

    def insert_right(self, value: int) -> Node:
        """Insert a new right child; any existing right child becomes its right child."""
        new = Node(value, parent=self, right=self.right)
        self.right = new
        if new.right is not None:
            new.right.parent = new
        return new

    def _children(self) -> Iterator[Node]:
        if self.left is not None:
            yield self.left
        if self.right is not None:
            yield self.right

    def _nodes(self) -> Iterator[Node]:
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def is_leaf(self) -> bool:
        """True if the node has no children."""
        return self.left is None and self.right is None

    def is_root(self) -> bool:
        """True if the node has no parent."""
        return self.parent is None

    def preorder(self) -> Iterator[int]:
        """Yield values in pre-order: node, left subtree, right subtree."""
        for node in self._nodes():
            yield node.value

    def inorder(self) -> Iterator[int]:
        """Yield values in in-order: left subtree, node, right subtree."""
        stack: list[Node] = []
        node: Optional[Node] = self
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right

    def postorder(self) -> Iterator[int]:
        """Yield values in post-order: left subtree, right subtree, node."""
        reverse: list[int] = []
        stack = [self]
        while stack:
            node = stack.pop()
            reverse.append(node.value)
            stack.extend(node._children())
        yield from reversed(reverse)

    def levelorder(self) -> Iterator[int]:
        """Yield values level by level, left to right."""
        queue = deque([self])
        while queue:
            node = queue.popleft()
            yield node.value
            queue.extend(node._children())

    def height(self) -> int:
        """Number of edges on the longest downward path; 0 for a leaf."""
        height = -1
        level = [self]
        while level:
            height += 1
            level = [child for node in level for child in node._children()]
        return height

    def depth(self) -> int:
        """Number of edges between this node and the root."""
        depth = 0
        node = self
        while node.parent is not None:
            depth += 1
            node = node.parent
        return depth

    def size(self) -> int:
        """Number of nodes in the tree rooted here."""
        return sum(1 for _ in self._nodes())

    def leaves(self) -> int:
        """Number of leaves in the tree rooted here."""
        return sum(1 for node in self._nodes() if node.is_leaf())

    def internal_nodes(self) -> int:
        """Number of nodes with at least one child."""
        return sum(1 for node in self._nodes() if not node.is_leaf())

    def balance(self) -> int:
        """Height of the left subtree minus height of the right subtree."""
        return _levels(self.left) - _levels(self.right)

    def is_full(self) -> bool:
        """True if every node has either zero or two children."""
        return all(
            (node.left is None) == (node.right is None) for node in self._nodes()
        )

    def is_perfect(self) -> bool:
        """True if all interior nodes have two children and all leaves share a level."""
        if self.is_leaf():
            return True
        return self.size() == 2 ** (self.height() + 1) - 1

    def is_complete(self) -> bool:
        """True if every level but the last is full and the last is filled from the left."""
        size = self.size()
        stack = [(self, 0)]
        while stack:
            node, index = stack.pop()
            if index >= size:
                return False
            if node.left is not None:
                stack.append((node.left, 2 * index + 1))
            if node.right is not None:
                stack.append((node.right, 2 * index + 2))
        return True

    def sibling(self) -> Optional[Node]:
        """The other child of this node's parent, or None."""
        if self.parent is None:
            return None
        if self is self.parent.left:
            return self.parent.right
        return self.parent.left

    def uncle(self) -> Optional[Node]:
        """The sibling of this node's parent, or None."""
        if self.parent is None:
            return None
        return self.parent.sibling()


def _levels(node: Optional[Node]) -> int:
    return 0 if node is None else node.height() + 1


def lowest_common_ancestor(
    first: Optional[Node], second: Optional[Node]
) -> Optional[Node]:
    """Return the deepest node that is an ancestor of both nodes, or None."""
    if first is None or second is None:
        return None
    depth_first = first.depth()
    depth_second = second.depth()
    a: Optional[Node] = first
    b: Optional[Node] = second
    while depth_first > depth_second:
        a = a.parent  # type: ignore[union-attr]
        depth_first -= 1
    while depth_second > depth_first:
        b = b.parent  # type: ignore[union-attr]
        depth_second -= 1
    while a is not None and b is not None:
        if a is b:
            return a
        a = a.parent
        b = b.parent
    return None


def rotate_left(tree: Node) -> Node:
    """Rotate left around ``tree`` and return the new subtree root.

    The former parent's child link is left for the caller to update.
    """
    if tree is None or tree.right is None:
        raise ValueError("left rotation needs a node with a right child")
    pivot = tree.right
    tree.right = pivot.left
    if pivot.left is not None:
        pivot.left.parent = tree
    pivot.left = tree
    pivot.parent = tree.parent
    tree.parent = pivot
    return pivot


def rotate_right(tree: Node) -> Node:
    """Rotate right around ``tree`` and return the new subtree root.

    The former parent's child link is left for the caller to update.
    """
    if tree is None or tree.left is None:
        raise ValueError("right rotation needs a node with a left child")
    pivot = tree.left
    tree.left = pivot.right
    if pivot.right is not None:
        pivot.right.parent = tree
    pivot.right = tree
    pivot.parent = tree.parent
    tree.parent = pivot
    return pivot