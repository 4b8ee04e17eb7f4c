"""Text rendering of binary trees as an ASCII diagram."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from arbor.tree import Node


def _label(value: int) -> str:
    return f"({value:03d})"


def render(tree: Optional[Node]) -> str:
    """Return the diagram of ``tree``, one line per level, each ending in a newline.

    Every node is drawn as its value in parentheses, zero-padded to three
    digits, and each level is joined to its children by a line of dashes
    whose ends are marked with dots. An empty tree renders as "".
    """
    if tree is None:
        return ""
    rows: list[list[str]] = [[] for _ in range(tree.height() + 1)]

    def put(depth: int, column: int, char: str) -> None:
        row = rows[depth]
        if len(row) <= column:
            row.extend(" " * (column + 1 - len(row)))
        row[column] = char

    def draw(node: Optional[Node], offset: int, depth: int) -> int:
        if node is None:
            return 0
        is_left = node.parent is not None and node.parent.left is node
        label = _label(node.value)
        width = len(label)
        left = draw(node.left, offset, depth + 1)
        right = draw(node.right, offset + left + width, depth + 1)
        for i, char in enumerate(label):
            put(depth, offset + left + i, char)
        if depth:
            if is_left:
                start = offset + left + width // 2
                for i in range(width + right):
                    put(depth - 1, start + i, "-")
            else:
                start = offset - width // 2
                for i in range(left + width):
                    put(depth - 1, start + i, "-")
            put(depth - 1, offset + left + width // 2, ".")
        return left + width + right

    draw(tree, 0, 0)
    return "".join("".join(row).rstrip(" ") + "\n" for row in rows)


def print_tree(tree: Optional[Node], file: Optional[TextIO] = None) -> None:
    """Write the diagram of ``tree`` to ``file`` (standard output by default)."""
    out = sys.stdout if file is None else file
    out.write(render(tree))