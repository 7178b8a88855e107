"""ASCII rendering of binary trees and red-black trees, one line per level."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Callable, Optional


class RBColor(IntEnum):
    """Colour of a red-black tree node."""

    RED = 0
    BLACK = 1
    DOUBLE_BLACK = 2


@dataclass(eq=False)
class RBNode:
    """A red-black tree node holding an integer."""

    n: int
    color: RBColor = RBColor.RED
    parent: Optional[RBNode] = field(default=None, repr=False)
    left: Optional[RBNode] = None
    right: Optional[RBNode] = None


def _height(node: Any) -> int:
    left = 1 + _height(node.left) if node.left is not None else 0
    right = 1 + _height(node.right) if node.right is not None else 0
    return max(left, right)


def _put(row: list[str], pos: int, char: str) -> None:
    if pos < 0:
        return
    if pos >= len(row):
        row.extend(" " * (pos + 1 - len(row)))
    row[pos] = char


def _layout(node: Any, offset: int, depth: int, rows: list[list[str]],
            label: Callable[[Any], str]) -> int:
    if node is None:
        return 0
    is_left = node.parent is not None and node.parent.left is node
    text = label(node)
    width = len(text)
    left = _layout(node.left, offset, depth + 1, rows, label)
    right = _layout(node.right, offset + left + width, depth + 1, rows, label)
    for i, char in enumerate(text):
        _put(rows[depth], offset + left + i, char)
    if depth:
        above = rows[depth - 1]
        if is_left:
            for i in range(width + right):
                _put(above, offset + left + width // 2 + i, "-")
        else:
            for i in range(left + width):
                _put(above, offset - width // 2 + i, "-")
        _put(above, offset + left + width // 2, ".")
    return left + width + right


def _render(root: Any, label: Callable[[Any], str]) -> str:
    if root is None:
        return ""
    rows: list[list[str]] = [[] for _ in range(_height(root) + 1)]
    _layout(root, 0, 0, rows, label)
    lines = []
    for row in rows:
        line = "".join(row).rstrip(" ")
        lines.append(line.ljust(2))
    return "\n".join(lines) + "\n"


def format_binary_tree(root: Any, format_data: Callable[[Any], str]) -> str:
    """Draw the tree under ``root``; ``format_data`` turns a node's data into text."""
    return _render(root, lambda node: format_data(node.data))


def format_rb_tree(tree: Optional[RBNode]) -> str:
    """Draw a red-black tree, each node as ``R(nnn)`` or ``B(nnn)``."""
    return _render(
        tree,
        lambda node: f"{'R' if node.color == RBColor.RED else 'B'}({node.n:03d})",
    )