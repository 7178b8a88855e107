"""Binary min-heap built from linked tree nodes ordered by a comparison function."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Optional

Compare = Callable[[Any, Any], int]


@dataclass(eq=False)
class BinaryTreeNode:
    """A generic binary tree node holding arbitrary data."""

    data: Any = None
    parent: Optional[BinaryTreeNode] = field(default=None, repr=False)
    left: Optional[BinaryTreeNode] = None
    right: Optional[BinaryTreeNode] = None


def _path_to(position: int) -> str:
    """Bits after the most significant one: 0 means left, 1 means right."""
    return format(position, "b")[1:]


class Heap:
    """A complete binary tree kept in min-heap order by ``data_cmp``.

    ``data_cmp(a, b)`` returns a negative number when ``a`` should come
    before ``b``. Without a comparison function no reordering takes place.
    """

    def __init__(self, data_cmp: Optional[Compare]) -> None:
        self.data_cmp = data_cmp
        self.root: Optional[BinaryTreeNode] = None
        self.size = 0

    def __len__(self) -> int:
        return self.size

    def insert(self, data: Any) -> BinaryTreeNode:
        """Add ``data`` at the bottom of the heap, sift it up, return its node."""
        if self.root is None:
            self.root = BinaryTreeNode(data)
            self.size = 1
            return self.root

        parent = self.root
        path = _path_to(self.size + 1)
        for bit in path[:-1]:
            parent = parent.left if bit == "0" else parent.right
        node = BinaryTreeNode(data, parent=parent)
        if path[-1] == "0":
            parent.left = node
        else:
            parent.right = node
        self.size += 1
        if self.data_cmp is not None:
            self._sift_up(node)
        return node

    def _sift_up(self, node: BinaryTreeNode) -> None:
        current = node
        while current.parent is not None:
            parent = current.parent
            if current.data is None or (
                parent.data is not None and self.data_cmp(current.data, parent.data) < 0
            ):
                current.data, parent.data = parent.data, current.data
            current = parent

    def extract(self) -> Any:
        """Remove the root and return its data; raise IndexError when empty."""
        if self.root is None:
            raise IndexError("extract from an empty heap")

        root = self.root
        data = root.data
        if root.left is None and root.right is None:
            self.root = None
            self.size -= 1
            return data

        parent = root
        path = _path_to(self.size)
        for bit in path[:-1]:
            parent = parent.left if bit == "0" else parent.right
        if path[-1] == "0":
            last, parent.left = parent.left, None
        else:
            last, parent.right = parent.right, None
        if last is not None:
            root.data, last.data = last.data, root.data
            last.parent = None
        self.size -= 1
        if self.data_cmp is not None and self.size > 1:
            self._sift_down()
        return data

    def _sift_down(self) -> None:
        cmp = self.data_cmp
        node = self.root
        while node is not None:
            left, right = node.left, node.right
            if (
                node.data is not None
                and left is not None
                and right is not None
                and left.data is not None
                and right.data is not None
            ):
                if cmp(node.data, right.data) >= 0 and cmp(right.data, left.data) < 0:
                    node.data, right.data = right.data, node.data
                    node = right
                elif cmp(node.data, left.data) >= 0:
                    node.data, left.data = left.data, node.data
                    node = left
                else:
                    return
            elif (
                node.data is not None
                and left is not None
                and (left.data is None or cmp(node.data, left.data) >= 0)
            ):
                node.data, left.data = left.data, node.data
                node = left
            elif (
                node.data is not None
                and right is not None
                and (right.data is None or cmp(node.data, right.data) >= 0)
            ):
                node.data, right.data = right.data, node.data
                node = right
            else:
                return

    def clear(self) -> None:
        """Drop every node."""
        stack = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            stack.extend(child for child in (node.left, node.right) if child is not None)
            node.left = node.right = node.parent = None
        self.root = None
        self.size = 0