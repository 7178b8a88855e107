"""Huffman tree construction and code generation on top of the linked min-heap."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional

from treegraph.heap import BinaryTreeNode, Heap


@dataclass
class Symbol:
    """A character and its frequency; internal tree nodes carry no character."""

    data: Optional[str]
    freq: int


def _symbol_cmp(first: BinaryTreeNode, second: BinaryTreeNode) -> int:
    return first.data.freq - second.data.freq


def huffman_priority_queue(data: Iterable[str], freq: Iterable[int]) -> Heap:
    """Build a min-heap of leaf nodes, one per character, ordered by frequency."""
    symbols = list(data)
    weights = list(freq)
    if not symbols or not weights:
        raise ValueError("data and frequencies must not be empty")
    if len(symbols) != len(weights):
        raise ValueError("data and frequencies must have the same length")
    queue = Heap(_symbol_cmp)
    for char, weight in zip(symbols, weights):
        queue.insert(BinaryTreeNode(Symbol(char, weight)))
    return queue


def huffman_extract_and_insert(priority_queue: Heap) -> None:
    """Merge the two least frequent nodes into one and put it back in the queue."""
    if len(priority_queue) < 2:
        raise ValueError("the priority queue needs at least two nodes")
    first = priority_queue.extract()
    second = priority_queue.extract()
    merged = BinaryTreeNode(
        Symbol(None, first.data.freq + second.data.freq),
        left=first,
        right=second,
    )
    first.parent = merged
    second.parent = merged
    priority_queue.insert(merged)


def huffman_tree(data: Iterable[str], freq: Iterable[int]) -> BinaryTreeNode:
    """Build the Huffman tree and return its root node."""
    queue = huffman_priority_queue(data, freq)
    while len(queue) > 1:
        huffman_extract_and_insert(queue)
    root = queue.root.data
    queue.clear()
    return root


def _walk_codes(node: BinaryTreeNode, prefix: str) -> Iterator[tuple[str, str]]:
    if node.left is not None:
        yield from _walk_codes(node.left, prefix + "0")
    if node.right is not None:
        yield from _walk_codes(node.right, prefix + "1")
    char = node.data.data
    if char is not None and char != "\0":
        # A lone symbol sits at the root and still gets a one-bit code.
        yield char, prefix or "1"


def _code_pairs(data: Iterable[str], freq: Iterable[int]) -> Iterator[tuple[str, str]]:
    symbols = list(data)
    weights = list(freq)
    if not symbols or not weights:
        return iter(())
    return _walk_codes(huffman_tree(symbols, weights), "")


def huffman_codes(data: Iterable[str], freq: Iterable[int]) -> dict[str, str]:
    """Map each character to its Huffman code, in tree traversal order."""
    return dict(_code_pairs(data, freq))


def format_huffman_codes(data: Iterable[str], freq: Iterable[int]) -> str:
    """Render the codes as ``char: code`` lines."""
    return "".join(f"{char}: {code}\n" for char, code in _code_pairs(data, freq))