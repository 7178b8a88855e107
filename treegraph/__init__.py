"""Graphs and their traversals, a linked binary min-heap, tree printing and Huffman coding."""

__version__ = "0.1.0"
__all__ = ["graph", "traversal", "heap", "treeprint", "huffman", "cli"]