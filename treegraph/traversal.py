"""Depth-first and breadth-first traversal starting at a graph's first vertex."""

from __future__ import annotations

from collections import deque
from typing import Callable, Iterator, Optional

from treegraph.graph import Graph, Vertex

Action = Callable[[Vertex, int], None]


def _first_vertex(graph: Optional[Graph]) -> Optional[Vertex]:
    if graph is None:
        return None
    return next(iter(graph), None)


def depth_first_traverse(graph: Optional[Graph], action: Optional[Action]) -> int:
    """Visit vertices depth first from the first vertex.

    ``action`` is called with each vertex and its depth. Returns the greatest
    depth reached, or 0 when there is nothing to traverse.
    """
    start = _first_vertex(graph)
    if start is None:
        return 0

    visited: set[int] = set()
    max_depth = 0
    stack: list[tuple[Iterator[Vertex], int]] = []

    def visit(vertex: Vertex, depth: int) -> None:
        nonlocal max_depth
        if action is not None:
            action(vertex, depth)
        max_depth = max(max_depth, depth)
        visited.add(vertex.index)
        stack.append((iter(vertex.edges), depth))

    visit(start, 0)
    while stack:
        edges, depth = stack[-1]
        for dest in edges:
            if dest.index not in visited:
                visit(dest, depth + 1)
                break
        else:
            stack.pop()
    return max_depth


def breadth_first_traverse(graph: Optional[Graph], action: Optional[Action]) -> int:
    """Visit vertices breadth first from the first vertex.

    ``action`` is called with each vertex and its level. Returns the greatest
    level reached, or 0 when there is nothing to traverse.
    """
    start = _first_vertex(graph)
    if start is None:
        return 0

    seen = {start.index}
    queue: deque[tuple[Vertex, int]] = deque([(start, 0)])
    max_level = 0
    while queue:
        vertex, level = queue.popleft()
        if action is not None:
            action(vertex, level)
        max_level = max(max_level, level)
        for dest in vertex.edges:
            if dest.index not in seen:
                seen.add(dest.index)
                queue.append((dest, level + 1))
    return max_level