"""Directed graph stored as an adjacency list of string-labelled vertices."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterator


class GraphError(Exception):
    """Raised when a graph operation cannot be carried out."""


class EdgeType(IntEnum):
    """How two vertices are connected."""

    UNIDIRECTIONAL = 0
    BIDIRECTIONAL = 1


@dataclass(eq=False)
class Vertex:
    """A vertex: its position in the graph, its content and its outgoing edges."""

    index: int
    content: str
    edges: list[Vertex] = field(default_factory=list, repr=False)

    def _connect(self, dest: Vertex) -> bool:
        """Add an edge to ``dest``; return False if it was already there."""
        if any(edge is dest for edge in self.edges):
            return False
        self.edges.append(dest)
        return True


class Graph:
    """A graph whose vertices are identified by unique strings."""

    def __init__(self) -> None:
        self._vertices: dict[str, Vertex] = {}

    def __len__(self) -> int:
        return len(self._vertices)

    def __iter__(self) -> Iterator[Vertex]:
        return iter(self._vertices.values())

    def __contains__(self, content: object) -> bool:
        return content in self._vertices

    def __str__(self) -> str:
        lines = [f"Number of vertices: {len(self)}"]
        for vertex in self:
            line = f"[{vertex.index}] {vertex.content}"
            if vertex.edges:
                line += " ->" + "->".join(str(dest.index) for dest in vertex.edges)
            lines.append(line)
        return "\n".join(lines) + "\n"

    def add_vertex(self, content: str) -> Vertex:
        """Append a new vertex holding ``content`` and return it."""
        if not isinstance(content, str):
            raise GraphError("vertex content must be a string")
        if content in self._vertices:
            raise GraphError(f"vertex {content!r} already exists")
        vertex = Vertex(index=len(self._vertices), content=content)
        self._vertices[content] = vertex
        return vertex

    def vertex(self, content: str) -> Vertex:
        """Return the vertex holding ``content``; raise KeyError if absent."""
        try:
            return self._vertices[content]
        except (KeyError, TypeError):
            raise KeyError(content) from None

    def add_edge(self, src: str, dest: str, edge_type: EdgeType) -> None:
        """Connect ``src`` to ``dest``, and back as well when bidirectional.

        An already existing ``src -> dest`` edge ends the operation at once,
        so no reverse edge is added in that case.
        """
        try:
            kind = EdgeType(edge_type)
        except ValueError:
            raise GraphError(f"invalid edge type {edge_type!r}") from None
        try:
            source = self.vertex(src)
            target = self.vertex(dest)
        except KeyError as exc:
            raise GraphError(f"no vertex {exc.args[0]!r}") from None

        if not source._connect(target):
            return
        if kind is EdgeType.BIDIRECTIONAL:
            target._connect(source)

    def clear(self) -> None:
        """Remove every vertex and edge."""
        for vertex in self._vertices.values():
            vertex.edges.clear()
        self._vertices.clear()

    def display(self) -> None:
        """Print the adjacency list to standard output."""
        print(self, end="")