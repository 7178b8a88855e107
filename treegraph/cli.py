"""Command line demo: build a sample city graph, display and traverse it."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from treegraph.graph import EdgeType, Graph, Vertex
from treegraph.traversal import breadth_first_traverse, depth_first_traverse

_CITIES = (
    "San Francisco",
    "Seattle",
    "New York",
    "Miami",
    "Chicago",
    "Houston",
    "Las Vegas",
    "Boston",
)

_ROUTES = (
    ("San Francisco", "Las Vegas", EdgeType.BIDIRECTIONAL),
    ("Boston", "New York", EdgeType.UNIDIRECTIONAL),
    ("Miami", "San Francisco", EdgeType.BIDIRECTIONAL),
    ("Houston", "Seattle", EdgeType.UNIDIRECTIONAL),
    ("Chicago", "New York", EdgeType.BIDIRECTIONAL),
    ("Las Vegas", "New York", EdgeType.UNIDIRECTIONAL),
    ("Seattle", "Chicago", EdgeType.UNIDIRECTIONAL),
    ("New York", "Houston", EdgeType.BIDIRECTIONAL),
    ("Seattle", "Miami", EdgeType.BIDIRECTIONAL),
    ("San Francisco", "Boston", EdgeType.BIDIRECTIONAL),
)


def build_sample_graph() -> Graph:
    """Return the eight-city graph used by the demo commands."""
    graph = Graph()
    for city in _CITIES:
        graph.add_vertex(city)
    for src, dest, kind in _ROUTES:
        graph.add_edge(src, dest, kind)
    return graph


def _print_vertex(vertex: Vertex, depth: int) -> None:
    print(f"{' ' * (depth * 4)}[{vertex.index}] {vertex.content}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Display the sample graph and optionally traverse it."""
    parser = argparse.ArgumentParser(
        prog="treegraph", description="Display and traverse a sample graph."
    )
    parser.add_argument(
        "command",
        nargs="?",
        choices=("display", "dfs", "bfs"),
        default="display",
        help="what to do with the sample graph",
    )
    args = parser.parse_args(argv)

    graph = build_sample_graph()
    if args.command == "dfs":
        graph.add_vertex("Los Angeles")
    graph.display()
    if args.command == "display":
        return 0

    if args.command == "dfs":
        print("\nDepth First Traversal:")
        depth = depth_first_traverse(graph, _print_vertex)
    else:
        print("\nBreadth First Traversal:")
        depth = breadth_first_traverse(graph, _print_vertex)
    print(f"\nDepth: {depth}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())