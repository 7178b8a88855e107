import pytest

from treegraph.graph import EdgeType, Graph
from treegraph.traversal import breadth_first_traverse, depth_first_traverse

CITIES = [
    "San Francisco",
    "Seattle",
    "New York",
    "Miami",
    "Chicago",
    "Houston",
    "Las Vegas",
    "Boston",
    "Los Angeles",
]

EDGES = [
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
]


@pytest.fixture
def cities():
    graph = Graph()
    for city in CITIES:
        graph.add_vertex(city)
    for src, dest, kind in EDGES:
        graph.add_edge(src, dest, kind)
    return graph


def _recorder():
    visits = []

    def action(vertex, depth):
        visits.append((vertex.index, vertex.content, depth))

    return visits, action


def test_depth_first_order(cities):
    visits, action = _recorder()
    depth = depth_first_traverse(cities, action)
    assert visits == [
        (0, "San Francisco", 0),
        (6, "Las Vegas", 1),
        (2, "New York", 2),
        (4, "Chicago", 3),
        (5, "Houston", 3),
        (1, "Seattle", 4),
        (3, "Miami", 5),
        (7, "Boston", 1),
    ]
    assert depth == max(d for _, _, d in visits)


def test_depth_first_skips_unreachable(cities):
    visits, action = _recorder()
    depth = depth_first_traverse(cities, action)
    names = [name for _, name, _ in visits]
    assert depth == 5
    assert "Los Angeles" not in names
    assert len(names) == len(set(names)) == 8


def test_breadth_first_order(cities):
    visits, action = _recorder()
    depth = breadth_first_traverse(cities, action)
    assert visits == [
        (0, "San Francisco", 0),
        (6, "Las Vegas", 1),
        (3, "Miami", 1),
        (7, "Boston", 1),
        (2, "New York", 2),
        (1, "Seattle", 2),
        (4, "Chicago", 3),
        (5, "Houston", 3),
    ]
    assert depth == max(d for _, _, d in visits)


def test_breadth_first_levels_never_decrease(cities):
    visits, action = _recorder()
    depth = breadth_first_traverse(cities, action)
    levels = [d for _, _, d in visits]
    assert levels == sorted(levels)
    assert levels[0] == 0
    assert depth == levels[-1] == 3


def test_breadth_first_depth_not_greater_than_depth_first(cities):
    assert breadth_first_traverse(cities, None) <= depth_first_traverse(cities, None)


@pytest.mark.parametrize("traverse", [depth_first_traverse, breadth_first_traverse])
def test_vertices_without_edges_visit_only_first(traverse):
    graph = Graph()
    for name in ["Abel", "Adrienne", "Alberta"]:
        graph.add_vertex(name)
    visits, action = _recorder()
    assert traverse(graph, action) == 0
    assert visits == [(0, "Abel", 0)]


@pytest.mark.parametrize("traverse", [depth_first_traverse, breadth_first_traverse])
def test_empty_graph_returns_zero(traverse):
    visits, action = _recorder()
    assert traverse(Graph(), action) == 0
    assert visits == []


@pytest.mark.parametrize("traverse", [depth_first_traverse, breadth_first_traverse])
def test_missing_graph_returns_zero(traverse):
    visits, action = _recorder()
    assert traverse(None, action) == 0
    assert visits == []


@pytest.mark.parametrize("traverse", [depth_first_traverse, breadth_first_traverse])
def test_chain_depth_equals_length(traverse):
    graph = Graph()
    names = [f"v{i}" for i in range(50)]
    for name in names:
        graph.add_vertex(name)
    for src, dest in zip(names, names[1:]):
        graph.add_edge(src, dest, EdgeType.UNIDIRECTIONAL)
    visits, action = _recorder()
    assert traverse(graph, action) == len(names) - 1
    assert [d for _, _, d in visits] == list(range(len(names)))


def test_depth_first_handles_long_chain_without_recursion_limit():
    graph = Graph()
    names = [f"n{i}" for i in range(5000)]
    for name in names:
        graph.add_vertex(name)
    for src, dest in zip(names, names[1:]):
        graph.add_edge(src, dest, EdgeType.BIDIRECTIONAL)
    assert depth_first_traverse(graph, None) == len(names) - 1


@pytest.mark.parametrize("traverse", [depth_first_traverse, breadth_first_traverse])
def test_self_loop_visited_once(traverse):
    graph = Graph()
    graph.add_vertex("solo")
    graph.add_edge("solo", "solo", EdgeType.BIDIRECTIONAL)
    visits, action = _recorder()
    assert traverse(graph, action) == 0
    assert visits == [(0, "solo", 0)]