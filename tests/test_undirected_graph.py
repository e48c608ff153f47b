import pytest

from algolab.undirected_graph import UndirectedGraph

SAMPLE_EDGES = [
    (0, 1), (0, 4), (0, 3), (1, 2), (1, 4), (2, 4),
    (4, 5), (5, 8), (4, 6), (6, 7), (3, 6), (9, 10),
]

SAMPLE_BFS = [["A", "D", "E", "B", "G", "F", "C", "H", "I"], ["J", "K"]]
SAMPLE_DFS = [["A", "D", "G", "H", "E", "F", "I", "C", "B"], ["J", "K"]]


def _sample():
    graph = UndirectedGraph("ABCDEFGHIJK", 11)
    for first, second in SAMPLE_EDGES:
        graph.insert_arc(first, second)
    return graph


def test_edges_are_symmetric():
    graph = _sample()
    for first, second in SAMPLE_EDGES:
        assert second in graph.neighbors(first)
        assert first in graph.neighbors(second)


def test_render():
    graph = UndirectedGraph("AB")
    graph.insert_arc(0, 1)
    assert graph.render() == "A: 1 \nB: 0 \n"


def test_traversal_order_follows_front_insertion():
    graph = UndirectedGraph("ABC")
    graph.insert_arc(0, 1)
    graph.insert_arc(0, 2)
    assert graph.dfs() == [["A", "C", "B"]]
    assert graph.bfs() == [["A", "C", "B"]]


@pytest.mark.parametrize("method", ["dfs", "bfs"])
def test_components_partition_vertices(method):
    components = getattr(_sample(), method)()
    assert len(components) == 2
    assert set(components[1]) == {"J", "K"}
    flat = [v for component in components for v in component]
    assert sorted(flat) == list("ABCDEFGHIJK")
    assert [component[0] for component in components] == ["A", "J"]


def test_traversals_are_repeatable():
    graph = _sample()
    assert graph.bfs() == SAMPLE_BFS
    assert graph.bfs() == SAMPLE_BFS
    assert graph.dfs() == SAMPLE_DFS
    assert graph.dfs() == SAMPLE_DFS


def test_bfs_visits_neighbours_before_farther_vertices():
    graph = _sample()
    order = graph.bfs()[0]
    first_ring = {"ABCDEFGHIJK"[i] for i in graph.neighbors(0)}
    assert set(order[1 : 1 + len(first_ring)]) == first_ring


def test_errors():
    graph = UndirectedGraph("AB")
    with pytest.raises(IndexError):
        graph.insert_arc(0, 2)
    with pytest.raises(ValueError):
        graph.insert_arc(1, 1)
    with pytest.raises(ValueError):
        UndirectedGraph("ABC", capacity=2)


def test_empty_graph_has_no_components():
    graph = UndirectedGraph()
    assert graph.dfs() == []
    assert graph.capacity == 4