import pytest

from algolab.networks import UndirectedNetwork
from algolab.spanning_tree import DisconnectedError, SpanEdge, kruskal, prim

EDGES = [(0, 1, 34), (0, 2, 46), (0, 5, 19), (2, 5, 25), (1, 4, 12),
         (5, 4, 26), (5, 3, 25), (2, 3, 17), (3, 4, 38)]


def _sample():
    network = UndirectedNetwork("ABCDEF")
    for a, b, w in EDGES:
        network.insert_arc(a, b, w)
    return network


def _spans_all(edges, vertices):
    reached = {vertices[0]}
    changed = True
    while changed:
        changed = False
        for e in edges:
            if (e.first in reached) != (e.second in reached):
                reached |= {e.first, e.second}
                changed = True
    return reached == set(vertices)


def _total(edges):
    return sum(e.weight for e in edges)


def test_kruskal_tree_size_and_span():
    tree = kruskal(_sample())
    assert len(tree) == 5
    assert _spans_all(tree, "ABCDEF")


def test_kruskal_weights_non_decreasing():
    weights = [e.weight for e in kruskal(_sample())]
    assert weights == sorted(weights)


def test_kruskal_first_edge_is_lightest():
    assert kruskal(_sample())[0] == SpanEdge("B", "E", 12)


def test_prim_starts_with_lightest_edge_from_start():
    tree = prim(_sample())
    assert tree[0] == SpanEdge("A", "F", 19)
    assert len(tree) == 5
    assert _spans_all(tree, "ABCDEF")


def test_prim_and_kruskal_agree_on_total():
    network = _sample()
    assert _total(prim(network)) == _total(kruskal(network))


def test_prim_total_independent_of_start():
    network = _sample()
    totals = {_total(prim(network, start)) for start in range(6)}
    assert len(totals) == 1


def test_tree_edges_are_network_edges():
    network = _sample()
    names = "ABCDEF"
    for edge in prim(network) + kruskal(network):
        i, j = names.index(edge.first), names.index(edge.second)
        assert network.weight(i, j) == edge.weight


def test_disconnected_network_raises():
    network = UndirectedNetwork("ABCD")
    network.insert_arc(0, 1, 3)
    network.insert_arc(2, 3, 4)
    with pytest.raises(DisconnectedError):
        kruskal(network)
    with pytest.raises(DisconnectedError) as info:
        prim(network)
    assert info.value.edges == [SpanEdge("A", "B", 3)]


def test_single_vertex_has_empty_tree():
    network = UndirectedNetwork("A")
    assert kruskal(network) == []
    assert prim(network) == []


def test_prim_rejects_bad_start():
    with pytest.raises(IndexError):
        prim(_sample(), 9)


def test_span_edges_order_by_weight():
    assert SpanEdge("X", "Y", 1) < SpanEdge("A", "B", 2)
    assert not SpanEdge("A", "B", 2) < SpanEdge("X", "Y", 2)