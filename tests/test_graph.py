import pytest

from algolab.graph import DirectedGraph, main


def _sample():
    graph = DirectedGraph("ABC")
    for source, target in ((0, 2), (0, 1), (1, 2), (2, 1)):
        graph.insert_arc(source, target)
    return graph


def test_new_arcs_go_to_front():
    graph = DirectedGraph("ABC")
    graph.insert_arc(0, 2)
    graph.insert_arc(0, 1)
    assert graph.neighbors(0) == [1, 2]
    assert graph.first_adjacent(0) == 1
    assert graph.next_adjacent(0, 1) == 2
    assert graph.next_adjacent(0, 2) is None
    assert graph.first_adjacent(1) is None


def test_counts():
    graph = _sample()
    assert graph.vertex_count() == 3
    assert graph.arc_count() == 4
    assert not graph.is_empty()
    assert DirectedGraph().is_empty()


def test_insert_arc_errors():
    graph = DirectedGraph("AB")
    with pytest.raises(IndexError):
        graph.insert_arc(0, 5)
    with pytest.raises(IndexError):
        graph.insert_arc(-1, 0)
    with pytest.raises(ValueError):
        graph.insert_arc(1, 1)


def test_insert_vertex_and_capacity():
    graph = DirectedGraph("A", capacity=2)
    graph.insert_vertex("B")
    assert graph.index_of("B") == 1
    with pytest.raises(OverflowError):
        graph.insert_vertex("C")
    with pytest.raises(ValueError):
        DirectedGraph("ABC", capacity=2)


def test_index_of_missing():
    with pytest.raises(ValueError):
        _sample().index_of("Z")


def test_delete_arc():
    graph = _sample()
    assert graph.delete_arc(0, 1) is True
    assert graph.neighbors(0) == [2]
    assert graph.delete_arc(0, 1) is False
    assert graph.arc_count() == 3


def test_delete_vertex_moves_last_into_place():
    graph = DirectedGraph("ABCD")
    for source, target in ((0, 1), (1, 3), (3, 0), (2, 3)):
        graph.insert_arc(source, target)
    graph.delete_vertex("B")
    assert list(graph) == ["A", "D", "C"]
    assert graph.arc_count() == 2
    names = lambda v: [graph.vertex(i) for i in graph.neighbors(graph.index_of(v))]
    assert names("A") == []
    assert names("D") == ["A"]
    assert names("C") == ["D"]
    with pytest.raises(ValueError):
        graph.delete_vertex("B")


def test_delete_last_vertex():
    graph = _sample()
    graph.delete_vertex("C")
    assert list(graph) == ["A", "B"]
    assert graph.neighbors(0) == [1]
    assert graph.neighbors(1) == []


def test_in_degrees_match_arcs():
    graph = _sample()
    degrees = graph.in_degrees()
    assert sum(degrees) == graph.arc_count()
    assert degrees[0] == 0


def test_clear_keeps_vertices():
    graph = _sample()
    graph.clear()
    assert graph.arc_count() == 0
    assert graph.vertex_count() == 3


def test_render():
    graph = DirectedGraph("AB")
    graph.insert_arc(0, 1)
    assert graph.render() == "该有向图共2个顶点,1条弧\nA的邻接顶点为: B \nB的邻接顶点为: 无\n"


def test_main_applies_commands(tmp_path, capsys):
    script = tmp_path / "commands.txt"
    script.write_text("2 D\n3 A D\n1\n0\n", encoding="utf-8")
    assert main([str(script)]) == 0
    expected = _sample()
    expected.insert_vertex("D")
    expected.insert_arc(0, 3)
    assert expected.render() in capsys.readouterr().out