import pytest

from dspractice.core import MAX_WEIGHT, Edge
from dspractice.matrixgraph import AdjMatrixGraph

VERTICES = "ABCDE"
UNDIRECTED = [
    Edge(0, 1, 5), Edge(0, 3, 2), Edge(1, 0, 5), Edge(1, 2, 7), Edge(1, 3, 6),
    Edge(2, 1, 7), Edge(2, 3, 8), Edge(2, 4, 3), Edge(3, 0, 2), Edge(3, 1, 6),
    Edge(3, 2, 8), Edge(3, 4, 9), Edge(4, 2, 3), Edge(4, 3, 9),
]


@pytest.fixture
def graph():
    return AdjMatrixGraph(VERTICES, UNDIRECTED)


def test_vertices_and_weights(graph):
    assert graph.vertex_count() == 5
    assert [graph.vertex(i) for i in range(5)] == list(VERTICES)
    for edge in UNDIRECTED:
        assert graph.weight(edge.start, edge.dest) == edge.weight
    assert graph.weight(0, 2) == MAX_WEIGHT
    assert graph.weight(1, 1) == 0


def test_neighbors(graph):
    assert graph.first_neighbor(0) == 1
    assert graph.next_neighbor(0, 1) == 3
    assert graph.next_neighbor(0, 3) is None
    assert graph.next_neighbor(2, 2) is None


def test_dfs_single_component(graph):
    result = graph.dfs(0)
    assert len(result) == 1
    assert result[0][0] == "A"
    assert sorted(result[0]) == list(VERTICES)


def test_insert_edge_duplicate_and_invalid(graph):
    assert graph.insert_edge(0, 1, 42) is False
    assert graph.weight(0, 1) == 5
    with pytest.raises(IndexError):
        graph.insert_edge(0, 9, 1)
    with pytest.raises(ValueError):
        graph.insert_edge(2, 2, 1)


def test_remove_edge(graph):
    assert graph.remove_edge(0, 1) is True
    assert graph.weight(0, 1) == MAX_WEIGHT
    assert graph.remove_edge(0, 1) is False


def test_remove_vertex_shifts(graph):
    assert graph.remove_vertex(2) == "C"
    assert graph.vertex_count() == 4
    assert [graph.vertex(i) for i in range(4)] == ["A", "B", "D", "E"]
    assert graph.weight(2, 3) == 9
    assert graph.weight(0, 2) == 2
    assert graph.remove_edge(2, 3) and graph.remove_edge(3, 2)
    graph.insert_vertex("F")
    assert graph.weight(4, 0) == MAX_WEIGHT
    assert graph.weight(4, 4) == 0
    with pytest.raises(IndexError):
        graph.remove_vertex(7)


def test_grows_past_capacity():
    g = AdjMatrixGraph(range(15))
    assert g.vertex_count() == 15
    assert g.insert_edge(0, 14, 20)
    assert g.weight(0, 14) == 20
    assert g.weight(14, 0) == MAX_WEIGHT
    assert g.weight(14, 14) == 0


def test_prim(graph):
    mst = graph.min_span_tree_prim()
    assert len(mst) == graph.vertex_count() - 1
    assert sorted(e.dest for e in mst) == [1, 2, 3, 4]
    for edge in mst:
        assert graph.weight(edge.start, edge.dest) == edge.weight
    assert sum(e.weight for e in mst) == 17


def test_prim_trivial():
    assert AdjMatrixGraph("A").min_span_tree_prim() == []


def test_str(graph):
    text = str(graph)
    lines = text.splitlines()
    assert lines[0] == "A,B,C,D,E"
    assert len(lines) == 6
    assert lines[1].split() == ["0", "5", "*", "2", "*"]