import io

import pytest

from routefinder.graph import EdgeError, Graph, VertexError


def _chain():
    g = Graph()
    g.add_vertex(1)
    g.add_vertex(2)
    g.add_vertex(3)
    g.add_edge(1, 2)
    g.add_edge(2, 3)
    return g


def test_default_constructor_has_no_edges():
    g = Graph()
    g.add_vertex(1)
    assert not g.edge_in(1, 2)


def test_add_edge_is_directed():
    g = Graph()
    g.add_vertex(1)
    g.add_vertex(2)
    g.add_edge(1, 2)
    assert g.edge_in(1, 2)
    assert not g.edge_in(2, 1)


def test_add_edge_grows_graph():
    g = Graph()
    g.add_edge(1, 4)
    assert g.edge_in(1, 4)
    with pytest.raises(VertexError):
        g.add_vertex(4)


def test_add_edge_rejects_non_positive_vertex():
    with pytest.raises(EdgeError):
        Graph(2).add_edge(0, 1)


def test_remove_edge():
    g = Graph()
    g.add_vertex(1)
    g.add_vertex(2)
    g.add_edge(1, 2)
    g.remove_edge(1, 2)
    assert not g.edge_in(1, 2)
    with pytest.raises(EdgeError):
        g.remove_edge(1, 2)


def test_remove_edge_unknown_vertex():
    with pytest.raises(EdgeError):
        Graph(2).remove_edge(5, 1)


def test_add_duplicate_vertex_raises():
    g = Graph()
    g.add_vertex(1)
    with pytest.raises(VertexError) as info:
        g.add_vertex(1)
    assert info.value.vertex == 1
    assert str(info.value) == "Vertex 1 in the graph."


def test_delete_vertex_removes_edges():
    g = Graph()
    g.add_vertex(1)
    g.add_vertex(2)
    g.add_edge(1, 2)
    g.add_edge(2, 1)
    g.delete_vertex(2)
    assert not g.edge_in(1, 2)
    assert not g.edge_in(2, 1)
    with pytest.raises(EdgeError):
        g.delete_vertex(3)


def test_edge_error_message():
    with pytest.raises(EdgeError, match="Edge/Vertex does not exist in the graph."):
        Graph(1).delete_vertex(2)


def test_breadth_first_search_distances():
    result = _chain().breadth_first_search(1)
    assert result[1][0] == 0
    assert result[2][0] == 1
    assert result[3][0] == 2
    assert result[1][1] == -1
    assert result[3][1] == 2


def test_breadth_first_search_only_reachable():
    g = _chain()
    result = g.breadth_first_search(2)
    assert set(result) == {2, 3}


def test_breadth_first_search_invalid_source():
    with pytest.raises(EdgeError):
        _chain().breadth_first_search(4)


def test_depth_first_search_times_are_consistent():
    g = Graph(5)
    for u, v in [(1, 2), (1, 3), (2, 4), (3, 4), (5, 1)]:
        g.add_edge(u, v)
    result = g.depth_first_search()
    times = sorted(t for d, f, _ in result.values() for t in (d, f))
    assert times == list(range(1, 11))
    for vertex, (d, f, parent) in result.items():
        assert d < f
        if parent != -1:
            pd, pf, _ = result[parent]
            assert pd < d and f < pf


def test_depth_first_search_topological_order():
    g = Graph(6)
    edges = [(1, 2), (1, 3), (2, 4), (3, 4), (4, 5), (6, 5)]
    for u, v in edges:
        g.add_edge(u, v)
    assert g.get_ordering() == []
    g.depth_first_search(sort=True)
    ordering = g.get_ordering()
    assert sorted(ordering) == [1, 2, 3, 4, 5, 6]
    position = {vertex: i for i, vertex in enumerate(ordering)}
    for u, v in edges:
        assert position[u] < position[v]


def test_depth_first_search_without_sort_keeps_ordering():
    g = _chain()
    g.depth_first_search(sort=True)
    before = g.get_ordering()
    g.add_edge(3, 1)
    g.depth_first_search()
    assert g.get_ordering() == before


def test_copy_is_independent():
    g = _chain()
    clone = g.copy()
    clone.remove_edge(1, 2)
    assert g.edge_in(1, 2)
    assert not clone.edge_in(1, 2)


def test_format_adjacency_list():
    g = Graph(2)
    g.add_edge(1, 2)
    assert g.format_adjacency_list() == "1: 2 -> /\n2: /\n"


def test_read_from_stream():
    g = Graph.read(io.StringIO("20 3\n12 1\n7 17\n3 4\n"))
    assert g.edge_in(12, 1)
    assert g.edge_in(7, 17)
    assert not g.edge_in(1, 20)


def test_read_truncated_input():
    with pytest.raises(ValueError):
        Graph.read(io.StringIO("3 2\n1 2\n"))