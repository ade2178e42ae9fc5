import pytest

from algolab.digraph import Digraph, path_exists


def build(*arcs):
    graph = Digraph()
    for start, end in arcs:
        graph.add_arc(start, end)
    return graph


def test_empty_graph():
    g = Digraph()
    assert not g.has_vertex(0)
    assert not g.has_arc(0, 1)


def test_one_vertex():
    g = Digraph()
    g.add_vertex(0)
    assert g.has_vertex(0)
    assert not g.has_vertex(1)
    assert not g.has_arc(0, 1)


def test_two_vertices():
    g = Digraph()
    g.add_vertex(0)
    g.add_vertex(1)
    assert g.has_vertex(0)
    assert g.has_vertex(1)
    assert not g.has_arc(0, 1)


def test_arc():
    g = build((0, 1))
    assert g.has_vertex(0)
    assert g.has_vertex(1)
    assert g.has_arc(0, 1)
    assert not g.has_arc(1, 0)
    assert not g.has_arc(0, 0)


def test_loop():
    g = build((0, 0), (1, 1))
    assert g.has_vertex(0)
    assert g.has_vertex(1)
    assert g.has_arc(0, 0)
    assert g.has_arc(1, 1)


def test_two_arcs():
    g = build((0, 1), (0, 3))
    assert g.has_vertex(0) and g.has_vertex(1) and g.has_vertex(3)
    assert g.has_arc(0, 1)
    assert g.has_arc(0, 3)
    assert not g.has_arc(1, 0)
    assert not g.has_arc(3, 0)
    assert not g.has_arc(1, 3)


def test_get_vertices():
    g = Digraph()
    g.add_vertex(0)
    g.add_arc(0, 1)
    g.add_vertex(3)
    assert set(g.vertices()) == {0, 1, 3}


def test_get_adjacent_vertices():
    g = Digraph()
    g.add_vertex(0)
    g.add_arc(0, 1)
    g.add_arc(1, 2)
    g.add_arc(1, 3)
    g.add_arc(0, 2)
    g.add_vertex(3)
    g.add_arc(3, 1)
    assert set(g.adjacent_vertices(0)) == {1, 2}
    assert set(g.adjacent_vertices(1)) == {2, 3}
    assert set(g.adjacent_vertices(2)) == set()
    assert set(g.adjacent_vertices(3)) == {1}
    assert set(g.adjacent_vertices(4)) == set()


def test_path_empty_graph():
    assert not path_exists(Digraph(), 0, 1)


def test_path_singleton_graph():
    g = Digraph()
    g.add_vertex(0)
    assert path_exists(g, 0, 0)


def test_path_singleton_with_loop():
    g = Digraph()
    g.add_vertex(0)
    g.add_arc(0, 0)
    assert path_exists(g, 0, 0)


def test_path_two_vertices_without_arc():
    g = Digraph()
    g.add_vertex(0)
    g.add_vertex(1)
    assert not path_exists(g, 0, 1)


def test_path_two_vertices_with_arc():
    g = build((0, 1))
    assert path_exists(g, 0, 1)
    assert not path_exists(g, 1, 0)


def test_path_several_vertices():
    g = build((0, 1), (1, 2), (2, 3), (0, 3))
    assert path_exists(g, 0, 3)
    assert path_exists(g, 1, 1)
    assert path_exists(g, 1, 3)
    assert not path_exists(g, 3, 0)
    assert not path_exists(g, 3, 1)


def test_path_disconnected_graph():
    g = build((0, 1), (1, 2), (2, 3), (0, 3), (4, 5), (5, 6))
    g.add_vertex(7)
    assert path_exists(g, 1, 3)
    assert not path_exists(g, 0, 5)
    assert not path_exists(g, 1, 7)
    assert not path_exists(g, 5, 7)


def test_path_non_existing_vertices():
    g = build((0, 1), (1, 2), (2, 3), (2, 4), (3, 5))
    assert not path_exists(g, 0, 7)
    assert not path_exists(g, 6, 2)
    assert not path_exists(g, 6, 8)


def test_path_graph_with_loops():
    g = build((0, 1), (1, 2), (2, 3), (3, 1), (3, 5), (5, 3), (5, 6), (6, 5), (0, 7))
    assert path_exists(g, 0, 5)
    assert path_exists(g, 0, 6)
    assert path_exists(g, 1, 3)
    assert path_exists(g, 2, 1)
    assert path_exists(g, 6, 1)
    assert path_exists(g, 6, 2)
    assert not path_exists(g, 5, 0)
    assert not path_exists(g, 6, 7)


def test_path_negative_vertices():
    g = build((-1, -999), (-1, -2), (-2, 0), (0, 999))
    assert path_exists(g, -1, -999)
    assert path_exists(g, -1, 999)
    assert not path_exists(g, -999, 999)


@pytest.mark.parametrize(
    "start, end",
    [(0, 0), (0, 6), (1, 0), (2, 0), (5, 0), (4, 1), (2, 4)],
)
def test_path_graph_with_many_loops(start, end):
    g = build(
        (0, 1), (1, 2), (1, 3), (1, 4), (2, 0), (3, 0),
        (2, 5), (3, 5), (4, 5), (5, 6), (6, 0),
    )
    assert path_exists(g, start, end)