import pytest

from algolab.mst import min_spanning_tree
from algolab.weighted_graph import WeightedGraph


def _to_set(edges):
    return {(a, b) if a <= b else (b, a) for a, b in edges}


def test_empty_graph():
    assert _to_set(min_spanning_tree(WeightedGraph())) == set()


def test_single_vertex_graph():
    g = WeightedGraph()
    g.add_vertex(0)
    assert _to_set(min_spanning_tree(g)) == set()


def test_one_edge():
    g = WeightedGraph([(0, 1, 2.5)])
    assert _to_set(min_spanning_tree(g)) == {(0, 1)}


def test_two_edges():
    g = WeightedGraph([(0, 1, 2.5), (1, 2, 1.0)])
    assert _to_set(min_spanning_tree(g)) == {(0, 1), (1, 2)}


def test_three_edges():
    g = WeightedGraph([(0, 1, 2.5), (1, 2, 1.0), (0, 2, 0.7)])
    assert _to_set(min_spanning_tree(g)) == {(0, 2), (1, 2)}


def test_many_edges():
    g = WeightedGraph([
        (0, 1, 4.0), (0, 7, 9.0),
        (1, 2, 8.0), (1, 7, 11.0),
        (2, 3, 7.0), (2, 5, 4.0), (2, 8, 2.0),
        (3, 4, 9.0), (3, 5, 14.0),
        (4, 5, 10.0),
        (5, 6, 2.0),
        (6, 7, 1.0), (6, 8, 6.0),
        (7, 8, 7.0),
    ])
    assert _to_set(min_spanning_tree(g)) == {
        (0, 1), (1, 2), (2, 3), (3, 4), (2, 5), (2, 8), (5, 6), (6, 7)
    }


def test_chain_graph_keeps_every_edge():
    size = 50
    g = WeightedGraph([(i, i + 1, float(size - i)) for i in range(size - 1)])
    tree = min_spanning_tree(g)
    assert len(tree) == size - 1
    assert _to_set(tree) == {(i, i + 1) for i in range(size - 1)}


def test_other_start_vertex_gives_same_tree():
    g = WeightedGraph([(0, 1, 2.5), (1, 2, 1.0), (0, 2, 0.7)])
    assert _to_set(min_spanning_tree(g, 2)) == {(0, 2), (1, 2)}


def test_disconnected_graph_raises():
    g = WeightedGraph([(0, 1, 1.0), (2, 3, 1.0)])
    with pytest.raises(ValueError):
        min_spanning_tree(g)


def test_missing_start_vertex_raises():
    g = WeightedGraph([(1, 2, 1.0)])
    with pytest.raises(ValueError):
        min_spanning_tree(g, 0)