import pytest

from algolab.weighted_graph import WeightedGraph
from algolab.weighted_path import build_path, shortest_path


def test_empty_graph():
    assert shortest_path(WeightedGraph(), 0, 1) == []


def test_single_vertex_path():
    g = WeightedGraph([(0, 1, 2.5), (0, 2, 3.0)])
    assert shortest_path(g, 0, 0) == []


def test_one_edge():
    g = WeightedGraph([(0, 1, 2.5)])
    assert shortest_path(g, 0, 1) == [0, 1]


def test_two_edges():
    g = WeightedGraph([(0, 1, 2.5), (0, 2, 1.0)])
    assert shortest_path(g, 0, 1) == [0, 1]


def test_three_edges():
    g = WeightedGraph([(0, 1, 2.5), (0, 2, 1.0), (2, 1, 0.7)])
    assert shortest_path(g, 0, 1) == [0, 2, 1]


def test_many_edges():
    g = WeightedGraph([
        (0, 1, 3.0), (1, 2, 0.5), (2, 3, 0.5), (3, 4, 1.0),
        (0, 2, 2.0), (0, 4, 5.0), (1, 3, 2.0), (2, 4, 2.0),
    ])
    assert shortest_path(g, 0, 4) == [0, 2, 3, 4]
    assert shortest_path(g, 4, 0) == [4, 3, 2, 0]
    assert shortest_path(g, 1, 4) == [1, 2, 3, 4]


def test_unreachable_vertex():
    g = WeightedGraph([(0, 1, 2.5), (1, 2, 1.0), (0, 2, 1.0), (3, 4, 0.7)])
    assert shortest_path(g, 0, 4) == []
    assert shortest_path(g, 3, 0) == []


def test_missing_vertex():
    g = WeightedGraph([(0, 1, 2.5)])
    assert shortest_path(g, 0, 10) == []
    assert shortest_path(g, 10, 0) == []


def test_build_path_follows_parents():
    assert build_path({1: 0, 2: 1, 3: 2}, 0, 3) == [0, 1, 2, 3]


def test_build_path_same_vertex_is_empty():
    assert build_path({}, 4, 4) == []


def test_build_path_broken_chain_raises():
    with pytest.raises(ValueError):
        build_path({3: 2}, 0, 3)