"""Travelling salesman tours in a weighted graph."""

from __future__ import annotations

import math
from itertools import permutations
from typing import Sequence

from algolab.weighted_graph import WeightedGraph

__all__ = [
    "tsp",
    "min_path",
    "path_length",
    "lower_bound",
    "bnb",
    "tsp_bnb",
    "native",
    "greedy",
    "transform",
    "check_non_adjacent_pair",
    "two_opt",
    "tsp_local_search",
]

VertexPair = tuple[int, int]


def tsp(graph: WeightedGraph, start_vertex: int) -> list[int]:
    """Return a tour found by branch and bound, or an empty list if there is none."""
    try:
        return tsp_bnb(graph, start_vertex)
    except ValueError:
        return []


def path_length(graph: WeightedGraph, path: Sequence[int]) -> float:
    """Return the total weight of the edges along the path (the path is not closed).

    Raises ValueError when two consecutive vertices are not joined by an edge.
    """
    return sum((graph.edge_weight(a, b) for a, b in zip(path, path[1:])), 0.0)


def min_path(graph: WeightedGraph, first: Sequence[int], second: Sequence[int]) -> list[int]:
    """Return the lighter of two paths; on a tie the second one."""
    if path_length(graph, first) < path_length(graph, second):
        return list(first)
    return list(second)


def _two_lightest(graph: WeightedGraph, vertex: int) -> float:
    lightest = second = math.inf
    for _, weight in graph.adjacent_edges(vertex):
        if weight < second:
            if weight < lightest:
                second, lightest = lightest, weight
            else:
                second = weight
    return lightest + second


def lower_bound(graph: WeightedGraph, visited: Sequence[int]) -> float:
    """Return half the sum, over all vertices, of their two lightest edges.

    Raises ValueError when a visited vertex is not in the graph or repeats.
    """
    remaining = graph.vertices()
    total = 0.0
    for vertex in visited:
        total += _two_lightest(graph, vertex)
        try:
            remaining.remove(vertex)
        except ValueError:
            raise ValueError(f"vertex {vertex} is not an unvisited vertex of the graph") from None
    for vertex in remaining:
        total += _two_lightest(graph, vertex)
    return total / 2


def bnb(graph: WeightedGraph, visited: Sequence[int], best_path: Sequence[int]) -> list[int]:
    """Extend the visited vertices in every way the bound allows; return the best path."""
    vertices = graph.vertices()
    if len(visited) == len(vertices):
        return min_path(graph, best_path, visited)

    best = list(best_path)
    for vertex in (v for v in vertices if v not in visited):
        candidate = [*visited, vertex]
        if lower_bound(graph, candidate) < path_length(graph, best):
            best = min_path(graph, best, bnb(graph, candidate, best))
    return best


def tsp_bnb(graph: WeightedGraph, start_vertex: int) -> list[int]:
    """Solve by branch and bound, starting from ``start_vertex``.

    Returns an empty list for fewer than two vertices. Raises ValueError when
    a path that has to be weighed crosses a missing edge or the start vertex
    is not in the graph.
    """
    vertices = graph.vertices()
    if len(vertices) < 2:
        return []
    return bnb(graph, [start_vertex], vertices)


def native(graph: WeightedGraph, start_vertex: int) -> list[int]:
    """Solve by trying every order of the vertices that begins with ``start_vertex``."""
    vertices = graph.vertices()
    if len(vertices) < 2 or not graph.has_vertex(start_vertex):
        return []

    rest = [vertex for vertex in vertices if vertex != start_vertex]
    result: list[int] = []
    best = math.inf
    for tail in permutations(rest):
        order = (start_vertex, *tail)
        if not graph.has_edge(order[0], order[-1]):
            continue
        if not all(graph.has_edge(a, b) for a, b in zip(order, order[1:])):
            continue
        total = path_length(graph, order)
        if total < best:
            result = list(order)
            best = total
    return result


def greedy(graph: WeightedGraph, start_vertex: int) -> list[int]:
    """Solve by always moving to the nearest unvisited neighbour."""
    vertices = graph.vertices()
    if len(vertices) < 2:
        return []

    current = start_vertex
    path = [current]
    visited = {current}
    while len(path) < len(vertices):
        lightest = math.inf
        following: int | None = None
        for vertex in graph.adjacent_vertices(current):
            if vertex in visited:
                continue
            weight = graph.edge_weight(vertex, current)
            if weight < lightest:
                lightest = weight
                following = vertex
        if following is None:
            return []
        path.append(following)
        visited.add(following)
        current = following

    return path if graph.has_edge(current, start_vertex) else []


def transform(path: Sequence[int], first: int, second: int) -> list[int]:
    """Return a copy of the path with the two vertices swapped.

    Raises ValueError when either vertex is not in the path.
    """
    result = list(path)
    try:
        i, j = result.index(first), result.index(second)
    except ValueError:
        raise ValueError("vertex is not in the path") from None
    result[i], result[j] = result[j], result[i]
    return result


def check_non_adjacent_pair(first_pair: VertexPair, second_pair: VertexPair) -> bool:
    """Return True if the two edges share no vertex."""
    return (
        first_pair[0] != second_pair[0]
        and first_pair[0] != second_pair[1]
        and first_pair[1] != second_pair[0]
        and first_pair[1] != second_pair[1]
    )


def two_opt(graph: WeightedGraph, path: Sequence[int]) -> list[int]:
    """Make one pass of 2-opt exchanges over disjoint consecutive pairs of the path."""
    current = list(path)
    pairs = list(zip(current[::2], current[1::2]))
    for index, (a, b) in enumerate(pairs):
        for c, d in pairs[index + 1:]:
            old_weight = graph.edge_weight(a, b) + graph.edge_weight(c, d)
            new_weight = graph.edge_weight(a, c) + graph.edge_weight(b, d)
            if new_weight < old_weight:
                current = transform(current, b, c)
    return current


def tsp_local_search(graph: WeightedGraph) -> list[int]:
    """Solve by repeated 2-opt from the vertices in ascending order.

    Returns an empty list for fewer than two vertices or when a needed edge
    is missing.
    """
    current = graph.vertices()
    if len(current) < 2:
        return []
    try:
        while True:
            improved = two_opt(graph, current)
            if path_length(graph, improved) < path_length(graph, current):
                current = improved
            else:
                return current
    except ValueError:
        return []