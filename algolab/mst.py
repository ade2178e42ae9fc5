"""Minimum spanning tree of a weighted graph."""

from __future__ import annotations

import heapq
import math

from algolab.weighted_graph import WeightedGraph

__all__ = ["min_spanning_tree"]


def min_spanning_tree(graph: WeightedGraph, start_vertex: int = 0) -> list[tuple[int, int]]:
    """Return a minimum spanning tree of a connected graph as (vertex, parent) edges.

    The tree is grown from ``start_vertex``; edges come in ascending order of
    the child vertex. An empty graph gives an empty list. Raises ValueError
    when the start vertex is missing or the graph is not connected.
    """
    vertices = graph.vertices()
    if not vertices:
        return []
    if not graph.has_vertex(start_vertex):
        raise ValueError(f"vertex {start_vertex} is not in the graph")

    best = {start_vertex: 0.0}
    parent: dict[int, int] = {}
    done: set[int] = set()
    heap = [(0.0, start_vertex)]
    while heap:
        _, vertex = heapq.heappop(heap)
        if vertex in done:
            continue
        done.add(vertex)
        for neighbour, weight in graph.adjacent_edges(vertex):
            if neighbour not in done and weight < best.get(neighbour, math.inf):
                best[neighbour] = weight
                parent[neighbour] = vertex
                heapq.heappush(heap, (weight, neighbour))

    if len(done) != len(vertices):
        raise ValueError("graph is not connected")
    return [(vertex, parent[vertex]) for vertex in vertices if vertex != start_vertex]