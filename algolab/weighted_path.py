"""Shortest paths in a weighted graph."""

from __future__ import annotations

import heapq
import math
from typing import Mapping

from algolab.weighted_graph import WeightedGraph

__all__ = ["shortest_path", "build_path"]


def shortest_path(graph: WeightedGraph, start_vertex: int, end_vertex: int) -> list[int]:
    """Return the vertices of a lightest path from start to end, both included.

    An empty list means there is no path, a vertex is missing, or start and
    end are the same vertex.
    """
    if not graph.has_vertex(start_vertex) or not graph.has_vertex(end_vertex):
        return []

    distance = {start_vertex: 0.0}
    parent: dict[int, int] = {}
    done: set[int] = set()
    heap = [(0.0, start_vertex)]
    while heap:
        current, vertex = heapq.heappop(heap)
        if vertex in done:
            continue
        if vertex == end_vertex:
            return build_path(parent, start_vertex, end_vertex)
        done.add(vertex)
        for neighbour, weight in graph.adjacent_edges(vertex):
            candidate = current + weight
            if candidate < distance.get(neighbour, math.inf):
                distance[neighbour] = candidate
                parent[neighbour] = vertex
                heapq.heappush(heap, (candidate, neighbour))
    return []


def build_path(parent: Mapping[int, int], start_vertex: int, end_vertex: int) -> list[int]:
    """Follow predecessors back from end to start and return the path in order.

    Returns an empty list when start and end are the same. Raises ValueError
    when the predecessors do not lead back to the start.
    """
    if start_vertex == end_vertex:
        return []
    path = [end_vertex]
    seen = {end_vertex}
    while path[-1] != start_vertex:
        try:
            vertex = parent[path[-1]]
        except KeyError:
            raise ValueError(f"no predecessor for vertex {path[-1]}") from None
        if vertex in seen:
            raise ValueError("predecessors form a cycle")
        seen.add(vertex)
        path.append(vertex)
    path.reverse()
    return path