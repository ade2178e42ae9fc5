"""Directed graph of integer vertices and a reachability check."""

from __future__ import annotations

from collections import deque

__all__ = ["Digraph", "path_exists"]


class Digraph:
    """Oriented graph; arcs go from a start vertex to an end vertex."""

    def __init__(self) -> None:
        self._arcs: dict[int, set[int]] = {}

    def add_vertex(self, vertex: int) -> None:
        """Add a single vertex; an existing vertex is left alone."""
        self._arcs.setdefault(vertex, set())

    def add_arc(self, start_vertex: int, end_vertex: int) -> None:
        """Add both vertices if needed and an arc from start to end."""
        self.add_vertex(start_vertex)
        self.add_vertex(end_vertex)
        self._arcs[start_vertex].add(end_vertex)

    def vertices(self) -> list[int]:
        """Return all vertices in ascending order."""
        return sorted(self._arcs)

    def adjacent_vertices(self, vertex: int) -> list[int]:
        """Return the vertices reached by arcs from the vertex, in ascending order."""
        return sorted(self._arcs.get(vertex, ()))

    def has_vertex(self, vertex: int) -> bool:
        """Return True if the vertex is in the graph."""
        return vertex in self._arcs

    def has_arc(self, start_vertex: int, end_vertex: int) -> bool:
        """Return True if both vertices exist and an arc joins them."""
        if not self.has_vertex(start_vertex) or not self.has_vertex(end_vertex):
            return False
        return end_vertex in self._arcs[start_vertex]

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._arcs

    def __len__(self) -> int:
        return len(self._arcs)


def path_exists(graph: Digraph, start_vertex: int, end_vertex: int) -> bool:
    """Return True if both vertices are in the graph and end is reachable from start.

    A vertex always reaches itself.
    """
    if not graph.has_vertex(start_vertex) or not graph.has_vertex(end_vertex):
        return False
    seen = {start_vertex}
    queue = deque([start_vertex])
    while queue:
        vertex = queue.popleft()
        if vertex == end_vertex:
            return True
        for neighbour in graph.adjacent_vertices(vertex):
            if neighbour not in seen:
                seen.add(neighbour)
                queue.append(neighbour)
    return False