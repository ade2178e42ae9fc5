"""Undirected graph of integer vertices with weighted edges."""

from __future__ import annotations

from typing import Iterable

__all__ = ["WeightedGraph"]


class WeightedGraph:
    """Non-oriented weighted graph; an edge from a vertex to itself is allowed."""

    def __init__(self, edges: Iterable[tuple[int, int, float]] | None = None) -> None:
        self._edges: dict[int, dict[int, float]] = {}
        for start_vertex, end_vertex, weight in edges or ():
            self.add_edge(start_vertex, end_vertex, weight)

    def add_vertex(self, vertex: int) -> None:
        """Add a single vertex; an existing vertex is left alone."""
        self._edges.setdefault(vertex, {})

    def add_edge(self, start_vertex: int, end_vertex: int, weight: float = 1.0) -> None:
        """Add both vertices if needed and an edge between them, replacing any old weight."""
        self.add_vertex(start_vertex)
        self.add_vertex(end_vertex)
        self._edges[start_vertex][end_vertex] = weight
        self._edges[end_vertex][start_vertex] = weight

    def vertices(self) -> list[int]:
        """Return all vertices in ascending order."""
        return sorted(self._edges)

    def adjacent_vertices(self, vertex: int) -> list[int]:
        """Return the neighbours of the vertex in ascending order."""
        return sorted(self._edges.get(vertex, {}))

    def adjacent_edges(self, vertex: int) -> list[tuple[int, float]]:
        """Return (neighbour, weight) pairs of the vertex, by ascending neighbour."""
        return sorted(self._edges.get(vertex, {}).items())

    def has_vertex(self, vertex: int) -> bool:
        """Return True if the vertex is in the graph."""
        return vertex in self._edges

    def has_edge(self, start_vertex: int, end_vertex: int) -> bool:
        """Return True if an edge joins the two vertices."""
        return end_vertex in self._edges.get(start_vertex, {})

    def edge_weight(self, start_vertex: int, end_vertex: int) -> float:
        """Return the weight of the edge; raises ValueError if there is no such edge."""
        try:
            return self._edges[start_vertex][end_vertex]
        except KeyError:
            raise ValueError("Edge doesn't exist") from None

    def remove_vertex(self, vertex: int) -> None:
        """Remove the vertex and every edge that touches it."""
        for neighbour in self.adjacent_vertices(vertex):
            self.remove_edge(neighbour, vertex)
        self._edges.pop(vertex, None)

    def remove_edge(self, start_vertex: int, end_vertex: int) -> None:
        """Remove the edge but keep both vertices."""
        self._edges.get(start_vertex, {}).pop(end_vertex, None)
        self._edges.get(end_vertex, {}).pop(start_vertex, None)

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._edges

    def __len__(self) -> int:
        return len(self._edges)