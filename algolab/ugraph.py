"""Undirected graph of integer vertices: components and shortest paths."""

from __future__ import annotations

import random
import sys
import time
from collections import deque
from typing import Sequence

__all__ = ["Graph", "connected_components", "shortest_path", "random_graph", "main"]


class Graph:
    """Undirected graph without loops."""

    def __init__(self) -> None:
        self._edges: dict[int, set[int]] = {}

    def add_vertex(self, vertex: int) -> None:
        """Add a single vertex; an existing vertex is left alone."""
        self._edges.setdefault(vertex, set())

    def add_edge(self, start_vertex: int, end_vertex: int) -> None:
        """Add both vertices if needed and an edge between them.

        When start and end are the same only the vertex is added.
        """
        self.add_vertex(start_vertex)
        if start_vertex == end_vertex:
            return
        self.add_vertex(end_vertex)
        self._edges[start_vertex].add(end_vertex)
        self._edges[end_vertex].add(start_vertex)

    def vertices(self) -> list[int]:
        """Return all vertices in ascending order."""
        return sorted(self._edges)

    def adjacent_vertices(self, vertex: int) -> list[int]:
        """Return the neighbours of the vertex in ascending order."""
        return sorted(self._edges.get(vertex, ()))

    def has_vertex(self, vertex: int) -> bool:
        """Return True if the vertex is in the graph."""
        return vertex in self._edges

    def has_edge(self, start_vertex: int, end_vertex: int) -> bool:
        """Return True if an edge joins the two vertices."""
        return end_vertex in self._edges.get(start_vertex, ())

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._edges

    def __len__(self) -> int:
        return len(self._edges)


def connected_components(graph: Graph) -> list[list[int]]:
    """Return the connected components, each as a sorted list of vertices."""
    seen: set[int] = set()
    components: list[list[int]] = []
    for root in graph.vertices():
        if root in seen:
            continue
        seen.add(root)
        component = []
        queue = deque([root])
        while queue:
            vertex = queue.popleft()
            component.append(vertex)
            for neighbour in graph.adjacent_vertices(vertex):
                if neighbour not in seen:
                    seen.add(neighbour)
                    queue.append(neighbour)
        components.append(sorted(component))
    return components


def shortest_path(graph: Graph, start_vertex: int, end_vertex: int) -> list[int]:
    """Return a path with fewest edges from start to end, both included.

    A path from a vertex to itself is ``[vertex, vertex]``. An empty list
    means there is no path.
    """
    if not graph.has_vertex(start_vertex) or not graph.has_vertex(end_vertex):
        return []
    if start_vertex == end_vertex:
        return [start_vertex, end_vertex]

    parent = {start_vertex: start_vertex}
    queue = deque([start_vertex])
    while queue:
        vertex = queue.popleft()
        if vertex == end_vertex:
            break
        for neighbour in graph.adjacent_vertices(vertex):
            if neighbour not in parent:
                parent[neighbour] = vertex
                queue.append(neighbour)

    if end_vertex not in parent:
        return []
    path = [end_vertex]
    while path[-1] != start_vertex:
        path.append(parent[path[-1]])
    path.reverse()
    return path


def random_graph(size: int) -> Graph:
    """Return a graph built from ``10 * size`` random edges among ``size`` vertices."""
    if size <= 0:
        raise ValueError("size must be positive")
    graph = Graph()
    for _ in range(10 * size):
        graph.add_edge(random.randrange(size), random.randrange(size))
    return graph


def _measure(size: int, repeats: int = 100) -> str:
    graph = random_graph(size)

    begin = time.perf_counter()
    components = connected_components(graph)
    cc_time = time.perf_counter() - begin

    begin = time.perf_counter()
    for _ in range(repeats):
        shortest_path(graph, random.randrange(size), random.randrange(size))
    sp_time = (time.perf_counter() - begin) / repeats

    return (
        f"N: {size:8d}, cc time: {cc_time:10.5f} sec, "
        f"sp time: {sp_time:10.5f} sec ({len(components)} components)"
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Time the algorithms on random graphs of 10 up to 10**max_power vertices."""
    args = list(sys.argv[1:] if argv is None else argv)
    max_power = int(args[0]) if args else 5
    for power in range(1, max_power + 1):
        print(_measure(10 ** power))
    return 0


if __name__ == "__main__":
    sys.exit(main())