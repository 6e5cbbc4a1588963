"""Undirected weighted graphs stored as adjacency maps."""

from __future__ import annotations

import random
from collections.abc import Hashable

__all__ = ["UndirectedGraph"]


class UndirectedGraph:
    """Undirected graph with at most one weighted edge between two vertices.

    Vertices and each vertex's neighbours keep the order in which they were added.
    """

    def __init__(self) -> None:
        self._adj: dict[Hashable, dict[Hashable, int]] = {}
        self._edges = 0

    def add_vertex(self, vertex: Hashable) -> bool:
        """Add ``vertex``; return False if it is already present."""
        if vertex in self._adj:
            return False
        self._adj[vertex] = {}
        return True

    def delete_vertex(self, vertex: Hashable) -> bool:
        """Remove ``vertex`` and every edge touching it; return whether it existed."""
        neighbours = self._adj.pop(vertex, None)
        if neighbours is None:
            return False
        for other in neighbours:
            if other != vertex:
                del self._adj[other][vertex]
            self._edges -= 1
        return True

    def add_edge(self, x: Hashable, y: Hashable, weight: int) -> bool:
        """Connect ``x`` and ``y``; return False if either is missing or they are already adjacent."""
        if x not in self._adj or y not in self._adj:
            return False
        if y in self._adj[x]:
            return False
        self._adj[x][y] = weight
        self._adj[y][x] = weight
        self._edges += 1
        return True

    def delete_edge(self, x: Hashable, y: Hashable) -> bool:
        """Remove the edge between ``x`` and ``y``; return whether there was one."""
        if x not in self._adj or y not in self._adj[x]:
            return False
        del self._adj[x][y]
        self._adj[y].pop(x, None)
        self._edges -= 1
        return True

    def neighbors(self, vertex: Hashable) -> list[Hashable]:
        """Return the vertices adjacent to ``vertex`` in the order their edges were added."""
        try:
            return list(self._adj[vertex])
        except KeyError:
            raise KeyError(vertex) from None

    def weight(self, x: Hashable, y: Hashable) -> int:
        """Return the weight of the edge between ``x`` and ``y``."""
        try:
            return self._adj[x][y]
        except KeyError:
            raise KeyError((x, y)) from None

    def vertices(self) -> list[Hashable]:
        return list(self._adj)

    def vertex_count(self) -> int:
        return len(self._adj)

    def edge_count(self) -> int:
        return self._edges

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._adj

    @classmethod
    def random_graph(cls, nvertex: int, rng: random.Random | None = None) -> UndirectedGraph:
        """Build a test graph on vertices 1..nvertex.

        Each pair ``i < j < nvertex`` is joined with probability 1/5 and a weight
        in 1..100, so the last vertex is always left without edges.
        """
        if nvertex < 0:
            raise ValueError("vertex count must be non-negative")
        rng = rng or random.Random()
        graph = cls()
        for vertex in range(1, nvertex + 1):
            graph.add_vertex(vertex)
        for i in range(1, nvertex + 1):
            for j in range(i + 1, nvertex):
                if rng.randrange(5) == 0:
                    graph.add_edge(i, j, rng.randint(1, 100))
        return graph

    def __repr__(self) -> str:
        return f"UndirectedGraph(vertices={self.vertex_count()}, edges={self._edges})"