"""Minimum spanning trees by Prim's and Kruskal's algorithms.

A graph here is any object with ``vertices()``, ``neighbors(vertex)`` and
``weight(u, v)``, such as :class:`algokit.graph.UndirectedGraph`.  Both
functions return a new :class:`~algokit.graph.UndirectedGraph`.
"""

from __future__ import annotations

import heapq
import itertools
from collections.abc import Hashable
from typing import Any

from algokit.graph import UndirectedGraph

__all__ = ["prim", "kruskal"]


def prim(graph: Any, source: Hashable) -> UndirectedGraph:
    """Grow a minimum spanning tree from ``source``.

    Every vertex of ``graph`` appears in the result; vertices that cannot be
    reached from ``source`` are left without edges.
    """
    vertices = list(graph.vertices())
    if source not in vertices:
        raise KeyError(source)

    key: dict[Hashable, float] = {v: float("inf") for v in vertices}
    parent: dict[Hashable, Hashable] = {}
    done: set[Hashable] = set()
    counter = itertools.count()
    key[source] = 0
    heap: list[tuple[float, int, Hashable]] = [(0, next(counter), source)]

    while heap:
        k, _, u = heapq.heappop(heap)
        if u in done or k != key[u]:
            continue
        done.add(u)
        for v in graph.neighbors(u):
            w = graph.weight(u, v)
            if v not in done and w < key[v]:
                key[v] = w
                parent[v] = u
                heapq.heappush(heap, (w, next(counter), v))

    mst = UndirectedGraph()
    for v in vertices:
        mst.add_vertex(v)
    for v in vertices:
        if v in parent:
            mst.add_edge(parent[v], v, graph.weight(parent[v], v))
    return mst


class _DisjointSet:
    def __init__(self) -> None:
        self._parent: dict[Hashable, Hashable] = {}

    def find(self, x: Hashable) -> Hashable:
        self._parent.setdefault(x, x)
        root = x
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[x] != root:
            self._parent[x], x = root, self._parent[x]
        return root

    def union(self, a: Hashable, b: Hashable) -> bool:
        ra, rb = self.find(a), self.find(b)
        if ra == rb:
            return False
        self._parent[rb] = ra
        return True


def kruskal(graph: Any) -> UndirectedGraph:
    """Build a minimum spanning forest by taking the lightest edges first.

    Edges are examined in order of weight until ``V - 1`` have been chosen;
    only vertices that lie on an examined edge appear in the result.
    """
    vertices = list(graph.vertices())
    edges: list[tuple[int, Hashable, Hashable]] = []
    seen: set[frozenset[Hashable]] = set()
    for u in vertices:
        for v in graph.neighbors(u):
            pair = frozenset((u, v))
            if pair not in seen:
                seen.add(pair)
                edges.append((graph.weight(u, v), u, v))
    edges.sort(key=lambda edge: edge[0])

    mst = UndirectedGraph()
    sets = _DisjointSet()
    needed = len(vertices) - 1
    chosen = 0
    for w, u, v in edges:
        if chosen >= needed:
            break
        mst.add_vertex(u)
        mst.add_vertex(v)
        if sets.union(u, v):
            mst.add_edge(u, v, w)
            chosen += 1
    return mst