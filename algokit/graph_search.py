"""Breadth-first and depth-first traversal of graphs.

A graph here is any object with ``vertices()`` and ``neighbors(vertex)``,
such as :class:`algokit.graph.UndirectedGraph`.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Hashable, Iterator
from typing import Any

__all__ = ["bfs", "dfs"]


def bfs(graph: Any, source: Hashable) -> dict[Hashable, int]:
    """Breadth-first search from ``source``.

    Return the reachable vertices in the order they are visited, each mapped
    to its distance in edges from ``source``.
    """
    if source not in graph.vertices():
        raise KeyError(source)
    distance: dict[Hashable, int] = {source: 0}
    visited: dict[Hashable, int] = {}
    queue: deque[Hashable] = deque([source])
    while queue:
        u = queue.popleft()
        visited[u] = distance[u]
        for v in graph.neighbors(u):
            if v not in distance:
                distance[v] = distance[u] + 1
                queue.append(v)
    return visited


def dfs(graph: Any) -> list[list[tuple[Hashable, int, int]]]:
    """Depth-first search over every vertex.

    Return one list per search tree, in the order the roots are taken; each
    list holds ``(vertex, discovery_time, finish_time)`` in finishing order.
    Times are counted from 1 across the whole search.
    """
    discovered: set[Hashable] = set()
    forest: list[list[tuple[Hashable, int, int]]] = []
    tick = 0
    for root in graph.vertices():
        if root in discovered:
            continue
        tree: list[tuple[Hashable, int, int]] = []
        tick += 1
        discovered.add(root)
        stack: list[tuple[Hashable, int, Iterator[Hashable]]] = [
            (root, tick, iter(graph.neighbors(root)))
        ]
        while stack:
            u, start, pending = stack[-1]
            for v in pending:
                if v not in discovered:
                    tick += 1
                    discovered.add(v)
                    stack.append((v, tick, iter(graph.neighbors(v))))
                    break
            else:
                stack.pop()
                tick += 1
                tree.append((u, start, tick))
        forest.append(tree)
    return forest