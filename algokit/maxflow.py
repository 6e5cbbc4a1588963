"""Maximum flow by Edmonds-Karp and by push-relabel.

A network is either a graph object with ``vertices()``, ``neighbors(vertex)``
and ``weight(u, v)`` (such as :class:`algokit.graph.UndirectedGraph`), or a
mapping ``{u: {v: capacity}}``.  Each run starts from the capacities.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Hashable, Mapping
from typing import Any

__all__ = ["EdmondsKarp", "RelabelToFront"]


def _network(graph: Any) -> tuple[list[Hashable], dict[Hashable, dict[Hashable, int]]]:
    if isinstance(graph, Mapping):
        vertices = list(graph)
        seen = set(vertices)
        capacities: dict[Hashable, dict[Hashable, int]] = {}
        for u, targets in graph.items():
            capacities[u] = dict(targets)
            for v in targets:
                if v not in seen:
                    seen.add(v)
                    vertices.append(v)
    else:
        vertices = list(graph.vertices())
        capacities = {u: {v: graph.weight(u, v) for v in graph.neighbors(u)} for u in vertices}
    for targets in capacities.values():
        if any(c < 0 for c in targets.values()):
            raise ValueError("capacities must be non-negative")
    return vertices, capacities


class _FlowNetwork:
    def __init__(self, graph: Any) -> None:
        vertices, capacities = _network(graph)
        self._vertices = vertices
        self._index = {v: i for i, v in enumerate(vertices)}
        n = len(vertices)
        self._capacity = [[0] * n for _ in range(n)]
        for u, targets in capacities.items():
            for v, c in targets.items():
                self._capacity[self._index[u]][self._index[v]] = c
        self._residual = [row[:] for row in self._capacity]

    def _index_of(self, vertex: Hashable) -> int:
        try:
            return self._index[vertex]
        except KeyError:
            raise KeyError(vertex) from None

    def _endpoints(self, source: Hashable, sink: Hashable) -> tuple[int, int]:
        s, t = self._index_of(source), self._index_of(sink)
        if s == t:
            raise ValueError("source and sink must differ")
        return s, t

    def _residual_between(self, u: Hashable, v: Hashable) -> int:
        return self._residual[self._index_of(u)][self._index_of(v)]


class EdmondsKarp(_FlowNetwork):
    """Ford-Fulkerson with shortest augmenting paths found by breadth-first search."""

    def __init__(self, graph: Any) -> None:
        super().__init__(graph)

    def residual(self, u: Hashable, v: Hashable) -> int:
        """Residual capacity from ``u`` to ``v`` after the last run."""
        return self._residual_between(u, v)

    def run(self, source: Hashable, sink: Hashable) -> int:
        """Return the maximum flow from ``source`` to ``sink``."""
        s, t = self._endpoints(source, sink)
        self._residual = [row[:] for row in self._capacity]
        residual = self._residual
        flow = 0
        while (pre := self._find_path(s, t)) is not None:
            path = []
            node = t
            while node != s:
                path.append((pre[node], node))
                node = pre[node]
            delta = min(residual[u][v] for u, v in path)
            for u, v in path:
                residual[u][v] -= delta
                residual[v][u] += delta
            flow += delta
        return flow

    def _find_path(self, s: int, t: int) -> dict[int, int] | None:
        pre = {s: s}
        queue = deque([s])
        n = len(self._vertices)
        while queue:
            p = queue.popleft()
            row = self._residual[p]
            for i in range(n):
                if row[i] > 0 and i not in pre:
                    pre[i] = p
                    if i == t:
                        return pre
                    queue.append(i)
        return None


class RelabelToFront(_FlowNetwork):
    """Push-relabel maximum flow, with the relabel-to-front ordering or a plain sweep."""

    def __init__(self, graph: Any) -> None:
        super().__init__(graph)
        n = len(self._vertices)
        links: list[dict[int, None]] = [{} for _ in range(n)]
        for u in range(n):
            for v in range(n):
                if self._capacity[u][v]:
                    links[u][v] = None
                    links[v][u] = None
        # Possible residual edges, kept in a fixed order.
        self._links = [list(targets) for targets in links]
        self._excess = [0] * n
        self._height = [0] * n

    def residual(self, u: Hashable, v: Hashable) -> int:
        """Residual capacity from ``u`` to ``v`` after the last run."""
        return self._residual_between(u, v)

    def _initialize_preflow(self, s: int) -> None:
        n = len(self._vertices)
        self._residual = [row[:] for row in self._capacity]
        self._excess = [0] * n
        self._height = [0] * n
        self._height[s] = n
        for v in range(n):
            c = self._capacity[s][v]
            if c:
                self._residual[s][v] = 0
                self._residual[v][s] += c
                self._excess[s] -= c
                self._excess[v] = c

    def _push(self, u: int, v: int) -> None:
        delta = min(self._excess[u], self._residual[u][v])
        self._residual[u][v] -= delta
        self._residual[v][u] += delta
        self._excess[u] -= delta
        self._excess[v] += delta

    def _relabel(self, u: int) -> None:
        heights = [self._height[v] for v in self._links[u] if self._residual[u][v] > 0]
        if not heights:
            raise RuntimeError("overflowing vertex has no residual edge")
        self._height[u] = min(heights) + 1

    def _discharge(self, u: int) -> None:
        while self._excess[u] > 0:
            for v in self._links[u]:
                if self._residual[u][v] > 0 and self._height[u] == self._height[v] + 1:
                    self._push(u, v)
                    if self._excess[u] <= 0:
                        return
            self._relabel(u)

    def run(self, source: Hashable, sink: Hashable) -> int:
        """Return the maximum flow using the relabel-to-front rule."""
        s, t = self._endpoints(source, sink)
        self._initialize_preflow(s)
        order = [i for i in range(len(self._vertices)) if i not in (s, t)]
        pos = 0
        while pos < len(order):
            u = order[pos]
            old_height = self._height[u]
            self._discharge(u)
            if self._height[u] > old_height:
                order.insert(0, order.pop(pos))
                pos = 1
            else:
                pos += 1
        return self._excess[t]

    def run_push_relabel(self, source: Hashable, sink: Hashable) -> int:
        """Return the maximum flow by sweeping over overflowing vertices until none remain."""
        s, t = self._endpoints(source, sink)
        self._initialize_preflow(s)
        inner = [i for i in range(len(self._vertices)) if i not in (s, t)]
        overflow = True
        while overflow:
            overflow = False
            for u in inner:
                if self._excess[u] <= 0:
                    continue
                overflow = True
                need_relabel = True
                has_residual = False
                min_height: int | None = None
                for v in self._links[u]:
                    if self._residual[u][v] > 0:
                        has_residual = True
                        h = self._height[v]
                        min_height = h if min_height is None else min(min_height, h)
                        if self._height[u] > h:
                            need_relabel = False
                            if self._height[u] == h + 1:
                                self._push(u, v)
                if need_relabel and has_residual and min_height is not None:
                    self._height[u] = min_height + 1
        return self._excess[t]