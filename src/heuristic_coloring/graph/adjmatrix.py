"""Dense backend: a boolean adjacency matrix."""

from typing import Iterator, Tuple

import numpy as np

from ..errors import InvalidSize, SelfLoop
from .base import check_vertex


class AdjMatrixGraph:
    """Graph stored as an ``n x n`` numpy boolean matrix.

    Memory is O(n^2) regardless of edge count, so this backend only pays off
    on dense graphs. ``has_edge`` is a single lookup; ``neighbors(v)`` yields
    ascending ids.
    """

    def __init__(self, vertex_count: int):
        if vertex_count < 0:
            raise InvalidSize(f"vertex count must be non-negative, got {vertex_count}")
        self._n = vertex_count
        self._adj = np.zeros((vertex_count, vertex_count), dtype=bool)
        self._degree = np.zeros(vertex_count, dtype=np.int64)
        self._m = 0

    def vertex_count(self) -> int:
        return self._n

    def edge_count(self) -> int:
        return self._m

    def vertices(self) -> range:
        return range(self._n)

    def add_edge(self, u: int, v: int) -> bool:
        check_vertex(u, self._n)
        check_vertex(v, self._n)
        if u == v:
            raise SelfLoop(u)
        if self._adj[u, v]:
            return False
        self._adj[u, v] = True
        self._adj[v, u] = True
        self._degree[u] += 1
        self._degree[v] += 1
        self._m += 1
        return True

    def has_edge(self, u: int, v: int) -> bool:
        check_vertex(u, self._n)
        check_vertex(v, self._n)
        return bool(self._adj[u, v])

    def neighbors(self, v: int) -> Iterator[int]:
        check_vertex(v, self._n)
        return iter(np.flatnonzero(self._adj[v]).tolist())

    def degree(self, v: int) -> int:
        check_vertex(v, self._n)
        return int(self._degree[v])

    def edges(self) -> Iterator[Tuple[int, int]]:
        rows, cols = np.nonzero(np.triu(self._adj, k=1))
        for u, v in zip(rows.tolist(), cols.tolist()):
            yield u, v

    def to_numpy(self) -> np.ndarray:
        """Read-only view of the adjacency matrix."""
        view = self._adj.view()
        view.flags.writeable = False
        return view

    def __repr__(self) -> str:
        return f"AdjMatrixGraph(n={self._n}, m={self._m})"
