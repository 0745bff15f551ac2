"""Sparse backend: per-vertex neighbor lists."""

from typing import Iterator, List, Set, Tuple

from ..errors import InvalidSize, SelfLoop
from .base import check_vertex


class AdjListGraph:
    """Graph stored as an adjacency list.

    ``neighbors(v)`` yields ids in insertion order. A parallel list of sets
    makes ``has_edge`` O(1) instead of a scan of the neighbor list.
    """

    def __init__(self, vertex_count: int):
        if vertex_count < 0:
            raise InvalidSize(f"vertex count must be non-negative, got {vertex_count}")
        self._n = vertex_count
        self._adj: List[List[int]] = [[] for _ in range(vertex_count)]
        self._adj_set: List[Set[int]] = [set() for _ in range(vertex_count)]
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
        if v in self._adj_set[u]:
            return False
        self._adj[u].append(v)
        self._adj[v].append(u)
        self._adj_set[u].add(v)
        self._adj_set[v].add(u)
        self._m += 1
        return True

    def has_edge(self, u: int, v: int) -> bool:
        check_vertex(u, self._n)
        check_vertex(v, self._n)
        return v in self._adj_set[u]

    def neighbors(self, v: int) -> Iterator[int]:
        check_vertex(v, self._n)
        return iter(self._adj[v])

    def degree(self, v: int) -> int:
        check_vertex(v, self._n)
        return len(self._adj[v])

    def edges(self) -> Iterator[Tuple[int, int]]:
        for u, nbrs in enumerate(self._adj):
            for v in nbrs:
                if u < v:
                    yield u, v

    def __repr__(self) -> str:
        return f"AdjListGraph(n={self._n}, m={self._m})"
