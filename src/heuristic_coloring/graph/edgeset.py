"""Edge-set backend: a hash set of normalised vertex pairs."""

from typing import Dict, Iterator, List, Set, Tuple

from ..errors import InvalidSize, SelfLoop
from .base import check_vertex


class EdgeSetGraph:
    """Graph stored as a set of ``(min, max)`` pairs plus a neighbor map.

    Edge membership and edge iteration come straight from the set; the
    neighbor map keeps ``neighbors``/``degree`` from degrading to a full scan.
    Neighbors are yielded in ascending order.
    """

    def __init__(self, vertex_count: int):
        if vertex_count < 0:
            raise InvalidSize(f"vertex count must be non-negative, got {vertex_count}")
        self._n = vertex_count
        self._edges: Set[Tuple[int, int]] = set()
        self._neighbors: Dict[int, Set[int]] = {}

    def vertex_count(self) -> int:
        return self._n

    def edge_count(self) -> int:
        return len(self._edges)

    def vertices(self) -> range:
        return range(self._n)

    @staticmethod
    def _key(u: int, v: int) -> Tuple[int, int]:
        return (u, v) if u < v else (v, u)

    def add_edge(self, u: int, v: int) -> bool:
        check_vertex(u, self._n)
        check_vertex(v, self._n)
        if u == v:
            raise SelfLoop(u)
        key = self._key(u, v)
        if key in self._edges:
            return False
        self._edges.add(key)
        self._neighbors.setdefault(u, set()).add(v)
        self._neighbors.setdefault(v, set()).add(u)
        return True

    def has_edge(self, u: int, v: int) -> bool:
        check_vertex(u, self._n)
        check_vertex(v, self._n)
        return self._key(u, v) in self._edges

    def neighbors(self, v: int) -> Iterator[int]:
        check_vertex(v, self._n)
        nbrs: List[int] = sorted(self._neighbors.get(v, ()))
        return iter(nbrs)

    def degree(self, v: int) -> int:
        check_vertex(v, self._n)
        return len(self._neighbors.get(v, ()))

    def edges(self) -> Iterator[Tuple[int, int]]:
        return iter(sorted(self._edges))

    def __repr__(self) -> str:
        return f"EdgeSetGraph(n={self._n}, m={len(self._edges)})"
