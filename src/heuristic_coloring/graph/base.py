"""Capability contract shared by every graph backend.

``Graph`` is a structural interface: backends do not inherit from it, they
simply provide the same methods. Coloring heuristics are written against this
protocol only, so the storage strategy is a pure performance knob.
"""

from typing import Iterator, Protocol, Tuple, runtime_checkable

from ..errors import OutOfRange


@runtime_checkable
class Graph(Protocol):
    """Undirected, unweighted simple graph on vertices ``0 .. n-1``.

    The vertex count is fixed at construction. Edges may be added but never
    removed; once built, a graph is shared read-only between algorithm runs.
    """

    def vertex_count(self) -> int: ...

    def edge_count(self) -> int: ...

    def vertices(self) -> range: ...

    def add_edge(self, u: int, v: int) -> bool:
        """Insert edge ``{u, v}``. Returns False if it was already present."""
        ...

    def has_edge(self, u: int, v: int) -> bool: ...

    def neighbors(self, v: int) -> Iterator[int]:
        """Adjacent vertex ids, in a backend-defined but stable order."""
        ...

    def degree(self, v: int) -> int: ...

    def edges(self) -> Iterator[Tuple[int, int]]:
        """Every edge exactly once as ``(u, v)`` with ``u < v``."""
        ...


def check_vertex(v: int, n: int) -> None:
    if not 0 <= v < n:
        raise OutOfRange(v, n)


def max_degree(graph: Graph) -> int:
    """Largest number of neighbors of any vertex (0 for an empty graph)."""
    return max((graph.degree(v) for v in graph.vertices()), default=0)


def density(graph: Graph) -> float:
    """Fraction of possible vertex pairs that are edges."""
    n = graph.vertex_count()
    if n < 2:
        return 0.0
    return graph.edge_count() / (n * (n - 1) / 2)


def graphs_equal(a: Graph, b: Graph) -> bool:
    """True iff both graphs have the same vertex count and edge set."""
    if a.vertex_count() != b.vertex_count() or a.edge_count() != b.edge_count():
        return False
    return all(b.has_edge(u, v) for u, v in a.edges())
