"""Graph backends behind the ``Graph`` capability contract."""

from typing import Dict, Type, Union

from ..errors import InvalidSize
from .adjlist import AdjListGraph
from .adjmatrix import AdjMatrixGraph
from .base import Graph, check_vertex, density, graphs_equal, max_degree
from .edgeset import EdgeSetGraph

BACKENDS: Dict[str, Type] = {
    "adjlist": AdjListGraph,
    "matrix": AdjMatrixGraph,
    "edgeset": EdgeSetGraph,
}

# Above this density the O(n^2) matrix is cheaper than per-vertex lists.
DENSE_THRESHOLD = 0.25

BackendSpec = Union[str, Type]


def _backend_class(backend: BackendSpec) -> Type:
    if isinstance(backend, str):
        try:
            return BACKENDS[backend]
        except KeyError:
            raise ValueError(
                f"Unknown graph backend: {backend}. Use one of {sorted(BACKENDS)}."
            ) from None
    return backend


def create(vertex_count: int, backend: BackendSpec = "adjlist", allow_empty: bool = True) -> Graph:
    """Create an edgeless graph with ``vertex_count`` vertices.

    Args:
        vertex_count: Number of vertices, addressed ``0 .. vertex_count-1``.
        backend: Backend name (see ``BACKENDS``) or backend class.
        allow_empty: When False, a zero-vertex graph raises ``InvalidSize``.
    """
    if vertex_count == 0 and not allow_empty:
        raise InvalidSize("graph must have at least one vertex")
    return _backend_class(backend)(vertex_count)


def convert(graph: Graph, backend: BackendSpec) -> Graph:
    """Copy ``graph`` into a new instance of another backend."""
    out = create(graph.vertex_count(), backend)
    for u, v in graph.edges():
        out.add_edge(u, v)
    return out


def choose_backend(vertex_count: int, expected_edges: int) -> str:
    """Pick the backend best suited to the expected density."""
    if vertex_count < 2:
        return "adjlist"
    possible = vertex_count * (vertex_count - 1) / 2
    return "matrix" if expected_edges / possible > DENSE_THRESHOLD else "adjlist"


__all__ = [
    "Graph",
    "AdjListGraph",
    "AdjMatrixGraph",
    "EdgeSetGraph",
    "BACKENDS",
    "DENSE_THRESHOLD",
    "create",
    "convert",
    "choose_backend",
    "check_vertex",
    "density",
    "graphs_equal",
    "max_degree",
]
