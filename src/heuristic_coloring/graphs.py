"""Graph generators: named reference graphs, random graphs and networkx interop."""

from typing import Optional

import networkx as nx

from .graph import BackendSpec, Graph, create


def from_networkx(nx_graph: nx.Graph, backend: BackendSpec = "adjlist") -> Graph:
    """Copy a networkx graph, relabelling its nodes to ``0 .. n-1`` in sorted order."""
    node_list = sorted(nx_graph.nodes())
    node_to_idx = {node: i for i, node in enumerate(node_list)}
    graph = create(len(node_list), backend)
    for u, v in nx_graph.edges():
        graph.add_edge(node_to_idx[u], node_to_idx[v])
    return graph


def to_networkx(graph: Graph) -> nx.Graph:
    G = nx.Graph()
    G.add_nodes_from(graph.vertices())
    G.add_edges_from(graph.edges())
    return G


def random_graph(
    n: int, p: float, seed: Optional[int] = None, backend: BackendSpec = "adjlist"
) -> Graph:
    """Erdos-Renyi random graph G(n,p)."""
    return from_networkx(nx.gnp_random_graph(n, p, seed=seed), backend)


def empty_graph(n: int, backend: BackendSpec = "adjlist") -> Graph:
    """``n`` isolated vertices. Chromatic number = 1 (0 when n = 0)."""
    return create(n, backend)


def complete_graph(n: int, backend: BackendSpec = "adjlist") -> Graph:
    """K_n. Chromatic number = n."""
    graph = create(n, backend)
    for u in range(n):
        for v in range(u + 1, n):
            graph.add_edge(u, v)
    return graph


def path_graph(n: int, backend: BackendSpec = "adjlist") -> Graph:
    """P_n: edges ``(i, i+1)``. Chromatic number = 2 for n >= 2."""
    graph = create(n, backend)
    for i in range(n - 1):
        graph.add_edge(i, i + 1)
    return graph


def cycle_graph(n: int, backend: BackendSpec = "adjlist") -> Graph:
    """C_n for n >= 3. Chromatic number = 2 if n is even, else 3."""
    graph = path_graph(n, backend)
    if n >= 3:
        graph.add_edge(n - 1, 0)
    return graph


def paper_5vertex(backend: BackendSpec = "adjlist") -> Graph:
    """Small 5-vertex benchmark graph with a triangle. Chromatic number = 3."""
    graph = create(5, backend)
    for u, v in [(0, 1), (0, 2), (1, 2), (1, 3), (2, 4), (3, 4)]:
        graph.add_edge(u, v)
    return graph


def triangle(backend: BackendSpec = "adjlist") -> Graph:
    """K3 triangle. Chromatic number = 3."""
    return cycle_graph(3, backend)


def complete_k4(backend: BackendSpec = "adjlist") -> Graph:
    """K4 complete graph. Chromatic number = 4."""
    return complete_graph(4, backend)


def path_p4(backend: BackendSpec = "adjlist") -> Graph:
    """P4 path graph. Chromatic number = 2."""
    return path_graph(4, backend)


def cycle_c5(backend: BackendSpec = "adjlist") -> Graph:
    """C5 odd cycle. Chromatic number = 3."""
    return cycle_graph(5, backend)


def wheel_w5(backend: BackendSpec = "adjlist") -> Graph:
    """Wheel graph W5 (6 nodes including center). Chromatic number = 4."""
    return from_networkx(nx.wheel_graph(6), backend)


def prism(backend: BackendSpec = "adjlist") -> Graph:
    """Triangular prism, the smallest graph smallest-last colors poorly. Chromatic number = 3."""
    graph = create(6, backend)
    for u, v in [(0, 1), (0, 2), (1, 2), (0, 3), (1, 4), (2, 5), (3, 4), (3, 5), (4, 5)]:
        graph.add_edge(u, v)
    return graph


KNOWN_CHROMATIC = {
    "paper_5vertex": 3,
    "triangle": 3,
    "complete_k4": 4,
    "path_p4": 2,
    "cycle_c5": 3,
    "wheel_w5": 4,
    "prism": 3,
}

TEST_GRAPHS = {
    "paper_5vertex": paper_5vertex,
    "triangle": triangle,
    "complete_k4": complete_k4,
    "path_p4": path_p4,
    "cycle_c5": cycle_c5,
    "wheel_w5": wheel_w5,
    "prism": prism,
}
