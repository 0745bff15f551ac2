"""Sequential greedy coloring and the exact 2-coloring check."""

from collections import deque
from typing import Iterable, List, Optional

from ..coloring import UNCOLORED, Coloring
from ..graph import Graph


def smallest_free_color(used) -> int:
    """Smallest non-negative integer not in ``used``."""
    c = 0
    while c in used:
        c += 1
    return c


def greedy_coloring(graph: Graph, order: Optional[Iterable[int]] = None) -> Coloring:
    """Color vertices one by one in ``order`` with the smallest free color.

    Args:
        graph: Graph to color (not modified).
        order: A permutation of the vertices; natural order when omitted.

    Returns:
        A proper Coloring. The result is fully determined by ``order``.

    Raises:
        ValueError: If ``order`` is not a permutation of ``0 .. n-1``.
    """
    n = graph.vertex_count()
    sequence: List[int] = list(range(n)) if order is None else list(order)
    if len(sequence) != n or set(sequence) != set(range(n)):
        raise ValueError("order must be a permutation of the graph's vertices")

    coloring = Coloring(graph)
    for v in sequence:
        used = {coloring[u] for u in graph.neighbors(v)}
        used.discard(UNCOLORED)
        coloring[v] = smallest_free_color(used)
    return coloring


def two_coloring(graph: Graph) -> Optional[Coloring]:
    """Return a proper 2-coloring, or None if the graph is not bipartite.

    Breadth-first search from each uncolored vertex, alternating colors.
    Isolated vertices end up with color 0.
    """
    coloring = Coloring(graph)
    for start in graph.vertices():
        if coloring[start] != UNCOLORED:
            continue
        coloring[start] = 0
        queue = deque([start])
        while queue:
            v = queue.popleft()
            color = coloring[v]
            for u in graph.neighbors(v):
                if coloring[u] == UNCOLORED:
                    coloring[u] = 1 - color
                    queue.append(u)
                elif coloring[u] == color:
                    return None
    return coloring
