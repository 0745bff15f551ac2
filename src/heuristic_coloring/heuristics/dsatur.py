"""
DSATUR (Degree of Saturation) Graph Coloring Algorithm.

DSATUR is a greedy graph coloring heuristic that selects vertices based on
their "saturation degree" - the number of distinct colors already assigned
to their neighbors.

## Algorithm:
1. Start with all vertices uncolored
2. Repeat until all vertices are colored:
   a. Select the uncolored vertex with the highest saturation degree
   b. Break ties by the highest number of uncolored neighbors
   c. Break remaining ties by the lowest vertex id
   d. Assign the smallest color not used by any neighbor
3. Return the coloring

The selection is a linear scan over the uncolored vertices, O(V^2) overall,
which keeps the tie-breaking rules exact and easy to reproduce.
"""

from typing import List, Set

from ..coloring import Coloring
from ..graph import Graph
from .greedy import smallest_free_color


def dsatur_coloring(graph: Graph) -> Coloring:
    """
    Color a graph using the DSATUR algorithm.

    Args:
        graph: Graph to color (not modified)

    Returns:
        A proper Coloring

    Example:
        >>> from heuristic_coloring.graphs import path_p4
        >>> dsatur_coloring(path_p4()).as_list()
        [1, 0, 1, 0]
    """
    n = graph.vertex_count()
    coloring = Coloring(graph)
    if n == 0:
        return coloring

    neighbor_colors: List[Set[int]] = [set() for _ in range(n)]  # saturation tracking
    uncolored_degree = [graph.degree(v) for v in range(n)]
    is_uncolored = [True] * n

    for _ in range(n):
        best_vertex = -1
        best_key = (-1, -1)
        for v in range(n):
            if not is_uncolored[v]:
                continue
            key = (len(neighbor_colors[v]), uncolored_degree[v])
            if key > best_key:  # strict: lowest id wins ties
                best_key = key
                best_vertex = v

        c = smallest_free_color(neighbor_colors[best_vertex])
        coloring[best_vertex] = c
        is_uncolored[best_vertex] = False

        for neighbor in graph.neighbors(best_vertex):
            if is_uncolored[neighbor]:
                neighbor_colors[neighbor].add(c)
                uncolored_degree[neighbor] -= 1

    return coloring
