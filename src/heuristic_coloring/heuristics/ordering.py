"""Vertex orderings that feed the sequential greedy heuristic.

The same graph colored greedily under different orderings can need very
different numbers of colors; these are the classic sequence-building rules.
"""

import random
from collections import deque
from typing import Callable, Dict, List

from ..graph import Graph


def natural_order(graph: Graph) -> List[int]:
    return list(graph.vertices())


def random_order(graph: Graph, rng: random.Random) -> List[int]:
    """Uniform random permutation drawn from the caller's ``rng``."""
    order = list(graph.vertices())
    rng.shuffle(order)
    return order


def largest_first_order(graph: Graph) -> List[int]:
    """Vertices by decreasing degree, ties by lowest id."""
    return sorted(graph.vertices(), key=lambda v: (-graph.degree(v), v))


def smallest_last_order(graph: Graph) -> List[int]:
    """Smallest-last (degeneracy) ordering.

    Repeatedly removes a vertex of minimum degree in the remaining subgraph
    (lowest id among ties) and returns the removal sequence reversed. Greedy
    coloring in this order colors trees and even cycles with 2 colors.
    """
    n = graph.vertex_count()
    degree = [graph.degree(v) for v in range(n)]
    max_deg = max(degree, default=0)
    # Bucket queue: buckets[d] holds the remaining vertices of current degree d.
    buckets: List[set] = [set() for _ in range(max_deg + 1)]
    for v in range(n):
        buckets[degree[v]].add(v)
    removed = [False] * n
    sequence: List[int] = []

    low = 0
    for _ in range(n):
        low = max(low - 1, 0)
        while not buckets[low]:
            low += 1
        v = min(buckets[low])
        buckets[low].discard(v)
        removed[v] = True
        sequence.append(v)
        for u in graph.neighbors(v):
            if not removed[u]:
                buckets[degree[u]].discard(u)
                degree[u] -= 1
                buckets[degree[u]].add(u)

    sequence.reverse()
    return sequence


def connected_sequence_order(graph: Graph) -> List[int]:
    """Breadth-first order, starting again from the lowest unvisited id per component.

    Every vertex except the first of its component has a neighbor earlier in
    the sequence.
    """
    n = graph.vertex_count()
    visited = [False] * n
    sequence: List[int] = []
    for start in range(n):
        if visited[start]:
            continue
        visited[start] = True
        queue = deque([start])
        while queue:
            v = queue.popleft()
            sequence.append(v)
            for u in graph.neighbors(v):
                if not visited[u]:
                    visited[u] = True
                    queue.append(u)
    return sequence


ORDERINGS: Dict[str, Callable[[Graph], List[int]]] = {
    "natural": natural_order,
    "largest_first": largest_first_order,
    "smallest_last": smallest_last_order,
    "connected_sequence": connected_sequence_order,
}
