"""
Recursive Largest First (RLF) graph coloring.

RLF builds one color class at a time as a maximal independent set of the
still-uncolored vertices:

1. Seed the class with the uncolored vertex of maximum degree in the
   uncolored subgraph.
2. Neighbors of class members can no longer join; they move from the
   candidate set U to the excluded set X.
3. Repeatedly add the candidate with the most neighbors in X (ties: fewest
   neighbors left in U), until U is empty.
4. Give the whole class the next color and repeat on the remaining vertices.

Ties that survive the degree criteria go to the lowest vertex id, or are
drawn from ``rng`` when one is supplied.
"""

import random
from typing import Dict, List, Optional, Set

from ..coloring import Coloring
from ..graph import Graph


def _pick(candidates: List[int], rng: Optional[random.Random]) -> int:
    if rng is None or len(candidates) == 1:
        return min(candidates)
    return rng.choice(sorted(candidates))


def rlf_coloring(graph: Graph, rng: Optional[random.Random] = None) -> Coloring:
    """Color ``graph`` with Recursive Largest First.

    Args:
        graph: Graph to color (not modified).
        rng: Optional random source for breaking exact ties. Without it the
            result is fully deterministic.

    Returns:
        A proper Coloring whose color ``i`` is the i-th class built.
    """
    n = graph.vertex_count()
    coloring = Coloring(graph)
    adjacency: List[List[int]] = [list(graph.neighbors(v)) for v in range(n)]
    uncolored: Set[int] = set(range(n))
    color = 0

    while uncolored:
        candidates: Set[int] = set(uncolored)
        excluded: Set[int] = set()
        in_candidates: Dict[int, int] = {
            v: sum(1 for u in adjacency[v] if u in candidates) for v in candidates
        }
        in_excluded: Dict[int, int] = {v: 0 for v in candidates}

        def leave_candidates(w: int) -> None:
            candidates.discard(w)
            for u in adjacency[w]:
                if u in candidates:
                    in_candidates[u] -= 1

        def exclude(w: int) -> None:
            leave_candidates(w)
            excluded.add(w)
            for u in adjacency[w]:
                if u in candidates:
                    in_excluded[u] += 1

        def add_to_class(w: int) -> None:
            leave_candidates(w)
            coloring[w] = color
            uncolored.discard(w)
            for u in adjacency[w]:
                if u in candidates:
                    exclude(u)

        top = max(in_candidates[v] for v in candidates)
        add_to_class(_pick([v for v in candidates if in_candidates[v] == top], rng))

        while candidates:
            best_key = max((in_excluded[v], -in_candidates[v]) for v in candidates)
            ties = [v for v in candidates if (in_excluded[v], -in_candidates[v]) == best_key]
            add_to_class(_pick(ties, rng))

        color += 1

    return coloring
