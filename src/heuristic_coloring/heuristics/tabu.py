"""
Tabu search for the k-coloring problem (TabuCol).

Given a fixed number of colors k and a possibly improper starting coloring,
the search repeatedly recolors a single conflicted vertex to reduce the
number of conflicting edges:

- A move (v, c) recolors vertex v to color c. Its effect on the conflict
  count is read from the table ``gamma[v, c]``, the number of neighbors of v
  currently colored c.
- After v leaves color c_old, moving it back to c_old is tabu for a
  randomised tenure.
- A tabu move is still allowed if it would beat the best conflict count seen
  so far (aspiration).
- Among admissible moves the smallest delta wins; ties are drawn from the
  caller's random source.
- When no move is admissible, a random conflicted vertex is recolored at
  random (diversification).

The search stops at zero conflicts or when the iteration or time budget runs
out. Running out of budget is a normal outcome: the best coloring found is
returned with a status saying why the search ended.

``minimize_colors`` wraps the search in the usual color-reduction loop:
start from a proper coloring with c colors, then try c-1, c-2, ... until a
k-coloring cannot be found.
"""

import logging
import random
import time
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import List, Optional

import numpy as np

from ..coloring import UNCOLORED, Coloring
from ..graph import Graph
from .dsatur import dsatur_coloring

logger = logging.getLogger(__name__)


class SearchStatus(Enum):
    SUCCESS = "success"
    ITERATION_BUDGET_EXCEEDED = "iteration_budget_exceeded"
    TIMEOUT = "timeout"
    STUCK = "stuck"  # k == 1 with conflicts left: no move exists


@dataclass
class TabuConfig:
    """Tabu search parameters.

    Tenure for a move is ``randrange(tenure_base) + int(tenure_alpha * |conflicted|)``,
    at least 1.
    """

    max_iterations: int = 10_000
    time_limit: Optional[float] = None  # seconds, None = unbounded
    tenure_base: int = 10
    tenure_alpha: float = 0.6

    def __post_init__(self):
        if self.max_iterations < 0:
            raise ValueError(f"max_iterations must be non-negative, got {self.max_iterations}")
        if self.time_limit is not None and self.time_limit < 0:
            raise ValueError(f"time_limit must be non-negative, got {self.time_limit}")
        if self.tenure_base < 1:
            raise ValueError(f"tenure_base must be at least 1, got {self.tenure_base}")
        if self.tenure_alpha < 0:
            raise ValueError(f"tenure_alpha must be non-negative, got {self.tenure_alpha}")


@dataclass
class TabuResult:
    """Outcome of one tabu search run with a fixed k."""

    coloring: Coloring  # best found
    conflicts: int
    iterations: int
    status: SearchStatus
    k: int
    elapsed_seconds: float
    history: List[int] = field(default_factory=list, repr=False)

    @property
    def success(self) -> bool:
        return self.status is SearchStatus.SUCCESS


@dataclass
class ColorReduction:
    """Outcome of ``minimize_colors``."""

    coloring: Coloring  # best proper coloring
    num_colors: int
    initial_colors: int
    iterations: int
    reductions: int
    last_status: Optional[SearchStatus]


def _initial_colors(graph: Graph, k: int, initial: Optional[Coloring], rng: random.Random) -> np.ndarray:
    n = graph.vertex_count()
    if initial is None:
        return np.array([rng.randrange(k) for _ in range(n)], dtype=np.int64)
    if len(initial) != n:
        raise ValueError(f"initial coloring has {len(initial)} entries, graph has {n} vertices")
    colors = np.empty(n, dtype=np.int64)
    for v in range(n):
        c = initial[v]
        colors[v] = rng.randrange(k) if c == UNCOLORED or c >= k else c
    return colors


def _tenure(config: TabuConfig, num_conflicted: int, rng: random.Random) -> int:
    return max(1, rng.randrange(config.tenure_base) + int(config.tenure_alpha * num_conflicted))


def tabu_search(
    graph: Graph,
    k: int,
    initial: Optional[Coloring] = None,
    rng: Optional[random.Random] = None,
    config: Optional[TabuConfig] = None,
) -> TabuResult:
    """
    Search for a proper k-coloring of ``graph``.

    Args:
        graph: Graph to color (not modified)
        k: Number of colors allowed
        initial: Starting coloring. Vertices that are uncolored or hold a
                 color >= k get a random color in 0..k-1. Random start when None.
        rng: Random source for initialisation, tie-breaking and tenure.
             Defaults to ``random.Random(0)`` so runs are reproducible.
        config: Search parameters (defaults to ``TabuConfig()``)

    Returns:
        TabuResult holding the best coloring found. ``history`` records the
        best conflict count before the first and after every iteration.

    Raises:
        ValueError: If k < 1 on a non-empty graph, or ``initial`` has the
                    wrong size.
    """
    config = config or TabuConfig()
    rng = rng if rng is not None else random.Random(0)
    start = time.perf_counter()
    n = graph.vertex_count()

    if n == 0:
        return TabuResult(Coloring(graph), 0, 0, SearchStatus.SUCCESS, k, 0.0, [0])
    if k < 1:
        raise ValueError(f"k must be at least 1, got {k}")

    colors = _initial_colors(graph, k, initial, rng)
    adjacency = [list(graph.neighbors(v)) for v in range(n)]

    # gamma[v, c] = number of neighbors of v with color c
    gamma = np.zeros((n, k), dtype=np.int64)
    conflicts = 0
    for u, v in graph.edges():
        gamma[u, colors[v]] += 1
        gamma[v, colors[u]] += 1
        if colors[u] == colors[v]:
            conflicts += 1

    tabu_until = np.zeros((n, k), dtype=np.int64)
    best_colors = colors.copy()
    best_conflicts = conflicts
    history = [best_conflicts]
    vertex_ids = np.arange(n)
    iteration = 0

    while True:
        if best_conflicts == 0:
            status = SearchStatus.SUCCESS
            break
        if iteration >= config.max_iterations:
            status = SearchStatus.ITERATION_BUDGET_EXCEEDED
            break
        if config.time_limit is not None and time.perf_counter() - start >= config.time_limit:
            status = SearchStatus.TIMEOUT
            break
        if k == 1:
            status = SearchStatus.STUCK
            break

        iteration += 1
        conflicted = vertex_ids[gamma[vertex_ids, colors] > 0]

        # Deltas for every (conflicted vertex, color) pair at once.
        sub = gamma[conflicted]
        rows = np.arange(len(conflicted))
        current = colors[conflicted]
        deltas = sub - sub[rows, current][:, None]
        admissible = (tabu_until[conflicted] <= iteration) | (conflicts + deltas < best_conflicts)
        admissible[rows, current] = False

        if admissible.any():
            masked = np.where(admissible, deltas, np.iinfo(np.int64).max)
            ties = np.argwhere(masked == masked.min())
            row, color = ties[rng.randrange(len(ties))]
            v = int(conflicted[row])
            new_color = int(color)
        else:
            v = int(conflicted[rng.randrange(len(conflicted))])
            new_color = rng.randrange(k - 1)
            if new_color >= colors[v]:
                new_color += 1

        old_color = int(colors[v])
        conflicts += int(gamma[v, new_color] - gamma[v, old_color])
        colors[v] = new_color
        for u in adjacency[v]:
            gamma[u, old_color] -= 1
            gamma[u, new_color] += 1
        tabu_until[v, old_color] = iteration + _tenure(config, len(conflicted), rng)

        if conflicts < best_conflicts:
            best_conflicts = conflicts
            best_colors = colors.copy()
        history.append(best_conflicts)

        if iteration % 1000 == 0:
            logger.debug("k=%d iter=%d conflicts=%d best=%d", k, iteration, conflicts, best_conflicts)

    elapsed = time.perf_counter() - start
    logger.debug("k=%d finished: %s after %d iterations (best=%d, %.3fs)",
                 k, status.value, iteration, best_conflicts, elapsed)
    return TabuResult(
        coloring=Coloring.from_sequence(graph, best_colors.tolist()),
        conflicts=best_conflicts,
        iterations=iteration,
        status=status,
        k=k,
        elapsed_seconds=elapsed,
        history=history,
    )


def minimize_colors(
    graph: Graph,
    initial: Optional[Coloring] = None,
    rng: Optional[random.Random] = None,
    config: Optional[TabuConfig] = None,
) -> ColorReduction:
    """
    Reduce the number of colors of a proper coloring with repeated tabu search.

    Starting from ``initial`` (DSATUR when None) with c colors, try to find a
    proper (c-1)-coloring; on success continue with fewer colors, otherwise
    stop. ``config.time_limit`` bounds the whole reduction, not each step.

    Returns:
        ColorReduction with the best proper coloring found
    """
    config = config or TabuConfig()
    rng = rng if rng is not None else random.Random(0)
    start = time.perf_counter()

    if initial is None:
        initial = dsatur_coloring(graph)
    elif not initial.is_proper():
        raise ValueError("minimize_colors needs a proper initial coloring")

    best = initial.normalized()
    num_colors = best.num_colors_used()
    initial_colors = num_colors
    iterations = 0
    reductions = 0
    last_status: Optional[SearchStatus] = None

    while num_colors > 1:
        step_config = config
        if config.time_limit is not None:
            remaining = config.time_limit - (time.perf_counter() - start)
            if remaining <= 0:
                last_status = SearchStatus.TIMEOUT
                break
            step_config = replace(config, time_limit=remaining)

        # Vertices holding color num_colors-1 are re-seeded randomly by tabu_search.
        result = tabu_search(graph, num_colors - 1, best, rng, step_config)
        iterations += result.iterations
        last_status = result.status
        if not result.success:
            logger.debug("Could not reduce below %d colors (%s)", num_colors, result.status.value)
            break

        best = result.coloring.normalized()
        num_colors = best.num_colors_used()
        reductions += 1
        logger.debug("Reduced to %d colors", num_colors)

    return ColorReduction(
        coloring=best,
        num_colors=num_colors,
        initial_colors=initial_colors,
        iterations=iterations,
        reductions=reductions,
        last_status=last_status,
    )
