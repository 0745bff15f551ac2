"""Abstract base class for coloring algorithms and the standard registry."""

import random
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from ..coloring import Coloring
from ..graph import Graph
from .dsatur import dsatur_coloring
from .greedy import greedy_coloring
from .ordering import ORDERINGS, random_order
from .rlf import rlf_coloring
from .tabu import TabuConfig, minimize_colors

RANDOM_ORDERING = "random"


@dataclass
class AlgorithmRun:
    """Output of one ``ColoringAlgorithm.solve`` call."""

    coloring: Coloring
    iterations: int = 0


def repeat_coloring(graph: Graph, color: Callable[[Graph], Coloring], runs: int) -> Coloring:
    """Call ``color`` ``runs`` times and keep the coloring with the fewest colors.

    The earliest coloring wins among equals, so the result never uses more
    colors than the first run.
    """
    if runs < 1:
        raise ValueError(f"runs must be at least 1, got {runs}")
    best = color(graph)
    for _ in range(runs - 1):
        candidate = color(graph)
        if candidate.num_colors_used() < best.num_colors_used():
            best = candidate
    return best


def _check_repeats(repeats: int) -> int:
    if repeats < 1:
        raise ValueError(f"repeats must be at least 1, got {repeats}")
    return repeats


class ColoringAlgorithm(ABC):
    """Interface the evaluator uses to run any heuristic.

    Implementations must treat the graph as read-only and build a fresh
    Coloring (and, if randomised, a fresh random source) on every call, so
    one instance can be shared by concurrent evaluations.
    """

    name: str

    @abstractmethod
    def solve(self, graph: Graph) -> AlgorithmRun:
        """Color ``graph``.

        Returns:
            An AlgorithmRun with the coloring and the number of search
            iterations (0 for one-pass construction heuristics).
        """

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


class GreedyAlgorithm(ColoringAlgorithm):
    """Sequential greedy coloring under a named vertex ordering.

    ``ordering="random"`` draws a fresh permutation from ``random.Random(seed)``
    on every run; with ``repeats > 1`` the best of that many permutations is
    kept. ``repeats`` has no effect on the deterministic orderings.
    """

    def __init__(self, ordering: str = "natural", seed: int = 0, repeats: int = 1):
        if ordering != RANDOM_ORDERING and ordering not in ORDERINGS:
            raise ValueError(
                f"Unknown ordering: {ordering}. Use one of {sorted(ORDERINGS) + [RANDOM_ORDERING]}."
            )
        self.ordering = ordering
        self.seed = seed
        self.repeats = _check_repeats(repeats)
        self.name = "greedy" if ordering == "natural" else f"greedy_{ordering}"

    def solve(self, graph: Graph) -> AlgorithmRun:
        if self.ordering == RANDOM_ORDERING:
            rng = random.Random(self.seed)
            coloring = repeat_coloring(
                graph, lambda g: greedy_coloring(g, random_order(g, rng)), self.repeats
            )
            return AlgorithmRun(coloring)
        return AlgorithmRun(greedy_coloring(graph, ORDERINGS[self.ordering](graph)))


class DSaturAlgorithm(ColoringAlgorithm):
    name = "dsatur"

    def solve(self, graph: Graph) -> AlgorithmRun:
        return AlgorithmRun(dsatur_coloring(graph))


class RLFAlgorithm(ColoringAlgorithm):
    """Recursive Largest First; ``seed`` randomises exact ties when set.

    With a seed, ``repeats`` runs share one random source and the fewest
    colors win. Without one RLF is deterministic and runs once.
    """

    name = "rlf"

    def __init__(self, seed: Optional[int] = None, repeats: int = 1):
        self.seed = seed
        self.repeats = _check_repeats(repeats)

    def solve(self, graph: Graph) -> AlgorithmRun:
        if self.seed is None:
            return AlgorithmRun(rlf_coloring(graph))
        rng = random.Random(self.seed)
        return AlgorithmRun(repeat_coloring(graph, lambda g: rlf_coloring(g, rng), self.repeats))


class TabuAlgorithm(ColoringAlgorithm):
    """DSATUR followed by tabu-search color reduction."""

    name = "tabu"

    def __init__(self, seed: int = 0, config: Optional[TabuConfig] = None):
        self.seed = seed
        self.config = config or TabuConfig()

    def solve(self, graph: Graph) -> AlgorithmRun:
        reduction = minimize_colors(graph, rng=random.Random(self.seed), config=self.config)
        return AlgorithmRun(reduction.coloring, reduction.iterations)


ALGORITHMS: Dict[str, Callable[[], ColoringAlgorithm]] = {
    "greedy": GreedyAlgorithm,
    "greedy_random": lambda: GreedyAlgorithm(RANDOM_ORDERING),
    "greedy_largest_first": lambda: GreedyAlgorithm("largest_first"),
    "greedy_smallest_last": lambda: GreedyAlgorithm("smallest_last"),
    "greedy_connected_sequence": lambda: GreedyAlgorithm("connected_sequence"),
    "dsatur": DSaturAlgorithm,
    "rlf": RLFAlgorithm,
    "tabu": TabuAlgorithm,
}


def make_algorithm(name: str, seed: Optional[int] = None,
                   tabu_config: Optional[TabuConfig] = None,
                   repeats: int = 1) -> ColoringAlgorithm:
    """Build a registered algorithm by name.

    ``seed`` applies to the randomised algorithms (greedy_random, rlf, tabu);
    ``repeats`` to greedy_random and seeded rlf; ``tabu_config`` only to tabu.
    """
    _check_repeats(repeats)
    if name == "greedy_random":
        return GreedyAlgorithm(RANDOM_ORDERING, seed if seed is not None else 0, repeats)
    if name == "rlf":
        return RLFAlgorithm(seed, repeats)
    if name == "tabu":
        return TabuAlgorithm(seed if seed is not None else 0, tabu_config)
    try:
        return ALGORITHMS[name]()
    except KeyError:
        raise ValueError(f"Unknown algorithm: {name}. Use one of {sorted(ALGORITHMS)}.") from None


def default_algorithms(seed: Optional[int] = None,
                       tabu_config: Optional[TabuConfig] = None,
                       repeats: int = 1) -> List[ColoringAlgorithm]:
    """The standard comparison set: every registered algorithm."""
    return [make_algorithm(name, seed, tabu_config, repeats) for name in ALGORITHMS]
