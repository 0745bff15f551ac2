"""Construction and improvement heuristics for vertex coloring."""

from .base import (
    ALGORITHMS,
    AlgorithmRun,
    ColoringAlgorithm,
    DSaturAlgorithm,
    GreedyAlgorithm,
    RLFAlgorithm,
    TabuAlgorithm,
    default_algorithms,
    make_algorithm,
    repeat_coloring,
)
from .dsatur import dsatur_coloring
from .greedy import greedy_coloring, two_coloring
from .ordering import (
    ORDERINGS,
    connected_sequence_order,
    largest_first_order,
    natural_order,
    random_order,
    smallest_last_order,
)
from .rlf import rlf_coloring
from .tabu import ColorReduction, SearchStatus, TabuConfig, TabuResult, minimize_colors, tabu_search
