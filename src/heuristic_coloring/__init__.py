"""Heuristic vertex coloring of undirected graphs."""

from .coloring import UNCOLORED, Coloring, ValidationResult, count_colors, verify_coloring
from .dimacs import load_directory, load_graph, parse_dimacs
from .errors import (
    ColoringError,
    DimacsError,
    EdgeCountMismatch,
    GraphError,
    InvalidSize,
    MalformedHeader,
    MalformedLine,
    OutOfRange,
    SelfLoop,
    VertexOutOfRange,
)
from .evaluation import AlgorithmSummary, EvaluationReport, EvaluationResult, Evaluator, SkippedGraph
from .graph import AdjListGraph, AdjMatrixGraph, EdgeSetGraph, Graph, create
from .heuristics import (
    ColoringAlgorithm,
    SearchStatus,
    TabuConfig,
    TabuResult,
    default_algorithms,
    dsatur_coloring,
    greedy_coloring,
    minimize_colors,
    rlf_coloring,
    tabu_search,
    two_coloring,
)
