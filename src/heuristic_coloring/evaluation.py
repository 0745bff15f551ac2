"""Run coloring algorithms over sets of graphs and aggregate the results.

Every (graph, algorithm) pair is an independent task: graphs are shared
read-only and each run builds its own Coloring, so pairs run concurrently
on a bounded thread pool. Results are collected by the submitting thread
only, which keeps the result list single-writer.

Usage::

    evaluator = Evaluator(default_algorithms(seed=0), max_workers=4)
    report = evaluator.run_directory("instances/")
    for name, summary in report.summary().items():
        print(name, summary.mean_colors)
"""

import logging
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Union

import numpy as np

from .dimacs import load_directory, load_graph
from .errors import ColoringError
from .graph import BackendSpec, Graph
from .graphs import random_graph
from .heuristics.base import ColoringAlgorithm

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


@dataclass(frozen=True)
class EvaluationResult:
    """Record for a single (graph, algorithm) run."""

    graph_name: str
    algorithm: str
    num_vertices: int
    num_edges: int
    num_colors: int = 0
    conflicts: int = 0
    is_proper: bool = False
    elapsed_seconds: float = 0.0
    iterations: int = 0
    error: Optional[str] = None

    @property
    def failed(self) -> bool:
        return self.error is not None


@dataclass(frozen=True)
class SkippedGraph:
    """A graph that never reached evaluation (e.g. a file that failed to parse)."""

    name: str
    reason: str


@dataclass(frozen=True)
class AlgorithmSummary:
    """Aggregate statistics of one algorithm over all evaluated graphs.

    Color statistics cover runs that produced a coloring; ``success_rate``
    is the fraction of all runs that ended with a proper coloring.
    """

    algorithm: str
    runs: int
    failures: int
    min_colors: Optional[int]
    mean_colors: Optional[float]
    max_colors: Optional[int]
    std_colors: Optional[float]
    success_rate: float
    mean_seconds: float

    @classmethod
    def from_results(cls, algorithm: str, results: Sequence[EvaluationResult]) -> "AlgorithmSummary":
        completed = [r for r in results if not r.failed]
        colors = np.array([r.num_colors for r in completed], dtype=float)
        seconds = np.array([r.elapsed_seconds for r in results], dtype=float)
        proper = sum(1 for r in results if r.is_proper)
        return cls(
            algorithm=algorithm,
            runs=len(results),
            failures=len(results) - len(completed),
            min_colors=int(colors.min()) if colors.size else None,
            mean_colors=float(colors.mean()) if colors.size else None,
            max_colors=int(colors.max()) if colors.size else None,
            std_colors=float(colors.std(ddof=1)) if colors.size > 1 else (0.0 if colors.size else None),
            success_rate=proper / len(results) if results else 0.0,
            mean_seconds=float(seconds.mean()) if seconds.size else 0.0,
        )


@dataclass
class EvaluationReport:
    results: List[EvaluationResult] = field(default_factory=list)
    skipped: List[SkippedGraph] = field(default_factory=list)

    @property
    def algorithms(self) -> List[str]:
        seen: Dict[str, None] = {}
        for r in self.results:
            seen.setdefault(r.algorithm, None)
        return list(seen)

    @property
    def graph_names(self) -> List[str]:
        seen: Dict[str, None] = {}
        for r in self.results:
            seen.setdefault(r.graph_name, None)
        return list(seen)

    def results_for(self, algorithm: str) -> List[EvaluationResult]:
        return [r for r in self.results if r.algorithm == algorithm]

    def summary(self) -> Dict[str, AlgorithmSummary]:
        return {
            name: AlgorithmSummary.from_results(name, self.results_for(name))
            for name in self.algorithms
        }

    def best_by_graph(self) -> Dict[str, EvaluationResult]:
        """Proper result with the fewest colors per graph (fastest among equals)."""
        best: Dict[str, EvaluationResult] = {}
        for r in self.results:
            if not r.is_proper:
                continue
            current = best.get(r.graph_name)
            if current is None or (r.num_colors, r.elapsed_seconds) < (
                current.num_colors, current.elapsed_seconds
            ):
                best[r.graph_name] = r
        return best

    def to_dict(self) -> Dict[str, Any]:
        """JSON-serialisable view of the report."""
        return {
            "results": [asdict(r) for r in self.results],
            "skipped": [asdict(s) for s in self.skipped],
            "summary": {name: asdict(s) for name, s in self.summary().items()},
        }


class Evaluator:
    """Runs a fixed list of algorithms against graphs.

    Args:
        algorithms: Algorithms to compare. Names must be unique.
        max_workers: Thread pool size (``None`` lets the executor decide).
    """

    def __init__(self, algorithms: Iterable[ColoringAlgorithm], max_workers: Optional[int] = None):
        self.algorithms: List[ColoringAlgorithm] = list(algorithms)
        if not self.algorithms:
            raise ValueError("Evaluator needs at least one algorithm")
        names = [a.name for a in self.algorithms]
        if len(set(names)) != len(names):
            raise ValueError(f"Algorithm names must be unique, got {names}")
        if max_workers is not None and max_workers < 1:
            raise ValueError(f"max_workers must be at least 1, got {max_workers}")
        self.max_workers = max_workers

    def evaluate(self, graph_name: str, graph: Graph, algorithm: ColoringAlgorithm) -> EvaluationResult:
        """Run one algorithm on one graph. Never raises for algorithm failures."""
        start = time.perf_counter()
        try:
            run = algorithm.solve(graph)
        except Exception as e:
            elapsed = time.perf_counter() - start
            logger.warning("%s failed on %s: %s", algorithm.name, graph_name, e)
            return EvaluationResult(
                graph_name=graph_name,
                algorithm=algorithm.name,
                num_vertices=graph.vertex_count(),
                num_edges=graph.edge_count(),
                elapsed_seconds=elapsed,
                error=f"{type(e).__name__}: {e}",
            )
        elapsed = time.perf_counter() - start

        coloring = run.coloring
        return EvaluationResult(
            graph_name=graph_name,
            algorithm=algorithm.name,
            num_vertices=graph.vertex_count(),
            num_edges=graph.edge_count(),
            num_colors=coloring.num_colors_used(),
            conflicts=coloring.conflict_count(),
            is_proper=coloring.is_proper(),
            elapsed_seconds=elapsed,
            iterations=run.iterations,
        )

    def run(self, graphs: Mapping[str, Graph]) -> EvaluationReport:
        """Evaluate every algorithm on every graph.

        Results are ordered by graph (mapping order), then algorithm (list
        order), regardless of completion order.
        """
        report = EvaluationReport()
        if not graphs:
            return report

        logger.info("Evaluating %d algorithms on %d graphs", len(self.algorithms), len(graphs))
        with ThreadPoolExecutor(max_workers=self.max_workers) as pool:
            futures = [
                pool.submit(self.evaluate, name, graph, algorithm)
                for name, graph in graphs.items()
                for algorithm in self.algorithms
            ]
            # Collected in submission order by this thread only.
            for future in futures:
                report.results.append(future.result())
        return report

    def run_files(self, paths: Iterable[PathLike], backend: Optional[BackendSpec] = None) -> EvaluationReport:
        """Load and evaluate each file; unloadable files become skips."""
        graphs: Dict[str, Graph] = {}
        skipped: List[SkippedGraph] = []
        for path in paths:
            path = Path(path)
            try:
                graphs[path.stem] = load_graph(path, backend=backend)
            except (ColoringError, OSError) as e:
                logger.warning("Skipping %s: %s", path.name, e)
                skipped.append(SkippedGraph(name=path.stem, reason=str(e)))
        report = self.run(graphs)
        report.skipped.extend(skipped)
        return report

    def run_directory(
        self,
        directory: PathLike,
        pattern: str = "*.col",
        backend: Optional[BackendSpec] = None,
    ) -> EvaluationReport:
        loaded = load_directory(directory, pattern=pattern, backend=backend)
        report = self.run(loaded.graphs)
        report.skipped.extend(SkippedGraph(name=s.path.stem, reason=s.reason) for s in loaded.skipped)
        return report

    def compare_random(
        self,
        samples: int,
        n: int,
        p: float,
        seed: Optional[int] = None,
        backend: BackendSpec = "adjlist",
    ) -> EvaluationReport:
        """Built-in comparison on ``samples`` random G(n, p) graphs.

        Graph i uses seed ``seed + i`` when a seed is given.
        """
        graphs = {
            f"random_{i}": random_graph(n, p, seed=None if seed is None else seed + i, backend=backend)
            for i in range(samples)
        }
        return self.run(graphs)
