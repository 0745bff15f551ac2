"""Command-line comparison of the coloring heuristics.

    run_coloring.py                 # built-in comparison on random graphs
    run_coloring.py graph.col       # every algorithm on one DIMACS file
    run_coloring.py instances/      # every algorithm on every .col file
"""

import argparse
import json
from pathlib import Path
from typing import List, Optional

from .dimacs import load_graph
from .errors import ColoringError
from .evaluation import EvaluationReport, Evaluator
from .graph import BACKENDS
from .heuristics.base import ALGORITHMS, make_algorithm
from .heuristics.tabu import TabuConfig
from .log import configure_logging


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Compare heuristic vertex coloring algorithms"
    )
    parser.add_argument("path", nargs="?", help="DIMACS .col file or directory of .col files")
    parser.add_argument(
        "--algorithms",
        default=",".join(ALGORITHMS),
        help=f"Comma-separated algorithms (default: all of {', '.join(ALGORITHMS)})",
    )
    parser.add_argument("--workers", type=int, default=None, help="Worker threads")
    parser.add_argument(
        "--backend",
        choices=sorted(BACKENDS),
        default=None,
        help="Graph backend (default: chosen by density)",
    )
    parser.add_argument("--samples", type=int, default=50, help="Random graphs in the built-in comparison")
    parser.add_argument("--vertices", type=int, default=200, help="Vertices per random graph")
    parser.add_argument("--edge-prob", type=float, default=0.9, help="Edge probability of random graphs")
    parser.add_argument("--seed", type=int, default=None, help="Seed for random graphs and randomised algorithms")
    parser.add_argument("--tabu-iterations", type=int, default=TabuConfig.max_iterations,
                        help="Tabu search iteration budget per color count")
    parser.add_argument("--time-limit", type=float, default=None,
                        help="Tabu search wall-clock budget in seconds")
    parser.add_argument("--repeats", type=int, default=1,
                        help="Runs per graph for randomised heuristics, keeping the fewest colors")
    parser.add_argument("--json", type=Path, default=None, help="Write the full report as JSON")
    parser.add_argument("--verbose", "-v", action="store_true")
    return parser


def print_report(report: EvaluationReport) -> None:
    algorithms = report.algorithms
    if not algorithms:
        print("No results to display.")
    else:
        header = f"{'Graph':<25} {'V':>5} {'E':>7}" + "".join(f" {a[:14]:>14}" for a in algorithms)
        print(header)
        print("-" * len(header))
        rows = {}
        for r in report.results:
            rows.setdefault(r.graph_name, {})[r.algorithm] = r
        for graph_name, by_algo in rows.items():
            first = next(iter(by_algo.values()))
            cells = []
            for a in algorithms:
                r = by_algo.get(a)
                if r is None or r.failed:
                    cells.append("ERR")
                elif not r.is_proper:
                    cells.append(f"{r.num_colors}*")
                else:
                    cells.append(str(r.num_colors))
            print(f"{graph_name[:25]:<25} {first.num_vertices:>5} {first.num_edges:>7}"
                  + "".join(f" {c:>14}" for c in cells))

        print(f"\n{'Algorithm':<28} {'Runs':>5} {'Min':>5} {'Mean':>7} {'Max':>5} "
              f"{'Std':>6} {'Proper':>7} {'Time':>9}")
        print("-" * 80)
        for name, s in report.summary().items():
            if s.mean_colors is None:
                print(f"{name:<28} {s.runs:>5} {'-':>5} {'-':>7} {'-':>5} {'-':>6} "
                      f"{s.success_rate:>6.0%} {s.mean_seconds:>8.3f}s")
            else:
                print(f"{name:<28} {s.runs:>5} {s.min_colors:>5} {s.mean_colors:>7.2f} "
                      f"{s.max_colors:>5} {s.std_colors:>6.2f} {s.success_rate:>6.0%} "
                      f"{s.mean_seconds:>8.3f}s")

    for s in report.skipped:
        print(f"WARNING: skipped {s.name}: {s.reason}")


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    configure_logging(args.verbose)

    names = [name.strip() for name in args.algorithms.split(",") if name.strip()]
    try:
        tabu_config = TabuConfig(max_iterations=args.tabu_iterations, time_limit=args.time_limit)
        algorithms = [
            make_algorithm(name, seed=args.seed, tabu_config=tabu_config, repeats=args.repeats)
            for name in names
        ]
        evaluator = Evaluator(algorithms, max_workers=args.workers)
    except ValueError as e:
        print(f"ERROR: {e}")
        return 2

    if args.path is None:
        print(f"Random graphs G({args.vertices}, {args.edge_prob}), {args.samples} samples\n")
        report = evaluator.compare_random(
            args.samples, args.vertices, args.edge_prob, seed=args.seed,
            backend=args.backend or "adjlist",
        )
    else:
        path = Path(args.path)
        if not path.exists():
            print(f"ERROR: {path} not found")
            return 1
        if path.is_dir():
            report = evaluator.run_directory(path, backend=args.backend)
            if not report.results:
                print(f"ERROR: no valid .col graphs in {path}")
                for s in report.skipped:
                    print(f"WARNING: skipped {s.name}: {s.reason}")
                return 1
        else:
            try:
                graph = load_graph(path, backend=args.backend)
            except (ColoringError, OSError) as e:
                print(f"ERROR: {e}")
                return 1
            print(f"Graph {path.name} with {graph.vertex_count()} vertices\n")
            report = evaluator.run({path.stem: graph})

    print_report(report)

    if args.json is not None:
        args.json.parent.mkdir(parents=True, exist_ok=True)
        with open(args.json, "w") as f:
            json.dump(report.to_dict(), f, indent=2)
        print(f"\nReport saved to: {args.json}")

    return 0
