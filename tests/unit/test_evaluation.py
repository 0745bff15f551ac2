"""Tests for the concurrent evaluator and report aggregation."""

import json

import pytest

from heuristic_coloring.coloring import Coloring
from heuristic_coloring.evaluation import AlgorithmSummary, EvaluationResult, Evaluator
from heuristic_coloring.graphs import TEST_GRAPHS, path_p4, random_graph, triangle
from heuristic_coloring.heuristics import TabuConfig, default_algorithms
from heuristic_coloring.heuristics.base import (
    ALGORITHMS,
    AlgorithmRun,
    ColoringAlgorithm,
    DSaturAlgorithm,
    GreedyAlgorithm,
    RLFAlgorithm,
    make_algorithm,
    repeat_coloring,
)

VALID_COL = "p edge 3 3\ne 1 2\ne 2 3\ne 1 3\n"
BAD_COL = "p edge 3 5\ne 1 2\ne 2 3\n"


class FailingAlgorithm(ColoringAlgorithm):
    name = "boom"

    def solve(self, graph):
        raise RuntimeError("solver exploded")


class LazyAlgorithm(ColoringAlgorithm):
    """Leaves every vertex uncolored."""

    name = "lazy"

    def solve(self, graph):
        return AlgorithmRun(Coloring(graph))


def small_tabu():
    return TabuConfig(max_iterations=200)


class TestRegistry:
    def test_default_set(self):
        names = [a.name for a in default_algorithms(seed=0, tabu_config=small_tabu())]
        assert names == list(ALGORITHMS)
        assert {"greedy", "dsatur", "rlf", "tabu"} <= set(names)

    def test_make_algorithm(self):
        assert make_algorithm("greedy_smallest_last").name == "greedy_smallest_last"
        assert isinstance(make_algorithm("rlf", seed=3), RLFAlgorithm)
        assert make_algorithm("tabu", tabu_config=small_tabu()).config.max_iterations == 200

    def test_unknown_algorithm(self):
        with pytest.raises(ValueError, match="Unknown algorithm"):
            make_algorithm("simulated_annealing")

    def test_unknown_ordering(self):
        with pytest.raises(ValueError):
            GreedyAlgorithm("alphabetical")

    def test_invalid_repeats(self):
        with pytest.raises(ValueError):
            make_algorithm("greedy_random", repeats=0)
        with pytest.raises(ValueError):
            RLFAlgorithm(seed=1, repeats=0)


class TestRandomSequential:
    def test_registered(self):
        algorithm = make_algorithm("greedy_random", seed=4)
        assert algorithm.name == "greedy_random"
        assert "greedy_random" in ALGORITHMS

    def test_reproducible_for_seed(self):
        graph = random_graph(40, 0.4, seed=6)
        a = make_algorithm("greedy_random", seed=11).solve(graph).coloring
        b = make_algorithm("greedy_random", seed=11).solve(graph).coloring
        assert a == b
        assert a.is_proper()

    def test_fresh_random_source_per_solve(self):
        graph = random_graph(40, 0.4, seed=6)
        algorithm = GreedyAlgorithm("random", seed=11)
        assert algorithm.solve(graph).coloring == algorithm.solve(graph).coloring

    @pytest.mark.parametrize("seed", [0, 1, 2, 3])
    def test_repeats_never_worse_than_single_run(self, seed):
        graph = random_graph(50, 0.5, seed=seed)
        single = GreedyAlgorithm("random", seed=seed).solve(graph).coloring
        best = GreedyAlgorithm("random", seed=seed, repeats=20).solve(graph).coloring
        assert best.is_proper()
        assert best.num_colors_used() <= single.num_colors_used()

    def test_seeded_rlf_repeats_never_worse(self):
        graph = random_graph(50, 0.5, seed=9)
        single = RLFAlgorithm(seed=5).solve(graph).coloring
        best = RLFAlgorithm(seed=5, repeats=10).solve(graph).coloring
        assert best.is_proper()
        assert best.num_colors_used() <= single.num_colors_used()


class TestRepeatColoring:
    def test_keeps_fewest_colors(self, graph_p4):
        results = iter([
            Coloring.from_sequence(graph_p4, [0, 1, 2, 0]),
            Coloring.from_sequence(graph_p4, [0, 1, 0, 1]),
            Coloring.from_sequence(graph_p4, [1, 0, 1, 0]),
        ])
        best = repeat_coloring(graph_p4, lambda g: next(results), 3)
        assert best.as_list() == [0, 1, 0, 1]

    def test_single_run(self, graph_p4):
        calls = []

        def color(g):
            calls.append(g)
            return Coloring.from_sequence(g, [0, 1, 0, 1])

        repeat_coloring(graph_p4, color, 1)
        assert len(calls) == 1

    def test_rejects_zero_runs(self, graph_p4):
        with pytest.raises(ValueError):
            repeat_coloring(graph_p4, lambda g: Coloring(g), 0)


class TestEvaluator:
    def test_rejects_invalid_setup(self):
        with pytest.raises(ValueError):
            Evaluator([])
        with pytest.raises(ValueError):
            Evaluator([DSaturAlgorithm(), DSaturAlgorithm()])
        with pytest.raises(ValueError):
            Evaluator([DSaturAlgorithm()], max_workers=0)

    def test_all_pairs_in_order(self):
        graphs = {name: factory() for name, factory in TEST_GRAPHS.items()}
        algorithms = default_algorithms(seed=0, tabu_config=small_tabu())
        report = Evaluator(algorithms, max_workers=4).run(graphs)

        assert len(report.results) == len(graphs) * len(algorithms)
        expected = [(g, a.name) for g in graphs for a in algorithms]
        assert [(r.graph_name, r.algorithm) for r in report.results] == expected
        assert all(r.is_proper for r in report.results)
        assert all(r.conflicts == 0 for r in report.results)
        assert report.graph_names == list(graphs)
        assert report.algorithms == [a.name for a in algorithms]

    def test_result_fields(self):
        report = Evaluator([DSaturAlgorithm()]).run({"tri": triangle()})
        (result,) = report.results
        assert result == EvaluationResult(
            graph_name="tri",
            algorithm="dsatur",
            num_vertices=3,
            num_edges=3,
            num_colors=3,
            conflicts=0,
            is_proper=True,
            elapsed_seconds=result.elapsed_seconds,
            iterations=0,
        )
        assert not result.failed

    def test_failure_is_recorded_not_raised(self):
        evaluator = Evaluator([FailingAlgorithm(), DSaturAlgorithm()], max_workers=2)
        report = evaluator.run({"tri": triangle(), "p4": path_p4()})

        assert len(report.results) == 4
        failed = [r for r in report.results if r.failed]
        assert [r.graph_name for r in failed] == ["tri", "p4"]
        assert all(r.error == "RuntimeError: solver exploded" for r in failed)
        assert all(not r.is_proper for r in failed)
        assert all(r.is_proper for r in report.results_for("dsatur"))

    def test_improper_result(self):
        report = Evaluator([LazyAlgorithm()]).run({"tri": triangle()})
        (result,) = report.results
        assert not result.failed
        assert not result.is_proper
        assert result.num_colors == 0
        assert report.summary()["lazy"].success_rate == 0.0

    def test_empty_input(self):
        report = Evaluator([DSaturAlgorithm()]).run({})
        assert report.results == []
        assert report.summary() == {}

    def test_worker_count_does_not_change_results(self):
        graphs = {f"g{i}": random_graph(40, 0.4, seed=i) for i in range(4)}
        algorithms = [GreedyAlgorithm(), DSaturAlgorithm(), RLFAlgorithm(seed=1)]
        serial = Evaluator(algorithms, max_workers=1).run(graphs)
        parallel = Evaluator(algorithms, max_workers=8).run(graphs)
        assert [r.num_colors for r in serial.results] == [r.num_colors for r in parallel.results]

    def test_shared_graph_not_modified(self):
        graph = random_graph(30, 0.3, seed=3)
        before = list(graph.edges())
        algorithms = default_algorithms(seed=0, tabu_config=small_tabu())
        Evaluator(algorithms, max_workers=4).run({"a": graph, "b": graph})
        assert list(graph.edges()) == before


class TestReport:
    def test_summary_statistics(self):
        report = Evaluator([DSaturAlgorithm()]).run({"tri": triangle(), "p4": path_p4()})
        summary = report.summary()["dsatur"]
        assert isinstance(summary, AlgorithmSummary)
        assert summary.runs == 2
        assert summary.failures == 0
        assert summary.min_colors == 2
        assert summary.max_colors == 3
        assert summary.mean_colors == pytest.approx(2.5)
        assert summary.std_colors == pytest.approx(0.7071, abs=1e-3)
        assert summary.success_rate == 1.0

    def test_summary_with_only_failures(self):
        report = Evaluator([FailingAlgorithm()]).run({"tri": triangle()})
        summary = report.summary()["boom"]
        assert summary.failures == 1
        assert summary.mean_colors is None
        assert summary.min_colors is None
        assert summary.success_rate == 0.0

    def test_best_by_graph(self):
        report = Evaluator([GreedyAlgorithm("natural"), DSaturAlgorithm(), LazyAlgorithm()]).run(
            {"p4": path_p4()}
        )
        best = report.best_by_graph()
        assert set(best) == {"p4"}
        assert best["p4"].num_colors == 2
        assert best["p4"].algorithm in {"greedy", "dsatur"}

    def test_to_dict_is_json_serialisable(self):
        report = Evaluator([DSaturAlgorithm(), FailingAlgorithm()]).run({"tri": triangle()})
        data = json.loads(json.dumps(report.to_dict()))
        assert len(data["results"]) == 2
        assert data["summary"]["dsatur"]["min_colors"] == 3
        assert data["results"][1]["error"].startswith("RuntimeError")


class TestFileInputs:
    def test_run_directory_skips_malformed(self, write_col, tmp_path):
        write_col("a.col", VALID_COL)
        write_col("b.col", BAD_COL)
        write_col("c.col", "p edge 2 1\ne 1 2\n")

        report = Evaluator([DSaturAlgorithm()]).run_directory(tmp_path)

        assert [r.graph_name for r in report.results] == ["a", "c"]
        assert len(report.skipped) == 1
        assert report.skipped[0].name == "b"
        assert "expected 5 edge lines" in report.skipped[0].reason

    def test_run_files(self, write_col, tmp_path):
        good = write_col("good.col", VALID_COL)
        report = Evaluator([DSaturAlgorithm()]).run_files([good, tmp_path / "missing.col"])
        assert [r.graph_name for r in report.results] == ["good"]
        assert [s.name for s in report.skipped] == ["missing"]

    def test_compare_random(self):
        evaluator = Evaluator([DSaturAlgorithm(), RLFAlgorithm()], max_workers=2)
        first = evaluator.compare_random(3, 20, 0.5, seed=1)
        second = evaluator.compare_random(3, 20, 0.5, seed=1)
        assert len(first.results) == 6
        assert first.graph_names == ["random_0", "random_1", "random_2"]
        assert [r.num_colors for r in first.results] == [r.num_colors for r in second.results]
        assert all(r.num_vertices == 20 for r in first.results)
