"""Shared test fixtures for heuristic-coloring."""

import pytest

from heuristic_coloring.graph import BACKENDS
from heuristic_coloring.graphs import (
    paper_5vertex,
    triangle,
    complete_k4,
    path_p4,
    cycle_c5,
    wheel_w5,
    prism,
    KNOWN_CHROMATIC,
)


@pytest.fixture(params=sorted(BACKENDS))
def backend(request):
    """Parametrized fixture yielding every graph backend name."""
    return request.param


@pytest.fixture
def graph_5vertex():
    """5-vertex graph with a triangle (chromatic number 3)."""
    return paper_5vertex()


@pytest.fixture
def graph_triangle():
    return triangle()


@pytest.fixture
def graph_k4():
    return complete_k4()


@pytest.fixture
def graph_p4():
    return path_p4()


@pytest.fixture
def graph_c5():
    return cycle_c5()


@pytest.fixture
def graph_w5():
    return wheel_w5()


@pytest.fixture
def graph_prism():
    return prism()


@pytest.fixture(params=list(KNOWN_CHROMATIC.keys()))
def named_graph(request):
    """Parametrized fixture yielding (name, graph, expected_chromatic_number)."""
    from heuristic_coloring.graphs import TEST_GRAPHS

    name = request.param
    return name, TEST_GRAPHS[name](), KNOWN_CHROMATIC[name]


@pytest.fixture
def write_col(tmp_path):
    """Write DIMACS text to ``tmp_path/<name>`` and return the path."""

    def _write(name: str, text: str):
        path = tmp_path / name
        path.write_text(text)
        return path

    return _write
