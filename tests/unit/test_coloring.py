"""Tests for the Coloring artifact and verification helpers."""

import pytest

from heuristic_coloring.coloring import UNCOLORED, Coloring, count_colors, verify_coloring
from heuristic_coloring.errors import OutOfRange


class TestColoring:
    def test_starts_uncolored(self, graph_triangle):
        c = Coloring(graph_triangle)
        assert len(c) == 3
        assert c.as_list() == [UNCOLORED] * 3
        assert c.uncolored_vertices() == [0, 1, 2]
        assert not c.is_complete()
        assert not c.is_proper()
        assert c.conflict_count() == 0
        assert c.num_colors_used() == 0
        assert c.max_color() == UNCOLORED

    def test_assignment(self, graph_triangle):
        c = Coloring(graph_triangle)
        c[0] = 0
        c[1] = 1
        c[2] = 2
        assert list(c) == [0, 1, 2]
        assert c.is_proper()
        assert c.num_colors_used() == 3
        assert c.max_color() == 2

    def test_rejects_bad_values(self, graph_triangle):
        c = Coloring(graph_triangle)
        with pytest.raises(ValueError):
            c[0] = -2
        with pytest.raises(OutOfRange):
            c[3] = 0
        c[0] = 1
        c[0] = UNCOLORED
        assert c[0] == UNCOLORED

    @pytest.mark.parametrize("v", [-1, -3, 3])
    def test_reads_check_vertex_range(self, graph_triangle, v):
        c = Coloring.from_sequence(graph_triangle, [0, 1, 2])
        with pytest.raises(OutOfRange):
            c[v]

    def test_conflicts(self, graph_triangle):
        c = Coloring.from_sequence(graph_triangle, [0, 0, 0])
        assert c.conflict_count() == 3
        assert c.conflicted_vertices() == [0, 1, 2]
        assert not c.is_proper()

    def test_uncolored_vertices_never_conflict(self, graph_p4):
        c = Coloring.from_sequence(graph_p4, [0, UNCOLORED, UNCOLORED, 0])
        assert c.conflict_count() == 0
        assert c.is_complete() is False
        assert c.is_proper() is False

    def test_partial_conflict(self, graph_p4):
        c = Coloring.from_sequence(graph_p4, [0, 0, UNCOLORED, 1])
        assert c.conflicting_edges() == [(0, 1)]
        assert c.conflicted_vertices() == [0, 1]

    def test_from_sequence_wrong_length(self, graph_triangle):
        with pytest.raises(ValueError):
            Coloring.from_sequence(graph_triangle, [0, 1])

    def test_from_classes(self, graph_p4):
        c = Coloring.from_classes(graph_p4, [{0, 2}, {1, 3}])
        assert c.as_list() == [0, 1, 0, 1]
        assert c.color_classes() == [{0, 2}, {1, 3}]

    def test_copy_is_independent(self, graph_p4):
        a = Coloring.from_sequence(graph_p4, [0, 1, 0, 1])
        b = a.copy()
        b[0] = 2
        assert a[0] == 0
        assert a != b
        assert a == a.copy()

    def test_instances_do_not_share_storage(self, graph_p4):
        a = Coloring(graph_p4)
        b = Coloring(graph_p4)
        a[0] = 1
        assert b[0] == UNCOLORED

    def test_normalized(self, graph_p4):
        c = Coloring.from_sequence(graph_p4, [5, 2, 5, 9])
        n = c.normalized()
        assert n.as_list() == [0, 1, 0, 2]
        assert n.num_colors_used() == c.num_colors_used()
        assert c.as_list() == [5, 2, 5, 9]

    def test_color_classes_skip_gaps(self, graph_p4):
        c = Coloring.from_sequence(graph_p4, [4, 0, 4, UNCOLORED])
        assert c.color_classes() == [{1}, {0, 2}]

    def test_validate(self, graph_triangle):
        result = Coloring.from_sequence(graph_triangle, [0, 0, UNCOLORED]).validate()
        assert not result.valid
        assert result.num_colors == 1
        assert result.num_vertices == 3
        assert result.uncolored_vertices == [2]
        assert result.conflicting_edges == [(0, 1)]

        ok = Coloring.from_sequence(graph_triangle, [2, 0, 1]).validate()
        assert ok.valid
        assert ok.conflicting_edges == []


class TestHelpers:
    def test_count_colors(self):
        assert count_colors([0, 1, 0, 2]) == 3
        assert count_colors([UNCOLORED, 3]) == 1
        assert count_colors([]) == 0

    def test_verify_coloring(self, graph_5vertex):
        assert verify_coloring(graph_5vertex, [0, 1, 2, 0, 1])
        assert not verify_coloring(graph_5vertex, [0, 0, 1, 2, 0])
        assert not verify_coloring(graph_5vertex, [0, 1, 2, 0])
        assert not verify_coloring(graph_5vertex, [0, 1, 2, 0, UNCOLORED])
