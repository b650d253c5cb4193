# File: tests/routing/test_simplify.py
"""Tests for rectilinear path simplification."""

import pytest

from hydronic_planner.core import Point
from hydronic_planner.routing import is_rectilinear, simplify_path


def pts(*coords):
    return [Point(x, y) for x, y in coords]


class TestSimplifyPath:
    """Only endpoints and turning points survive."""

    def test_short_paths_unchanged(self):
        """Empty, single and two-point paths are returned as-is."""
        assert simplify_path([]) == []
        assert simplify_path(pts((0, 0))) == pts((0, 0))
        assert simplify_path(pts((0, 0), (5, 5))) == pts((0, 0), (5, 5))

    def test_straight_run(self):
        """A straight run collapses to its endpoints."""
        path = pts((0, 0), (20, 0), (40, 0), (60, 0), (80, 0))
        assert simplify_path(path) == pts((0, 0), (80, 0))

    def test_vertical_run(self):
        """Vertical runs collapse as well."""
        path = pts((10, 0), (10, 20), (10, 40))
        assert simplify_path(path) == pts((10, 0), (10, 40))

    def test_l_shape(self):
        """The corner of an L is kept."""
        path = pts((0, 0), (20, 0), (40, 0), (40, 20), (40, 40))
        assert simplify_path(path) == pts((0, 0), (40, 0), (40, 40))

    def test_staircase_keeps_every_turn(self):
        """Every vertex of a staircase is a turn."""
        path = pts((0, 0), (20, 0), (20, 20), (40, 20), (40, 40))
        assert simplify_path(path) == path

    def test_repeated_points_dropped(self):
        """Consecutive duplicates are removed."""
        path = pts((0, 0), (0, 0), (20, 0), (20, 0), (20, 20))
        assert simplify_path(path) == pts((0, 0), (20, 0), (20, 20))

    def test_does_not_modify_input(self):
        """The input list is left untouched."""
        path = pts((0, 0), (20, 0), (40, 0))
        simplify_path(path)
        assert len(path) == 3

    @pytest.mark.parametrize("path", [
        pts((0, 0), (20, 0), (40, 0), (40, 20), (40, 40), (60, 40)),
        pts((0, 0), (0, 0), (20, 0), (20, 20), (20, 20), (20, 40)),
        pts((0, 0), (40, 0), (20, 0), (20, 20)),
        pts((0, 0), (20, 0), (20, 20), (40, 20), (40, 40)),
        pts((30, 30), (50, 30), (70, 30), (70, 50), (210, 106)),
    ])
    def test_idempotent(self, path):
        """Simplifying twice equals simplifying once."""
        once = simplify_path(path)
        assert simplify_path(once) == once


class TestIsRectilinear:
    """Tests for the axis-aligned check."""

    def test_axis_aligned(self):
        assert is_rectilinear(pts((0, 0), (20, 0), (20, 40)))

    def test_diagonal_step(self):
        assert not is_rectilinear(pts((0, 0), (20, 20)))

    def test_zero_length_step(self):
        """A repeated point moves in neither coordinate."""
        assert not is_rectilinear(pts((0, 0), (0, 0)))
