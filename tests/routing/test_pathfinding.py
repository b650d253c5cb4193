# File: tests/routing/test_pathfinding.py
"""
Unit tests for the grid A* pathfinder.

Tests cover:
- Basic orthogonal search
- Obstacle avoidance and self-exclusion
- Iteration budget and direct-line fallback
"""

import logging

import pytest

from hydronic_planner.config import RoutingConfig
from hydronic_planner.core import Emitter, Point, Source
from hydronic_planner.routing import (
    GridPathfinder,
    ObstacleMap,
    PathResult,
    find_orthogonal_path,
    is_rectilinear,
    simplify_path,
)


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def empty_map():
    """Obstacle map with nothing on the plan."""
    return ObstacleMap()


@pytest.fixture
def wall_map():
    """A tall emitter standing between x=100 and x=500 at y=300."""
    wall = Emitter(id="wall", x=280, y=200, width=40, height=200, power=500)
    return ObstacleMap.from_elements([wall], [])


# =============================================================================
# Basic search
# =============================================================================

class TestGridPathfinderBasic:
    """Tests for basic A* functionality."""

    def test_same_point(self, empty_map):
        """Path from a point to itself."""
        result = GridPathfinder(empty_map).find_path(Point(50, 50), Point(50, 50))
        assert result.success
        assert result.points == [Point(50, 50)]
        assert result.iterations == 0

    def test_straight_run(self, empty_map):
        """Aligned endpoints give a straight run of cell steps."""
        start, end = Point(100, 100), Point(200, 100)
        result = GridPathfinder(empty_map).find_path(start, end)

        assert result.success
        assert not result.fallback
        assert result.points[0] == start
        assert result.points[-1] == end
        assert all(p.y == 100 for p in result.points)
        assert simplify_path(result.points) == [start, end]

    def test_steps_are_one_cell(self, empty_map):
        """Consecutive lattice points are one cell apart."""
        result = GridPathfinder(empty_map).find_path(Point(0, 0), Point(100, 60))
        for a, b in zip(result.points, result.points[1:]):
            assert a.manhattan_distance_to(b) == pytest.approx(20.0)

    def test_unaligned_target(self, empty_map):
        """Off-grid targets are reached with axis-aligned closing moves."""
        start, end = Point(30, 30), Point(210, 106)
        result = GridPathfinder(empty_map).find_path(start, end)

        assert result.success
        assert result.points[0] == start
        assert result.points[-1] == end
        assert is_rectilinear(result.points)

    def test_target_within_one_cell(self, empty_map):
        """A target inside the first cell is reached immediately."""
        start, end = Point(0, 0), Point(15, 10)
        result = GridPathfinder(empty_map).find_path(start, end)

        assert result.iterations == 1
        assert result.points == [start, Point(15, 0), end]

    def test_path_is_shortest(self, empty_map):
        """Without obstacles the path length equals the Manhattan distance."""
        start, end = Point(40, 40), Point(240, 140)
        result = GridPathfinder(empty_map).find_path(start, end)
        length = sum(
            a.manhattan_distance_to(b)
            for a, b in zip(result.points, result.points[1:])
        )
        assert length == pytest.approx(start.manhattan_distance_to(end))

    def test_deterministic(self, wall_map):
        """Same inputs give the same path."""
        pf = GridPathfinder(wall_map)
        first = pf.find_path(Point(100, 300), Point(500, 300))
        second = pf.find_path(Point(100, 300), Point(500, 300))
        assert first.points == second.points


# =============================================================================
# Obstacles
# =============================================================================

class TestGridPathfinderObstacles:
    """Tests for obstacle avoidance."""

    def test_routes_around_obstacle(self, wall_map):
        """No lattice point of the path is inside the wall's margin."""
        start, end = Point(100, 300), Point(500, 300)
        result = GridPathfinder(wall_map).find_path(start, end)

        assert result.success
        assert is_rectilinear(result.points)
        assert not any(wall_map.is_blocked(p) for p in result.points)
        length = sum(
            a.manhattan_distance_to(b)
            for a, b in zip(result.points, result.points[1:])
        )
        assert length > start.manhattan_distance_to(end)

    def test_own_footprint_blocks_without_exclusion(self):
        """A start inside a footprint is boxed in unless excluded."""
        boiler = Source(id="boiler", x=100, y=100, width=60, height=60)
        obstacles = ObstacleMap.from_elements([], [boiler])
        pf = GridPathfinder(obstacles)
        start, end = boiler.connection_point(), Point(400, 130)

        boxed = pf.find_path(start, end)
        assert boxed.fallback
        assert boxed.iterations == 1

        freed = pf.find_path(start, end, exclude_ids={"boiler"})
        assert freed.success
        assert freed.points[-1] == end

    def test_single_id_exclusion(self):
        """A bare id string excludes that element, not its characters."""
        boiler = Source(id="boiler", x=100, y=100, width=60, height=60)
        obstacles = ObstacleMap.from_elements([], [boiler])
        pf = GridPathfinder(obstacles)
        start, end = boiler.connection_point(), Point(400, 130)

        by_id = pf.find_path(start, end, exclude_ids="boiler")
        by_set = pf.find_path(start, end, exclude_ids={"boiler"})

        assert by_id.success
        assert not by_id.fallback
        assert by_id.points == by_set.points

    def test_stays_within_canvas(self, empty_map):
        """Routes along the canvas edge never leave it."""
        config = RoutingConfig(canvas_width=400, canvas_height=300)
        result = GridPathfinder(empty_map, config).find_path(Point(0, 0), Point(400, 300))
        assert result.success
        assert all(0 <= p.x <= 400 and 0 <= p.y <= 300 for p in result.points)


# =============================================================================
# Budget and fallback
# =============================================================================

class TestGridPathfinderFallback:
    """The search never raises; it degrades to a direct line."""

    def test_iteration_cap_gives_direct_path(self, empty_map, caplog):
        """Hitting the cap returns [start, end] and warns."""
        config = RoutingConfig(max_iterations=1)
        start, end = Point(100, 100), Point(500, 500)

        with caplog.at_level(logging.WARNING):
            result = GridPathfinder(empty_map, config).find_path(start, end)

        assert isinstance(result, PathResult)
        assert result.fallback
        assert not result.success
        assert result.points == [start, end]
        assert result.iterations == 1
        assert "direct line" in caplog.text

    def test_zero_budget(self, empty_map):
        """A zero budget falls back without expanding anything."""
        config = RoutingConfig(max_iterations=0)
        result = GridPathfinder(empty_map, config).find_path(Point(0, 0), Point(200, 0))
        assert result.fallback
        assert result.iterations == 0

    def test_unreachable_target(self):
        """A target walled in by another element falls back."""
        blocker = Emitter(id="blocker", x=380, y=380, width=40, height=40)
        obstacles = ObstacleMap.from_elements([blocker], [])
        result = GridPathfinder(obstacles).find_path(Point(100, 100), Point(400, 400))
        assert result.fallback
        assert result.points == [Point(100, 100), Point(400, 400)]


class TestFindOrthogonalPath:
    """Tests for the convenience wrapper."""

    def test_connects_boiler_to_radiator(self, boiler, radiator):
        """Both endpoint elements are excluded from blocking."""
        start = boiler.connection_point()
        end = radiator.connection_point()
        points = find_orthogonal_path(
            start, end, [radiator], [boiler],
            exclude_ids={boiler.id, radiator.id},
        )
        assert points[0] == start
        assert points[-1] == end
        assert is_rectilinear(points)

    def test_single_exclude_id(self, boiler):
        """The wrapper accepts one id as a plain string."""
        start = boiler.connection_point()
        points = find_orthogonal_path(
            start, Point(400, 30), [], [boiler], exclude_ids=boiler.id
        )
        assert points[0] == start
        assert len(points) > 2
        assert points[-1] == Point(400, 30)
        assert is_rectilinear(points)
