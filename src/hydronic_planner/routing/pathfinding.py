# File: src/hydronic_planner/routing/pathfinding.py
"""
A* pathfinding for rectilinear pipe routing.

Searches a lattice of grid points anchored at the start point, moving
only up/down/left/right. Each step costs one cell size and the
heuristic is the Manhattan distance to the target, which is admissible
for 4-directional moves.

The search is bounded by an iteration budget. When the budget runs out
the pathfinder returns the direct two-point line instead of raising, so
an interactive session can never stall on a single routing request.
"""

import heapq
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Set, Tuple

from hydronic_planner.config.routing import RoutingConfig
from hydronic_planner.core.elements import Emitter, Point, Source
from .obstacles import ExcludeIds, ObstacleMap, normalize_excludes

logger = logging.getLogger(__name__)

GridIndex = Tuple[int, int]

# Expansion order: +x, -x, +y, -y
NEIGHBOR_STEPS: Tuple[GridIndex, ...] = ((1, 0), (-1, 0), (0, 1), (0, -1))


@dataclass
class PathResult:
    """
    Result of a pathfinding operation.

    Attributes:
        points: Path from start to end, inclusive
        success: Whether the search reached the target
        iterations: Number of node expansions performed
        fallback: Whether points is the direct-line fallback
    """
    points: List[Point] = field(default_factory=list)
    success: bool = False
    iterations: int = 0
    fallback: bool = False


class GridPathfinder:
    """
    A* search over an implicit orthogonal grid.

    Uses f(n) = g(n) + h(n) where g is the number of steps taken times
    the cell size and h is the Manhattan distance to the target. Ties on
    f are broken by insertion order.
    """

    def __init__(
        self,
        obstacles: ObstacleMap,
        config: Optional[RoutingConfig] = None
    ):
        """
        Initialize pathfinder.

        Args:
            obstacles: Obstacle map shared by every call
            config: Grid size, iteration budget and canvas bounds
        """
        self.obstacles = obstacles
        self.config = config or RoutingConfig()

    def find_path(
        self,
        start: Point,
        end: Point,
        exclude_ids: ExcludeIds = None
    ) -> PathResult:
        """
        Find an orthogonal path from start to end.

        Args:
            start: Path origin, also the grid anchor
            end: Target point
            exclude_ids: Element id, or ids, whose footprint must not block
                this call

        Returns:
            PathResult; on exhaustion the points are [start, end] with
            fallback set
        """
        if start == end:
            return PathResult(points=[start], success=True)

        cell = self.config.cell_size
        excluded = set(normalize_excludes(exclude_ids))
        bounds = self._search_bounds(start, end)

        def to_point(idx: GridIndex) -> Point:
            return Point(start.x + idx[0] * cell, start.y + idx[1] * cell)

        def heuristic(p: Point) -> float:
            return abs(p.x - end.x) + abs(p.y - end.y)

        origin: GridIndex = (0, 0)
        counter = 0
        # (f_score, counter, index)
        open_set = [(heuristic(start), counter, origin)]
        g_scores: Dict[GridIndex, float] = {origin: 0.0}
        parents: Dict[GridIndex, GridIndex] = {}
        closed: Set[GridIndex] = set()
        iterations = 0

        while open_set:
            if iterations >= self.config.max_iterations:
                break

            _, _, current = heapq.heappop(open_set)
            if current in closed:
                continue

            iterations += 1
            current_point = to_point(current)

            if (abs(current_point.x - end.x) <= cell and
                    abs(current_point.y - end.y) <= cell):
                points = self._reconstruct(current, parents, to_point, end)
                logger.debug(
                    f"Path found from {start} to {end}: "
                    f"{len(points)} points, {iterations} iterations"
                )
                return PathResult(
                    points=points, success=True, iterations=iterations
                )

            closed.add(current)
            current_g = g_scores[current]

            for di, dj in NEIGHBOR_STEPS:
                neighbor = (current[0] + di, current[1] + dj)
                if neighbor in closed:
                    continue

                neighbor_point = to_point(neighbor)
                if not self._in_bounds(neighbor_point, bounds):
                    continue
                if self.obstacles.is_blocked(neighbor_point, excluded):
                    continue

                tentative_g = current_g + cell
                if tentative_g < g_scores.get(neighbor, float('inf')):
                    g_scores[neighbor] = tentative_g
                    parents[neighbor] = current
                    counter += 1
                    heapq.heappush(
                        open_set,
                        (tentative_g + heuristic(neighbor_point), counter, neighbor)
                    )

        logger.warning(
            f"No orthogonal path from ({start.x:.1f}, {start.y:.1f}) to "
            f"({end.x:.1f}, {end.y:.1f}) after {iterations} iterations; "
            f"using direct line"
        )
        return PathResult(
            points=[start, end],
            success=False,
            iterations=iterations,
            fallback=True,
        )

    def _search_bounds(
        self, start: Point, end: Point
    ) -> Tuple[float, float, float, float]:
        """Canvas bounds widened to contain both endpoints."""
        return (
            min(0.0, start.x, end.x),
            min(0.0, start.y, end.y),
            max(self.config.canvas_width, start.x, end.x),
            max(self.config.canvas_height, start.y, end.y),
        )

    @staticmethod
    def _in_bounds(
        point: Point, bounds: Tuple[float, float, float, float]
    ) -> bool:
        min_x, min_y, max_x, max_y = bounds
        return min_x <= point.x <= max_x and min_y <= point.y <= max_y

    @staticmethod
    def _reconstruct(
        last: GridIndex,
        parents: Dict[GridIndex, GridIndex],
        to_point,
        end: Point
    ) -> List[Point]:
        """Follow parent links back to the start, then close onto end."""
        indices = [last]
        while indices[-1] in parents:
            indices.append(parents[indices[-1]])
        points = [to_point(idx) for idx in reversed(indices)]

        tail = points[-1]
        if tail != end:
            if tail.x != end.x and tail.y != end.y:
                points.append(Point(end.x, tail.y))
            points.append(end)
        return points


def find_orthogonal_path(
    start: Point,
    end: Point,
    emitters: Sequence[Emitter],
    sources: Sequence[Source],
    exclude_ids: ExcludeIds = None,
    config: Optional[RoutingConfig] = None
) -> List[Point]:
    """
    Convenience function to route one connection.

    Args:
        start: Path origin
        end: Path target
        emitters: All emitters (obstacles)
        sources: All sources (obstacles)
        exclude_ids: Element id, or ids, that must not block this connection
        config: Routing configuration

    Returns:
        Path points from start to end
    """
    config = config or RoutingConfig()
    obstacles = ObstacleMap.from_elements(emitters, sources, config.obstacle_margin)
    return GridPathfinder(obstacles, config).find_path(start, end, exclude_ids).points
