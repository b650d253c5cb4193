# File: src/hydronic_planner/routing/obstacles.py
"""
Obstacle model for pipe routing.

Every emitter and source blocks the plan inside its footprint expanded
by a fixed margin. Cells are binary: a grid point is either free or
blocked, there is no partial cost.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Collection, Iterable, List, Optional, Sequence, Union

from hydronic_planner.config.routing import OBSTACLE_MARGIN
from hydronic_planner.core.elements import Emitter, PlanElement, Point, Source


ExcludeIds = Union[str, Collection[str], None]


@dataclass(frozen=True)
class Obstacle:
    """
    Margin-expanded footprint of a plan element.

    Attributes:
        element_id: Id of the element this obstacle belongs to
        min_x, min_y, max_x, max_y: Expanded bounds (inclusive)
    """
    element_id: str
    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @classmethod
    def from_element(cls, element: PlanElement, margin: float) -> "Obstacle":
        min_x, min_y, max_x, max_y = element.bounds
        return cls(
            element_id=element.id,
            min_x=min_x - margin,
            min_y=min_y - margin,
            max_x=max_x + margin,
            max_y=max_y + margin,
        )

    def contains_point(self, point: Point) -> bool:
        """Check if point is inside obstacle bounds."""
        return (
            self.min_x <= point.x <= self.max_x and
            self.min_y <= point.y <= self.max_y
        )


def normalize_excludes(exclude_ids: ExcludeIds) -> Collection[str]:
    """Accept a single id, a collection of ids or None."""
    if exclude_ids is None:
        return ()
    if isinstance(exclude_ids, str):
        return (exclude_ids,)
    return exclude_ids


@dataclass
class ObstacleMap:
    """
    All obstacles of one routing invocation.

    Attributes:
        obstacles: Expanded footprints of every emitter and source
        margin: Margin the footprints were expanded by
    """
    obstacles: List[Obstacle] = field(default_factory=list)
    margin: float = OBSTACLE_MARGIN

    @classmethod
    def from_elements(
        cls,
        emitters: Iterable[Emitter],
        sources: Iterable[Source],
        margin: float = OBSTACLE_MARGIN
    ) -> "ObstacleMap":
        obstacles = [Obstacle.from_element(e, margin) for e in emitters]
        obstacles.extend(Obstacle.from_element(s, margin) for s in sources)
        return cls(obstacles=obstacles, margin=margin)

    def is_blocked(self, point: Point, exclude_ids: ExcludeIds = None) -> bool:
        """
        Check whether a point falls inside any non-excluded obstacle.

        Args:
            point: Candidate grid point
            exclude_ids: Id or ids of the elements being connected; their
                own footprint never blocks their own connection point
        """
        excluded = normalize_excludes(exclude_ids)
        for obstacle in self.obstacles:
            if obstacle.element_id in excluded:
                continue
            if obstacle.contains_point(point):
                return True
        return False

    def blocking_ids(self, point: Point) -> List[str]:
        """Ids of every element whose expanded footprint contains the point."""
        return [o.element_id for o in self.obstacles if o.contains_point(point)]


def is_point_blocked(
    point: Point,
    emitters: Sequence[Emitter],
    sources: Sequence[Source],
    exclude_id: ExcludeIds = None,
    margin: Optional[float] = None
) -> bool:
    """
    Pure predicate form of the obstacle model.

    Args:
        point: Candidate point
        emitters: All emitters on the plan
        sources: All sources on the plan
        exclude_id: Element id (or ids) that must not block
        margin: Clearance around footprints, OBSTACLE_MARGIN by default

    Returns:
        True if the point lies inside another element's expanded footprint
    """
    if margin is None:
        margin = OBSTACLE_MARGIN
    excluded = normalize_excludes(exclude_id)
    for element in list(emitters) + list(sources):
        if element.id in excluded:
            continue
        if Obstacle.from_element(element, margin).contains_point(point):
            return True
    return False
