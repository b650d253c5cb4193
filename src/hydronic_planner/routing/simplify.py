# File: src/hydronic_planner/routing/simplify.py
"""
Path simplification for rectilinear routes.

Collapses the cell-by-cell output of the pathfinder to the turning
points needed to redraw the same shape as straight runs.
"""

from typing import List, Sequence

from hydronic_planner.core.elements import Point


def _is_collinear(prev: Point, cur: Point, nxt: Point) -> bool:
    horizontal = prev.y == cur.y == nxt.y
    vertical = prev.x == cur.x == nxt.x
    return horizontal or vertical


def _drop_repeats(points: Sequence[Point]) -> List[Point]:
    result = list(points[:1])
    for p in points[1:]:
        if p != result[-1]:
            result.append(p)
    return result


def simplify_path(points: Sequence[Point]) -> List[Point]:
    """
    Keep only the endpoints and the turning points of a path.

    An interior point is dropped when it sits on a strictly horizontal
    or strictly vertical run with both neighbours. Consecutive repeated
    points are dropped first.

    Args:
        points: Raw path, start to end

    Returns:
        Minimal vertex list reproducing the same polyline
    """
    points = _drop_repeats(points)
    if len(points) <= 2:
        return points

    simplified = [points[0]]
    for i in range(1, len(points) - 1):
        if not _is_collinear(points[i - 1], points[i], points[i + 1]):
            simplified.append(points[i])
    simplified.append(points[-1])

    # Dropping points can create new collinear neighbours (e.g. a spur
    # doubling back); repeat until stable.
    if len(simplified) < len(points) and len(simplified) > 2:
        return simplify_path(simplified)
    return simplified


def is_rectilinear(points: Sequence[Point]) -> bool:
    """True if every consecutive pair differs in exactly one coordinate."""
    for a, b in zip(points, points[1:]):
        dx = a.x != b.x
        dy = a.y != b.y
        if dx == dy:
            return False
    return True
