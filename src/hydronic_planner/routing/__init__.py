# File: src/hydronic_planner/routing/__init__.py
"""
Pipe Routing Module

Computes obstacle-avoiding rectilinear supply/return networks from a
heat source to every emitter.

Components:
- ObstacleMap: Margin-expanded element footprints
- GridPathfinder: Bounded A* over an orthogonal grid
- simplify_path: Reduces grid paths to turning points
- TrunkBranchComposer: Shares trunks between paths with a common first turn
- generate_auto_pipes: End-to-end entry point
"""

from .obstacles import Obstacle, ObstacleMap, is_point_blocked
from .pathfinding import GridPathfinder, PathResult, find_orthogonal_path
from .simplify import simplify_path, is_rectilinear
from .trunk_composer import (
    EmitterRoute,
    PipeRole,
    TrunkBranchComposer,
    compose_pipes,
    group_routes,
    offset_points,
)
from .routing_result import AutoRoutingResult, RoutingStatistics
from .auto_router import generate_auto_pipes

__all__ = [
    # Obstacles
    "Obstacle",
    "ObstacleMap",
    "is_point_blocked",
    # Pathfinding
    "GridPathfinder",
    "PathResult",
    "find_orthogonal_path",
    # Simplification
    "simplify_path",
    "is_rectilinear",
    # Composition
    "EmitterRoute",
    "PipeRole",
    "TrunkBranchComposer",
    "compose_pipes",
    "group_routes",
    "offset_points",
    # Results
    "AutoRoutingResult",
    "RoutingStatistics",
    "generate_auto_pipes",
]
