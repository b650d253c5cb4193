# File: src/hydronic_planner/routing/auto_router.py
"""
Automatic supply/return network generation.

Routing Strategy:
1. **Obstacles**: Every emitter and source footprint, expanded by the margin
2. **Pathfinding**: Orthogonal A* from the source center to each
   emitter connection point
3. **Simplification**: Reduce each grid path to its turning points
4. **Composition**: Merge paths sharing a first turn into trunk + branches

The first source is the one all emitters are routed from. Missing
inputs never raise: the result is empty and carries a warning.
"""

import logging
import time
from typing import List, Optional, Sequence

from hydronic_planner.config.routing import RoutingConfig
from hydronic_planner.core.elements import Emitter, Source
from .obstacles import ObstacleMap
from .pathfinding import GridPathfinder
from .routing_result import AutoRoutingResult
from .simplify import simplify_path
from .trunk_composer import EmitterRoute, TrunkBranchComposer, group_routes

logger = logging.getLogger(__name__)


def generate_auto_pipes(
    emitters: Sequence[Emitter],
    sources: Sequence[Source],
    config: Optional[RoutingConfig] = None,
    pathfinder=None
) -> AutoRoutingResult:
    """
    Build a supply/return network connecting every emitter to the source.

    Args:
        emitters: Emitters to connect
        sources: Heat sources; the first one is used
        config: Routing configuration, defaults to the design constants
        pathfinder: Optional object with ``find_path(start, end,
            exclude_ids)`` returning a PathResult; a GridPathfinder over
            all elements is used when omitted

    Returns:
        AutoRoutingResult with pipes, warnings and statistics
    """
    config = config or RoutingConfig()
    result = AutoRoutingResult()
    result.statistics.emitters_requested = len(emitters)

    if not sources:
        message = "No heat source to connect emitters to"
        logger.warning(message)
        result.add_warning(message)
        return result

    if not emitters:
        message = "No emitters to connect"
        logger.warning(message)
        result.add_warning(message)
        return result

    started = time.perf_counter()
    source = sources[0]
    if len(sources) > 1:
        logger.info(
            f"{len(sources)} sources on the plan; routing from {source.id}"
        )

    if pathfinder is None:
        obstacles = ObstacleMap.from_elements(
            emitters, sources, config.obstacle_margin
        )
        pathfinder = GridPathfinder(obstacles, config)

    start = source.connection_point()
    routes: List[EmitterRoute] = []

    for emitter in emitters:
        end = emitter.connection_point(config.connection_inset)
        path = pathfinder.find_path(start, end, {source.id, emitter.id})
        result.statistics.total_iterations += path.iterations

        if path.fallback:
            result.statistics.fallback_paths += 1
            result.add_warning(
                f"Emitter {emitter.id}: no obstacle-free path found, "
                f"connected with a direct line"
            )

        points = simplify_path(path.points)
        if len(points) < 2:
            result.add_warning(
                f"Emitter {emitter.id}: connection point coincides with "
                f"the source; not connected"
            )
            continue

        routes.append(EmitterRoute(emitter=emitter, points=points))
        logger.debug(f"Routed {emitter.id}: {len(points)} vertices")

    result.pipes = TrunkBranchComposer(config).compose(source, routes)

    stats = result.statistics
    stats.emitters_routed = len(routes)
    stats.trunk_groups = sum(
        1 for members in group_routes(routes).values() if len(members) > 1
    )
    stats.total_supply_length = sum(
        p.polyline_length() for p in result.supply_pipes
    )
    stats.routing_time_ms = (time.perf_counter() - started) * 1000

    logger.info(
        f"Generated {len(result.pipes)} pipes for {stats.emitters_routed} "
        f"emitters ({stats.trunk_groups} shared trunks, "
        f"{stats.fallback_paths} fallbacks)"
    )
    return result
