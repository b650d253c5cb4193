# File: src/hydronic_planner/config/__init__.py

"""
Configuration package for the hydronic planner.
Provides a unified interface to the design constants used by
routing (obstacles, grid, iteration budget) and sizing
(temperature differential, diameter table).
"""

from hydronic_planner.config.routing import (
    OBSTACLE_MARGIN,
    GRID_CELL_SIZE,
    MAX_PATHFINDING_ITERATIONS,
    CANVAS_WIDTH,
    CANVAS_HEIGHT,
    RETURN_PIPE_OFFSET,
    EMITTER_CONNECTION_INSET,
    CONNECTION_TOLERANCE,
    DELTA_T,
    PIPE_DIAMETERS,
    DIAMETER_FLOW_LIMITS,
    MAX_PIPE_DIAMETER,
    DEFAULT_TRUNK_DIAMETER,
    DEFAULT_BRANCH_DIAMETER,
    DEFAULT_PIPE_MATERIAL,
    RoutingConfig,
    get_default_config,
    get_diameter_table,
)


def get_system_info() -> dict:
    """
    Returns a complete overview of the default configuration.
    Useful for debugging and validation.
    """
    return {
        "routing": get_default_config().to_dict(),
        "pipe_diameters": list(PIPE_DIAMETERS),
        "diameter_table": get_diameter_table(),
    }


__all__ = [
    "OBSTACLE_MARGIN",
    "GRID_CELL_SIZE",
    "MAX_PATHFINDING_ITERATIONS",
    "CANVAS_WIDTH",
    "CANVAS_HEIGHT",
    "RETURN_PIPE_OFFSET",
    "EMITTER_CONNECTION_INSET",
    "CONNECTION_TOLERANCE",
    "DELTA_T",
    "PIPE_DIAMETERS",
    "DIAMETER_FLOW_LIMITS",
    "MAX_PIPE_DIAMETER",
    "DEFAULT_TRUNK_DIAMETER",
    "DEFAULT_BRANCH_DIAMETER",
    "DEFAULT_PIPE_MATERIAL",
    "RoutingConfig",
    "get_default_config",
    "get_diameter_table",
    "get_system_info",
]
