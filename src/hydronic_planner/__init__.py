# File: src/hydronic_planner/__init__.py
"""
Hydronic Planner

Automatic routing and sizing of supply/return pipe networks for
radiator heating installations drawn on a 2-D floor plan.
"""

from hydronic_planner.config.routing import RoutingConfig
from hydronic_planner.core import (
    Point,
    Emitter,
    Source,
    PipeKind,
    PipeSegment,
    PipeNetwork,
)
from hydronic_planner.routing import (
    AutoRoutingResult,
    GridPathfinder,
    generate_auto_pipes,
    simplify_path,
)
from hydronic_planner.sizing import (
    PipeDimensionInfo,
    dimension_pipes,
    get_pipe_dimension_info,
)

__version__ = "0.1.0"

__all__ = [
    "RoutingConfig",
    "Point",
    "Emitter",
    "Source",
    "PipeKind",
    "PipeSegment",
    "PipeNetwork",
    "AutoRoutingResult",
    "GridPathfinder",
    "generate_auto_pipes",
    "simplify_path",
    "PipeDimensionInfo",
    "dimension_pipes",
    "get_pipe_dimension_info",
]
