# File: src/hydronic_planner/sizing/__init__.py
"""
Pipe sizing: downstream load aggregation and diameter selection.
"""

from .diameter import calculate_flow_rate, select_pipe_diameter, diameter_for_power
from .downstream import (
    DownstreamLoad,
    DownstreamLoadAggregator,
    aggregate_downstream_load,
    build_supply_graph,
    find_supply_cycles,
)
from .dimensioning import PipeDimensionInfo, dimension_pipes, get_pipe_dimension_info

__all__ = [
    "calculate_flow_rate",
    "select_pipe_diameter",
    "diameter_for_power",
    "DownstreamLoad",
    "DownstreamLoadAggregator",
    "aggregate_downstream_load",
    "build_supply_graph",
    "find_supply_cycles",
    "PipeDimensionInfo",
    "dimension_pipes",
    "get_pipe_dimension_info",
]
