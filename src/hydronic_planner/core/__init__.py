# File: src/hydronic_planner/core/__init__.py
"""
Core data model: plan elements, pipe segments and the pipe network.
"""

from .elements import Point, PlanElement, Emitter, Source
from .pipe_segment import (
    PipeKind,
    PipeSegment,
    PipeNetwork,
    pipe_pair_key,
    validate_diameter,
    validate_pipe_segment,
)

__all__ = [
    "Point",
    "PlanElement",
    "Emitter",
    "Source",
    "PipeKind",
    "PipeSegment",
    "PipeNetwork",
    "pipe_pair_key",
    "validate_diameter",
    "validate_pipe_segment",
]
