# File: src/hydronic_planner/config/routing.py
"""
Routing and sizing configuration for automatic pipe layout.

Design constants shared by every routing and dimensioning call in one
invocation. All distances are in plan design units (canvas units, not
physical units); power is in kcal/h and flow in l/h.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, List, Tuple


# =============================================================================
# Obstacle and grid constants
# =============================================================================

# Clearance around every emitter/source footprint
OBSTACLE_MARGIN = 30.0

# Pathfinding lattice spacing
GRID_CELL_SIZE = 20.0

# Expansions before the pathfinder gives up and draws a direct line
MAX_PATHFINDING_ITERATIONS = 10000

# Default canvas extent (origin at 0, 0)
CANVAS_WIDTH = 2000.0
CANVAS_HEIGHT = 1500.0

# =============================================================================
# Pipe geometry constants
# =============================================================================

# Perpendicular shift of a return pipe relative to its supply pipe
RETURN_PIPE_OFFSET = 8.0

# Distance from the emitter edge to its connection point
EMITTER_CONNECTION_INSET = 10.0

# Radius used to decide that a pipe end meets an emitter or another pipe
CONNECTION_TOLERANCE = 15.0

# =============================================================================
# Sizing constants
# =============================================================================

# Supply/return temperature differential (80°C supply - 60°C return)
DELTA_T = 20.0

# Allowed nominal diameters (mm)
PIPE_DIAMETERS: Tuple[int, ...] = (12, 16, 20, 25, 32, 40)

# (max flow l/h inclusive, diameter mm), ascending
DIAMETER_FLOW_LIMITS: Tuple[Tuple[float, int], ...] = (
    (300.0, 16),
    (600.0, 20),
    (1200.0, 25),
    (2500.0, 32),
)

# Diameter used above the last flow limit
MAX_PIPE_DIAMETER = 40

# Diameters assigned before the first dimensioning pass
DEFAULT_TRUNK_DIAMETER = 25
DEFAULT_BRANCH_DIAMETER = 20

DEFAULT_PIPE_MATERIAL = "multilayer"


@dataclass
class RoutingConfig:
    """
    Configuration for one routing/dimensioning invocation.

    Defaults come from the module constants; override individual fields
    to exercise boundary behavior (for example ``max_iterations=1``).

    Attributes:
        obstacle_margin: Clearance added on all sides of element footprints
        cell_size: Pathfinding grid resolution
        max_iterations: Expansion budget of a single pathfinding call
        canvas_width: Canvas extent along X
        canvas_height: Canvas extent along Y
        return_offset: Offset of return pipe vertices from supply vertices
        connection_inset: Inset of an emitter's connection point from its edge
        connection_tolerance: Match radius for pipe/emitter connections
        delta_t: Design temperature differential for flow conversion
        trunk_diameter: Initial diameter of trunk pipes
        branch_diameter: Initial diameter of branch/direct pipes
        material: Pipe material written on generated pipes
    """
    obstacle_margin: float = OBSTACLE_MARGIN
    cell_size: float = GRID_CELL_SIZE
    max_iterations: int = MAX_PATHFINDING_ITERATIONS
    canvas_width: float = CANVAS_WIDTH
    canvas_height: float = CANVAS_HEIGHT
    return_offset: float = RETURN_PIPE_OFFSET
    connection_inset: float = EMITTER_CONNECTION_INSET
    connection_tolerance: float = CONNECTION_TOLERANCE
    delta_t: float = DELTA_T
    trunk_diameter: int = DEFAULT_TRUNK_DIAMETER
    branch_diameter: int = DEFAULT_BRANCH_DIAMETER
    material: str = DEFAULT_PIPE_MATERIAL

    def __post_init__(self):
        if self.cell_size <= 0:
            raise ValueError(f"cell_size must be positive, got {self.cell_size}")
        if self.max_iterations < 0:
            raise ValueError(
                f"max_iterations must be non-negative, got {self.max_iterations}"
            )
        if self.delta_t <= 0:
            raise ValueError(f"delta_t must be positive, got {self.delta_t}")
        for name in ("trunk_diameter", "branch_diameter"):
            value = getattr(self, name)
            if value not in PIPE_DIAMETERS:
                raise ValueError(
                    f"{name}={value} is not a valid pipe diameter. "
                    f"Valid diameters: {list(PIPE_DIAMETERS)}"
                )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RoutingConfig":
        """Create from dictionary, ignoring unknown keys."""
        known = {f for f in cls.__dataclass_fields__}
        return cls(**{k: v for k, v in data.items() if k in known})


def get_default_config() -> RoutingConfig:
    """Return a fresh config populated with the design constants."""
    return RoutingConfig()


def get_diameter_table() -> List[Dict[str, Any]]:
    """
    Return the flow-to-diameter table as a list of rows.

    Useful for displaying the sizing rules next to a recommendation.
    """
    rows = []
    lower = 0.0
    for limit, diameter in DIAMETER_FLOW_LIMITS:
        rows.append({"min_flow": lower, "max_flow": limit, "diameter": diameter})
        lower = limit
    rows.append({"min_flow": lower, "max_flow": None, "diameter": MAX_PIPE_DIAMETER})
    return rows
