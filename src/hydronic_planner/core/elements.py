# File: src/hydronic_planner/core/elements.py
"""
Plan elements placed on the floor plan.

Defines the geometry the routing engine works with:
- Point: Immutable 2D point in plan design units
- Emitter: Heat emitter (radiator) with thermal power
- Source: Heat source (boiler) feeding the network
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple
import math

from hydronic_planner.config.routing import EMITTER_CONNECTION_INSET


@dataclass(frozen=True)
class Point:
    """
    Immutable 2D point in plan coordinates.

    Attributes:
        x: Horizontal canvas coordinate
        y: Vertical canvas coordinate (grows downward on the canvas)
    """
    x: float
    y: float

    def to_tuple(self) -> Tuple[float, float]:
        """Convert to tuple."""
        return (self.x, self.y)

    def distance_to(self, other: "Point") -> float:
        """Calculate Euclidean distance to another point."""
        return math.hypot(self.x - other.x, self.y - other.y)

    def manhattan_distance_to(self, other: "Point") -> float:
        """Calculate Manhattan (rectilinear) distance to another point."""
        return abs(self.x - other.x) + abs(self.y - other.y)

    def offset(self, dx: float, dy: float) -> "Point":
        """Return a copy translated by (dx, dy)."""
        return Point(self.x + dx, self.y + dy)

    def to_dict(self) -> Dict[str, float]:
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Point":
        return cls(float(data["x"]), float(data["y"]))


@dataclass
class PlanElement:
    """
    Rectangular element on the plan.

    Attributes:
        id: Unique identifier
        x: Left edge
        y: Top edge
        width: Extent along X
        height: Extent along Y
        power: Thermal power in kcal/h
        floor: Optional floor tag ("ground", "first")
    """
    id: str
    x: float
    y: float
    width: float
    height: float
    power: float = 0.0
    floor: Optional[str] = None

    element_type = "element"

    @property
    def bounds(self) -> Tuple[float, float, float, float]:
        """Bounding box as (min_x, min_y, max_x, max_y)."""
        return (self.x, self.y, self.x + self.width, self.y + self.height)

    @property
    def center(self) -> Point:
        return Point(self.x + self.width / 2, self.y + self.height / 2)

    def connection_point(self, inset: float = EMITTER_CONNECTION_INSET) -> Point:
        """Point where pipes attach to this element."""
        return self.center

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result = {
            "id": self.id,
            "type": self.element_type,
            "x": self.x,
            "y": self.y,
            "width": self.width,
            "height": self.height,
            "power": self.power,
        }
        if self.floor is not None:
            result["floor"] = self.floor
        return result

    @classmethod
    def from_dict(cls, data: Dict[str, Any]):
        """
        Create element from dictionary.

        Raises:
            ValueError: If a required key is missing
        """
        try:
            return cls(
                id=str(data["id"]),
                x=float(data["x"]),
                y=float(data["y"]),
                width=float(data["width"]),
                height=float(data["height"]),
                power=float(data.get("power", 0.0)),
                floor=data.get("floor"),
            )
        except KeyError as e:
            raise ValueError(
                f"{cls.__name__} data missing required key: {e.args[0]}"
            ) from e


@dataclass
class Emitter(PlanElement):
    """
    Heat emitter (radiator).

    Orientation follows the footprint: taller than wide is vertical,
    anything else (including square) is horizontal. A horizontal emitter
    connects near its left edge at mid-height; a vertical emitter
    connects near its top edge at one third of its width.
    """

    element_type = "radiator"

    @property
    def is_vertical(self) -> bool:
        return self.height > self.width

    def connection_point(self, inset: float = EMITTER_CONNECTION_INSET) -> Point:
        if self.is_vertical:
            return Point(self.x + self.width / 3, self.y + inset)
        return Point(self.x + inset, self.y + self.height / 2)


@dataclass
class Source(PlanElement):
    """Heat source (boiler). Pipes leave from its geometric center."""

    element_type = "boiler"
