# File: src/hydronic_planner/thermal/room_load.py
"""
Room heat-load estimation and boiler sizing.

Room power = area × thermal factor, +15% with an exterior wall, then
scaled by the window level. The boiler is sized to run at 80% of its
capacity when all emitters are on.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence

from hydronic_planner.core.elements import Emitter, Source
from hydronic_planner.core.pipe_segment import PipeSegment

# Allowed thermal factors (kcal/h per m²)
THERMAL_FACTORS = (40, 50, 60)
DEFAULT_THERMAL_FACTOR = 50

EXTERIOR_WALL_FACTOR = 1.15

# Boiler working point as a fraction of its rated power
BOILER_WORKING_RATIO = 0.80

KCAL_PER_KW = 860


class WindowsLevel(Enum):
    """Glazing level of a room, as stored in project files."""
    NONE = "sin-ventanas"
    FEW = "pocas"
    NORMAL = "normales"
    MANY = "muchas"

    @property
    def factor(self) -> float:
        return WINDOW_FACTORS[self]


WINDOW_FACTORS: Dict[WindowsLevel, float] = {
    WindowsLevel.NONE: 1.00,
    WindowsLevel.FEW: 1.05,
    WindowsLevel.NORMAL: 1.10,
    WindowsLevel.MANY: 1.20,
}


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


@dataclass
class Room:
    """
    A heated room.

    Attributes:
        id: Unique identifier
        name: Display name
        area: Floor area (m²)
        height: Ceiling height (m)
        thermal_factor: Base load per m², one of THERMAL_FACTORS
        has_exterior_wall: Adds 15% to the load
        windows_level: Glazing level adjustment
        radiator_ids: Emitters assigned to this room
        floor: Optional floor tag
        bounds: Optional drawing bounds {x, y, width, height}
    """
    id: str
    name: str
    area: float
    height: float = 2.5
    thermal_factor: int = DEFAULT_THERMAL_FACTOR
    has_exterior_wall: bool = False
    windows_level: WindowsLevel = WindowsLevel.NORMAL
    radiator_ids: List[str] = field(default_factory=list)
    floor: Optional[str] = None
    bounds: Optional[Dict[str, float]] = None

    def __post_init__(self):
        if self.thermal_factor not in THERMAL_FACTORS:
            raise ValueError(
                f"Invalid thermal factor {self.thermal_factor} for room "
                f"{self.id}. Valid factors: {list(THERMAL_FACTORS)}"
            )
        if isinstance(self.windows_level, str):
            self.windows_level = WindowsLevel(self.windows_level)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the persisted project record."""
        result = {
            "id": self.id,
            "name": self.name,
            "area": self.area,
            "height": self.height,
            "thermalFactor": self.thermal_factor,
            "hasExteriorWall": self.has_exterior_wall,
            "windowsLevel": self.windows_level.value,
            "radiatorIds": list(self.radiator_ids),
        }
        if self.floor is not None:
            result["floor"] = self.floor
        if self.bounds is not None:
            result["bounds"] = dict(self.bounds)
        return result

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Room":
        """Create from a persisted project record."""
        try:
            return cls(
                id=str(data["id"]),
                name=data.get("name", ""),
                area=float(data["area"]),
                height=float(data.get("height", 2.5)),
                thermal_factor=int(data.get("thermalFactor", DEFAULT_THERMAL_FACTOR)),
                has_exterior_wall=bool(data.get("hasExteriorWall", False)),
                windows_level=WindowsLevel(data.get("windowsLevel", "normales")),
                radiator_ids=list(data.get("radiatorIds", [])),
                floor=data.get("floor"),
                bounds=data.get("bounds"),
            )
        except KeyError as e:
            raise ValueError(f"Room data missing required key: {e.args[0]}") from e


@dataclass
class PowerSufficiency:
    """Required vs. installed power of a room."""
    required: int
    installed: float
    sufficient: bool
    percentage: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "required": self.required,
            "installed": self.installed,
            "sufficient": self.sufficient,
            "percentage": self.percentage,
        }


@dataclass
class BoilerSizing:
    """Recommended boiler power for a set of emitters."""
    total_emitter_power: float
    recommended_boiler_power: int
    working_percentage: int = int(BOILER_WORKING_RATIO * 100)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "totalRadiatorPower": self.total_emitter_power,
            "recommendedBoilerPower": self.recommended_boiler_power,
            "workingPercentage": self.working_percentage,
        }


def calculate_room_power(room: Room) -> int:
    """Required heating power of a room in kcal/h."""
    power = room.area * room.thermal_factor
    if room.has_exterior_wall:
        power *= EXTERIOR_WALL_FACTOR
    power *= room.windows_level.factor
    return _round_half_up(power)


def calculate_total_power(emitters: Sequence[Emitter]) -> float:
    return sum(e.power for e in emitters)


def calculate_installed_power(room: Room, emitters: Sequence[Emitter]) -> float:
    """Summed power of the emitters assigned to a room."""
    assigned = set(room.radiator_ids)
    return calculate_total_power([e for e in emitters if e.id in assigned])


def check_power_sufficiency(room: Room, emitters: Sequence[Emitter]) -> PowerSufficiency:
    """Compare a room's required power with the power installed in it."""
    required = calculate_room_power(room)
    installed = calculate_installed_power(room, emitters)
    percentage = _round_half_up(installed / required * 100) if required > 0 else 0
    return PowerSufficiency(
        required=required,
        installed=installed,
        sufficient=installed >= required,
        percentage=percentage,
    )


def calculate_boiler_power(emitters: Sequence[Emitter]) -> BoilerSizing:
    """Boiler power that keeps the boiler at its working ratio."""
    total = calculate_total_power(emitters)
    return BoilerSizing(
        total_emitter_power=total,
        recommended_boiler_power=_round_half_up(total / BOILER_WORKING_RATIO),
    )


def is_boiler_power_sufficient(source: Source, emitters: Sequence[Emitter]) -> bool:
    return source.power >= calculate_boiler_power(emitters).recommended_boiler_power


def kcal_to_kw(kcal: float) -> float:
    """Convert kcal/h to kW, rounded to one decimal."""
    return _round_half_up(kcal / KCAL_PER_KW * 10) / 10


def kw_to_kcal(kw: float) -> int:
    """Convert kW to kcal/h."""
    return _round_half_up(kw * KCAL_PER_KW)


def calculate_pipe_length(pipe: PipeSegment) -> float:
    """Polyline length of a pipe in design units."""
    return pipe.polyline_length()
