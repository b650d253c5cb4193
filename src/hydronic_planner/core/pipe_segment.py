# File: src/hydronic_planner/core/pipe_segment.py
"""
Pipe segments and the pipe network.

Supply and return pipes are always created in pairs. The pair is
identified by a correlation key derived from the ids: the two ids
differ only in their "supply"/"return" marker.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Dict, Iterable, Iterator, List, Optional
import math

from hydronic_planner.config.routing import (
    DEFAULT_BRANCH_DIAMETER,
    DEFAULT_PIPE_MATERIAL,
    PIPE_DIAMETERS,
)
from .elements import Point


class PipeKind(Enum):
    """Flow role of a pipe."""
    SUPPLY = "supply"  # IDA: boiler -> emitter
    RETURN = "return"  # RETORNO: emitter -> boiler

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_string(cls, value: str) -> "PipeKind":
        """
        Create PipeKind from string value.

        Raises:
            ValueError: If value doesn't match any kind
        """
        value_lower = str(value).lower()
        for member in cls:
            if member.value == value_lower:
                return member
        raise ValueError(
            f"Unknown pipe kind: {value}. "
            f"Valid kinds: {[m.value for m in cls]}"
        )


@dataclass
class PipeSegment:
    """
    A supply or return pipe run drawn as a polyline.

    Attributes:
        id: Unique identifier, carries the supply/return marker
        kind: Supply or return
        points: Ordered vertices in flow order
        diameter: Nominal diameter (mm), one of PIPE_DIAMETERS
        material: Pipe material label
        from_element_id: Element the pipe starts at, if any
        to_element_id: Element the pipe ends at, if any
        length: Cached polyline length, if computed
    """
    id: str
    kind: PipeKind
    points: List[Point] = field(default_factory=list)
    diameter: int = DEFAULT_BRANCH_DIAMETER
    material: str = DEFAULT_PIPE_MATERIAL
    from_element_id: Optional[str] = None
    to_element_id: Optional[str] = None
    length: Optional[float] = None

    @property
    def is_supply(self) -> bool:
        return self.kind is PipeKind.SUPPLY

    @property
    def start_point(self) -> Point:
        return self.points[0]

    @property
    def end_point(self) -> Point:
        return self.points[-1]

    @property
    def pair_key(self) -> str:
        return pipe_pair_key(self.id, self.kind)

    def polyline_length(self) -> float:
        """Sum of straight segment lengths between consecutive points."""
        return sum(
            a.distance_to(b) for a, b in zip(self.points, self.points[1:])
        )

    def with_diameter(self, diameter: int) -> "PipeSegment":
        """Return a copy with a new diameter."""
        validate_diameter(diameter)
        return replace(self, points=list(self.points), diameter=diameter)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the persisted project record."""
        result = {
            "id": self.id,
            "type": "pipe",
            "pipeType": self.kind.value,
            "points": [p.to_dict() for p in self.points],
            "diameter": self.diameter,
            "material": self.material,
        }
        if self.from_element_id is not None:
            result["fromElementId"] = self.from_element_id
        if self.to_element_id is not None:
            result["toElementId"] = self.to_element_id
        if self.length is not None:
            result["length"] = self.length
        return result

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PipeSegment":
        """
        Create from a persisted project record.

        Accepts ``kind`` as an alias of ``pipeType``.

        Raises:
            ValueError: If id or kind is missing
        """
        if "id" not in data:
            raise ValueError("Pipe data missing required key: id")
        kind = data.get("pipeType", data.get("kind"))
        if kind is None:
            raise ValueError(f"Pipe {data['id']} has no pipeType")

        return cls(
            id=str(data["id"]),
            kind=PipeKind.from_string(kind),
            points=[Point.from_dict(p) for p in data.get("points", [])],
            diameter=int(data.get("diameter", DEFAULT_BRANCH_DIAMETER)),
            material=data.get("material", DEFAULT_PIPE_MATERIAL),
            from_element_id=data.get("fromElementId"),
            to_element_id=data.get("toElementId"),
            length=data.get("length"),
        )


def pipe_pair_key(pipe_id: str, kind: PipeKind) -> str:
    """
    Correlation key shared by a supply pipe and its return pipe.

    Removes the first occurrence of the kind marker from the id, so
    "pipe-supply-trunk-3" and "pipe-return-trunk-3" both map to
    "pipe--trunk-3".
    """
    return pipe_id.replace(kind.value, "", 1)


def validate_diameter(diameter: int) -> None:
    """
    Raises:
        ValueError: If diameter is not one of PIPE_DIAMETERS
    """
    if diameter not in PIPE_DIAMETERS:
        raise ValueError(
            f"Invalid pipe diameter: {diameter}. "
            f"Valid diameters: {list(PIPE_DIAMETERS)}"
        )


def validate_pipe_segment(pipe: PipeSegment) -> None:
    """
    Check a segment before it is committed to a network.

    Raises:
        ValueError: If the segment has fewer than two points, a
            non-finite coordinate, or an invalid diameter
    """
    if len(pipe.points) < 2:
        raise ValueError(
            f"Pipe {pipe.id} has {len(pipe.points)} point(s); "
            f"at least 2 are required"
        )
    for p in pipe.points:
        if not (math.isfinite(p.x) and math.isfinite(p.y)):
            raise ValueError(f"Pipe {pipe.id} has non-finite point {p}")
    validate_diameter(pipe.diameter)


class PipeNetwork:
    """
    Insertion-ordered mapping from pipe id to PipeSegment.

    Every segment is validated on insertion. Passes that change the
    network build a new one rather than mutating segments in place.
    """

    def __init__(self, pipes: Optional[Iterable[PipeSegment]] = None):
        self._pipes: Dict[str, PipeSegment] = {}
        for pipe in pipes or []:
            self.add(pipe)

    def add(self, pipe: PipeSegment) -> None:
        """
        Add a segment.

        Raises:
            ValueError: If the segment is invalid or its id already exists
        """
        validate_pipe_segment(pipe)
        if pipe.id in self._pipes:
            raise ValueError(f"Duplicate pipe id: {pipe.id}")
        self._pipes[pipe.id] = pipe

    def add_pair(self, supply: PipeSegment, ret: PipeSegment) -> None:
        """Add a supply pipe together with its return pipe."""
        if supply.kind is not PipeKind.SUPPLY or ret.kind is not PipeKind.RETURN:
            raise ValueError(
                f"Expected (supply, return) pair, got ({supply.kind}, {ret.kind})"
            )
        if supply.pair_key != ret.pair_key:
            raise ValueError(
                f"Pipes {supply.id} and {ret.id} do not share a pairing key"
            )
        self.add(supply)
        self.add(ret)

    def get(self, pipe_id: str) -> Optional[PipeSegment]:
        return self._pipes.get(pipe_id)

    def __contains__(self, pipe_id: object) -> bool:
        return pipe_id in self._pipes

    def __iter__(self) -> Iterator[PipeSegment]:
        return iter(self._pipes.values())

    def __len__(self) -> int:
        return len(self._pipes)

    def supply_pipes(self) -> List[PipeSegment]:
        return [p for p in self._pipes.values() if p.kind is PipeKind.SUPPLY]

    def return_pipes(self) -> List[PipeSegment]:
        return [p for p in self._pipes.values() if p.kind is PipeKind.RETURN]

    def find_partner(self, pipe: PipeSegment) -> Optional[PipeSegment]:
        """Find the pipe of the opposite kind with the same pairing key."""
        key = pipe.pair_key
        for other in self._pipes.values():
            if other.kind is not pipe.kind and other.pair_key == key:
                return other
        return None

    def to_list(self) -> List[PipeSegment]:
        return list(self._pipes.values())

    def to_dict(self) -> Dict[str, Dict[str, Any]]:
        """Convert to {pipe_id: record} mapping."""
        return {pid: p.to_dict() for pid, p in self._pipes.items()}
