# File: src/hydronic_planner/utils/serialization.py

"""
JSON round-trip of project layouts and pipe lists.

Project files keep the keys used by the editor: ``radiators``,
``boilers``, ``pipes`` and ``rooms``. Pipe records written here read
back into identical segments.

Usage:
    from hydronic_planner.utils.serialization import load_layout, pipes_to_json

    layout = load_layout(json.loads(text))
    result = generate_auto_pipes(layout.emitters, layout.sources)
    text = pipes_to_json(result.pipes)
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Sequence
import json

from hydronic_planner.core.elements import Emitter, Source
from hydronic_planner.core.pipe_segment import PipeNetwork, PipeSegment
from hydronic_planner.thermal.room_load import Room


@dataclass
class ProjectLayout:
    """
    Everything the engine reads from a project file.

    Attributes:
        emitters: Radiators on the plan
        sources: Boilers on the plan
        pipes: Existing pipe network
        rooms: Rooms with their thermal parameters
        metadata: Any other top-level keys, preserved verbatim
    """
    emitters: List[Emitter] = field(default_factory=list)
    sources: List[Source] = field(default_factory=list)
    pipes: List[PipeSegment] = field(default_factory=list)
    rooms: List[Room] = field(default_factory=list)
    metadata: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        result = dict(self.metadata)
        result.update({
            "radiators": [e.to_dict() for e in self.emitters],
            "boilers": [s.to_dict() for s in self.sources],
            "pipes": [p.to_dict() for p in self.pipes],
            "rooms": [r.to_dict() for r in self.rooms],
        })
        return result


LAYOUT_KEYS = ("radiators", "boilers", "pipes", "rooms")


def _load_pipes(records: Sequence[Dict[str, Any]]) -> List[PipeSegment]:
    # Segments are validated on entry; ids must be unique
    network = PipeNetwork(PipeSegment.from_dict(d) for d in records)
    return network.to_list()


def load_layout(data: Dict[str, Any]) -> ProjectLayout:
    """
    Parse a project dictionary.

    Raises:
        ValueError: If data is not a mapping, an element is malformed or a
            pipe is invalid (fewer than two points, unknown diameter,
            duplicate id)
    """
    if not isinstance(data, dict):
        raise ValueError(f"Project data must be an object, got {type(data).__name__}")

    return ProjectLayout(
        emitters=[Emitter.from_dict(d) for d in data.get("radiators", [])],
        sources=[Source.from_dict(d) for d in data.get("boilers", [])],
        pipes=_load_pipes(data.get("pipes", [])),
        rooms=[Room.from_dict(d) for d in data.get("rooms", [])],
        metadata={k: v for k, v in data.items() if k not in LAYOUT_KEYS},
    )


def pipes_to_json(pipes: Sequence[PipeSegment], indent: int = 2) -> str:
    """Serialize a pipe list to JSON."""
    return json.dumps([p.to_dict() for p in pipes], indent=indent)


def pipes_from_json(text: str) -> List[PipeSegment]:
    """
    Deserialize a pipe list from JSON.

    Raises:
        ValueError: If the JSON is not a list of valid pipe records
    """
    data = json.loads(text)
    if not isinstance(data, list):
        raise ValueError("Pipe JSON must be a list of pipe records")
    return _load_pipes(data)
