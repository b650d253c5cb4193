# File: src/hydronic_planner/routing/routing_result.py
"""
Result data structures for automatic pipe generation.

Carries the generated pipes together with the soft warnings raised
along the way (missing inputs, pathfinding fallbacks) and statistics
about the run.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List
from datetime import datetime
import json

from hydronic_planner.core.pipe_segment import PipeKind, PipeSegment


@dataclass
class RoutingStatistics:
    """
    Statistics about one auto-routing run.

    Attributes:
        emitters_requested: Number of emitters passed in
        emitters_routed: Emitters that received a pipe connection
        fallback_paths: Paths that used the direct-line fallback
        trunk_groups: Groups that share a trunk
        total_iterations: Pathfinder expansions over all calls
        total_supply_length: Summed length of supply pipes
        routing_time_ms: Wall time of the run in milliseconds
    """
    emitters_requested: int = 0
    emitters_routed: int = 0
    fallback_paths: int = 0
    trunk_groups: int = 0
    total_iterations: int = 0
    total_supply_length: float = 0.0
    routing_time_ms: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "emitters_requested": self.emitters_requested,
            "emitters_routed": self.emitters_routed,
            "fallback_paths": self.fallback_paths,
            "trunk_groups": self.trunk_groups,
            "total_iterations": self.total_iterations,
            "total_supply_length": self.total_supply_length,
            "routing_time_ms": self.routing_time_ms,
        }


@dataclass
class AutoRoutingResult:
    """
    Complete result of generate_auto_pipes.

    Attributes:
        pipes: Generated supply/return pipes
        warnings: Human-readable soft failures
        statistics: Run statistics
        timestamp: When the routing was performed
    """
    pipes: List[PipeSegment] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    statistics: RoutingStatistics = field(default_factory=RoutingStatistics)
    timestamp: str = field(default_factory=lambda: datetime.now().isoformat())

    @property
    def supply_pipes(self) -> List[PipeSegment]:
        return [p for p in self.pipes if p.kind is PipeKind.SUPPLY]

    @property
    def return_pipes(self) -> List[PipeSegment]:
        return [p for p in self.pipes if p.kind is PipeKind.RETURN]

    def add_warning(self, message: str) -> None:
        self.warnings.append(message)

    def is_complete(self) -> bool:
        """True when pipes were produced without any warning."""
        return bool(self.pipes) and not self.warnings

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "pipes": [p.to_dict() for p in self.pipes],
            "warnings": list(self.warnings),
            "statistics": self.statistics.to_dict(),
            "timestamp": self.timestamp,
        }

    def to_json(self, indent: int = 2) -> str:
        """Convert to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)
