# File: src/hydronic_planner/routing/trunk_composer.py
"""
Trunk/branch composition of routed emitter paths.

When several emitters are routed from the same source, paths that leave
the source in the same direction and turn at the same point share one
trunk pipe up to that turn and split into individual branches there:

    Source ──────────┬──→ Emitter A
          (trunk)    │
                     └──→ Emitter B
                       (branches)

Every pipe is emitted as a supply/return pair. Return vertices are the
supply vertices shifted by a fixed offset, except the last vertex of a
branch return, which stays on the emitter's connection point.
"""

from __future__ import annotations

import logging
from collections import OrderedDict
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from hydronic_planner.config.routing import RoutingConfig
from hydronic_planner.core.elements import Emitter, Point, Source
from hydronic_planner.core.pipe_segment import PipeKind, PipeNetwork, PipeSegment

logger = logging.getLogger(__name__)

GroupKey = Tuple[int, int]


class PipeRole:
    """Role names embedded in generated pipe ids."""
    DIRECT = "direct"
    TRUNK = "trunk"
    BRANCH = "branch"


@dataclass
class EmitterRoute:
    """
    Simplified path from the source to one emitter.

    Attributes:
        emitter: Emitter served by the path
        points: Simplified path, source connection first
    """
    emitter: Emitter
    points: List[Point] = field(default_factory=list)

    @property
    def group_key(self) -> GroupKey:
        """First turning point as an integer coordinate pair."""
        turn = self.points[1]
        return (int(round(turn.x)), int(round(turn.y)))


def offset_points(
    points: Sequence[Point],
    offset: float,
    keep_last: bool = False
) -> List[Point]:
    """
    Shift a supply polyline to its return position.

    Args:
        points: Supply vertices
        offset: Shift applied to both coordinates
        keep_last: Leave the final vertex un-shifted (branch returns)
    """
    shifted = [p.offset(offset, offset) for p in points]
    if keep_last and shifted:
        shifted[-1] = points[-1]
    return shifted


def group_routes(routes: Sequence[EmitterRoute]) -> "OrderedDict[GroupKey, List[EmitterRoute]]":
    """Group routes by first turning point, keeping first-seen order."""
    groups: "OrderedDict[GroupKey, List[EmitterRoute]]" = OrderedDict()
    for route in routes:
        groups.setdefault(route.group_key, []).append(route)
    return groups


class TrunkBranchComposer:
    """
    Builds supply/return pipe pairs from per-emitter paths.

    Pipe ids follow ``pipe-<kind>-<role>-<n>``; a supply pipe and its
    return share ``n`` so their pairing keys match.
    """

    def __init__(self, config: Optional[RoutingConfig] = None):
        self.config = config or RoutingConfig()
        self._counter = 0

    def compose(
        self,
        source: Source,
        routes: Sequence[EmitterRoute]
    ) -> List[PipeSegment]:
        """
        Compose the pipe list for one source.

        Args:
            source: Source every route starts from
            routes: One simplified path per emitter

        Returns:
            Validated supply/return pipes, supply first in each pair
        """
        network = PipeNetwork()
        usable = []
        for route in routes:
            if len(route.points) < 2:
                logger.warning(
                    f"Emitter {route.emitter.id} has a degenerate path "
                    f"({len(route.points)} point); skipped"
                )
                continue
            usable.append(route)

        for key, members in group_routes(usable).items():
            if len(members) == 1:
                route = members[0]
                self._add_pair(
                    network, PipeRole.DIRECT, route.points,
                    diameter=self.config.branch_diameter,
                    from_id=source.id, to_id=route.emitter.id,
                )
                continue

            turn = members[0].points[1]
            logger.debug(
                f"Trunk at {key} shared by {len(members)} emitters: "
                f"{[m.emitter.id for m in members]}"
            )
            self._add_pair(
                network, PipeRole.TRUNK, [members[0].points[0], turn],
                diameter=self.config.trunk_diameter,
                from_id=source.id, to_id=None,
            )
            for route in members:
                branch = [turn] + list(route.points[2:])
                if len(branch) < 2:
                    # Emitter sits on the turn; the trunk already ends there
                    continue
                self._add_pair(
                    network, PipeRole.BRANCH, branch,
                    diameter=self.config.branch_diameter,
                    from_id=None, to_id=route.emitter.id,
                    keep_return_end=True,
                )

        return network.to_list()

    def _next_ids(self, role: str) -> Tuple[str, str]:
        self._counter += 1
        return (
            f"pipe-{PipeKind.SUPPLY.value}-{role}-{self._counter}",
            f"pipe-{PipeKind.RETURN.value}-{role}-{self._counter}",
        )

    def _add_pair(
        self,
        network: PipeNetwork,
        role: str,
        points: Sequence[Point],
        diameter: int,
        from_id: Optional[str],
        to_id: Optional[str],
        keep_return_end: bool = False
    ) -> None:
        supply_id, return_id = self._next_ids(role)
        supply = PipeSegment(
            id=supply_id,
            kind=PipeKind.SUPPLY,
            points=list(points),
            diameter=diameter,
            material=self.config.material,
            from_element_id=from_id,
            to_element_id=to_id,
        )
        supply.length = supply.polyline_length()

        ret = PipeSegment(
            id=return_id,
            kind=PipeKind.RETURN,
            points=offset_points(points, self.config.return_offset, keep_return_end),
            diameter=diameter,
            material=self.config.material,
            from_element_id=from_id,
            to_element_id=to_id,
        )
        ret.length = ret.polyline_length()

        network.add_pair(supply, ret)


def compose_pipes(
    source: Source,
    routes: Sequence[EmitterRoute],
    config: Optional[RoutingConfig] = None
) -> List[PipeSegment]:
    """Convenience wrapper around TrunkBranchComposer.compose."""
    return TrunkBranchComposer(config).compose(source, routes)
