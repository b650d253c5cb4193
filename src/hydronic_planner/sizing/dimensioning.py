# File: src/hydronic_planner/sizing/dimensioning.py
"""
Dimensioning pass over a pipe network.

Sizes every supply pipe from the load it serves, then gives each return
pipe the diameter of its paired supply pipe. The pass only rewrites
``diameter`` and returns new segment objects; running it twice on the
same network and emitter powers yields the same diameters.
"""

import logging
import math
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

from hydronic_planner.config.routing import RoutingConfig
from hydronic_planner.core.elements import Emitter, Source
from hydronic_planner.core.pipe_segment import PipeKind, PipeSegment, validate_pipe_segment
from .diameter import calculate_flow_rate, select_pipe_diameter
from .downstream import DownstreamLoadAggregator

logger = logging.getLogger(__name__)


@dataclass
class PipeDimensionInfo:
    """
    Recommended sizing of one pipe, for "recommended vs. actual" display.

    Attributes:
        total_power: Downstream power (kcal/h)
        flow_rate: Required flow (l/h), exact; to_dict() rounds it half up
        recommended_diameter: Diameter from the sizing table (mm)
        emitter_count: Number of emitters served
    """
    total_power: float
    flow_rate: float
    recommended_diameter: int
    emitter_count: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "totalPower": self.total_power,
            "flowRate": int(math.floor(self.flow_rate + 0.5)),
            "recommendedDiameter": self.recommended_diameter,
            "emitterCount": self.emitter_count,
        }


def _find_supply_partner(
    pipe: PipeSegment,
    pipes: Sequence[PipeSegment]
) -> Optional[PipeSegment]:
    key = pipe.pair_key
    for other in pipes:
        if other.kind is PipeKind.SUPPLY and other.pair_key == key:
            return other
    return None


def dimension_pipes(
    pipes: Sequence[PipeSegment],
    emitters: Sequence[Emitter],
    sources: Sequence[Source],
    config: Optional[RoutingConfig] = None
) -> List[PipeSegment]:
    """
    Recompute pipe diameters from downstream thermal load.

    Args:
        pipes: Current network
        emitters: Emitters with their power
        sources: Heat sources (a network without one is not sized)
        config: Tolerances and ΔT

    Returns:
        New list of pipes in the same order with updated diameters

    Raises:
        ValueError: If a pipe has fewer than two points or an invalid
            diameter
    """
    config = config or RoutingConfig()

    if not pipes:
        logger.warning("No pipes to dimension")
        return []

    for pipe in pipes:
        validate_pipe_segment(pipe)

    if not sources or not emitters:
        logger.warning("Dimensioning needs at least one source and one emitter")
        return list(pipes)

    aggregator = DownstreamLoadAggregator(pipes, emitters, config)

    sized: List[PipeSegment] = []
    for pipe in pipes:
        if pipe.kind is not PipeKind.SUPPLY:
            sized.append(pipe)
            continue

        load = aggregator.aggregate(pipe)
        if load.total_power == 0:
            logger.warning(
                f"Supply pipe {pipe.id} serves no emitters; "
                f"keeping diameter {pipe.diameter}"
            )
            sized.append(pipe)
            continue

        flow_rate = calculate_flow_rate(load.total_power, config.delta_t)
        diameter = select_pipe_diameter(flow_rate)
        logger.debug(
            f"Pipe {pipe.id}: {load.emitter_count} emitters, "
            f"{load.total_power:.0f} kcal/h, {flow_rate:.0f} l/h -> {diameter}mm"
        )
        sized.append(pipe.with_diameter(diameter))

    result: List[PipeSegment] = []
    for pipe in sized:
        if pipe.kind is PipeKind.RETURN:
            supply = _find_supply_partner(pipe, sized)
            if supply is not None:
                pipe = pipe.with_diameter(supply.diameter)
            else:
                logger.debug(f"Return pipe {pipe.id} has no paired supply pipe")
        result.append(pipe)

    logger.info(f"Dimensioned {len(result)} pipes")
    return result


def get_pipe_dimension_info(
    pipe: PipeSegment,
    all_pipes: Sequence[PipeSegment],
    emitters: Sequence[Emitter],
    config: Optional[RoutingConfig] = None
) -> PipeDimensionInfo:
    """
    Read-only sizing information for one pipe.

    A return pipe reports on its paired supply pipe when one exists.

    Args:
        pipe: Pipe to inspect
        all_pipes: Complete network
        emitters: All emitters
        config: Tolerances and ΔT

    Returns:
        PipeDimensionInfo with load, flow and recommended diameter
    """
    config = config or RoutingConfig()

    if pipe.kind is not PipeKind.SUPPLY:
        supply = _find_supply_partner(pipe, all_pipes)
        if supply is not None:
            pipe = supply

    load = DownstreamLoadAggregator(all_pipes, emitters, config).aggregate(pipe)
    flow_rate = calculate_flow_rate(load.total_power, config.delta_t)
    return PipeDimensionInfo(
        total_power=load.total_power,
        flow_rate=flow_rate,
        recommended_diameter=select_pipe_diameter(flow_rate),
        emitter_count=load.emitter_count,
    )
