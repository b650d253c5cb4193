# File: src/hydronic_planner/sizing/downstream.py
"""
Downstream load aggregation over a finished pipe network.

The supply pipes form a directed graph: pipe ``u`` feeds pipe ``v`` when
``v`` starts within the connection tolerance of ``u``'s end. The load on
a pipe is the power of the emitters at its end plus, recursively, the
load of every pipe it feeds.

Precondition: the supply network is a directed acyclic graph rooted at
the source. A cycle is a data-integrity problem upstream; the traversal
stops at it, logs a warning and flags the result instead of looping.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Set

import networkx as nx

from hydronic_planner.config.routing import RoutingConfig
from hydronic_planner.core.elements import Emitter
from hydronic_planner.core.pipe_segment import PipeKind, PipeSegment

logger = logging.getLogger(__name__)


@dataclass
class DownstreamLoad:
    """
    Load served through one supply pipe.

    Attributes:
        total_power: Summed emitter power (kcal/h)
        emitters: Emitters reached, in traversal order
        cycle_detected: Whether the traversal hit a cycle
    """
    total_power: float = 0.0
    emitters: List[Emitter] = field(default_factory=list)
    cycle_detected: bool = False

    @property
    def emitter_count(self) -> int:
        return len(self.emitters)


def build_supply_graph(
    pipes: Sequence[PipeSegment],
    tolerance: float
) -> nx.DiGraph:
    """
    Build the feed graph of supply pipes.

    Args:
        pipes: All pipes; return pipes are ignored
        tolerance: Max distance between an end and a start to connect them

    Returns:
        DiGraph with pipe ids as nodes (``pipe`` attribute holds the
        segment) and an edge u -> v when u feeds v
    """
    graph = nx.DiGraph()
    supply = [p for p in pipes if p.kind is PipeKind.SUPPLY and p.points]
    for pipe in supply:
        graph.add_node(pipe.id, pipe=pipe)

    for upstream in supply:
        end = upstream.end_point
        for downstream in supply:
            if downstream.id == upstream.id:
                continue
            if end.distance_to(downstream.start_point) <= tolerance:
                graph.add_edge(upstream.id, downstream.id)

    return graph


class DownstreamLoadAggregator:
    """
    Computes downstream loads for pipes of one network.

    Build once per pass; the feed graph is reused for every pipe.
    """

    def __init__(
        self,
        pipes: Sequence[PipeSegment],
        emitters: Sequence[Emitter],
        config: Optional[RoutingConfig] = None
    ):
        self.config = config or RoutingConfig()
        self.emitters = list(emitters)
        self.graph = build_supply_graph(pipes, self.config.connection_tolerance)

    def emitters_at(self, pipe: PipeSegment) -> List[Emitter]:
        """Emitters whose connection point is at the pipe's end."""
        end = pipe.end_point
        tolerance = self.config.connection_tolerance
        inset = self.config.connection_inset
        return [
            e for e in self.emitters
            if end.distance_to(e.connection_point(inset)) <= tolerance
        ]

    def aggregate(self, pipe: PipeSegment) -> DownstreamLoad:
        """
        Total load served through a pipe.

        The pipe does not have to be part of the network the aggregator
        was built from; its successors are then looked up by position.
        """
        result = DownstreamLoad()
        if not pipe.points:
            return result
        self._visit(pipe, result, ancestors=set())
        return result

    def _successors(self, pipe: PipeSegment) -> List[PipeSegment]:
        if pipe.id in self.graph:
            return [self.graph.nodes[n]["pipe"] for n in self.graph.successors(pipe.id)]

        end = pipe.end_point
        tolerance = self.config.connection_tolerance
        return [
            data["pipe"] for node, data in self.graph.nodes(data=True)
            if node != pipe.id
            and end.distance_to(data["pipe"].start_point) <= tolerance
        ]

    def _visit(
        self,
        pipe: PipeSegment,
        result: DownstreamLoad,
        ancestors: Set[str]
    ) -> None:
        ancestors.add(pipe.id)

        for emitter in self.emitters_at(pipe):
            result.emitters.append(emitter)
            result.total_power += emitter.power

        for child in self._successors(pipe):
            if child.id in ancestors:
                logger.warning(
                    f"Cycle in supply network: {pipe.id} feeds back into "
                    f"{child.id}; downstream load is incomplete"
                )
                result.cycle_detected = True
                continue
            self._visit(child, result, ancestors)

        ancestors.discard(pipe.id)


def aggregate_downstream_load(
    pipe: PipeSegment,
    all_pipes: Sequence[PipeSegment],
    emitters: Sequence[Emitter],
    config: Optional[RoutingConfig] = None
) -> DownstreamLoad:
    """
    Convenience function to aggregate the load of a single pipe.

    Args:
        pipe: Supply pipe to evaluate
        all_pipes: Complete network
        emitters: All emitters
        config: Tolerance and connection inset

    Returns:
        DownstreamLoad for the pipe
    """
    return DownstreamLoadAggregator(all_pipes, emitters, config).aggregate(pipe)


def find_supply_cycles(
    pipes: Sequence[PipeSegment],
    tolerance: float
) -> List[List[str]]:
    """List the cycles in a supply network (empty for a valid tree)."""
    return list(nx.simple_cycles(build_supply_graph(pipes, tolerance)))
