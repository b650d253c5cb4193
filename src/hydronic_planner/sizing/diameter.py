# File: src/hydronic_planner/sizing/diameter.py
"""
Flow conversion and pipe diameter selection.

Flow (l/h) = Power (kcal/h) / ΔT, with ΔT = 20°C (80°C supply - 60°C
return). Diameters come from a table of inclusive flow limits chosen
to keep water velocity roughly within 0.5 - 1.5 m/s.
"""

from typing import Optional

from hydronic_planner.config.routing import (
    DELTA_T,
    DIAMETER_FLOW_LIMITS,
    MAX_PIPE_DIAMETER,
)


def calculate_flow_rate(power: float, delta_t: Optional[float] = None) -> float:
    """
    Convert thermal power to volumetric flow.

    Args:
        power: Thermal power in kcal/h
        delta_t: Supply/return differential in °C, DELTA_T by default

    Returns:
        Flow rate in l/h
    """
    if delta_t is None:
        delta_t = DELTA_T
    if delta_t <= 0:
        raise ValueError(f"delta_t must be positive, got {delta_t}")
    return power / delta_t


def select_pipe_diameter(flow_rate: float) -> int:
    """
    Select the smallest diameter whose flow limit covers the flow.

    Limits are inclusive: 300 l/h still fits 16 mm, 300.01 l/h needs 20 mm.

    Args:
        flow_rate: Flow in l/h

    Returns:
        Nominal diameter in mm
    """
    for max_flow, diameter in DIAMETER_FLOW_LIMITS:
        if flow_rate <= max_flow:
            return diameter
    return MAX_PIPE_DIAMETER


def diameter_for_power(power: float, delta_t: Optional[float] = None) -> int:
    """Diameter needed to carry a given thermal power."""
    return select_pipe_diameter(calculate_flow_rate(power, delta_t))
