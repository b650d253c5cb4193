# File: src/hydronic_planner/thermal/__init__.py
"""
Thermal load estimation for rooms, emitters and boilers.
"""

from .room_load import (
    Room,
    WindowsLevel,
    PowerSufficiency,
    BoilerSizing,
    calculate_room_power,
    calculate_total_power,
    calculate_installed_power,
    check_power_sufficiency,
    calculate_boiler_power,
    is_boiler_power_sufficient,
    kcal_to_kw,
    kw_to_kcal,
    calculate_pipe_length,
)

__all__ = [
    "Room",
    "WindowsLevel",
    "PowerSufficiency",
    "BoilerSizing",
    "calculate_room_power",
    "calculate_total_power",
    "calculate_installed_power",
    "check_power_sufficiency",
    "calculate_boiler_power",
    "is_boiler_power_sufficient",
    "kcal_to_kw",
    "kw_to_kcal",
    "calculate_pipe_length",
]
