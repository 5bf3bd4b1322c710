"""Battery storage engine -- SoC window, efficiency losses and charge derating."""

from .derating import cv_taper, derated_charge_limit, thermal_derating
from .battery_system import BATTERY_EFFICIENCY, INITIAL_SOC, BatteryState, BatterySystem

__all__ = [
    "cv_taper",
    "derated_charge_limit",
    "thermal_derating",
    "BATTERY_EFFICIENCY",
    "INITIAL_SOC",
    "BatteryState",
    "BatterySystem",
]
