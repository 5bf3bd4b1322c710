"""
Solar PV engine module.

Provides the hourly clear-sky PV estimate (half-sine irradiance envelope
with cloud, thermal and humidity losses) used by the dispatch profile.
"""

from .pv_system import (
    REFERENCE_IRRADIANCE,
    estimate_solar_output,
    humidity_loss,
    simulate_pv_day,
    thermal_loss,
)

__all__ = [
    "REFERENCE_IRRADIANCE",
    "estimate_solar_output",
    "humidity_loss",
    "simulate_pv_day",
    "thermal_loss",
]
