"""
Hourly PV output estimate for the day-ahead dispatch horizon.

Uses a half-sine clear-sky irradiance envelope between sunrise and sunset,
attenuated by cloud cover and by empirical temperature and humidity loss
factors.  The estimate is evaluated at the midpoint of each hour.
"""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray

# Peak clear-sky irradiance used as the STC reference (W/m^2).
REFERENCE_IRRADIANCE: float = 1000.0

# Module temperature coefficient above 25 degC (fraction per degC).
THERMAL_LOSS_COEFF: float = 0.004
THERMAL_REFERENCE_C: float = 25.0

# Soiling / haze loss at 100 % relative humidity (fraction).
HUMIDITY_LOSS_COEFF: float = 0.2


def thermal_loss(temperature_c: float) -> float:
    """Fractional output loss from module heating above 25 degC."""
    return max(0.0, (temperature_c - THERMAL_REFERENCE_C) * THERMAL_LOSS_COEFF)


def humidity_loss(humidity_pct: float) -> float:
    """Fractional output loss attributed to humidity haze."""
    return (humidity_pct / 100.0) * HUMIDITY_LOSS_COEFF


def estimate_solar_output(
    hour: int,
    capacity_mw: float,
    sunrise_hour: float,
    sunset_hour: float,
    temperature_c: float,
    cloud_pct: float,
    humidity_pct: float,
) -> float:
    """Estimate the average PV output over one hour.

    Parameters
    ----------
    hour : int
        Hour of day, 0 -- 23.
    capacity_mw : float
        Rated (DC) array capacity in MW.
    sunrise_hour, sunset_hour : float
        Decimal hours bounding the daylight window ``[sunrise, sunset)``.
    temperature_c : float
        Ambient temperature in degC.
    cloud_pct : float
        Cloud cover in percent (0 -- 100).
    humidity_pct : float
        Relative humidity in percent (0 -- 100).

    Returns
    -------
    float
        PV output in MW (>= 0).
    """
    midpoint = hour + 0.5
    if midpoint < sunrise_hour or midpoint >= sunset_hour:
        return 0.0

    day_length = sunset_hour - sunrise_hour
    sun_position = math.sin(math.pi * (midpoint - sunrise_hour) / day_length)
    ghi = REFERENCE_IRRADIANCE * sun_position

    effective_irradiance = ghi * (1.0 - cloud_pct / 100.0)
    total_loss = thermal_loss(temperature_c) + humidity_loss(humidity_pct)
    clean_irradiance = effective_irradiance * (1.0 - total_loss)

    return max(0.0, clean_irradiance / REFERENCE_IRRADIANCE * capacity_mw)


def simulate_pv_day(
    capacity_mw: float,
    sunrise_hour: float,
    sunset_hour: float,
    temperature_c: NDArray[np.float64],
    cloud_pct: NDArray[np.float64],
    humidity_pct: NDArray[np.float64],
) -> NDArray[np.float64]:
    """Run :func:`estimate_solar_output` for every hour of a 24-hour day."""
    return np.array(
        [
            estimate_solar_output(
                h,
                capacity_mw,
                sunrise_hour,
                sunset_hour,
                float(temperature_c[h]),
                float(cloud_pct[h]),
                float(humidity_pct[h]),
            )
            for h in range(24)
        ],
        dtype=np.float64,
    )
