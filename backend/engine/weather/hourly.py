"""Hourly environmental profiles for the 24-hour dispatch horizon.

The dispatch engine consumes exactly 24 values per environmental channel
(ambient temperature, relative humidity, cloud cover).  Upstream weather
sources (manual entry, forecast fetch, image extraction) rarely agree on
length, so every array is normalised here before it reaches the engine.
"""

from __future__ import annotations

import math
from typing import Iterable, Literal, Optional

import numpy as np
from numpy.typing import NDArray

# ======================================================================
# Constants
# ======================================================================

HOURS_PER_DAY: int = 24

# Fallbacks used when a per-hour value is missing.
FALLBACK_TEMPERATURE_C: float = 25.0
FALLBACK_CLOUD_PCT: float = 0.0
FALLBACK_HUMIDITY_PCT: float = 50.0


# ======================================================================
# Normalisation
# ======================================================================

def _is_missing(value: Optional[float]) -> bool:
    return value is None or (isinstance(value, float) and math.isnan(value))


def normalize_hourly(
    values: Optional[Iterable[Optional[float]]],
    fallback: float,
) -> tuple[float, ...]:
    """Coerce an arbitrary-length series into exactly 24 hourly values.

    * Longer series are truncated to the first 24 entries.
    * Shorter series are padded by repeating the last value.
    * An empty (or ``None``) series becomes 24 copies of *fallback*.
    * Individual ``None`` / NaN entries are replaced with *fallback*.

    Parameters
    ----------
    values : iterable of float or None
        Raw hourly readings.
    fallback : float
        Value substituted for missing entries.

    Returns
    -------
    tuple[float, ...]
        Exactly 24 floats.
    """
    raw = [] if values is None else list(values)
    cleaned = [fallback if _is_missing(v) else float(v) for v in raw[:HOURS_PER_DAY]]

    if not cleaned:
        return (float(fallback),) * HOURS_PER_DAY

    while len(cleaned) < HOURS_PER_DAY:
        cleaned.append(cleaned[-1])
    return tuple(cleaned)


def value_at(series: tuple[float, ...], hour: int, fallback: float) -> float:
    """Return ``series[hour]`` or *fallback* when the hour is not covered."""
    if 0 <= hour < len(series) and not _is_missing(series[hour]):
        return series[hour]
    return fallback


# ======================================================================
# Default curves
# ======================================================================

def generate_curve(
    base: float,
    peak: float,
    peak_hour: int,
    shape: Literal["bell", "inverse"] = "bell",
) -> NDArray[np.float64]:
    """Build a smooth 24-hour curve centred on *peak_hour*.

    The weight of each hour falls off linearly with its distance from the
    peak (reaching zero 12 hours away) and is shaped through a quarter sine.

    * ``"bell"`` rises from *base* to *peak* at *peak_hour*.
    * ``"inverse"`` falls from *peak* to *base* at *peak_hour*.
    """
    hours = np.arange(HOURS_PER_DAY, dtype=np.float64)
    factor = np.maximum(0.0, 1.0 - np.abs(hours - peak_hour) / 12.0)
    swing = (peak - base) * np.sin(factor * np.pi / 2.0)

    if shape == "bell":
        return base + swing
    if shape == "inverse":
        return peak - swing
    raise ValueError(f"Unknown curve shape '{shape}'. Choose 'bell' or 'inverse'.")


def default_temperature_profile() -> tuple[float, ...]:
    """Hot-summer diurnal temperature: 28 °C overnight, 42 °C at 14:00."""
    return tuple(generate_curve(28.0, 42.0, 14, "bell").tolist())


def default_humidity_profile() -> tuple[float, ...]:
    """Humidity: 70 % in the early morning, drying to 30 % by afternoon."""
    return tuple(generate_curve(30.0, 70.0, 4, "inverse").tolist())


def default_cloud_profile() -> tuple[float, ...]:
    """Static 5 % cloud cover."""
    return (5.0,) * HOURS_PER_DAY
