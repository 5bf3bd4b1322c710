"""Hourly weather profile normalisation and default day curves."""

from .hourly import (
    FALLBACK_CLOUD_PCT,
    FALLBACK_HUMIDITY_PCT,
    FALLBACK_TEMPERATURE_C,
    HOURS_PER_DAY,
    default_cloud_profile,
    default_humidity_profile,
    default_temperature_profile,
    generate_curve,
    normalize_hourly,
    value_at,
)

__all__ = [
    "FALLBACK_CLOUD_PCT",
    "FALLBACK_HUMIDITY_PCT",
    "FALLBACK_TEMPERATURE_C",
    "HOURS_PER_DAY",
    "default_cloud_profile",
    "default_humidity_profile",
    "default_temperature_profile",
    "generate_curve",
    "normalize_hourly",
    "value_at",
]
