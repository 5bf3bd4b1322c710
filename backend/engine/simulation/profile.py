"""Hourly day profile: tariff, solar, load and net position per hour.

Built once at the start of every pass so the scheduler can look ahead
across the remaining hours of the day.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional

from engine.grid.tariff import resolve_tariff
from engine.load.load_model import baseline_load, resolve_load
from engine.simulation.config import SimulationConfiguration
from engine.solar.pv_system import estimate_solar_output
from engine.weather.hourly import (
    FALLBACK_CLOUD_PCT,
    FALLBACK_HUMIDITY_PCT,
    FALLBACK_TEMPERATURE_C,
    HOURS_PER_DAY,
    value_at,
)


@dataclass(frozen=True)
class HourlyVector:
    """Exogenous inputs for one hour of the day."""

    hour: int
    tariff: float
    solar_mw: float
    load_mw: float
    base_load_mw: float
    temperature_c: float
    is_manual_override: bool = False

    @property
    def net_mw(self) -> float:
        """Net position ``load - solar`` (positive = deficit)."""
        return self.load_mw - self.solar_mw

    @property
    def surplus_mw(self) -> float:
        """Solar in excess of load (0 when in deficit)."""
        return max(0.0, self.solar_mw - self.load_mw)

    @property
    def deficit_mw(self) -> float:
        """Load in excess of solar (0 when in surplus)."""
        return max(0.0, self.load_mw - self.solar_mw)


def build_day_profile(
    config: SimulationConfiguration,
    load_overrides: Optional[Mapping[int, float]] = None,
    tariff_overrides: Optional[Mapping[int, float]] = None,
) -> tuple[HourlyVector, ...]:
    """Derive the 24 hourly vectors for *config* and the operator overrides."""
    vectors = []
    for h in range(HOURS_PER_DAY):
        temperature = value_at(config.hourly_temperature_c, h, FALLBACK_TEMPERATURE_C)
        cloud = value_at(config.hourly_cloud_pct, h, FALLBACK_CLOUD_PCT)
        humidity = value_at(config.hourly_humidity_pct, h, FALLBACK_HUMIDITY_PCT)

        tariff = resolve_tariff(
            h,
            config.dynamic_tariff,
            tariff_overrides,
            time_of_day=config.time_of_day_tariff,
            market=config.market_tariff,
        )
        solar = estimate_solar_output(
            h,
            config.solar_capacity_mw,
            config.sunrise_hour,
            config.sunset_hour,
            temperature,
            cloud,
            humidity,
        )
        load, overridden = resolve_load(h, load_overrides, config.baseline_load_mw)

        vectors.append(
            HourlyVector(
                hour=h,
                tariff=tariff,
                solar_mw=solar,
                load_mw=load,
                base_load_mw=baseline_load(h, config.baseline_load_mw),
                temperature_c=temperature,
                is_manual_override=overridden,
            )
        )
    return tuple(vectors)
