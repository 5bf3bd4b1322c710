"""Simulation configuration for the 24-hour microgrid dispatch.

``SimulationConfiguration`` is immutable for the duration of a run.  It
owns the plant ratings, the environmental arrays (normalised to 24
values on construction), the grid/outage setup and the injectable lookup
tables (time-of-day tariff, market tariff, baseline load curve).
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field, replace
from typing import Any, Iterable, Tuple

from engine.battery.battery_system import BatterySystem
from engine.generator.diesel_generator import DieselGenerator
from engine.grid.grid_connection import GridConnection, OutageInterval
from engine.grid.tariff import MarketTariff, TimeOfDayTariff
from engine.load.load_model import DEFAULT_LOAD_PROFILE_MW
from engine.weather.hourly import (
    FALLBACK_CLOUD_PCT,
    FALLBACK_HUMIDITY_PCT,
    FALLBACK_TEMPERATURE_C,
    default_cloud_profile,
    default_humidity_profile,
    default_temperature_profile,
    normalize_hourly,
)


class Scenario(str, enum.Enum):
    NORMAL = "normal"
    ISLANDED = "islanded"


class Strategy(str, enum.Enum):
    STANDARD = "standard"
    ARBITRAGE = "arbitrage"
    # Declared for operators; dispatches through the default branch.
    SELF_CONSUMPTION = "self_consumption"


def _coerce_outages(raw: Iterable[Any]) -> Tuple[OutageInterval, ...]:
    """Accept ``OutageInterval``, ``(start, end)`` pairs or ``{"start", "end"}`` dicts."""
    intervals = []
    for item in raw or ():
        if isinstance(item, OutageInterval):
            intervals.append(item)
        elif isinstance(item, dict):
            intervals.append(OutageInterval(int(item["start"]), int(item["end"])))
        else:
            start, end = item
            intervals.append(OutageInterval(int(start), int(end)))
    return tuple(intervals)


@dataclass(frozen=True)
class SimulationConfiguration:
    """All inputs of a dispatch run apart from the per-hour overrides.

    Defaults describe a 1.2 MW solar / 2.5 MWh battery campus microgrid
    on a hot, clear summer day with dynamic pricing.
    """

    # --- Plant ratings -----------------------------------------------------
    solar_capacity_mw: float = 1.2
    battery_capacity_mwh: float = 2.5
    max_charge_rate_mw: float = 1.0
    max_discharge_rate_mw: float = 1.0
    min_soc_pct: float = 20.0
    max_soc_pct: float = 95.0

    # --- Sun and weather ---------------------------------------------------
    sunrise_hour: float = 6.0
    sunset_hour: float = 18.0
    hourly_temperature_c: Tuple[float, ...] = field(default_factory=default_temperature_profile)
    hourly_humidity_pct: Tuple[float, ...] = field(default_factory=default_humidity_profile)
    hourly_cloud_pct: Tuple[float, ...] = field(default_factory=default_cloud_profile)

    # --- Operating mode ----------------------------------------------------
    scenario: Scenario = Scenario.NORMAL
    strategy: Strategy = Strategy.ARBITRAGE
    dynamic_tariff: bool = True

    # --- Grid and backup ---------------------------------------------------
    max_grid_import_mw: float = 2.0
    feed_in_tariff: float = 4.8
    diesel_capacity_mw: float = 0.5
    diesel_fuel_cost: float = 95.0
    allow_battery_export: bool = False
    import_outages: Tuple[OutageInterval, ...] = ()
    export_outages: Tuple[OutageInterval, ...] = ()

    # --- Lookup tables -----------------------------------------------------
    time_of_day_tariff: TimeOfDayTariff = field(default_factory=TimeOfDayTariff)
    market_tariff: MarketTariff = field(default_factory=MarketTariff)
    baseline_load_mw: Tuple[float, ...] = DEFAULT_LOAD_PROFILE_MW

    def __post_init__(self) -> None:
        # Frozen dataclass: normalise through object.__setattr__.
        object.__setattr__(
            self, "hourly_temperature_c",
            normalize_hourly(self.hourly_temperature_c, FALLBACK_TEMPERATURE_C),
        )
        object.__setattr__(
            self, "hourly_humidity_pct",
            normalize_hourly(self.hourly_humidity_pct, FALLBACK_HUMIDITY_PCT),
        )
        object.__setattr__(
            self, "hourly_cloud_pct",
            normalize_hourly(self.hourly_cloud_pct, FALLBACK_CLOUD_PCT),
        )
        object.__setattr__(self, "scenario", Scenario(self.scenario))
        object.__setattr__(self, "strategy", Strategy(self.strategy))
        object.__setattr__(self, "import_outages", _coerce_outages(self.import_outages))
        object.__setattr__(self, "export_outages", _coerce_outages(self.export_outages))
        object.__setattr__(self, "baseline_load_mw", tuple(float(v) for v in self.baseline_load_mw))

    # ------------------------------------------------------------------
    # Component factories
    # ------------------------------------------------------------------

    def battery(self) -> BatterySystem:
        return BatterySystem(
            capacity_mwh=self.battery_capacity_mwh,
            max_charge_mw=self.max_charge_rate_mw,
            max_discharge_mw=self.max_discharge_rate_mw,
            min_soc_pct=self.min_soc_pct,
            max_soc_pct=self.max_soc_pct,
        )

    def grid(self) -> GridConnection:
        return GridConnection(
            max_import_mw=self.max_grid_import_mw,
            feed_in_tariff=self.feed_in_tariff,
            islanded=self.scenario is Scenario.ISLANDED,
            import_outages=self.import_outages,
            export_outages=self.export_outages,
        )

    def generator(self) -> DieselGenerator:
        return DieselGenerator(
            capacity_mw=self.diesel_capacity_mw,
            fuel_cost_per_kwh=self.diesel_fuel_cost,
        )

    def with_strategy(self, strategy: Strategy | str) -> "SimulationConfiguration":
        """Copy of this configuration with a different dispatch strategy."""
        return replace(self, strategy=Strategy(strategy))


# ======================================================================
# Pre-flight checks
# ======================================================================

def validate_configuration(config: SimulationConfiguration) -> list[str]:
    """Return warnings for physically inconsistent settings.

    The dispatch engine runs regardless; these are advisory only.
    """
    warnings: list[str] = []

    if config.battery_capacity_mwh <= 0:
        warnings.append(
            f"battery_capacity_mwh is {config.battery_capacity_mwh}; battery is ignored"
        )
    if config.min_soc_pct > config.max_soc_pct:
        warnings.append(
            f"min_soc_pct ({config.min_soc_pct}) exceeds max_soc_pct ({config.max_soc_pct})"
        )
    if not (0.0 <= config.min_soc_pct <= 100.0 and 0.0 <= config.max_soc_pct <= 100.0):
        warnings.append("SoC bounds should lie within 0-100 %")

    for name in (
        "solar_capacity_mw",
        "max_charge_rate_mw",
        "max_discharge_rate_mw",
        "max_grid_import_mw",
        "diesel_capacity_mw",
    ):
        value = getattr(config, name)
        if value < 0:
            warnings.append(f"{name} is negative ({value})")

    if config.sunset_hour < config.sunrise_hour:
        warnings.append(
            f"sunset_hour ({config.sunset_hour}) precedes sunrise_hour ({config.sunrise_hour})"
        )

    for label, intervals in (("import", config.import_outages), ("export", config.export_outages)):
        for interval in intervals:
            if not (0 <= interval.start <= 24 and 0 <= interval.end <= 24):
                warnings.append(
                    f"{label} outage [{interval.start}, {interval.end}) lies outside 0-24"
                )

    return warnings
