from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from engine.dispatch.rationale import Rationale
from engine.grid.tariff import DEFAULT_MARKET_PRICES, MarketTariff
from engine.load.load_model import DEFAULT_LOAD_PROFILE_MW
from engine.simulation.config import Scenario, SimulationConfiguration, Strategy
from engine.weather.hourly import (
    HOURS_PER_DAY,
    default_cloud_profile,
    default_humidity_profile,
    default_temperature_profile,
)


class OutageWindow(BaseModel):
    """Half-open hour range ``[start, end)``; wraps past midnight when start > end."""

    start: int
    end: int


class SimulationRequest(BaseModel):
    # Plant ratings
    solar_capacity_mw: float = 1.2
    battery_capacity_mwh: float = 2.5
    max_charge_rate_mw: float = 1.0
    max_discharge_rate_mw: float = 1.0
    min_soc_pct: float = 20.0
    max_soc_pct: float = 95.0

    # Sun and weather (any length; normalised to 24 values)
    sunrise_hour: float = 6.0
    sunset_hour: float = 18.0
    hourly_temperature_c: list[float | None] = Field(
        default_factory=lambda: list(default_temperature_profile())
    )
    hourly_humidity_pct: list[float | None] = Field(
        default_factory=lambda: list(default_humidity_profile())
    )
    hourly_cloud_pct: list[float | None] = Field(
        default_factory=lambda: list(default_cloud_profile())
    )

    # Operating mode
    scenario: Scenario = Scenario.NORMAL
    strategy: Strategy = Strategy.ARBITRAGE
    dynamic_tariff: bool = True

    # Grid and backup
    max_grid_import_mw: float = 2.0
    feed_in_tariff: float = 4.8
    diesel_capacity_mw: float = 0.5
    diesel_fuel_cost: float = 95.0
    allow_battery_export: bool = False
    import_outages: list[OutageWindow] = Field(default_factory=list)
    export_outages: list[OutageWindow] = Field(default_factory=list)

    # Lookup tables
    market_prices: list[float] = Field(
        default_factory=lambda: list(DEFAULT_MARKET_PRICES), min_length=1
    )
    baseline_load_mw: list[float] = Field(
        default_factory=lambda: list(DEFAULT_LOAD_PROFILE_MW)
    )

    # Manual per-hour overrides
    load_overrides: dict[int, float] = Field(default_factory=dict)
    tariff_overrides: dict[int, float] = Field(default_factory=dict)

    @field_validator("load_overrides", "tariff_overrides")
    @classmethod
    def _hours_in_day(cls, value: dict[int, float]) -> dict[int, float]:
        bad = sorted(h for h in value if not 0 <= h < HOURS_PER_DAY)
        if bad:
            raise ValueError(f"override hours must lie in 0..{HOURS_PER_DAY - 1}, got {bad}")
        return value

    def to_config(self) -> SimulationConfiguration:
        return SimulationConfiguration(
            solar_capacity_mw=self.solar_capacity_mw,
            battery_capacity_mwh=self.battery_capacity_mwh,
            max_charge_rate_mw=self.max_charge_rate_mw,
            max_discharge_rate_mw=self.max_discharge_rate_mw,
            min_soc_pct=self.min_soc_pct,
            max_soc_pct=self.max_soc_pct,
            sunrise_hour=self.sunrise_hour,
            sunset_hour=self.sunset_hour,
            hourly_temperature_c=tuple(self.hourly_temperature_c),
            hourly_humidity_pct=tuple(self.hourly_humidity_pct),
            hourly_cloud_pct=tuple(self.hourly_cloud_pct),
            scenario=self.scenario,
            strategy=self.strategy,
            dynamic_tariff=self.dynamic_tariff,
            max_grid_import_mw=self.max_grid_import_mw,
            feed_in_tariff=self.feed_in_tariff,
            diesel_capacity_mw=self.diesel_capacity_mw,
            diesel_fuel_cost=self.diesel_fuel_cost,
            allow_battery_export=self.allow_battery_export,
            import_outages=tuple((o.start, o.end) for o in self.import_outages),
            export_outages=tuple((o.start, o.end) for o in self.export_outages),
            market_tariff=MarketTariff(tuple(self.market_prices)),
            baseline_load_mw=tuple(self.baseline_load_mw),
        )


class DispatchRecordResponse(BaseModel):
    hour: int
    base_load_mw: float
    adjusted_load_mw: float
    solar_mw: float
    net_load_mw: float
    grid_import_mw: float
    grid_export_mw: float
    diesel_mw: float
    curtailed_mw: float
    battery_flow_mw: float
    soc_state_percent: float
    price: float
    cost_grid_only: float
    cost_microgrid: float
    revenue_sold: float
    cost_diesel: float
    net_savings: float
    is_manual_override: bool
    battery_reason: Rationale

    model_config = {"from_attributes": True}


class FinancialAuditResponse(BaseModel):
    total_load_mwh: float
    total_solar_mwh: float
    total_grid_import_mwh: float
    total_grid_export_mwh: float
    total_diesel_mwh: float
    total_curtailed_mwh: float
    total_battery_discharge_mwh: float
    total_bill_grid_only: float
    total_bill_microgrid: float
    total_revenue: float
    total_diesel_cost: float
    total_cost: float
    net_savings: float
    savings_percent: float
    baseline_net_cost: float
    actual_net_cost: float
    arbitrage_savings: float
    arbitrage_savings_percent: float
    baseline_bill_microgrid: float
    baseline_revenue: float
    baseline_diesel_cost: float
    baseline_grid_import_mwh: float
    baseline_diesel_mwh: float
    baseline_peak_grid_mw: float
    baseline_battery_cycles: float
    actual_peak_grid_mw: float
    actual_battery_cycles: float

    model_config = {"from_attributes": True}


class SimulationRunResponse(BaseModel):
    hourly_data: list[DispatchRecordResponse]
    audit: FinancialAuditResponse
    warnings: list[str]

    model_config = {"from_attributes": True}


class TariffTablesResponse(BaseModel):
    time_of_day: dict[str, float | list[int]]
    market_prices: list[float]


class DefaultsResponse(BaseModel):
    configuration: SimulationRequest
    tariffs: TariffTablesResponse
    strategies: list[Strategy]
    scenarios: list[Scenario]
