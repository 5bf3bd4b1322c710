"""Comparative simulation runner for the 24-hour microgrid dispatch.

``SimulationRunner`` replays the same day twice against identical
exogenous inputs: once with the requested strategy ("actual") and once
with the standard load-following strategy forced ("baseline").  Each pass
builds its own profile, price tiers and battery state, so the two runs
never share mutable state.  The actual pass's records are returned with
an audit that carries the cross-pass savings figures.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, fields
from typing import Mapping, Optional

from engine.battery.battery_system import INITIAL_SOC, BatteryState
from engine.dispatch.rationale import Rationale
from engine.dispatch.scheduler import DispatchContext, HourlyDispatch, run_pass
from engine.economics.metrics import (
    FinancialAudit,
    HourlyFinancials,
    accumulate_audit,
    battery_cycles,
    hourly_financials,
    peak_grid_draw,
)
from engine.simulation.config import (
    SimulationConfiguration,
    Strategy,
    validate_configuration,
)
from engine.simulation.profile import build_day_profile

logger = logging.getLogger(__name__)


# ======================================================================
# Result containers
# ======================================================================

@dataclass(frozen=True)
class DispatchRecord:
    """One hour of the dispatch schedule with its cost audit."""

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

    @classmethod
    def from_parts(cls, dispatch: HourlyDispatch, money: HourlyFinancials) -> "DispatchRecord":
        return cls(
            hour=dispatch.hour,
            base_load_mw=dispatch.base_load_mw,
            adjusted_load_mw=dispatch.load_mw,
            solar_mw=dispatch.solar_mw,
            net_load_mw=dispatch.net_mw,
            grid_import_mw=dispatch.grid_import_mw,
            grid_export_mw=dispatch.grid_export_mw,
            diesel_mw=dispatch.diesel_mw,
            curtailed_mw=dispatch.curtailed_mw,
            battery_flow_mw=dispatch.battery_flow_mw,
            soc_state_percent=dispatch.soc_pct,
            price=dispatch.tariff,
            cost_grid_only=money.reference_cost,
            cost_microgrid=money.microgrid_bill,
            revenue_sold=money.export_revenue,
            cost_diesel=money.diesel_cost,
            net_savings=money.net_savings,
            is_manual_override=dispatch.is_manual_override,
            battery_reason=dispatch.rationale,
        )

    def as_dict(self) -> dict:
        data = {f.name: getattr(self, f.name) for f in fields(self)}
        data["battery_reason"] = self.battery_reason.value
        return data


@dataclass
class PassOutcome:
    """Everything one dispatch pass produced."""

    strategy: Strategy
    dispatches: list[HourlyDispatch]
    records: list[DispatchRecord]
    audit: FinancialAudit
    final_state: BatteryState
    peak_grid_mw: float


@dataclass
class SimulationResult:
    """Hourly schedule of the actual pass and the merged daily audit."""

    hourly_data: list[DispatchRecord]
    audit: FinancialAudit
    warnings: list[str] = field(default_factory=list)


# ======================================================================
# Runner
# ======================================================================

class SimulationRunner:
    """Run the actual and baseline passes and merge their audits.

    Parameters
    ----------
    config : SimulationConfiguration
        Plant, weather, grid and strategy settings.
    load_overrides : Mapping[int, float], optional
        Hour -> load (MW) replacing the baseline load curve.
    tariff_overrides : Mapping[int, float], optional
        Hour -> import price replacing the tariff tables.
    """

    def __init__(
        self,
        config: SimulationConfiguration,
        load_overrides: Optional[Mapping[int, float]] = None,
        tariff_overrides: Optional[Mapping[int, float]] = None,
    ) -> None:
        self.config = config
        self.load_overrides: dict[int, float] = dict(load_overrides or {})
        self.tariff_overrides: dict[int, float] = dict(tariff_overrides or {})

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def run(self) -> SimulationResult:
        warnings = validate_configuration(self.config)
        for message in warnings:
            logger.warning("Configuration warning: %s", message)

        actual = self.run_pass(self.config.strategy)
        baseline = self.run_pass(Strategy.STANDARD)
        audit = self._merge(actual, baseline)

        logger.info(
            "Dispatch complete: strategy=%s actual_cost=%.2f baseline_cost=%.2f savings=%.2f (%.1f %%)",
            self.config.strategy.value,
            audit.actual_net_cost,
            audit.baseline_net_cost,
            audit.arbitrage_savings,
            audit.arbitrage_savings_percent,
        )
        return SimulationResult(hourly_data=actual.records, audit=audit, warnings=warnings)

    def run_pass(self, strategy: Strategy) -> PassOutcome:
        """Dispatch the whole day under *strategy* from a fresh 50 % battery."""
        config = self.config.with_strategy(strategy)
        profile = build_day_profile(config, self.load_overrides, self.tariff_overrides)
        ctx = DispatchContext.from_config(config, profile)

        logger.debug(
            "Pass start: strategy=%s low=%.3f high=%.3f peak_hours=%s",
            strategy.value,
            ctx.tiers.low_threshold,
            ctx.tiers.high_threshold,
            list(ctx.tiers.peak_hours),
        )

        dispatches, final_state = run_pass(ctx, ctx.battery.initial_state(INITIAL_SOC))
        financials = [
            hourly_financials(d, ctx.grid.feed_in_tariff, ctx.generator.fuel_cost_per_kwh)
            for d in dispatches
        ]
        records = [DispatchRecord.from_parts(d, m) for d, m in zip(dispatches, financials)]
        audit = accumulate_audit(dispatches, financials)

        logger.debug(
            "Pass end: strategy=%s final_soc=%.1f %% import=%.3f MWh diesel=%.3f MWh",
            strategy.value,
            ctx.battery.soc_percent(final_state),
            audit.total_grid_import_mwh,
            audit.total_diesel_mwh,
        )

        return PassOutcome(
            strategy=strategy,
            dispatches=dispatches,
            records=records,
            audit=audit,
            final_state=final_state,
            peak_grid_mw=peak_grid_draw(dispatches),
        )

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _merge(self, actual: PassOutcome, baseline: PassOutcome) -> FinancialAudit:
        """Fill the actual audit's cross-pass fields from *baseline*."""
        audit = actual.audit
        capacity = self.config.battery_capacity_mwh

        actual_cost = audit.total_cost
        baseline_cost = baseline.audit.total_cost
        savings = baseline_cost - actual_cost

        audit.actual_net_cost = actual_cost
        audit.baseline_net_cost = baseline_cost
        audit.arbitrage_savings = savings
        audit.arbitrage_savings_percent = (
            savings / abs(baseline_cost) * 100.0 if abs(baseline_cost) > 0 else 0.0
        )

        audit.baseline_bill_microgrid = baseline.audit.total_bill_microgrid
        audit.baseline_revenue = baseline.audit.total_revenue
        audit.baseline_diesel_cost = baseline.audit.total_diesel_cost
        audit.baseline_grid_import_mwh = baseline.audit.total_grid_import_mwh
        audit.baseline_diesel_mwh = baseline.audit.total_diesel_mwh
        audit.baseline_peak_grid_mw = baseline.peak_grid_mw
        audit.baseline_battery_cycles = battery_cycles(
            baseline.audit.total_battery_discharge_mwh, capacity
        )

        audit.actual_peak_grid_mw = actual.peak_grid_mw
        audit.actual_battery_cycles = battery_cycles(
            audit.total_battery_discharge_mwh, capacity
        )
        return audit


def run_simulation(
    config: SimulationConfiguration,
    load_overrides: Optional[Mapping[int, float]] = None,
    tariff_overrides: Optional[Mapping[int, float]] = None,
) -> SimulationResult:
    """Run the comparative dispatch for one day."""
    return SimulationRunner(config, load_overrides, tariff_overrides).run()
