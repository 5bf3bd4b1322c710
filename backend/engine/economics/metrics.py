"""Daily financial audit for the microgrid dispatch.

Prices every hour of a dispatch pass against a grid-only reference (the
bill the site would pay importing its whole load) and aggregates the
results into a :class:`FinancialAudit`.

Energy is in MWh; tariffs and fuel costs are per kWh.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

from engine.dispatch.scheduler import HourlyDispatch

# ======================================================================
# Constants
# ======================================================================

KWH_PER_MWH: float = 1000.0


# ======================================================================
# Per-hour figures
# ======================================================================

@dataclass(frozen=True)
class HourlyFinancials:
    """Cost and revenue of one dispatched hour."""

    reference_cost: float
    microgrid_bill: float
    export_revenue: float
    diesel_cost: float

    @property
    def net_savings(self) -> float:
        return self.reference_cost - (
            self.microgrid_bill + self.diesel_cost - self.export_revenue
        )


def hourly_financials(
    dispatch: HourlyDispatch,
    feed_in_tariff: float,
    diesel_fuel_cost: float,
) -> HourlyFinancials:
    """Price one hour of dispatch.

    The grid-only reference cost is zero while import is blocked: a
    pure-grid site could not have imported either.
    """
    reference = 0.0 if dispatch.import_blocked else dispatch.load_mw * KWH_PER_MWH * dispatch.tariff
    return HourlyFinancials(
        reference_cost=reference,
        microgrid_bill=dispatch.grid_import_mw * KWH_PER_MWH * dispatch.tariff,
        export_revenue=dispatch.grid_export_mw * KWH_PER_MWH * feed_in_tariff,
        diesel_cost=dispatch.diesel_mw * KWH_PER_MWH * diesel_fuel_cost,
    )


# ======================================================================
# Daily audit
# ======================================================================

@dataclass
class FinancialAudit:
    """24-hour energy and money totals.

    The ``baseline_*`` / ``actual_*`` / ``arbitrage_*`` fields compare two
    passes and stay at zero until the comparative runner fills them in.
    """

    total_load_mwh: float = 0.0
    total_solar_mwh: float = 0.0
    total_grid_import_mwh: float = 0.0
    total_grid_export_mwh: float = 0.0
    total_diesel_mwh: float = 0.0
    total_curtailed_mwh: float = 0.0
    total_battery_discharge_mwh: float = 0.0

    total_bill_grid_only: float = 0.0
    total_bill_microgrid: float = 0.0
    total_revenue: float = 0.0
    total_diesel_cost: float = 0.0
    net_savings: float = 0.0
    savings_percent: float = 0.0

    # --- Cross-pass comparison --------------------------------------------
    baseline_net_cost: float = 0.0
    actual_net_cost: float = 0.0
    arbitrage_savings: float = 0.0
    arbitrage_savings_percent: float = 0.0
    baseline_bill_microgrid: float = 0.0
    baseline_revenue: float = 0.0
    baseline_diesel_cost: float = 0.0
    baseline_grid_import_mwh: float = 0.0
    baseline_diesel_mwh: float = 0.0
    baseline_peak_grid_mw: float = 0.0
    baseline_battery_cycles: float = 0.0
    actual_peak_grid_mw: float = 0.0
    actual_battery_cycles: float = 0.0

    @property
    def total_cost(self) -> float:
        """Grid bill plus diesel fuel; export revenue is not netted off."""
        return self.total_bill_microgrid + self.total_diesel_cost


def accumulate_audit(
    dispatches: Sequence[HourlyDispatch],
    financials: Sequence[HourlyFinancials],
) -> FinancialAudit:
    """Sum the hourly dispatch and financial figures of one pass."""
    audit = FinancialAudit()

    for dispatch, money in zip(dispatches, financials):
        audit.total_load_mwh += dispatch.load_mw
        audit.total_solar_mwh += dispatch.solar_mw
        audit.total_grid_import_mwh += dispatch.grid_import_mw
        audit.total_grid_export_mwh += dispatch.grid_export_mw
        audit.total_diesel_mwh += dispatch.diesel_mw
        audit.total_curtailed_mwh += dispatch.curtailed_mw
        audit.total_battery_discharge_mwh += dispatch.battery_discharge_mw

        audit.total_bill_grid_only += money.reference_cost
        audit.total_bill_microgrid += money.microgrid_bill
        audit.total_revenue += money.export_revenue
        audit.total_diesel_cost += money.diesel_cost

    audit.net_savings = audit.total_bill_grid_only - (
        audit.total_bill_microgrid + audit.total_diesel_cost - audit.total_revenue
    )
    audit.savings_percent = (
        audit.net_savings / audit.total_bill_grid_only * 100.0
        if audit.total_bill_grid_only > 0
        else 0.0
    )
    return audit


def peak_grid_draw(dispatches: Iterable[HourlyDispatch]) -> float:
    """Highest hourly grid import of the pass (MW)."""
    return max((d.grid_import_mw for d in dispatches), default=0.0)


def battery_cycles(discharge_mwh: float, capacity_mwh: float) -> float:
    """Equivalent full cycles: discharged energy over nameplate capacity."""
    if capacity_mwh <= 0:
        return 0.0
    return discharge_mwh / capacity_mwh
