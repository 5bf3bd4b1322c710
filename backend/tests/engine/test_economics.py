"""Tests for engine.economics.metrics -- hourly pricing and the daily audit."""

from __future__ import annotations

import pytest

from engine.dispatch import HourlyDispatch, Rationale
from engine.economics import (
    FinancialAudit,
    accumulate_audit,
    battery_cycles,
    hourly_financials,
    peak_grid_draw,
)


def _dispatch(**overrides) -> HourlyDispatch:
    params = dict(
        hour=0,
        base_load_mw=1.0,
        load_mw=1.0,
        solar_mw=0.0,
        net_mw=-1.0,
        grid_import_mw=1.0,
        grid_export_mw=0.0,
        diesel_mw=0.0,
        curtailed_mw=0.0,
        battery_flow_mw=0.0,
        soc_pct=50.0,
        tariff=7.0,
        import_blocked=False,
        is_manual_override=False,
        rationale=Rationale.LOAD_FOLLOWING,
    )
    params.update(overrides)
    return HourlyDispatch(**params)


# ======================================================================
# Hourly financials
# ======================================================================


class TestHourlyFinancials:
    def test_grid_only_hour(self):
        money = hourly_financials(_dispatch(), feed_in_tariff=4.8, diesel_fuel_cost=95.0)
        assert money.reference_cost == pytest.approx(7000.0)
        assert money.microgrid_bill == pytest.approx(7000.0)
        assert money.net_savings == pytest.approx(0.0)

    def test_export_revenue_and_diesel(self):
        d = _dispatch(grid_import_mw=0.5, grid_export_mw=0.2, diesel_mw=0.1)
        money = hourly_financials(d, feed_in_tariff=4.8, diesel_fuel_cost=95.0)
        assert money.microgrid_bill == pytest.approx(3500.0)
        assert money.export_revenue == pytest.approx(960.0)
        assert money.diesel_cost == pytest.approx(9500.0)
        assert money.net_savings == pytest.approx(7000.0 - (3500.0 + 9500.0 - 960.0))

    def test_reference_zero_while_import_blocked(self):
        d = _dispatch(grid_import_mw=0.0, diesel_mw=0.5, import_blocked=True)
        money = hourly_financials(d, feed_in_tariff=4.8, diesel_fuel_cost=95.0)
        assert money.reference_cost == 0.0
        assert money.net_savings == pytest.approx(-47500.0)


# ======================================================================
# Daily audit
# ======================================================================


class TestAccumulateAudit:
    def test_totals(self):
        dispatches = [
            _dispatch(hour=0, grid_import_mw=0.724, battery_flow_mw=0.276),
            _dispatch(hour=1),
        ]
        financials = [hourly_financials(d, 4.8, 95.0) for d in dispatches]
        audit = accumulate_audit(dispatches, financials)

        assert audit.total_load_mwh == pytest.approx(2.0)
        assert audit.total_grid_import_mwh == pytest.approx(1.724)
        assert audit.total_battery_discharge_mwh == pytest.approx(0.276)
        assert audit.total_bill_grid_only == pytest.approx(14000.0)
        assert audit.total_bill_microgrid == pytest.approx(12068.0)
        assert audit.net_savings == pytest.approx(1932.0)
        assert audit.savings_percent == pytest.approx(1932.0 / 14000.0 * 100.0)
        assert audit.total_cost == pytest.approx(12068.0)

    def test_empty_reference_gives_zero_percent(self):
        audit = accumulate_audit([], [])
        assert audit == FinancialAudit()
        assert audit.savings_percent == 0.0

    def test_peak_grid_draw(self):
        dispatches = [_dispatch(grid_import_mw=v) for v in (0.2, 1.4, 0.9)]
        assert peak_grid_draw(dispatches) == pytest.approx(1.4)
        assert peak_grid_draw([]) == 0.0

    def test_battery_cycles(self):
        assert battery_cycles(5.0, 2.5) == pytest.approx(2.0)
        assert battery_cycles(5.0, 0.0) == 0.0
