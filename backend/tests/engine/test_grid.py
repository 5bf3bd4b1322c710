"""Tests for engine.grid -- tariffs, outage windows, connection and price tiers."""

from __future__ import annotations

import pytest

from engine.grid import (
    DEFAULT_MARKET_PRICES,
    GridConnection,
    MarketTariff,
    OutageInterval,
    TimeOfDayTariff,
    classify_prices,
    resolve_tariff,
)


# ======================================================================
# Tariffs
# ======================================================================


class TestTimeOfDayTariff:
    def test_windows(self):
        tou = TimeOfDayTariff()
        assert tou.buy_price(5) == 7.50
        assert tou.buy_price(6) == 6.00
        assert tou.buy_price(9) == 6.00
        assert tou.buy_price(10) == 7.50
        assert tou.buy_price(17) == 9.00
        assert tou.buy_price(20) == 9.00
        assert tou.buy_price(21) == 7.50


class TestMarketTariff:
    def test_default_table(self):
        market = MarketTariff()
        assert market.buy_price(0) == 4.20
        assert market.buy_price(18) == 12.50
        assert len(DEFAULT_MARKET_PRICES) == 24

    def test_hour_clamped_to_table(self):
        market = MarketTariff((1.0, 2.0))
        assert market.buy_price(-3) == 1.0
        assert market.buy_price(10) == 2.0

    def test_empty_table_rejected(self):
        with pytest.raises(ValueError):
            MarketTariff(())


class TestResolveTariff:
    def test_override_takes_precedence(self):
        assert resolve_tariff(18, True, {18: 1.0}) == 1.0

    def test_dynamic_uses_market(self):
        assert resolve_tariff(18, True) == 12.50

    def test_static_uses_time_of_day(self):
        assert resolve_tariff(18, False) == 9.00


# ======================================================================
# Outages and connection
# ======================================================================


class TestOutageInterval:
    def test_half_open(self):
        window = OutageInterval(10, 14)
        assert window.contains(10)
        assert window.contains(13)
        assert not window.contains(14)

    def test_wraps_midnight(self):
        window = OutageInterval(22, 2)
        assert all(window.contains(h) for h in (22, 23, 0, 1))
        assert not window.contains(2)
        assert not window.contains(12)

    def test_empty(self):
        window = OutageInterval(5, 5)
        assert not any(window.contains(h) for h in range(24))


class TestGridConnection:
    def test_import_capped(self):
        grid = GridConnection(max_import_mw=1.0)
        assert grid.import_power(1.5, 0) == 1.0
        assert grid.import_power(0.4, 0, already_mw=0.8) == pytest.approx(0.2)

    def test_import_outage(self):
        grid = GridConnection(import_outages=(OutageInterval(10, 12),))
        assert grid.import_blocked(11)
        assert grid.import_limit(11) == 0.0
        assert grid.import_power(1.0, 11) == 0.0
        assert not grid.export_blocked(11)

    def test_export_outage(self):
        grid = GridConnection(export_outages=(OutageInterval(10, 12),))
        assert grid.export_power(0.5, 10) == 0.0
        assert grid.export_power(0.5, 12) == 0.5

    def test_islanded_blocks_both(self):
        grid = GridConnection(islanded=True)
        for h in range(24):
            assert grid.import_power(1.0, h) == 0.0
            assert grid.export_power(1.0, h) == 0.0


# ======================================================================
# Price tiers
# ======================================================================


class TestClassifyPrices:
    def test_index_thresholds(self):
        tiers = classify_prices([float(p) for p in range(1, 25)])
        assert tiers.low_threshold == 7.0
        assert tiers.high_threshold == 19.0
        assert tiers.max_price == 24.0
        assert tiers.mean_price == pytest.approx(12.5)
        assert tiers.peak_hours == (18, 19, 20, 21, 22, 23)

    def test_default_market_tiers(self):
        tiers = classify_prices(DEFAULT_MARKET_PRICES)
        assert tiers.low_threshold == 5.10
        assert tiers.high_threshold == 7.80
        assert tiers.peak_hours == (8, 17, 18, 19, 20, 21)
        assert tiers.is_cheap(3.10)
        assert tiers.is_peak(12.50)
        assert tiers.next_peak_after(8) == 17
        assert tiers.next_peak_after(21) is None

    def test_flat_prices_are_both_cheap_and_peak(self):
        tiers = classify_prices([5.0] * 24)
        assert tiers.is_cheap(5.0)
        assert tiers.is_peak(5.0)

    def test_empty(self):
        with pytest.raises(ValueError):
            classify_prices([])
