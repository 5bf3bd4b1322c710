"""Shared test fixtures for GridPilot engine and API tests."""

from __future__ import annotations

import pytest

from engine.grid.tariff import MarketTariff
from engine.simulation.config import SimulationConfiguration, Strategy

HOURS_PER_DAY = 24


# ======================================================================
# Configuration fixtures
# ======================================================================

@pytest.fixture
def default_config() -> SimulationConfiguration:
    """Built-in campus microgrid on a hot, clear summer day."""
    return SimulationConfiguration()


@pytest.fixture
def dark_flat_config() -> SimulationConfiguration:
    """No solar, 1 MW constant load, flat 7.0 tariff, load following.

    1 MWh battery, 0.5 MW discharge limit, SoC window 20-95 %.
    """
    return SimulationConfiguration(
        solar_capacity_mw=0.0,
        battery_capacity_mwh=1.0,
        max_charge_rate_mw=0.5,
        max_discharge_rate_mw=0.5,
        min_soc_pct=20.0,
        max_soc_pct=95.0,
        strategy=Strategy.STANDARD,
        market_tariff=MarketTariff((7.0,) * HOURS_PER_DAY),
        baseline_load_mw=(1.0,) * HOURS_PER_DAY,
    )


@pytest.fixture
def arbitrage_config() -> SimulationConfiguration:
    """Default plant with battery export enabled."""
    return SimulationConfiguration(
        strategy=Strategy.ARBITRAGE,
        allow_battery_export=True,
    )
