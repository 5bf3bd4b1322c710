"""Tests for engine.solar.pv_system -- hourly PV estimate."""

from __future__ import annotations

import math

import numpy as np
import pytest

from engine.solar.pv_system import (
    estimate_solar_output,
    humidity_loss,
    simulate_pv_day,
    thermal_loss,
)


def _pv(hour: int, **overrides) -> float:
    params = dict(
        capacity_mw=1.0,
        sunrise_hour=6.0,
        sunset_hour=18.0,
        temperature_c=25.0,
        cloud_pct=0.0,
        humidity_pct=0.0,
    )
    params.update(overrides)
    return estimate_solar_output(hour, **params)


# ======================================================================
# Loss factors
# ======================================================================


class TestLossFactors:
    def test_no_thermal_loss_at_or_below_reference(self):
        assert thermal_loss(25.0) == 0.0
        assert thermal_loss(10.0) == 0.0

    def test_thermal_loss_slope(self):
        assert thermal_loss(35.0) == pytest.approx(0.04)

    def test_humidity_loss(self):
        assert humidity_loss(0.0) == 0.0
        assert humidity_loss(50.0) == pytest.approx(0.1)
        assert humidity_loss(100.0) == pytest.approx(0.2)


# ======================================================================
# Hourly estimate
# ======================================================================


class TestEstimateSolarOutput:
    def test_zero_at_night(self):
        assert _pv(2) == 0.0
        assert _pv(22) == 0.0

    def test_evaluated_at_hour_midpoint(self):
        """Hour 5 (midpoint 5.5) is dark; hour 17 (midpoint 17.5) is lit."""
        assert _pv(5) == 0.0
        assert _pv(17) > 0.0

    def test_clear_sky_value(self):
        expected = math.sin(math.pi * 5.5 / 12.0)
        assert _pv(11) == pytest.approx(expected)

    def test_scales_with_capacity(self):
        assert _pv(12, capacity_mw=2.0) == pytest.approx(2.0 * _pv(12))

    def test_full_cloud_blocks_output(self):
        assert _pv(12, cloud_pct=100.0) == 0.0

    def test_heat_and_humidity_reduce_output(self):
        clean = _pv(12)
        degraded = _pv(12, temperature_c=35.0, humidity_pct=50.0)
        assert degraded == pytest.approx(clean * (1.0 - 0.04 - 0.1))

    def test_never_negative(self):
        assert _pv(12, temperature_c=400.0) == 0.0

    def test_degenerate_daylight_window(self):
        assert _pv(12, sunrise_hour=12.0, sunset_hour=12.0) == 0.0
        assert _pv(12, sunrise_hour=18.0, sunset_hour=6.0) == 0.0


class TestSimulatePvDay:
    def test_shape_and_symmetry(self):
        flat = np.full(24, 25.0)
        zeros = np.zeros(24)
        day = simulate_pv_day(1.0, 6.0, 18.0, flat, zeros, zeros)
        assert day.shape == (24,)
        assert day[6] == pytest.approx(day[17])
        assert day[:6].sum() == 0.0
        assert day[18:].sum() == 0.0
