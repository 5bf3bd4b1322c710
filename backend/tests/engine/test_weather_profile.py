"""Tests for engine.weather.hourly -- array normalisation and default curves."""

from __future__ import annotations

import math

import numpy as np
import pytest

from engine.weather.hourly import (
    FALLBACK_TEMPERATURE_C,
    HOURS_PER_DAY,
    default_cloud_profile,
    default_humidity_profile,
    default_temperature_profile,
    generate_curve,
    normalize_hourly,
    value_at,
)


class TestNormalizeHourly:
    def test_exact_length_unchanged(self):
        values = [float(h) for h in range(HOURS_PER_DAY)]
        assert normalize_hourly(values, 0.0) == tuple(values)

    def test_short_array_padded_with_last_value(self):
        result = normalize_hourly([30.0, 31.0, 32.0], FALLBACK_TEMPERATURE_C)
        assert len(result) == HOURS_PER_DAY
        assert result[:3] == (30.0, 31.0, 32.0)
        assert all(v == 32.0 for v in result[3:])

    def test_long_array_truncated(self):
        result = normalize_hourly(list(range(40)), 0.0)
        assert len(result) == HOURS_PER_DAY
        assert result[-1] == 23.0

    @pytest.mark.parametrize("empty", [[], None, ()])
    def test_empty_becomes_fallback(self, empty):
        assert normalize_hourly(empty, 25.0) == (25.0,) * HOURS_PER_DAY

    def test_missing_entries_use_fallback(self):
        result = normalize_hourly([None, math.nan, 12.0], 50.0)
        assert result[0] == 50.0
        assert result[1] == 50.0
        assert result[2] == 12.0

    def test_zero_is_not_missing(self):
        """A genuine zero reading is kept, not replaced by the fallback."""
        result = normalize_hourly([0.0] * HOURS_PER_DAY, 50.0)
        assert result == (0.0,) * HOURS_PER_DAY


class TestValueAt:
    def test_in_range(self):
        assert value_at((1.0, 2.0, 3.0), 1, 9.0) == 2.0

    def test_out_of_range_falls_back(self):
        assert value_at((1.0,), 5, 9.0) == 9.0
        assert value_at((1.0,), -1, 9.0) == 9.0


class TestGenerateCurve:
    def test_bell_peaks_at_peak_hour(self):
        curve = generate_curve(28.0, 42.0, 14, "bell")
        assert curve.shape == (HOURS_PER_DAY,)
        assert curve[14] == pytest.approx(42.0)
        assert int(np.argmax(curve)) == 14
        # Twelve hours away the weight reaches zero.
        assert curve[2] == pytest.approx(28.0)

    def test_inverse_dips_at_peak_hour(self):
        curve = generate_curve(30.0, 70.0, 4, "inverse")
        assert curve[4] == pytest.approx(30.0)
        assert curve[16] == pytest.approx(70.0)
        assert int(np.argmin(curve)) == 4

    def test_unknown_shape(self):
        with pytest.raises(ValueError, match="Unknown curve shape"):
            generate_curve(0.0, 1.0, 12, "square")  # type: ignore[arg-type]


class TestDefaultProfiles:
    def test_lengths(self):
        for profile in (
            default_temperature_profile(),
            default_humidity_profile(),
            default_cloud_profile(),
        ):
            assert len(profile) == HOURS_PER_DAY

    def test_temperature_range(self):
        temps = default_temperature_profile()
        assert max(temps) == pytest.approx(42.0)
        assert min(temps) >= 28.0

    def test_cloud_is_flat(self):
        assert set(default_cloud_profile()) == {5.0}
