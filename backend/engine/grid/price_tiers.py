"""Price-tier classification of the day's import tariffs.

The arbitrage heuristic reasons in quartiles: hours at or below the lower
quartile are "cheap", hours at or above the upper quartile are "peak".
Thresholds are taken from the sorted price list by index (no
interpolation), so they are always one of the day's actual prices.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

import numpy as np

LOW_PERCENTILE: float = 0.25
HIGH_PERCENTILE: float = 0.75


@dataclass(frozen=True)
class PriceTiers:
    """Distributional statistics of a day's tariff vector."""

    low_threshold: float
    high_threshold: float
    max_price: float
    mean_price: float
    peak_hours: tuple[int, ...]

    def is_cheap(self, price: float) -> bool:
        return price <= self.low_threshold

    def is_peak(self, price: float) -> bool:
        return price >= self.high_threshold

    def next_peak_after(self, hour: int) -> int | None:
        """First peak hour strictly after *hour*, or ``None``."""
        for h in self.peak_hours:
            if h > hour:
                return h
        return None


def classify_prices(tariffs: Sequence[float]) -> PriceTiers:
    """Compute quartile thresholds, max, mean and peak hours.

    Parameters
    ----------
    tariffs : sequence of float
        One import price per hour (index = hour of day).

    Raises
    ------
    ValueError
        If *tariffs* is empty.
    """
    prices = np.asarray(tariffs, dtype=np.float64)
    if prices.size == 0:
        raise ValueError("classify_prices needs at least one tariff")

    ordered = np.sort(prices)
    n = ordered.size
    low = float(ordered[math.floor(n * LOW_PERCENTILE)])
    high = float(ordered[math.floor(n * HIGH_PERCENTILE)])

    return PriceTiers(
        low_threshold=low,
        high_threshold=high,
        max_price=float(ordered[-1]),
        mean_price=float(sum(ordered.tolist()) / n),
        peak_hours=tuple(int(h) for h in np.flatnonzero(prices >= high)),
    )
