"""Electricity tariff structures for the day-ahead dispatch horizon.

Provides the import-price tables consulted when building the hourly
profile: a three-tier time-of-day tariff and a 24-value dynamic market
tariff.  Either can be replaced by an operator-supplied table.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Mapping, Optional, Sequence


# ======================================================================
# Abstract base
# ======================================================================

class TariffBase(ABC):
    """Interface that every import tariff must implement."""

    @abstractmethod
    def buy_price(self, hour: int) -> float:
        """Return the cost to *buy* (import) 1 kWh during *hour* (0 -- 23)."""


# ======================================================================
# Time-of-day tariff
# ======================================================================

@dataclass
class TimeOfDayTariff(TariffBase):
    """Three-tier time-of-day tariff (discount / peak / normal).

    Windows are half-open hour ranges ``[start, end)``.  The discount
    window is checked before the peak window; every other hour is billed
    at the normal rate.

    Parameters
    ----------
    discount_rate : float
        Import price inside the solar-discount window (per kWh).
    peak_rate : float
        Import price inside the evening peak window (per kWh).
    normal_rate : float
        Import price for all remaining hours (per kWh).
    discount_window : tuple[int, int]
        ``(start, end)`` hours of the discount window.
    peak_window : tuple[int, int]
        ``(start, end)`` hours of the peak window.
    """

    discount_rate: float = 6.00
    peak_rate: float = 9.00
    normal_rate: float = 7.50
    discount_window: tuple[int, int] = (6, 10)
    peak_window: tuple[int, int] = (17, 21)

    def buy_price(self, hour: int) -> float:  # noqa: D401
        if self.discount_window[0] <= hour < self.discount_window[1]:
            return self.discount_rate
        if self.peak_window[0] <= hour < self.peak_window[1]:
            return self.peak_rate
        return self.normal_rate


# ======================================================================
# Dynamic market tariff
# ======================================================================

# Simulated day-ahead market clearing prices (per kWh).
DEFAULT_MARKET_PRICES: tuple[float, ...] = (
    4.20, 3.80, 3.50, 3.20, 3.10, 3.50,   # 00-05 night trough
    5.50, 6.80, 8.20, 7.50, 6.50, 6.20,   # 06-11 morning ramp
    5.80, 5.50, 5.40, 6.00, 7.50, 9.80,   # 12-17 midday / early evening
    12.50, 11.20, 9.50, 7.80, 6.20, 5.10,  # 18-23 peak and cooling
)


@dataclass
class MarketTariff(TariffBase):
    """Hour-indexed dynamic price table.

    Hours outside 0 -- 23 are clamped to the nearest table entry.
    """

    prices: Sequence[float] = field(default_factory=lambda: DEFAULT_MARKET_PRICES)

    def __post_init__(self) -> None:
        if len(self.prices) == 0:
            raise ValueError("MarketTariff requires at least one price")

    def buy_price(self, hour: int) -> float:  # noqa: D401
        idx = int(max(0, min(len(self.prices) - 1, hour)))
        return float(self.prices[idx])


# ======================================================================
# Resolution
# ======================================================================

def resolve_tariff(
    hour: int,
    dynamic: bool,
    overrides: Optional[Mapping[int, float]] = None,
    time_of_day: Optional[TariffBase] = None,
    market: Optional[TariffBase] = None,
) -> float:
    """Return the effective import price for *hour*.

    Precedence: manual override, then the market table when *dynamic* is
    set, then the time-of-day table.
    """
    if overrides is not None and hour in overrides:
        return float(overrides[hour])
    if dynamic:
        return (market or MarketTariff()).buy_price(hour)
    return (time_of_day or TimeOfDayTariff()).buy_price(hour)
