"""Grid connection, tariff and price-tier module."""

from .tariff import (
    DEFAULT_MARKET_PRICES,
    MarketTariff,
    TariffBase,
    TimeOfDayTariff,
    resolve_tariff,
)
from .grid_connection import GridConnection, OutageInterval, hour_in_intervals
from .price_tiers import PriceTiers, classify_prices

__all__ = [
    "DEFAULT_MARKET_PRICES",
    "MarketTariff",
    "TariffBase",
    "TimeOfDayTariff",
    "resolve_tariff",
    "GridConnection",
    "OutageInterval",
    "hour_in_intervals",
    "PriceTiers",
    "classify_prices",
]
