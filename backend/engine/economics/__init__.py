"""Economics module -- hourly pricing and the daily financial audit."""

from .metrics import (
    KWH_PER_MWH,
    FinancialAudit,
    HourlyFinancials,
    accumulate_audit,
    battery_cycles,
    hourly_financials,
    peak_grid_draw,
)

__all__ = [
    "KWH_PER_MWH",
    "FinancialAudit",
    "HourlyFinancials",
    "accumulate_audit",
    "battery_cycles",
    "hourly_financials",
    "peak_grid_draw",
]
