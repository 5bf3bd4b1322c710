"""Closed set of dispatch rationale tags attached to every hourly record."""

from __future__ import annotations

import enum


class Rationale(str, enum.Enum):
    """Why the scheduler dispatched an hour the way it did.

    Values are the display labels used by reports and the advisory
    snapshot.
    """

    # Surplus hours
    SOLAR_CHARGE = "Solar Charge"
    SOLAR_EXPORT = "Solar Export"
    CHARGE_AND_EXPORT = "Charge & Export"
    CURTAILED = "Curtailed"

    # Deficit hours, arbitrage
    ECON_CHARGE = "Econ Charge"
    PEAK_DISCHARGE = "Peak Discharge"
    ECON_DISCHARGE = "Econ Discharge"
    CONSERVING = "Conserving"
    END_DAY_DUMP = "End-Day Dump"
    MARKET_EXPORT = "Market Export"

    # Deficit hours, backup
    AUX_SUPPORT = "Aux Support"
    CRITICAL_DEFICIT = "Critical Deficit"

    # Defaults
    LOAD_FOLLOWING = "Load Following"
    GRID_ISOLATED = "Grid Isolated"
    STANDBY = "Standby"

    def __str__(self) -> str:
        return self.value
