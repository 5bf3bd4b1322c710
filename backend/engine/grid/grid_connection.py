"""Grid connection model with import cap, feed-in price and outage windows.

Represents the point of common coupling (PCC) between the microgrid and
the utility grid.  The connection holds no accumulators: every query is a
pure function of the hour, so one instance can be shared by independent
simulation passes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Tuple


@dataclass(frozen=True)
class OutageInterval:
    """Scheduled grid outage covering the half-open hour range ``[start, end)``.

    When ``start > end`` the window wraps past midnight, e.g.
    ``OutageInterval(22, 2)`` covers hours 22, 23, 0 and 1.  A window with
    ``start == end`` is empty.
    """

    start: int
    end: int

    def contains(self, hour: int) -> bool:
        if self.start <= self.end:
            return self.start <= hour < self.end
        return hour >= self.start or hour < self.end


def hour_in_intervals(hour: int, intervals: Iterable[OutageInterval]) -> bool:
    """Return ``True`` when *hour* falls inside any of *intervals*."""
    return any(interval.contains(hour) for interval in intervals)


@dataclass(frozen=True)
class GridConnection:
    """Bi-directional grid interconnection.

    Parameters
    ----------
    max_import_mw : float
        Maximum power the site can draw from the grid (MW).
    feed_in_tariff : float
        Price paid per exported kWh.
    islanded : bool
        If ``True`` the grid is unavailable for the whole day.
    import_outages : tuple[OutageInterval, ...]
        Hours during which import is blocked.
    export_outages : tuple[OutageInterval, ...]
        Hours during which export is blocked.
    """

    max_import_mw: float = 2.0
    feed_in_tariff: float = 4.8
    islanded: bool = False
    import_outages: Tuple[OutageInterval, ...] = field(default_factory=tuple)
    export_outages: Tuple[OutageInterval, ...] = field(default_factory=tuple)

    # ------------------------------------------------------------------
    # Availability
    # ------------------------------------------------------------------

    def import_blocked(self, hour: int) -> bool:
        return self.islanded or hour_in_intervals(hour, self.import_outages)

    def export_blocked(self, hour: int) -> bool:
        return self.islanded or hour_in_intervals(hour, self.export_outages)

    def import_limit(self, hour: int) -> float:
        """Effective import cap for *hour* in MW (0 when import is blocked)."""
        return 0.0 if self.import_blocked(hour) else max(0.0, self.max_import_mw)

    # ------------------------------------------------------------------
    # Flows
    # ------------------------------------------------------------------

    def import_power(self, mw_needed: float, hour: int, already_mw: float = 0.0) -> float:
        """Import up to *mw_needed* without exceeding the hour's cap.

        Parameters
        ----------
        mw_needed : float
            Desired import power (MW).
        hour : int
            Hour of day, 0 -- 23.
        already_mw : float
            Import already committed this hour (e.g. for battery charging).

        Returns
        -------
        float
            Power actually imported (MW, >= 0).
        """
        if mw_needed <= 0:
            return 0.0
        headroom = max(0.0, self.import_limit(hour) - already_mw)
        return min(mw_needed, headroom)

    def export_power(self, mw_excess: float, hour: int) -> float:
        """Export *mw_excess* unless export is blocked; returns MW exported."""
        if mw_excess <= 0 or self.export_blocked(hour):
            return 0.0
        return mw_excess
