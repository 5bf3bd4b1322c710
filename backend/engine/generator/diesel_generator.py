"""Diesel backup generator used as the dispatch source of last resort.

The generator covers whatever deficit remains after the battery and the
grid have been dispatched, up to its rated capacity.  Fuel is priced per
kWh of electrical output (see :mod:`engine.economics.metrics`).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class DieselGenerator:
    """Dispatchable diesel generator.

    Parameters
    ----------
    capacity_mw : float
        Maximum continuous electrical output (MW).
    fuel_cost_per_kwh : float
        Fuel cost per kWh generated.
    """

    capacity_mw: float = 0.5
    fuel_cost_per_kwh: float = 95.0

    def dispatch(self, deficit_mw: float) -> Tuple[float, float]:
        """Serve as much of *deficit_mw* as the rating allows.

        Returns
        -------
        output_mw : float
            Power generated (MW, >= 0).
        shortfall_mw : float
            Deficit left unserved after the generator (MW, >= 0).
        """
        if deficit_mw <= 0:
            return 0.0, 0.0
        output = min(deficit_mw, max(0.0, self.capacity_mw))
        return output, deficit_mw - output
