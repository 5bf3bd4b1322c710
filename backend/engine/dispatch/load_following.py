"""Load-following decision rule.

The baseline strategy against which arbitrage is measured: whenever solar
falls short of load the battery discharges to cover the deficit, with no
look-ahead and no holding back for later hours.  Any strategy without a
dedicated rule (including self-consumption) dispatches this way, as does
arbitrage while grid import is unavailable.
"""

from __future__ import annotations

from dataclasses import dataclass

from .rationale import Rationale


@dataclass(frozen=True)
class DispatchDecision:
    """Battery intent for a deficit hour, before physical limits apply."""

    grid_charge: bool
    discharge: bool
    rationale: Rationale


def decide_load_following() -> DispatchDecision:
    return DispatchDecision(
        grid_charge=False,
        discharge=True,
        rationale=Rationale.LOAD_FOLLOWING,
    )
