"""Dispatch engine for the 24-hour microgrid simulation.

Available strategies:

* **standard** -- load following: battery discharges whenever solar falls
  short, then grid, then diesel (baseline).
* **arbitrage** -- price-tier heuristic with grid charging in cheap hours,
  holding for peak hours and optional market export.
* **self_consumption** -- declared in configuration; dispatches through
  the load-following rule.
"""

from .rationale import Rationale
from .load_following import DispatchDecision, decide_load_following
from .arbitrage import decide_arbitrage, should_grid_charge, discharge_rule
from .scheduler import DispatchContext, HourlyDispatch, dispatch_hour, run_pass

__all__ = [
    "Rationale",
    "DispatchDecision",
    "decide_load_following",
    "decide_arbitrage",
    "should_grid_charge",
    "discharge_rule",
    "DispatchContext",
    "HourlyDispatch",
    "dispatch_hour",
    "run_pass",
]
