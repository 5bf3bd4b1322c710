"""Site load profile for the 24-hour dispatch horizon.

Provides the built-in hourly demand template and the override merge that
lets an operator replace individual hours with measured or planned loads.
"""

from __future__ import annotations

from typing import Mapping, Optional, Sequence

import numpy as np
from numpy.typing import NDArray


# ======================================================================
# Built-in hourly template (MW)
# ======================================================================

# Small campus / commercial block: low overnight base, morning ramp,
# flat daytime plateau, evening shoulder.
DEFAULT_LOAD_PROFILE_MW: tuple[float, ...] = (
    0.115, 0.115, 0.115, 0.115, 0.115, 0.115,  # 00-05
    0.250, 0.250, 0.250,                       # 06-08
    0.475, 0.475, 0.475, 0.475,                # 09-12
    0.475, 0.475, 0.475, 0.475,                # 13-16
    0.375, 0.375, 0.375,                       # 17-19
    0.225, 0.225, 0.225, 0.225,                # 20-23
)


# ======================================================================
# Public API
# ======================================================================

def baseline_load(hour: int, profile: Sequence[float] = DEFAULT_LOAD_PROFILE_MW) -> float:
    """Return the template demand for *hour* (0.0 when the hour is not covered)."""
    if 0 <= hour < len(profile):
        return float(profile[hour])
    return 0.0


def resolve_load(
    hour: int,
    overrides: Optional[Mapping[int, float]] = None,
    profile: Sequence[float] = DEFAULT_LOAD_PROFILE_MW,
) -> tuple[float, bool]:
    """Return ``(load_mw, is_override)`` for *hour*.

    A manual override for the hour wins over the template value.
    """
    if overrides is not None and hour in overrides:
        return float(overrides[hour]), True
    return baseline_load(hour, profile), False


def build_load_profile(
    overrides: Optional[Mapping[int, float]] = None,
    profile: Sequence[float] = DEFAULT_LOAD_PROFILE_MW,
    hours: int = 24,
) -> NDArray[np.float64]:
    """Create the full-day load array with overrides applied.

    Returns
    -------
    NDArray[np.float64]
        Shape ``(hours,)`` array of hourly loads in MW.
    """
    return np.array(
        [resolve_load(h, overrides, profile)[0] for h in range(hours)],
        dtype=np.float64,
    )
