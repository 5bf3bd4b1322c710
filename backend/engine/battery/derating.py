"""
Charge-power derating for lithium-ion storage.

Two independent multipliers bound the instantaneous charge power:

* **Thermal throttle** -- the battery management system cuts charge
  current linearly above 35 degC (5 % per degC) to a floor of 10 %.
* **CC-CV taper** -- above 80 % state of charge the charger leaves the
  constant-current phase and the accepted power falls linearly to zero at
  100 %, floored at 5 %.

Discharge power is not derated by either effect.
"""

from __future__ import annotations

THERMAL_LIMIT_C: float = 35.0
THERMAL_SLOPE_PER_C: float = 0.05
THERMAL_FLOOR: float = 0.1

CV_THRESHOLD_SOC: float = 0.8
CV_BAND: float = 0.2
CV_FLOOR: float = 0.05


def thermal_derating(temperature_c: float) -> float:
    """Charge-rate multiplier for ambient *temperature_c*, in [0.1, 1]."""
    if temperature_c > THERMAL_LIMIT_C:
        excess = temperature_c - THERMAL_LIMIT_C
        return max(THERMAL_FLOOR, 1.0 - excess * THERMAL_SLOPE_PER_C)
    return 1.0


def cv_taper(soc_fraction: float) -> float:
    """Charge-rate multiplier for the constant-voltage phase, in [0.05, 1]."""
    if soc_fraction > CV_THRESHOLD_SOC:
        return max(CV_FLOOR, (1.0 - soc_fraction) / CV_BAND)
    return 1.0


def derated_charge_limit(
    max_charge_mw: float, temperature_c: float, soc_fraction: float
) -> float:
    """Maximum charge power after thermal and CC-CV derating (MW)."""
    return max_charge_mw * thermal_derating(temperature_c) * cv_taper(soc_fraction)
