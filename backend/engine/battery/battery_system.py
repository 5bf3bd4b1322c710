"""
Battery model for the day-ahead dispatch fold.

``BatterySystem`` carries the immutable physical parameters (capacity,
power limits, SoC window) and the derating rules; ``BatteryState`` is the
energy content threaded through the hourly fold.  Every charge or
discharge returns a *new* state, so two simulation passes can never alias
each other's battery.

Efficiency convention
---------------------
The round-trip efficiency ``eta`` is charged entirely against state
changes in both directions:

* **Charging** -- of ``P`` MW drawn for one hour, ``P * eta`` MWh is stored.
* **Discharging** -- to deliver ``P`` MW for one hour, the battery
  releases ``P / eta`` MWh.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from .derating import derated_charge_limit

BATTERY_EFFICIENCY: float = 0.92
INITIAL_SOC: float = 0.5


@dataclass(frozen=True)
class BatteryState:
    """Energy content of the battery at an hour boundary (MWh)."""

    energy_mwh: float


@dataclass(frozen=True)
class BatterySystem:
    """Battery parameters and the state transitions that respect them.

    Parameters
    ----------
    capacity_mwh : float
        Nameplate energy capacity in MWh.
    max_charge_mw : float
        Maximum charge power before derating (MW).
    max_discharge_mw : float
        Maximum discharge power, also the inverter limit (MW).
    min_soc_pct : float
        Minimum SoC in percent of capacity.
    max_soc_pct : float
        Maximum SoC in percent of capacity.
    efficiency : float
        Round-trip efficiency.  Default 0.92.
    """

    capacity_mwh: float
    max_charge_mw: float
    max_discharge_mw: float
    min_soc_pct: float = 20.0
    max_soc_pct: float = 95.0
    efficiency: float = BATTERY_EFFICIENCY

    # ------------------------------------------------------------------
    # Bounds
    # ------------------------------------------------------------------

    @property
    def min_energy_mwh(self) -> float:
        return self.min_soc_pct / 100.0 * self.capacity_mwh

    @property
    def max_energy_mwh(self) -> float:
        return self.max_soc_pct / 100.0 * self.capacity_mwh

    def clamp(self, energy_mwh: float) -> float:
        """Clamp *energy_mwh* into the SoC window."""
        return max(self.min_energy_mwh, min(self.max_energy_mwh, energy_mwh))

    # ------------------------------------------------------------------
    # State queries
    # ------------------------------------------------------------------

    def initial_state(self, soc: float = INITIAL_SOC) -> BatteryState:
        """Fresh state at *soc* (fraction), clamped into the SoC window."""
        lo = self.min_soc_pct / 100.0
        hi = self.max_soc_pct / 100.0
        return BatteryState(self.capacity_mwh * max(lo, min(hi, soc)))

    def soc_fraction(self, state: BatteryState) -> float:
        if self.capacity_mwh <= 0:
            return 0.0
        return state.energy_mwh / self.capacity_mwh

    def soc_percent(self, state: BatteryState) -> float:
        return max(0.0, self.soc_fraction(state) * 100.0)

    def headroom_mwh(self, state: BatteryState) -> float:
        """Energy that can still be stored before the upper SoC bound."""
        return self.max_energy_mwh - state.energy_mwh

    def available_mwh(self, state: BatteryState) -> float:
        """Energy stored above the lower SoC bound."""
        return max(0.0, state.energy_mwh - self.min_energy_mwh)

    def max_charge_power(self, state: BatteryState, temperature_c: float) -> float:
        """Derated charge power limit for this hour (MW)."""
        return derated_charge_limit(
            self.max_charge_mw, temperature_c, self.soc_fraction(state)
        )

    def max_deliverable_power(self, state: BatteryState) -> float:
        """Power the stored energy above the floor can deliver for one hour."""
        return self.available_mwh(state) * self.efficiency

    def max_acceptable_power(self, state: BatteryState) -> float:
        """Input power that would exactly fill the remaining headroom."""
        return self.headroom_mwh(state) / self.efficiency

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def charge(self, state: BatteryState, power_mw: float) -> BatteryState:
        """Store ``power_mw * efficiency`` MWh; returns the new state."""
        if power_mw <= 0:
            return state
        return replace(state, energy_mwh=self.clamp(state.energy_mwh + power_mw * self.efficiency))

    def discharge(self, state: BatteryState, power_mw: float) -> BatteryState:
        """Release ``power_mw / efficiency`` MWh; returns the new state."""
        if power_mw <= 0:
            return state
        return replace(state, energy_mwh=self.clamp(state.energy_mwh - power_mw / self.efficiency))
