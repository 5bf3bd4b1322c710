"""Economic-arbitrage decision rules for deficit hours.

Two independent questions are answered every deficit hour:

**Buy low** -- should the battery charge from the grid right now?
    Only when the hour is in the cheapest price quartile, the day's price
    spread survives the round-trip loss, the battery is below 90 % and the
    rest of the day will not bring enough free solar surplus to fill it
    anyway.  The charge is sized by looking ahead to the peak-price hours:
    if the energy already stored cannot cover the upcoming peak deficit
    (net of solar surplus expected before the peak), charge now.

**Sell high** -- should the battery discharge to offset the deficit?
    Always in the top price quartile; above the mean price when the
    battery is more than half full; and after 21:00 any energy above the
    floor is dumped.  Otherwise the battery holds its charge.
"""

from __future__ import annotations

from typing import Sequence

from engine.battery.battery_system import BatterySystem, BatteryState
from engine.grid.price_tiers import PriceTiers
from engine.simulation.profile import HourlyVector

from .load_following import DispatchDecision
from .rationale import Rationale

# Fraction of free headroom that future solar surplus may fill before
# grid charging is considered to displace solar.
SOLAR_DISPLACEMENT_BUFFER: float = 0.9

# No grid charging above this SoC fraction.
GRID_CHARGE_SOC_CEILING: float = 0.9

# Above-mean prices discharge only above this SoC fraction.
ECON_DISCHARGE_SOC: float = 0.5

# After this hour remaining energy above the floor is released.
END_OF_DAY_HOUR: int = 21


def future_solar_surplus(profile: Sequence[HourlyVector], hour: int) -> float:
    """Total solar surplus (MWh) expected in the hours after *hour*."""
    return sum(v.surplus_mw for v in profile[hour + 1:])


def peak_energy_need(
    profile: Sequence[HourlyVector], hour: int, tiers: PriceTiers
) -> float | None:
    """Stored energy needed to ride through the remaining peak-price hours.

    Sums the deficit of every peak-price hour from *hour* onwards, less
    the solar surplus that accrues before the next peak begins.  Returns
    ``None`` when no peak hour remains later in the day.
    """
    next_peak = tiers.next_peak_after(hour)
    if next_peak is None:
        return None

    peak_deficit = 0.0
    solar_before_peak = 0.0
    for vector in profile[hour:]:
        if tiers.is_peak(vector.tariff):
            peak_deficit += vector.deficit_mw
        if vector.hour < next_peak:
            solar_before_peak += vector.surplus_mw

    return max(0.0, peak_deficit - solar_before_peak)


def should_grid_charge(
    vector: HourlyVector,
    state: BatteryState,
    battery: BatterySystem,
    profile: Sequence[HourlyVector],
    tiers: PriceTiers,
) -> bool:
    """Decide whether to buy grid energy into the battery this hour."""
    headroom = battery.headroom_mwh(state)
    if future_solar_surplus(profile, vector.hour) > headroom * SOLAR_DISPLACEMENT_BUFFER:
        return False

    profitable_spread = tiers.max_price * battery.efficiency > vector.tariff
    if not (
        tiers.is_cheap(vector.tariff)
        and profitable_spread
        and battery.soc_fraction(state) < GRID_CHARGE_SOC_CEILING
    ):
        return False

    need = peak_energy_need(profile, vector.hour, tiers)
    if need is None:
        return False
    return battery.available_mwh(state) < need


def discharge_rule(
    vector: HourlyVector,
    state: BatteryState,
    battery: BatterySystem,
    tiers: PriceTiers,
) -> tuple[bool, Rationale]:
    """Return ``(discharge, rationale)`` for the sell-high side."""
    soc = battery.soc_fraction(state)

    if tiers.is_peak(vector.tariff):
        return True, Rationale.PEAK_DISCHARGE
    if vector.tariff > tiers.mean_price and soc > ECON_DISCHARGE_SOC:
        return True, Rationale.ECON_DISCHARGE
    if vector.hour > END_OF_DAY_HOUR and soc > battery.min_soc_pct / 100.0:
        return True, Rationale.END_DAY_DUMP
    return False, Rationale.CONSERVING


def decide_arbitrage(
    vector: HourlyVector,
    state: BatteryState,
    battery: BatterySystem,
    profile: Sequence[HourlyVector],
    tiers: PriceTiers,
) -> DispatchDecision:
    discharge, rationale = discharge_rule(vector, state, battery, tiers)
    return DispatchDecision(
        grid_charge=should_grid_charge(vector, state, battery, profile, tiers),
        discharge=discharge,
        rationale=rationale,
    )
