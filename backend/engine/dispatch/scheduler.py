"""Hour-by-hour dispatch scheduler for the 24-hour microgrid day.

Each hour the scheduler allocates power among solar, battery, grid and
diesel in a fixed priority order:

**Surplus:** solar -> load -> battery charge -> grid export -> curtailment
**Deficit:** (grid charge | battery discharge) -> grid import -> diesel -> unserved

The battery intent on deficit hours comes from the strategy's decision
rule (:mod:`.arbitrage` or :mod:`.load_following`).  Under arbitrage a
market-export overlay may additionally discharge into the grid during
peak-price hours.

The day is an explicit fold: :func:`dispatch_hour` takes the battery
state at the start of the hour and returns the state at its end together
with the hour's :class:`HourlyDispatch`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from engine.battery.battery_system import BatterySystem, BatteryState
from engine.generator.diesel_generator import DieselGenerator
from engine.grid.grid_connection import GridConnection
from engine.grid.price_tiers import PriceTiers, classify_prices
from engine.simulation.config import SimulationConfiguration, Strategy
from engine.simulation.profile import HourlyVector

from .arbitrage import decide_arbitrage
from .load_following import DispatchDecision, decide_load_following
from .rationale import Rationale

# Market export only from a battery holding more than this SoC fraction.
MARKET_EXPORT_SOC_FLOOR: float = 0.4


# ======================================================================
# Data containers
# ======================================================================

@dataclass(frozen=True)
class DispatchContext:
    """Read-only inputs shared by every hour of one pass."""

    battery: BatterySystem
    grid: GridConnection
    generator: DieselGenerator
    strategy: Strategy
    allow_battery_export: bool
    profile: tuple[HourlyVector, ...]
    tiers: PriceTiers

    @classmethod
    def from_config(
        cls, config: SimulationConfiguration, profile: Sequence[HourlyVector]
    ) -> "DispatchContext":
        profile = tuple(profile)
        return cls(
            battery=config.battery(),
            grid=config.grid(),
            generator=config.generator(),
            strategy=config.strategy,
            allow_battery_export=config.allow_battery_export,
            profile=profile,
            tiers=classify_prices([v.tariff for v in profile]),
        )


@dataclass(frozen=True)
class HourlyDispatch:
    """Power flows chosen for one hour (MW, i.e. MWh over the hour).

    ``battery_flow_mw`` is signed: negative while charging, positive while
    discharging.  Every other flow is non-negative.
    """

    hour: int
    base_load_mw: float
    load_mw: float
    solar_mw: float
    net_mw: float
    grid_import_mw: float
    grid_export_mw: float
    diesel_mw: float
    curtailed_mw: float
    battery_flow_mw: float
    soc_pct: float
    tariff: float
    import_blocked: bool
    is_manual_override: bool
    rationale: Rationale

    @property
    def battery_charge_mw(self) -> float:
        return max(0.0, -self.battery_flow_mw)

    @property
    def battery_discharge_mw(self) -> float:
        return max(0.0, self.battery_flow_mw)

    @property
    def balance_residual_mw(self) -> float:
        """Load not accounted for by the hour's sources and sinks.

        Zero on every hour except a Critical Deficit hour, where it equals
        the unserved load.
        """
        supplied = (
            self.solar_mw
            - self.curtailed_mw
            + self.battery_discharge_mw
            - self.battery_charge_mw
            + self.grid_import_mw
            - self.grid_export_mw
            + self.diesel_mw
        )
        return self.load_mw - supplied


# ======================================================================
# Decision
# ======================================================================

def _decide(
    vector: HourlyVector,
    state: BatteryState,
    ctx: DispatchContext,
    import_blocked: bool,
) -> DispatchDecision:
    if ctx.strategy is Strategy.ARBITRAGE and not import_blocked:
        return decide_arbitrage(vector, state, ctx.battery, ctx.profile, ctx.tiers)
    return decide_load_following()


# ======================================================================
# One hour
# ======================================================================

def dispatch_hour(
    state: BatteryState,
    vector: HourlyVector,
    ctx: DispatchContext,
) -> tuple[BatteryState, HourlyDispatch]:
    """Dispatch one hour and advance the battery state.

    Parameters
    ----------
    state : BatteryState
        Battery energy at the start of the hour.
    vector : HourlyVector
        Exogenous inputs for the hour.
    ctx : DispatchContext
        Pass-wide read-only inputs.

    Returns
    -------
    tuple[BatteryState, HourlyDispatch]
        Battery state at the end of the hour and the hour's flows.
    """
    battery = ctx.battery
    hour = vector.hour

    import_blocked = ctx.grid.import_blocked(hour)
    export_blocked = ctx.grid.export_blocked(hour)
    grid_limit = ctx.grid.import_limit(hour)

    # Battery physics are evaluated once, at the start of the hour.
    start_soc = battery.soc_fraction(state)
    max_charge = battery.max_charge_power(state, vector.temperature_c)
    max_discharge = battery.max_discharge_mw

    net_power = vector.solar_mw - vector.load_mw
    battery_flow = 0.0
    grid_import = 0.0
    grid_export = 0.0
    diesel = 0.0
    curtailed = 0.0
    rationale = Rationale.GRID_ISOLATED if import_blocked else Rationale.STANDBY

    if net_power > 0:
        # ----- SURPLUS: solar exceeds load --------------------------------
        surplus = net_power

        charge = max(0.0, min(surplus, max_charge, battery.max_acceptable_power(state)))
        if charge > 0:
            state = battery.charge(state, charge)
            battery_flow = -charge
            rationale = Rationale.SOLAR_CHARGE

        remaining = surplus - charge
        if remaining > 0:
            grid_export = ctx.grid.export_power(remaining, hour)
            if grid_export > 0:
                rationale = (
                    Rationale.CHARGE_AND_EXPORT if charge > 0 else Rationale.SOLAR_EXPORT
                )
            else:
                curtailed = remaining
                rationale = Rationale.CURTAILED

    else:
        # ----- DEFICIT: load exceeds solar --------------------------------
        deficit = -net_power
        decision = _decide(vector, state, ctx, import_blocked)
        rationale = decision.rationale

        # 1. Grid charging replaces the discharge attempt.  The hour's
        #    deficit keeps first claim on the import cap.
        if decision.grid_charge:
            charge = max(
                0.0,
                min(
                    grid_limit - deficit,
                    max_charge,
                    battery.max_acceptable_power(state),
                ),
            )
            if charge > 0:
                state = battery.charge(state, charge)
                battery_flow = -charge
                grid_import += charge
                rationale = Rationale.ECON_CHARGE

        # 2. Battery discharge.
        if decision.discharge and battery_flow == 0:
            amount = max(
                0.0,
                min(deficit, max_discharge, battery.max_deliverable_power(state)),
            )
            if amount > 0:
                state = battery.discharge(state, amount)
                battery_flow = amount
                deficit -= amount

        # 3. Grid import.
        if deficit > 0 and not import_blocked:
            imported = ctx.grid.import_power(deficit, hour, already_mw=grid_import)
            grid_import += imported
            deficit -= imported

        # 4. Diesel, then whatever is left is unserved.
        if deficit > 0:
            diesel, shortfall = ctx.generator.dispatch(deficit)
            rationale = (
                Rationale.CRITICAL_DEFICIT if shortfall > 0 else Rationale.AUX_SUPPORT
            )

    # ----- MARKET EXPORT OVERLAY (arbitrage only) --------------------------
    if (
        ctx.strategy is Strategy.ARBITRAGE
        and ctx.allow_battery_export
        and not export_blocked
        and not import_blocked
        and ctx.tiers.is_peak(vector.tariff)
        and battery_flow >= 0
    ):
        inverter_headroom = max_discharge - battery_flow
        if inverter_headroom > 0 and start_soc > MARKET_EXPORT_SOC_FLOOR:
            extra = min(inverter_headroom, battery.max_deliverable_power(state))
            if extra > 0:
                state = battery.discharge(state, extra)
                battery_flow += extra
                grid_export += extra
                rationale = Rationale.MARKET_EXPORT

    dispatch = HourlyDispatch(
        hour=hour,
        base_load_mw=vector.base_load_mw,
        load_mw=vector.load_mw,
        solar_mw=vector.solar_mw,
        net_mw=net_power,
        grid_import_mw=grid_import,
        grid_export_mw=grid_export,
        diesel_mw=diesel,
        curtailed_mw=curtailed,
        battery_flow_mw=battery_flow,
        soc_pct=battery.soc_percent(state),
        tariff=vector.tariff,
        import_blocked=import_blocked,
        is_manual_override=vector.is_manual_override,
        rationale=rationale,
    )
    return state, dispatch


# ======================================================================
# Full day
# ======================================================================

def run_pass(
    ctx: DispatchContext, initial_state: BatteryState
) -> tuple[list[HourlyDispatch], BatteryState]:
    """Fold :func:`dispatch_hour` over the day's profile.

    Returns the 24 hourly dispatches and the battery state after the last
    hour.
    """
    state = initial_state
    dispatches: list[HourlyDispatch] = []
    for vector in ctx.profile:
        state, dispatch = dispatch_hour(state, vector, ctx)
        dispatches.append(dispatch)
    return dispatches, state
