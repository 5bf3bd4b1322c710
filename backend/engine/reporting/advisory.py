"""Advisory snapshot of a finished simulation.

Condenses a :class:`~engine.simulation.runner.SimulationResult` into a
compact JSON document (run metadata, the daily audit, outage windows and
per-hour telemetry) suitable for handing to an external reviewer or an
LLM-based advisor.  No network access happens here.
"""

from __future__ import annotations

import json
from dataclasses import asdict
from typing import Any

import numpy as np

from engine.simulation.config import SimulationConfiguration
from engine.simulation.runner import DispatchRecord, SimulationResult

TELEMETRY_DECIMALS = 3


def _telemetry_row(record: DispatchRecord) -> dict[str, Any]:
    return {
        "t": record.hour,
        "load": round(record.adjusted_load_mw, TELEMETRY_DECIMALS),
        "gen": round(record.solar_mw, TELEMETRY_DECIMALS),
        "grid_in": round(record.grid_import_mw, TELEMETRY_DECIMALS),
        "grid_out": round(record.grid_export_mw, TELEMETRY_DECIMALS),
        "aux": round(record.diesel_mw, TELEMETRY_DECIMALS),
        # +discharge / -charge
        "batt": round(record.battery_flow_mw, TELEMETRY_DECIMALS),
        "soc": int(round(record.soc_state_percent)),
        "state": record.battery_reason.value,
        "price": record.price,
    }


def build_advisory_snapshot(
    result: SimulationResult, config: SimulationConfiguration
) -> dict[str, Any]:
    """Build the JSON-serialisable advisory snapshot.

    Parameters
    ----------
    result : SimulationResult
        Output of :func:`~engine.simulation.runner.run_simulation`.
    config : SimulationConfiguration
        Configuration the result was produced from.

    Returns
    -------
    dict
        Keys ``meta``, ``audit``, ``outages`` and ``telemetry``.
    """
    audit = asdict(result.audit)
    audit["total_cost"] = result.audit.total_cost

    return {
        "meta": {
            "scenario": config.scenario.value,
            "strategy": config.strategy.value,
            "cloud_cover_avg": round(float(np.mean(config.hourly_cloud_pct)), 1),
            "temp_c_avg": round(float(np.mean(config.hourly_temperature_c)), 1),
        },
        "audit": audit,
        "outages": {
            "import": [{"start": o.start, "end": o.end} for o in config.import_outages],
            "export": [{"start": o.start, "end": o.end} for o in config.export_outages],
        },
        "telemetry": [_telemetry_row(r) for r in result.hourly_data],
    }


def dumps_advisory_snapshot(
    result: SimulationResult, config: SimulationConfiguration
) -> str:
    """Serialise :func:`build_advisory_snapshot` with 2-space indentation."""
    return json.dumps(build_advisory_snapshot(result, config), indent=2)
