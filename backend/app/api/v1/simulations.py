import logging
from dataclasses import asdict

from fastapi import APIRouter, Request

from app.core.rate_limit import simulation_limiter
from app.schemas.simulation import (
    DefaultsResponse,
    SimulationRequest,
    SimulationRunResponse,
    TariffTablesResponse,
)
from engine.grid.tariff import DEFAULT_MARKET_PRICES, TimeOfDayTariff
from engine.reporting.advisory import build_advisory_snapshot
from engine.simulation.config import Scenario, Strategy
from engine.simulation.runner import run_simulation

logger = logging.getLogger(__name__)

router = APIRouter()


def _run(body: SimulationRequest):
    config = body.to_config()
    logger.info(
        "Running simulation",
        extra={"strategy": config.strategy.value, "scenario": config.scenario.value},
    )
    result = run_simulation(config, body.load_overrides, body.tariff_overrides)
    return config, result


@router.post(
    "/run",
    response_model=SimulationRunResponse,
    summary="Run dispatch simulation",
    description=(
        "Dispatch the 24-hour day under the requested strategy and a forced "
        "load-following baseline, returning the hourly schedule and the audit."
    ),
)
def run_dispatch(body: SimulationRequest, request: Request):
    simulation_limiter.check(request)
    _, result = _run(body)
    return SimulationRunResponse.model_validate(result)


@router.post(
    "/snapshot",
    summary="Advisory snapshot",
    description="Run the simulation and return the compact advisory JSON document.",
)
def advisory_snapshot(body: SimulationRequest, request: Request) -> dict:
    simulation_limiter.check(request)
    config, result = _run(body)
    return build_advisory_snapshot(result, config)


@router.get(
    "/defaults",
    response_model=DefaultsResponse,
    summary="Default inputs",
    description="Default configuration values and the built-in tariff tables.",
)
def get_defaults():
    return DefaultsResponse(
        configuration=SimulationRequest(),
        tariffs=TariffTablesResponse(
            time_of_day=asdict(TimeOfDayTariff()),
            market_prices=list(DEFAULT_MARKET_PRICES),
        ),
        strategies=list(Strategy),
        scenarios=list(Scenario),
    )
