"""
Playoff odds API routes.
"""

import asyncio
import logging
import random
import time

from fastapi import APIRouter, HTTPException, status

from ..schemas import PlayoffOddsRequest, PlayoffOddsResponse, TeamOdds, ErrorResponse
from ...core.config import (
    DEFAULT_TRIALS,
    SIMULATION_WORKERS,
    SIMULATION_TIMEOUT_SECONDS,
    WIN_PROB_STEEPNESS
)
from ...simulator import build_locked_results, run_simulation, InvalidConfigurationError


logger = logging.getLogger(__name__)

router = APIRouter(tags=["simulations"])


@router.post(
    "/playoff-odds",
    response_model=PlayoffOddsResponse,
    responses={400: {"model": ErrorResponse}}
)
async def get_playoff_odds(request: PlayoffOddsRequest) -> PlayoffOddsResponse:
    """
    Simulate the rest of the season and report playoff odds per team.

    Locked results pin unplayed matchups to a chosen winner; picks that do
    not name a participant are ignored. If the simulation runs past the time
    budget, odds are computed from the trials finished so far.
    """
    teams, matchups, settings = request.to_models()
    trials = request.trials or DEFAULT_TRIALS
    locked = build_locked_results(matchups, request.locked_results)
    rng = random.Random(request.seed)

    deadline = time.time() + SIMULATION_TIMEOUT_SECONDS

    try:
        report = await asyncio.to_thread(
            run_simulation,
            teams, matchups, settings, trials, locked,
            rng=rng,
            steepness=WIN_PROB_STEEPNESS,
            workers=SIMULATION_WORKERS,
            deadline=deadline
        )
    except InvalidConfigurationError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )

    if report.cancelled:
        logger.warning(
            "Playoff odds hit the %.0fs budget after %d of %d trials",
            SIMULATION_TIMEOUT_SECONDS, report.trials_completed, report.trials_requested
        )

    return PlayoffOddsResponse(
        odds=[TeamOdds(**result.to_dict()) for result in report.odds],
        settings=request.settings,
        locked_results=locked,
        trials_requested=report.trials_requested,
        trials_completed=report.trials_completed
    )
