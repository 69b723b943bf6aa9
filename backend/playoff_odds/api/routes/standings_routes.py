"""
Standings API routes.
"""

from fastapi import APIRouter, HTTPException, status

from ..schemas import StandingsRequest, StandingsResponse, StandingsTeam, ErrorResponse
from ...simulator import compute_standings, what_if_standings, InvalidConfigurationError


router = APIRouter(tags=["standings"])


@router.post(
    "/standings",
    response_model=StandingsResponse,
    responses={400: {"model": ErrorResponse}}
)
async def get_standings(request: StandingsRequest) -> StandingsResponse:
    """
    Rank the league.

    When picks are supplied, the picked winners are credited first and the
    table reflects that what-if outcome. No other games are simulated.
    """
    teams, matchups, settings = request.to_models()

    try:
        if request.picks:
            table = what_if_standings(teams, matchups, settings, request.picks)
        else:
            table = compute_standings(teams, settings)
    except InvalidConfigurationError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )

    return StandingsResponse(
        sorted=[StandingsTeam(**team.to_dict()) for team in table.sorted],
        seeds=table.seeds,
        settings=request.settings
    )
