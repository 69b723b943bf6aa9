"""
What-if helper routes.
"""

from fastapi import APIRouter

from ..schemas import WhatIfWeeksRequest, WhatIfWeeksResponse
from ...simulator import detect_current_week, future_weeks


router = APIRouter(prefix="/what-if", tags=["what-if"])


@router.post("/weeks", response_model=WhatIfWeeksResponse)
async def get_pickable_weeks(request: WhatIfWeeksRequest) -> WhatIfWeeksResponse:
    """List the weeks that still have unplayed games to pick."""
    matchups = [m.to_model() for m in request.matchups]
    return WhatIfWeeksResponse(
        current_week=detect_current_week(matchups),
        future_weeks=future_weeks(matchups)
    )
