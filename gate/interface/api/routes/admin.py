"""Admin routes.

These routes have no access control of their own; put them behind an
authorizing proxy before exposing them publicly.
"""

import sys

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from gate.application.usecase.invite import (
    GetInviteStatsResponse,
    GetInviteStatsUseCase,
)

router = APIRouter(prefix="/admin", tags=["admin"], route_class=DishkaRoute)


@router.get("/stats", response_model=GetInviteStatsResponse)
async def get_stats(stats_use_case: FromDishka[GetInviteStatsUseCase]):
    """Get invite statistics.

    Returns:
        Total, used, expired and active code counts
    """
    try:
        return await stats_use_case.execute()
    except Exception as e:
        logfire.error(
            "Error getting stats",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Internal server error"},
        )
