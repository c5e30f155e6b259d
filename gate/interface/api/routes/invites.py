"""Invite routes."""

import sys

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, status
from fastapi.responses import JSONResponse
from pydantic import AliasChoices, BaseModel, Field

from gate.application.usecase.invite import (
    RedeemInviteRequest,
    RedeemInviteResponse,
    RedeemInviteUseCase,
    RequestInviteRequest,
    RequestInviteResponse,
    RequestInviteUseCase,
)

router = APIRouter(prefix="/invite", tags=["invites"], route_class=DishkaRoute)


class RequestInviteAPIRequest(BaseModel):
    """API request for an invite code.

    ``userName`` is accepted for the existing front end.
    """

    email: str | None = None
    name: str | None = Field(
        default=None, validation_alias=AliasChoices("name", "userName")
    )


class RedeemInviteAPIRequest(BaseModel):
    """API request for redeeming a code."""

    code: str | None = None


@router.post(
    "/request",
    response_model=RequestInviteResponse,
    response_model_exclude_none=True,
)
async def request_invite(
    request: RequestInviteAPIRequest,
    request_invite_use_case: FromDishka[RequestInviteUseCase],
):
    """Issue an invite code and email it.

    Args:
        request: Email and optional name
        request_invite_use_case: Request invite use case from DI

    Returns:
        Confirmation message, or 400 with the reason the request failed
    """
    email = (request.email or "").strip()
    if not email:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"success": False, "error": "Email address is required"},
        )

    logfire.info("Invite request received", email=email, name=request.name or "")

    try:
        response = await request_invite_use_case.execute(
            RequestInviteRequest(email=email, name=request.name or "")
        )
    except Exception as e:
        logfire.error(
            "Error processing invite request",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "success": False,
                "error": "Internal server error. Please try again later.",
            },
        )

    if not response.success:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=response.model_dump(exclude_none=True),
        )
    return response


async def _redeem(
    request: RedeemInviteAPIRequest, use_case: RedeemInviteUseCase
) -> RedeemInviteResponse | JSONResponse:
    code = (request.code or "").strip()
    if not code:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"valid": False, "error": "Invite code is required"},
        )

    try:
        return await use_case.execute(RedeemInviteRequest(code=code))
    except Exception as e:
        logfire.error(
            "Error redeeming invite code",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"valid": False, "error": "Internal server error"},
        )


@router.post(
    "/redeem",
    response_model=RedeemInviteResponse,
    response_model_exclude_none=True,
)
async def redeem_invite(
    request: RedeemInviteAPIRequest,
    redeem_invite_use_case: FromDishka[RedeemInviteUseCase],
):
    """Redeem an invite code.

    Invalid, used and expired codes answer 200 with ``valid: false`` and
    the reason; only a missing code is a 400.
    """
    return await _redeem(request, redeem_invite_use_case)


@router.post(
    "/validate",
    response_model=RedeemInviteResponse,
    response_model_exclude_none=True,
    include_in_schema=False,
)
async def validate_invite(
    request: RedeemInviteAPIRequest,
    redeem_invite_use_case: FromDishka[RedeemInviteUseCase],
):
    """Older front end path for redemption."""
    return await _redeem(request, redeem_invite_use_case)
