"""Invite use cases."""

from gate.application.usecase.invite.get_invite_stats import (
    GetInviteStatsResponse,
    GetInviteStatsUseCase,
)
from gate.application.usecase.invite.redeem_invite import (
    RedeemInviteRequest,
    RedeemInviteResponse,
    RedeemInviteUseCase,
)
from gate.application.usecase.invite.request_invite import (
    RequestInviteRequest,
    RequestInviteResponse,
    RequestInviteUseCase,
)

__all__ = [
    "GetInviteStatsResponse",
    "GetInviteStatsUseCase",
    "RedeemInviteRequest",
    "RedeemInviteResponse",
    "RedeemInviteUseCase",
    "RequestInviteRequest",
    "RequestInviteResponse",
    "RequestInviteUseCase",
]
