"""Redeem invite use case."""

import logfire
from pydantic import BaseModel

from gate.application.usecase.base import BaseUseCase
from gate.domain.error import InviteError
from gate.domain.service import InviteRegistry


class RedeemInviteRequest(BaseModel):
    """Redeem invite request."""

    code: str


class RedeemInviteResponse(BaseModel):
    """Redeem invite response."""

    valid: bool
    email: str | None = None
    name: str | None = None
    error: str | None = None


class RedeemInviteUseCase(BaseUseCase):
    """Use case for consuming an invite code.

    The front end calls this after sign-in to unlock the menu.
    """

    def __init__(self, invite_registry: InviteRegistry) -> None:
        self.invite_registry = invite_registry

    async def execute(self, request: RedeemInviteRequest) -> RedeemInviteResponse:
        """Redeem a code.

        Args:
            request: Code to redeem

        Returns:
            Recipient details when valid, otherwise the reason it is not
        """
        with logfire.span("redeem_invite.execute", code=request.code[:4] + "..."):
            try:
                redeemed = await self.invite_registry.redeem_code(request.code)
            except InviteError as e:
                return RedeemInviteResponse(valid=False, error=e.message)

            return RedeemInviteResponse(
                valid=True,
                email=redeemed.email,
                name=redeemed.name,
            )
