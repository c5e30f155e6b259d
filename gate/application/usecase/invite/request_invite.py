"""Request invite use case."""

import logfire
from pydantic import BaseModel

from gate.application.usecase.base import BaseUseCase
from gate.config import InviteSettings
from gate.domain.error import DispatchFailedError, InviteError
from gate.domain.service import InviteRegistry


class RequestInviteRequest(BaseModel):
    """Request an invite code for an email."""

    email: str
    name: str = ""


class RequestInviteResponse(BaseModel):
    """Outcome of an invite request."""

    success: bool
    message: str | None = None
    error: str | None = None
    invite_code: str | None = None  # Only when expose_code_in_response is enabled


class RequestInviteUseCase(BaseUseCase):
    """Use case for issuing an invite code and emailing it."""

    def __init__(self, invite_registry: InviteRegistry, settings: InviteSettings) -> None:
        """Initialize use case.

        Args:
            invite_registry: Invite registry domain service
            settings: Invite settings
        """
        self.invite_registry = invite_registry
        self.settings = settings

    async def execute(self, request: RequestInviteRequest) -> RequestInviteResponse:
        """Execute request invite use case.

        Args:
            request: Email and optional name

        Returns:
            Success with a confirmation message, or failure with the reason
        """
        with logfire.span("request_invite.execute", email=request.email):
            try:
                issued = await self.invite_registry.request_code(
                    request.email, request.name
                )
            except DispatchFailedError as e:
                # Code is stored and redeemable, only the notification failed
                logfire.warn(
                    "Invite issued without notification",
                    email=request.email,
                )
                return RequestInviteResponse(success=False, error=e.message)
            except InviteError as e:
                return RequestInviteResponse(success=False, error=e.message)

            return RequestInviteResponse(
                success=True,
                message=issued.message,
                invite_code=(
                    issued.code.root if self.settings.expose_code_in_response else None
                ),
            )
