"""Get invite statistics use case."""

from pydantic import BaseModel

from gate.application.usecase.base import BaseUseCase
from gate.domain.service import InviteRegistry


class GetInviteStatsResponse(BaseModel):
    """Invite statistics response."""

    total: int
    used: int
    expired: int
    active: int


class GetInviteStatsUseCase(BaseUseCase):
    """Use case for the admin statistics view."""

    def __init__(self, invite_registry: InviteRegistry) -> None:
        self.invite_registry = invite_registry

    async def execute(self, request: None = None) -> GetInviteStatsResponse:
        stats = await self.invite_registry.get_stats()
        return GetInviteStatsResponse(**stats.model_dump())
