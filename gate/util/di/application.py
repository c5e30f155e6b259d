"""Application layer DI providers."""

from dishka import Scope, provide

from gate.application.usecase.invite import (
    GetInviteStatsUseCase,
    RedeemInviteUseCase,
    RequestInviteUseCase,
)
from gate.config import InviteSettings
from gate.domain.service import InviteRegistry
from gate.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    @provide(scope=Scope.REQUEST)
    def get_request_invite_use_case(
        self, invite_registry: InviteRegistry, invite_settings: InviteSettings
    ) -> RequestInviteUseCase:
        """Provide request invite use case."""
        return RequestInviteUseCase(
            invite_registry=invite_registry, settings=invite_settings
        )

    @provide(scope=Scope.REQUEST)
    def get_redeem_invite_use_case(
        self, invite_registry: InviteRegistry
    ) -> RedeemInviteUseCase:
        """Provide redeem invite use case."""
        return RedeemInviteUseCase(invite_registry=invite_registry)

    @provide(scope=Scope.REQUEST)
    def get_invite_stats_use_case(
        self, invite_registry: InviteRegistry
    ) -> GetInviteStatsUseCase:
        """Provide invite statistics use case."""
        return GetInviteStatsUseCase(invite_registry=invite_registry)
