"""Domain layer DI providers."""

from dishka import Scope, provide

from gate.config import EmailSettings, InviteSettings
from gate.domain.repository import InviteRepository, ThrottleRepository
from gate.domain.service import EmailDispatcher, InviteRegistry
from gate.util.clock import Clock
from gate.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    The registry is APP-scoped: it owns the lock that serializes every
    change to the invite and throttle mappings, so there must be exactly
    one per process.
    """

    scope = Scope.APP

    @provide
    def get_invite_registry(
        self,
        invite_repository: InviteRepository,
        throttle_repository: ThrottleRepository,
        dispatcher: EmailDispatcher,
        clock: Clock,
        invite_settings: InviteSettings,
        email_settings: EmailSettings,
    ) -> InviteRegistry:
        """Provide the invite registry."""
        return InviteRegistry(
            invite_repository=invite_repository,
            throttle_repository=throttle_repository,
            dispatcher=dispatcher,
            clock=clock,
            settings=invite_settings,
            from_email=email_settings.from_email,
        )
