"""Persistence infrastructure providers."""

from dishka import Scope, provide

from gate.domain.repository import InviteRepository, ThrottleRepository
from gate.persistence.repository import (
    InMemoryInviteRepository,
    InMemoryThrottleRepository,
)
from gate.util.di.base import ProviderBase


class ProdPersistenceProvider(ProviderBase):
    """In-memory persistence - concrete, no mocks needed.

    APP scope keeps the mappings alive for the lifetime of the container;
    each test container starts empty.
    """

    scope = Scope.APP

    @provide
    def get_invite_repository(self) -> InviteRepository:
        """Provide Invite repository."""
        return InMemoryInviteRepository()

    @provide
    def get_throttle_repository(self) -> ThrottleRepository:
        """Provide request throttle repository."""
        return InMemoryThrottleRepository()
