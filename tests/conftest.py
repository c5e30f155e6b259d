"""Test configuration and fixtures."""

import pytest

from gate.config import InviteSettings
from gate.domain.service import InviteRegistry
from gate.persistence.repository import (
    InMemoryInviteRepository,
    InMemoryThrottleRepository,
)
from gate.adapter.email import MockEmailDispatchClient
from gate.util.clock import FrozenClock


def make_registry(
    invite_repository=None,
    throttle_repository=None,
    dispatcher=None,
    clock=None,
    settings: InviteSettings | None = None,
    code_generator=None,
) -> InviteRegistry:
    """Build a registry from in-memory parts, overriding any of them.

    For tests that need a collaborator the DI container does not offer
    (slow repositories, failing writes, scripted random bytes).
    """
    return InviteRegistry(
        invite_repository=invite_repository or InMemoryInviteRepository(),
        throttle_repository=throttle_repository or InMemoryThrottleRepository(),
        dispatcher=dispatcher or MockEmailDispatchClient(),
        clock=clock or FrozenClock(),
        settings=settings or InviteSettings(),
        from_email="invites@curry2cakes.com",
        code_generator=code_generator,
    )


@pytest.fixture
def frozen_clock() -> FrozenClock:
    """Fresh frozen clock."""
    return FrozenClock()
