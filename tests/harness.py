"""Test harness for unit tests.

Everything runs in memory; no external services are needed.
"""

import pytest_asyncio

from gate.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    Creates a pytest fixture that builds a fresh test container (empty
    registry, mock email, frozen clock unless unmocked) and yields a
    request-scoped container for service access.

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        unit_env = create_env_fixture()

        @pytest.mark.asyncio
        async def test_redeem(unit_env):
            registry = await unit_env.get(InviteRegistry)
            clock = await unit_env.get(Clock)
            ...
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock or set())

        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment
