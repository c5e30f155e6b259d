"""Repository implementations."""

from gate.persistence.repository.inmemory import (
    InMemoryInviteRepository,
    InMemoryThrottleRepository,
)

__all__ = [
    "InMemoryInviteRepository",
    "InMemoryThrottleRepository",
]
