"""In-memory repository implementations."""

from .invite import InMemoryInviteRepository
from .throttle import InMemoryThrottleRepository

__all__ = [
    "InMemoryInviteRepository",
    "InMemoryThrottleRepository",
]
