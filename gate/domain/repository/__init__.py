"""Repository interfaces for the invite gate domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from gate.domain.repository.invite import InviteRepository
from gate.domain.repository.throttle import ThrottleRepository

__all__ = [
    "InviteRepository",
    "ThrottleRepository",
]
