"""Domain model entities for the invite gate."""

from gate.domain.model.invite import InviteRecord
from gate.domain.model.stats import InviteStats
from gate.domain.model.throttle import RequestThrottleEntry

__all__ = [
    "InviteRecord",
    "InviteStats",
    "RequestThrottleEntry",
]
