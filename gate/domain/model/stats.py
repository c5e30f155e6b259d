"""Aggregate invite statistics."""

from gate.domain.model.common import DomainModel


class InviteStats(DomainModel):
    """Counts over all issued codes.

    ``expired`` only counts codes that were never used, so
    ``active = total - used - expired`` is never negative.
    """

    total: int = 0
    used: int = 0
    expired: int = 0
    active: int = 0
