"""Request throttle repository interface."""

from abc import ABC, abstractmethod

from gate.domain.model.throttle import RequestThrottleEntry


class ThrottleRepository(ABC):
    """Repository for RequestThrottleEntry entities, keyed by email."""

    @abstractmethod
    async def find_by_email(self, email: str) -> RequestThrottleEntry | None:
        """Find the throttle entry for an email, if any."""
        pass

    @abstractmethod
    async def save(self, entry: RequestThrottleEntry) -> RequestThrottleEntry:
        """Create or overwrite the entry for ``entry.email``."""
        pass
