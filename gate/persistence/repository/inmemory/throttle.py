"""In-memory request throttle repository."""

from typing import Optional

from gate.domain.model.throttle import RequestThrottleEntry
from gate.domain.repository.throttle import ThrottleRepository


class InMemoryThrottleRepository(ThrottleRepository):
    """Process-local email -> last request mapping."""

    def __init__(self) -> None:
        self._entries: dict[str, RequestThrottleEntry] = {}

    async def find_by_email(self, email: str) -> Optional[RequestThrottleEntry]:
        return self._entries.get(email)

    async def save(self, entry: RequestThrottleEntry) -> RequestThrottleEntry:
        self._entries[entry.email] = entry
        return entry
