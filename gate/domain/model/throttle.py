"""Request throttle entity."""

from datetime import datetime, timedelta

from gate.domain.model.common import DomainModel
from gate.domain.value import InviteCode


class RequestThrottleEntry(DomainModel):
    """Most recent successful code request for one email.

    Overwritten on every issuance; the code is kept for reference only.
    """

    email: str
    last_request_at: datetime
    last_issued_code: InviteCode

    def blocks(self, now: datetime, cooldown: timedelta) -> bool:
        """Whether a new request at ``now`` falls inside the cooldown."""
        return now - self.last_request_at < cooldown
