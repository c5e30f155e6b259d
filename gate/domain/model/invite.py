"""Invite record entity.

An invite record is created when a code is issued and changes exactly
once, when the code is redeemed.
"""

from datetime import datetime
from typing import Optional

from gate.domain.model.common import DomainModel
from gate.domain.value import InviteCode


class InviteRecord(DomainModel):
    """Invite record keyed by its code.

    Business rules:
    - ``expires_at`` is fixed at issuance and never extended
    - ``used`` goes from False to True once and never back
    - ``used_at`` is set only together with ``used``
    """

    code: InviteCode
    recipient_email: str
    recipient_name: str = ""
    created_at: datetime
    expires_at: datetime
    used: bool = False
    used_at: Optional[datetime] = None

    def is_expired(self, now: datetime) -> bool:
        """Whether the code is past its expiry at ``now``."""
        return now > self.expires_at

    def mark_used(self, now: datetime) -> "InviteRecord":
        """Return the redeemed copy of this record."""
        return self.model_copy(update={"used": True, "used_at": now})
