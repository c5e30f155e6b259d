"""In-memory invite repository."""

from typing import Optional

from gate.domain.model.invite import InviteRecord
from gate.domain.repository.invite import InviteRepository
from gate.domain.value import InviteCode


class InMemoryInviteRepository(InviteRepository):
    """Process-local code -> invite mapping.

    Contents are lost on restart.
    """

    def __init__(self) -> None:
        self._invites: dict[str, InviteRecord] = {}

    async def find_by_code(self, code: InviteCode) -> Optional[InviteRecord]:
        """Find an invite by its code."""
        return self._invites.get(code.root)

    async def exists(self, code: InviteCode) -> bool:
        """Check whether a code is already stored."""
        return code.root in self._invites

    async def save(self, invite: InviteRecord) -> InviteRecord:
        """Save an invite (create or update)."""
        self._invites[invite.code.root] = invite
        return invite

    async def delete(self, code: InviteCode) -> None:
        """Remove an invite if present."""
        self._invites.pop(code.root, None)

    async def list_all(self) -> list[InviteRecord]:
        """Return every stored invite, oldest first."""
        return sorted(self._invites.values(), key=lambda inv: inv.created_at)
