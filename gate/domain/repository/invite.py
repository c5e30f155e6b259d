"""Invite repository interface."""

from abc import ABC, abstractmethod

from gate.domain.model.invite import InviteRecord
from gate.domain.value import InviteCode


class InviteRepository(ABC):
    """Repository for InviteRecord entities, keyed by code.

    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_code(self, code: InviteCode) -> InviteRecord | None:
        """Find an invite by its code.

        Args:
            code: The exact code as issued

        Returns:
            The invite if found, None otherwise
        """
        pass

    @abstractmethod
    async def exists(self, code: InviteCode) -> bool:
        """Check whether a code has already been issued.

        Used by code generation to reject collisions.
        """
        pass

    @abstractmethod
    async def save(self, invite: InviteRecord) -> InviteRecord:
        """Save an invite (create or update).

        Args:
            invite: The invite to save

        Returns:
            The saved invite
        """
        pass

    @abstractmethod
    async def delete(self, code: InviteCode) -> None:
        """Remove an invite. Used to undo a partially applied issuance."""
        pass

    @abstractmethod
    async def list_all(self) -> list[InviteRecord]:
        """Return every stored invite."""
        pass
