"""Unit tests for in-memory repositories."""

from datetime import datetime, timedelta, timezone

import pytest

from gate.domain.model import InviteRecord, RequestThrottleEntry
from gate.domain.value import InviteCode
from gate.persistence.repository import (
    InMemoryInviteRepository,
    InMemoryThrottleRepository,
)

NOW = datetime(2025, 1, 1, tzinfo=timezone.utc)


def make_invite(code: str, created_at: datetime = NOW) -> InviteRecord:
    return InviteRecord(
        code=InviteCode(code),
        recipient_email="alice@example.com",
        created_at=created_at,
        expires_at=created_at + timedelta(days=30),
    )


class TestInMemoryInviteRepository:
    """Tests for InMemoryInviteRepository."""

    @pytest.mark.asyncio
    async def test_save_and_find(self):
        repo = InMemoryInviteRepository()
        invite = make_invite("C2CAAAA00000")

        await repo.save(invite)

        assert await repo.find_by_code(InviteCode("C2CAAAA00000")) == invite
        assert await repo.exists(InviteCode("C2CAAAA00000"))
        assert await repo.find_by_code(InviteCode("C2CBBBB00000")) is None

    @pytest.mark.asyncio
    async def test_save_overwrites_same_code(self):
        repo = InMemoryInviteRepository()
        invite = make_invite("C2CAAAA00000")
        await repo.save(invite)

        await repo.save(invite.mark_used(NOW))

        stored = await repo.find_by_code(invite.code)
        assert stored.used is True
        assert stored.used_at == NOW
        assert len(await repo.list_all()) == 1

    @pytest.mark.asyncio
    async def test_delete(self):
        repo = InMemoryInviteRepository()
        invite = make_invite("C2CAAAA00000")
        await repo.save(invite)

        await repo.delete(invite.code)
        await repo.delete(invite.code)

        assert not await repo.exists(invite.code)

    @pytest.mark.asyncio
    async def test_list_all_oldest_first(self):
        repo = InMemoryInviteRepository()
        newer = make_invite("C2CNEW000000", NOW + timedelta(hours=1))
        older = make_invite("C2COLD000000", NOW)
        await repo.save(newer)
        await repo.save(older)

        assert await repo.list_all() == [older, newer]


class TestInMemoryThrottleRepository:
    """Tests for InMemoryThrottleRepository."""

    @pytest.mark.asyncio
    async def test_upsert_by_email(self):
        repo = InMemoryThrottleRepository()
        first = RequestThrottleEntry(
            email="alice@example.com",
            last_request_at=NOW,
            last_issued_code=InviteCode("C2CAAAA00000"),
        )
        second = first.model_copy(
            update={
                "last_request_at": NOW + timedelta(minutes=6),
                "last_issued_code": InviteCode("C2CBBBB00000"),
            }
        )

        await repo.save(first)
        await repo.save(second)

        assert await repo.find_by_email("alice@example.com") == second
        assert await repo.find_by_email("bob@example.com") is None

    def test_entry_blocks_within_cooldown(self):
        entry = RequestThrottleEntry(
            email="alice@example.com",
            last_request_at=NOW,
            last_issued_code=InviteCode("C2CAAAA00000"),
        )
        cooldown = timedelta(minutes=5)

        assert entry.blocks(NOW + timedelta(minutes=4), cooldown)
        assert not entry.blocks(NOW + timedelta(minutes=5), cooldown)
