"""Invite registry domain service."""

import asyncio
from datetime import timedelta

import logfire

from gate.config import InviteSettings
from gate.domain.error import (
    CodeGenerationError,
    DispatchFailedError,
    InvalidEmailError,
    InviteAlreadyUsedError,
    InviteExpiredError,
    InviteNotFoundError,
    RateLimitedError,
)
from gate.domain.model import InviteRecord, InviteStats, RequestThrottleEntry
from gate.domain.model.common import DomainModel
from gate.domain.repository import InviteRepository, ThrottleRepository
from gate.domain.value import EmailAddress, InviteCode
from gate.util.clock import Clock

from .base import Service
from .code_generator import InviteCodeGenerator
from .email_dispatcher import EmailDispatcher
from .invite_email import build_invite_email

ISSUED_MESSAGE = "Invite code sent successfully! Check your email in a few minutes."


class IssuedInvite(DomainModel):
    """Result of a successful code request."""

    code: InviteCode
    email: str
    message: str = ISSUED_MESSAGE


class RedeemedInvite(DomainModel):
    """Result of a successful redemption."""

    code: InviteCode
    email: str
    name: str


class InviteRegistry(Service):
    """Owns issued codes and per-email request history.

    A single lock serializes every read-modify-write on the two
    repositories. The notification email is sent after the lock is
    released, so a slow email API never blocks other requests.
    """

    def __init__(
        self,
        invite_repository: InviteRepository,
        throttle_repository: ThrottleRepository,
        dispatcher: EmailDispatcher,
        clock: Clock,
        settings: InviteSettings,
        from_email: str,
        code_generator: InviteCodeGenerator | None = None,
    ) -> None:
        """Initialize invite registry.

        Args:
            invite_repository: Code -> invite record storage
            throttle_repository: Email -> last request storage
            dispatcher: Email dispatcher for notifications
            clock: Time source
            settings: Invite settings (expiry, cooldown, code shape)
            from_email: Sender address for notifications
            code_generator: Candidate code source, built from settings if omitted
        """
        self.invite_repository = invite_repository
        self.throttle_repository = throttle_repository
        self.dispatcher = dispatcher
        self.clock = clock
        self.settings = settings
        self.from_email = from_email
        self.code_generator = code_generator or InviteCodeGenerator(settings)
        self.ttl = timedelta(days=settings.ttl_days)
        self.cooldown = timedelta(minutes=settings.cooldown_minutes)
        self._lock = asyncio.Lock()

    async def request_code(self, email: str, name: str = "") -> IssuedInvite:
        """Issue a new code for an email and send it.

        Args:
            email: Recipient address
            name: Optional display name used in the greeting

        Returns:
            The issued invite

        Raises:
            InvalidEmailError: If the email is malformed
            RateLimitedError: If the email requested a code within the cooldown
            DispatchFailedError: If the email could not be sent (the code stays valid)
            CodeGenerationError: If no unused code could be generated
        """
        with logfire.span("invite_registry.request_code", email=email):
            if not EmailAddress.is_valid(email):
                logfire.warn("Invalid email for invite request", email=email)
                raise InvalidEmailError()
            address = EmailAddress(email).root
            name = name or ""

            async with self._lock:
                now = self.clock.now()
                throttle = await self.throttle_repository.find_by_email(address)
                if throttle and throttle.blocks(now, self.cooldown):
                    logfire.warn(
                        "Invite request rate limited",
                        email=address,
                        last_request_at=throttle.last_request_at.isoformat(),
                    )
                    raise RateLimitedError(self.settings.cooldown_minutes)

                code = await self._generate_unique_code()
                invite = InviteRecord(
                    code=code,
                    recipient_email=address,
                    recipient_name=name,
                    created_at=now,
                    expires_at=now + self.ttl,
                )
                entry = RequestThrottleEntry(
                    email=address, last_request_at=now, last_issued_code=code
                )
                await self._commit(invite, entry)

            logfire.info(
                "Invite issued",
                email=address,
                code=code.masked(),
                expires_at=invite.expires_at.isoformat(),
            )

            message = build_invite_email(
                to=address,
                code=code,
                from_email=self.from_email,
                name=name,
                ttl_days=self.settings.ttl_days,
            )
            result = await self.dispatcher.send(message)
            if not result.success:
                logfire.error(
                    "Invite email dispatch failed",
                    email=address,
                    code=code.masked(),
                    error=result.error,
                )
                raise DispatchFailedError(code.root)

            logfire.info(
                "Invite email dispatched",
                email=address,
                message_id=result.message_id,
            )
            return IssuedInvite(code=code, email=address)

    async def redeem_code(self, code: str) -> RedeemedInvite:
        """Consume a code.

        Checks run in order: unknown, already used, expired. A code that was
        used before it expired keeps reporting "already used".

        Args:
            code: Code exactly as issued

        Returns:
            Recipient details of the redeemed invite

        Raises:
            InviteNotFoundError: If the code was never issued
            InviteAlreadyUsedError: If the code was redeemed before
            InviteExpiredError: If the code expired unused
        """
        masked = code[:4] + "..."
        with logfire.span("invite_registry.redeem_code", code=masked):
            try:
                key = InviteCode(code)
            except ValueError:
                # Empty or oversized input can never match an issued code
                raise InviteNotFoundError()

            async with self._lock:
                invite = await self.invite_repository.find_by_code(key)
                if invite is None:
                    logfire.info("Invite code not found", code=masked)
                    raise InviteNotFoundError()

                if invite.used:
                    logfire.info(
                        "Invite code already used",
                        code=masked,
                        used_at=invite.used_at.isoformat() if invite.used_at else None,
                    )
                    raise InviteAlreadyUsedError()

                now = self.clock.now()
                if invite.is_expired(now):
                    logfire.info(
                        "Invite code expired",
                        code=masked,
                        expires_at=invite.expires_at.isoformat(),
                    )
                    raise InviteExpiredError()

                redeemed = await self.invite_repository.save(invite.mark_used(now))

            logfire.info(
                "Invite redeemed", code=masked, email=redeemed.recipient_email
            )
            return RedeemedInvite(
                code=redeemed.code,
                email=redeemed.recipient_email,
                name=redeemed.recipient_name,
            )

    async def get_stats(self) -> InviteStats:
        """Count issued, used, expired and active codes."""
        with logfire.span("invite_registry.get_stats"):
            now = self.clock.now()
            invites = await self.invite_repository.list_all()
            total = len(invites)
            used = sum(1 for invite in invites if invite.used)
            expired = sum(
                1 for invite in invites if not invite.used and invite.is_expired(now)
            )
            stats = InviteStats(
                total=total,
                used=used,
                expired=expired,
                active=total - used - expired,
            )
            logfire.info("Invite stats computed", **stats.model_dump())
            return stats

    async def _generate_unique_code(self) -> InviteCode:
        """Generate a code that has not been issued yet.

        Must be called with the lock held.
        """
        attempts = self.settings.max_generation_attempts
        for attempt in range(1, attempts + 1):
            code = self.code_generator.generate(self.clock.now())
            if not await self.invite_repository.exists(code):
                return code
            logfire.warn(
                "Invite code collision, regenerating",
                code=code.masked(),
                attempt=attempt,
            )
        raise CodeGenerationError(attempts)

    async def _commit(self, invite: InviteRecord, entry: RequestThrottleEntry) -> None:
        """Store the invite and the throttle entry together.

        Must be called with the lock held. If the throttle write fails the
        invite is removed again.
        """
        await self.invite_repository.save(invite)
        try:
            await self.throttle_repository.save(entry)
        except Exception:
            await self.invite_repository.delete(invite.code)
            raise
