"""Clock abstraction.

Invite expiry and request throttling are time based. Reading time through
a ``Clock`` lets tests move time forward instead of sleeping.
"""

from datetime import datetime, timedelta, timezone


class Clock:
    """Source of the current time."""

    def now(self) -> datetime:
        """Return the current time as a timezone-aware UTC datetime."""
        raise NotImplementedError


class SystemClock(Clock):
    """Wall clock."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class FrozenClock(Clock):
    """Clock that only moves when told to.

    Used by tests and by the mock clock provider.
    """

    def __init__(self, start: datetime | None = None) -> None:
        self._now = start or datetime(2025, 1, 1, 12, 0, tzinfo=timezone.utc)

    def now(self) -> datetime:
        return self._now

    def advance(self, delta: timedelta | None = None, **kwargs: float) -> datetime:
        """Move the clock forward.

        Args:
            delta: Amount of time to move forward
            **kwargs: Alternatively, ``timedelta`` keyword arguments
                (``minutes=5``, ``days=31``)

        Returns:
            The new current time
        """
        self._now = self._now + (delta if delta is not None else timedelta(**kwargs))
        return self._now

    def set(self, when: datetime) -> None:
        """Jump to an absolute time."""
        self._now = when
