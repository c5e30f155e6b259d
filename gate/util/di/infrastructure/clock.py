"""Clock providers."""

from dishka import Scope, provide

from gate.util.clock import Clock, SystemClock
from gate.util.di.base import ProviderBase


class ClockProvider(ProviderBase):
    """Clock component base."""

    __mock_component__ = "clock"


class ProdClockProvider(ClockProvider):
    """Wall clock provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_clock(self) -> Clock:
        """Provide the system clock."""
        return SystemClock()
