"""Mock providers for testing."""

from .clock import MockClockProvider
from .email import MockEmailProvider
from .container import build_test_container

__all__ = [
    "MockClockProvider",
    "MockEmailProvider",
    "build_test_container",
]
