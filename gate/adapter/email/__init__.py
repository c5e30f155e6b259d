"""Email dispatch adapter."""

from .client import (
    EmailDispatchClient,
    MockEmailDispatchClient,
    RealEmailDispatchClient,
)

__all__ = [
    "EmailDispatchClient",
    "MockEmailDispatchClient",
    "RealEmailDispatchClient",
]
