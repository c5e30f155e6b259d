"""Domain value objects for the invite gate."""

from gate.domain.value.types import EMAIL_PATTERN, EmailAddress, InviteCode

__all__ = [
    "EMAIL_PATTERN",
    "EmailAddress",
    "InviteCode",
]
