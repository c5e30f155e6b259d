"""Invite code generation."""

import secrets
import string
from collections.abc import Callable
from datetime import datetime

from gate.config import InviteSettings
from gate.domain.value import InviteCode

_BASE36_DIGITS = string.digits + string.ascii_lowercase


def to_base36(number: int) -> str:
    """Encode a non-negative integer in lowercase base 36."""
    if number < 0:
        raise ValueError("Only non-negative numbers can be encoded")
    if number == 0:
        return "0"
    digits = []
    while number:
        number, remainder = divmod(number, 36)
        digits.append(_BASE36_DIGITS[remainder])
    return "".join(reversed(digits))


class InviteCodeGenerator:
    """Builds candidate invite codes.

    A code is the prefix, the fast-moving tail of the base-36 millisecond
    timestamp and the random bytes as uppercase hex, cut to the configured
    length. Candidates are not guaranteed unique; the registry checks them
    against issued codes.
    """

    def __init__(
        self,
        settings: InviteSettings,
        random_bytes: Callable[[int], bytes] = secrets.token_bytes,
    ) -> None:
        """Initialize generator.

        Args:
            settings: Invite settings (prefix, lengths)
            random_bytes: Source of random bytes, ``secrets.token_bytes`` by default
        """
        self.prefix = settings.code_prefix
        self.length = settings.code_length
        self.timestamp_chars = settings.timestamp_chars
        self.random_byte_count = settings.random_bytes
        self.random_bytes = random_bytes

    def generate(self, now: datetime) -> InviteCode:
        """Generate a candidate code for the given time."""
        timestamp = to_base36(int(now.timestamp() * 1000))[-self.timestamp_chars :]
        random_part = self.random_bytes(self.random_byte_count).hex().upper()
        return InviteCode(f"{self.prefix}{timestamp}{random_part}"[: self.length])
