"""Domain value objects for the invite gate.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules.
"""

import re

from pydantic import field_validator

from gate.domain.value.common import RootValueObject

# local-part@domain.tld, no whitespace, at least one dot after the @
EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


class InviteCode(RootValueObject[str]):
    """Opaque single-use invite code.

    Matching is exact and case-sensitive, as issued.
    """

    @field_validator("root")
    @classmethod
    def validate_code_format(cls, v: str) -> str:
        """Validate code is not empty."""
        if len(v) < 1 or len(v) > 64:
            raise ValueError("Invite code must be 1-64 characters")
        return v

    def masked(self) -> str:
        """Short form safe to put in logs."""
        return self.root[:4] + "..."


class EmailAddress(RootValueObject[str]):
    """Email address that passed the basic shape check.

    Only the shape is checked; deliverability is the dispatcher's concern.
    """

    @field_validator("root")
    @classmethod
    def validate_email_shape(cls, v: str) -> str:
        """Strip surrounding whitespace and check the shape."""
        v = v.strip()
        if not EMAIL_PATTERN.match(v):
            raise ValueError("Invalid email address format")
        return v

    @classmethod
    def is_valid(cls, value: str) -> bool:
        """Check the shape without raising."""
        return bool(EMAIL_PATTERN.match(value.strip()))
