"""Domain layer errors.

Every ``InviteError`` carries the message shown to the visitor. None of
them are fatal; callers turn them into failed responses.
"""


class DomainError(Exception):
    """Base domain error."""

    pass


class InviteError(DomainError):
    """Base class for expected invite lifecycle failures."""

    default_message = "Invite operation failed"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidEmailError(InviteError):
    """Raised when the email does not look like local-part@domain.tld."""

    default_message = "Invalid email address format"


class RateLimitedError(InviteError):
    """Raised when the same email asks for a new code during the cooldown."""

    def __init__(self, cooldown_minutes: int) -> None:
        self.cooldown_minutes = cooldown_minutes
        super().__init__(
            f"Please wait {cooldown_minutes} minutes before requesting another invite code"
        )


class DispatchFailedError(InviteError):
    """Raised when the notification email could not be sent.

    The issued code stays valid and can still be redeemed.
    """

    default_message = "Failed to send email. Please try again later."

    def __init__(self, code: str, message: str | None = None) -> None:
        self.code = code
        super().__init__(message)


class InviteNotFoundError(InviteError):
    """Raised when redeeming a code that was never issued."""

    default_message = "Invalid invite code"


class InviteAlreadyUsedError(InviteError):
    """Raised when redeeming a code a second time."""

    default_message = "This invite code has already been used"


class InviteExpiredError(InviteError):
    """Raised when redeeming an unused code past its expiry."""

    default_message = "This invite code has expired"


class CodeGenerationError(DomainError):
    """Raised when no unused code could be generated."""

    def __init__(self, attempts: int) -> None:
        self.attempts = attempts
        super().__init__(f"Could not generate a unique invite code in {attempts} attempts")
