"""Email dispatch interface.

The registry hands a finished message to an ``EmailDispatcher`` and only
looks at whether it reported success.
"""

from pydantic import BaseModel


class EmailMessage(BaseModel):
    """Outgoing notification."""

    to: str
    from_email: str
    subject: str
    html: str


class DispatchResult(BaseModel):
    """Outcome of a dispatch attempt."""

    success: bool
    message_id: str | None = None
    error: str | None = None


class EmailDispatcher:
    """Generic email dispatch interface for all providers."""

    async def send(self, message: EmailMessage) -> DispatchResult:
        """Send a message.

        Provider failures are reported through the result, not raised.

        Args:
            message: Message to deliver

        Returns:
            Dispatch outcome
        """
        raise NotImplementedError
