"""Email dispatch clients.

The real client posts messages to a GoDaddy-style transactional email
API. The mock client only logs and records, and is used outside
production and in tests.
"""

from datetime import datetime, timezone

import httpx
import logfire

from gate.adapter.error import ProviderError
from gate.domain.service.email_dispatcher import (
    DispatchResult,
    EmailDispatcher,
    EmailMessage,
)


class EmailDispatchClient(EmailDispatcher):
    """Base class for email dispatch clients.

    Provides type distinction for dependency injection.
    """

    pass


class RealEmailDispatchClient(EmailDispatchClient):
    """HTTP email API client."""

    def __init__(
        self,
        api_url: str,
        api_key: str,
        api_secret: str,
        timeout_seconds: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize email API client.

        Args:
            api_url: Send endpoint of the email API
            api_key: API key
            api_secret: API secret
            timeout_seconds: Timeout for a single send
            transport: Optional httpx transport (used by tests)
        """
        self.api_url = api_url
        self.api_key = api_key
        self.api_secret = api_secret
        self.timeout_seconds = timeout_seconds
        self.transport = transport

    async def send(self, message: EmailMessage) -> DispatchResult:
        """Send a message through the email API.

        Network errors, timeouts and non-2xx responses are returned as a
        failed result.

        Args:
            message: Message to deliver

        Returns:
            Dispatch outcome with the provider message id when available
        """
        with logfire.span("email_client.send", to=message.to):
            try:
                payload = await self._post(message)
            except (httpx.HTTPError, ProviderError) as e:
                logfire.error(
                    "Email API request failed",
                    to=message.to,
                    error=str(e),
                    error_type=type(e).__name__,
                )
                return DispatchResult(success=False, error=str(e))

            message_id = payload.get("messageId") or payload.get("id")
            logfire.info("Email sent", to=message.to, message_id=message_id)
            return DispatchResult(success=True, message_id=message_id)

    async def _post(self, message: EmailMessage) -> dict:
        """POST the message and return the decoded JSON body.

        Raises:
            ProviderError: If the API answers with a non-2xx status
            httpx.HTTPError: On transport failures and timeouts
        """
        headers = {
            "Authorization": f"sso-key {self.api_key}:{self.api_secret}",
            "Content-Type": "application/json",
            "Accept": "application/json",
        }
        body = {
            "to": message.to,
            "from": message.from_email,
            "subject": message.subject,
            "html": message.html,
        }

        async with httpx.AsyncClient(
            timeout=self.timeout_seconds, transport=self.transport
        ) as client:
            response = await client.post(self.api_url, json=body, headers=headers)

        if response.status_code >= 400:
            raise ProviderError("email-api", response.status_code, response.text)

        if not response.content:
            return {}
        try:
            data = response.json()
        except ValueError:
            return {}
        return data if isinstance(data, dict) else {}


class MockEmailDispatchClient(EmailDispatchClient):
    """Mock email client for development and testing.

    Records every message instead of sending it. Set ``should_fail`` to
    simulate a provider outage.
    """

    def __init__(self, should_fail: bool = False) -> None:
        self.should_fail = should_fail
        self.sent: list[EmailMessage] = []

    async def send(self, message: EmailMessage) -> DispatchResult:
        """Record the message and report success unless failing on purpose."""
        if self.should_fail:
            logfire.warn("Mock email dispatch failing", to=message.to)
            return DispatchResult(success=False, error="Mock dispatch failure")

        self.sent.append(message)
        message_id = f"mock-{int(datetime.now(timezone.utc).timestamp() * 1000)}"
        logfire.info(
            "Email sent (mock)",
            to=message.to,
            subject=message.subject,
            message_id=message_id,
        )
        return DispatchResult(success=True, message_id=message_id)

    def last_message_to(self, email: str) -> EmailMessage | None:
        """Most recent message sent to ``email``, if any."""
        for message in reversed(self.sent):
            if message.to == email:
                return message
        return None
