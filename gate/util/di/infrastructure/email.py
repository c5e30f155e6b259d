"""Email infrastructure providers."""

from dishka import Scope, provide
import logfire

from gate.adapter.email import MockEmailDispatchClient, RealEmailDispatchClient
from gate.config import Settings
from gate.domain.service import EmailDispatcher
from gate.util.di.base import ProviderBase
from gate.util.error import ConfigurationError


class EmailProvider(ProviderBase):
    """Email component base."""

    __mock_component__ = "email"


class ProdEmailProvider(EmailProvider):
    """Production email provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_email_dispatcher(self, settings: Settings) -> EmailDispatcher:
        """Provide email dispatcher.

        Production talks to the email API; every other environment logs
        messages through the mock client.

        Raises:
            ConfigurationError: If production lacks email API credentials
        """
        if not settings.uses_real_email:
            logfire.info(
                "Using mock email dispatch", environment=settings.environment
            )
            return MockEmailDispatchClient()

        if not settings.email.api_key or not settings.email.api_secret:
            raise ConfigurationError(
                "EMAIL__API_KEY and EMAIL__API_SECRET must be set in production"
            )

        return RealEmailDispatchClient(
            api_url=settings.email.api_url,
            api_key=settings.email.api_key,
            api_secret=settings.email.api_secret,
            timeout_seconds=settings.email.timeout_seconds,
        )
