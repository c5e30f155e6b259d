"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from gate.config import EmailSettings, InviteSettings, Settings
from gate.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_invite_settings(self, settings: Settings) -> InviteSettings:
        """Provide invite settings."""
        return settings.invites

    @provide(scope=Scope.APP)
    def provide_email_settings(self, settings: Settings) -> EmailSettings:
        """Provide email settings."""
        return settings.email
