"""Application configuration."""

from typing import Literal
from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict


class InviteSettings(BaseModel):
    """Invite code lifecycle configuration."""

    # Code shape: prefix + base36 timestamp tail + uppercase hex random, truncated
    code_prefix: str = "C2C"
    code_length: int = 12
    timestamp_chars: int = 4
    random_bytes: int = 8

    # Regenerate on collision with an existing code at most this many times
    max_generation_attempts: int = 10

    # Codes expire this many days after issuance
    ttl_days: int = 30

    # Minimum interval between two requests from the same email
    cooldown_minutes: int = 5

    # Echo the raw code in the request response (demo only, never in production)
    expose_code_in_response: bool = False


class EmailSettings(BaseModel):
    """Email dispatch configuration."""

    api_url: str = "https://api.godaddy.com/v1/email/send"
    api_key: str | None = None
    api_secret: str | None = None
    domain: str = "curry2cakes.com"
    from_email: str = "invites@curry2cakes.com"

    # Upper bound on a single dispatch call
    timeout_seconds: float = 10.0


class ObservabilitySettings(BaseModel):
    """Observability configuration for Logfire."""

    # Logfire API token (optional - if not set, logs only go to console)
    # Can be set via OBSERVABILITY__LOGFIRE_TOKEN env var
    logfire_token: str | None = None

    # Whether to send telemetry to Logfire cloud
    # If None, will auto-determine: sends if token is present, otherwise console-only
    send_to_logfire: bool | None = None


class Settings(BaseSettings):
    """Application settings.

    Set environment variables to override, nested values use ``__``:

    Development (default):
        ENVIRONMENT=development
        -> Email dispatch is mocked and only logged
        -> CORS allows http://localhost:5173

    Production:
        ENVIRONMENT=production
        FRONTEND_URL=https://curry2cakes.com
        EMAIL__API_KEY=...
        EMAIL__API_SECRET=...
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",  # Allows INVITES__TTL_DAYS syntax
    )

    environment: Literal["test", "development", "staging", "production"] = "development"
    debug: bool = False

    host: str = "0.0.0.0"
    port: int = 3001
    frontend_url: str = "http://localhost:5173"

    # Nested settings
    invites: InviteSettings = InviteSettings()
    email: EmailSettings = EmailSettings()
    observability: ObservabilitySettings = ObservabilitySettings()

    @property
    def uses_real_email(self) -> bool:
        """Whether notifications go through the real email API."""
        return self.environment == "production"
