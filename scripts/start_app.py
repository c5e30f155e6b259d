#!/usr/bin/env python3
"""Run the invite gate API under uvicorn."""

import sys

import logfire
import uvicorn

from gate.config import Settings
from gate.util.logging import setup_logging
from gate.util.observability import configure_logfire


def check_email_credentials(settings: Settings) -> bool:
    """Production must be able to send invites before it accepts requests."""
    if not settings.uses_real_email:
        return True
    return bool(settings.email.api_key and settings.email.api_secret)


def main() -> int:
    settings = Settings()

    setup_logging(settings)
    configure_logfire(settings)

    if not check_email_credentials(settings):
        logfire.error(
            "Refusing to start without email API credentials",
            environment=settings.environment,
        )
        return 1

    logfire.info(
        "Starting invite gate API",
        host=settings.host,
        port=settings.port,
        frontend_url=settings.frontend_url,
        real_email=settings.uses_real_email,
    )

    try:
        uvicorn.run(
            "gate.interface.api.app:app",
            host=settings.host,
            port=settings.port,
            log_level="debug" if settings.debug else "info",
        )
    except Exception as e:
        logfire.error(
            "Invite gate API failed to start",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise

    return 0


if __name__ == "__main__":
    sys.exit(main())
