"""Logfire setup and instrumentation.

Invite codes are never logged whole; use ``InviteCode.masked()`` or the
first four characters:

    logfire.info("Invite issued", email=email, code=code.masked())

    with logfire.span("invite_registry.redeem_code", code=code[:4] + "..."):
        ...
"""

import logfire
from fastapi import FastAPI

from gate.config import Settings

SERVICE_NAME = "invite-gate"
SERVICE_VERSION = "0.1.0"

# Email API credentials travel in the Authorization header as "sso-key k:s"
_SCRUB_PATTERNS = ["sso-key", "api_secret"]

# Polled by load balancers, not worth a span each
_UNTRACED_URLS = ["/health"]


def _sends_to_logfire(settings: Settings) -> bool:
    """An explicit setting wins, otherwise send only when a token is present."""
    if settings.observability.send_to_logfire is not None:
        return settings.observability.send_to_logfire
    return bool(settings.observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for the current environment.

    Without OBSERVABILITY__LOGFIRE_TOKEN everything stays on the console.
    OBSERVABILITY__SEND_TO_LOGFIRE forces sending on or off.

    Args:
        settings: Application settings
    """
    send_to_logfire = _sends_to_logfire(settings)

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=SERVICE_VERSION,
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        token=settings.observability.logfire_token,
        scrubbing=logfire.ScrubbingOptions(extra_patterns=_SCRUB_PATTERNS),
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        real_email=settings.uses_real_email,
        ttl_days=settings.invites.ttl_days,
        cooldown_minutes=settings.invites.cooldown_minutes,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace incoming requests, except health checks.

    Args:
        app: FastAPI application instance
    """

    def _request_attributes(request, attributes):
        result = {**attributes, "path": request.url.path}
        if request.client:
            result["client_host"] = request.client.host
        return result

    logfire.instrument_fastapi(
        app,
        request_attributes_mapper=_request_attributes,
        excluded_urls=_UNTRACED_URLS,
    )
    logfire.info("FastAPI instrumented")


def instrument_httpx() -> None:
    """Trace outbound calls to the email API."""
    logfire.instrument_httpx()
    logfire.info("httpx instrumented")
