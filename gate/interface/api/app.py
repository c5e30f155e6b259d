"""FastAPI application."""

import sys

import logfire
from dishka import AsyncContainer
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from gate.config import Settings
from gate.interface.api.routes import admin, health, invites
from gate.util.di.container import create_container, setup_di
from gate.util.observability import instrument_fastapi, instrument_httpx


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container to use, the production container if omitted
    """
    settings = Settings()

    # Instrument httpx for outbound email API requests
    instrument_httpx()

    app_instance = FastAPI(
        title="Invite Gate API",
        description="Invite code issuance and redemption for the Curry2Cakes secret menu",
        version="0.1.0",
    )

    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=list(
            dict.fromkeys([settings.frontend_url, "http://localhost:5173"])
        ),
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", "Accept", "Origin"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    setup_di(app_instance, container or create_container())

    app_instance.include_router(health.router)
    app_instance.include_router(invites.router)
    app_instance.include_router(admin.router)

    register_error_handlers(app_instance)

    return app_instance


def register_error_handlers(app_instance: FastAPI) -> None:
    """Register JSON error responses for unknown routes and unhandled faults."""

    @app_instance.exception_handler(status.HTTP_404_NOT_FOUND)
    async def not_found_handler(request: Request, exc: Exception) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"error": "Endpoint not found"},
        )

    @app_instance.exception_handler(Exception)
    async def unhandled_error_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:
        logfire.error(
            "Unhandled error",
            path=request.url.path,
            error=str(exc),
            error_type=type(exc).__name__,
            _exc_info=sys.exc_info(),
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"success": False, "error": "Internal server error"},
        )


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
app = create_app()
