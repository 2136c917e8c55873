"""FastAPI application."""

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from attend.config import Settings
from attend.interface.api.errors import request_validation_handler
from attend.interface.api.routes import attendance, health, invitations
from attend.util.di.container import create_container, setup_di
from attend.util.observability import instrument_fastapi


def create_app() -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    In tests, conftest.py does.
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Attend API",
        description="Invitation lifecycle and geofenced attendance checks for the attendance bot",
        version="0.1.0",
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Accept", "Origin", "X-Admin-Id"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    # Malformed bodies are reported like any other validation failure
    app_instance.add_exception_handler(
        RequestValidationError, request_validation_handler
    )

    # Setup dependency injection
    container = create_container()
    setup_di(app_instance, container)

    # Register routes
    app_instance.include_router(health.router)
    app_instance.include_router(invitations.router)
    app_instance.include_router(attendance.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
app = create_app()
