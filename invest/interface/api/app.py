"""FastAPI application."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from invest.config import DEFAULT_JWT_SECRET, Settings
from invest.interface.api.errors import register_error_handlers
from invest.interface.api.routes import (
    eligibility,
    escrow,
    health,
    payments,
    reservations,
)
from invest.util.di.container import create_container, setup_di
from invest.util.error import ConfigurationError
from invest.util.observability import instrument_fastapi


def create_app() -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Raises:
        ConfigurationError: If production runs with the default JWT secret
    """
    settings = Settings()

    if settings.environment == "production" and (
        settings.auth.jwt_secret == DEFAULT_JWT_SECRET
    ):
        raise ConfigurationError("AUTH__JWT_SECRET must be set in production")

    app_instance = FastAPI(
        title="Investment Flow API",
        description="Reservations, eligibility, payments and escrow for offerings",
        version="0.1.0",
    )

    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            settings.api.frontend_url,  # Admin dashboard
            "http://localhost:3000",  # Local development
        ],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "PATCH", "OPTIONS"],
        allow_headers=["Content-Type", "Accept", "Origin", "X-Requested-With"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    container = create_container()
    setup_di(app_instance, container)

    register_error_handlers(app_instance)

    app_instance.include_router(health.router)
    app_instance.include_router(reservations.router)
    app_instance.include_router(eligibility.router)
    app_instance.include_router(payments.router)
    app_instance.include_router(escrow.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
app = create_app()
