"""
Main Application - Main Layer

Builds the FastAPI application for the revenue forecast service: logging
bootstrap, dependency container, CORS policy and the prediction and
system routers.
"""

from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from garment_forecast.main.config import AppSettings, get_settings
from garment_forecast.main.container import app_lifespan, init_container
from garment_forecast.presentation.controllers import predictions_router, system_router
from garment_forecast.shared import (
    configure_logging,
    get_logger,
    update_logging_from_settings,
)

# Configuration loading is logged with the basic setup, then refined.
configure_logging()
update_logging_from_settings(get_settings())

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the container resources for the lifetime of the server."""
    started_at = datetime.now(timezone.utc)
    app.state.started_at = started_at
    logger.info(
        "service.startup",
        version=app.version,
        external_data_source=app.state.settings.external_data.source,
    )

    async with app_lifespan() as container:
        app.state.container = container
        yield

    uptime = (datetime.now(timezone.utc) - started_at).total_seconds()
    logger.info("service.shutdown", uptime_seconds=round(uptime, 1))


def create_app(settings: Optional[AppSettings] = None) -> FastAPI:
    """
    Create the forecast API.

    Args:
        settings: Settings to build the app with; loaded from the
            environment when omitted.

    Returns:
        FastAPI: Application with the container initialised and routers
        mounted
    """
    settings = settings or get_settings()
    init_container(settings)

    app = FastAPI(
        title=settings.service.title,
        description=settings.service.description,
        version=settings.service.version,
        lifespan=lifespan,
    )
    app.state.settings = settings

    # Credentials cannot be combined with a wildcard origin.
    allow_any = "*" in settings.service.cors_origins
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.service.cors_origins,
        allow_credentials=not allow_any,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    app.include_router(system_router)
    app.include_router(predictions_router)

    return app


app = create_app()
