"""
Dependency container injection module - Main Layer

This module implements the dependency injection container
to simplify the management and lifecycle of dependencies
in the application.
"""

from contextlib import asynccontextmanager

from dependency_injector import containers, providers

from garment_forecast.application.models import ServiceInfo
from garment_forecast.application.use_cases.external_context_use_case import (
    LoadExternalContextUseCase,
)
from garment_forecast.application.use_cases.health_use_cases import (
    GetServiceInfoUseCase,
)
from garment_forecast.application.use_cases.revenue_prediction_use_case import (
    RevenuePredictionUseCase,
)
from garment_forecast.domain.services.tuning import DEFAULT_TUNING
from garment_forecast.infrastructure.database import MongoDatabase
from garment_forecast.infrastructure.gateways.mongo_external_context_gateway import (
    MongoExternalContextGateway,
)
from garment_forecast.infrastructure.gateways.static_external_context_gateway import (
    StaticExternalContextGateway,
)
from garment_forecast.shared import get_logger

from .config import AppSettings

logger = get_logger(__name__)


class AppContainer(containers.DeclarativeContainer):
    """Composition Root using dependency-injector."""

    wiring_config = containers.WiringConfiguration(packages=["..presentation"])

    # Settings
    config = providers.Configuration()

    # Infrastructure
    mongo_database = providers.Singleton(
        MongoDatabase,
        mongo_uri=config.database.mongo_uri,
        db_name=config.database.database_name,
        server_selection_timeout_ms=config.database.server_selection_timeout_ms,
    )

    # Gateways
    mongo_external_context_gateway = providers.Singleton(
        MongoExternalContextGateway,
        mongo_database=mongo_database,
        collection_name=config.external_data.collection,
        document_id=config.external_data.document_id,
    )

    static_external_context_gateway = providers.Singleton(
        StaticExternalContextGateway,
    )

    external_context_provider = providers.Selector(
        config.external_data.source,
        mongo=mongo_external_context_gateway,
        static=static_external_context_gateway,
    )

    # Application (use cases)
    load_external_context_use_case = providers.Factory(
        LoadExternalContextUseCase,
        provider=external_context_provider,
        timeout_seconds=config.external_data.timeout_seconds,
    )

    revenue_prediction_use_case = providers.Factory(
        RevenuePredictionUseCase,
        context_loader=load_external_context_use_case,
        tuning=providers.Object(DEFAULT_TUNING),
    )

    service_info = providers.Singleton(
        ServiceInfo,
        title=config.service.title,
        description=config.service.description,
        version=config.service.version,
        environment=providers.Callable(
            lambda env: env.value if hasattr(env, "value") else str(env),
            config.environment,
        ),
    )

    get_service_info_use_case = providers.Factory(
        GetServiceInfoUseCase,
        service_info=service_info,
    )


# -------------------------
# Global Container Instance
# -------------------------
_app_container: AppContainer | None = None


def init_container(settings: AppSettings) -> AppContainer:
    """Initialize global container with application settings."""

    global _app_container

    container = AppContainer()
    container.config.from_pydantic(settings)
    _app_container = container
    return container


def get_container() -> AppContainer:
    """Get the initialized global container."""

    if _app_container is None:
        raise RuntimeError("Container has not been initialized yet")

    return _app_container


@asynccontextmanager
async def app_lifespan():
    """
    Centralized lifecycle management for external resources.

    The Mongo client is only created (and closed) when the mongo provider
    is the configured context source.
    """
    container = get_container()
    uses_mongo = container.config.external_data.source() == "mongo"

    try:
        if uses_mongo:
            logger.info("container.mongo.ensure_connection")
            container.mongo_database()
        logger.info(
            "container.resources.initialized",
            external_data_source=container.config.external_data.source(),
        )
        yield container

    finally:
        if uses_mongo:
            logger.info("container.mongo.close")
            container.mongo_database().close()

        logger.info("container.resources.shutdown")
