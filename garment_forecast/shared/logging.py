"""
Logging Configuration - Shared Layer

structlog is layered on top of the standard logging module so that
third-party libraries (uvicorn, pymongo) and our own structured events
end up in the same handlers with the same rendering.
"""

import logging
import os
import sys
from typing import Any, List, Optional

import structlog
from structlog.types import Processor

from garment_forecast.shared.consts import EnumEnvironment, EnumLogRenderer


def _select_renderer(environment: str, renderer: Optional[str]) -> Processor:
    """JSON in production, coloured console output everywhere else."""
    if renderer:
        use_json = renderer.lower() == EnumLogRenderer.JSON
    else:
        use_json = environment.lower() == EnumEnvironment.PRODUCTION
    if use_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer()


def configure_logging(
    level: Optional[str] = None,
    file_path: Optional[str] = None,
    environment: str = "development",
    renderer: Optional[str] = None,
) -> None:
    """
    Configure stdlib logging and structlog.

    Called once at import time of the entry points with environment-only
    values, then again through update_logging_from_settings once the
    pydantic settings are loaded.

    Args:
        level: Log level name, falls back to LOG_LEVEL then INFO.
        file_path: Optional file to mirror the console output into.
        environment: Application environment name.
        renderer: Force "console" or "json" rendering.
    """
    log_level = level or os.environ.get("LOG_LEVEL") or "INFO"
    log_file = file_path or os.environ.get("LOG_FILE_PATH")
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    timestamper = structlog.processors.TimeStamper(fmt="iso", utc=True)
    formatter = structlog.stdlib.ProcessorFormatter(
        processor=_select_renderer(environment, renderer),
        foreign_pre_chain=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            timestamper,
        ],
    )
    for handler in handlers:
        handler.setFormatter(formatter)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            timestamper,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    root_logger.handlers = handlers
    root_logger.setLevel(numeric_level)

    logging.info(f"Logging configured with level: {log_level}")
    if log_file:
        logging.info(f"Logging to file: {log_file}")


def update_logging_from_settings(settings: Any) -> None:
    """
    Reconfigure logging from the application settings object.

    Args:
        settings: AppSettings (or any object exposing ``logging`` and
            ``environment`` attributes).
    """
    try:
        log_settings = settings.logging
        level = getattr(log_settings.level, "value", log_settings.level)
        renderer = getattr(log_settings, "renderer", None)
        environment = getattr(settings.environment, "value", settings.environment)

        configure_logging(
            level=level,
            file_path=log_settings.file_path,
            environment=environment,
            renderer=getattr(renderer, "value", renderer),
        )
        logging.info("Logging configuration updated from application settings")
    except Exception as e:
        logging.error(f"Failed to update logging from settings: {e}")


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger configured for the project."""
    return structlog.get_logger(name)
