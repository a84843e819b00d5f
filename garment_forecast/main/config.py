"""
Application Settings - Main Layer

Use Pydantic Settings for configuration management.
This module handles configuration settings provided using
environment variables, .env files and default values.
"""

from typing import List, Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from garment_forecast.shared import EnumEnvironment, EnumLogLevel, EnumLogRenderer
from garment_forecast.shared.env import load_secret_file_variables  # noqa: F401


class DatabaseSettings(BaseSettings):
    """Database configuration settings."""

    mongo_uri: str = Field(
        default="mongodb://localhost:27017/garment_forecast",
        description="MongoDB connection URI",
    )
    database_name: str = Field(
        default="garment_forecast", description="Name of the MongoDB database"
    )
    server_selection_timeout_ms: int = Field(
        default=5000, ge=1, description="pymongo server selection timeout"
    )

    model_config = SettingsConfigDict(
        env_prefix="DB_", case_sensitive=False, extra="ignore"
    )


class ServiceSettings(BaseSettings):
    """HTTP service configuration settings."""

    title: str = Field(default="Garment Revenue Forecast", description="Service title")
    description: str = Field(
        default="Revenue forecasting engine for garment manufacturers",
        description="Service description",
    )
    version: str = Field(default="1.0.0", description="Service version")
    host: str = Field(default="0.0.0.0", description="Host to bind the server")
    port: int = Field(default=8000, description="Port to bind the server")
    reload: bool = Field(
        default=False, description="Enable auto-reload for development"
    )
    cors_origins: List[str] = Field(
        default_factory=lambda: ["*"],
        description="Origins allowed to call the API (JSON list in env)",
    )

    model_config = SettingsConfigDict(
        env_prefix="SERVICE_", case_sensitive=False, extra="ignore"
    )


class ExternalDataSettings(BaseSettings):
    """Where the market snapshot comes from and how long to wait for it."""

    source: Literal["mongo", "static"] = Field(
        default="mongo", description="External context provider"
    )
    collection: str = Field(
        default="external_data", description="Collection holding the snapshot"
    )
    document_id: str = Field(
        default="current", description="Value of the snapshot document 'id' field"
    )
    timeout_seconds: float = Field(
        default=5.0, gt=0, description="Timeout for the single context fetch"
    )

    model_config = SettingsConfigDict(
        env_prefix="EXTERNAL_DATA_", case_sensitive=False, extra="ignore"
    )


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    level: EnumLogLevel = Field(default=EnumLogLevel.INFO, description="Logging level")
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Logging format",
    )
    file_path: Optional[str] = Field(
        default=None, description="Log file path (if None, logs to console)"
    )
    renderer: Optional[EnumLogRenderer] = Field(
        default=None,
        description="Force console or json output (defaults by environment)",
    )

    model_config = SettingsConfigDict(
        env_prefix="LOG_", case_sensitive=False, extra="ignore"
    )


class AppSettings(BaseSettings):
    """Main application settings, aggregating all sub-settings."""

    environment: EnumEnvironment = Field(
        default=EnumEnvironment.DEVELOPMENT, description="Application environment"
    )

    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    service: ServiceSettings = Field(default_factory=ServiceSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    external_data: ExternalDataSettings = Field(default_factory=ExternalDataSettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_nested_delimiter="__",
        extra="ignore",
    )


def get_settings() -> AppSettings:
    """
    Get application settings instance Factory.

    Used to be mocked in tests, allowing different settings based on environment.
    """
    return AppSettings()
