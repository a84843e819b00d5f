"""
Shared module - Cross-cutting concerns / Shared Layer

Constants, enums and logging helpers used by every other layer. Nothing
in here may depend on the domain, application or infrastructure layers.
"""

from .consts import EnumEnvironment, EnumLogLevel, EnumLogRenderer
from .logging import configure_logging, get_logger, update_logging_from_settings

__all__ = [
    "EnumEnvironment",
    "EnumLogLevel",
    "EnumLogRenderer",
    "configure_logging",
    "get_logger",
    "update_logging_from_settings",
]
