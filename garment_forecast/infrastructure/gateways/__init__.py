"""
Gateways Package - Infrastructure Layer

This package contains concrete implementations of the gateway
interfaces defined in the domain layer.
"""

from .mongo_external_context_gateway import (
    MongoExternalContextGateway,
    parse_external_context,
)
from .static_external_context_gateway import StaticExternalContextGateway

__all__ = [
    "MongoExternalContextGateway",
    "StaticExternalContextGateway",
    "parse_external_context",
]
