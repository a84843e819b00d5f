"""
Gateways Package - Domain Layer

Interfaces for external data sources. Implementations live in the
infrastructure layer.
"""

from .external_context_gateway import IExternalContextProvider

__all__ = ["IExternalContextProvider"]
