"""
Infrastructure Layer Package

This package contains implementations of interfaces defined in the
domain layer, dealing with external concerns such as databases.
"""

from garment_forecast.infrastructure import database, gateways

__all__ = ["database", "gateways"]
