"""
Domain Layer Package

Core forecasting rules: entities, gateway interfaces and the pure
prediction stages. No framework or infrastructure dependencies.
"""

from garment_forecast.domain import entities, gateways, services

__all__ = ["entities", "gateways", "services"]
