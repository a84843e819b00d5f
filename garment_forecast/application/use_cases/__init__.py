"""
Use Cases Package - Application Layer

This package contains the use cases of the application, which
orchestrate the flow of data between the presentation layer and
the domain layer.
"""

from .external_context_use_case import LoadExternalContextUseCase
from .health_use_cases import GetServiceInfoUseCase
from .revenue_prediction_use_case import RevenuePredictionUseCase

__all__ = [
    "GetServiceInfoUseCase",
    "LoadExternalContextUseCase",
    "RevenuePredictionUseCase",
]
