"""
Domain Entities Package

Plain dataclasses describing prediction inputs, market context, derived
features and prediction results, plus the domain error hierarchy.
"""

from .errors import (
    DomainError,
    ExternalContextError,
    ExternalContextNotFoundError,
    PredictionInputError,
    PredictionOutputError,
)
from .external_context import (
    DEFAULT_EXTERNAL_CONTEXT,
    EconomicIndicators,
    ExternalContext,
    RawMaterialPrices,
)
from .features import FeatureSet
from .prediction import (
    HorizonPredictions,
    InsightReport,
    KeyDriver,
    PredictionInsights,
    PredictionResult,
    RawPredictions,
    RiskFactor,
)
from .revenue import (
    DisasterLikelihood,
    HistoricalRevenuePoint,
    LifecycleStage,
    PredictionInput,
    is_reported,
)

__all__ = [
    "DomainError",
    "ExternalContextError",
    "ExternalContextNotFoundError",
    "PredictionInputError",
    "PredictionOutputError",
    "DEFAULT_EXTERNAL_CONTEXT",
    "EconomicIndicators",
    "ExternalContext",
    "RawMaterialPrices",
    "FeatureSet",
    "HorizonPredictions",
    "InsightReport",
    "KeyDriver",
    "PredictionInsights",
    "PredictionResult",
    "RawPredictions",
    "RiskFactor",
    "DisasterLikelihood",
    "HistoricalRevenuePoint",
    "LifecycleStage",
    "PredictionInput",
    "is_reported",
]
