"""
DTOs Package - Application Layer

This package contains Data Transfer Objects (DTOs) used for data exchange
between the application layer and the presentation layer.
"""

from .health_dto import ServiceInfoDTO
from .prediction_dto import (
    HistoricalRevenuePointDTO,
    HorizonPredictionsDTO,
    KeyDriverDTO,
    PredictionInsightsDTO,
    PredictionRequestDTO,
    PredictionResultDTO,
    RiskFactorDTO,
    parse_historical_revenue,
)

__all__ = [
    "HistoricalRevenuePointDTO",
    "HorizonPredictionsDTO",
    "KeyDriverDTO",
    "PredictionInsightsDTO",
    "PredictionRequestDTO",
    "PredictionResultDTO",
    "RiskFactorDTO",
    "ServiceInfoDTO",
    "parse_historical_revenue",
]
