"""Domain entities for prediction outputs."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True, slots=True)
class RawPredictions:
    """Unadjusted ensemble output per horizon."""

    next_month: float
    next_quarter: float
    next_six_months: float
    next_year: float
    confidence: int


@dataclass(frozen=True, slots=True)
class HorizonPredictions:
    """Adjusted, rounded revenue per horizon."""

    next_month: int
    next_quarter: int
    next_six_months: int
    next_year: int
    confidence: int
    adjustment_factor: float


@dataclass(frozen=True, slots=True)
class KeyDriver:
    factor: str
    impact: str
    strength: str


@dataclass(frozen=True, slots=True)
class RiskFactor:
    risk: str
    level: str
    score: str


@dataclass(frozen=True)
class PredictionInsights:
    key_drivers: List[KeyDriver] = field(default_factory=list)
    risk_factors: List[RiskFactor] = field(default_factory=list)


@dataclass(frozen=True)
class InsightReport:
    """Qualitative part of a prediction: insights, accuracy band, advice."""

    insights: PredictionInsights
    accuracy: str
    recommendations: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class PredictionResult:
    """Complete answer returned for one prediction call."""

    predictions: HorizonPredictions
    insights: PredictionInsights
    accuracy: str
    recommendations: List[str] = field(default_factory=list)
