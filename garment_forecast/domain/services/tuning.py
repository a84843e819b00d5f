"""
Engine tuning constants.

Every hand-tuned number used by the prediction stages lives here so the
tuning surface can be reviewed and adjusted in one place. The weights are
fixed design constants; nothing here is learned from data.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Dict, FrozenSet, NamedTuple, Tuple

from garment_forecast.domain.entities.revenue import DisasterLikelihood, LifecycleStage


class EnsembleWeights(NamedTuple):
    """Weights of the three base estimates. They sum to 1."""

    trend: float = 0.40
    pipeline: float = 0.35
    seasonal: float = 0.25


class HorizonMultipliers(NamedTuple):
    """Horizon values as multiples of the quarterly ensemble estimate."""

    next_month: float = 0.33
    next_quarter: float = 1.0
    next_six_months: float = 2.0
    next_year: float = 4.0


# Garment export demand by calendar month (1 = January).
SEASONAL_FACTORS: Dict[int, float] = {
    1: 0.9,
    2: 0.95,
    3: 1.1,
    4: 1.15,
    5: 1.1,
    6: 0.95,
    7: 0.9,
    8: 0.9,
    9: 1.0,
    10: 1.2,
    11: 1.3,
    12: 1.1,
}

# Approximate Gregorian Ramadan windows (inclusive). Years outside the table
# get no Ramadan adjustment. A lunar calendar computation would replace this.
RAMADAN_WINDOWS: Dict[int, Tuple[date, date]] = {
    2023: (date(2023, 3, 23), date(2023, 4, 21)),
    2024: (date(2024, 3, 10), date(2024, 4, 9)),
    2025: (date(2025, 2, 28), date(2025, 3, 29)),
    2026: (date(2026, 2, 18), date(2026, 3, 19)),
    2027: (date(2027, 2, 8), date(2027, 3, 9)),
    2028: (date(2028, 1, 28), date(2028, 2, 26)),
}

LIFECYCLE_MULTIPLIERS: Dict[LifecycleStage, float] = {
    LifecycleStage.STARTUP: 1.1,
    LifecycleStage.GROWTH: 1.0,
    LifecycleStage.MATURITY: 1.0,
    LifecycleStage.DECLINE: 0.9,
}

DISASTER_MULTIPLIERS: Dict[DisasterLikelihood, float] = {
    DisasterLikelihood.LOW: 1.0,
    DisasterLikelihood.MEDIUM: 0.95,
    DisasterLikelihood.HIGH: 0.85,
}


@dataclass(frozen=True)
class EngineTuning:
    """Aggregated tuning surface consumed by every prediction stage."""

    # Ensemble
    ensemble_weights: EnsembleWeights = EnsembleWeights()
    horizon_multipliers: HorizonMultipliers = HorizonMultipliers()
    growth_lookback_periods: int = 6
    seasonal_factors: Dict[int, float] = field(
        default_factory=lambda: dict(SEASONAL_FACTORS)
    )
    min_points_for_seasonality: int = 12

    # Market baselines
    baseline_exchange_rate: float = 320.0
    baseline_cotton_price: float = 350.0

    # Confidence
    base_confidence: float = 85.0
    min_confidence: int = 60
    max_confidence: int = 95
    fallback_confidence: int = 70

    # Static accuracy bands (documentation values, not backtested)
    ensemble_accuracy: str = "75-80%"
    fallback_accuracy: str = "65-75%"

    # Industry adjustments
    monsoon_months: FrozenSet[int] = frozenset({6, 7, 8, 9})
    monsoon_multiplier: float = 0.95
    ramadan_windows: Dict[int, Tuple[date, date]] = field(
        default_factory=lambda: dict(RAMADAN_WINDOWS)
    )
    ramadan_multiplier: float = 0.92
    lifecycle_multipliers: Dict[LifecycleStage, float] = field(
        default_factory=lambda: dict(LIFECYCLE_MULTIPLIERS)
    )
    disaster_multipliers: Dict[DisasterLikelihood, float] = field(
        default_factory=lambda: dict(DISASTER_MULTIPLIERS)
    )
    exchange_volatility_threshold: float = 0.10
    exchange_volatility_multiplier: float = 0.97
    high_efficiency_threshold: float = 90.0
    high_efficiency_multiplier: float = 1.05
    low_efficiency_threshold: float = 75.0
    low_efficiency_multiplier: float = 0.95
    trade_preference_multiplier: float = 1.03
    marketing_spend_threshold: float = 1_000_000.0
    marketing_spend_multiplier: float = 1.02
    labor_cost_threshold: float = 1.1
    labor_cost_multiplier: float = 0.98


DEFAULT_TUNING = EngineTuning()
