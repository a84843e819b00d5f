"""
Domain Service - Industry Adjustments

Builds one multiplicative adjustment factor from seasonal, cultural,
lifecycle, disaster, currency, operational, trade, marketing and labor
conditions, then applies it to every horizon. All multipliers commute, so
their order is irrelevant.
"""

import math
from datetime import datetime
from typing import List, Tuple

from garment_forecast.domain.entities.features import FeatureSet
from garment_forecast.domain.entities.prediction import (
    HorizonPredictions,
    RawPredictions,
)
from garment_forecast.domain.services.industry_calendar import (
    is_monsoon_season,
    is_ramadan_period,
)
from garment_forecast.domain.services.numeric import round_half_up
from garment_forecast.domain.services.tuning import DEFAULT_TUNING, EngineTuning


def adjustment_factors(
    features: FeatureSet, now: datetime, tuning: EngineTuning = DEFAULT_TUNING
) -> List[Tuple[str, float]]:
    """Return the ``(name, multiplier)`` pairs that apply to this request."""
    factors: List[Tuple[str, float]] = []

    if is_monsoon_season(now, tuning):
        factors.append(("monsoon_season", tuning.monsoon_multiplier))
    if is_ramadan_period(now, tuning):
        factors.append(("ramadan_period", tuning.ramadan_multiplier))

    lifecycle = tuning.lifecycle_multipliers.get(features.company_lifecycle_stage, 1.0)
    if lifecycle != 1.0:
        factors.append(("lifecycle_stage", lifecycle))

    disaster = tuning.disaster_multipliers.get(
        features.natural_disaster_likelihood, 1.0
    )
    if disaster != 1.0:
        factors.append(("natural_disaster", disaster))

    if features.exchange_rate_impact > tuning.exchange_volatility_threshold:
        factors.append(
            ("exchange_rate_volatility", tuning.exchange_volatility_multiplier)
        )

    if features.operational_efficiency > tuning.high_efficiency_threshold:
        factors.append(("operational_efficiency", tuning.high_efficiency_multiplier))
    elif features.operational_efficiency < tuning.low_efficiency_threshold:
        factors.append(("operational_efficiency", tuning.low_efficiency_multiplier))

    # Structural export-tariff advantage, always applied.
    factors.append(("trade_preference", tuning.trade_preference_multiplier))

    if features.marketing_spend > tuning.marketing_spend_threshold:
        factors.append(("marketing_spend", tuning.marketing_spend_multiplier))
    if features.labor_cost_index > tuning.labor_cost_threshold:
        factors.append(("labor_cost", tuning.labor_cost_multiplier))

    return factors


def compute_adjustment_factor(
    features: FeatureSet, now: datetime, tuning: EngineTuning = DEFAULT_TUNING
) -> float:
    return math.prod(
        multiplier for _, multiplier in adjustment_factors(features, now, tuning)
    )


def _adjust(value: float, factor: float) -> int:
    return max(0, round_half_up(value * factor))


def apply_adjustments(
    raw: RawPredictions,
    features: FeatureSet,
    now: datetime,
    tuning: EngineTuning = DEFAULT_TUNING,
) -> HorizonPredictions:
    factor = compute_adjustment_factor(features, now, tuning)
    return HorizonPredictions(
        next_month=_adjust(raw.next_month, factor),
        next_quarter=_adjust(raw.next_quarter, factor),
        next_six_months=_adjust(raw.next_six_months, factor),
        next_year=_adjust(raw.next_year, factor),
        confidence=int(raw.confidence),
        adjustment_factor=round(factor, 4),
    )
