"""
Domain Service - Ensemble Prediction

Three independent quarterly estimates (trend, order pipeline, seasonal)
blended with fixed weights. The quarter is the atomic unit; the month,
six-month and year horizons are linear multiples of it.
"""

from datetime import datetime

from garment_forecast.domain.entities.features import FeatureSet
from garment_forecast.domain.entities.prediction import RawPredictions
from garment_forecast.domain.services.industry_calendar import seasonal_factor
from garment_forecast.domain.services.numeric import clamp, round_half_up
from garment_forecast.domain.services.tuning import DEFAULT_TUNING, EngineTuning

MAX_VOLATILITY_PENALTY = 15.0


def trend_based_estimate(features: FeatureSet) -> float:
    return features.base_revenue * (1 + features.revenue_growth / 100)


def pipeline_based_estimate(features: FeatureSet) -> float:
    return features.base_revenue * (features.order_pipeline_strength / 100)


def seasonal_estimate(
    features: FeatureSet, now: datetime, tuning: EngineTuning = DEFAULT_TUNING
) -> float:
    return features.base_revenue * seasonal_factor(now, tuning)


def prediction_confidence(
    features: FeatureSet, tuning: EngineTuning = DEFAULT_TUNING
) -> int:
    """Confidence in percent, bounded to [min_confidence, max_confidence]."""
    confidence = tuning.base_confidence
    confidence += (features.data_quality_score - 70) * 0.3
    confidence -= min(features.revenue_volatility / 2, MAX_VOLATILITY_PENALTY)
    confidence -= features.overall_risk_score * 0.1
    return int(
        clamp(round_half_up(confidence), tuning.min_confidence, tuning.max_confidence)
    )


def run_ensemble(
    features: FeatureSet, now: datetime, tuning: EngineTuning = DEFAULT_TUNING
) -> RawPredictions:
    weights = tuning.ensemble_weights
    ensemble = (
        trend_based_estimate(features) * weights.trend
        + pipeline_based_estimate(features) * weights.pipeline
        + seasonal_estimate(features, now, tuning) * weights.seasonal
    )

    horizons = tuning.horizon_multipliers
    return RawPredictions(
        next_month=ensemble * horizons.next_month,
        next_quarter=ensemble * horizons.next_quarter,
        next_six_months=ensemble * horizons.next_six_months,
        next_year=ensemble * horizons.next_year,
        confidence=prediction_confidence(features, tuning),
    )
