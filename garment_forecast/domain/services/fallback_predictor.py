"""
Domain Service - Basic Fallback Prediction

Trend-only projection computed straight from the revenue history. Used
when anything in the full pipeline fails; it must not depend on the
external context or on the derived feature set.
"""

from garment_forecast.domain.entities.prediction import (
    HorizonPredictions,
    KeyDriver,
    PredictionInsights,
    PredictionResult,
    RiskFactor,
)
from garment_forecast.domain.entities.revenue import PredictionInput
from garment_forecast.domain.services.feature_deriver import calculate_growth_rate
from garment_forecast.domain.services.numeric import round_half_up
from garment_forecast.domain.services.tuning import DEFAULT_TUNING, EngineTuning

FALLBACK_DRIVER = "Historical Trend (Fallback)"
FALLBACK_RISK = "Data Limitation / Prediction Fallback"
FALLBACK_RECOMMENDATION = (
    "Enhanced prediction engine encountered an issue. Providing basic "
    "trend-based forecast. Review inputs or system logs."
)


def basic_fallback(
    prediction_input: PredictionInput, tuning: EngineTuning = DEFAULT_TUNING
) -> PredictionResult:
    growth = calculate_growth_rate(
        prediction_input.revenues, tuning.growth_lookback_periods
    )
    projection = prediction_input.latest_revenue * (1 + growth / 100)
    horizons = tuning.horizon_multipliers

    def _horizon(multiplier: float) -> int:
        return max(0, round_half_up(projection * multiplier))

    return PredictionResult(
        predictions=HorizonPredictions(
            next_month=_horizon(horizons.next_month),
            next_quarter=_horizon(horizons.next_quarter),
            next_six_months=_horizon(horizons.next_six_months),
            next_year=_horizon(horizons.next_year),
            confidence=tuning.fallback_confidence,
            adjustment_factor=1.0,
        ),
        insights=PredictionInsights(
            key_drivers=[
                KeyDriver(
                    factor=FALLBACK_DRIVER,
                    impact="Positive" if growth > 0 else "Negative",
                    strength=f"{growth:.1f}%",
                )
            ],
            risk_factors=[RiskFactor(risk=FALLBACK_RISK, level="High", score="N/A")],
        ),
        accuracy=tuning.fallback_accuracy,
        recommendations=[FALLBACK_RECOMMENDATION],
    )
