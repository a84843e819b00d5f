"""
Domain Service - Insights and Recommendations

Deterministic rule table mapping feature thresholds to qualitative labels
and advisory messages. Strength and score strings carry the underlying
number so every label can be traced back to its feature.
"""

from typing import List

from garment_forecast.domain.entities.features import FeatureSet
from garment_forecast.domain.entities.prediction import (
    HorizonPredictions,
    InsightReport,
    KeyDriver,
    PredictionInsights,
    RiskFactor,
)
from garment_forecast.domain.entities.revenue import (
    DisasterLikelihood,
    LifecycleStage,
    PredictionInput,
)
from garment_forecast.domain.services.tuning import DEFAULT_TUNING, EngineTuning

DIVERSIFY_BUYERS = (
    "Diversify buyer base to mitigate revenue dependency on a few key clients."
)
IMPROVE_OPERATIONS = (
    "Invest in operational improvements: enhance first-pass quality "
    "and on-time delivery rates."
)
STRENGTHEN_PIPELINE = (
    "Strengthen sales and marketing efforts to build a more robust order pipeline."
)
HEDGE_CURRENCY = (
    "Evaluate currency hedging strategies to manage risks from "
    "exchange rate fluctuations."
)
IMPROVE_DATA = (
    "Improve data collection for more accurate forecasting; "
    "ensure all key metrics are regularly updated."
)
ACCELERATE_GROWTH = (
    "Focus on aggressive market penetration and customer acquisition strategies."
)
CONTINUITY_PLANNING = (
    "Develop and test business continuity plans for potential natural disasters."
)
MAINTAIN_STRATEGY = "Maintain current strategies; review key metrics regularly."


def _percent(value: float) -> str:
    return f"{value:.1f}%"


def build_key_drivers(features: FeatureSet) -> List[KeyDriver]:
    pipeline = features.order_pipeline_strength
    if pipeline > 100:
        pipeline_impact = "Positive"
    elif pipeline < 60:
        pipeline_impact = "Negative"
    else:
        pipeline_impact = "Neutral"

    efficiency = features.operational_efficiency
    if efficiency > 80:
        efficiency_impact = "Positive"
    elif efficiency < 70:
        efficiency_impact = "Needs Improvement"
    else:
        efficiency_impact = "Average"

    growth = features.revenue_growth
    if growth > 5:
        growth_impact = "Positive"
    elif growth < 0:
        growth_impact = "Negative"
    else:
        growth_impact = "Stable"

    economy = features.economic_conditions
    economy_impact = "Favorable" if economy > 60 else "Challenging"

    return [
        KeyDriver("Order Pipeline Strength", pipeline_impact, _percent(pipeline)),
        KeyDriver("Operational Efficiency", efficiency_impact, _percent(efficiency)),
        KeyDriver("Recent Revenue Growth", growth_impact, _percent(growth)),
        KeyDriver("Market Conditions", economy_impact, f"{economy:.1f}/100"),
    ]


def build_risk_factors(features: FeatureSet) -> List[RiskFactor]:
    buyer = features.buyer_concentration_risk
    if buyer > 70:
        buyer_level = "High"
    elif buyer < 40:
        buyer_level = "Low"
    else:
        buyer_level = "Medium"

    exchange = features.exchange_rate_impact
    exchange_level = "High" if exchange > 0.05 else "Low"

    volatility = features.revenue_volatility
    if volatility > 15:
        volatility_level = "High"
    elif volatility < 5:
        volatility_level = "Low"
    else:
        volatility_level = "Medium"

    return [
        RiskFactor("Buyer Concentration", buyer_level, f"{buyer}/100"),
        RiskFactor(
            "Exchange Rate Volatility Impact", exchange_level, _percent(exchange * 100)
        ),
        RiskFactor("Revenue Volatility", volatility_level, _percent(volatility)),
    ]


def build_recommendations(features: FeatureSet) -> List[str]:
    """Advisory messages in priority order; never empty."""
    recommendations: List[str] = []
    if features.buyer_concentration_risk > 60:
        recommendations.append(DIVERSIFY_BUYERS)
    if features.operational_efficiency < 75:
        recommendations.append(IMPROVE_OPERATIONS)
    if features.order_pipeline_strength < 80:
        recommendations.append(STRENGTHEN_PIPELINE)
    if features.exchange_rate_impact > 0.05:
        recommendations.append(HEDGE_CURRENCY)
    if features.data_quality_score < 70:
        recommendations.append(IMPROVE_DATA)
    if (
        features.company_lifecycle_stage == LifecycleStage.STARTUP
        and features.revenue_growth < 10
    ):
        recommendations.append(ACCELERATE_GROWTH)
    if features.natural_disaster_likelihood == DisasterLikelihood.HIGH:
        recommendations.append(CONTINUITY_PLANNING)
    return recommendations or [MAINTAIN_STRATEGY]


def generate_insights(
    predictions: HorizonPredictions,
    features: FeatureSet,
    prediction_input: PredictionInput,
    tuning: EngineTuning = DEFAULT_TUNING,
) -> InsightReport:
    # Current rules read features only.
    return InsightReport(
        insights=PredictionInsights(
            key_drivers=build_key_drivers(features),
            risk_factors=build_risk_factors(features),
        ),
        accuracy=tuning.ensemble_accuracy,
        recommendations=build_recommendations(features),
    )
