"""
Domain Service - Feature Derivation

Turns the company inputs and the market snapshot into the flat FeatureSet
consumed by the ensemble, adjustment and insight stages. Everything here
is a pure function of its arguments.
"""

from datetime import datetime
from typing import Optional, Sequence

import numpy as np

from garment_forecast.domain.entities.external_context import (
    EconomicIndicators,
    ExternalContext,
    RawMaterialPrices,
)
from garment_forecast.domain.entities.features import FeatureSet
from garment_forecast.domain.entities.revenue import PredictionInput, is_reported
from garment_forecast.domain.services.industry_calendar import seasonal_factor
from garment_forecast.domain.services.numeric import clamp
from garment_forecast.domain.services.tuning import DEFAULT_TUNING, EngineTuning

DEFAULT_PIPELINE_STRENGTH = 50.0
MAX_PIPELINE_STRENGTH = 200.0

DEFAULT_BUYER_RISK = 50
# (share of revenue from top 3 buyers strictly above, risk score)
BUYER_RISK_STEPS = ((80.0, 90), (60.0, 70), (40.0, 50))
LOW_BUYER_RISK = 30

BASE_EFFICIENCY = 70.0
QUALITY_BENCHMARK = 85.0
DELIVERY_BENCHMARK = 90.0
RETENTION_DEFAULT = 70.0
UTILIZATION_BENCHMARK = 70.0
# Revenue ceiling implied by capacity, as a share of revenue-per-unit x capacity.
CAPACITY_CEILING_RATIO = 0.5

NEUTRAL_ECONOMIC_SCORE = 60.0
DEFAULT_BUYER_RISK_FRACTION = 0.5
DEFAULT_QUALITY_RISK_FRACTION = 0.15
DEFAULT_EXCHANGE_RISK_FRACTION = 0.05


def calculate_growth_rate(revenues: Sequence[float], periods: int) -> float:
    """Percent change of the latest value over the value ``periods`` back."""
    if len(revenues) < periods + 1:
        return 0.0
    current = revenues[-1]
    previous = revenues[-periods - 1]
    if previous == 0:
        return 0.0
    return round((current - previous) / previous * 100, 2)


def calculate_volatility(revenues: Sequence[float]) -> float:
    """Coefficient of variation (population std-dev over mean) in percent."""
    if len(revenues) < 3:
        return 0.0
    values = np.asarray(revenues, dtype=float)
    mean = float(values.mean())
    if mean == 0:
        return 0.0
    return round(float(values.std()) / mean * 100, 2)


def calculate_seasonality(
    revenues: Sequence[float], now: datetime, tuning: EngineTuning = DEFAULT_TUNING
) -> float:
    if len(revenues) < tuning.min_points_for_seasonality:
        return 1.0
    return seasonal_factor(now, tuning)


def _mean_revenue(revenues: Sequence[float]) -> float:
    if not revenues:
        return 0.0
    return float(np.mean(revenues))


def calculate_order_pipeline_strength(prediction_input: PredictionInput) -> float:
    """Confirmed orders as a percentage of the average historical revenue."""
    orders = prediction_input.confirmed_orders_value
    if not is_reported(orders) or not prediction_input.historical_revenue:
        return DEFAULT_PIPELINE_STRENGTH
    average = _mean_revenue(prediction_input.revenues)
    if average <= 0:
        return DEFAULT_PIPELINE_STRENGTH
    return clamp(orders / average * 100, 0.0, MAX_PIPELINE_STRENGTH)


def calculate_buyer_risk(prediction_input: PredictionInput) -> int:
    share = prediction_input.top3_buyers_percentage
    if not is_reported(share):
        return DEFAULT_BUYER_RISK
    for threshold, risk in BUYER_RISK_STEPS:
        if share > threshold:
            return risk
    return LOW_BUYER_RISK


def _capacity_utilization(prediction_input: PredictionInput) -> float:
    capacity = prediction_input.production_capacity
    average = _mean_revenue(prediction_input.revenues)
    if capacity <= 0 or average <= 0:
        return UTILIZATION_BENCHMARK
    revenue_per_unit = average / capacity
    ceiling = capacity * revenue_per_unit * CAPACITY_CEILING_RATIO
    return min(average / ceiling * 100, 100.0)


def calculate_operational_efficiency(prediction_input: PredictionInput) -> float:
    quality = prediction_input.first_pass_quality_rate
    delivery = prediction_input.on_time_delivery_rate
    utilization = _capacity_utilization(prediction_input)

    efficiency = BASE_EFFICIENCY
    if is_reported(quality):
        efficiency += (quality - QUALITY_BENCHMARK) * 0.5
    if is_reported(delivery):
        efficiency += (delivery - DELIVERY_BENCHMARK) * 0.3
    efficiency += (utilization - UTILIZATION_BENCHMARK) * 0.2
    return clamp(round(efficiency, 2), 0.0, 100.0)


def calculate_market_position(prediction_input: PredictionInput) -> float:
    retention = prediction_input.buyer_retention_rate or RETENTION_DEFAULT
    quality = prediction_input.first_pass_quality_rate or QUALITY_BENCHMARK
    delivery = prediction_input.on_time_delivery_rate or DELIVERY_BENCHMARK
    return round(retention * 0.4 + quality * 0.3 + delivery * 0.3, 2)


def calculate_exchange_rate_impact(
    effective_rate: float, tuning: EngineTuning = DEFAULT_TUNING
) -> float:
    """Absolute relative deviation of the exchange rate from the baseline."""
    baseline = tuning.baseline_exchange_rate
    return round(abs((effective_rate - baseline) / baseline), 4)


def calculate_raw_material_impact(
    prices: Optional[RawMaterialPrices], tuning: EngineTuning = DEFAULT_TUNING
) -> float:
    baseline = tuning.baseline_cotton_price
    cotton = prices.cotton_price_local if prices else None
    if not is_reported(cotton):
        cotton = baseline
    return round(cotton / baseline, 2)


def assess_economic_conditions(indicators: Optional[EconomicIndicators]) -> float:
    """0-100 score; GDP and export growth help, inflation hurts."""
    if indicators is None:
        return NEUTRAL_ECONOMIC_SCORE
    score = (
        50.0
        + indicators.gdp_growth_rate * 5
        - indicators.inflation_rate * 2
        + indicators.export_growth_rate * 3
    )
    return round(clamp(score, 0.0, 100.0), 2)


def calculate_overall_risk(
    prediction_input: PredictionInput,
    context: ExternalContext,
    tuning: EngineTuning = DEFAULT_TUNING,
) -> float:
    top3 = prediction_input.top3_buyers_percentage
    quality = prediction_input.first_pass_quality_rate
    baseline = tuning.baseline_exchange_rate

    buyer_risk = top3 / 100 if is_reported(top3) else DEFAULT_BUYER_RISK_FRACTION
    quality_risk = (
        (100 - quality) / 100 if is_reported(quality) else DEFAULT_QUALITY_RISK_FRACTION
    )
    exchange_risk = (
        abs(context.exchange_rate - baseline) / baseline
        if is_reported(context.exchange_rate)
        else DEFAULT_EXCHANGE_RISK_FRACTION
    )

    score = buyer_risk * 40 + quality_risk * 30 + exchange_risk * 30
    return round(clamp(score, 0.0, 100.0), 2)


def assess_data_quality(prediction_input: PredictionInput) -> int:
    score = 50
    points = len(prediction_input.historical_revenue)
    if points >= 12:
        score += 10
    if points >= 24:
        score += 5
    if is_reported(prediction_input.confirmed_orders_value):
        score += 10
    for metric in (
        prediction_input.first_pass_quality_rate,
        prediction_input.on_time_delivery_rate,
        prediction_input.buyer_retention_rate,
        prediction_input.current_exchange_rate,
    ):
        if is_reported(metric):
            score += 5
    return min(100, score)


def derive_features(
    prediction_input: PredictionInput,
    context: ExternalContext,
    now: datetime,
    tuning: EngineTuning = DEFAULT_TUNING,
) -> FeatureSet:
    """Build the FeatureSet for one prediction call."""
    revenues = prediction_input.revenues
    effective_rate = (
        prediction_input.current_exchange_rate
        if is_reported(prediction_input.current_exchange_rate)
        else context.exchange_rate
    )

    return FeatureSet(
        base_revenue=prediction_input.latest_revenue,
        revenue_growth=calculate_growth_rate(revenues, tuning.growth_lookback_periods),
        revenue_volatility=calculate_volatility(revenues),
        seasonality=calculate_seasonality(revenues, now, tuning),
        order_pipeline_strength=calculate_order_pipeline_strength(prediction_input),
        buyer_concentration_risk=calculate_buyer_risk(prediction_input),
        operational_efficiency=calculate_operational_efficiency(prediction_input),
        market_position=calculate_market_position(prediction_input),
        exchange_rate_impact=calculate_exchange_rate_impact(effective_rate, tuning),
        raw_material_cost_impact=calculate_raw_material_impact(
            context.raw_material_prices, tuning
        ),
        economic_conditions=assess_economic_conditions(context.economic_indicators),
        overall_risk_score=calculate_overall_risk(prediction_input, context, tuning),
        data_quality_score=assess_data_quality(prediction_input),
        company_lifecycle_stage=prediction_input.company_lifecycle_stage,
        natural_disaster_likelihood=prediction_input.natural_disaster_likelihood,
        marketing_spend=prediction_input.marketing_spend,
        labor_cost_index=prediction_input.labor_cost_index,
        production_capacity=prediction_input.production_capacity,
    )
