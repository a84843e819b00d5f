"""Derived feature set shared by the ensemble, adjuster and insight stages."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .revenue import DisasterLikelihood, LifecycleStage


@dataclass(frozen=True, slots=True)
class FeatureSet:
    """Flat numeric view of one prediction request. Lives for one call only."""

    # Revenue history
    base_revenue: float
    revenue_growth: float
    revenue_volatility: float
    seasonality: float

    # Commercial and operational health
    order_pipeline_strength: float
    buyer_concentration_risk: int
    operational_efficiency: float
    market_position: float

    # Market context
    exchange_rate_impact: float
    raw_material_cost_impact: float
    economic_conditions: float

    # Scores
    overall_risk_score: float
    data_quality_score: int

    # Pass-through
    company_lifecycle_stage: Optional[LifecycleStage]
    natural_disaster_likelihood: Optional[DisasterLikelihood]
    marketing_spend: float
    labor_cost_index: float
    production_capacity: float
