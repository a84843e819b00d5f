"""
Domain Entities - Revenue Inputs

Company-reported data consumed by the prediction engine. Historical points
are kept in the order the caller supplied them, which is taken to be
chronological.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class LifecycleStage(str, Enum):
    """Stage of the company lifecycle."""

    STARTUP = "startup"
    GROWTH = "growth"
    MATURITY = "maturity"
    DECLINE = "decline"


class DisasterLikelihood(str, Enum):
    """Likelihood of a natural disaster disrupting operations next quarter."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


@dataclass(frozen=True, slots=True)
class HistoricalRevenuePoint:
    """Revenue reported for one period, e.g. label "Q1 23"."""

    label: str
    revenue: float


@dataclass(frozen=True)
class PredictionInput:
    """Everything the engine needs from the company for one prediction."""

    historical_revenue: List[HistoricalRevenuePoint] = field(default_factory=list)
    production_capacity: float = 0.0
    marketing_spend: float = 0.0
    labor_cost_index: float = 1.0
    company_lifecycle_stage: Optional[LifecycleStage] = None
    natural_disaster_likelihood: Optional[DisasterLikelihood] = None

    # Optional operational metrics
    confirmed_orders_value: Optional[float] = None
    order_backlog: Optional[float] = None
    top3_buyers_percentage: Optional[float] = None
    buyer_retention_rate: Optional[float] = None
    first_pass_quality_rate: Optional[float] = None
    on_time_delivery_rate: Optional[float] = None
    current_exchange_rate: Optional[float] = None

    @property
    def revenues(self) -> List[float]:
        """Revenue values in chronological order."""
        return [point.revenue for point in self.historical_revenue]

    @property
    def latest_revenue(self) -> float:
        if not self.historical_revenue:
            return 0.0
        return self.historical_revenue[-1].revenue


def is_reported(value: Optional[float]) -> bool:
    """A metric counts as reported only when present and strictly positive."""
    return value is not None and value > 0
