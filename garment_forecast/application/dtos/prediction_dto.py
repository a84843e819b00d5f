"""
Application DTOs - Prediction

JSON contracts of the engine. Field names are camelCase on the wire and
snake_case in Python; both spellings are accepted on input.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    TypeAdapter,
    ValidationError,
    field_validator,
)
from pydantic.alias_generators import to_camel

from garment_forecast.domain.entities.prediction import (
    HorizonPredictions,
    KeyDriver,
    PredictionInsights,
    PredictionResult,
    RiskFactor,
)
from garment_forecast.domain.entities.revenue import (
    DisasterLikelihood,
    HistoricalRevenuePoint,
    LifecycleStage,
    PredictionInput,
)

_CAMEL_CONFIG = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class HistoricalRevenuePointDTO(BaseModel):
    """One element of the historicalRevenueData JSON array."""

    label: str = Field(
        min_length=1,
        validation_alias=AliasChoices("label", "name"),
        description="Period identifier, e.g. 'Q1 23'",
    )
    revenue: float = Field(
        ge=0, strict=True, description="Revenue for the period (local currency)"
    )

    def to_domain(self) -> HistoricalRevenuePoint:
        return HistoricalRevenuePoint(label=self.label, revenue=self.revenue)


_HISTORY_ADAPTER = TypeAdapter(List[HistoricalRevenuePointDTO])


def parse_historical_revenue(raw: str) -> List[HistoricalRevenuePointDTO]:
    """
    Decode the historicalRevenueData JSON string.

    Raises:
        ValueError: If the string is not valid JSON, is not an array, or an
            element misses ``name``/``label`` or has a non-numeric revenue.
    """
    try:
        return _HISTORY_ADAPTER.validate_json(raw)
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in error['loc']) or 'root'}: {error['msg']}"
            for error in exc.errors()
        )
        raise ValueError(f"historicalRevenueData is invalid: {problems}") from None


class PredictionRequestDTO(BaseModel):
    """Input contract accepted by the prediction endpoint."""

    model_config = ConfigDict(
        **_CAMEL_CONFIG,
        json_schema_extra={
            "example": {
                "historicalRevenueData": (
                    '[{"name": "Q1 23", "revenue": 1500000}, '
                    '{"name": "Q2 23", "revenue": 1620000}]'
                ),
                "productionCapacity": 10000,
                "marketingSpend": 250000,
                "laborCostIndex": 1.0,
                "companyLifecycleStage": "growth",
                "naturalDisasterLikelihood": "low",
                "confirmedOrdersValue": 1800000,
                "top3BuyersPercentage": 55,
                "firstPassQualityRate": 92,
                "onTimeDeliveryRate": 95,
            }
        },
    )

    historical_revenue_data: str = Field(
        description="JSON array of {name|label, revenue} objects in chronological order"
    )
    production_capacity: float = Field(gt=0, description="Units per period")
    marketing_spend: float = Field(ge=0, description="Marketing spend (currency)")
    labor_cost_index: float = Field(gt=0, description="1.0 = baseline labor cost")
    company_lifecycle_stage: LifecycleStage
    natural_disaster_likelihood: DisasterLikelihood

    confirmed_orders_value: Optional[float] = Field(default=None, ge=0)
    order_backlog: Optional[float] = Field(default=None, ge=0)
    top3_buyers_percentage: Optional[float] = Field(default=None, ge=0, le=100)
    buyer_retention_rate: Optional[float] = Field(default=None, ge=0, le=100)
    first_pass_quality_rate: Optional[float] = Field(default=None, ge=0, le=100)
    on_time_delivery_rate: Optional[float] = Field(default=None, ge=0, le=100)
    current_exchange_rate: Optional[float] = Field(
        default=None, gt=0, description="Local currency per USD"
    )

    @field_validator("historical_revenue_data")
    @classmethod
    def _validate_history_json(cls, value: str) -> str:
        parse_historical_revenue(value)
        return value

    def historical_points(self) -> List[HistoricalRevenuePointDTO]:
        return parse_historical_revenue(self.historical_revenue_data)

    def to_domain(self) -> PredictionInput:
        history = [point.to_domain() for point in self.historical_points()]
        return PredictionInput(
            historical_revenue=history,
            production_capacity=self.production_capacity,
            marketing_spend=self.marketing_spend,
            labor_cost_index=self.labor_cost_index,
            company_lifecycle_stage=self.company_lifecycle_stage,
            natural_disaster_likelihood=self.natural_disaster_likelihood,
            confirmed_orders_value=self.confirmed_orders_value,
            order_backlog=self.order_backlog,
            top3_buyers_percentage=self.top3_buyers_percentage,
            buyer_retention_rate=self.buyer_retention_rate,
            first_pass_quality_rate=self.first_pass_quality_rate,
            on_time_delivery_rate=self.on_time_delivery_rate,
            current_exchange_rate=self.current_exchange_rate,
        )


class HorizonPredictionsDTO(BaseModel):
    model_config = _CAMEL_CONFIG

    next_month: int = Field(ge=0)
    next_quarter: int = Field(ge=0)
    next_six_months: int = Field(ge=0)
    next_year: int = Field(ge=0)
    confidence: int = Field(ge=0, le=100)
    adjustment_factor: float = Field(gt=0)

    @classmethod
    def from_domain(cls, predictions: HorizonPredictions) -> "HorizonPredictionsDTO":
        return cls(
            next_month=predictions.next_month,
            next_quarter=predictions.next_quarter,
            next_six_months=predictions.next_six_months,
            next_year=predictions.next_year,
            confidence=predictions.confidence,
            adjustment_factor=predictions.adjustment_factor,
        )


class KeyDriverDTO(BaseModel):
    factor: str
    impact: str
    strength: str

    @classmethod
    def from_domain(cls, driver: KeyDriver) -> "KeyDriverDTO":
        return cls(factor=driver.factor, impact=driver.impact, strength=driver.strength)


class RiskFactorDTO(BaseModel):
    risk: str
    level: str
    score: str

    @classmethod
    def from_domain(cls, risk: RiskFactor) -> "RiskFactorDTO":
        return cls(risk=risk.risk, level=risk.level, score=risk.score)


class PredictionInsightsDTO(BaseModel):
    model_config = _CAMEL_CONFIG

    key_drivers: List[KeyDriverDTO] = Field(default_factory=list)
    risk_factors: List[RiskFactorDTO] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, insights: PredictionInsights) -> "PredictionInsightsDTO":
        return cls(
            key_drivers=[KeyDriverDTO.from_domain(d) for d in insights.key_drivers],
            risk_factors=[RiskFactorDTO.from_domain(r) for r in insights.risk_factors],
        )


class PredictionResultDTO(BaseModel):
    """Output contract returned for every successful prediction call."""

    model_config = _CAMEL_CONFIG

    predictions: HorizonPredictionsDTO
    insights: PredictionInsightsDTO
    accuracy: str = Field(min_length=1, description="Static accuracy band")
    recommendations: List[str] = Field(min_length=1)

    @classmethod
    def from_domain(cls, result: PredictionResult) -> "PredictionResultDTO":
        return cls(
            predictions=HorizonPredictionsDTO.from_domain(result.predictions),
            insights=PredictionInsightsDTO.from_domain(result.insights),
            accuracy=result.accuracy,
            recommendations=list(result.recommendations),
        )
