from __future__ import annotations

import sys
from datetime import datetime
from pathlib import Path
from typing import Callable, List, Sequence

import pytest

from garment_forecast.application.use_cases.external_context_use_case import (
    LoadExternalContextUseCase,
)
from garment_forecast.application.use_cases.revenue_prediction_use_case import (
    RevenuePredictionUseCase,
)
from garment_forecast.domain.entities.external_context import DEFAULT_EXTERNAL_CONTEXT
from garment_forecast.domain.entities.revenue import (
    DisasterLikelihood,
    HistoricalRevenuePoint,
    LifecycleStage,
    PredictionInput,
)
from garment_forecast.infrastructure.gateways.static_external_context_gateway import (
    StaticExternalContextGateway,
)

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# November: no monsoon, no Ramadan, seasonal factor 1.3
FIXED_NOW = datetime(2026, 11, 10, 12, 0, 0)

WORKED_EXAMPLE_REVENUES = (1_000_000,) * 6 + (1_100_000,)


def _make_history(revenues: Sequence[float]) -> List[HistoricalRevenuePoint]:
    return [
        HistoricalRevenuePoint(label=f"Q{idx}", revenue=value)
        for idx, value in enumerate(revenues, start=1)
    ]


def _make_input(
    revenues: Sequence[float] = WORKED_EXAMPLE_REVENUES, **overrides
) -> PredictionInput:
    fields = dict(
        historical_revenue=_make_history(revenues),
        production_capacity=10_000,
        marketing_spend=0,
        labor_cost_index=1.0,
        company_lifecycle_stage=LifecycleStage.MATURITY,
        natural_disaster_likelihood=DisasterLikelihood.LOW,
    )
    fields.update(overrides)
    return PredictionInput(**fields)


@pytest.fixture()
def fixed_now() -> datetime:
    return FIXED_NOW


@pytest.fixture()
def fixed_clock() -> Callable[[], datetime]:
    return lambda: FIXED_NOW


@pytest.fixture()
def make_input() -> Callable[..., PredictionInput]:
    """Factory for PredictionInput; defaults to the 7-point maturity company."""
    return _make_input


@pytest.fixture()
def sample_input() -> PredictionInput:
    return _make_input()


@pytest.fixture()
def static_provider() -> StaticExternalContextGateway:
    return StaticExternalContextGateway(DEFAULT_EXTERNAL_CONTEXT)


@pytest.fixture()
def prediction_use_case(static_provider, fixed_clock) -> RevenuePredictionUseCase:
    return RevenuePredictionUseCase(
        context_loader=LoadExternalContextUseCase(static_provider),
        clock=fixed_clock,
    )
