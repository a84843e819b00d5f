from __future__ import annotations

from dataclasses import replace
from datetime import datetime

import pytest

from garment_forecast.domain.entities.external_context import DEFAULT_EXTERNAL_CONTEXT
from garment_forecast.domain.entities.prediction import RawPredictions
from garment_forecast.domain.entities.revenue import DisasterLikelihood, LifecycleStage
from garment_forecast.domain.services.feature_deriver import derive_features
from garment_forecast.domain.services.industry_adjuster import (
    adjustment_factors,
    apply_adjustments,
    compute_adjustment_factor,
)


@pytest.fixture()
def neutral_features(sample_input, fixed_now):
    return derive_features(sample_input, DEFAULT_EXTERNAL_CONTEXT, fixed_now)


def test_neutral_case_applies_only_trade_preference(neutral_features, fixed_now):
    assert adjustment_factors(neutral_features, fixed_now) == [
        ("trade_preference", 1.03)
    ]
    assert compute_adjustment_factor(neutral_features, fixed_now) == pytest.approx(1.03)


def test_monsoon_and_ramadan_windows(neutral_features):
    august = datetime(2026, 8, 1)
    ramadan = datetime(2026, 3, 1)
    assert ("monsoon_season", 0.95) in adjustment_factors(neutral_features, august)
    assert ("ramadan_period", 0.92) in adjustment_factors(neutral_features, ramadan)


def test_all_penalties_stack(neutral_features):
    stressed = replace(
        neutral_features,
        company_lifecycle_stage=LifecycleStage.DECLINE,
        natural_disaster_likelihood=DisasterLikelihood.HIGH,
        exchange_rate_impact=0.2,
        operational_efficiency=60.0,
        labor_cost_index=1.3,
    )
    factor = compute_adjustment_factor(stressed, datetime(2026, 11, 10))
    expected = 0.9 * 0.85 * 0.97 * 0.95 * 1.03 * 0.98
    assert factor == pytest.approx(expected)


def test_bonuses_stack(neutral_features, fixed_now):
    boosted = replace(
        neutral_features,
        company_lifecycle_stage=LifecycleStage.STARTUP,
        operational_efficiency=95.0,
        marketing_spend=2_000_000,
    )
    names = [name for name, _ in adjustment_factors(boosted, fixed_now)]
    assert names == [
        "lifecycle_stage",
        "operational_efficiency",
        "trade_preference",
        "marketing_spend",
    ]
    assert compute_adjustment_factor(boosted, fixed_now) == pytest.approx(
        1.1 * 1.05 * 1.03 * 1.02
    )


def test_apply_adjustments_rounds_each_horizon(neutral_features, fixed_now):
    raw = RawPredictions(
        next_month=100.0,
        next_quarter=1_000.0,
        next_six_months=2_000.0,
        next_year=4_000.0,
        confidence=80,
    )
    adjusted = apply_adjustments(raw, neutral_features, fixed_now)
    assert adjusted.next_month == 103
    assert adjusted.next_quarter == 1_030
    assert adjusted.next_six_months == 2_060
    assert adjusted.next_year == 4_120
    assert adjusted.confidence == 80
    assert adjusted.adjustment_factor == 1.03


def test_apply_adjustments_never_negative(neutral_features, fixed_now):
    raw = RawPredictions(
        next_month=-10.0,
        next_quarter=-30.0,
        next_six_months=-60.0,
        next_year=-120.0,
        confidence=60,
    )
    adjusted = apply_adjustments(raw, neutral_features, fixed_now)
    assert adjusted.next_month == 0
    assert adjusted.next_year == 0
