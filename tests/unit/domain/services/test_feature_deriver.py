from __future__ import annotations

import pytest

from garment_forecast.domain.entities.external_context import (
    DEFAULT_EXTERNAL_CONTEXT,
    EconomicIndicators,
    ExternalContext,
    RawMaterialPrices,
)
from garment_forecast.domain.services.feature_deriver import (
    assess_data_quality,
    assess_economic_conditions,
    calculate_buyer_risk,
    calculate_exchange_rate_impact,
    calculate_growth_rate,
    calculate_market_position,
    calculate_operational_efficiency,
    calculate_order_pipeline_strength,
    calculate_overall_risk,
    calculate_raw_material_impact,
    calculate_seasonality,
    calculate_volatility,
    derive_features,
)


def test_growth_rate_uses_value_six_periods_back():
    revenues = [1_000_000] * 6 + [1_100_000]
    assert calculate_growth_rate(revenues, 6) == pytest.approx(10.0)


def test_growth_rate_needs_enough_history():
    assert calculate_growth_rate([100, 200, 300], 6) == 0.0


def test_growth_rate_zero_base_returns_zero():
    assert calculate_growth_rate([0, 1, 1, 1, 1, 1, 5], 6) == 0.0


def test_growth_rate_can_be_negative():
    revenues = [200, 190, 180, 170, 160, 150, 100]
    assert calculate_growth_rate(revenues, 6) == pytest.approx(-50.0)


def test_volatility_is_population_coefficient_of_variation():
    # mean 20, population std-dev sqrt(200/3)
    assert calculate_volatility([10, 20, 30]) == pytest.approx(40.82, abs=0.01)


def test_volatility_requires_three_points():
    assert calculate_volatility([10, 20]) == 0.0


def test_volatility_zero_mean():
    assert calculate_volatility([0, 0, 0]) == 0.0


def test_seasonality_neutral_below_twelve_points(fixed_now):
    assert calculate_seasonality([1] * 11, fixed_now) == 1.0
    assert calculate_seasonality([1] * 12, fixed_now) == pytest.approx(1.3)


def test_pipeline_strength_defaults_without_orders(make_input):
    assert calculate_order_pipeline_strength(make_input()) == 50.0
    assert (
        calculate_order_pipeline_strength(make_input(confirmed_orders_value=0)) == 50.0
    )


def test_pipeline_strength_is_orders_over_average_revenue(make_input):
    prediction_input = make_input(revenues=[100, 100, 100], confirmed_orders_value=150)
    assert calculate_order_pipeline_strength(prediction_input) == pytest.approx(150.0)


def test_pipeline_strength_is_capped(make_input):
    prediction_input = make_input(revenues=[100], confirmed_orders_value=1_000)
    assert calculate_order_pipeline_strength(prediction_input) == 200.0


@pytest.mark.parametrize(
    "share, expected",
    [(None, 50), (85, 90), (80, 70), (65, 70), (45, 50), (40, 30), (10, 30)],
)
def test_buyer_risk_steps(make_input, share, expected):
    assert calculate_buyer_risk(make_input(top3_buyers_percentage=share)) == expected


def test_operational_efficiency_without_metrics(make_input):
    # Utilization saturates at 100 whenever there is revenue.
    assert calculate_operational_efficiency(make_input()) == pytest.approx(76.0)


def test_operational_efficiency_with_metrics(make_input):
    prediction_input = make_input(first_pass_quality_rate=95, on_time_delivery_rate=100)
    # 70 + 10*0.5 + 10*0.3 + 30*0.2
    assert calculate_operational_efficiency(prediction_input) == pytest.approx(84.0)


def test_operational_efficiency_empty_history(make_input):
    assert calculate_operational_efficiency(make_input(revenues=[])) == 70.0


def test_operational_efficiency_is_clamped(make_input):
    prediction_input = make_input(
        revenues=[], first_pass_quality_rate=1, on_time_delivery_rate=1
    )
    # 70 - 42 - 26.7 = 1.3, still inside the range
    assert calculate_operational_efficiency(prediction_input) == pytest.approx(1.3)


def test_market_position_defaults(make_input):
    assert calculate_market_position(make_input()) == pytest.approx(80.5)


def test_market_position_uses_reported_metrics(make_input):
    prediction_input = make_input(
        buyer_retention_rate=90, first_pass_quality_rate=80, on_time_delivery_rate=70
    )
    assert calculate_market_position(prediction_input) == pytest.approx(81.0)


def test_exchange_rate_impact_against_baseline():
    assert calculate_exchange_rate_impact(320.0) == 0.0
    assert calculate_exchange_rate_impact(352.0) == pytest.approx(0.1)
    assert calculate_exchange_rate_impact(288.0) == pytest.approx(0.1)


def test_raw_material_impact():
    prices = RawMaterialPrices(
        cotton_price_local=420, polyester_price_local=1, dye_cost_index=1
    )
    assert calculate_raw_material_impact(prices) == pytest.approx(1.2)
    assert calculate_raw_material_impact(None) == 1.0


def test_economic_conditions_score():
    indicators = EconomicIndicators(
        gdp_growth_rate=1.8,
        inflation_rate=5.5,
        export_growth_rate=4.2,
        unemployment_rate=4.9,
    )
    assert assess_economic_conditions(indicators) == pytest.approx(60.6)
    assert assess_economic_conditions(None) == 60.0


def test_economic_conditions_clamped():
    boom = EconomicIndicators(20, 0, 20, 0)
    bust = EconomicIndicators(-10, 40, -10, 20)
    assert assess_economic_conditions(boom) == 100.0
    assert assess_economic_conditions(bust) == 0.0


def test_overall_risk_defaults(make_input):
    # 0.5*40 + 0.15*30 + (5.5/320)*30
    risk = calculate_overall_risk(make_input(), DEFAULT_EXTERNAL_CONTEXT)
    assert risk == pytest.approx(25.02, abs=0.01)


def test_overall_risk_reads_reported_metrics(make_input):
    context = ExternalContext(exchange_rate=320.0)
    prediction_input = make_input(top3_buyers_percentage=50, first_pass_quality_rate=90)
    assert calculate_overall_risk(prediction_input, context) == pytest.approx(23.0)


def test_data_quality_score(make_input):
    assert assess_data_quality(make_input()) == 50
    rich = make_input(
        revenues=[1] * 24,
        confirmed_orders_value=10,
        first_pass_quality_rate=90,
        on_time_delivery_rate=90,
        buyer_retention_rate=90,
        current_exchange_rate=300,
    )
    assert assess_data_quality(rich) == 95


def test_derive_features_worked_example(sample_input, fixed_now):
    features = derive_features(sample_input, DEFAULT_EXTERNAL_CONTEXT, fixed_now)

    assert features.base_revenue == 1_100_000
    assert features.revenue_growth == pytest.approx(10.0)
    assert features.revenue_volatility == pytest.approx(3.45, abs=0.01)
    assert features.seasonality == 1.0
    assert features.order_pipeline_strength == 50.0
    assert features.buyer_concentration_risk == 50
    assert features.data_quality_score == 50
    assert features.exchange_rate_impact == pytest.approx(0.0172)
    assert features.raw_material_cost_impact == pytest.approx(1.17)
    assert features.economic_conditions == pytest.approx(60.6)


def test_derive_features_prefers_caller_exchange_rate(make_input, fixed_now):
    features = derive_features(
        make_input(current_exchange_rate=400.0), DEFAULT_EXTERNAL_CONTEXT, fixed_now
    )
    assert features.exchange_rate_impact == pytest.approx(0.25)


def test_derive_features_empty_history(make_input, fixed_now):
    features = derive_features(
        make_input(revenues=[]), DEFAULT_EXTERNAL_CONTEXT, fixed_now
    )
    assert features.base_revenue == 0.0
    assert features.revenue_growth == 0.0
    assert features.revenue_volatility == 0.0
