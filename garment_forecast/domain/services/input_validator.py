"""Domain service helpers for validating prediction inputs."""

import math
from typing import List, Optional

from garment_forecast.domain.entities.errors import PredictionInputError
from garment_forecast.domain.entities.revenue import (
    DisasterLikelihood,
    HistoricalRevenuePoint,
    LifecycleStage,
    PredictionInput,
)

PERCENTAGE_FIELDS = (
    "top3_buyers_percentage",
    "buyer_retention_rate",
    "first_pass_quality_rate",
    "on_time_delivery_rate",
)
NON_NEGATIVE_OPTIONAL_FIELDS = ("confirmed_orders_value", "order_backlog")
# Ceiling for any money amount; larger values overflow the horizon arithmetic.
MAX_MONETARY_VALUE = 1e15


def _is_number(value: object) -> bool:
    return (
        isinstance(value, (int, float))
        and not isinstance(value, bool)
        and math.isfinite(value)
    )


def _validate_history(
    points: List[HistoricalRevenuePoint], errors: List[str]
) -> None:
    for idx, point in enumerate(points, start=1):
        prefix = f"Historical revenue point #{idx}"
        if not isinstance(point, HistoricalRevenuePoint):
            errors.append(f"{prefix} must be a HistoricalRevenuePoint.")
            continue
        if not isinstance(point.label, str) or not point.label.strip():
            errors.append(f"{prefix} must have a non-empty label.")
        if not _is_number(point.revenue):
            errors.append(f"{prefix} revenue must be numeric.")
        elif point.revenue < 0:
            errors.append(f"{prefix} revenue cannot be negative.")
        elif point.revenue > MAX_MONETARY_VALUE:
            errors.append(
                f"{prefix} revenue cannot exceed {MAX_MONETARY_VALUE:g}."
            )


def _validate_optional(
    name: str,
    value: Optional[float],
    errors: List[str],
    *,
    upper: Optional[float] = None,
    strictly_positive: bool = False,
) -> None:
    if value is None:
        return
    label = name.replace("_", " ").capitalize()
    if not _is_number(value):
        errors.append(f"{label} must be numeric when provided.")
        return
    if strictly_positive and value <= 0:
        errors.append(f"{label} must be greater than 0 when provided.")
    elif value < 0:
        errors.append(f"{label} cannot be negative.")
    if upper is not None and value > upper:
        errors.append(f"{label} must be between 0 and {upper:g}.")


def validate_prediction_input(prediction_input: PredictionInput) -> None:
    """Validate a prediction input before the pipeline runs.

    Raises:
        PredictionInputError: If one or more validation rules fail.
    """

    errors: List[str] = []

    _validate_history(list(prediction_input.historical_revenue), errors)

    if not isinstance(prediction_input.company_lifecycle_stage, LifecycleStage):
        errors.append(
            "Company lifecycle stage must be one of: "
            + ", ".join(stage.value for stage in LifecycleStage)
            + "."
        )
    if not isinstance(prediction_input.natural_disaster_likelihood, DisasterLikelihood):
        errors.append(
            "Natural disaster likelihood must be one of: "
            + ", ".join(level.value for level in DisasterLikelihood)
            + "."
        )

    if not _is_number(prediction_input.production_capacity) or (
        prediction_input.production_capacity <= 0
    ):
        errors.append("Production capacity must be greater than 0.")
    if not _is_number(prediction_input.marketing_spend) or (
        prediction_input.marketing_spend < 0
    ):
        errors.append("Marketing spend cannot be negative.")
    elif prediction_input.marketing_spend > MAX_MONETARY_VALUE:
        errors.append(f"Marketing spend cannot exceed {MAX_MONETARY_VALUE:g}.")
    if not _is_number(prediction_input.labor_cost_index) or (
        prediction_input.labor_cost_index <= 0
    ):
        errors.append("Labor cost index must be greater than 0.")

    for name in PERCENTAGE_FIELDS:
        _validate_optional(name, getattr(prediction_input, name), errors, upper=100.0)
    for name in NON_NEGATIVE_OPTIONAL_FIELDS:
        _validate_optional(
            name, getattr(prediction_input, name), errors, upper=MAX_MONETARY_VALUE
        )
    _validate_optional(
        "current_exchange_rate",
        prediction_input.current_exchange_rate,
        errors,
        strictly_positive=True,
    )

    if errors:
        raise PredictionInputError(
            "Prediction input is invalid.", details={"errors": errors}
        )
