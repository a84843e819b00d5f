"""Small numeric helpers shared by the prediction stages."""

import math

# Largest absolute amount a horizon can hold; infinite values saturate here.
MAX_AMOUNT = 10**18


def clamp(value: float, lower: float, upper: float) -> float:
    return max(lower, min(upper, value))


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up (2.5 -> 3, -2.5 -> -2).

    Values beyond ``MAX_AMOUNT``, infinities included, saturate at
    ``±MAX_AMOUNT``.

    Raises:
        ValueError: If ``value`` is NaN.
    """
    if math.isnan(value):
        raise ValueError("Cannot round NaN")
    if abs(value) >= MAX_AMOUNT:
        return MAX_AMOUNT if value > 0 else -MAX_AMOUNT
    return int(math.floor(value + 0.5))
