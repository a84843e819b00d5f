"""Calendar lookups for garment-industry seasonality."""

from datetime import datetime

from garment_forecast.domain.services.tuning import DEFAULT_TUNING, EngineTuning


def seasonal_factor(now: datetime, tuning: EngineTuning = DEFAULT_TUNING) -> float:
    return tuning.seasonal_factors.get(now.month, 1.0)


def is_monsoon_season(now: datetime, tuning: EngineTuning = DEFAULT_TUNING) -> bool:
    return now.month in tuning.monsoon_months


def is_ramadan_period(now: datetime, tuning: EngineTuning = DEFAULT_TUNING) -> bool:
    """True when ``now`` falls in the tabulated Ramadan window of its year."""
    window = tuning.ramadan_windows.get(now.year)
    if window is None:
        return False
    start, end = window
    return start <= now.date() <= end
