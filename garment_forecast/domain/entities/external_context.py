"""Domain entities for macroeconomic and market context."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True, slots=True)
class RawMaterialPrices:
    """Local-currency raw material prices."""

    cotton_price_local: float
    polyester_price_local: float
    dye_cost_index: float


@dataclass(frozen=True, slots=True)
class EconomicIndicators:
    """Headline macro indicators, all expressed in percent."""

    gdp_growth_rate: float
    inflation_rate: float
    export_growth_rate: float
    unemployment_rate: float


@dataclass(frozen=True, slots=True)
class ExternalContext:
    """Market snapshot fetched once per prediction call."""

    exchange_rate: float
    raw_material_prices: Optional[RawMaterialPrices] = None
    economic_indicators: Optional[EconomicIndicators] = None


DEFAULT_EXTERNAL_CONTEXT = ExternalContext(
    exchange_rate=325.50,
    raw_material_prices=RawMaterialPrices(
        cotton_price_local=410.0,
        polyester_price_local=360.0,
        dye_cost_index=1.05,
    ),
    economic_indicators=EconomicIndicators(
        gdp_growth_rate=1.8,
        inflation_rate=5.5,
        export_growth_rate=4.2,
        unemployment_rate=4.9,
    ),
)
