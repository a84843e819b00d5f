"""MongoDB-backed external context provider."""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Sequence

from pymongo.errors import PyMongoError

from garment_forecast.domain.entities.errors import (
    ExternalContextError,
    ExternalContextNotFoundError,
)
from garment_forecast.domain.entities.external_context import (
    EconomicIndicators,
    ExternalContext,
    RawMaterialPrices,
)
from garment_forecast.domain.gateways.external_context_gateway import (
    IExternalContextProvider,
)
from garment_forecast.infrastructure.database.mongo_database import MongoDatabase
from garment_forecast.shared import get_logger

logger = get_logger(__name__)


def _pick(source: Mapping[str, Any], keys: Sequence[str]) -> Any:
    for key in keys:
        if key in source and source[key] is not None:
            return source[key]
    return None


def _as_float(source: Mapping[str, Any], *keys: str) -> float:
    value = _pick(source, keys)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ExternalContextError(
            "External context field is missing or not numeric",
            details={"field": keys[0], "value": repr(value)},
        )
    return float(value)


def _section(document: Mapping[str, Any], *keys: str) -> Optional[Mapping[str, Any]]:
    section = _pick(document, keys)
    if section is None:
        return None
    if not isinstance(section, Mapping):
        raise ExternalContextError(
            "External context section is not an object",
            details={"field": keys[0]},
        )
    return section


def parse_external_context(document: Mapping[str, Any]) -> ExternalContext:
    """
    Map a stored document to an ExternalContext.

    Both camelCase and snake_case keys are accepted. Cotton and polyester
    prices may be stored with the legacy ``...LKR`` suffix.

    Raises:
        ExternalContextError: If a required field is missing or malformed
    """
    exchange_rate = _as_float(document, "exchangeRate", "exchange_rate")
    if exchange_rate <= 0:
        raise ExternalContextError(
            "External context exchange rate must be positive",
            details={"field": "exchangeRate", "value": exchange_rate},
        )

    prices: Optional[RawMaterialPrices] = None
    raw_prices = _section(document, "rawMaterialPrices", "raw_material_prices")
    if raw_prices is not None:
        prices = RawMaterialPrices(
            cotton_price_local=_as_float(
                raw_prices, "cottonPriceLocal", "cottonPriceLKR", "cotton_price_local"
            ),
            polyester_price_local=_as_float(
                raw_prices,
                "polyesterPriceLocal",
                "polyesterPriceLKR",
                "polyester_price_local",
            ),
            dye_cost_index=_as_float(raw_prices, "dyeCostIndex", "dye_cost_index"),
        )

    indicators: Optional[EconomicIndicators] = None
    raw_indicators = _section(document, "economicIndicators", "economic_indicators")
    if raw_indicators is not None:
        indicators = EconomicIndicators(
            gdp_growth_rate=_as_float(
                raw_indicators, "gdpGrowthRate", "gdp_growth_rate"
            ),
            inflation_rate=_as_float(raw_indicators, "inflationRate", "inflation_rate"),
            export_growth_rate=_as_float(
                raw_indicators, "exportGrowthRate", "export_growth_rate"
            ),
            unemployment_rate=_as_float(
                raw_indicators, "unemploymentRate", "unemployment_rate"
            ),
        )

    return ExternalContext(
        exchange_rate=exchange_rate,
        raw_material_prices=prices,
        economic_indicators=indicators,
    )


class MongoExternalContextGateway(IExternalContextProvider):
    """Reads the current market snapshot from a single keyed document."""

    def __init__(
        self,
        mongo_database: MongoDatabase,
        collection_name: str = "external_data",
        document_id: str = "current",
    ) -> None:
        self._database = mongo_database
        self._collection_name = collection_name
        self._document_id = document_id

    async def fetch(self) -> ExternalContext:
        try:
            document: Optional[Dict[str, Any]] = await self._database.find_one(
                self._collection_name, {"id": self._document_id}
            )
        except PyMongoError as exc:
            logger.error(
                "external_context.mongo.query_failed",
                collection=self._collection_name,
                document_id=self._document_id,
                error=str(exc),
            )
            raise ExternalContextError(
                f"Failed to read external context: {exc}",
                details={"collection": self._collection_name},
            ) from exc

        if document is None:
            raise ExternalContextNotFoundError(
                self._document_id, details={"collection": self._collection_name}
            )

        context = parse_external_context(document)
        logger.debug(
            "external_context.mongo.loaded",
            collection=self._collection_name,
            document_id=self._document_id,
            exchange_rate=context.exchange_rate,
        )
        return context
