"""
Application Use Case - External Context Loading

Fetches the market snapshot once per prediction call. The loader never
raises: a missing record, a provider error, a timeout or a malformed
snapshot all degrade to the built-in default context.
"""

from __future__ import annotations

import asyncio

import structlog

from garment_forecast.domain.entities.errors import ExternalContextError
from garment_forecast.domain.entities.external_context import (
    DEFAULT_EXTERNAL_CONTEXT,
    ExternalContext,
)
from garment_forecast.domain.entities.revenue import is_reported
from garment_forecast.domain.gateways.external_context_gateway import (
    IExternalContextProvider,
)

logger = structlog.get_logger(__name__)


class LoadExternalContextUseCase:
    """Resolve the external context for one prediction call."""

    def __init__(
        self,
        provider: IExternalContextProvider,
        timeout_seconds: float = 5.0,
        fallback: ExternalContext = DEFAULT_EXTERNAL_CONTEXT,
    ) -> None:
        self.provider = provider
        self.timeout_seconds = timeout_seconds
        self.fallback = fallback

    async def execute(self) -> ExternalContext:
        try:
            context = await asyncio.wait_for(
                self.provider.fetch(), timeout=self.timeout_seconds
            )
        except asyncio.TimeoutError:
            logger.warning(
                "external_context.timeout", timeout_seconds=self.timeout_seconds
            )
            return self.fallback
        except ExternalContextError as exc:
            logger.warning(
                "external_context.fetch_failed",
                error=exc.message,
                details=exc.details,
            )
            return self.fallback
        except Exception as exc:
            logger.warning(
                "external_context.fetch_failed",
                error=str(exc),
                error_type=type(exc).__name__,
            )
            return self.fallback

        if not isinstance(context, ExternalContext) or not is_reported(
            context.exchange_rate
        ):
            logger.warning(
                "external_context.malformed", received=type(context).__name__
            )
            return self.fallback

        logger.debug(
            "external_context.loaded",
            exchange_rate=context.exchange_rate,
            has_raw_material_prices=context.raw_material_prices is not None,
            has_economic_indicators=context.economic_indicators is not None,
        )
        return context
