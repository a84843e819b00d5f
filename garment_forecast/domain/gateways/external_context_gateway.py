"""
Domain Gateway - External Context

Capability interface for whatever source supplies the market snapshot
(exchange rate, raw material prices, macro indicators).
"""

from abc import ABC, abstractmethod

from garment_forecast.domain.entities.external_context import ExternalContext


class IExternalContextProvider(ABC):
    """Interface for external context providers."""

    @abstractmethod
    async def fetch(self) -> ExternalContext:
        """
        Fetch the current market snapshot.

        Returns:
            The current external context

        Raises:
            ExternalContextError: When the record is missing or malformed
        """
        pass
