"""In-process external context provider returning a fixed snapshot."""

from garment_forecast.domain.entities.external_context import (
    DEFAULT_EXTERNAL_CONTEXT,
    ExternalContext,
)
from garment_forecast.domain.gateways.external_context_gateway import (
    IExternalContextProvider,
)


class StaticExternalContextGateway(IExternalContextProvider):
    """Serves a configured snapshot; used offline and in tests."""

    def __init__(self, context: ExternalContext = DEFAULT_EXTERNAL_CONTEXT) -> None:
        self._context = context

    async def fetch(self) -> ExternalContext:
        return self._context
