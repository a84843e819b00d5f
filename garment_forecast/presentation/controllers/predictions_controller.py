"""
Presentation Layer - Predictions Controller

Exposes the revenue prediction endpoint.
"""

import structlog
from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, HTTPException, status

from garment_forecast.application.dtos.prediction_dto import (
    PredictionRequestDTO,
    PredictionResultDTO,
)
from garment_forecast.application.use_cases.revenue_prediction_use_case import (
    RevenuePredictionUseCase,
)
from garment_forecast.domain.entities.errors import (
    PredictionInputError,
    PredictionOutputError,
)
from garment_forecast.main.container import AppContainer

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/predictions", tags=["Predictions"])


@router.post(
    "",
    response_model=PredictionResultDTO,
    summary="Predict company revenue",
    description="""
    Forecast revenue for the next month, quarter, six months and year from
    the company's revenue history and operating metrics, adjusted for
    garment-industry conditions. Also returns key drivers, risk factors and
    recommendations. When the full engine fails a trend-only fallback
    forecast is returned with a lower confidence.
    """,
)
@inject
async def predict_revenue(
    payload: PredictionRequestDTO,
    prediction_use_case: RevenuePredictionUseCase = Depends(
        Provide[AppContainer.revenue_prediction_use_case]
    ),
) -> PredictionResultDTO:
    try:
        result = await prediction_use_case.execute(payload.to_domain())
        return PredictionResultDTO.from_domain(result)
    except PredictionInputError as exc:
        logger.info("prediction.input_rejected", errors=exc.details.get("errors"))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"message": exc.message, **exc.details},
        )
    except PredictionOutputError as exc:
        logger.error("prediction.output_contract_violation", error=exc.message)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Prediction result violated the output contract",
        )
