"""
Application Use Case - Revenue Prediction

Orchestrates one prediction call:
  * Input validation (errors surface to the caller)
  * External context loading (never fails, degrades to defaults)
  * Feature derivation, ensemble, industry adjustment and insights
  * Basic fallback when any pipeline stage raises
  * Output contract validation of the final result
"""

from __future__ import annotations

from datetime import datetime
from typing import Callable, Optional

import structlog
from pydantic import ValidationError

from garment_forecast.application.dtos.prediction_dto import PredictionResultDTO
from garment_forecast.application.use_cases.external_context_use_case import (
    LoadExternalContextUseCase,
)
from garment_forecast.domain.entities.errors import PredictionOutputError
from garment_forecast.domain.entities.prediction import PredictionResult
from garment_forecast.domain.entities.revenue import PredictionInput
from garment_forecast.domain.services.ensemble_predictor import run_ensemble
from garment_forecast.domain.services.fallback_predictor import basic_fallback
from garment_forecast.domain.services.feature_deriver import derive_features
from garment_forecast.domain.services.industry_adjuster import apply_adjustments
from garment_forecast.domain.services.input_validator import (
    validate_prediction_input,
)
from garment_forecast.domain.services.insight_generator import generate_insights
from garment_forecast.domain.services.tuning import DEFAULT_TUNING, EngineTuning

logger = structlog.get_logger(__name__)

Clock = Callable[[], datetime]


class RevenuePredictionUseCase:
    """Run the full prediction pipeline for a single company input."""

    def __init__(
        self,
        context_loader: LoadExternalContextUseCase,
        clock: Optional[Clock] = None,
        tuning: EngineTuning = DEFAULT_TUNING,
    ) -> None:
        self.context_loader = context_loader
        self._clock = clock or datetime.now
        self.tuning = tuning

    async def execute(self, prediction_input: PredictionInput) -> PredictionResult:
        """
        Predict revenue for the next month, quarter, six months and year.

        Raises:
            PredictionInputError: If the input violates the input contract
            PredictionOutputError: If the produced result breaks the output contract
        """
        validate_prediction_input(prediction_input)

        now = self._clock()
        logger.info(
            "prediction.start",
            history_points=len(prediction_input.historical_revenue),
            lifecycle_stage=prediction_input.company_lifecycle_stage.value,
        )

        try:
            result = await self._run_pipeline(prediction_input, now)
        except Exception as exc:
            logger.error(
                "prediction.pipeline_failed",
                error=str(exc),
                error_type=type(exc).__name__,
                exc_info=exc,
            )
            result = basic_fallback(prediction_input, self.tuning)
            logger.warning(
                "prediction.fallback",
                next_quarter=result.predictions.next_quarter,
                confidence=result.predictions.confidence,
            )

        self._validate_output(result)

        logger.info(
            "prediction.completed",
            next_quarter=result.predictions.next_quarter,
            confidence=result.predictions.confidence,
            adjustment_factor=result.predictions.adjustment_factor,
        )
        return result

    async def _run_pipeline(
        self, prediction_input: PredictionInput, now: datetime
    ) -> PredictionResult:
        context = await self.context_loader.execute()
        features = derive_features(prediction_input, context, now, self.tuning)
        raw = run_ensemble(features, now, self.tuning)
        predictions = apply_adjustments(raw, features, now, self.tuning)
        report = generate_insights(predictions, features, prediction_input, self.tuning)

        logger.debug(
            "prediction.pipeline_completed",
            data_quality_score=features.data_quality_score,
            overall_risk_score=features.overall_risk_score,
            adjustment_factor=predictions.adjustment_factor,
        )
        return PredictionResult(
            predictions=predictions,
            insights=report.insights,
            accuracy=report.accuracy,
            recommendations=report.recommendations,
        )

    def _validate_output(self, result: PredictionResult) -> None:
        try:
            PredictionResultDTO.from_domain(result)
        except ValidationError as exc:
            logger.error(
                "prediction.output_invalid",
                errors=exc.errors(include_url=False),
            )
            raise PredictionOutputError(
                "Prediction result violates the output contract.",
                details={"errors": exc.errors(include_url=False)},
            ) from exc
