"""
Domain Services Package

Pure prediction stages: feature derivation, ensemble, industry adjustment,
insight generation, the basic fallback, and input validation.
"""

from .ensemble_predictor import run_ensemble
from .fallback_predictor import basic_fallback
from .feature_deriver import derive_features
from .industry_adjuster import adjustment_factors, apply_adjustments
from .input_validator import validate_prediction_input
from .insight_generator import generate_insights
from .tuning import DEFAULT_TUNING, EngineTuning, EnsembleWeights, HorizonMultipliers

__all__ = [
    "DEFAULT_TUNING",
    "EngineTuning",
    "EnsembleWeights",
    "HorizonMultipliers",
    "adjustment_factors",
    "apply_adjustments",
    "basic_fallback",
    "derive_features",
    "generate_insights",
    "run_ensemble",
    "validate_prediction_input",
]
