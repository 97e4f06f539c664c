"""
Predictor package

Provides a unified interface to the classifiers fitted during evaluation.
"""

from holdout_gauge.infrastructure.predictors.base import Predictor, apply_threshold
from holdout_gauge.infrastructure.predictors.factory import AVAILABLE_PREDICTORS, create_predictor

__all__ = ["AVAILABLE_PREDICTORS", "Predictor", "apply_threshold", "create_predictor"]
