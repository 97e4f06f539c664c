"""
Predictor factory

Creates the appropriate predictor instance based on the predictor name.
"""

from __future__ import annotations

from holdout_gauge.domain.constants import DEFAULT_OUTCOME_FIELD
from holdout_gauge.eval_config import EvalConfig, load_config
from holdout_gauge.infrastructure.predictors.base import Predictor
from holdout_gauge.infrastructure.predictors.sklearn_models import (
    LogisticRegressionPredictor,
    RandomForestPredictor,
)

AVAILABLE_PREDICTORS = ["logistic_regression", "random_forest"]


def create_predictor(
    feature_fields: list[str],
    outcome_field: str = DEFAULT_OUTCOME_FIELD,
    config: EvalConfig | None = None,
    name: str | None = None,
) -> Predictor:
    """
    Create the appropriate predictor based on its name

    Args:
        feature_fields: Record fields used as model features
        outcome_field: Record field holding the binary outcome
        config: EvalConfig (loads from env if not provided)
        name: Predictor name (default: config.model.predictor)

    Returns:
        Predictor

    Raises:
        ValueError: If the predictor name is unknown
    """
    if config is None:
        config = load_config()
    name = name or config.model.predictor
    threshold = config.model.threshold

    if name == "logistic_regression":
        return LogisticRegressionPredictor(
            feature_fields, outcome_field, threshold=threshold, max_iter=config.model.max_iter,
        )
    elif name == "random_forest":
        return RandomForestPredictor(
            feature_fields, outcome_field, threshold=threshold, random_state=config.split.seed,
        )
    raise ValueError(f"Unknown predictor: {name} (available: {AVAILABLE_PREDICTORS})")
