"""
Domain Layer

Defines constants, entities, value objects, and exceptions that form the core of the evaluation logic.
Has no dependencies on external libraries.
"""

from holdout_gauge.domain.constants import (
    AGGREGATION_METHODS,
    DECISION_THRESHOLD,
    DEFAULT_OUTCOME_FIELD,
    DEFAULT_TRAIN_FRACTION,
    METRIC_NAMES,
    RESAMPLING_POLICIES,
)
from holdout_gauge.domain.entities import (
    BalancedTrainingSet,
    EvaluationResult,
    Split,
)
from holdout_gauge.domain.exceptions import (
    EmptyClassError,
    EmptyPartitionWarning,
    EvaluationError,
    InvalidFractionError,
    PredictionLengthError,
    UndefinedMetricWarning,
)
from holdout_gauge.domain.value_objects import (
    ConfusionMatrix,
    MetricsReport,
    PredictionPair,
)

__all__ = [
    # constants
    "AGGREGATION_METHODS",
    "DECISION_THRESHOLD",
    "DEFAULT_OUTCOME_FIELD",
    "DEFAULT_TRAIN_FRACTION",
    "METRIC_NAMES",
    "RESAMPLING_POLICIES",
    # entities
    "BalancedTrainingSet",
    "EvaluationResult",
    "Split",
    # exceptions
    "EmptyClassError",
    "EmptyPartitionWarning",
    "EvaluationError",
    "InvalidFractionError",
    "PredictionLengthError",
    "UndefinedMetricWarning",
    # value objects
    "ConfusionMatrix",
    "MetricsReport",
    "PredictionPair",
]
