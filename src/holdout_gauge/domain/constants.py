"""
Domain Constants

Centrally manages constants shared across the evaluation pipeline.
"""

# Fraction of the dataset assigned to the training partition
DEFAULT_TRAIN_FRACTION = 0.8

# Continuous scores at or above this value are predicted positive
DECISION_THRESHOLD = 0.5

# Name of the binary label field on each record
DEFAULT_OUTCOME_FIELD = "outcome"

# Resampling policies applied to the training partition
RESAMPLING_POLICIES = ["undersample", "none"]
AGGREGATION_METHODS = ["mean", "median"]

# Metrics reported for each evaluation, in display order
METRIC_NAMES = ["accuracy", "precision", "recall", "f1"]

# Values accepted as a positive / negative outcome when loading text columns
TRUE_STRINGS = {"true", "t", "yes", "y", "1"}
FALSE_STRINGS = {"false", "f", "no", "n", "0"}
