"""
Domain Value Objects

Defines immutable values derived from predictions: prediction pairs,
the confusion matrix, and the metrics report.
"""

from dataclasses import dataclass
from typing import NamedTuple


class PredictionPair(NamedTuple):
    """A (predicted, actual) label pair for one test record"""
    predicted: bool
    actual: bool


@dataclass(frozen=True)
class ConfusionMatrix:
    """2x2 counts of predicted x actual outcomes"""
    true_positive: int = 0
    true_negative: int = 0
    false_positive: int = 0
    false_negative: int = 0

    def __post_init__(self):
        for name in ("true_positive", "true_negative", "false_positive", "false_negative"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be non-negative")

    @property
    def total(self) -> int:
        return self.true_positive + self.true_negative + self.false_positive + self.false_negative

    def add(self, pair: PredictionPair) -> "ConfusionMatrix":
        """Return a new matrix with the bucket for ``pair`` incremented"""
        predicted, actual = bool(pair[0]), bool(pair[1])
        if actual and predicted:
            return ConfusionMatrix(self.true_positive + 1, self.true_negative,
                                   self.false_positive, self.false_negative)
        if actual:
            return ConfusionMatrix(self.true_positive, self.true_negative,
                                   self.false_positive, self.false_negative + 1)
        if predicted:
            return ConfusionMatrix(self.true_positive, self.true_negative,
                                   self.false_positive + 1, self.false_negative)
        return ConfusionMatrix(self.true_positive, self.true_negative + 1,
                               self.false_positive, self.false_negative)

    def merge(self, other: "ConfusionMatrix") -> "ConfusionMatrix":
        """Element-wise sum of two matrices"""
        return ConfusionMatrix(
            self.true_positive + other.true_positive,
            self.true_negative + other.true_negative,
            self.false_positive + other.false_positive,
            self.false_negative + other.false_negative,
        )


@dataclass(frozen=True)
class MetricsReport:
    """
    Metrics derived from a confusion matrix

    A value of None marks the metric as undefined (zero denominator).
    It is never coerced to 0.0 or NaN.
    """
    accuracy: float | None
    precision: float | None
    recall: float | None
    f1: float | None

    def __post_init__(self):
        for name in ("accuracy", "precision", "recall", "f1"):
            value = getattr(self, name)
            if value is not None and not 0.0 <= value <= 1.0:
                raise ValueError(f"{name} must be within [0, 1] or None")

    @property
    def undefined_metrics(self) -> list[str]:
        """Names of the metrics that are undefined"""
        return [
            name for name in ("accuracy", "precision", "recall", "f1")
            if getattr(self, name) is None
        ]

    def is_defined(self, name: str) -> bool:
        return getattr(self, name) is not None
