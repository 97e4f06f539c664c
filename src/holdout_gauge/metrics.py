"""
Classification Metrics Calculation

Folds (predicted, actual) pairs into a confusion matrix and derives
accuracy, precision, recall, and F1. A metric whose denominator is zero
is reported as None and signalled with an UndefinedMetricWarning.
"""

from __future__ import annotations

import logging
import warnings
from functools import reduce
from typing import Iterable, Sequence

from holdout_gauge.domain.exceptions import UndefinedMetricWarning
from holdout_gauge.domain.value_objects import ConfusionMatrix, MetricsReport, PredictionPair

logger = logging.getLogger(__name__)


def tally_confusion_matrix(pairs: Iterable[tuple[bool, bool]]) -> ConfusionMatrix:
    """
    Count prediction pairs into the four confusion-matrix buckets

    Args:
        pairs: (predicted, actual) pairs; truthy values count as positive

    Returns:
        ConfusionMatrix whose counts sum to the number of pairs

    Raises:
        ValueError: If no pairs are given
    """
    matrix = reduce(
        lambda acc, pair: acc.add(PredictionPair(bool(pair[0]), bool(pair[1]))),
        pairs,
        ConfusionMatrix(),
    )
    if matrix.total == 0:
        raise ValueError("at least one prediction pair is required")
    return matrix


def _ratio(name: str, numerator: int, denominator: int | float) -> float | None:
    if denominator == 0:
        message = f"{name} is undefined: denominator is zero"
        logger.warning(message)
        # _ratio -> _derive_metrics -> public entry point -> caller
        warnings.warn(message, UndefinedMetricWarning, stacklevel=4)
        return None
    return numerator / denominator


def _derive_metrics(matrix: ConfusionMatrix) -> MetricsReport:
    tp = matrix.true_positive
    tn = matrix.true_negative
    fp = matrix.false_positive
    fn = matrix.false_negative

    accuracy = _ratio("accuracy", tp + tn, matrix.total)
    precision = _ratio("precision", tp, tp + fp)
    recall = _ratio("recall", tp, tp + fn)

    if precision is None or recall is None:
        f1 = None
        message = "f1 is undefined: precision or recall is undefined"
        logger.warning(message)
        warnings.warn(message, UndefinedMetricWarning, stacklevel=3)
    else:
        f1 = _ratio("f1", 2 * precision * recall, precision + recall)

    return MetricsReport(accuracy=accuracy, precision=precision, recall=recall, f1=f1)


def compute_metrics(matrix: ConfusionMatrix) -> MetricsReport:
    """
    Derive accuracy, precision, recall, and F1 from a confusion matrix

    Args:
        matrix: ConfusionMatrix

    Returns:
        MetricsReport (None for each undefined metric)
    """
    return _derive_metrics(matrix)


def evaluate_pairs(
    pairs: Iterable[tuple[bool, bool]],
) -> tuple[ConfusionMatrix, MetricsReport]:
    """Tally pairs and derive metrics in one step"""
    matrix = tally_confusion_matrix(pairs)
    return matrix, _derive_metrics(matrix)


def evaluate_predictions(
    predicted: Sequence[bool],
    actual: Sequence[bool],
) -> tuple[ConfusionMatrix, MetricsReport]:
    """
    Evaluate aligned predicted and actual label sequences

    Args:
        predicted: Predicted labels, one per test record
        actual: Ground-truth labels in the same order

    Returns:
        Tuple of (ConfusionMatrix, MetricsReport)

    Raises:
        ValueError: If the sequences differ in length or are empty
    """
    if len(predicted) != len(actual):
        raise ValueError(
            f"predicted and actual must have the same length ({len(predicted)} != {len(actual)})"
        )
    matrix = tally_confusion_matrix(zip(predicted, actual))
    return matrix, _derive_metrics(matrix)


def pool_matrices(matrices: Iterable[ConfusionMatrix]) -> ConfusionMatrix:
    """Sum confusion matrices, e.g. across trials"""
    return reduce(lambda acc, m: acc.merge(m), matrices, ConfusionMatrix())
