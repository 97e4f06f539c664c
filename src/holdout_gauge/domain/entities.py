"""
Domain Entities

Defines the partitions produced during an evaluation run and the
result of a single run.
"""

from dataclasses import dataclass
from typing import Any, Sequence

from holdout_gauge.domain.value_objects import ConfusionMatrix, MetricsReport


@dataclass(frozen=True)
class Split:
    """Disjoint, exhaustive train/test partition of a dataset"""
    train: Sequence[Any]
    test: Sequence[Any]

    def __len__(self) -> int:
        return len(self.train) + len(self.test)


@dataclass(frozen=True)
class BalancedTrainingSet:
    """Training records with an exact 1:1 class ratio"""
    records: Sequence[Any]
    positives: int
    negatives: int

    def __post_init__(self):
        if self.positives != self.negatives:
            raise ValueError("positives and negatives must be equal")
        if len(self.records) != self.positives + self.negatives:
            raise ValueError("records length must equal positives + negatives")

    def __len__(self) -> int:
        return len(self.records)


@dataclass
class EvaluationResult:
    """Result of a single evaluation trial"""
    run_id: str
    trial_id: int
    seed: int | None
    predictor_name: str
    resampling_policy: str
    train_size: int
    test_size: int
    training_size: int        # Size after resampling
    matrix: ConfusionMatrix
    report: MetricsReport
    timestamp: str
