"""
Predictor base class

Defines the abstract interface the evaluation pipeline depends on,
and the threshold rule that turns continuous scores into labels.
"""

from abc import ABC, abstractmethod
from typing import Any, Iterable, Sequence

from holdout_gauge.domain.constants import DECISION_THRESHOLD
from holdout_gauge.domain.exceptions import PredictionLengthError


def apply_threshold(scores: Iterable[float], threshold: float = DECISION_THRESHOLD) -> list[bool]:
    """
    Convert continuous scores into labels

    A score at or above the threshold is predicted positive.

    Args:
        scores: Continuous scores (e.g., positive-class probabilities)
        threshold: Decision threshold (default 0.5)

    Returns:
        list[bool]
    """
    return [float(s) >= threshold for s in scores]


class Predictor(ABC):
    """Abstract base class for predictors"""

    name: str = "predictor"

    @abstractmethod
    def fit(self, training_set: Sequence[Any]) -> Any:
        """Fit on training records and return the fitted model"""
        pass

    @abstractmethod
    def predict(self, model: Any, test_set: Sequence[Any]) -> list[bool]:
        """Predict one label per test record, in test order"""
        pass

    def fit_predict(self, training_set: Sequence[Any], test_set: Sequence[Any]) -> list[bool]:
        """
        Fit on the training records and predict the test records.

        Raises:
            PredictionLengthError: If the number of predictions differs from the test set
        """
        model = self.fit(training_set)
        predictions = [bool(p) for p in self.predict(model, test_set)]
        if len(predictions) != len(test_set):
            raise PredictionLengthError(
                f"{self.name} returned {len(predictions)} predictions for {len(test_set)} test records"
            )
        return predictions
