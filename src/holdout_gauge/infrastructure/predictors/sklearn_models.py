"""
scikit-learn predictors

Wraps scikit-learn classifiers behind the Predictor interface.
Records are converted to a feature matrix with pandas; categorical
columns are one-hot encoded and aligned to the training columns at
prediction time.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Sequence

import pandas as pd

from holdout_gauge.domain.constants import DECISION_THRESHOLD, DEFAULT_OUTCOME_FIELD
from holdout_gauge.infrastructure.predictors.base import Predictor, apply_threshold

logger = logging.getLogger(__name__)


@dataclass
class FittedModel:
    """A fitted estimator and the feature columns it was trained on"""
    estimator: Any
    columns: list[str]


class SklearnPredictor(Predictor):
    """Base class for predictors backed by a scikit-learn classifier"""

    name = "sklearn"

    def __init__(
        self,
        feature_fields: list[str],
        outcome_field: str = DEFAULT_OUTCOME_FIELD,
        threshold: float = DECISION_THRESHOLD,
    ) -> None:
        if not feature_fields:
            raise ValueError("feature_fields must not be empty")
        self.feature_fields = list(feature_fields)
        self.outcome_field = outcome_field
        self.threshold = threshold

    def _make_estimator(self) -> Any:
        raise NotImplementedError

    def _features(self, records: Sequence[dict]) -> pd.DataFrame:
        frame = pd.DataFrame(list(records), columns=self.feature_fields)
        return pd.get_dummies(frame, dtype=float)

    def fit(self, training_set: Sequence[dict]) -> FittedModel:
        X = self._features(training_set)
        y = [bool(r[self.outcome_field]) for r in training_set]
        estimator = self._make_estimator()
        estimator.fit(X, y)
        logger.debug("Fitted %s on %d records, %d columns", self.name, len(X), X.shape[1])
        return FittedModel(estimator=estimator, columns=list(X.columns))

    def predict(self, model: FittedModel, test_set: Sequence[dict]) -> list[bool]:
        if not test_set:
            return []
        X = self._features(test_set).reindex(columns=model.columns, fill_value=0.0)
        return apply_threshold(self.score(model, X), self.threshold)

    @staticmethod
    def score(model: FittedModel, X: pd.DataFrame) -> list[float]:
        """Positive-class probability for each row of X"""
        classes = list(model.estimator.classes_)
        proba = model.estimator.predict_proba(X)
        if True not in classes:
            return [0.0] * len(X)
        return [float(p) for p in proba[:, classes.index(True)]]


class LogisticRegressionPredictor(SklearnPredictor):
    """Logistic regression classifier"""

    name = "logistic_regression"

    def __init__(
        self,
        feature_fields: list[str],
        outcome_field: str = DEFAULT_OUTCOME_FIELD,
        threshold: float = DECISION_THRESHOLD,
        max_iter: int = 1000,
    ) -> None:
        super().__init__(feature_fields, outcome_field, threshold)
        self.max_iter = max_iter

    def _make_estimator(self) -> Any:
        from sklearn.linear_model import LogisticRegression

        return LogisticRegression(max_iter=self.max_iter)


class RandomForestPredictor(SklearnPredictor):
    """Random forest classifier"""

    name = "random_forest"

    def __init__(
        self,
        feature_fields: list[str],
        outcome_field: str = DEFAULT_OUTCOME_FIELD,
        threshold: float = DECISION_THRESHOLD,
        n_estimators: int = 100,
        random_state: int | None = None,
    ) -> None:
        super().__init__(feature_fields, outcome_field, threshold)
        self.n_estimators = n_estimators
        self.random_state = random_state

    def _make_estimator(self) -> Any:
        from sklearn.ensemble import RandomForestClassifier

        return RandomForestClassifier(
            n_estimators=self.n_estimators,
            random_state=self.random_state,
        )
