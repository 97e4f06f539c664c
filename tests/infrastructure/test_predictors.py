"""
Tests for predictors (threshold rule, scikit-learn wrappers, factory)
"""

import pytest

from holdout_gauge.domain.exceptions import PredictionLengthError
from holdout_gauge.eval_config import EvalConfig, ModelConfig, SplitConfig
from holdout_gauge.infrastructure.predictors import Predictor, apply_threshold, create_predictor
from holdout_gauge.infrastructure.predictors.sklearn_models import (
    LogisticRegressionPredictor,
    RandomForestPredictor,
)


def _separable(n: int = 20) -> list[dict]:
    return [{"x": float(i), "outcome": i >= n // 2} for i in range(n)]


class _ShortPredictor(Predictor):
    """Returns one prediction fewer than requested"""

    name = "short"

    def fit(self, training_set):
        return None

    def predict(self, model, test_set):
        return [True] * (len(test_set) - 1)


class TestApplyThreshold:
    """apply_threshold tests"""

    def test_default_threshold(self):
        assert apply_threshold([0.1, 0.49, 0.5, 0.51, 0.9]) == [False, False, True, True, True]

    def test_custom_threshold(self):
        assert apply_threshold([0.3, 0.7], threshold=0.8) == [False, False]

    def test_empty(self):
        assert apply_threshold([]) == []


class TestPredictorBase:
    """Predictor.fit_predict tests"""

    def test_length_mismatch_raises(self):
        with pytest.raises(PredictionLengthError, match="returned 2 predictions for 3"):
            _ShortPredictor().fit_predict([], [{}, {}, {}])


class TestLogisticRegressionPredictor:
    """LogisticRegressionPredictor tests"""

    def test_separable_data(self):
        predictor = LogisticRegressionPredictor(["x"])
        model = predictor.fit(_separable())
        assert predictor.predict(model, [{"x": 0.0}, {"x": 19.0}]) == [False, True]

    def test_fit_predict_returns_one_label_per_record(self):
        predictor = LogisticRegressionPredictor(["x"])
        test = [{"x": float(i)} for i in range(7)]
        predictions = predictor.fit_predict(_separable(), test)
        assert len(predictions) == 7
        assert all(isinstance(p, bool) for p in predictions)

    def test_categorical_features_are_one_hot_encoded(self):
        training = (
            [{"district": "A", "outcome": True}] * 10
            + [{"district": "B", "outcome": False}] * 10
        )
        predictor = LogisticRegressionPredictor(["district"])
        model = predictor.fit(training)
        assert model.columns == ["district_A", "district_B"]
        predictions = predictor.predict(model, [{"district": "A"}, {"district": "B"}, {"district": "C"}])
        assert predictions[:2] == [True, False]
        assert len(predictions) == 3

    def test_custom_outcome_field(self):
        training = [{"x": r["x"], "arrest": r["outcome"]} for r in _separable()]
        predictor = LogisticRegressionPredictor(["x"], outcome_field="arrest")
        model = predictor.fit(training)
        assert predictor.predict(model, [{"x": 19.0}]) == [True]

    def test_empty_test_set(self):
        predictor = LogisticRegressionPredictor(["x"])
        model = predictor.fit(_separable())
        assert predictor.predict(model, []) == []

    def test_empty_feature_fields_raises(self):
        with pytest.raises(ValueError, match="feature_fields must not be empty"):
            LogisticRegressionPredictor([])


class TestRandomForestPredictor:
    """RandomForestPredictor tests"""

    def test_separable_data(self):
        predictor = RandomForestPredictor(["x"], random_state=0)
        model = predictor.fit(_separable())
        assert predictor.predict(model, [{"x": 1.0}, {"x": 18.0}]) == [False, True]


class TestCreatePredictor:
    """create_predictor tests"""

    def test_logistic_regression(self):
        config = EvalConfig(model=ModelConfig(predictor="logistic_regression", max_iter=50, threshold=0.6))
        predictor = create_predictor(["x"], config=config)
        assert isinstance(predictor, LogisticRegressionPredictor)
        assert predictor.max_iter == 50
        assert predictor.threshold == 0.6

    def test_random_forest_uses_seed(self):
        config = EvalConfig(model=ModelConfig(predictor="random_forest"), split=SplitConfig(seed=7))
        predictor = create_predictor(["x"], "arrest", config=config)
        assert isinstance(predictor, RandomForestPredictor)
        assert predictor.random_state == 7
        assert predictor.outcome_field == "arrest"

    def test_name_overrides_config(self):
        predictor = create_predictor(["x"], config=EvalConfig(), name="random_forest")
        assert predictor.name == "random_forest"

    def test_unknown_name_raises(self):
        with pytest.raises(ValueError, match="Unknown predictor"):
            create_predictor(["x"], config=EvalConfig(), name="svm")
