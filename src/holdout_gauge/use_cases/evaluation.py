"""
Evaluation Execution

Handles single evaluation trials through repeated trials, including result aggregation.
"""

from __future__ import annotations

import logging
import random
from datetime import datetime
from typing import Any, Sequence

import pandas as pd

from holdout_gauge.domain.constants import DEFAULT_OUTCOME_FIELD, METRIC_NAMES
from holdout_gauge.domain.entities import EvaluationResult, Split
from holdout_gauge.eval_config import EvalConfig, load_config
from holdout_gauge.infrastructure.predictors.base import Predictor
from holdout_gauge.metrics import evaluate_predictions
from holdout_gauge.sampling import (
    OutcomeAccessor,
    balance_classes,
    outcome_getter,
    split_dataset,
)

logger = logging.getLogger(__name__)


def derive_seeds(seed: int | None) -> tuple[int | None, int | None]:
    """
    Derive independent (split, balance) seeds from one trial seed

    Args:
        seed: Trial seed, or None for unseeded runs

    Returns:
        Tuple of (split seed, balance seed); both None when seed is None
    """
    if seed is None:
        return None, None
    rng = random.Random(seed)
    return rng.getrandbits(32), rng.getrandbits(32)


def prepare_partitions(
    dataset: Sequence[Any],
    config: EvalConfig | None = None,
    outcome: OutcomeAccessor = DEFAULT_OUTCOME_FIELD,
    seed: int | None = None,
) -> tuple[Split, list[Any]]:
    """
    Split the dataset and resample the training partition.

    Args:
        dataset: Labeled records
        config: EvalConfig (loads from env if not provided)
        outcome: Field name or callable giving the binary outcome
        seed: Random seed (default: config.split.seed)

    Returns:
        Tuple of (Split, training records after resampling)

    Raises:
        InvalidFractionError: If the configured train_fraction is not in (0, 1)
        EmptyClassError: If undersampling is requested and a class is missing from train
    """
    if config is None:
        config = load_config()
    if seed is None:
        seed = config.split.seed

    split_seed, balance_seed = derive_seeds(seed)
    split = split_dataset(dataset, config.split.train_fraction, split_seed)

    if config.resampling.policy == "undersample":
        training = list(balance_classes(split.train, outcome, balance_seed).records)
    else:
        training = list(split.train)

    return split, training


def run_single_evaluation(
    dataset: Sequence[Any],
    predictor: Predictor,
    config: EvalConfig | None = None,
    outcome: OutcomeAccessor = DEFAULT_OUTCOME_FIELD,
    run_id: str = "",
    trial_id: int = 1,
    seed: int | None = None,
) -> EvaluationResult:
    """
    Execute a single evaluation trial.

    Args:
        dataset: Labeled records
        predictor: Predictor fitted on the resampled training partition
        config: EvalConfig (loads from env if not provided)
        outcome: Field name or callable giving the binary outcome
        run_id: Run ID
        trial_id: Trial ID (default: 1)
        seed: Random seed (default: config.split.seed)

    Returns:
        EvaluationResult: Evaluation result
    """
    if config is None:
        config = load_config()
    if seed is None:
        seed = config.split.seed

    split, training = prepare_partitions(dataset, config, outcome, seed)

    # Fit on the resampled train partition, score the untouched test partition
    predicted = predictor.fit_predict(training, split.test)
    get_outcome = outcome_getter(outcome)
    actual = [get_outcome(r) for r in split.test]

    matrix, report = evaluate_predictions(predicted, actual)

    return EvaluationResult(
        run_id=run_id,
        trial_id=trial_id,
        seed=seed,
        predictor_name=predictor.name,
        resampling_policy=config.resampling.policy,
        train_size=len(split.train),
        test_size=len(split.test),
        training_size=len(training),
        matrix=matrix,
        report=report,
        timestamp=datetime.now().isoformat(),
    )


def run_trials(
    dataset: Sequence[Any],
    predictor: Predictor,
    config: EvalConfig | None = None,
    outcome: OutcomeAccessor = DEFAULT_OUTCOME_FIELD,
    run_id: str | None = None,
) -> list[EvaluationResult]:
    """
    Execute config.trials.num_trials evaluation trials.

    Trial t uses seed (base seed + t - 1); without a base seed every
    trial is unseeded.

    Args:
        dataset: Labeled records
        predictor: Predictor
        config: EvalConfig (loads from env if not provided)
        outcome: Field name or callable giving the binary outcome
        run_id: Run ID (default: current timestamp)

    Returns:
        list[EvaluationResult]: One result per trial

    Raises:
        ValueError: If config.trials.num_trials is less than 1
    """
    if config is None:
        config = load_config()
    if run_id is None:
        run_id = datetime.now().strftime("%Y%m%d_%H%M%S")
    if config.trials.num_trials < 1:
        raise ValueError(f"num_trials must be at least 1, got {config.trials.num_trials}")

    base_seed = config.split.seed
    results = []
    for trial_id in range(1, config.trials.num_trials + 1):
        seed = None if base_seed is None else base_seed + trial_id - 1
        result = run_single_evaluation(
            dataset,
            predictor,
            config=config,
            outcome=outcome,
            run_id=run_id,
            trial_id=trial_id,
            seed=seed,
        )
        logger.info("Trial %d/%d: accuracy=%s", trial_id, config.trials.num_trials, result.report.accuracy)
        results.append(result)
    return results


def results_to_frame(results: list[EvaluationResult]) -> pd.DataFrame:
    """
    Flatten evaluation results into one row per trial.

    Undefined metrics become missing values in the frame; the
    ``undefined_metrics`` column keeps them distinguishable.
    """
    rows = []
    for r in results:
        rows.append({
            "run_id": r.run_id,
            "trial_id": r.trial_id,
            "seed": r.seed,
            "predictor": r.predictor_name,
            "resampling_policy": r.resampling_policy,
            "train_size": r.train_size,
            "test_size": r.test_size,
            "training_size": r.training_size,
            "true_positive": r.matrix.true_positive,
            "true_negative": r.matrix.true_negative,
            "false_positive": r.matrix.false_positive,
            "false_negative": r.matrix.false_negative,
            "accuracy": r.report.accuracy,
            "precision": r.report.precision,
            "recall": r.report.recall,
            "f1": r.report.f1,
            "undefined_metrics": ",".join(r.report.undefined_metrics),
            "timestamp": r.timestamp,
        })
    return pd.DataFrame(rows)


def aggregate_metric(values: list[float], method: str = "mean") -> float | None:
    """
    Aggregate the defined values of one metric across trials

    Args:
        values: Defined metric values
        method: Aggregation method ("mean" or "median")

    Returns:
        Aggregated value, or None when no trial defined the metric
    """
    if not values:
        return None

    if method == "median":
        sorted_values = sorted(values)
        n = len(sorted_values)
        if n % 2 == 1:
            return sorted_values[n // 2]
        return (sorted_values[n // 2 - 1] + sorted_values[n // 2]) / 2

    return sum(values) / len(values)


def metric_variance(values: list[float]) -> float:
    """Population variance; 0.0 for fewer than two values"""
    if len(values) < 2:
        return 0.0
    mean = sum(values) / len(values)
    return sum((v - mean) ** 2 for v in values) / len(values)


def aggregate_results(
    results: list[EvaluationResult],
    aggregation: str | None = None,
    config: EvalConfig | None = None,
) -> pd.DataFrame:
    """
    Aggregate each metric across trials.

    Args:
        results: List of evaluation results
        aggregation: "mean" or "median" (default: config.trials.aggregation)
        config: EvalConfig (loads from env if not provided)

    Returns:
        pd.DataFrame: One row per metric with columns
            metric, value, variance, num_trials, num_undefined
    """
    if aggregation is None:
        if config is None:
            config = load_config()
        aggregation = config.trials.aggregation

    rows = []
    for metric in METRIC_NAMES:
        values = [getattr(r.report, metric) for r in results]
        defined = [v for v in values if v is not None]
        rows.append({
            "metric": metric,
            "value": aggregate_metric(defined, aggregation),
            "variance": metric_variance(defined),
            "num_trials": len(values),
            "num_undefined": len(values) - len(defined),
        })
    return pd.DataFrame(rows)
