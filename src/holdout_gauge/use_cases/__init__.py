"""
Use Cases Layer

Aggregates evaluation logic and provides use cases called from the runner.
"""

from holdout_gauge.use_cases.evaluation import (
    derive_seeds,
    prepare_partitions,
    run_single_evaluation,
    run_trials,
    results_to_frame,
    aggregate_metric,
    metric_variance,
    aggregate_results,
)

__all__ = [
    "derive_seeds",
    "prepare_partitions",
    "run_single_evaluation",
    "run_trials",
    "results_to_frame",
    "aggregate_metric",
    "metric_variance",
    "aggregate_results",
]
