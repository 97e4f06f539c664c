"""
holdout-gauge CLI Runner

Minimal CLI for evaluating a binary classifier on a CSV dataset:
split, undersample the training partition, fit, and score the held-out test partition.

Usage:
    python -m holdout_gauge.runner --dataset data/incidents.csv --outcome arrest
    python -m holdout_gauge.runner --dataset data/incidents.csv --outcome arrest --features hour,district --seed 42 --num-trials 5
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import replace
from datetime import datetime
from pathlib import Path

from dotenv import load_dotenv

from holdout_gauge.charts import confusion_matrix_figure, metrics_bar_figure
from holdout_gauge.dataset_loader import class_counts, load_dataset
from holdout_gauge.domain.constants import RESAMPLING_POLICIES
from holdout_gauge.domain.exceptions import EvaluationError
from holdout_gauge.eval_config import EvalConfig, load_config
from holdout_gauge.infrastructure.predictors import AVAILABLE_PREDICTORS, create_predictor
from holdout_gauge.metrics import pool_matrices
from holdout_gauge.reporting import format_confusion_matrix, format_metric, format_report
from holdout_gauge.use_cases.evaluation import aggregate_results, results_to_frame, run_trials


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="holdout-gauge: Evaluate a binary classifier on a balanced training split",
    )
    parser.add_argument(
        "--dataset",
        required=True,
        help="Path to the CSV dataset",
    )
    parser.add_argument(
        "--outcome",
        default="outcome",
        help="Name of the binary outcome column (default: outcome)",
    )
    parser.add_argument(
        "--features",
        default=None,
        help="Comma-separated feature columns (default: all other columns)",
    )
    parser.add_argument(
        "--train-fraction",
        type=float,
        default=None,
        help="Fraction of records used for training (default: EVAL_TRAIN_FRACTION from .env)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed (default: EVAL_SEED from .env)",
    )
    parser.add_argument(
        "--predictor",
        choices=AVAILABLE_PREDICTORS,
        default=None,
        help="Predictor to fit (default: EVAL_PREDICTOR from .env)",
    )
    parser.add_argument(
        "--resampling",
        choices=RESAMPLING_POLICIES,
        default=None,
        help="Training-set resampling policy (default: EVAL_RESAMPLING_POLICY from .env)",
    )
    parser.add_argument(
        "--num-trials",
        type=int,
        default=None,
        help="Number of trials (default: EVAL_NUM_TRIALS from .env)",
    )
    parser.add_argument(
        "--run-id",
        default=None,
        help="Run ID used in output file names (default: current timestamp)",
    )
    parser.add_argument(
        "--output-dir",
        default="results",
        help="Directory for output CSV files (default: results)",
    )
    parser.add_argument(
        "--charts",
        action="store_true",
        help="Also write HTML charts of the pooled confusion matrix and metrics",
    )
    return parser.parse_args(argv)


def _apply_overrides(config: EvalConfig, args: argparse.Namespace) -> EvalConfig:
    """Apply CLI arguments on top of the environment configuration."""
    split = config.split
    if args.train_fraction is not None:
        split = replace(split, train_fraction=args.train_fraction)
    if args.seed is not None:
        split = replace(split, seed=args.seed)

    model = config.model
    if args.predictor:
        model = replace(model, predictor=args.predictor)

    resampling = config.resampling
    if args.resampling:
        resampling = replace(resampling, policy=args.resampling)

    trials = config.trials
    if args.num_trials is not None:
        trials = replace(trials, num_trials=args.num_trials)

    return EvalConfig(split=split, resampling=resampling, model=model, trials=trials)


def main(argv: list[str] | None = None) -> None:
    load_dotenv()
    args = parse_args(argv)

    try:
        config = _apply_overrides(load_config(), args)
    except ValueError as e:
        print(f"ERROR: {e}")
        sys.exit(1)
    run_id = args.run_id if args.run_id else datetime.now().strftime("%Y%m%d_%H%M%S")

    output_dir = Path(args.output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    raw_path = output_dir / f"raw_results_{run_id}.csv"
    summary_path = output_dir / f"summary_{run_id}.csv"

    # Load dataset
    print(f"\n=== Loading dataset: {args.dataset} ===\n")
    features = [f.strip() for f in args.features.split(",")] if args.features else None
    records = load_dataset(args.dataset, outcome_field=args.outcome, feature_fields=features)
    if features is None:
        features = [c for c in (records[0] if records else {}) if c != args.outcome]
    counts = class_counts(records, args.outcome)
    print(f"  Records: {len(records)}")
    print(f"  Positive: {counts['positive']} | Negative: {counts['negative']}")
    print(f"  Features: {features}")
    print(f"  Predictor: {config.model.predictor}")
    print(f"  Train fraction: {config.split.train_fraction}")
    print(f"  Resampling: {config.resampling.policy}")
    print(f"  Trials: {config.trials.num_trials}")
    print(f"  Seed: {config.split.seed}")
    print(f"  Run ID: {run_id}")
    print()

    # Run trials
    print(f"=== Running Evaluations ({config.trials.num_trials} trials) ===\n")
    try:
        predictor = create_predictor(features, args.outcome, config=config)
        results = run_trials(records, predictor, config=config, outcome=args.outcome, run_id=run_id)
    except (EvaluationError, ValueError) as e:
        print(f"ERROR: {e}")
        sys.exit(1)

    for r in results:
        print(
            f"  [T{r.trial_id}] train={r.train_size} test={r.test_size} "
            f"training={r.training_size} | accuracy={format_metric(r.report.accuracy)} "
            f"f1={format_metric(r.report.f1)}"
        )
    print()

    # Report the last trial in full
    last = results[-1]
    print("=== Confusion Matrix (last trial) ===\n")
    print(format_confusion_matrix(last.matrix))
    print()
    print("=== Metrics (last trial) ===\n")
    print(format_report(last.report))
    print()

    # Aggregate across trials
    summary_df = aggregate_results(results, config.trials.aggregation)
    if len(results) > 1:
        print(f"=== Metrics Summary ({config.trials.aggregation} of {len(results)} trials) ===\n")
        print(f"  {'Metric':<10} {'value':>9} {'variance':>10} {'undefined':>10}")
        print(f"  {'-'*10} {'-'*9} {'-'*10} {'-'*10}")
        for _, row in summary_df.iterrows():
            value = row["value"] if row["num_undefined"] < row["num_trials"] else None
            print(
                f"  {row['metric']:<10} "
                f"{format_metric(value):>9} "
                f"{row['variance']:>10.4f} "
                f"{row['num_undefined']:>10}"
            )
        print()

    # Save CSV
    results_to_frame(results).to_csv(raw_path, index=False)
    summary_df.to_csv(summary_path, index=False)

    print("=== Output ===\n")
    print(f"  Raw results: {raw_path}")
    print(f"  Summary:     {summary_path}")

    if args.charts:
        pooled = pool_matrices(r.matrix for r in results)
        matrix_path = output_dir / f"confusion_matrix_{run_id}.html"
        metrics_path = output_dir / f"metrics_{run_id}.html"
        confusion_matrix_figure(pooled).write_html(str(matrix_path))
        metrics_bar_figure(last.report).write_html(str(metrics_path))
        print(f"  Charts:      {matrix_path}, {metrics_path}")
    print()


if __name__ == "__main__":
    main()
