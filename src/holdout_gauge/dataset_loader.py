"""
Dataset Loader

Loads labeled records from CSV files and converts between pandas
DataFrames and the record lists used by the evaluation pipeline.
"""

from __future__ import annotations

import logging
import math
from typing import Any, Sequence

import pandas as pd

from holdout_gauge.domain.constants import DEFAULT_OUTCOME_FIELD, FALSE_STRINGS, TRUE_STRINGS
from holdout_gauge.sampling import OutcomeAccessor, partition_by_outcome

logger = logging.getLogger(__name__)


def coerce_outcome(value: Any) -> bool:
    """
    Interpret a raw outcome value as bool

    Args:
        value: bool, number, or string such as "true"/"no"/"1"

    Returns:
        bool

    Raises:
        ValueError: If the value cannot be interpreted as a binary outcome
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        normalized = value.strip().lower()
        if normalized in TRUE_STRINGS:
            return True
        if normalized in FALSE_STRINGS:
            return False
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValueError(f"Cannot interpret outcome value: {value!r}")
    if math.isnan(number):
        raise ValueError(f"Cannot interpret outcome value: {value!r}")
    return number != 0.0


def records_from_frame(df: pd.DataFrame) -> list[dict]:
    """Convert a DataFrame into a list of record dictionaries"""
    return df.to_dict("records")


def records_to_frame(records: Sequence[dict]) -> pd.DataFrame:
    """Convert a list of record dictionaries into a DataFrame"""
    return pd.DataFrame(list(records))


def load_dataset(
    file_path: str,
    outcome_field: str = DEFAULT_OUTCOME_FIELD,
    feature_fields: list[str] | None = None,
) -> list[dict]:
    """
    Load a CSV file as a list of labeled records

    Rows with a missing outcome or feature value are dropped.

    Args:
        file_path: Path to the CSV file
        outcome_field: Column holding the binary outcome
        feature_fields: Columns to keep as features (default: all other columns)

    Returns:
        list[dict]: Records with a bool outcome field

    Raises:
        FileNotFoundError: If the file does not exist
        KeyError: If the outcome or a feature column is missing
        ValueError: If an outcome value cannot be interpreted
    """
    df = pd.read_csv(file_path)

    if outcome_field not in df.columns:
        raise KeyError(f"Outcome column '{outcome_field}' is missing: {file_path}")

    if feature_fields is None:
        feature_fields = [c for c in df.columns if c != outcome_field]
    missing = [c for c in feature_fields if c not in df.columns]
    if missing:
        raise KeyError(f"Feature columns {missing} are missing: {file_path}")

    columns = list(feature_fields) + [outcome_field]
    selected = df[columns].dropna()
    dropped = len(df) - len(selected)
    if dropped:
        logger.info("Dropped %d rows with missing values from %s", dropped, file_path)

    selected = selected.copy()
    selected[outcome_field] = [coerce_outcome(v) for v in selected[outcome_field]]
    return records_from_frame(selected)


def class_counts(
    records: Sequence[Any],
    outcome: OutcomeAccessor = DEFAULT_OUTCOME_FIELD,
) -> dict[str, int]:
    """
    Count positive and negative outcomes

    Returns:
        {"positive": int, "negative": int}
    """
    positives, negatives = partition_by_outcome(records, outcome)
    return {"positive": len(positives), "negative": len(negatives)}
