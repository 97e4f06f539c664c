"""
Train/Test Splitting and Class Balancing

Provides the two resampling steps applied before a model is fitted:
- split_dataset: shuffle and cut a dataset into train/test partitions
- balance_classes: undersample the majority class of the training partition

All randomness comes from a private random.Random seeded by the caller,
so the module never touches the global random state.
"""

from __future__ import annotations

import logging
import math
import random
import warnings
from numbers import Real
from operator import attrgetter, itemgetter
from typing import Any, Callable, Mapping, Sequence, Union

from holdout_gauge.domain.constants import DEFAULT_OUTCOME_FIELD, DEFAULT_TRAIN_FRACTION
from holdout_gauge.domain.entities import BalancedTrainingSet, Split
from holdout_gauge.domain.exceptions import (
    EmptyClassError,
    EmptyPartitionWarning,
    InvalidFractionError,
)

logger = logging.getLogger(__name__)

OutcomeAccessor = Union[str, Callable[[Any], Any]]


def outcome_getter(outcome: OutcomeAccessor) -> Callable[[Any], bool]:
    """
    Build a function returning the boolean outcome of a record

    Args:
        outcome: Field name (mapping key or attribute) or a callable

    Returns:
        Callable mapping a record to its outcome as bool
    """
    if callable(outcome):
        return lambda record: bool(outcome(record))

    get_item = itemgetter(outcome)
    get_attr = attrgetter(outcome)

    def _get(record: Any) -> bool:
        if isinstance(record, Mapping):
            return bool(get_item(record))
        return bool(get_attr(record))

    return _get


def _validate_fraction(train_fraction: float) -> None:
    if isinstance(train_fraction, bool) or not isinstance(train_fraction, Real):
        raise InvalidFractionError(
            f"train_fraction must be a number in (0, 1), got {train_fraction!r}"
        )
    if math.isnan(train_fraction) or not 0.0 < train_fraction < 1.0:
        raise InvalidFractionError(
            f"train_fraction must be in (0, 1), got {train_fraction}"
        )


def split_dataset(
    dataset: Sequence[Any],
    train_fraction: float = DEFAULT_TRAIN_FRACTION,
    seed: int | None = None,
) -> Split:
    """
    Shuffle a copy of the dataset and split it into train/test partitions.

    The first floor(len(dataset) * train_fraction) shuffled records form the
    training partition and the remainder the test partition.

    Args:
        dataset: Non-empty sequence of records
        train_fraction: Fraction of records assigned to train, in (0, 1)
        seed: Random seed for reproducible shuffling

    Returns:
        Split: Disjoint and exhaustive partitions

    Raises:
        InvalidFractionError: If train_fraction is not in (0, 1)
        ValueError: If the dataset is empty
    """
    _validate_fraction(train_fraction)
    if len(dataset) == 0:
        raise ValueError("dataset must not be empty")

    shuffled = list(dataset)
    rng = random.Random(seed)
    rng.shuffle(shuffled)

    cut = math.floor(len(shuffled) * train_fraction)
    split = Split(train=shuffled[:cut], test=shuffled[cut:])

    if not split.train or not split.test:
        empty = "train" if not split.train else "test"
        message = (
            f"Splitting {len(shuffled)} records with train_fraction={train_fraction} "
            f"produced an empty {empty} partition"
        )
        logger.warning(message)
        warnings.warn(message, EmptyPartitionWarning, stacklevel=2)

    logger.debug("Split %d records into train=%d, test=%d",
                 len(shuffled), len(split.train), len(split.test))
    return split


def partition_by_outcome(
    records: Sequence[Any],
    outcome: OutcomeAccessor = DEFAULT_OUTCOME_FIELD,
) -> tuple[list[Any], list[Any]]:
    """
    Partition records into (positives, negatives), preserving order

    Args:
        records: Sequence of records
        outcome: Field name or callable giving the binary outcome

    Returns:
        Tuple of (positive records, negative records)
    """
    get_outcome = outcome_getter(outcome)
    positives: list[Any] = []
    negatives: list[Any] = []
    for record in records:
        (positives if get_outcome(record) else negatives).append(record)
    return positives, negatives


def balance_classes(
    train: Sequence[Any],
    outcome: OutcomeAccessor = DEFAULT_OUTCOME_FIELD,
    seed: int | None = None,
) -> BalancedTrainingSet:
    """
    Undersample the majority class so both classes have equal counts.

    Every minority-class record is kept; the same number of majority-class
    records is drawn uniformly without replacement. The combined records
    are shuffled.

    Args:
        train: Training records carrying the binary outcome
        outcome: Field name or callable giving the binary outcome
        seed: Random seed for reproducible sampling

    Returns:
        BalancedTrainingSet with 2 * min(positives, negatives) records

    Raises:
        EmptyClassError: If the training set has no positives or no negatives
    """
    positives, negatives = partition_by_outcome(train, outcome)
    if not positives or not negatives:
        missing = "positive" if not positives else "negative"
        raise EmptyClassError(
            f"Cannot balance {len(train)} training records: no {missing} outcomes"
        )

    m = min(len(positives), len(negatives))
    rng = random.Random(seed)
    if len(positives) > len(negatives):
        kept_positives, kept_negatives = rng.sample(positives, m), negatives
    else:
        kept_positives, kept_negatives = positives, rng.sample(negatives, m)

    records = kept_positives + kept_negatives
    rng.shuffle(records)

    logger.info(
        "Balanced training set: %d positives / %d negatives -> %d records",
        len(positives), len(negatives), len(records),
    )
    return BalancedTrainingSet(records=records, positives=m, negatives=m)
