"""
Evaluation Configuration

Manages loading from environment variables and default values.
"""

import os
from dataclasses import dataclass, field, asdict

from holdout_gauge.domain.constants import (
    AGGREGATION_METHODS,
    DECISION_THRESHOLD,
    DEFAULT_TRAIN_FRACTION,
    RESAMPLING_POLICIES,
)


def _env_int(key: str, default: int) -> int:
    """Convert an environment variable to int"""
    val = os.environ.get(key)
    if val is None:
        return default
    try:
        return int(val)
    except ValueError:
        raise ValueError(f"The value '{val}' of environment variable '{key}' cannot be converted to an integer.")


def _env_optional_int(key: str, default: int | None) -> int | None:
    """Convert an environment variable to int; an empty value means None"""
    val = os.environ.get(key)
    if val is None:
        return default
    if not val.strip():
        return None
    return _env_int(key, 0)


def _env_float(key: str, default: float) -> float:
    """Convert an environment variable to float"""
    val = os.environ.get(key)
    if val is None:
        return default
    try:
        return float(val)
    except ValueError:
        raise ValueError(f"The value '{val}' of environment variable '{key}' cannot be converted to a number.")


def _env_str(key: str, default: str) -> str:
    """Get an environment variable as a string"""
    return os.environ.get(key, default)


@dataclass
class SplitConfig:
    """Train/test split configuration"""
    train_fraction: float = DEFAULT_TRAIN_FRACTION
    seed: int | None = None


@dataclass
class ResamplingConfig:
    """Training-set resampling configuration"""
    policy: str = "undersample"  # undersample / none

    def __post_init__(self):
        if self.policy not in RESAMPLING_POLICIES:
            raise ValueError(f"Invalid resampling policy: {self.policy}. Valid values: {RESAMPLING_POLICIES}")


@dataclass
class ModelConfig:
    """Predictor configuration"""
    predictor: str = "logistic_regression"
    max_iter: int = 1000
    threshold: float = DECISION_THRESHOLD


@dataclass
class TrialConfig:
    """Trial configuration"""
    num_trials: int = 1
    aggregation: str = "mean"  # mean / median

    def __post_init__(self):
        if self.num_trials < 1:
            raise ValueError(f"num_trials must be at least 1, got {self.num_trials}")
        if self.aggregation not in AGGREGATION_METHODS:
            raise ValueError(f"Invalid aggregation: {self.aggregation}. Valid values: {AGGREGATION_METHODS}")



@dataclass
class EvalConfig:
    """Overall evaluation configuration"""
    split: SplitConfig = field(default_factory=SplitConfig)
    resampling: ResamplingConfig = field(default_factory=ResamplingConfig)
    model: ModelConfig = field(default_factory=ModelConfig)
    trials: TrialConfig = field(default_factory=TrialConfig)

    def to_dict(self) -> dict:
        """Convert to dictionary format"""
        return {"eval_config": asdict(self)}

    @classmethod
    def from_dict(cls, data: dict) -> "EvalConfig":
        """Create from dictionary (handles presence/absence of eval_config key)"""
        config_data = data.get("eval_config", data)
        return cls(
            split=SplitConfig(**config_data.get("split", {})),
            resampling=ResamplingConfig(**config_data.get("resampling", {})),
            model=ModelConfig(**config_data.get("model", {})),
            trials=TrialConfig(**config_data.get("trials", {})),
        )


def load_config() -> EvalConfig:
    """
    Load configuration from environment variables

    Uses default values when environment variables are not set.

    Returns:
        EvalConfig
    """
    split = SplitConfig(
        train_fraction=_env_float("EVAL_TRAIN_FRACTION", DEFAULT_TRAIN_FRACTION),
        seed=_env_optional_int("EVAL_SEED", None),
    )
    resampling = ResamplingConfig(
        policy=_env_str("EVAL_RESAMPLING_POLICY", "undersample"),
    )
    model = ModelConfig(
        predictor=_env_str("EVAL_PREDICTOR", "logistic_regression"),
        max_iter=_env_int("EVAL_MAX_ITER", 1000),
        threshold=_env_float("EVAL_THRESHOLD", DECISION_THRESHOLD),
    )
    trials = TrialConfig(
        num_trials=_env_int("EVAL_NUM_TRIALS", 1),
        aggregation=_env_str("EVAL_AGGREGATION", "mean"),
    )
    return EvalConfig(split=split, resampling=resampling, model=model, trials=trials)
