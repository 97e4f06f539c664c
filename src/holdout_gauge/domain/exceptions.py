"""
Domain Exceptions

Fatal errors raised on structural misconfiguration, and the non-fatal
warnings emitted through the ``warnings`` module.
"""


class EvaluationError(Exception):
    """Base class for fatal evaluation errors"""
    pass


class InvalidFractionError(EvaluationError, ValueError):
    """train_fraction is not in the open interval (0, 1)"""
    pass


class EmptyClassError(EvaluationError):
    """Balancing requested on a training set missing one of the two classes"""
    pass


class PredictionLengthError(EvaluationError):
    """A predictor returned a different number of labels than test records"""
    pass


class UndefinedMetricWarning(UserWarning):
    """A metric denominator is zero; the metric is reported as undefined"""
    pass


class EmptyPartitionWarning(UserWarning):
    """A split produced an empty train or test partition"""
    pass
