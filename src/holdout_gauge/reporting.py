"""
Text Reporting

Renders confusion matrices and metrics reports for terminal output.
Undefined metrics are shown as "undefined", never as 0.
"""

from holdout_gauge.domain.constants import METRIC_NAMES
from holdout_gauge.domain.value_objects import ConfusionMatrix, MetricsReport

UNDEFINED_LABEL = "undefined"


def format_metric(value: float | None, digits: int = 3) -> str:
    if value is None:
        return UNDEFINED_LABEL
    return f"{value:.{digits}f}"


def report_to_dict(report: MetricsReport) -> dict[str, float | None]:
    """Convert a report to {metric name: value or None}"""
    return {name: getattr(report, name) for name in METRIC_NAMES}


def format_confusion_matrix(matrix: ConfusionMatrix) -> str:
    """
    Render the matrix as a 2x2 table

    Rows are actual outcomes, columns are predicted outcomes.
    """
    width = max(len(str(matrix.total)), 9)
    lines = [
        f"  {'':<16} {'pred=False':>{width}} {'pred=True':>{width}}",
        f"  {'actual=False':<16} {matrix.true_negative:>{width}} {matrix.false_positive:>{width}}",
        f"  {'actual=True':<16} {matrix.false_negative:>{width}} {matrix.true_positive:>{width}}",
    ]
    return "\n".join(lines)


def format_report(report: MetricsReport, digits: int = 3) -> str:
    """Render one metric per line"""
    return "\n".join(
        f"  {name:<10} {format_metric(getattr(report, name), digits):>9}"
        for name in METRIC_NAMES
    )
