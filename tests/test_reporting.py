"""
Tests for text reporting and plotly charts
"""

import plotly.graph_objects as go

from holdout_gauge.charts import confusion_matrix_figure, metrics_bar_figure
from holdout_gauge.domain.value_objects import ConfusionMatrix, MetricsReport
from holdout_gauge.reporting import (
    format_confusion_matrix,
    format_metric,
    format_report,
    report_to_dict,
)

PARTIAL_REPORT = MetricsReport(accuracy=1.0, precision=None, recall=None, f1=None)


class TestFormatting:
    """Text formatting tests"""

    def test_format_metric(self):
        assert format_metric(2 / 3) == "0.667"
        assert format_metric(0.5, digits=1) == "0.5"

    def test_format_undefined_metric(self):
        assert format_metric(None) == "undefined"

    def test_report_to_dict(self):
        assert report_to_dict(PARTIAL_REPORT) == {
            "accuracy": 1.0, "precision": None, "recall": None, "f1": None,
        }

    def test_format_report_marks_undefined(self):
        text = format_report(PARTIAL_REPORT)
        lines = text.splitlines()
        assert len(lines) == 4
        assert "1.000" in lines[0]
        assert "undefined" in lines[1]
        assert "0.000" not in text

    def test_format_confusion_matrix(self):
        text = format_confusion_matrix(ConfusionMatrix(true_positive=2, true_negative=1,
                                                       false_positive=3, false_negative=4))
        lines = text.splitlines()
        assert "pred=False" in lines[0]
        assert lines[1].split()[-2:] == ["1", "3"]
        assert lines[2].split()[-2:] == ["4", "2"]


class TestCharts:
    """Plotly figure tests"""

    def test_confusion_matrix_figure(self):
        fig = confusion_matrix_figure(ConfusionMatrix(2, 1, 3, 4))
        assert isinstance(fig, go.Figure)
        heatmap = fig.data[0]
        assert [list(row) for row in heatmap.z] == [[1, 3], [4, 2]]

    def test_metrics_bar_figure_marks_undefined(self):
        fig = metrics_bar_figure(PARTIAL_REPORT)
        bar = fig.data[0]
        assert list(bar.x) == ["accuracy", "precision", "recall", "f1"]
        assert list(bar.text) == ["1.000", "undefined", "undefined", "undefined"]
