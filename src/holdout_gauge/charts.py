"""Plotly figures for evaluation results."""

from __future__ import annotations

import plotly.graph_objects as go

from holdout_gauge.domain.constants import METRIC_NAMES
from holdout_gauge.domain.value_objects import ConfusionMatrix, MetricsReport

UNDEFINED_COLOR = "#bdc1c6"
DEFINED_COLOR = "#1a73e8"


def confusion_matrix_figure(matrix: ConfusionMatrix, title: str = "Confusion matrix") -> go.Figure:
    """Heatmap of the 2x2 matrix (rows: actual, columns: predicted)."""
    z = [
        [matrix.true_negative, matrix.false_positive],
        [matrix.false_negative, matrix.true_positive],
    ]
    labels = ["False", "True"]
    fig = go.Figure(go.Heatmap(
        z=z,
        x=[f"pred={l}" for l in labels],
        y=[f"actual={l}" for l in labels],
        text=[[str(v) for v in row] for row in z],
        texttemplate="%{text}",
        colorscale="Blues",
        showscale=False,
    ))
    fig.update_layout(
        title=title,
        yaxis=dict(autorange="reversed"),
        width=420,
        height=380,
    )
    return fig


def metrics_bar_figure(report: MetricsReport, title: str = "Metrics") -> go.Figure:
    """Bar chart of the four metrics; undefined metrics are drawn as gray empty bars."""
    values = [getattr(report, name) for name in METRIC_NAMES]
    fig = go.Figure(go.Bar(
        x=METRIC_NAMES,
        y=[0.0 if v is None else v for v in values],
        text=["undefined" if v is None else f"{v:.3f}" for v in values],
        textposition="outside",
        marker_color=[UNDEFINED_COLOR if v is None else DEFINED_COLOR for v in values],
    ))
    fig.update_layout(
        title=title,
        yaxis=dict(range=[0, 1.1], title="score"),
        width=520,
        height=380,
    )
    return fig
