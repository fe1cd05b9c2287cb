from __future__ import annotations

import math
from typing import List, Optional, Tuple

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go

from src.utils.formatting import format_inr, format_percent
from src.utils.projection_models import ProjectionResult, ProjectionSummary

SERIES_COLUMNS = ["year", "totalWealth", "realWealth", "monthlySIP", "monthlySalary"]

# chart lines: column -> (legend name, colour)
CHART_LINES = {
    "totalWealth": ("Total Wealth", "#8884d8"),
    "realWealth": ("Real Wealth", "#82ca9d"),
    "monthlySIP": ("Monthly SIP", "#ffc658"),
}


def results_frame(result: ProjectionResult) -> pd.DataFrame:
    rows = [s.model_dump(by_alias=True) for s in result.series]
    return pd.DataFrame(rows, columns=SERIES_COLUMNS)


def _axis_ticks(min_value: float, max_value: float, n: int = 6) -> Tuple[List[float], List[str]]:
    lo, hi = min(0.0, min_value), max(0.0, max_value)
    if not (math.isfinite(lo) and math.isfinite(hi)) or lo == hi:
        return [], []
    step = (hi - lo) / (n - 1)
    vals = [lo + step * i for i in range(n)]
    return vals, [format_inr(v) for v in vals]


def build_wealth_chart(df: pd.DataFrame, *, height: int = 400) -> go.Figure:
    """Line chart of the yearly series; ticks and hover text go through format_inr."""
    cols = list(CHART_LINES)
    fig = px.line(df, x="year", y=cols, markers=False)

    def _style(trace) -> None:
        col = trace.name
        name, colour = CHART_LINES.get(col, (col, None))
        trace.update(
            name=name,
            line_color=colour,
            customdata=[format_inr(v) for v in df[col]],
            hovertemplate="Year %{x}<br>" + name + ": %{customdata}<extra></extra>",
        )

    fig.for_each_trace(_style)

    if df.empty:
        tickvals, ticktext = [], []
    else:
        tickvals, ticktext = _axis_ticks(float(df[cols].min().min()), float(df[cols].max().max()))
    if tickvals:
        fig.update_yaxes(tickvals=tickvals, ticktext=ticktext)

    fig.update_layout(height=height, legend_title_text="", yaxis_title="", xaxis_title="Year")
    return fig


def summary_lines(summary: Optional[ProjectionSummary]) -> List[str]:
    if summary is None:
        return []
    return [
        f"Starting Wealth: {format_inr(summary.starting_wealth)}",
        f"Final Total Wealth: {format_inr(summary.final_total_wealth)}",
        f"Final Real Wealth: {format_inr(summary.final_real_wealth)}",
        f"Wealth Growth (Total): {format_percent(summary.total_growth)}",
        f"Wealth Growth (Real): {format_percent(summary.real_growth)}",
        f"Final Monthly SIP: {format_inr(summary.final_monthly_sip)}",
        f"Final Monthly Salary: {format_inr(summary.final_monthly_salary)}",
    ]
