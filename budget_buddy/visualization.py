"""Plotly visualisation helpers for the budget tracker.

The dashboard shows a single chart: a donut of expense totals per
category.  It consumes the list produced by
:func:`budget_buddy.calculations.category_breakdown` and returns a
`plotly.graph_objects.Figure` that Streamlit renders via
``st.plotly_chart``.
"""

from __future__ import annotations

from typing import Dict, List, Sequence

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go

COLORS = ['#0088FE', '#00C49F', '#FFBB28', '#FF8042', '#8884d8', '#ff7373']
EMPTY_CHART_TITLE = "Add expenses to see analysis"


def slice_colors(count: int) -> List[str]:
    """Cycle through :data:`COLORS` for ``count`` slices."""
    return [COLORS[index % len(COLORS)] for index in range(count)]


def create_category_donut(breakdown: Sequence[Dict[str, object]], title: str | None = None) -> go.Figure:
    """Generate a donut chart of expense totals by category.

    Parameters
    ----------
    breakdown : sequence of dict
        ``{"name": category, "value": amount}`` entries in display order.
    title : str, optional
        Chart title.

    Returns
    -------
    plotly.graph_objects.Figure
        Donut chart, or an empty figure when there is nothing to show.
    """
    if not breakdown:
        fig = go.Figure()
        fig.update_layout(title=EMPTY_CHART_TITLE)
        return fig
    df = pd.DataFrame(list(breakdown), columns=["name", "value"])
    fig = px.pie(
        df,
        names="name",
        values="value",
        hole=0.75,
        color_discrete_sequence=slice_colors(len(df)),
    )
    fig.update_traces(
        sort=False,
        marker=dict(line=dict(color="#ffffff", width=4)),
        hovertemplate="%{label}: $%{value:,.2f}<extra></extra>",
        textinfo="none",
    )
    fig.update_layout(
        title=title,
        showlegend=True,
        legend=dict(orientation="h", yanchor="top", y=-0.05, xanchor="center", x=0.5),
        margin=dict(t=40 if title else 10, b=10, l=10, r=10),
    )
    return fig
