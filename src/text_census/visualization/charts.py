"""
Chart creation utilities for the visualization dashboard.
"""

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go

from .constants import (
    CATEGORY_COLORS,
    CATEGORY_LABELS,
    CHART_CATEGORIES,
    CHART_HEIGHT,
    LEGEND_CONFIG,
)


def create_category_chart(df: pd.DataFrame) -> go.Figure:
    """Create a bar chart of the document's category counts."""
    labels = [CATEGORY_LABELS[name] for name in CHART_CATEGORIES]
    chart_data = df[df["field"].isin(CHART_CATEGORIES)].copy()
    chart_data["category"] = pd.Categorical(
        chart_data["category"], categories=labels, ordered=True
    )
    chart_data = chart_data.sort_values("category")

    fig = px.bar(
        chart_data,
        x="category",
        y="count",
        color="category",
        color_discrete_map=CATEGORY_COLORS,
        title="Character Categories",
        labels={"count": "Count", "category": "Category"},
        text="count",
        height=CHART_HEIGHT,
    )
    fig.update_traces(texttemplate="%{text:,}", textposition="outside")
    fig.update_layout(showlegend=False, xaxis_tickangle=-30, margin=dict(t=80))
    return fig


def create_page_chart(df: pd.DataFrame) -> go.Figure:
    """Create a stacked bar chart of character categories per page."""
    fig = px.bar(
        df,
        x="page",
        y="count",
        color="category",
        color_discrete_map=CATEGORY_COLORS,
        title="Characters per Page",
        labels={"count": "Count", "page": "Page", "category": "Category"},
        barmode="stack",
        height=CHART_HEIGHT,
    )
    fig.update_layout(
        legend=LEGEND_CONFIG,
        # Room above the plot so the title never overlaps the legend
        margin=dict(t=120),
        title=dict(y=0.995),
    )
    return fig
