"""Plotly figures for the dashboard."""

from typing import Any

import plotly.graph_objects as go

from ..models.chart_data import ChartData

SPEND_COLORS = ["#34a853", "#4285f4", "#1877f2", "#667eea", "#764ba2"]
ADS_COLORS = ["#ff6b6b", "#feca57", "#ee5a6f"]


def create_overview_chart(chart_data: ChartData) -> go.Figure:
    """Spend columns on the left axis, ads-aired lines on the right."""
    fig = go.Figure()
    x = chart_data.week_labels
    spend_i = ads_i = 0

    for s in chart_data.series:
        if s.kind == "column":
            fig.add_trace(go.Bar(
                x=x,
                y=s.points,
                name=s.name,
                marker_color=SPEND_COLORS[spend_i % len(SPEND_COLORS)],
                yaxis="y",
                hovertemplate="%{x}: $%{y:,.0f}<extra>%{fullData.name}</extra>",
            ))
            spend_i += 1
        else:
            fig.add_trace(go.Scatter(
                x=x,
                y=s.points,
                name=s.name,
                yaxis="y2",
                mode="lines+markers",
                line=dict(color=ADS_COLORS[ads_i % len(ADS_COLORS)], width=4, shape="spline"),
                marker=dict(size=8),
                hovertemplate="%{x}: %{y:,.0f} ads played<extra>%{fullData.name}</extra>",
            ))
            ads_i += 1

    fig.update_layout(
        title="Marketing Performance Overview - All Channels",
        xaxis=dict(title="Time Period", type="category"),
        yaxis=dict(title="Digital Ad Spend ($)", side="left", tickprefix="$", showgrid=True),
        yaxis2=dict(title="TV/Radio Ads Played", side="right", overlaying="y", showgrid=False),
        legend=dict(x=0, y=1.15, orientation="h"),
        barmode="group",
        hovermode="x unified",
        height=450,
        plot_bgcolor="white",
    )

    return fig


def create_airings_chart(weekly: list[dict[str, Any]], title: str) -> go.Figure:
    """Bar chart of a station's full weekly airing history."""
    fig = go.Figure(data=[go.Bar(
        x=[w["week"] for w in weekly],
        y=[w["ads"] for w in weekly],
        marker_color="#ff6b6b",
    )])

    fig.update_layout(
        title=title,
        xaxis_title="Week",
        yaxis_title="Ads Aired",
        height=300,
        plot_bgcolor="white",
    )

    return fig
