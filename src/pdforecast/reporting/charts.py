"""
src/pdforecast/reporting/charts.py

Plotly figure builders. Each takes a record (or forecast) and returns a
figure; nothing here decides anything about the data.
"""

from __future__ import annotations

import math

import plotly.graph_objects as go

from pdforecast.data import reference as ref
from pdforecast.data.records import AgeDistribution, GeoHeatmap, MortalityRecord, ProjectionSeries
from pdforecast.forecasting.engine import ForecastResult

PRIMARY = "#667eea"
SECONDARY = "#764ba2"

PROJECTION_TITLES = {
    "total": "Total Population Projection",
    "age65plus": "Age 65+ Population Projection",
}


def _layout(title: str, x_title: str | None = None, y_title: str | None = None) -> dict:
    layout = {
        "title": title,
        "hovermode": "x",
        "plot_bgcolor": "#f7fafc",
        "paper_bgcolor": "white",
    }
    if x_title:
        layout["xaxis"] = {"title": x_title}
    if y_title:
        layout["yaxis"] = {"title": y_title}
    return layout


def age_distribution_figure(dist: AgeDistribution) -> go.Figure:
    trace = go.Bar(x=list(dist.age_groups), y=list(dist.population), marker={"color": PRIMARY})
    return go.Figure(data=[trace], layout=_layout("Population by Age Group", "Age Group", "Population"))


def projection_figure(series: ProjectionSeries) -> go.Figure:
    title = PROJECTION_TITLES.get(series.scenario, f"{series.scenario} Population Projection")
    trace = go.Scatter(
        x=list(series.years),
        y=list(series.values),
        mode="lines+markers",
        line={"color": PRIMARY, "width": 3},
        marker={"size": 8},
        fill="tozeroy",
        fillcolor="rgba(102, 126, 234, 0.2)",
        name=title,
    )
    return go.Figure(data=[trace], layout=_layout(title, "Year", "Population"))


def mortality_figure(record: MortalityRecord) -> go.Figure:
    trace = go.Bar(
        x=list(record.age_groups),
        y=list(record.rates),
        marker={"color": list(record.rates), "colorscale": "Reds", "showscale": True},
    )
    return go.Figure(
        data=[trace],
        layout=_layout("Parkinson's Mortality Rate by Age Group (per 100,000)", "Age Group", "Mortality Rate"),
    )


def mortality_trend_figure(record: MortalityRecord) -> go.Figure:
    hist = record.history_frame()
    fig = go.Figure(layout=_layout("Parkinson's Mortality Rate History (per 100,000)", "Year", "Mortality Rate"))
    for group in record.age_groups:
        sub = hist[hist["Age_Group"] == group]
        fig.add_trace(go.Scatter(x=sub["Year"].tolist(), y=sub["Rate_per_100k"].tolist(), mode="lines+markers", name=group))
    return fig


def forecast_figure(result: ForecastResult, *, show_band: bool = True) -> go.Figure:
    years = list(result.years)
    fig = go.Figure(layout=_layout("ML-Forecasted Parkinson's Disease Burden", "Year", "Number of Cases"))

    if show_band and result.interval is not None and years:
        pct = int(round(result.interval.level * 100))
        fig.add_trace(
            go.Scatter(
                x=years + years[::-1],
                y=result.interval.upper.tolist() + result.interval.lower.tolist()[::-1],
                fill="toself",
                fillcolor="rgba(118, 75, 162, 0.12)",
                line={"color": "rgba(0, 0, 0, 0)"},
                hoverinfo="skip",
                name=f"{pct}% band",
            )
        )

    fig.add_trace(
        go.Scatter(
            x=years,
            y=list(result.cases),
            mode="lines+markers",
            line={"color": SECONDARY, "width": 3},
            marker={"size": 6},
            fill="tozeroy",
            fillcolor="rgba(118, 75, 162, 0.2)",
            name="Predicted PD Cases",
        )
    )
    return fig


def heatmap_figure(heatmap: GeoHeatmap) -> go.Figure:
    label = heatmap.metric.capitalize()
    values = list(heatmap.values)
    trace = go.Scattergeo(
        lon=[c.lng for c in heatmap.cities],
        lat=[c.lat for c in heatmap.cities],
        mode="markers+text",
        text=[c.name for c in heatmap.cities],
        textposition="top center",
        marker={
            "size": [math.sqrt(max(v, 0.0)) * 3 for v in values],
            "color": values,
            "colorscale": "Reds",
            "showscale": True,
            "colorbar": {"title": f"{label}<br>(per 100K)"},
            "line": {"width": 2, "color": PRIMARY},
        },
        hovertemplate="<b>%{text}</b><br>Rate: %{marker.color:.1f}<extra></extra>",
    )
    layout = {
        "title": f"{ref.COUNTY_NAME} - Parkinson's {label} Distribution ({heatmap.year})",
        "geo": {
            "scope": "usa",
            "projection": {"type": "mercator"},
            "center": {"lat": 26.5, "lon": -81.9},
            "lataxis": {"range": [26.0, 27.0]},
            "lonaxis": {"range": [-82.4, -81.4]},
        },
        "paper_bgcolor": "white",
        "plot_bgcolor": "#f7fafc",
    }
    return go.Figure(data=[trace], layout=layout)
