"""Climate Trends — per-variable charts of the simulated weather history."""

from __future__ import annotations

import plotly.graph_objects as go
import streamlit as st

from shared import (
    CLIMATE_VARIABLES,
    PLOTLY_LAYOUT_DEFAULTS,
    VARIABLE_LABELS,
    SuitabilityService,
    WeatherDataError,
    format_measurement,
    get_repository,
    render_analysis_sidebar,
)

# ── Page config ──────────────────────────────────────────────────────────────

st.set_page_config(
    page_title="Climate Trends",
    page_icon="\U0001f4c8",
    layout="wide",
)

# ── Sidebar ──────────────────────────────────────────────────────────────────

st.sidebar.title("Climate Trends")

service = SuitabilityService(get_repository())
selection = render_analysis_sidebar(service)
if selection is None:
    st.stop()

location = selection.location

selected_vars = st.sidebar.multiselect(
    "Variables",
    list(CLIMATE_VARIABLES),
    default=["temperature", "precipitation"],
    format_func=lambda v: VARIABLE_LABELS[v],
)

# ── Fetch ────────────────────────────────────────────────────────────────────

with st.spinner("Loading historical weather..."):
    try:
        samples = service.fetch_series(location, selection.days, selection.seed)
    except WeatherDataError as exc:
        st.error(f"Failed to load weather data: {exc}")
        st.stop()

st.markdown(
    f"# Climate Trends"
    f"  \n{location['name']} | last {selection.days} days (simulated)"
)

if not selected_vars:
    st.info("Select at least one variable to chart.")
    st.stop()

if not samples:
    st.warning("No weather data available for this period.")
    st.stop()

# ── One chart per variable ───────────────────────────────────────────────────

for trend in service.prepare_variable_trends(samples, selected_vars):
    st.subheader(f"{trend.label} ({trend.unit})")

    avg_col, max_col, min_col = st.columns(3)
    avg_col.metric("Average", format_measurement(trend.stats["avg"], trend.unit, 1))
    max_col.metric("Maximum", format_measurement(trend.stats["max"], trend.unit, 1))
    min_col.metric("Minimum", format_measurement(trend.stats["min"], trend.unit, 1))

    if trend.variable == "precipitation":
        trace = go.Bar(
            x=trend.dates, y=trend.values,
            marker_color=trend.color,
            hovertemplate=f"%{{x}}<br>%{{y:.1f}} {trend.unit}<extra></extra>",
        )
    else:
        trace = go.Scatter(
            x=trend.dates, y=trend.values,
            mode="lines+markers",
            line=dict(color=trend.color, width=2),
            marker=dict(size=5),
            hovertemplate=f"%{{x}}<br>%{{y:.1f}} {trend.unit}<extra></extra>",
        )

    fig = go.Figure(trace)
    if trend.stats["avg"] is not None:
        fig.add_hline(
            y=trend.stats["avg"], line_dash="dot", line_color="#888888",
            annotation_text="avg",
        )
    fig.update_layout(
        **PLOTLY_LAYOUT_DEFAULTS,
        yaxis_title=f"{trend.label} ({trend.unit})",
        height=320,
    )
    st.plotly_chart(fig, use_container_width=True)
