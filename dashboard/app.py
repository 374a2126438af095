"""Activity Suitability Dashboard — Streamlit + Plotly over simulated weather history."""

from __future__ import annotations

import plotly.graph_objects as go
import streamlit as st

from shared import (
    ASI_BLUE,
    LEVEL_COLORS,
    PLOTLY_LAYOUT_DEFAULTS,
    TREND_ICONS,
    VARIABLE_LABELS,
    VARIABLE_UNITS,
    SuitabilityService,
    WeatherDataError,
    format_measurement,
    format_range,
    format_score_delta,
    get_repository,
    render_analysis_sidebar,
)

# ── Page config ──────────────────────────────────────────────────────────────

st.set_page_config(
    page_title="Activity Suitability Index",
    page_icon="\U0001f30d",
    layout="wide",
)


# ── Sidebar ──────────────────────────────────────────────────────────────────

st.sidebar.title("Activity Suitability")

service = SuitabilityService(get_repository())
selection = render_analysis_sidebar(service)
if selection is None:
    st.stop()

location = selection.location
profile = selection.profile


# ── Fetch and score ─────────────────────────────────────────────────────────

with st.spinner("Loading historical weather..."):
    try:
        samples = service.fetch_series(location, selection.days, selection.seed)
        report = service.evaluate(samples, profile)
    except WeatherDataError as exc:
        st.error(f"Failed to load weather data: {exc}")
        st.stop()

result = report.result
level_color = LEVEL_COLORS[result.level]


# ── Header ───────────────────────────────────────────────────────────────────

st.markdown(
    f"# Activity Suitability Index (ASI)"
    f"  \n**{profile.name}** | {location['name']}"
    f"  \nBased on simulated historical data, last {selection.days} days"
)

st.markdown(
    f'<div style="height:4px;background:{level_color};border-radius:2px;'
    f'margin-bottom:1rem"></div>',
    unsafe_allow_html=True,
)


# ── ASI card ─────────────────────────────────────────────────────────────────

kpi1, kpi2, kpi3 = st.columns(3)
kpi1.metric(
    "ASI", result.score,
    delta=format_score_delta(result.score, result.previous_score),
)
kpi2.markdown(
    f"**Level**  \n<span style='color:{level_color};font-size:1.6rem'>{result.level.value}</span>",
    unsafe_allow_html=True,
)
kpi3.markdown(f"**Trend**  \n{TREND_ICONS[result.trend]} {report.trend_message}")

st.progress(result.score / 100)

cond_col, rec_col = st.columns(2)

with cond_col:
    st.subheader(f"Current Conditions ({report.recent_window}-day avg)")
    for var in ("temperature", "humidity", "wind_speed", "precipitation"):
        st.markdown(
            f"- {VARIABLE_LABELS[var]}: "
            f"{format_measurement(report.recent_conditions.get(var), VARIABLE_UNITS[var])}"
        )

with rec_col:
    st.subheader("Recommendation")
    st.write(report.recommendation)
    st.caption(f"Ideal conditions for {profile.name}")
    st.markdown(
        f"- Temperature: {format_range(profile.temperature, '°C')}\n"
        f"- Humidity: {format_range(profile.humidity, '%')}\n"
        f"- Wind: {format_range(profile.wind_speed, 'km/h')}\n"
        f"- Precipitation: {format_range(profile.precipitation, 'mm')}"
    )


# ── Chart 1: Sub-scores ──────────────────────────────────────────────────────

st.subheader("Score by Variable")

sub = result.sub_scores
sub_values = [sub.temperature, sub.humidity, sub.wind_speed, sub.precipitation]
fig_sub = go.Figure(go.Bar(
    x=[VARIABLE_LABELS[v] for v in ("temperature", "humidity", "wind_speed", "precipitation")],
    y=sub_values,
    marker_color=ASI_BLUE,
    text=[f"{v:.0f}" for v in sub_values],
    textposition="outside",
))
fig_sub.update_layout(
    **PLOTLY_LAYOUT_DEFAULTS,
    yaxis=dict(title="Sub-score", range=[0, 110]),
    height=320,
)
st.plotly_chart(fig_sub, use_container_width=True)


# ── Chart 2: Daily suitability ───────────────────────────────────────────────

st.subheader("Daily Suitability")

if not report.daily_scores:
    st.warning("No daily data available.")
else:
    fig_daily = go.Figure(go.Scatter(
        x=[d["timestamp"] for d in report.daily_scores],
        y=[d["score"] for d in report.daily_scores],
        mode="lines+markers",
        line=dict(color=level_color, width=2),
        marker=dict(size=6),
        hovertemplate="%{x}<br>Score %{y:.0f}<extra></extra>",
    ))
    fig_daily.add_hline(
        y=result.score, line_dash="dash", line_color="#888888",
        annotation_text=f"ASI {result.score}",
    )
    fig_daily.update_layout(
        **PLOTLY_LAYOUT_DEFAULTS,
        yaxis=dict(title="Score", range=[0, 105]),
        height=360,
    )
    st.plotly_chart(fig_daily, use_container_width=True)


# ── Export ───────────────────────────────────────────────────────────────────

st.subheader("Export Data")

try:
    export = service.build_csv_export(location, profile, samples)
except WeatherDataError as exc:
    st.error(f"Failed to build export: {exc}")
else:
    st.download_button(
        "Download CSV",
        data=export.content,
        file_name=export.filename,
        mime="text/csv",
    )
    st.caption(f"{export.row_count} daily rows")
