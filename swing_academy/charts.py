"""
plotly figure builders for the lesson screens.

Every builder returns a fresh go.Figure styled like the rest of the page
(transparent background, tight margins). The Streamlit page only calls
st.plotly_chart() on the result, so figures can be checked without a
browser.
"""

from __future__ import annotations

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go

from swing_academy.models import ChartPattern, EntryStrategy, PricePoint, TimeframeView, Trend

PRICE_COLOR  = "#2563eb"   # blue
LEVEL_COLOR  = "#dc2626"   # red
STOP_COLOR   = "#ef4444"   # red
TARGET_COLOR = "#10b981"   # green
ENTRY_COLOR  = "#f59e0b"   # amber

TREND_COLORS = {
    Trend.UP:      "#10b981",
    Trend.DOWN:    "#ef4444",
    Trend.NEUTRAL: "#6b7280",
}


def price_frame(points: list[PricePoint]) -> pd.DataFrame:
    return pd.DataFrame([p.model_dump() for p in points], columns=["x", "price"])


def _style(fig: go.Figure, height: int) -> go.Figure:
    fig.update_layout(
        paper_bgcolor="rgba(0,0,0,0)",
        plot_bgcolor="rgba(0,0,0,0)",
        height=height,
        margin=dict(t=20, b=40, l=40, r=20),
        showlegend=False,
    )
    return fig


def _line(points: list[PricePoint]) -> go.Figure:
    fig = px.line(
        price_frame(points), x="x", y="price",
        markers=True,
        labels={"x": "Time", "price": "Price"},
        color_discrete_sequence=[PRICE_COLOR],
    )
    fig.update_traces(line=dict(width=2), marker=dict(size=8))
    return fig


def pattern_figure(pattern: ChartPattern, show_levels: bool = False) -> go.Figure:
    """Price line; key levels appear as dashed lines once the signal is revealed."""
    fig = _line(pattern.data)
    if show_levels:
        for name, value in pattern.key_levels.items():
            fig.add_hline(
                y=value, line_dash="dash", line_color=LEVEL_COLOR,
                annotation_text=name, annotation_position="top left",
            )
    return _style(fig, height=300)


def strategy_figure(strategy: EntryStrategy) -> go.Figure:
    fig = _line(strategy.data)
    fig.add_hline(
        y=strategy.stop.price, line_dash="dot", line_color=STOP_COLOR,
        annotation_text="Stop Loss", annotation_position="bottom left",
    )
    fig.add_hline(
        y=strategy.target.price, line_dash="dot", line_color=TARGET_COLOR,
        annotation_text="Target", annotation_position="top left",
    )
    fig.add_vline(
        x=strategy.entry.x, line_width=2, line_color=ENTRY_COLOR,
        annotation_text="Entry", annotation_position="top",
    )
    return _style(fig, height=300)


def timeframe_figure(view: TimeframeView) -> go.Figure:
    """Compact bar chart, bars coloured by the view's trend label."""
    df    = price_frame(view.data)
    color = TREND_COLORS[view.trend]
    fig = go.Figure(go.Bar(
        x=df["x"], y=df["price"],
        marker_color=[color] * len(df),
        name=view.timeframe.value,
    ))
    if not df.empty:
        fig.update_yaxes(range=[df["price"].min() - 10, df["price"].max() + 10])
    fig.update_xaxes(visible=False)
    fig.update_yaxes(visible=False)
    fig = _style(fig, height=150)
    fig.update_layout(margin=dict(t=5, b=5, l=5, r=5))
    return fig
