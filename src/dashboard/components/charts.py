"""Reusable Plotly chart components."""

import pandas as pd
import plotly.graph_objects as go


def rate_curve_chart(
    df: pd.DataFrame,
    current_utilization: float | None = None,
    kink: float | None = None,
    title: str = "Interest Rate Curve",
) -> go.Figure:
    """Create an interactive rate curve chart.

    Args:
        df: DataFrame with columns: utilization, borrow_apr, supply_apr.
        current_utilization: If provided, marks current utilization on chart.
        kink: If provided, marks the kink utilization on chart.
        title: Chart title.
    """
    fig = go.Figure()

    fig.add_trace(
        go.Scatter(
            x=df["utilization"] * 100,
            y=df["borrow_apr"] * 100,
            name="Borrow APR",
            line=dict(color="#ef4444", width=2),
            hovertemplate="Utilization: %{x:.1f}%<br>Borrow APR: %{y:.2f}%<extra></extra>",
        )
    )

    fig.add_trace(
        go.Scatter(
            x=df["utilization"] * 100,
            y=df["supply_apr"] * 100,
            name="Supply APR",
            line=dict(color="#22c55e", width=2),
            hovertemplate="Utilization: %{x:.1f}%<br>Supply APR: %{y:.2f}%<extra></extra>",
        )
    )

    if kink is not None:
        fig.add_vline(
            x=kink * 100,
            line_dash="dot",
            line_color="#f59e0b",
            annotation_text=f"Kink: {kink*100:.0f}%",
            annotation_position="top left",
        )

    if current_utilization is not None:
        fig.add_vline(
            x=current_utilization * 100,
            line_dash="dash",
            line_color="#6b7280",
            annotation_text=f"Current: {current_utilization*100:.1f}%",
        )

    fig.update_layout(
        title=title,
        xaxis_title="Utilization (%)",
        yaxis_title="Rate (%)",
        hovermode="x unified",
        template="plotly_dark",
        height=450,
    )

    return fig


def compounding_chart(df: pd.DataFrame, apr: float) -> go.Figure:
    """Bar chart of APY by compounding frequency.

    Args:
        df: DataFrame with columns: periods_per_year, apy.
        apr: The uncompounded APR, drawn as a reference line.
    """
    fig = go.Figure(
        go.Bar(
            x=df["periods_per_year"].astype(str),
            y=df["apy"] * 100,
            marker_color="#3b82f6",
            hovertemplate="Periods: %{x}<br>APY: %{y:.4f}%<extra></extra>",
        )
    )
    fig.add_hline(
        y=apr * 100,
        line_dash="dash",
        line_color="#6b7280",
        annotation_text=f"APR: {apr*100:.2f}%",
    )
    fig.update_layout(
        title="APY by Compounding Frequency",
        xaxis_title="Periods per Year",
        yaxis_title="APY (%)",
        template="plotly_dark",
        height=350,
    )
    return fig
