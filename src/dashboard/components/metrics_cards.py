"""Metric cards for ray-scaled values."""

import streamlit as st

from src.protocol.fixed_point import ray_to_float


def format_pct(value: int, decimals: int = 2) -> str:
    """Format a ray fraction as a percentage string."""
    return f"{ray_to_float(value) * 100:.{decimals}f}%"


def format_pct_delta(before: int, after: int, decimals: int = 2) -> str:
    return f"{ray_to_float(after - before) * 100:+.{decimals}f}%"


def kpi_row(metrics: list[tuple[str, str, str | None]]) -> None:
    """Display a row of KPI cards.

    Args:
        metrics: List of (label, value, delta) tuples.
    """
    cols = st.columns(len(metrics))
    for col, (label, value, delta) in zip(cols, metrics):
        with col:
            st.metric(label=label, value=value, delta=delta)
