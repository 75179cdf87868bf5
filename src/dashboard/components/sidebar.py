"""Sidebar parameter controls."""

from dataclasses import dataclass

import streamlit as st

from src.data.constants import MAX_COMPOUNDING_PERIODS, MAX_FEE_BPS, SECONDS_PER_YEAR
from src.data.interfaces import RateConfigProvider
from src.protocol.curve_params import CurveParams
from src.protocol.fixed_point import float_to_ray, ray_to_float
from src.protocol.yields import per_second_to_apr


@dataclass
class SidebarParams:
    """User-controlled parameters from the sidebar."""

    market: str
    curve: CurveParams
    fee_bps: int
    utilization_override: int | None  # ray
    periods_per_year: int


def _apr_pct(rate_per_second: int) -> float:
    return round(ray_to_float(per_second_to_apr(rate_per_second)) * 100, 2)


def _per_second(apr_pct: float) -> int:
    return float_to_ray(apr_pct / 100) // SECONDS_PER_YEAR


def render_sidebar(provider: RateConfigProvider) -> SidebarParams:
    """Render sidebar controls and return selected parameters.

    Curve inputs are entered as annual percentages and converted to
    per-second ray values.
    """
    st.sidebar.header("Market")
    market = st.sidebar.selectbox("Market", provider.markets())
    config = provider.get_rate_config(market)
    curve = config.curve

    st.sidebar.header("Curve Parameters")

    kink_pct = st.sidebar.slider(
        "Kink Utilization (%)",
        min_value=0.0,
        max_value=100.0,
        value=round(ray_to_float(curve.kink) * 100, 1),
        step=0.5,
    )
    base_pct = st.sidebar.number_input(
        "Base APR (%)", min_value=0.0, value=_apr_pct(curve.base), step=0.25
    )
    slope_below_pct = st.sidebar.number_input(
        "Slope Below Kink (% APR)",
        min_value=0.0,
        value=_apr_pct(curve.slope_below),
        step=0.5,
    )
    slope_above_pct = st.sidebar.number_input(
        "Slope Above Kink (% APR)",
        min_value=0.0,
        value=_apr_pct(curve.slope_above),
        step=5.0,
    )
    fee_bps = st.sidebar.number_input(
        "Protocol Fee (bps)",
        min_value=0,
        max_value=MAX_FEE_BPS,
        value=config.fee_bps,
        step=50,
    )

    st.sidebar.header("What-If Analysis")

    use_util_override = st.sidebar.checkbox("Override Utilization", value=False)
    util_override: int | None = None
    if use_util_override:
        util_override = float_to_ray(
            st.sidebar.slider(
                "Utilization (%)",
                min_value=0.0,
                max_value=100.0,
                value=80.0,
                step=0.5,
            )
            / 100.0
        )

    periods = st.sidebar.slider(
        "Compounding Periods per Year",
        min_value=1,
        max_value=MAX_COMPOUNDING_PERIODS,
        value=MAX_COMPOUNDING_PERIODS,
    )

    return SidebarParams(
        market=market,
        curve=CurveParams(
            kink=float_to_ray(kink_pct / 100),
            slope_below=_per_second(slope_below_pct),
            slope_above=_per_second(slope_above_pct),
            base=_per_second(base_pct),
        ),
        fee_bps=int(fee_bps),
        utilization_override=util_override,
        periods_per_year=periods,
    )
