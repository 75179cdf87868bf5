"""Interest Rates tab — rate curve, APR/APY and borrow impact."""

import pandas as pd
import streamlit as st

from src.dashboard.components.charts import compounding_chart, rate_curve_chart
from src.dashboard.components.metrics_cards import format_pct, format_pct_delta, kpi_row
from src.dashboard.components.sidebar import SidebarParams
from src.data.constants import RAY
from src.data.interfaces import RateConfigProvider
from src.protocol.errors import RateEngineError
from src.protocol.fixed_point import float_to_ray, ray_to_float
from src.protocol.interest_rate import InterestRateModel
from src.protocol.pool import PoolModel, PoolState
from src.protocol.yields import apr_to_apy, per_second_to_apr

COMPOUNDING_PERIODS = [1, 2, 4, 12, 52, 365]
SENSITIVITY_UTILIZATIONS = [0.2, 0.4, 0.6, 0.8, 0.90, 0.95, 0.98, 1.0]


def render_rates(provider: RateConfigProvider, params: SidebarParams) -> None:
    """Render the interest rates tab."""
    st.header(f"{params.market} Interest Rates")

    rate_model = InterestRateModel(params.curve, fee_bps=params.fee_bps)
    state = PoolState.from_reserve_state(provider.get_reserve_state(params.market))
    util = (
        params.utilization_override
        if params.utilization_override is not None
        else state.utilization
    )

    borrow_rate = rate_model.borrow_rate_at(util)
    supply_rate = rate_model.supply_rate_at(util)
    borrow_apr = per_second_to_apr(borrow_rate)
    supply_apr = per_second_to_apr(supply_rate)

    try:
        borrow_apy = apr_to_apy(borrow_apr, params.periods_per_year)
        supply_apy = apr_to_apy(supply_apr, params.periods_per_year)
    except RateEngineError as exc:
        st.error(f"APY unavailable: {exc}")
        return

    kpi_row(
        [
            ("Utilization", format_pct(util, 1), None),
            ("Borrow APR", format_pct(borrow_apr), None),
            ("Borrow APY", format_pct(borrow_apy), None),
            ("Supply APY", format_pct(supply_apy), None),
        ]
    )
    st.caption(f"Per-second borrow rate (ray): {borrow_rate:,}")

    df_curve = rate_model.rate_curve()
    fig = rate_curve_chart(
        df_curve,
        current_utilization=ray_to_float(util),
        kink=ray_to_float(params.curve.kink),
        title=f"{params.market} Rate Curve",
    )
    st.plotly_chart(fig, use_container_width=True)

    col1, col2 = st.columns(2)

    with col1:
        st.subheader("Utilization Sensitivity")
        rows = []
        for u in SENSITIVITY_UTILIZATIONS:
            u_ray = float_to_ray(u)
            rows.append(
                {
                    "Utilization": f"{u*100:.0f}%",
                    "Borrow APR": format_pct(per_second_to_apr(rate_model.borrow_rate_at(u_ray))),
                    "Supply APR": format_pct(per_second_to_apr(rate_model.supply_rate_at(u_ray))),
                }
            )
        st.table(pd.DataFrame(rows))

    with col2:
        st.subheader("Compounding")
        df_apy = pd.DataFrame(
            {
                "periods_per_year": COMPOUNDING_PERIODS,
                "apy": [ray_to_float(apr_to_apy(borrow_apr, n)) for n in COMPOUNDING_PERIODS],
            }
        )
        st.plotly_chart(
            compounding_chart(df_apy, ray_to_float(borrow_apr)), use_container_width=True
        )

    # Borrow impact simulation
    st.divider()
    st.subheader("Borrow Impact Simulation")

    pool_model = PoolModel(state, rate_model)
    available_pct = st.slider(
        "Additional Borrow (% of available cash)",
        min_value=0,
        max_value=100,
        value=25,
        step=5,
    )

    if available_pct > 0 and state.cash > 0:
        impact = pool_model.simulate_borrow(state.cash * available_pct // 100)
        c1, c2 = st.columns(2)
        with c1:
            st.metric(
                "Utilization",
                format_pct(impact["utilization_after"], 1),
                format_pct_delta(impact["utilization_before"], impact["utilization_after"], 1),
            )
        with c2:
            before = per_second_to_apr(impact["borrow_rate_before"])
            after = per_second_to_apr(impact["borrow_rate_after"])
            st.metric("Borrow APR", format_pct(after), format_pct_delta(before, after))
        if impact["utilization_after"] == RAY:
            st.warning("Pool fully utilized: no cash left to withdraw.")
