"""Ray Rate Engine Dashboard — Main Streamlit entry point."""

import logging
import os
from pathlib import Path

import streamlit as st

# Load .env file if present (for RATE_CONFIG_PATH)
_env_path = Path(__file__).resolve().parents[2] / ".env"
if _env_path.exists():
    for line in _env_path.read_text().splitlines():
        line = line.strip()
        if line and not line.startswith("#") and "=" in line:
            key, _, value = line.partition("=")
            os.environ.setdefault(key.strip(), value.strip())

from src.dashboard.components.sidebar import render_sidebar  # noqa: E402
from src.dashboard.tabs.rates import render_rates  # noqa: E402
from src.data.provider_factory import create_provider  # noqa: E402
from src.data.static_params import StaticDataProvider  # noqa: E402
from src.governance.validation import validate_curve, validate_fee  # noqa: E402
from src.protocol.errors import OutOfRangeError  # noqa: E402

logging.basicConfig(level=os.environ.get("LOG_LEVEL", "INFO"))


def main() -> None:
    st.set_page_config(
        page_title="Ray Rate Engine",
        page_icon="📈",
        layout="wide",
    )

    st.title("Ray Rate Engine")
    st.caption("Kinked borrow curve — per-second rate, APR and APY")

    provider = create_provider()
    if isinstance(provider, StaticDataProvider) and os.environ.get("RATE_CONFIG_PATH"):
        st.sidebar.error("Rate config could not be loaded; using static data")

    params = render_sidebar(provider)

    max_rate = provider.get_rate_config(params.market).max_rate
    try:
        validate_curve(params.curve, max_rate)
        validate_fee(params.fee_bps)
    except OutOfRangeError as exc:
        st.error(f"Invalid parameters: {exc}")
        return

    render_rates(provider, params)


if __name__ == "__main__":
    main()
