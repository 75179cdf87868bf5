"""Static data provider with hardcoded ray-scaled curve parameters."""

from src.data.constants import RAY, SECONDS_PER_YEAR, USDC, WETH
from src.data.interfaces import RateConfig, RateConfigProvider, ReserveState
from src.protocol.curve_params import CurveParams

# --- Annual rates spread over a 365.25-day year ---

_RATE_CONFIGS: dict[str, RateConfig] = {
    USDC: RateConfig(
        curve=CurveParams(
            kink=RAY * 90 // 100,
            slope_below=RAY * 4 // 100 // SECONDS_PER_YEAR,
            slope_above=RAY * 60 // 100 // SECONDS_PER_YEAR,
            base=RAY * 1 // 100 // SECONDS_PER_YEAR,
        ),
        fee_bps=1_000,
    ),
    WETH: RateConfig(
        curve=CurveParams(
            kink=RAY * 80 // 100,
            slope_below=RAY * 27 // 1000 // SECONDS_PER_YEAR,
            slope_above=RAY * 80 // 100 // SECONDS_PER_YEAR,
            base=0,
        ),
        fee_bps=1_500,
    ),
}

# Default pool states (representative snapshot)
_RESERVE_STATES: dict[str, ReserveState] = {
    USDC: ReserveState(
        cash=420_000_000 * 10**6,
        borrows=1_380_000_000 * 10**6,
    ),
    WETH: ReserveState(
        cash=600_000 * 10**18,
        borrows=2_200_000 * 10**18,
    ),
}


class StaticDataProvider(RateConfigProvider):
    """Data provider using hardcoded market parameters."""

    def markets(self) -> list[str]:
        return list(_RATE_CONFIGS)

    def get_rate_config(self, market: str) -> RateConfig:
        return _RATE_CONFIGS[market]

    def get_reserve_state(self, market: str) -> ReserveState:
        return _RESERVE_STATES[market]
