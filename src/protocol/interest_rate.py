"""Kinked (piecewise linear) borrow rate curve in ray fixed point.

Rates are per second. Below the kink the rate ramps from ``base`` to
``base + slope_below``; above it the steeper ``slope_above`` is spread over
the remaining utilization up to 100%.
"""

import numpy as np
import pandas as pd

from src.data.constants import RAY
from src.protocol.curve_params import CurveParams
from src.protocol.fixed_point import bps_to_ray, ray_div, ray_mul, ray_to_float
from src.protocol.utilization import utilization
from src.protocol.yields import per_second_to_apr


def rate_at_utilization(u: int, params: CurveParams) -> int:
    """Per-second borrow rate for a ray-scaled utilization."""
    if u == 0:
        return params.base

    if u <= params.kink:
        return params.base + ray_mul(params.slope_below, ray_div(u, params.kink))

    denom = RAY - params.kink
    if denom == 0:
        # No room above a 100% kink
        return params.base + params.slope_below
    excess = u - params.kink
    return (
        params.base
        + params.slope_below
        + ray_mul(params.slope_above, ray_div(excess, denom))
    )


def borrow_rate_per_second(
    cash: int,
    borrows: int,
    kink: int,
    slope_below: int,
    slope_above: int,
    base: int,
) -> int:
    """Per-second borrow rate for a pool holding ``cash`` and owed ``borrows``."""
    params = CurveParams(
        kink=kink, slope_below=slope_below, slope_above=slope_above, base=base
    )
    return rate_at_utilization(utilization(cash, borrows), params)


def supply_rate_at_utilization(u: int, params: CurveParams, fee_bps: int = 0) -> int:
    """Per-second supply rate.

    R_supply = R_borrow * U * (1 - fee)
    """
    borrow_rate = rate_at_utilization(u, params)
    return ray_mul(ray_mul(borrow_rate, u), RAY - bps_to_ray(fee_bps))


def supply_rate_per_second(
    cash: int, borrows: int, params: CurveParams, fee_bps: int = 0
) -> int:
    """Per-second supply rate for a pool holding ``cash`` and owed ``borrows``."""
    return supply_rate_at_utilization(utilization(cash, borrows), params, fee_bps)


class InterestRateModel:
    """Kinked rate curve bound to one set of parameters and a protocol fee."""

    def __init__(self, params: CurveParams, fee_bps: int = 0) -> None:
        self.params = params
        self.fee_bps = fee_bps

    def borrow_rate(self, cash: int, borrows: int) -> int:
        return borrow_rate_per_second(
            cash,
            borrows,
            self.params.kink,
            self.params.slope_below,
            self.params.slope_above,
            self.params.base,
        )

    def supply_rate(self, cash: int, borrows: int) -> int:
        return supply_rate_per_second(cash, borrows, self.params, self.fee_bps)

    def borrow_rate_at(self, u: int) -> int:
        return rate_at_utilization(u, self.params)

    def supply_rate_at(self, u: int) -> int:
        return supply_rate_at_utilization(u, self.params, self.fee_bps)

    def rate_curve(self, n_points: int = 200) -> pd.DataFrame:
        """Sample the curve over [0, 100%] utilization for plotting.

        Rates are evaluated exactly in ray on an integer utilization grid
        and only converted to floats for the returned frame.

        Returns:
            DataFrame with columns: utilization, borrow_rate, supply_rate,
            borrow_apr, supply_apr
        """
        if n_points < 2:
            raise ValueError(f"n_points must be at least 2, got {n_points}")

        grid = [i * RAY // (n_points - 1) for i in range(n_points)]
        borrow = [self.borrow_rate_at(u) for u in grid]
        supply = [self.supply_rate_at(u) for u in grid]

        return pd.DataFrame(
            {
                "utilization": np.linspace(0, 1, n_points),
                "borrow_rate": [ray_to_float(r) for r in borrow],
                "supply_rate": [ray_to_float(r) for r in supply],
                "borrow_apr": [ray_to_float(per_second_to_apr(r)) for r in borrow],
                "supply_apr": [ray_to_float(per_second_to_apr(r)) for r in supply],
            }
        )
