"""Pool utilization in ray scale."""

from src.data.constants import RAY
from src.protocol.fixed_point import ray_div


def utilization(cash: int, borrows: int) -> int:
    """Share of pool funds currently borrowed, in [0, RAY].

    U = borrows / (cash + borrows)

    An empty pool is unutilized; a pool with debt but no cash left is fully
    utilized.
    """
    if cash < 0 or borrows < 0:
        raise ValueError(f"cash and borrows must be non-negative, got {cash}, {borrows}")
    if cash == 0:
        return RAY if borrows > 0 else 0
    return ray_div(borrows, cash + borrows)
