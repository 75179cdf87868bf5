"""Kinked rate curve parameters."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CurveParams:
    """Parameters for the kinked rate curve, all ray-scaled."""

    kink: int  # utilization where the slope changes, in [0, RAY]
    slope_below: int  # per-second rate added between 0 and the kink
    slope_above: int  # per-second rate added between the kink and 100%
    base: int  # per-second rate at zero utilization
