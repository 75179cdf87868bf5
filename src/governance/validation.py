"""Range checks applied before a configuration update is accepted."""

from src.data.constants import MAX_FEE_BPS, MAX_RATE, RAY
from src.protocol.curve_params import CurveParams
from src.protocol.errors import OutOfRangeError


def validate_curve(curve: CurveParams, max_rate: int = MAX_RATE) -> None:
    """Raise ``OutOfRangeError`` unless the curve is admissible.

    The kink must lie in [0, RAY]; base and both slopes must lie in
    [0, max_rate], and max_rate itself may not exceed ``MAX_RATE``.
    """
    if max_rate > MAX_RATE:
        raise OutOfRangeError(f"max_rate {max_rate} above ceiling {MAX_RATE}")
    if not 0 <= curve.kink <= RAY:
        raise OutOfRangeError(f"kink {curve.kink} outside [0, {RAY}]")
    for name in ("base", "slope_below", "slope_above"):
        value = getattr(curve, name)
        if not 0 <= value <= max_rate:
            raise OutOfRangeError(f"{name} {value} outside [0, {max_rate}]")


def validate_fee(fee_bps: int) -> None:
    """Raise ``OutOfRangeError`` unless the fee is within [0, 10,000] bps."""
    if not 0 <= fee_bps <= MAX_FEE_BPS:
        raise OutOfRangeError(f"fee {fee_bps} bps outside [0, {MAX_FEE_BPS}]")
