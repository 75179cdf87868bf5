"""Ray (1e27) fixed-point arithmetic.

All operands and results are non-negative integers interpreted as
``value * RAY``. Products are computed at full width and then checked against
a 256-bit bound, so a result is either exact (up to truncation of the final
division) or the call fails with ``MulOverflowError``.

``ray_div`` scales the numerator by ``RAY`` before dividing. Python integers
never wrap, so this cannot truncate silently; numerators are expected to stay
well below ``MAX_UINT256 // RAY`` for the balances and rates this engine
handles, and that range is not checked.
"""

from decimal import Decimal

from src.data.constants import BPS_SCALE, MAX_UINT256, RAY
from src.protocol.errors import DivideByZeroError, MulOverflowError


def _require_unsigned(op: str, *values: int) -> None:
    for value in values:
        if value < 0:
            raise ValueError(f"{op} operands must be non-negative, got {value}")


def ray_mul(a: int, b: int) -> int:
    """Multiply two ray values: ``a * b / RAY``, rounded down."""
    _require_unsigned("ray_mul", a, b)
    if a == 0 or b == 0:
        return 0
    product = a * b
    if product > MAX_UINT256:
        raise MulOverflowError(f"ray_mul overflow: {a} * {b}")
    return product // RAY


def ray_div(a: int, b: int) -> int:
    """Divide two ray values: ``a * RAY / b``, rounded down."""
    _require_unsigned("ray_div", a, b)
    if b == 0:
        raise DivideByZeroError(f"ray_div by zero: {a} / 0")
    return a * RAY // b


def ray_pow(x: int, n: int) -> int:
    """Raise a ray value to a non-negative integer power.

    Uses repeated ``ray_mul`` rather than squaring; exponents are small
    (at most a year of daily periods in practice) and truncation happens in
    the same order a step-by-step compounding would apply it.
    """
    if n < 0:
        raise ValueError(f"ray_pow exponent must be non-negative, got {n}")
    _require_unsigned("ray_pow", x)
    if n == 0:
        return RAY
    result = x
    for _ in range(n - 1):
        result = ray_mul(result, x)
    return result


def bps_to_ray(bps: int) -> int:
    """Convert basis points (1e4 scale) to a ray fraction."""
    return bps * RAY // BPS_SCALE


def ray_to_float(value: int) -> float:
    """Convert a ray value to a float, for display only."""
    return value / float(RAY)


def float_to_ray(value: float) -> int:
    """Convert a decimal fraction to ray, via its shortest repr.

    ``0.04`` becomes exactly ``4 * 10**25`` rather than the nearest binary
    float times ``RAY``.
    """
    return int(Decimal(repr(float(value))) * RAY)
