"""Per-second rate to APR/APY conversion and time-value-of-money helpers."""

from src.data.constants import MAX_COMPOUNDING_PERIODS, RAY, SECONDS_PER_YEAR
from src.protocol.errors import DivideByZeroError, PeriodsTooHighError
from src.protocol.fixed_point import ray_div, ray_mul, ray_pow


def per_second_to_apr(rate_per_second: int) -> int:
    """Annualize a per-second rate without compounding."""
    return ray_mul(rate_per_second, SECONDS_PER_YEAR * RAY)


def apr_to_apy(apr: int, periods_per_year: int) -> int:
    """Compound an APR over ``periods_per_year`` equal periods.

    APY = (1 + APR / n) ** n - 1

    Never negative: if truncation leaves the compounded factor below one,
    the result is 0.
    """
    if periods_per_year < 0:
        raise ValueError(
            f"apr_to_apy: periods_per_year must be non-negative, got {periods_per_year}"
        )
    if periods_per_year == 0:
        raise DivideByZeroError("apr_to_apy: periods_per_year is zero")
    if periods_per_year > MAX_COMPOUNDING_PERIODS:
        raise PeriodsTooHighError(
            f"apr_to_apy: {periods_per_year} periods exceeds cap of "
            f"{MAX_COMPOUNDING_PERIODS}"
        )
    one_plus_r = RAY + ray_div(apr, periods_per_year * RAY)
    compounded = ray_pow(one_plus_r, periods_per_year)
    if compounded < RAY:
        return 0
    return compounded - RAY


def per_second_to_apy(
    rate_per_second: int, periods_per_year: int = MAX_COMPOUNDING_PERIODS
) -> int:
    """Annualize a per-second rate with compounding."""
    return apr_to_apy(per_second_to_apr(rate_per_second), periods_per_year)


def future_value(principal: int, rate_per_period: int, periods: int) -> int:
    """Compound ``principal`` for ``periods`` at ``rate_per_period``.

    FV = P * (1 + r) ** k
    """
    if periods == 0:
        return principal
    return ray_mul(principal, ray_pow(RAY + rate_per_period, periods))


def present_value(future_value: int, rate_per_period: int, periods: int) -> int:
    """Discount ``future_value`` back ``periods`` at ``rate_per_period``.

    PV = FV / (1 + r) ** k
    """
    if periods == 0:
        return future_value
    return ray_div(future_value, ray_pow(RAY + rate_per_period, periods))
