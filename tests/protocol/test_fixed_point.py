"""Tests for ray fixed-point arithmetic."""

import pytest

from src.data.constants import MAX_UINT256, RAY
from src.protocol.errors import DivideByZeroError, FixedPointError, MulOverflowError
from src.protocol.fixed_point import (
    bps_to_ray,
    float_to_ray,
    ray_div,
    ray_mul,
    ray_pow,
    ray_to_float,
)


class TestRayMul:
    @pytest.mark.parametrize("a", [1, 123, RAY, 5 * RAY, 10**40])
    def test_ray_is_identity(self, a: int) -> None:
        assert ray_mul(a, RAY) == a
        assert ray_mul(RAY, a) == a

    def test_zero_operand_short_circuits(self) -> None:
        # Would overflow if the product were checked
        assert ray_mul(0, 2**300) == 0
        assert ray_mul(2**300, 0) == 0

    def test_truncates(self) -> None:
        # 1/3 * 1/3 = 0.111... rounded down
        third = RAY // 3
        assert ray_mul(third, third) == third * third // RAY

    def test_product_at_bound_is_allowed(self) -> None:
        assert ray_mul(MAX_UINT256, 1) == MAX_UINT256 // RAY

    def test_overflow(self) -> None:
        with pytest.raises(MulOverflowError):
            ray_mul(2**200, 2**100)

    def test_overflow_is_builtin_overflow(self) -> None:
        with pytest.raises(OverflowError):
            ray_mul(MAX_UINT256, 2)

    @pytest.mark.parametrize("a, b", [(-(2**300), 2**300), (-1, RAY), (RAY, -1), (-1, 0)])
    def test_negative_operand_rejected(self, a: int, b: int) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            ray_mul(a, b)


class TestRayDiv:
    @pytest.mark.parametrize("a", [1, 7, RAY, 3 * 10**40])
    def test_self_division_is_one(self, a: int) -> None:
        assert ray_div(a, a) == RAY

    def test_exact_quotient(self) -> None:
        assert ray_div(2 * 10**26, 8 * 10**26) == 25 * 10**25

    def test_divide_by_zero(self) -> None:
        with pytest.raises(DivideByZeroError):
            ray_div(RAY, 0)

    def test_divide_by_zero_is_zero_division(self) -> None:
        with pytest.raises(ZeroDivisionError):
            ray_div(0, 0)

    @pytest.mark.parametrize("a, b", [(-RAY, RAY), (RAY, -RAY)])
    def test_negative_operand_rejected(self, a: int, b: int) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            ray_div(a, b)

    @pytest.mark.parametrize(
        "a, b",
        [
            (123_456_789 * 10**20, 3 * RAY + 17),
            (RAY // 7, RAY),
            (10**35, 12 * RAY + 5 * 10**25),
        ],
    )
    def test_round_trip_within_one_unit(self, a: int, b: int) -> None:
        assert abs(ray_div(ray_mul(a, b), b) - a) <= 1


class TestRayPow:
    @pytest.mark.parametrize("x", [0, 1, RAY, 2 * RAY, 10**50])
    def test_zeroth_power_is_one(self, x: int) -> None:
        assert ray_pow(x, 0) == RAY

    def test_first_power_is_identity(self) -> None:
        assert ray_pow(0, 1) == 0
        assert ray_pow(12_345 * 10**22, 1) == 12_345 * 10**22

    def test_square_matches_mul(self) -> None:
        x = RAY + RAY // 3
        assert ray_pow(x, 2) == ray_mul(x, x)

    def test_exact_powers(self) -> None:
        assert ray_pow(2 * RAY, 10) == 1024 * RAY
        assert ray_pow(RAY, 365) == RAY
        assert ray_pow(RAY // 2, 3) == RAY // 8

    def test_zero_base(self) -> None:
        assert ray_pow(0, 5) == 0

    def test_overflow_propagates(self) -> None:
        with pytest.raises(MulOverflowError):
            ray_pow(10**50, 3)

    def test_negative_exponent(self) -> None:
        with pytest.raises(ValueError):
            ray_pow(RAY, -1)

    @pytest.mark.parametrize("n", [0, 1, 3])
    def test_negative_base_rejected(self, n: int) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            ray_pow(-RAY, n)


class TestConversions:
    def test_bps_to_ray(self) -> None:
        assert bps_to_ray(10_000) == RAY
        assert bps_to_ray(2_500) == RAY // 4
        assert bps_to_ray(0) == 0

    def test_float_to_ray_is_exact_for_decimals(self) -> None:
        assert float_to_ray(0.04) == 4 * 10**25
        assert float_to_ray(0.92) == 92 * 10**25
        assert float_to_ray(1.0) == RAY

    def test_ray_to_float(self) -> None:
        assert ray_to_float(RAY // 2) == pytest.approx(0.5)
        assert ray_to_float(0) == 0.0


def test_errors_share_base() -> None:
    assert issubclass(DivideByZeroError, FixedPointError)
    assert issubclass(MulOverflowError, FixedPointError)
