"""Tests for 18-decimal fixed-point helpers."""

from decimal import Decimal

import pytest

from stablejoin.math.fixed_point import ONE_18, Bfp, div_down, div_up, mul_down, mul_up
from stablejoin.safe_int import DivisionByZero


class TestRounding:
    """mul/div round in the requested direction."""

    def test_mul_exact(self):
        assert mul_down(2 * ONE_18, 3 * ONE_18) == 6 * ONE_18
        assert mul_up(2 * ONE_18, 3 * ONE_18) == 6 * ONE_18

    def test_mul_inexact(self):
        """1 wei * 0.5 is 0 rounded down and 1 rounded up."""
        half = ONE_18 // 2
        assert mul_down(1, half) == 0
        assert mul_up(1, half) == 1

    def test_mul_up_zero(self):
        assert mul_up(0, ONE_18) == 0

    def test_div_inexact(self):
        """1/3 rounds to ...333 down and ...334 up."""
        assert div_down(ONE_18, 3 * ONE_18) == 333333333333333333
        assert div_up(ONE_18, 3 * ONE_18) == 333333333333333334

    def test_div_up_zero_numerator(self):
        assert div_up(0, 5) == 0

    @pytest.mark.parametrize("func", [div_down, div_up])
    def test_div_by_zero_raises(self, func):
        with pytest.raises(DivisionByZero):
            func(ONE_18, 0)


class TestBfpFromDecimal:
    """from_decimal() truncates and rejects negatives."""

    def test_fee(self):
        assert Bfp.from_decimal(Decimal("0.0004")).value == 4 * 10**14

    def test_truncates_below_wei(self):
        assert Bfp.from_decimal(Decimal("0.0000000000000000019")).value == 1

    def test_zero(self):
        assert Bfp.from_decimal(Decimal("0")).value == 0

    def test_negative_raises(self):
        with pytest.raises(ValueError, match="non-negative"):
            Bfp.from_decimal(Decimal("-0.001"))
