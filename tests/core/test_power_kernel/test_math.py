"""Tests for powcalc/core/power_kernel/math.py — series and squaring helpers."""

import math

import pytest

from powcalc.core.power_kernel import DomainError
from powcalc.core.power_kernel.math import (
    E,
    LN2,
    exponential,
    is_integer,
    natural_log,
    power_integer,
    reciprocal,
)


# ---------------------------------------------------------------------------
# is_integer / reciprocal
# ---------------------------------------------------------------------------

class TestIsInteger:
    def test_whole(self):
        assert is_integer(3.0) is True

    def test_negative_whole(self):
        assert is_integer(-2.0) is True

    def test_fraction(self):
        assert is_integer(3.5) is False

    def test_infinity_is_not_integer(self):
        assert is_integer(math.inf) is False
        assert is_integer(-math.inf) is False

    def test_nan_is_not_integer(self):
        assert is_integer(math.nan) is False


class TestReciprocal:
    def test_basic(self):
        assert reciprocal(4.0) == 0.25

    def test_positive_zero(self):
        assert reciprocal(0.0) == math.inf

    def test_negative_zero(self):
        assert reciprocal(-0.0) == -math.inf


# ---------------------------------------------------------------------------
# power_integer
# ---------------------------------------------------------------------------

class TestPowerInteger:
    def test_zero_exponent(self):
        assert power_integer(123.0, 0) == 1.0

    def test_one_exponent(self):
        assert power_integer(-7.5, 1) == -7.5

    def test_power_of_two(self):
        assert power_integer(2.0, 10) == 1024.0

    def test_odd_exponent_keeps_sign(self):
        assert power_integer(-2.0, 3) == -8.0

    def test_even_exponent_drops_sign(self):
        assert power_integer(-2.0, 4) == 16.0

    def test_negative_exponent(self):
        assert power_integer(2.0, -2) == 0.25

    def test_zero_base_negative_exponent_is_infinite(self):
        assert power_integer(0.0, -1) == math.inf

    def test_overflow_saturates(self):
        assert power_integer(10.0, 400) == math.inf

    def test_underflow_to_zero(self):
        assert power_integer(0.1, 400) == 0.0

    def test_huge_exponent_terminates(self):
        # ~1000 squarings for a 1000-bit exponent.
        assert power_integer(1.0000001, 10**300) == math.inf


# ---------------------------------------------------------------------------
# natural_log
# ---------------------------------------------------------------------------

class TestNaturalLog:
    def test_one(self):
        assert natural_log(1.0) == 0.0

    def test_powers_of_two_are_exact_multiples_of_ln2(self):
        assert natural_log(2.0) == LN2
        assert natural_log(8.0) == 3 * LN2
        assert natural_log(0.5) == -LN2

    def test_ten(self):
        assert natural_log(10.0) == pytest.approx(2.302585092994046, rel=1e-12)

    def test_one_and_a_half(self):
        assert natural_log(1.5) == pytest.approx(0.4054651081081644, rel=1e-12)

    def test_small_value(self):
        assert natural_log(1e-10) == pytest.approx(-23.025850929940457, rel=1e-12)

    def test_subnormal(self):
        assert natural_log(5e-324) == pytest.approx(-744.4400719213812, rel=1e-12)

    def test_infinity(self):
        assert natural_log(math.inf) == math.inf

    def test_zero_rejected(self):
        with pytest.raises(DomainError, match="non-positive"):
            natural_log(0.0)

    def test_negative_rejected(self):
        with pytest.raises(DomainError, match="non-positive"):
            natural_log(-1.0)


# ---------------------------------------------------------------------------
# exponential
# ---------------------------------------------------------------------------

class TestExponential:
    def test_zero(self):
        assert exponential(0.0) == 1.0

    def test_one_is_e(self):
        # f == 0 so the series contributes exactly 1.
        assert exponential(1.0) == E

    def test_minus_one(self):
        assert exponential(-1.0) == pytest.approx(0.36787944117144233, rel=1e-12)

    def test_half(self):
        assert exponential(0.5) == pytest.approx(1.6487212707001282, rel=1e-12)

    def test_negative_fraction(self):
        # floor(-0.5) == -1, so f == 0.5
        assert exponential(-0.5) == pytest.approx(0.6065306597126334, rel=1e-12)

    def test_large(self):
        assert exponential(50.0) == pytest.approx(5.184705528587072e21, rel=1e-12)

    def test_overflow(self):
        assert exponential(800.0) == math.inf

    def test_underflow(self):
        assert exponential(-800.0) == 0.0

    def test_infinities(self):
        assert exponential(math.inf) == math.inf
        assert exponential(-math.inf) == 0.0

    def test_nan(self):
        assert math.isnan(exponential(math.nan))

    def test_ln2_gives_two(self):
        assert exponential(LN2) == pytest.approx(2.0, rel=1e-14)
