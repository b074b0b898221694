#!/usr/bin/env python3
"""
Tests for the tolerance-based float equality kernel.

Covers the absolute/relative branch of almost_equal, the global digit
precision setting, rounding and extrapolation-stable interpolation.

Run with: python -m pytest tests/test_float_tolerance.py -v
"""

import logging
import math
import os
import sys
import threading

import numpy as np
import pytest
from hypothesis import given
from hypothesis import strategies as st

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from unit_algebra import float_tolerance

# ============================================================================
# Test Fixtures
# ============================================================================


@pytest.fixture(autouse=True)
def restore_digit_precision():
    """Put the global precision back after every test."""
    previous = float_tolerance.get_digit_precision()
    yield
    float_tolerance.set_digit_precision(previous)


# ============================================================================
# almost_equal
# ============================================================================


class TestAlmostEqual:
    """Test the equality rule every quantity comparison is built on."""

    def test_identical_values_are_equal(self):
        assert float_tolerance.almost_equal(1.5, 1.5)
        assert float_tolerance.almost_equal(-0.0, 0.0)

    def test_nan_equals_nan(self):
        assert float_tolerance.almost_equal(math.nan, math.nan)

    def test_nan_does_not_equal_number(self):
        assert not float_tolerance.almost_equal(math.nan, 1.0)
        assert not float_tolerance.almost_equal(0.0, math.nan)

    def test_infinities(self):
        assert float_tolerance.almost_equal(math.inf, math.inf)
        assert not float_tolerance.almost_equal(math.inf, -math.inf)
        assert not float_tolerance.almost_equal(math.inf, 1e308)

    def test_default_precision_accepts_representation_error(self):
        assert float_tolerance.almost_equal(1.0, 0.3 * 3.0 + 0.1)

    def test_precision_17_rejects_representation_error(self):
        float_tolerance.set_digit_precision(17)
        assert not float_tolerance.almost_equal(1.0, 0.3 * 3.0 + 0.1)

    @pytest.mark.parametrize(
        "a,b,expected",
        [
            (1.0, 1.00000000001, True),
            (1.0, 1.000000001, False),
            (1e20, 1e20 * (1.0 + 1e-11), True),
            (1e20, 1e20 * (1.0 + 1e-9), False),
        ],
        ids=["relative_within", "relative_outside", "large_within", "large_outside"],
    )
    def test_relative_branch(self, a, b, expected):
        assert float_tolerance.almost_equal(a, b) is expected

    @pytest.mark.parametrize(
        "a,b,expected",
        [
            (0.0, 1e-11, True),
            (0.0, 1e-9, False),
            (1e-40, -1e-40, True),
            (1e-11, 0.0, True),
        ],
        ids=["zero_within_epsilon", "zero_outside_epsilon", "both_tiny", "zero_second"],
    )
    def test_absolute_branch(self, a, b, expected):
        """Zero or sub-MIN_NORMAL values compare against epsilon directly."""
        assert float_tolerance.almost_equal(a, b) is expected

    def test_relative_factor_is_one_and_a_half_epsilon(self):
        # |a - b| / (|a| + |b|) just below and just above 1.5e-10
        a = 1.0
        assert float_tolerance.almost_equal(a, a + 2.9e-10)
        assert not float_tolerance.almost_equal(a, a + 3.1e-10)

    def test_huge_values_do_not_overflow(self):
        big = sys.float_info.max
        assert float_tolerance.almost_equal(big, big * (1.0 - 1e-12))

    @given(
        a=st.floats(allow_nan=True, allow_infinity=True),
        b=st.floats(allow_nan=True, allow_infinity=True),
    )
    def test_symmetry(self, a, b):
        """PROPERTY: almost_equal(a, b) == almost_equal(b, a) for every pair of floats."""
        assert float_tolerance.almost_equal(a, b) == float_tolerance.almost_equal(b, a)

    @given(a=st.floats(allow_nan=True, allow_infinity=True))
    def test_reflexivity(self, a):
        assert float_tolerance.almost_equal(a, a)


# ============================================================================
# Digit precision
# ============================================================================


class TestDigitPrecision:
    """Test the global precision cell."""

    def test_default_is_ten(self):
        assert float_tolerance.DEFAULT_DIGIT_PRECISION == 10
        assert float_tolerance.get_digit_precision() == 10

    def test_epsilon_follows_precision(self):
        np.testing.assert_allclose(float_tolerance.epsilon(), 1e-10)
        float_tolerance.set_digit_precision(3)
        np.testing.assert_allclose(float_tolerance.epsilon(), 1e-3)

    def test_change_is_global(self):
        assert not float_tolerance.almost_equal(1.0, 1.001)
        float_tolerance.set_digit_precision(2)
        assert float_tolerance.almost_equal(1.0, 1.001)

    @pytest.mark.parametrize("digits", [-1, 2.5, "10", True, None], ids=["negative", "float", "str", "bool", "none"])
    def test_invalid_precision_rejected(self, digits):
        with pytest.raises(ValueError, match="digit precision"):
            float_tolerance.set_digit_precision(digits)
        assert float_tolerance.get_digit_precision() == 10

    def test_change_is_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="unit_algebra.float_tolerance"):
            float_tolerance.set_digit_precision(12)
        assert "Digit precision changed from 10 to 12" in caplog.text

    def test_concurrent_writers_leave_a_written_value(self):
        values = [4, 6, 8, 12]
        threads = [threading.Thread(target=float_tolerance.set_digit_precision, args=(v,)) for v in values]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()
        assert float_tolerance.get_digit_precision() in values


# ============================================================================
# Rounding and division
# ============================================================================


class TestRounding:
    """Test decimal rounding helpers."""

    def test_round_float_to(self):
        assert float_tolerance.round_float_to(10, 2.00000000003) == 2.0
        assert float_tolerance.round_float_to(2, 1.23456) == 1.23

    def test_half_rounds_to_even(self):
        assert float_tolerance.round_float_to(0, 2.5) == 2.0
        assert float_tolerance.round_float_to(0, 3.5) == 4.0

    def test_round_float_uses_global_precision(self):
        float_tolerance.set_digit_precision(1)
        assert float_tolerance.round_float(1.26) == 1.3

    @pytest.mark.parametrize("value", [math.inf, -math.inf], ids=["inf", "-inf"])
    def test_non_finite_unchanged(self, value):
        assert float_tolerance.round_float_to(3, value) == value

    def test_nan_unchanged(self):
        assert math.isnan(float_tolerance.round_float_to(3, math.nan))

    @pytest.mark.parametrize(
        "numerator,expected",
        [(1.0, math.inf), (-1.0, -math.inf)],
        ids=["positive", "negative"],
    )
    def test_divide_by_zero_is_infinite(self, numerator, expected):
        assert float_tolerance.divide(numerator, 0.0) == expected

    def test_zero_over_zero_is_nan(self):
        assert math.isnan(float_tolerance.divide(0.0, 0.0))


# ============================================================================
# Interpolation
# ============================================================================


class TestInterpolateFrom:
    """Test interpolation and extrapolation."""

    @pytest.mark.parametrize(
        "start,finish,parameter,expected",
        [
            (5.0, 10.0, 0.6, 8.0),
            (10.0, 5.0, 0.1, 9.5),
            (5.0, 10.0, -0.5, 2.5),
            (5.0, 10.0, 1.5, 12.5),
        ],
        ids=["forward", "reversed", "extrapolate_below", "extrapolate_above"],
    )
    def test_values(self, start, finish, parameter, expected):
        np.testing.assert_allclose(float_tolerance.interpolate_from(start, finish, parameter), expected)

    @given(
        start=st.floats(min_value=-1e12, max_value=1e12, allow_nan=False, allow_infinity=False),
        finish=st.floats(min_value=-1e12, max_value=1e12, allow_nan=False, allow_infinity=False),
    )
    def test_endpoints_are_exact(self, start, finish):
        """PROPERTY: parameter 0 gives start and 1 gives finish, bit for bit."""
        assert float_tolerance.interpolate_from(start, finish, 0.0) == start
        assert float_tolerance.interpolate_from(start, finish, 1.0) == finish
