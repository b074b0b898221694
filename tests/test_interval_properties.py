#!/usr/bin/env python3
"""
Property-based tests for interval arithmetic using Hypothesis.

These tests verify invariants that MUST hold for all valid inputs:
1. Squaring never produces a negative lower bound
2. The union of two intervals contains both of them
3. intersects() agrees with whether intersection() finds an overlap
4. interpolation_parameter() inverts interpolate()
5. sin/cos of an interval contain sin/cos of every angle inside it

Property 5 guards the period-boundary analysis in cos_includes_max: an
off-by-one there produces an interval that is too narrow, which only a
sampling check notices.

Run with: python -m pytest tests/test_interval_properties.py -v
"""

import math
import os
import sys

import numpy as np
import pytest
from hypothesis import assume, given, settings
from hypothesis import strategies as st

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from unit_algebra import interval, quantity
from unit_algebra.interval import Interval

SAMPLES_PER_INTERVAL = 1000

# Rounding allowance when comparing sampled values to computed bounds
_SLACK = 1e-12

# ============================================================================
# Hypothesis Strategies
# ============================================================================


def finite_values(bound: float = 1e6):
    return st.floats(min_value=-bound, max_value=bound, allow_nan=False, allow_infinity=False)


@st.composite
def intervals(draw, bound: float = 1e6):
    """Intervals with endpoints drawn in any order."""
    first = draw(finite_values(bound))
    second = draw(finite_values(bound))
    return interval.from_(quantity.unitless(first), quantity.unitless(second))


@st.composite
def angle_intervals(draw):
    """
    Angle intervals in radians.

    Endpoints range over several periods in both directions and widths run
    from a sliver up to more than a full turn.
    """
    start = draw(st.floats(min_value=-20.0, max_value=20.0, allow_nan=False, allow_infinity=False))
    width = draw(st.floats(min_value=1e-6, max_value=8.0, allow_nan=False, allow_infinity=False))
    return interval.from_(quantity.unitless(start), quantity.unitless(start + width))


def assert_samples_contained(function, result: Interval, source: Interval, rng: np.random.Generator):
    """Evaluate a numpy ufunc at both endpoints and 1000 random angles of source."""
    lower, upper = source.min_value.value, source.max_value.value
    thetas = np.concatenate(([lower, upper], rng.uniform(lower, upper, SAMPLES_PER_INTERVAL)))
    sampled = function(thetas)
    escaped = (sampled < result.min_value.value - _SLACK) | (sampled > result.max_value.value + _SLACK)
    assert not np.any(escaped), (
        f"{function.__name__} escapes {result} computed for {source} "
        f"at theta={thetas[escaped][:5]}, values={sampled[escaped][:5]}"
    )


# ============================================================================
# Property 1: Squared interval non-negativity
# ============================================================================


@given(i=intervals())
def test_squared_is_non_negative(i):
    """PROPERTY: min_value(squared(I)) >= 0 for every interval, straddling zero or not."""
    assert interval.min_value(interval.squared(i)).value >= 0.0


@given(i=intervals(bound=1e3), x=finite_values(1e3))
def test_squared_contains_squares(i, x):
    assume(i.min_value.value <= x <= i.max_value.value)
    assert interval.contains(interval.squared_unitless(i), quantity.unitless(x * x))


# ============================================================================
# Property 2: Union containment
# ============================================================================


@given(first=intervals(), second=intervals())
def test_union_contains_both(first, second):
    """PROPERTY: I and J are both contained in union(I, J)."""
    hull = interval.union(first, second)
    assert interval.is_contained_in(first, hull)
    assert interval.is_contained_in(second, hull)


# ============================================================================
# Property 3: Intersection consistency
# ============================================================================


@given(first=intervals(), second=intervals())
def test_intersects_iff_intersection_present(first, second):
    """PROPERTY: intersects(I, J) is True exactly when intersection(I, J) is not None."""
    assert interval.intersects(first, second) == (interval.intersection(first, second) is not None)


@given(first=intervals(), second=intervals())
def test_intersection_is_contained_in_both(first, second):
    overlap = interval.intersection(first, second)
    assume(overlap is not None)
    assert interval.is_contained_in(overlap, first)
    assert interval.is_contained_in(overlap, second)


# ============================================================================
# Property 4: Interpolation inverse law
# ============================================================================


@given(
    start=finite_values(1e3),
    width=st.floats(min_value=1e-3, max_value=1e3, allow_nan=False, allow_infinity=False),
    t=st.floats(min_value=-10.0, max_value=10.0, allow_nan=False, allow_infinity=False),
)
def test_interpolation_parameter_inverts_interpolate(start, width, t):
    """PROPERTY: interpolation_parameter(I, interpolate(I, t)) == t for non-singleton I."""
    i = interval.from_(quantity.unitless(start), quantity.unitless(start + width))
    assume(not interval.is_singleton(i))
    recovered = interval.interpolation_parameter(i, interval.interpolate(i, t))
    np.testing.assert_allclose(recovered, t, rtol=1e-6, atol=1e-6)


# ============================================================================
# Property 5: sin / cos soundness
# ============================================================================


@settings(max_examples=50, deadline=None)
@given(i=angle_intervals(), seed=st.integers(min_value=0, max_value=2**32 - 1))
def test_sin_contains_sampled_values(i, seed):
    """PROPERTY: sin(theta) lies in sin(I) for 1000 random theta in I."""
    assert_samples_contained(np.sin, interval.sin(i), i, np.random.default_rng(seed))


@settings(max_examples=50, deadline=None)
@given(i=angle_intervals(), seed=st.integers(min_value=0, max_value=2**32 - 1))
def test_cos_contains_sampled_values(i, seed):
    """PROPERTY: cos(theta) lies in cos(I) for 1000 random theta in I."""
    assert_samples_contained(np.cos, interval.cos(i), i, np.random.default_rng(seed))


@settings(max_examples=50, deadline=None)
@given(i=angle_intervals())
def test_sin_cos_stay_in_unit_range(i):
    for result in (interval.sin(i), interval.cos(i)):
        assert -1.0 <= result.min_value.value <= result.max_value.value <= 1.0


# Every multiple of pi/2 between -4 pi and 4 pi is a peak, trough or zero
# crossing of sin or cos; intervals that start, end or sit just around them
# exercise each branch of the period-index comparison.
_CRITICAL_ANGLES = [k * math.pi / 2.0 for k in range(-8, 9)]
_OFFSETS = [-1e-3, -1e-9, 0.0, 1e-9, 1e-3]
_WIDTHS = [1e-6, 1e-2, 0.5, math.pi, 2.0 * math.pi]


@pytest.mark.parametrize("function_name", ["sin", "cos"])
@pytest.mark.parametrize("critical", _CRITICAL_ANGLES, ids=[f"{k}pi/2" for k in range(-8, 9)])
def test_period_boundaries_are_sound(function_name, critical):
    """Intervals starting, ending or centred near each critical angle stay sound."""
    rng = np.random.default_rng(20240601)
    interval_function = getattr(interval, function_name)
    point_function = getattr(np, function_name)

    for offset in _OFFSETS:
        anchor = critical + offset
        for width in _WIDTHS:
            for lower, upper in (
                (anchor, anchor + width),
                (anchor - width, anchor),
                (anchor - width / 2.0, anchor + width / 2.0),
            ):
                source = interval.from_(quantity.unitless(lower), quantity.unitless(upper))
                result = interval_function(source)
                assert_samples_contained(point_function, result, source, rng)


@pytest.mark.parametrize("function_name", ["sin", "cos"])
def test_peak_reached_when_interval_crosses_it(function_name):
    """The result is not just sound but tight: a crossed extreme is reported exactly."""
    interval_function = getattr(interval, function_name)
    peak = 0.0 if function_name == "cos" else math.pi / 2.0
    for k in range(-3, 4):
        centre = peak + 2.0 * math.pi * k
        source = interval.from_(quantity.unitless(centre - 0.1), quantity.unitless(centre + 0.1))
        result = interval_function(source)
        assert result.max_value == quantity.unitless(1.0)
        assert result.min_value.value > 0.99


# ============================================================================
# Hull properties
# ============================================================================


@given(values=st.lists(finite_values(), min_size=1, max_size=20))
def test_hull_contains_every_value(values):
    quantities = quantity.from_array(values)
    hull = interval.hull_n(quantities)
    assert hull is not None
    assert hull.min_value.value == min(values)
    assert hull.max_value.value == max(values)
    for value in quantities:
        assert interval.contains(hull, value)


@given(items=st.lists(intervals(), min_size=1, max_size=10))
def test_aggregate_contains_every_interval(items):
    aggregate = interval.aggregate_n(items)
    for item in items:
        assert interval.is_contained_in(item, aggregate)
