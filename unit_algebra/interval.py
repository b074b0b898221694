"""
Interval: a closed range [min_value, max_value] of quantities.

An Interval[Meters] says "some length between these two lengths". Operations
on intervals return intervals guaranteed to contain every result of applying
the same operation to values inside the inputs, so uncertainty can be carried
through a calculation without sampling.

Invariant:
    min_value <= max_value always holds. Endpoints given in the wrong order
    are swapped on construction, never rejected.

Mathematical Background:
    - Negation and scaling by a negative number reverse the endpoints.
    - Multiplying two intervals takes the min and max of the four corner
      products, since sign changes make endpoint-wise products wrong.
    - Squaring an interval that straddles zero has minimum 0, not the square
      of either endpoint.
    - sin and cos reach their extremes inside the interval whenever the
      interval crosses a peak or trough; see cos_includes_max.

Usage Example:
    >>> from unit_algebra import interval, quantity
    >>> from unit_algebra.measures import angle
    >>> interval.cos(interval.from_(angle.radians(0.0), angle.degrees(45.0)))
    Interval(Quantity(0.7071067811865476), Quantity(1.0))
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Generic, Iterable, Optional, Sequence, Tuple, TypeVar

from unit_algebra import float_tolerance, quantity
from unit_algebra.quantity import Quantity

if TYPE_CHECKING:
    from unit_algebra.types import Cubed, Product, Radians, Squared, Unitless

Units = TypeVar("Units")
UnitsA = TypeVar("UnitsA")
UnitsB = TypeVar("UnitsB")
Item = TypeVar("Item")

_TWO_PI = 2.0 * math.pi


@dataclass(frozen=True, eq=False)
class Interval(Generic[Units]):
    """A finite closed interval of quantities.

    Attributes:
        min_value: Lower endpoint.
        max_value: Upper endpoint, never below min_value.
    """

    min_value: Quantity[Units]
    max_value: Quantity[Units]

    def __post_init__(self) -> None:
        if self.min_value.value > self.max_value.value:
            lower, upper = self.max_value, self.min_value
            object.__setattr__(self, "min_value", lower)
            object.__setattr__(self, "max_value", upper)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return self.min_value == other.min_value and self.max_value == other.max_value

    def __hash__(self) -> int:
        return hash((self.min_value, self.max_value))

    def __contains__(self, value: Quantity[Units]) -> bool:
        return contains(self, value)

    def __neg__(self) -> Interval[Units]:
        return negate(self)

    def __add__(self, other):
        if isinstance(other, Interval):
            return plus_interval(self, other)
        if isinstance(other, Quantity):
            return plus(self, other)
        return NotImplemented

    def __radd__(self, other):
        if isinstance(other, Quantity):
            return plus(self, other)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Interval):
            return minus_interval(self, other)
        if isinstance(other, Quantity):
            return minus(self, other)
        return NotImplemented

    def __rsub__(self, other):
        if isinstance(other, Quantity):
            return difference(other, self)
        return NotImplemented

    def __mul__(self, other):
        if isinstance(other, Interval):
            return times_interval(self, other)
        if isinstance(other, Quantity):
            return times(self, other)
        if isinstance(other, (int, float)) and not isinstance(other, bool):
            return multiply_by(self, other)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, Quantity):
            return product(other, self)
        if isinstance(other, (int, float)) and not isinstance(other, bool):
            return multiply_by(self, other)
        return NotImplemented

    def __truediv__(self, other):
        if isinstance(other, (int, float)) and not isinstance(other, bool):
            return divide_by(self, other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"Interval({self.min_value!r}, {self.max_value!r})"

    def __str__(self) -> str:
        return f"Interval [ {self.min_value} -> {self.max_value} ]"


# =============================================================================
# Construction
# =============================================================================


UNIT: Interval[Any] = Interval(quantity.ZERO, Quantity(1.0))
"""The interval [0, 1]."""


def unit() -> Interval[Any]:
    """The interval [0, 1]; same as UNIT."""
    return UNIT


def from_(first: Quantity[Units], second: Quantity[Units]) -> Interval[Units]:
    """Interval between two values given in either order."""
    return Interval(first, second)


def from_endpoints(endpoints: Tuple[Quantity[Units], Quantity[Units]]) -> Interval[Units]:
    first, second = endpoints
    return from_(first, second)


def singleton(value: Quantity[Units]) -> Interval[Units]:
    """Zero-width interval containing only one value."""
    return Interval(value, value)


# =============================================================================
# Accessors
# =============================================================================


def endpoints(interval: Interval[Units]) -> Tuple[Quantity[Units], Quantity[Units]]:
    return interval.min_value, interval.max_value


def min_value(interval: Interval[Units]) -> Quantity[Units]:
    return interval.min_value


def max_value(interval: Interval[Units]) -> Quantity[Units]:
    return interval.max_value


def midpoint(interval: Interval[Units]) -> Quantity[Units]:
    return quantity.midpoint(interval.min_value, interval.max_value)


def width(interval: Interval[Units]) -> Quantity[Units]:
    return interval.max_value - interval.min_value


def is_singleton(interval: Interval[Units]) -> bool:
    """True when both endpoints are exactly the same value."""
    return interval.min_value.value == interval.max_value.value


# =============================================================================
# Set operations
# =============================================================================


def union(first: Interval[Units], second: Interval[Units]) -> Interval[Units]:
    """Smallest interval containing both intervals.

    Note this is not a set union: for intervals that do not overlap, the
    result also contains the gap between them.

    Examples:
        >>> union(from_(unitless(1.0), unitless(2.0)), from_(unitless(4.0), unitless(5.0)))
        Interval(Quantity(1.0), Quantity(5.0))
    """
    return Interval(
        quantity.min(first.min_value, second.min_value),
        quantity.max(first.max_value, second.max_value),
    )


def intersection(first: Interval[Units], second: Interval[Units]) -> Optional[Interval[Units]]:
    """Overlap of two intervals, or None if they do not overlap.

    Intervals that only touch at one point intersect in a singleton.
    """
    lower = quantity.max(first.min_value, second.min_value)
    upper = quantity.min(first.max_value, second.max_value)

    if lower <= upper:
        return Interval(lower, upper)
    return None


def contains(interval: Interval[Units], value: Quantity[Units]) -> bool:
    return interval.min_value <= value <= interval.max_value


def intersects(first: Interval[Units], second: Interval[Units]) -> bool:
    return first.min_value <= second.max_value and first.max_value >= second.min_value


def is_contained_in(inner: Interval[Units], outer: Interval[Units]) -> bool:
    """True when every value of inner is also in outer."""
    return outer.min_value <= inner.min_value and inner.max_value <= outer.max_value


# =============================================================================
# Arithmetic
# =============================================================================


def negate(interval: Interval[Units]) -> Interval[Units]:
    return Interval(-interval.max_value, -interval.min_value)


def plus(interval: Interval[Units], delta: Quantity[Units]) -> Interval[Units]:
    """Shift an interval up by delta."""
    return Interval(interval.min_value + delta, interval.max_value + delta)


def minus(interval: Interval[Units], delta: Quantity[Units]) -> Interval[Units]:
    """Shift an interval down by delta."""
    return Interval(interval.min_value - delta, interval.max_value - delta)


def difference(x: Quantity[Units], interval: Interval[Units]) -> Interval[Units]:
    """Range of x - v for every v in the interval."""
    return Interval(x - interval.max_value, x - interval.min_value)


def multiply_by(interval: Interval[Units], scale: float) -> Interval[Units]:
    a, b = interval.min_value, interval.max_value
    if scale >= 0.0:
        return Interval(a * scale, b * scale)
    return Interval(b * scale, a * scale)


def divide_by(interval: Interval[Units], divisor: float) -> Interval[Units]:
    """Scale by 1 / divisor. Dividing by zero gives (-inf, +inf)."""
    a, b = interval.min_value, interval.max_value
    if divisor == 0.0:
        return Interval(quantity.NEGATIVE_INFINITY, quantity.POSITIVE_INFINITY)
    if divisor > 0.0:
        return Interval(a / divisor, b / divisor)
    return Interval(b / divisor, a / divisor)


def half(interval: Interval[Units]) -> Interval[Units]:
    return Interval(0.5 * interval.min_value, 0.5 * interval.max_value)


def twice(interval: Interval[Units]) -> Interval[Units]:
    return Interval(2.0 * interval.min_value, 2.0 * interval.max_value)


def plus_interval(first: Interval[Units], second: Interval[Units]) -> Interval[Units]:
    return Interval(first.min_value + second.min_value, first.max_value + second.max_value)


def minus_interval(first: Interval[Units], second: Interval[Units]) -> Interval[Units]:
    """Range of u - v for u in first and v in second."""
    return Interval(first.min_value - second.max_value, first.max_value - second.min_value)


def product(x: Quantity[UnitsA], interval: Interval[UnitsB]) -> Interval[Product[UnitsA, UnitsB]]:
    a, b = interval.min_value, interval.max_value
    if x.value >= 0.0:
        return Interval(x * a, x * b)
    return Interval(x * b, x * a)


def times(interval: Interval[UnitsA], x: Quantity[UnitsB]) -> Interval[Product[UnitsA, UnitsB]]:
    a, b = interval.min_value, interval.max_value
    if x.value >= 0.0:
        return Interval(a * x, b * x)
    return Interval(b * x, a * x)


def times_unitless(interval: Interval[Unitless], x: Quantity[Unitless]) -> Interval[Unitless]:
    return multiply_by(interval, x.value)


def _corner_products(first: Interval[Any], second: Interval[Any]) -> Tuple[float, float]:
    a1, b1 = first.min_value.value, first.max_value.value
    a2, b2 = second.min_value.value, second.max_value.value
    corners = (a1 * a2, a1 * b2, b1 * a2, b1 * b2)
    return min(corners), max(corners)


def times_interval(first: Interval[UnitsA], second: Interval[UnitsB]) -> Interval[Product[UnitsA, UnitsB]]:
    """Range of u * v for u in first and v in second."""
    lower, upper = _corner_products(first, second)
    return Interval(Quantity(lower), Quantity(upper))


def times_unitless_interval(unitless_interval: Interval[Unitless], interval: Interval[Units]) -> Interval[Units]:
    """Scale an interval by a unitless interval, keeping its units."""
    lower, upper = _corner_products(interval, unitless_interval)
    return Interval(Quantity(lower), Quantity(upper))


def reciprocal(interval: Interval[Unitless]) -> Interval[Unitless]:
    """Range of 1 / v for v in the interval.

    An interval straddling zero maps to (-inf, +inf); one touching zero maps to
    a half-infinite interval; [0, 0] maps to NaN.
    """
    a, b = interval.min_value.value, interval.max_value.value

    if a > 0.0 or b < 0.0:
        return Interval(Quantity(float_tolerance.divide(1.0, b)), Quantity(float_tolerance.divide(1.0, a)))
    if a < 0.0 and b > 0.0:
        return Interval(quantity.NEGATIVE_INFINITY, quantity.POSITIVE_INFINITY)
    if a < 0.0:
        return Interval(quantity.NEGATIVE_INFINITY, Quantity(float_tolerance.divide(1.0, a)))
    if b > 0.0:
        return Interval(Quantity(float_tolerance.divide(1.0, b)), quantity.POSITIVE_INFINITY)
    return Interval(Quantity(math.nan), Quantity(math.nan))


def abs(interval: Interval[Units]) -> Interval[Units]:
    a, b = interval.min_value, interval.max_value
    if a.value >= 0.0:
        return interval
    if b.value <= 0.0:
        return negate(interval)
    return Interval(quantity.ZERO, quantity.max(-a, b))


def unsafe_squared(interval: Interval[Any]) -> Interval[Any]:
    """Square an interval into arbitrary units.

    When the interval straddles zero the minimum is zero.
    """
    a, b = interval.min_value.value, interval.max_value.value

    if a >= 0.0:
        return Interval(Quantity(a * a), Quantity(b * b))
    if b <= 0.0:
        return Interval(Quantity(b * b), Quantity(a * a))
    if -a < b:
        return Interval(quantity.ZERO, Quantity(b * b))
    return Interval(quantity.ZERO, Quantity(a * a))


def squared(interval: Interval[Units]) -> Interval[Squared[Units]]:
    return unsafe_squared(interval)


def squared_unitless(interval: Interval[Unitless]) -> Interval[Unitless]:
    return unsafe_squared(interval)


def unsafe_cubed(interval: Interval[Any]) -> Interval[Any]:
    """Cube an interval into arbitrary units; cubing is monotonic."""
    a, b = interval.min_value.value, interval.max_value.value
    return Interval(Quantity(a * a * a), Quantity(b * b * b))


def cubed(interval: Interval[Units]) -> Interval[Cubed[Units]]:
    return unsafe_cubed(interval)


def cubed_unitless(interval: Interval[Unitless]) -> Interval[Unitless]:
    return unsafe_cubed(interval)


# =============================================================================
# Trigonometry
# =============================================================================


def _period_index(radians: float) -> float:
    """Index of the 2*pi period containing an angle; non-finite angles pass through."""
    turns = radians / _TWO_PI
    if not math.isfinite(turns):
        return turns
    return float(math.floor(turns))


def _sin(radians: float) -> float:
    return math.sin(radians) if math.isfinite(radians) else math.nan


def _cos(radians: float) -> float:
    return math.cos(radians) if math.isfinite(radians) else math.nan


def cos_includes_max(interval: Interval[Any]) -> bool:
    """Whether cos reaches +1 somewhere inside the interval.

    cos peaks at every multiple of 2*pi. If the endpoints lie in different
    2*pi periods, the interval passes through one of those peaks.
    """
    return _period_index(interval.min_value.value) != _period_index(interval.max_value.value)


def cos_includes_min_max(interval: Interval[Any]) -> Tuple[bool, bool]:
    """Whether cos reaches (-1, +1) inside the interval.

    cos(x + pi) = -cos(x), so the interval contains a trough of cos exactly
    when the interval shifted by pi contains a peak.
    """
    includes_min = cos_includes_max(plus(interval, Quantity(math.pi)))
    includes_max = cos_includes_max(interval)
    return includes_min, includes_max


def sin_includes_min_max(interval: Interval[Any]) -> Tuple[bool, bool]:
    """Whether sin reaches (-1, +1) inside the interval, using sin(x) = cos(x - pi/2)."""
    return cos_includes_min_max(minus(interval, Quantity(math.pi / 2.0)))


def _periodic_range(
    interval: Interval[Radians],
    function: Callable[[float], float],
    includes_min_max: Callable[[Interval[Any]], Tuple[bool, bool]],
) -> Interval[Unitless]:
    if is_singleton(interval):
        return singleton(Quantity(function(interval.min_value.value)))

    includes_min, includes_max = includes_min_max(interval)
    at_min = function(interval.min_value.value)
    at_max = function(interval.max_value.value)

    lower = -1.0 if includes_min else min(at_min, at_max)
    upper = 1.0 if includes_max else max(at_min, at_max)
    return from_(Quantity(lower), Quantity(upper))


def sin(interval: Interval[Radians]) -> Interval[Unitless]:
    """Tightest interval containing sin(x) for every angle x in the interval.

    Examples:
        >>> sin(from_(angle.radians(0.0), angle.PI))
        Interval(Quantity(0.0), Quantity(1.0))
    """
    return _periodic_range(interval, _sin, sin_includes_min_max)


def cos(interval: Interval[Radians]) -> Interval[Unitless]:
    """Tightest interval containing cos(x) for every angle x in the interval."""
    return _periodic_range(interval, _cos, cos_includes_min_max)


# =============================================================================
# Queries
# =============================================================================


def interpolate(interval: Interval[Units], parameter: float) -> Quantity[Units]:
    """Value at a fraction of the way from min_value to max_value.

    Parameters outside [0, 1] extrapolate.
    """
    return quantity.interpolate_from(interval.min_value, interval.max_value, parameter)


def interpolation_parameter(interval: Interval[Units], value: Quantity[Units]) -> float:
    """Inverse of interpolate.

    For a singleton interval there is no unique parameter: values below it give
    -inf, values above it give +inf, and the value itself gives 0.
    """
    a, b = interval.min_value, interval.max_value

    if a.value < b.value:
        return quantity.ratio(value - a, b - a)
    if value.value < a.value:
        return -math.inf
    if value.value > b.value:
        return math.inf
    return 0.0


# =============================================================================
# Hulls and aggregates
# =============================================================================


def hull(first: Quantity[Units], rest: Iterable[Quantity[Units]]) -> Interval[Units]:
    """Smallest interval containing all of the given values."""
    lower = upper = first
    for value in rest:
        lower = quantity.min(lower, value)
        upper = quantity.max(upper, value)
    return Interval(lower, upper)


def hull3(a: Quantity[Units], b: Quantity[Units], c: Quantity[Units]) -> Interval[Units]:
    return hull(a, (b, c))


def hull_n(values: Sequence[Quantity[Units]]) -> Optional[Interval[Units]]:
    """Hull of a sequence of values, or None when it is empty."""
    if not values:
        return None
    return hull(values[0], values[1:])


def hull_of(get_value: Callable[[Item], Quantity[Units]], first: Item, rest: Iterable[Item]) -> Interval[Units]:
    """Hull of a value derived from each item."""
    return hull(get_value(first), (get_value(item) for item in rest))


def hull_of_n(get_value: Callable[[Item], Quantity[Units]], items: Sequence[Item]) -> Optional[Interval[Units]]:
    if not items:
        return None
    return hull_of(get_value, items[0], items[1:])


def aggregate(first: Interval[Units], rest: Iterable[Interval[Units]]) -> Interval[Units]:
    """Smallest interval containing all of the given intervals."""
    lower, upper = first.min_value, first.max_value
    for interval in rest:
        lower = quantity.min(lower, interval.min_value)
        upper = quantity.max(upper, interval.max_value)
    return Interval(lower, upper)


def aggregate3(a: Interval[Units], b: Interval[Units], c: Interval[Units]) -> Interval[Units]:
    return aggregate(a, (b, c))


def aggregate_n(intervals: Sequence[Interval[Units]]) -> Optional[Interval[Units]]:
    """Aggregate of a sequence of intervals, or None when it is empty."""
    if not intervals:
        return None
    return aggregate(intervals[0], intervals[1:])


def aggregate_of(
    get_interval: Callable[[Item], Interval[Units]], first: Item, rest: Iterable[Item]
) -> Interval[Units]:
    """Aggregate of an interval derived from each item."""
    return aggregate(get_interval(first), (get_interval(item) for item in rest))


def aggregate_of_n(
    get_interval: Callable[[Item], Interval[Units]], items: Sequence[Item]
) -> Optional[Interval[Units]]:
    if not items:
        return None
    return aggregate_of(get_interval, items[0], items[1:])
