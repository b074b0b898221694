"""
Quantity: a float tagged with a phantom units type.

A Quantity[Meters] is a float number of meters and a Quantity[Seconds] is a
float number of seconds. The units parameter only exists for the static type
checker; at runtime both are the same immutable wrapper around one float, so
wrapping costs one object and nothing else.

Equality:
    == compares through float_tolerance.almost_equal, so two quantities that
    agree to the configured digit precision are equal, and NaN equals NaN.
    Hashing rounds to the same precision. < and > compare the raw values;
    <= and >= also accept tolerance equality.

Pipeline Functions:
    Functions whose mathematical reading would be "x OP y" and that are meant
    to be partially applied take y first and return a function of x:

        >>> from unit_algebra import quantity
        >>> from unit_algebra.measures import length
        >>> is_short = quantity.less_than(length.meters(1.0))
        >>> is_short(length.centimeters(30.0))
        True
        >>> quantity.minus(length.meters(1.0))(length.meters(3.0))
        Quantity(2.0)

    Natural-order counterparts (difference, product, rate, ratio) take their
    arguments in reading order. Both forms are kept; they are not aliases.

IEEE-754 Semantics:
    No function raises for numeric reasons. Division by zero gives an infinity
    or NaN, sqrt of a negative value gives NaN, and is_nan / is_infinite are
    there to observe those results.

Unsafe Operations:
    create() and unwrap() convert between raw floats and quantities of any
    units. They are what per-unit modules (unit_algebra.measures) are built on;
    other code should go through those modules or the composition functions.
"""

from __future__ import annotations

import builtins
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Generic, Iterable, List, Optional, Sequence, TypeVar, overload

import numpy as np

from unit_algebra import float_tolerance

if TYPE_CHECKING:
    from unit_algebra.types import Cubed, Product, Rate, Squared, Unitless

Units = TypeVar("Units")
UnitsA = TypeVar("UnitsA")
UnitsB = TypeVar("UnitsB")
UnitsC = TypeVar("UnitsC")
Dependent = TypeVar("Dependent")
Independent = TypeVar("Independent")
Item = TypeVar("Item")

# All NaN quantities are equal, so they must share one hash
_NAN_HASH = hash("nan")


def _sqrt(x: float) -> float:
    if x < 0.0:
        return math.nan
    return math.sqrt(x)


def _truncated_mod(x: float, modulus: float) -> float:
    """Remainder with the sign of the dividend (math.fmod), NaN instead of raising."""
    if modulus == 0.0 or not math.isfinite(x) or math.isnan(modulus):
        return math.nan
    return math.fmod(x, modulus)


def _is_scalar(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


@dataclass(frozen=True, eq=False)
class Quantity(Generic[Units]):
    """An immutable float value tagged with a units type.

    Attributes:
        value: The raw IEEE-754 value. NaN and infinities are valid states.
    """

    value: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", float(self.value))

    # ---- Equality and ordering ----

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Quantity):
            return NotImplemented
        return float_tolerance.almost_equal(self.value, other.value)

    def __hash__(self) -> int:
        rounded = float_tolerance.round_float(self.value)
        if math.isnan(rounded):
            return _NAN_HASH
        return hash(rounded)

    def __lt__(self, other: Quantity[Units]) -> bool:
        if not isinstance(other, Quantity):
            return NotImplemented
        return self.value < other.value

    def __gt__(self, other: Quantity[Units]) -> bool:
        if not isinstance(other, Quantity):
            return NotImplemented
        return self.value > other.value

    def __le__(self, other: Quantity[Units]) -> bool:
        if not isinstance(other, Quantity):
            return NotImplemented
        return self.value <= other.value or self == other

    def __ge__(self, other: Quantity[Units]) -> bool:
        if not isinstance(other, Quantity):
            return NotImplemented
        return self.value >= other.value or self == other

    # ---- Arithmetic ----

    def __neg__(self) -> Quantity[Units]:
        return Quantity(-self.value)

    def __pos__(self) -> Quantity[Units]:
        return self

    def __abs__(self) -> Quantity[Units]:
        return Quantity(math.fabs(self.value))

    def __add__(self, other: Quantity[Units]) -> Quantity[Units]:
        if not isinstance(other, Quantity):
            return NotImplemented
        return Quantity(self.value + other.value)

    def __sub__(self, other: Quantity[Units]) -> Quantity[Units]:
        if not isinstance(other, Quantity):
            return NotImplemented
        return Quantity(self.value - other.value)

    @overload
    def __mul__(self, other: float) -> Quantity[Units]: ...

    @overload
    def __mul__(self, other: Quantity[UnitsB]) -> Quantity[Product[Units, UnitsB]]: ...

    def __mul__(self, other):
        if isinstance(other, Quantity):
            return Quantity(self.value * other.value)
        if _is_scalar(other):
            return Quantity(self.value * other)
        return NotImplemented

    def __rmul__(self, other: float) -> Quantity[Units]:
        if _is_scalar(other):
            return Quantity(other * self.value)
        return NotImplemented

    @overload
    def __truediv__(self, other: float) -> Quantity[Units]: ...

    @overload
    def __truediv__(self, other: Quantity[UnitsB]) -> Quantity[Rate[Units, UnitsB]]: ...

    def __truediv__(self, other):
        if isinstance(other, Quantity):
            return Quantity(float_tolerance.divide(self.value, other.value))
        if _is_scalar(other):
            return Quantity(float_tolerance.divide(self.value, other))
        return NotImplemented

    def __mod__(self, modulus: Quantity[Units]) -> Quantity[Units]:
        if not isinstance(modulus, Quantity):
            return NotImplemented
        return Quantity(_truncated_mod(self.value, modulus.value))

    # ---- Integral rounding hooks (math.floor, math.ceil, math.trunc, round) ----

    def _integral(self, operation: Callable[[float], float]) -> Quantity[Units]:
        if not math.isfinite(self.value):
            return Quantity(self.value)
        return Quantity(float(operation(self.value)))

    def __floor__(self) -> Quantity[Units]:
        return self._integral(math.floor)

    def __ceil__(self) -> Quantity[Units]:
        return self._integral(math.ceil)

    def __trunc__(self) -> Quantity[Units]:
        return self._integral(math.trunc)

    def __round__(self, ndigits: Optional[int] = None) -> Quantity[Units]:
        if ndigits is None:
            return self._integral(builtins.round)
        return Quantity(float_tolerance.round_float_to(ndigits, self.value))

    # ---- Display ----

    def __repr__(self) -> str:
        return f"Quantity({self.value!r})"

    def __str__(self) -> str:
        return f"{self.value}"


# =============================================================================
# Constants
# =============================================================================

ZERO: Quantity[Any] = Quantity(0.0)
POSITIVE_INFINITY: Quantity[Any] = Quantity(math.inf)
INFINITY: Quantity[Any] = POSITIVE_INFINITY
NEGATIVE_INFINITY: Quantity[Any] = Quantity(-math.inf)


def unitless(value: float) -> Quantity[Unitless]:
    """Wrap a plain float as a unitless quantity."""
    return Quantity(value)


# =============================================================================
# Unsafe operations
# =============================================================================


def create(value: float) -> Quantity[Any]:
    """Tag a raw float with arbitrary units.

    Bypasses unit checking entirely. Intended for per-unit constructor modules
    and composition functions whose result units cannot be derived from their
    inputs.
    """
    return Quantity(value)


def unwrap(quantity: Quantity[Any]) -> float:
    """Strip the units tag and return the raw float."""
    return quantity.value


# =============================================================================
# Comparison
# =============================================================================


def less_than(y: Quantity[Units]) -> Callable[[Quantity[Units]], bool]:
    """Predicate "x < y". Note the argument order: less_than(y)(x)."""
    return lambda x: x < y


def greater_than(y: Quantity[Units]) -> Callable[[Quantity[Units]], bool]:
    """Predicate "x > y". Note the argument order: greater_than(y)(x)."""
    return lambda x: x > y


def less_than_or_equal_to(y: Quantity[Units]) -> Callable[[Quantity[Units]], bool]:
    """Predicate "x <= y" (within tolerance)."""
    return lambda x: x <= y


def greater_than_or_equal_to(y: Quantity[Units]) -> Callable[[Quantity[Units]], bool]:
    """Predicate "x >= y" (within tolerance)."""
    return lambda x: x >= y


def less_than_zero(x: Quantity[Any]) -> bool:
    return x < ZERO


def greater_than_zero(x: Quantity[Any]) -> bool:
    return x > ZERO


def less_than_or_equal_to_zero(x: Quantity[Any]) -> bool:
    return x <= ZERO


def greater_than_or_equal_to_zero(x: Quantity[Any]) -> bool:
    return x >= ZERO


def compare(x: Quantity[Units], y: Quantity[Units]) -> int:
    """Three-way comparison: 0 when equal within tolerance, else -1 or 1."""
    if x == y:
        return 0
    if x < y:
        return -1
    return 1


def equal_within(tolerance: Quantity[Units], x: Quantity[Units], y: Quantity[Units]) -> bool:
    """Check whether x and y differ by at most |tolerance|.

    The comparison is tolerant, so a difference that only exceeds the
    tolerance by float rounding still counts as within it.

    Examples:
        >>> equal_within(unitless(0.1), unitless(1.0), unitless(1.1))
        True
    """
    return abs(x - y) <= abs(tolerance)


def is_nan(quantity: Quantity[Any]) -> bool:
    return math.isnan(quantity.value)


def is_infinite(quantity: Quantity[Any]) -> bool:
    return math.isinf(quantity.value)


def abs(quantity: Quantity[Units]) -> Quantity[Units]:
    return Quantity(math.fabs(quantity.value))


def min(x: Quantity[Units], y: Quantity[Units]) -> Quantity[Units]:
    """Smaller of two quantities (the first one when they compare equal)."""
    return x if x.value <= y.value else y


def max(x: Quantity[Units], y: Quantity[Units]) -> Quantity[Units]:
    """Larger of two quantities (the first one when they compare equal)."""
    return x if x.value >= y.value else y


# =============================================================================
# Arithmetic
# =============================================================================


def negate(quantity: Quantity[Units]) -> Quantity[Units]:
    return -quantity


def plus(y: Quantity[Units]) -> Callable[[Quantity[Units]], Quantity[Units]]:
    """Add y: plus(y)(x) is x + y."""
    return lambda x: x + y


def difference(x: Quantity[Units], y: Quantity[Units]) -> Quantity[Units]:
    """x - y, in reading order."""
    return x - y


def minus(y: Quantity[Units]) -> Callable[[Quantity[Units]], Quantity[Units]]:
    """Subtract y: minus(y)(x) is x - y."""
    return lambda x: x - y


def multiply_by(scale: float) -> Callable[[Quantity[Units]], Quantity[Units]]:
    return lambda quantity: Quantity(scale * quantity.value)


def divide_by(divisor: float) -> Callable[[Quantity[Units]], Quantity[Units]]:
    return lambda quantity: Quantity(float_tolerance.divide(quantity.value, divisor))


def twice(quantity: Quantity[Units]) -> Quantity[Units]:
    return Quantity(2.0 * quantity.value)


def half(quantity: Quantity[Units]) -> Quantity[Units]:
    return Quantity(0.5 * quantity.value)


def ratio(x: Quantity[Units], y: Quantity[Units]) -> float:
    """Unitless ratio x / y of two quantities with the same units.

    Examples:
        >>> ratio(length.miles(1.0), length.yards(1.0))
        1760.0
    """
    return float_tolerance.divide(x.value, y.value)


def clamp(lower: Quantity[Units], upper: Quantity[Units]) -> Callable[[Quantity[Units]], Quantity[Units]]:
    """Restrict a quantity to the range between two bounds.

    The bounds may be given in either order.
    """
    if lower.value > upper.value:
        lower, upper = upper, lower

    def clamp_quantity(quantity: Quantity[Units]) -> Quantity[Units]:
        if quantity.value < lower.value:
            return lower
        if quantity.value > upper.value:
            return upper
        return quantity

    return clamp_quantity


def mod_by(modulus: Quantity[Units]) -> Callable[[Quantity[Units]], Quantity[Units]]:
    """Truncated modulus; the result has the sign of the dividend.

    Examples:
        >>> mod_by(unitless(2.5))(unitless(-5.5))
        Quantity(-0.5)
    """
    return lambda quantity: quantity % modulus


def remainder_by(modulus: Quantity[Units]) -> Callable[[Quantity[Units]], Quantity[Units]]:
    """Magnitude of the truncated modulus; never negative."""
    return lambda quantity: abs(quantity % modulus)


# =============================================================================
# Products and unit composition
# =============================================================================


def product(x: Quantity[UnitsA], y: Quantity[UnitsB]) -> Quantity[Product[UnitsA, UnitsB]]:
    return Quantity(x.value * y.value)


def times(y: Quantity[UnitsB]) -> Callable[[Quantity[UnitsA]], Quantity[Product[UnitsA, UnitsB]]]:
    """Pipeline form of product: times(y)(x) is x * y."""
    return lambda x: Quantity(x.value * y.value)


def times_unitless(y: Quantity[Unitless]) -> Callable[[Quantity[Unitless]], Quantity[Unitless]]:
    """Multiply unitless quantities without building a Product units type."""
    return lambda x: Quantity(x.value * y.value)


def over(y: Quantity[UnitsA]) -> Callable[[Quantity[Product[UnitsA, UnitsB]]], Quantity[UnitsB]]:
    """Divide the first factor out of a product.

    Examples:
        >>> over(length.meters(4.0))(area.square_meters(24.0))
        Quantity(6.0)
    """
    return lambda x: Quantity(float_tolerance.divide(x.value, y.value))


def over_(y: Quantity[UnitsB]) -> Callable[[Quantity[Product[UnitsA, UnitsB]]], Quantity[UnitsA]]:
    """Divide the second factor out of a product (mass = force over_ acceleration)."""
    return lambda x: Quantity(float_tolerance.divide(x.value, y.value))


def over_unitless(y: Quantity[Unitless]) -> Callable[[Quantity[Unitless]], Quantity[Unitless]]:
    return lambda x: Quantity(float_tolerance.divide(x.value, y.value))


def squared(quantity: Quantity[Units]) -> Quantity[Squared[Units]]:
    return Quantity(quantity.value * quantity.value)


def squared_unitless(quantity: Quantity[Unitless]) -> Quantity[Unitless]:
    return Quantity(quantity.value * quantity.value)


def sqrt(quantity: Quantity[Squared[Units]]) -> Quantity[Units]:
    """Square root. A negative value gives NaN."""
    return Quantity(_sqrt(quantity.value))


def sqrt_unitless(quantity: Quantity[Unitless]) -> Quantity[Unitless]:
    return Quantity(_sqrt(quantity.value))


def cubed(quantity: Quantity[Units]) -> Quantity[Cubed[Units]]:
    return Quantity(quantity.value * quantity.value * quantity.value)


def cubed_unitless(quantity: Quantity[Unitless]) -> Quantity[Unitless]:
    return Quantity(quantity.value * quantity.value * quantity.value)


def unsafe_cbrt(quantity: Quantity[Any]) -> Quantity[Any]:
    """Cube root into arbitrary units. Negative values give negative roots."""
    if quantity.value >= 0.0:
        return Quantity(math.pow(quantity.value, 1.0 / 3.0))
    return Quantity(-math.pow(-quantity.value, 1.0 / 3.0))


def cbrt(quantity: Quantity[Cubed[Units]]) -> Quantity[Units]:
    return unsafe_cbrt(quantity)


def cbrt_unitless(quantity: Quantity[Unitless]) -> Quantity[Unitless]:
    return unsafe_cbrt(quantity)


def reciprocal(quantity: Quantity[Unitless]) -> Quantity[Unitless]:
    return Quantity(float_tolerance.divide(1.0, quantity.value))


# =============================================================================
# Rates
# =============================================================================


def rate(
    dependent: Quantity[Dependent], independent: Quantity[Independent]
) -> Quantity[Rate[Dependent, Independent]]:
    """Rate of change of one quantity relative to another.

    Examples:
        >>> mile_a_minute = rate(length.miles(1.0), duration.minutes(1.0))
        >>> speed.in_miles_per_hour(mile_a_minute)
        60.0
    """
    return Quantity(float_tolerance.divide(dependent.value, independent.value))


def per(
    independent: Quantity[Independent],
) -> Callable[[Quantity[Dependent]], Quantity[Rate[Dependent, Independent]]]:
    """Pipeline form of rate: per(independent)(dependent)."""
    return lambda dependent: rate(dependent, independent)


def at(
    rate_of_change: Quantity[Rate[Dependent, Independent]],
) -> Callable[[Quantity[Independent]], Quantity[Dependent]]:
    """Multiply a rate back out: at(speed)(duration) is a length."""
    return lambda independent: Quantity(rate_of_change.value * independent.value)


def at_(
    rate_of_change: Quantity[Rate[Dependent, Independent]],
) -> Callable[[Quantity[Dependent]], Quantity[Independent]]:
    """Divide by a rate: at_(speed)(length) is a duration."""
    return lambda dependent: Quantity(float_tolerance.divide(dependent.value, rate_of_change.value))


def for_(
    independent: Quantity[Independent],
) -> Callable[[Quantity[Rate[Dependent, Independent]]], Quantity[Dependent]]:
    """Same as at() with the arguments flipped: for_(duration)(speed)."""
    return lambda rate_of_change: Quantity(rate_of_change.value * independent.value)


def inverse(
    rate_of_change: Quantity[Rate[Dependent, Independent]],
) -> Quantity[Rate[Independent, Dependent]]:
    return Quantity(float_tolerance.divide(1.0, rate_of_change.value))


def rate_product(
    first_rate: Quantity[Rate[UnitsB, UnitsA]],
    second_rate: Quantity[Rate[UnitsC, UnitsB]],
) -> Quantity[Rate[UnitsC, UnitsA]]:
    """Chain two rates that share an intermediate units type.

    Rate[B, A] times Rate[C, B] is Rate[C, A]; for example pixels per second
    times meters per pixel is meters per second.
    """
    return Quantity(first_rate.value * second_rate.value)


# =============================================================================
# Interpolation and conversion
# =============================================================================


def interpolate_from(start: Quantity[Units], finish: Quantity[Units], parameter: float) -> Quantity[Units]:
    return Quantity(float_tolerance.interpolate_from(start.value, finish.value, parameter))


def midpoint(x: Quantity[Units], y: Quantity[Units]) -> Quantity[Units]:
    return Quantity(x.value + 0.5 * (y.value - x.value))


def range(start: Quantity[Units], finish: Quantity[Units], steps: int) -> List[Quantity[Units]]:
    """Evenly spaced values from start to finish inclusive.

    Returns steps + 1 values, or an empty list when steps is not positive.

    Examples:
        >>> range(ZERO, unitless(10.0), 4)
        [Quantity(0.0), Quantity(2.5), Quantity(5.0), Quantity(7.5), Quantity(10.0)]
    """
    if steps <= 0:
        return []
    return [interpolate_from(start, finish, i / steps) for i in builtins.range(steps + 1)]


def in_(units: Callable[[float], Quantity[Units]]) -> Callable[[Quantity[Units]], float]:
    """Express a quantity as a number of the units built by a constructor.

    Examples:
        >>> in_(length.inches)(length.feet(10.0))
        120.0
    """
    return lambda quantity: ratio(quantity, units(1.0))


def round_to(digits: int) -> Callable[[Quantity[Units]], Quantity[Units]]:
    return lambda quantity: Quantity(float_tolerance.round_float_to(digits, quantity.value))


def round(quantity: Quantity[Units]) -> Quantity[Units]:
    return builtins.round(quantity)


def floor(quantity: Quantity[Units]) -> Quantity[Units]:
    return math.floor(quantity)


def ceil(quantity: Quantity[Units]) -> Quantity[Units]:
    return math.ceil(quantity)


def truncate(quantity: Quantity[Units]) -> Quantity[Units]:
    return math.trunc(quantity)


def to_array(quantities: Iterable[Quantity[Any]]) -> np.ndarray:
    """Unwrap quantities into a float64 numpy array."""
    return np.array([quantity.value for quantity in quantities], dtype=np.float64)


def from_array(values: Iterable[float]) -> List[Quantity[Any]]:
    """Wrap each element of an array (or any iterable of floats) as a quantity."""
    return [Quantity(float(value)) for value in np.asarray(values, dtype=np.float64).ravel()]


# =============================================================================
# Lists
# =============================================================================


def sum(quantities: Iterable[Quantity[Units]]) -> Quantity[Units]:
    total = 0.0
    for quantity in quantities:
        total += quantity.value
    return Quantity(total)


def minimum(quantities: Sequence[Quantity[Units]]) -> Optional[Quantity[Units]]:
    """Smallest quantity, or None for an empty sequence."""
    if not quantities:
        return None
    smallest = quantities[0]
    for quantity in quantities[1:]:
        smallest = min(smallest, quantity)
    return smallest


def maximum(quantities: Sequence[Quantity[Units]]) -> Optional[Quantity[Units]]:
    """Largest quantity, or None for an empty sequence."""
    if not quantities:
        return None
    largest = quantities[0]
    for quantity in quantities[1:]:
        largest = max(largest, quantity)
    return largest


def minimum_by(to_quantity: Callable[[Item], Quantity[Units]], items: Iterable[Item]) -> Optional[Item]:
    """Item with the smallest derived quantity; the first one wins ties."""
    best_item: Optional[Item] = None
    best_value: Optional[Quantity[Units]] = None
    for item in items:
        value = to_quantity(item)
        if best_value is None or value < best_value:
            best_item, best_value = item, value
    return best_item


def maximum_by(to_quantity: Callable[[Item], Quantity[Units]], items: Iterable[Item]) -> Optional[Item]:
    """Item with the largest derived quantity; the first one wins ties."""
    best_item: Optional[Item] = None
    best_value: Optional[Quantity[Units]] = None
    for item in items:
        value = to_quantity(item)
        if best_value is None or value > best_value:
            best_item, best_value = item, value
    return best_item


def sort(quantities: Iterable[Quantity[Units]]) -> List[Quantity[Units]]:
    return sorted(quantities, key=unwrap)


def sort_by(to_quantity: Callable[[Item], Quantity[Units]], items: Iterable[Item]) -> List[Item]:
    """Stable sort by a derived quantity; equal keys keep their input order."""
    return sorted(items, key=lambda item: to_quantity(item).value)
