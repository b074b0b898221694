"""
Tolerance-based floating point equality.

Every equality test, hash and rounding operation in unit_algebra goes through
this module. Two floats are considered equal when they agree to the number of
decimal digits given by the process-wide digit precision (default 10).

Digit Precision:
    The precision is a single global setting. Changing it changes the meaning
    of equality for every comparison made afterwards, in every module and every
    thread. It is not scoped to a block or a value, and nothing derived from it
    is cached: epsilon is recomputed from the precision on every read.

    >>> from unit_algebra import float_tolerance
    >>> float_tolerance.almost_equal(1.0, 0.3 * 3.0 + 0.1)
    True
    >>> float_tolerance.set_digit_precision(17)
    >>> float_tolerance.almost_equal(1.0, 0.3 * 3.0 + 0.1)
    False

Comparison Rules (from The Floating Point Guide on comparison):
    - bitwise equal values, or two NaNs, are equal
    - if either value is zero, or both are tiny, compare the absolute
      difference against epsilon
    - otherwise compare the difference relative to |a| + |b| against
      1.5 * epsilon
"""

import logging
import math
import sys
import threading

import numpy as np

logger = logging.getLogger(__name__)

DEFAULT_DIGIT_PRECISION = 10
"""Number of decimal digits used for equality when nothing else is configured."""

MIN_NORMAL = 1e-38
"""Below this combined magnitude the relative comparison is meaningless."""

_RELATIVE_TOLERANCE_FACTOR = 1.5

_digit_precision = DEFAULT_DIGIT_PRECISION
_precision_lock = threading.Lock()


def get_digit_precision() -> int:
    """Return the number of decimal digits used for approximate equality."""
    return _digit_precision


def set_digit_precision(digits: int) -> None:
    """Set the process-wide number of decimal digits used for equality.

    Args:
        digits: Non-negative number of decimal digits.

    Raises:
        ValueError: If digits is not a non-negative integer.
    """
    global _digit_precision

    if isinstance(digits, bool) or not isinstance(digits, int):
        raise ValueError(f"digit precision must be an integer, got {digits!r}")
    if digits < 0:
        raise ValueError(f"digit precision must be >= 0, got {digits}")

    with _precision_lock:
        previous = _digit_precision
        _digit_precision = digits

    if previous != digits:
        logger.debug(f"Digit precision changed from {previous} to {digits}")


def epsilon() -> float:
    """Largest difference between two values that still counts as equal."""
    return 10.0 ** -get_digit_precision()


def almost_equal(a: float, b: float) -> bool:
    """Compare two floats for equality within the current digit precision.

    Args:
        a: First value.
        b: Second value.

    Returns:
        True if the values are equal within tolerance. NaN equals NaN.
    """
    if a == b or (math.isnan(a) and math.isnan(b)):
        return True

    abs_a = abs(a)
    abs_b = abs(b)
    diff = abs(a - b)
    eps = epsilon()

    if a == 0.0 or b == 0.0 or abs_a + abs_b < MIN_NORMAL:
        return diff < eps

    divisor = min(abs_a + abs_b, sys.float_info.max)
    return diff / divisor <= eps * _RELATIVE_TOLERANCE_FACTOR


def divide(numerator: float, denominator: float) -> float:
    """IEEE-754 division: a zero denominator gives an infinity or NaN instead of raising."""
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(numerator) / np.float64(denominator))


def round_float_to(digits: int, x: float) -> float:
    """Round to a number of decimal digits.

    Uses Python's round(), which rounds halfway cases to the even digit.
    NaN and infinities are returned unchanged.
    """
    if not math.isfinite(x):
        return x
    return round(x, digits)


def round_float(x: float) -> float:
    """Round to the current digit precision."""
    return round_float_to(get_digit_precision(), x)


def interpolate_from(start: float, finish: float, parameter: float) -> float:
    """Interpolate from start to finish.

    A parameter of 0 gives start and 1 gives finish. Values outside [0, 1]
    extrapolate. Parameters above one half interpolate backwards from finish so
    that both endpoints are reproduced exactly.

    Examples:
        >>> interpolate_from(5.0, 10.0, 0.6)
        8.0
        >>> interpolate_from(10.0, 5.0, 0.1)
        9.5
        >>> interpolate_from(5.0, 10.0, -0.5)
        2.5
    """
    if parameter <= 0.5:
        return start + parameter * (finish - start)
    return finish + (1.0 - parameter) * (start - finish)
