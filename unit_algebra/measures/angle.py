"""Angle constructors, accessors and trigonometry. The base unit is the radian."""

import math

from unit_algebra import quantity
from unit_algebra.measures import constants
from unit_algebra.types import Angle

_TWO_PI = 2.0 * math.pi


def radians(value: float) -> Angle:
    return quantity.create(value)


def in_radians(angle: Angle) -> float:
    return quantity.unwrap(angle)


def degrees(value: float) -> Angle:
    return radians(constants.RADIANS_PER_DEGREE * value)


def in_degrees(angle: Angle) -> float:
    return in_radians(angle) * constants.DEGREES_PER_RADIAN


def turns(value: float) -> Angle:
    """Full revolutions; one turn is 2 pi radians."""
    return radians(_TWO_PI * value)


def in_turns(angle: Angle) -> float:
    return in_radians(angle) / _TWO_PI


def minutes(value: float) -> Angle:
    """Arc minutes, 1/60 of a degree."""
    return degrees(value / 60.0)


def in_minutes(angle: Angle) -> float:
    return in_degrees(angle) * 60.0


def seconds(value: float) -> Angle:
    """Arc seconds, 1/3600 of a degree."""
    return degrees(value / 3600.0)


def in_seconds(angle: Angle) -> float:
    return in_degrees(angle) * 3600.0


def normalize(angle: Angle) -> Angle:
    """Wrap an angle into [-pi, pi).

    Non-finite angles come back as NaN.
    """
    value = in_radians(angle)
    if not math.isfinite(value):
        return radians(math.nan)
    wrapped = math.fmod(value + math.pi, _TWO_PI)
    if wrapped < 0.0:
        wrapped += _TWO_PI
    return radians(wrapped - math.pi)


def sin(angle: Angle) -> float:
    value = in_radians(angle)
    return math.sin(value) if math.isfinite(value) else math.nan


def cos(angle: Angle) -> float:
    value = in_radians(angle)
    return math.cos(value) if math.isfinite(value) else math.nan


def tan(angle: Angle) -> float:
    value = in_radians(angle)
    return math.tan(value) if math.isfinite(value) else math.nan


def asin(x: float) -> Angle:
    return radians(math.asin(x) if -1.0 <= x <= 1.0 else math.nan)


def acos(x: float) -> Angle:
    return radians(math.acos(x) if -1.0 <= x <= 1.0 else math.nan)


def atan(x: float) -> Angle:
    return radians(math.atan(x))


def atan2(y: quantity.Quantity, x: quantity.Quantity) -> Angle:
    """Angle of the point (x, y); both coordinates must share units."""
    return radians(math.atan2(quantity.unwrap(y), quantity.unwrap(x)))


PI = radians(math.pi)
TWO_PI = radians(_TWO_PI)
HALF_PI = radians(math.pi / 2.0)
DEGREE = degrees(1.0)
RADIAN = radians(1.0)
TURN = turns(1.0)
