"""Speed constructors and accessors. The base unit is meters per second."""

from unit_algebra import quantity
from unit_algebra.measures import constants
from unit_algebra.types import Speed

_KILOMETERS_PER_HOUR = constants.KILOMETER / constants.HOUR
_MILES_PER_HOUR = constants.MILE / constants.HOUR
_FEET_PER_SECOND = constants.FOOT / constants.SECOND


def meters_per_second(value: float) -> Speed:
    return quantity.create(value)


def in_meters_per_second(speed: Speed) -> float:
    return quantity.unwrap(speed)


def kilometers_per_hour(value: float) -> Speed:
    return meters_per_second(_KILOMETERS_PER_HOUR * value)


def in_kilometers_per_hour(speed: Speed) -> float:
    return in_meters_per_second(speed) / _KILOMETERS_PER_HOUR


def miles_per_hour(value: float) -> Speed:
    return meters_per_second(_MILES_PER_HOUR * value)


def in_miles_per_hour(speed: Speed) -> float:
    return in_meters_per_second(speed) / _MILES_PER_HOUR


def feet_per_second(value: float) -> Speed:
    return meters_per_second(_FEET_PER_SECOND * value)


def in_feet_per_second(speed: Speed) -> float:
    return in_meters_per_second(speed) / _FEET_PER_SECOND


METER_PER_SECOND = meters_per_second(1.0)
MILE_PER_HOUR = miles_per_hour(1.0)
