"""Duration constructors and accessors. The base unit is the second."""

from unit_algebra import quantity
from unit_algebra.measures import constants
from unit_algebra.types import Duration


def seconds(value: float) -> Duration:
    return quantity.create(value)


def in_seconds(duration: Duration) -> float:
    return quantity.unwrap(duration)


def milliseconds(value: float) -> Duration:
    return seconds(constants.MILLISECOND * value)


def in_milliseconds(duration: Duration) -> float:
    return in_seconds(duration) / constants.MILLISECOND


def minutes(value: float) -> Duration:
    return seconds(constants.MINUTE * value)


def in_minutes(duration: Duration) -> float:
    return in_seconds(duration) / constants.MINUTE


def hours(value: float) -> Duration:
    return seconds(constants.HOUR * value)


def in_hours(duration: Duration) -> float:
    return in_seconds(duration) / constants.HOUR


def days(value: float) -> Duration:
    return seconds(constants.DAY * value)


def in_days(duration: Duration) -> float:
    return in_seconds(duration) / constants.DAY


def weeks(value: float) -> Duration:
    return seconds(constants.WEEK * value)


def in_weeks(duration: Duration) -> float:
    return in_seconds(duration) / constants.WEEK


def julian_years(value: float) -> Duration:
    """Julian years of exactly 365.25 days."""
    return seconds(constants.JULIAN_YEAR * value)


def in_julian_years(duration: Duration) -> float:
    return in_seconds(duration) / constants.JULIAN_YEAR


SECOND = seconds(1.0)
MILLISECOND = milliseconds(1.0)
MINUTE = minutes(1.0)
HOUR = hours(1.0)
DAY = days(1.0)
WEEK = weeks(1.0)
