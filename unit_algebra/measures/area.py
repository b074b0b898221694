"""Area constructors and accessors. The base unit is the square meter."""

from unit_algebra import quantity
from unit_algebra.measures import constants
from unit_algebra.types import Area


def square_meters(value: float) -> Area:
    return quantity.create(value)


def in_square_meters(area: Area) -> float:
    return quantity.unwrap(area)


def square_millimeters(value: float) -> Area:
    return square_meters(constants.SQUARE_MILLIMETER * value)


def in_square_millimeters(area: Area) -> float:
    return in_square_meters(area) / constants.SQUARE_MILLIMETER


def square_centimeters(value: float) -> Area:
    return square_meters(constants.SQUARE_CENTIMETER * value)


def in_square_centimeters(area: Area) -> float:
    return in_square_meters(area) / constants.SQUARE_CENTIMETER


def square_kilometers(value: float) -> Area:
    return square_meters(constants.SQUARE_KILOMETER * value)


def in_square_kilometers(area: Area) -> float:
    return in_square_meters(area) / constants.SQUARE_KILOMETER


def hectares(value: float) -> Area:
    return square_meters(constants.HECTARE * value)


def in_hectares(area: Area) -> float:
    return in_square_meters(area) / constants.HECTARE


def square_inches(value: float) -> Area:
    return square_meters(constants.SQUARE_INCH * value)


def in_square_inches(area: Area) -> float:
    return in_square_meters(area) / constants.SQUARE_INCH


def square_feet(value: float) -> Area:
    return square_meters(constants.SQUARE_FOOT * value)


def in_square_feet(area: Area) -> float:
    return in_square_meters(area) / constants.SQUARE_FOOT


def square_yards(value: float) -> Area:
    return square_meters(constants.SQUARE_YARD * value)


def in_square_yards(area: Area) -> float:
    return in_square_meters(area) / constants.SQUARE_YARD


def acres(value: float) -> Area:
    return square_meters(constants.ACRE * value)


def in_acres(area: Area) -> float:
    return in_square_meters(area) / constants.ACRE


def square_miles(value: float) -> Area:
    return square_meters(constants.SQUARE_MILE * value)


def in_square_miles(area: Area) -> float:
    return in_square_meters(area) / constants.SQUARE_MILE


SQUARE_METER = square_meters(1.0)
SQUARE_FOOT = square_feet(1.0)
HECTARE = hectares(1.0)
ACRE = acres(1.0)
