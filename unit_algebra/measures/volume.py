"""Volume constructors and accessors. The base unit is the cubic meter."""

from unit_algebra import quantity
from unit_algebra.measures import constants
from unit_algebra.types import Volume


def cubic_meters(value: float) -> Volume:
    return quantity.create(value)


def in_cubic_meters(volume: Volume) -> float:
    return quantity.unwrap(volume)


def cubic_millimeters(value: float) -> Volume:
    return cubic_meters(constants.CUBIC_MILLIMETER * value)


def in_cubic_millimeters(volume: Volume) -> float:
    return in_cubic_meters(volume) / constants.CUBIC_MILLIMETER


def cubic_centimeters(value: float) -> Volume:
    return cubic_meters(constants.CUBIC_CENTIMETER * value)


def in_cubic_centimeters(volume: Volume) -> float:
    return in_cubic_meters(volume) / constants.CUBIC_CENTIMETER


def liters(value: float) -> Volume:
    return cubic_meters(constants.LITER * value)


def in_liters(volume: Volume) -> float:
    return in_cubic_meters(volume) / constants.LITER


def milliliters(value: float) -> Volume:
    return cubic_meters(constants.MILLILITER * value)


def in_milliliters(volume: Volume) -> float:
    return in_cubic_meters(volume) / constants.MILLILITER


def cubic_inches(value: float) -> Volume:
    return cubic_meters(constants.CUBIC_INCH * value)


def in_cubic_inches(volume: Volume) -> float:
    return in_cubic_meters(volume) / constants.CUBIC_INCH


def cubic_feet(value: float) -> Volume:
    return cubic_meters(constants.CUBIC_FOOT * value)


def in_cubic_feet(volume: Volume) -> float:
    return in_cubic_meters(volume) / constants.CUBIC_FOOT


def cubic_yards(value: float) -> Volume:
    return cubic_meters(constants.CUBIC_YARD * value)


def in_cubic_yards(volume: Volume) -> float:
    return in_cubic_meters(volume) / constants.CUBIC_YARD


def us_liquid_gallons(value: float) -> Volume:
    """US liquid gallons, defined as 231 cubic inches."""
    return cubic_meters(constants.US_LIQUID_GALLON * value)


def in_us_liquid_gallons(volume: Volume) -> float:
    return in_cubic_meters(volume) / constants.US_LIQUID_GALLON


def imperial_gallons(value: float) -> Volume:
    return cubic_meters(constants.IMPERIAL_GALLON * value)


def in_imperial_gallons(volume: Volume) -> float:
    return in_cubic_meters(volume) / constants.IMPERIAL_GALLON


CUBIC_METER = cubic_meters(1.0)
LITER = liters(1.0)
MILLILITER = milliliters(1.0)
