"""Length constructors and accessors. The base unit is the meter."""

from unit_algebra import quantity
from unit_algebra.measures import constants
from unit_algebra.types import Length


def _unit(factor: float, value: float) -> Length:
    return quantity.create(factor * value)


def _in_unit(factor: float, length: Length) -> float:
    return quantity.unwrap(length) / factor


def meters(value: float) -> Length:
    return quantity.create(value)


def in_meters(length: Length) -> float:
    return quantity.unwrap(length)


def angstroms(value: float) -> Length:
    return _unit(constants.ANGSTROM, value)


def in_angstroms(length: Length) -> float:
    return _in_unit(constants.ANGSTROM, length)


def nanometers(value: float) -> Length:
    return _unit(constants.NANOMETER, value)


def in_nanometers(length: Length) -> float:
    return _in_unit(constants.NANOMETER, length)


def microns(value: float) -> Length:
    return _unit(constants.MICRON, value)


def in_microns(length: Length) -> float:
    return _in_unit(constants.MICRON, length)


def millimeters(value: float) -> Length:
    return _unit(constants.MILLIMETER, value)


def in_millimeters(length: Length) -> float:
    return _in_unit(constants.MILLIMETER, length)


def centimeters(value: float) -> Length:
    return _unit(constants.CENTIMETER, value)


def in_centimeters(length: Length) -> float:
    return _in_unit(constants.CENTIMETER, length)


def kilometers(value: float) -> Length:
    return _unit(constants.KILOMETER, value)


def in_kilometers(length: Length) -> float:
    return _in_unit(constants.KILOMETER, length)


def thou(value: float) -> Length:
    return _unit(constants.THOU, value)


def in_thou(length: Length) -> float:
    return _in_unit(constants.THOU, length)


def inches(value: float) -> Length:
    return _unit(constants.INCH, value)


def in_inches(length: Length) -> float:
    return _in_unit(constants.INCH, length)


def feet(value: float) -> Length:
    return _unit(constants.FOOT, value)


def in_feet(length: Length) -> float:
    return _in_unit(constants.FOOT, length)


def yards(value: float) -> Length:
    return _unit(constants.YARD, value)


def in_yards(length: Length) -> float:
    return _in_unit(constants.YARD, length)


def miles(value: float) -> Length:
    return _unit(constants.MILE, value)


def in_miles(length: Length) -> float:
    return _in_unit(constants.MILE, length)


def astronomical_units(value: float) -> Length:
    return _unit(constants.ASTRONOMICAL_UNIT, value)


def in_astronomical_units(length: Length) -> float:
    return _in_unit(constants.ASTRONOMICAL_UNIT, length)


def light_years(value: float) -> Length:
    return _unit(constants.LIGHT_YEAR, value)


def in_light_years(length: Length) -> float:
    return _in_unit(constants.LIGHT_YEAR, length)


def parsecs(value: float) -> Length:
    return _unit(constants.PARSEC, value)


def in_parsecs(length: Length) -> float:
    return _in_unit(constants.PARSEC, length)


def css_pixels(value: float) -> Length:
    """CSS reference pixels, 1/96 of an inch."""
    return _unit(constants.CSS_PIXEL, value)


def in_css_pixels(length: Length) -> float:
    return _in_unit(constants.CSS_PIXEL, length)


def points(value: float) -> Length:
    """Typographic points, 1/72 of an inch."""
    return _unit(constants.POINT, value)


def in_points(length: Length) -> float:
    return _in_unit(constants.POINT, length)


def picas(value: float) -> Length:
    return _unit(constants.PICA, value)


def in_picas(length: Length) -> float:
    return _in_unit(constants.PICA, length)


METER = meters(1.0)
MILLIMETER = millimeters(1.0)
CENTIMETER = centimeters(1.0)
KILOMETER = kilometers(1.0)
INCH = inches(1.0)
FOOT = feet(1.0)
YARD = yards(1.0)
MILE = miles(1.0)
