"""Mass constructors and accessors. The base unit is the kilogram."""

from unit_algebra import quantity
from unit_algebra.measures import constants
from unit_algebra.types import Mass


def kilograms(value: float) -> Mass:
    return quantity.create(value)


def in_kilograms(mass: Mass) -> float:
    return quantity.unwrap(mass)


def grams(value: float) -> Mass:
    return kilograms(constants.GRAM * value)


def in_grams(mass: Mass) -> float:
    return in_kilograms(mass) / constants.GRAM


def milligrams(value: float) -> Mass:
    return kilograms(constants.MILLIGRAM * value)


def in_milligrams(mass: Mass) -> float:
    return in_kilograms(mass) / constants.MILLIGRAM


def metric_tons(value: float) -> Mass:
    return kilograms(constants.METRIC_TON * value)


def in_metric_tons(mass: Mass) -> float:
    return in_kilograms(mass) / constants.METRIC_TON


def pounds(value: float) -> Mass:
    return kilograms(constants.POUND * value)


def in_pounds(mass: Mass) -> float:
    return in_kilograms(mass) / constants.POUND


def ounces(value: float) -> Mass:
    return kilograms(constants.OUNCE * value)


def in_ounces(mass: Mass) -> float:
    return in_kilograms(mass) / constants.OUNCE


def short_tons(value: float) -> Mass:
    return kilograms(constants.SHORT_TON * value)


def in_short_tons(mass: Mass) -> float:
    return in_kilograms(mass) / constants.SHORT_TON


def long_tons(value: float) -> Mass:
    return kilograms(constants.LONG_TON * value)


def in_long_tons(mass: Mass) -> float:
    return in_kilograms(mass) / constants.LONG_TON


KILOGRAM = kilograms(1.0)
GRAM = grams(1.0)
POUND = pounds(1.0)
