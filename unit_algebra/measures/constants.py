"""Conversion factors from named units to SI base units."""

import math

# Length (meters)
METER = 1.0
ANGSTROM = 1.0e-10 * METER
NANOMETER = 1.0e-9 * METER
MICRON = 1.0e-6 * METER
MILLIMETER = 1.0e-3 * METER
CENTIMETER = 1.0e-2 * METER
KILOMETER = 1.0e3 * METER
INCH = 0.0254 * METER
FOOT = 12.0 * INCH
YARD = 3.0 * FOOT
THOU = 1.0e-3 * INCH
MILE = 5280.0 * FOOT
ASTRONOMICAL_UNIT = 149597870700.0 * METER
LIGHT_YEAR = 9460730472580800.0 * METER
PARSEC = (648000.0 / math.pi) * ASTRONOMICAL_UNIT
CSS_PIXEL = INCH / 96.0
POINT = INCH / 72.0
PICA = INCH / 6.0

# Area (square meters)
SQUARE_METER = METER * METER
SQUARE_MILLIMETER = MILLIMETER * MILLIMETER
SQUARE_CENTIMETER = CENTIMETER * CENTIMETER
SQUARE_KILOMETER = KILOMETER * KILOMETER
SQUARE_INCH = INCH * INCH
SQUARE_FOOT = FOOT * FOOT
SQUARE_YARD = YARD * YARD
SQUARE_MILE = MILE * MILE
HECTARE = 10000.0 * SQUARE_METER
ACRE = 43560.0 * SQUARE_FOOT

# Volume (cubic meters)
CUBIC_METER = METER * METER * METER
CUBIC_CENTIMETER = CENTIMETER * CENTIMETER * CENTIMETER
CUBIC_MILLIMETER = MILLIMETER * MILLIMETER * MILLIMETER
LITER = 0.001 * CUBIC_METER
MILLILITER = 0.001 * LITER
CUBIC_INCH = INCH * INCH * INCH
CUBIC_FOOT = FOOT * FOOT * FOOT
CUBIC_YARD = YARD * YARD * YARD
US_LIQUID_GALLON = 231.0 * CUBIC_INCH
IMPERIAL_GALLON = 4.54609 * LITER

# Mass (kilograms)
KILOGRAM = 1.0
GRAM = 1.0e-3 * KILOGRAM
MILLIGRAM = 1.0e-6 * KILOGRAM
METRIC_TON = 1000.0 * KILOGRAM
POUND = 0.45359237 * KILOGRAM
OUNCE = POUND / 16.0
SHORT_TON = 2000.0 * POUND
LONG_TON = 2240.0 * POUND

# Duration (seconds)
SECOND = 1.0
MILLISECOND = 1.0e-3 * SECOND
MINUTE = 60.0 * SECOND
HOUR = 60.0 * MINUTE
DAY = 24.0 * HOUR
WEEK = 7.0 * DAY
JULIAN_YEAR = 365.25 * DAY

# Angle (radians)
RADIANS_PER_DEGREE = math.pi / 180.0
DEGREES_PER_RADIAN = 180.0 / math.pi
