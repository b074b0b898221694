"""
Per-unit constructors and accessors built on unit_algebra.quantity.

Each module covers one physical dimension and pairs a constructor taking a
float in some unit with an in_<unit> accessor returning one:

    >>> from unit_algebra.measures import length
    >>> length.in_inches(length.feet(1.0))
    12.0
"""

from unit_algebra.measures import angle, area, constants, duration, length, mass, speed, volume

__all__ = ["angle", "area", "constants", "duration", "length", "mass", "speed", "volume"]
