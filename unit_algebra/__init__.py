"""
Unit Algebra Package.

Type-safe physical quantities and intervals of quantities. A quantity is a
float tagged with a phantom units type (Quantity[Meters], Quantity[Seconds]),
so a static type checker rejects adding a length to a duration while the
runtime cost stays that of a single float wrapper.

Example Usage:
    >>> from unit_algebra import interval, quantity
    >>> from unit_algebra.measures import duration, length, speed
    >>>
    >>> distance = length.miles(1.0)
    >>> elapsed = duration.minutes(1.0)
    >>> speed.in_miles_per_hour(quantity.rate(distance, elapsed))
    60.0
    >>>
    >>> # Intervals carry uncertainty through arithmetic
    >>> span = interval.from_(length.meters(2.0), length.meters(3.0))
    >>> interval.squared(span)
    Interval(Quantity(4.0), Quantity(9.0))

Available Modules:
    Core:
        - float_tolerance: Global digit precision and tolerant float equality
        - quantity: Quantity class and the functions over it
        - interval: Interval class, interval arithmetic and trigonometry
        - types: Unit markers and quantity type aliases

    Units:
        - measures: Per-unit constructors and accessors (length, angle, ...)

    Configuration:
        - config: UnitAlgebraConfig for loading the digit precision from YAML
"""

from unit_algebra import float_tolerance, interval, measures, quantity, types
from unit_algebra.config import UnitAlgebraConfig, get_default_config
from unit_algebra.interval import Interval
from unit_algebra.quantity import Quantity

__all__ = [
    # Core types
    'Quantity',
    'Interval',

    # Modules
    'float_tolerance',
    'quantity',
    'interval',
    'types',
    'measures',

    # Configuration
    'UnitAlgebraConfig',
    'get_default_config',
]

__version__ = '0.1.0'
__description__ = 'Type-safe physical quantities and interval arithmetic'
