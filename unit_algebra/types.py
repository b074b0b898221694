"""
Unit marker types for type-safe quantities.

This module defines the phantom "units" types used as the type parameter of
Quantity and Interval. They provide zero-overhead type hints that let a static
type checker reject mixing incompatible dimensions while remaining transparent
at runtime.

Type Safety Benefits:
    - Prevents mixing incompatible units (e.g., adding a Length to a Duration)
    - Documents expected units in function signatures
    - Enables static type checkers (mypy) to catch unit errors
    - Zero runtime overhead (markers are never instantiated)

Lost Guarantee:
    Python erases type parameters at runtime. Quantity[Meters] and
    Quantity[Seconds] are the same class holding the same float, so a unit
    mismatch that slips past the type checker is NOT detected when the code
    runs.

Composition Markers:
    Product[A, B]   dimension of multiplying an A by a B
    Squared[A]      Product[A, A]
    Cubed[A]        Product[A, Product[A, A]]
    Rate[D, I]      dimension of dividing a D by an I (e.g. speed)

Usage Example:
    >>> from unit_algebra.types import Meters, Seconds, Rate
    >>> from unit_algebra.quantity import Quantity
    >>>
    >>> def travel_time(distance: Quantity[Meters],
    ...                 speed: Quantity[Rate[Meters, Seconds]]) -> Quantity[Seconds]:
    ...     ...
"""

from typing import Generic, TypeVar

from unit_algebra.quantity import Quantity

A = TypeVar("A")
B = TypeVar("B")
U = TypeVar("U")
Dependent = TypeVar("Dependent")
Independent = TypeVar("Independent")


class UnitMarker:
    """Base class for unit markers. Markers only exist as type parameters."""

    def __new__(cls, *args, **kwargs):
        raise TypeError(f"{cls.__name__} is a unit marker and cannot be instantiated")


# Unit spaces
class Unitless(UnitMarker):
    """No units. A Quantity[Unitless] is interchangeable with a plain float."""


class Meters(UnitMarker):
    """Distance or position in meters"""


class Seconds(UnitMarker):
    """Time in seconds"""


class Radians(UnitMarker):
    """Plane angle in radians"""


class Kilograms(UnitMarker):
    """Mass in kilograms"""


class Pixel(UnitMarker):
    """Image coordinates or dimensions in pixels"""


class Coulombs(UnitMarker):
    """Electric charge in coulombs"""


class Percentage(UnitMarker):
    """Fraction of a whole"""


class Lumens(UnitMarker):
    """Luminous flux in lumens"""


class Steradians(UnitMarker):
    """Solid angle in steradians"""


class Moles(UnitMarker):
    """Substance amount in moles"""


class CelsiusDegrees(UnitMarker):
    """Temperature difference in degrees Celsius"""


# Unit relations
class Product(UnitMarker, Generic[A, B]):
    """Units of the product of an A and a B; the general form of Squared and Cubed."""


class Rate(UnitMarker, Generic[Dependent, Independent]):
    """Units of a rate or quotient, such as a speed (Rate[Meters, Seconds])."""


Squared = Product[U, U]
Cubed = Product[U, Product[U, U]]

# Angular
RadiansPerSecond = Rate[Radians, Seconds]
RadiansPerSecondSquared = Rate[RadiansPerSecond, Seconds]

# Distance
MetersPerSecond = Rate[Meters, Seconds]
MetersPerSecondSquared = Rate[MetersPerSecond, Seconds]
SquareMeters = Squared[Meters]
CubicMeters = Cubed[Meters]

# Mass
Newtons = Product[Kilograms, MetersPerSecondSquared]
Pascals = Rate[Newtons, SquareMeters]
KilogramsPerCubicMeter = Rate[Kilograms, CubicMeters]
Joules = Product[Newtons, Meters]
Watts = Rate[Joules, Seconds]

# Light
Candelas = Rate[Lumens, Steradians]
Lux = Rate[Lumens, SquareMeters]

# Atomic
MolesPerCubicMeter = Rate[Moles, CubicMeters]

# Electrical
Amperes = Rate[Coulombs, Seconds]
Volts = Rate[Watts, Amperes]
Ohms = Rate[Volts, Amperes]

# Pixels
PixelsPerSecond = Rate[Pixel, Seconds]
SquarePixels = Squared[Pixel]

# Quantity types
Length = Quantity[Meters]
Duration = Quantity[Seconds]
Angle = Quantity[Radians]
Mass = Quantity[Kilograms]
Pixels = Quantity[Pixel]
Percent = Quantity[Percentage]
Area = Quantity[SquareMeters]
Volume = Quantity[CubicMeters]
Speed = Quantity[MetersPerSecond]
Acceleration = Quantity[MetersPerSecondSquared]
AngularSpeed = Quantity[RadiansPerSecond]
Force = Quantity[Newtons]
Energy = Quantity[Joules]
Power = Quantity[Watts]
Pressure = Quantity[Pascals]
Density = Quantity[KilogramsPerCubicMeter]
