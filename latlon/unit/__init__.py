"""Typed quantities for geodesy inputs and outputs.

The unit system keeps every value in SI (radians, metres, seconds, m/s) and
checks that only quantities of the same family are combined.

Unit Families:
    - Angle: Radian (root), Degree
    - Length: Meter (root), Kilometer
    - Time: Second (root), Minute, Hour
    - Velocity: MeterPerSecond (root), KilometersPerHour

Example:
    >>> from latlon.unit import Degree, Kilometer, Meter
    >>> leg = Kilometer(7) + Meter(500)
    >>> leg.to(Kilometer)
    7.5
    >>> Degree(90) + Meter(1)
    Traceback (most recent call last):
    ...
    TypeError: cannot combine Radian with Meter
"""

from .unit_angle import Angle, Degree, Radian
from .unit_base import Unit
from .unit_distance import Kilometer, Length, Meter
from .unit_float import UnitFloat
from .unit_time import Hour, Minute, Second, Time
from .unit_velocity import KilometersPerHour, MeterPerSecond, Velocity

__all__ = [
    # Base classes
    "Unit",
    "UnitFloat",
    # Angular units
    "Radian",
    "Degree",
    "Angle",
    # Distance units
    "Meter",
    "Kilometer",
    "Length",
    # Time units
    "Second",
    "Minute",
    "Hour",
    "Time",
    # Velocity units
    "MeterPerSecond",
    "KilometersPerHour",
    "Velocity",
]
