"""Velocity units for ride speed.

Example:
    >>> speed = MeterPerSecond(5)
    >>> round(speed.to(KilometersPerHour), 6)
    18.0
"""

from __future__ import annotations

from .unit_float import UnitFloat


class MeterPerSecond(UnitFloat):
    """Velocity in metres per second, the root of the velocity family."""

    IS_FAMILY_ROOT = True
    SCALE_TO_SI = 1.0
    SYMBOL = "m/s"


class KilometersPerHour(MeterPerSecond):
    """Velocity in kilometres per hour, the unit shown on a speed readout."""

    SCALE_TO_SI = 1000.0 / 3600.0
    SYMBOL = "km/h"


Velocity = MeterPerSecond | KilometersPerHour
