"""Length units.

Lengths are stored in metres. Geodesy results are reported in kilometres as
plain floats; wrap them in :class:`Kilometer` when a typed value is wanted.
"""

from __future__ import annotations

from .unit_float import UnitFloat


class Meter(UnitFloat):
    """Length in metres, the root of the length family."""

    IS_FAMILY_ROOT = True
    SCALE_TO_SI = 1.0
    SYMBOL = "m"


class Kilometer(Meter):
    """Length in kilometres."""

    SCALE_TO_SI = 1000.0
    SYMBOL = "km"


Length = Meter | Kilometer
