"""Angle units.

Angles are stored in radians, so ``float(Degree(90))`` is ``pi / 2``. The
geodesy API takes bearings and coordinates in degrees; passing one of these
units instead is converted with ``.to(Degree)`` at the boundary.

Example:
    >>> heading = Degree(127.5)
    >>> round(heading.to(Radian), 4)
    2.2253
"""

from __future__ import annotations

from math import pi

from .unit_float import UnitFloat


class Radian(UnitFloat):
    """Angle in radians, the root of the angle family."""

    IS_FAMILY_ROOT = True
    SCALE_TO_SI = 1.0
    SYMBOL = "rad"


class Degree(Radian):
    """Angle in degrees (360 per full turn)."""

    SCALE_TO_SI = pi / 180
    SYMBOL = "°"


Angle = Radian | Degree
