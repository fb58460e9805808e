"""Time units used to timestamp position fixes."""

from __future__ import annotations

from .unit_float import UnitFloat


class Second(UnitFloat):
    """Duration in seconds, the root of the time family."""

    IS_FAMILY_ROOT = True
    SCALE_TO_SI = 1.0
    SYMBOL = "s"


class Minute(Second):
    SCALE_TO_SI = 60.0
    SYMBOL = "min"


class Hour(Second):
    SCALE_TO_SI = 3600.0
    SYMBOL = "h"


Time = Second | Minute | Hour
