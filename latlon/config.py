"""Library-wide constants for the spherical geodesy model.

Values here are plain module constants; nothing is read from the environment.
A different sphere is chosen per point through ``LatLon(radius=...)``.

Constants:
    EARTH_RADIUS_KM: Mean Earth radius used when a point gives no radius.
    DEFAULT_PRECISION: Significant figures kept in reported distances; the
        spherical model is only good to about 0.3%.
    RHUMB_EPSILON: Below this |Δψ| a rhumb course is treated as due east/west
        and the Mercator stretch factor falls back to cos(φ1).
    DEFAULT_DECIMAL_PLACES: Decimal places per DMS format tag.
    NO_VALUE: Placeholder shown instead of a formatted angle that is NaN.
    BASE_TYPE: Numeric inputs accepted by the vectorised helpers.
"""

from numpy import ndarray

EARTH_RADIUS_KM = 6371.0

DEFAULT_PRECISION = 4

RHUMB_EPSILON = 1e-11

DEFAULT_DECIMAL_PLACES = {"d": 4, "dm": 2, "dms": 0}

NO_VALUE = "–"

BASE_TYPE = int | float | ndarray
