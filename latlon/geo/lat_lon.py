"""Points on a sphere and the calculations between them.

:class:`LatLon` is an immutable latitude/longitude pair on a sphere of a
given radius (Earth's mean radius by default). Great-circle and rhumb-line
methods return floats (degrees), kilometre distances that print in
fixed-point form, or new points. No method changes the point it is called on.

Accuracy is that of a spherical Earth, about 0.3%, so distances are reported
to 4 significant figures by default.

Example:
    >>> p1 = LatLon(51.5136, -0.0983)
    >>> p2 = LatLon(51.4778, -0.0015)
    >>> p1.distance_to(p2)
    7.794
    >>> round(p1.bearing_to(p2))
    121
    >>> p1.destination_point(p1.bearing_to(p2), 7.794).to_string("d", 2)
    '51.48°N, 000.00°W'
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ..config import DEFAULT_PRECISION, EARTH_RADIUS_KM
from ..dms import DmsFormat, parse_dms, to_lat, to_lon
from ..numeric import SignificantFloat, to_degrees, to_number, to_radians, wrap_bearing
from ..unit import Angle, Kilometer, Length, Meter, Unit
from . import rhumb, spherical


def _kilometres(value: float | Length) -> float:
    """Distance argument in kilometres; length units are converted."""
    if isinstance(value, Meter):
        return value.to(Kilometer)
    if isinstance(value, Unit):
        raise TypeError(f"expected a length, got {type(value).__name__}")
    return to_number(value)


def _degrees(value: float | Angle) -> float:
    """Angle argument in degrees; angle units are converted."""
    if isinstance(value, Unit) and not isinstance(value, Angle):
        raise TypeError(f"expected an angle, got {type(value).__name__}")
    return to_number(value)


def _require_point(value) -> LatLon:
    if not isinstance(value, LatLon):
        raise TypeError(f"expected a LatLon, got {type(value).__name__}")
    return value


@dataclass(frozen=True)
class LatLon:
    """A point on the surface of a sphere.

    Attributes:
        latitude (float): Degrees north, negative south. Meaningful in [-90, 90].
        longitude (float): Degrees east, negative west. Any value is accepted;
            computed points are normalised to [-180, 180).
        radius (float): Sphere radius in kilometres. In two-point calculations
            the radius of the point the method is called on is used.

    Numeric strings and angle units are accepted for the coordinates and are
    stored as plain floats in degrees.

    Raises:
        TypeError: If a coordinate or the radius is not a number or string.
    """

    latitude: float
    longitude: float
    radius: float = field(default=EARTH_RADIUS_KM)

    def __post_init__(self):
        object.__setattr__(self, "latitude", _degrees(self.latitude))
        object.__setattr__(self, "longitude", _degrees(self.longitude))
        object.__setattr__(self, "radius", _kilometres(self.radius))

    # ------------------------------------------------------------------ constructors
    @classmethod
    def from_deg(cls, lat: float, lon: float, radius: float = EARTH_RADIUS_KM) -> LatLon:
        """Create a point from decimal degrees."""
        return cls(lat, lon, radius)

    @classmethod
    def from_rad(cls, lat: float, lon: float, radius: float = EARTH_RADIUS_KM) -> LatLon:
        """Create a point from radians.

        Example:
            >>> import math
            >>> LatLon.from_rad(math.pi / 4, math.pi / 3).to_string("d", 1)
            '45.0°N, 060.0°E'
        """
        return cls(to_degrees(to_number(lat)), to_degrees(to_number(lon)), radius)

    @classmethod
    def from_dms(cls, lat: str, lon: str, radius: float = EARTH_RADIUS_KM) -> LatLon:
        """Create a point from degree/minute/second text.

        Unparseable text gives a NaN coordinate rather than an error, see
        :func:`latlon.dms.parse_dms`.

        Example:
            >>> p = LatLon.from_dms("51° 28′ 40.12″ N", "000° 00′ 05.31″ W")
            >>> round(p.latitude, 6), round(p.longitude, 6)
            (51.477811, -0.001475)
        """
        return cls(parse_dms(lat), parse_dms(lon), radius)

    @property
    def _phi(self) -> float:
        return to_radians(self.latitude)

    @property
    def _lambda(self) -> float:
        return to_radians(self.longitude)

    def _with(self, phi: float, lam: float) -> LatLon:
        return LatLon(to_degrees(phi), to_degrees(lam), self.radius)

    # ------------------------------------------------------------------ great circle
    def distance_to(self, point: LatLon, precision: int = DEFAULT_PRECISION) -> SignificantFloat:
        """Great-circle distance to ``point`` in kilometres (haversine).

        Args:
            point: Destination point.
            precision: Significant figures to keep.

        Returns:
            SignificantFloat: Distance rounded to ``precision`` significant
            figures. It prints in fixed-point form, never with an exponent.
        """
        point = _require_point(point)
        delta = spherical.angular_distance(self._phi, self._lambda, point._phi, point._lambda)
        return SignificantFloat(self.radius * delta, precision)

    def bearing_to(self, point: LatLon) -> float:
        """Initial great-circle bearing to ``point``, in degrees within [0, 360)."""
        point = _require_point(point)
        theta = spherical.initial_bearing(
            self._phi, point._phi, to_radians(point.longitude - self.longitude)
        )
        return wrap_bearing(to_degrees(theta))

    def final_bearing_to(self, point: LatLon) -> float:
        """Bearing on arrival at ``point``, in degrees within [0, 360).

        This is the initial bearing from ``point`` back to this point, reversed.
        """
        point = _require_point(point)
        theta = spherical.initial_bearing(
            point._phi, self._phi, to_radians(self.longitude - point.longitude)
        )
        return wrap_bearing(to_degrees(theta) + 180)

    def midpoint_to(self, point: LatLon) -> LatLon:
        """Point halfway along the great circle to ``point``."""
        point = _require_point(point)
        return self._with(*spherical.midpoint(self._phi, self._lambda, point._phi, point._lambda))

    def destination_point(self, bearing: float | Angle, distance: float | Length) -> LatLon:
        """Point reached by travelling ``distance`` km on initial ``bearing`` degrees.

        Example:
            >>> LatLon(53.3206, -1.7297).destination_point(96.0217, 124.8).to_string("d", 2)
            '53.19°N, 000.13°E'
        """
        theta = to_radians(_degrees(bearing))
        delta = _kilometres(distance) / self.radius
        return self._with(*spherical.destination(self._phi, self._lambda, theta, delta))

    @staticmethod
    def intersection(
        p1: LatLon, bearing1: float | Angle, p2: LatLon, bearing2: float | Angle
    ) -> LatLon | None:
        """Crossing point of the path from ``p1`` on ``bearing1`` and from ``p2`` on ``bearing2``.

        Returns:
            LatLon | None: The crossing, carrying ``p1``'s radius, or ``None``
            when the points coincide, the paths coincide, or no unique forward
            crossing exists.

        Example:
            >>> p = LatLon.intersection(LatLon(51.8853, 0.2545), 108.547, LatLon(49.0034, 2.5735), 32.435)
            >>> p.to_string("d", 3)
            '50.908°N, 004.508°E'
        """
        p1 = _require_point(p1)
        p2 = _require_point(p2)
        crossing = spherical.intersection(
            p1._phi,
            p1._lambda,
            to_radians(_degrees(bearing1)),
            p2._phi,
            p2._lambda,
            to_radians(_degrees(bearing2)),
        )
        if crossing is None:
            return None
        return p1._with(*crossing)

    # ------------------------------------------------------------------ rhumb line
    def rhumb_distance_to(self, point: LatLon) -> SignificantFloat:
        """Distance along the rhumb line to ``point``, in km to 4 significant figures."""
        point = _require_point(point)
        delta = rhumb.angular_distance(self._phi, self._lambda, point._phi, point._lambda)
        return SignificantFloat(self.radius * delta, DEFAULT_PRECISION)

    def rhumb_bearing_to(self, point: LatLon) -> float:
        """Constant rhumb-line bearing to ``point``, in degrees within [0, 360)."""
        point = _require_point(point)
        theta = rhumb.bearing(self._phi, self._lambda, point._phi, point._lambda)
        return wrap_bearing(to_degrees(theta))

    def rhumb_destination_point(self, bearing: float | Angle, distance: float | Length) -> LatLon:
        """Point reached by holding ``bearing`` degrees for ``distance`` km."""
        theta = to_radians(_degrees(bearing))
        delta = _kilometres(distance) / self.radius
        return self._with(*rhumb.destination(self._phi, self._lambda, theta, delta))

    def rhumb_midpoint_to(self, point: LatLon) -> LatLon:
        """Point halfway along the rhumb line to ``point``."""
        point = _require_point(point)
        return self._with(*rhumb.midpoint(self._phi, self._lambda, point._phi, point._lambda))

    # ------------------------------------------------------------------ display
    def to_string(self, fmt: DmsFormat | str = DmsFormat.DMS, dp: int | None = None) -> str:
        """Latitude and longitude as DMS text joined by ``", "``.

        Args:
            fmt: ``"d"``, ``"dm"`` or ``"dms"``.
            dp: Decimal places; see :func:`latlon.dms.to_dms`.
        """
        return f"{to_lat(self.latitude, fmt, dp)}, {to_lon(self.longitude, fmt, dp)}"

    def __str__(self) -> str:
        return self.to_string()


intersection = LatLon.intersection
