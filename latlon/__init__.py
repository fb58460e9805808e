"""Spherical geodesy: distances, bearings and DMS text for latitude/longitude points.

The library treats the Earth as a sphere (mean radius 6371 km, overridable
per point) and offers two kinds of path between points:

    Great circle (latlon.geo):
        • Haversine distance, initial and final bearing
        • Midpoint, destination point and intersection of two paths

    Rhumb line (latlon.geo):
        • Constant-bearing distance, bearing, destination and midpoint
        • Antimeridian crossing takes the shorter way round

Supporting packages:
    latlon.dms: Parse and format degrees/minutes/seconds text.
    latlon.unit: Typed angle, length, time and velocity quantities.
    latlon.numeric: Degree/radian conversion and fixed-point formatting.
    latlon.track: Speed and distance statistics over a stream of fixes.

Every calculation is a pure function of its arguments, so points and
functions are safe to share between threads.

Usage:
    >>> from latlon import LatLon, parse_dms
    >>> greenwich = LatLon(parse_dms("51° 28′ 40.12″ N"), parse_dms("000° 00′ 05.31″ W"))
    >>> str(greenwich)
    '51°28′40″N, 000°00′05″W'
"""

from .dms import DmsFormat, DmsKind, format_degrees, parse_dms, to_brng, to_dms, to_lat, to_lon
from .geo import LatLon, intersection
from .numeric import SignificantFloat, to_degrees, to_fixed, to_precision_fixed, to_radians

__version__ = "0.1.0"

__all__ = [
    "DmsFormat",
    "DmsKind",
    "LatLon",
    "SignificantFloat",
    "format_degrees",
    "intersection",
    "parse_dms",
    "to_brng",
    "to_degrees",
    "to_dms",
    "to_fixed",
    "to_lat",
    "to_lon",
    "to_precision_fixed",
    "to_radians",
]
