"""Spherical geodesy: points, great circles and rhumb lines.

Components:
    LatLon: Immutable point on a sphere with great-circle and rhumb methods.
    intersection: Crossing point of two paths given as point and bearing.
    spherical: Great-circle formulae in radians.
    rhumb: Rhumb-line formulae in radians.

Typical Usage:
    >>> from latlon.geo import LatLon
    >>> home = LatLon(51.5136, -0.0983)
    >>> office = LatLon(51.4778, -0.0015)
    >>> home.distance_to(office)
    7.794
"""

from .lat_lon import LatLon, intersection

__all__ = ["LatLon", "intersection"]
