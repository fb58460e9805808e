"""Degree/minute/second text codec for latitudes, longitudes and bearings.

Example:
    >>> from latlon.dms import parse_dms, to_lat
    >>> lat = parse_dms("51° 28′ 40.12″ N")
    >>> to_lat(lat, "dms", 2)
    '51°28′40.12″N'
"""

from .codec import (
    DmsFormat,
    DmsKind,
    format_degrees,
    parse_dms,
    to_brng,
    to_dms,
    to_lat,
    to_lon,
)

__all__ = [
    "DmsFormat",
    "DmsKind",
    "format_degrees",
    "parse_dms",
    "to_brng",
    "to_dms",
    "to_lat",
    "to_lon",
]
