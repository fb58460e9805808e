"""Conversion between decimal degrees and degree/minute/second text.

Parsing is deliberately forgiving: ``parse_dms`` accepts signed decimal
degrees, or one to three numeric fields separated by any run of non-numeric
characters, optionally followed by a compass letter. Bad input gives NaN
instead of an exception so that callers can keep doing arithmetic and test
the result with ``math.isnan``.

Formatting renders the absolute value as ``DDD°MM′SS″`` (``dms``),
``DDD°MM.mm′`` (``dm``) or ``DDD.dddd°`` (``d``). The latitude, longitude and
bearing formatters add the compass letter or bearing wrap-around on top.

Example:
    >>> round(parse_dms("51° 28′ 40.12″ N"), 6)
    51.477811
    >>> to_lat(51.477811)
    '51°28′40″N'
    >>> to_lon(-0.0015, "d")
    '000.0015°W'
"""

from __future__ import annotations

import logging
import math
import re
from enum import Enum
from numbers import Real

from ..config import DEFAULT_DECIMAL_PLACES, NO_VALUE
from ..numeric import to_fixed, to_number
from ..unit import Degree, Radian

logger = logging.getLogger(__name__)

DEGREE = "°"
PRIME = "′"
DOUBLE_PRIME = "″"

_FIELD_SEPARATOR = re.compile(r"[^0-9.]+")
_COMPASS_SUFFIX = re.compile(r"[NSEW]$", re.IGNORECASE)
_SIGN = re.compile(r"^[+-]")
_NEGATIVE = re.compile(r"^-|[WS]$", re.IGNORECASE)


class DmsFormat(str, Enum):
    """Output layout of a formatted angle."""

    D = "d"
    DM = "dm"
    DMS = "dms"


class DmsKind(str, Enum):
    """What a formatted angle represents; selects suffix and wrap-around."""

    LATITUDE = "latitude"
    LONGITUDE = "longitude"
    BEARING = "bearing"


def parse_dms(value) -> float:
    """Parse degrees or degrees/minutes/seconds into signed decimal degrees.

    Accepted forms include ``"51.4778"``, ``"-0.0015"``, ``"51 28 40.12 N"``,
    ``"3° 37′ 09″W"`` and ``"51:28:40"``. A leading ``-`` or a trailing ``S``
    or ``W`` makes the result negative.

    Args:
        value: A number (returned unchanged when finite), an angle unit, or text.

    Returns:
        float: Decimal degrees, or NaN if the text has no numeric fields, more
        than three fields, or a field that is not a number.

    Raises:
        TypeError: If ``value`` is neither a number nor a string.
    """
    if isinstance(value, Radian):
        return value.to(Degree)
    if isinstance(value, Real) and not isinstance(value, bool):
        if math.isfinite(value):
            return float(value)
        return math.nan
    if not isinstance(value, str):
        raise TypeError(f"parse_dms expects a number or string, got {type(value).__name__}")

    text = value.strip()
    body = _COMPASS_SUFFIX.sub("", _SIGN.sub("", text, count=1), count=1)
    fields = [field for field in _FIELD_SEPARATOR.split(body) if field]

    if not 1 <= len(fields) <= 3:
        logger.debug("parse_dms: %d numeric fields in %r", len(fields), value)
        return math.nan
    try:
        parts = [float(field) for field in fields]
    except ValueError:
        logger.debug("parse_dms: malformed field in %r", value)
        return math.nan

    degrees = sum(part / 60**i for i, part in enumerate(parts))
    if _NEGATIVE.search(text):
        degrees = -degrees
    return degrees


def _format_tag(fmt) -> tuple[DmsFormat, int | None]:
    try:
        return DmsFormat(fmt), None
    except ValueError:
        # unknown layouts fall back to whole seconds
        return DmsFormat.DMS, 0


def _pad_degrees(d: str) -> str:
    if float(d) < 100:
        d = "0" + d
    if float(d) < 10:
        d = "0" + d
    return d


def _pad_two(field: str) -> str:
    return "0" + field if float(field) < 10 else field


def to_dms(deg, fmt: DmsFormat | str = DmsFormat.DMS, dp: int | None = None) -> str | None:
    """Render the absolute value of ``deg`` as degree/minute/second text.

    The sign is dropped and no compass letter is added; see :func:`to_lat`,
    :func:`to_lon` and :func:`to_brng` for that.

    Args:
        deg: Angle in degrees.
        fmt: ``"d"``, ``"dm"`` or ``"dms"``.
        dp: Decimal places on the last field; defaults to 4, 2 and 0
            for ``d``, ``dm`` and ``dms``.

    Returns:
        str | None: The formatted angle, or ``None`` when ``deg`` is NaN.

    Raises:
        TypeError: If ``deg`` is neither a number nor a string.
    """
    deg = to_number(deg)
    if math.isnan(deg):
        return None

    fmt, fallback_dp = _format_tag(fmt)
    if dp is None:
        dp = DEFAULT_DECIMAL_PLACES[fmt.value] if fallback_dp is None else fallback_dp
    dp = int(dp)

    deg = abs(deg)

    if fmt is DmsFormat.D:
        d = _pad_degrees(to_fixed(deg, dp))
        return d + DEGREE

    if fmt is DmsFormat.DM:
        minutes = float(to_fixed(deg * 60, dp))
        d = _pad_degrees(str(math.floor(minutes / 60)))
        m = _pad_two(to_fixed(minutes % 60, dp))
        return d + DEGREE + m + PRIME

    seconds = float(to_fixed(deg * 3600, dp))
    d = _pad_degrees(str(math.floor(seconds / 3600)))
    m = _pad_two(str(math.floor(seconds / 60) % 60))
    s = _pad_two(to_fixed(seconds % 60, dp))
    return d + DEGREE + m + PRIME + s + DOUBLE_PRIME


def to_lat(deg, fmt: DmsFormat | str = DmsFormat.DMS, dp: int | None = None) -> str:
    """Format a latitude with a two-digit degree field and an ``N``/``S`` suffix."""
    lat = to_dms(deg, fmt, dp)
    if lat is None:
        return NO_VALUE
    # latitude never needs the third degree digit
    return lat[1:] + ("S" if to_number(deg) < 0 else "N")


def to_lon(deg, fmt: DmsFormat | str = DmsFormat.DMS, dp: int | None = None) -> str:
    """Format a longitude with an ``E``/``W`` suffix."""
    lon = to_dms(deg, fmt, dp)
    if lon is None:
        return NO_VALUE
    return lon + ("W" if to_number(deg) < 0 else "E")


def to_brng(deg, fmt: DmsFormat | str = DmsFormat.DMS, dp: int | None = None) -> str:
    """Format a bearing in the range 0° to 360°, without a compass letter.

    A value that rounds up to 360 is shown as ``000``, keeping the three-digit
    degree field, e.g. ``to_brng(359.99999, "d")`` gives ``"000.0000°"``.
    """
    deg = (to_number(deg) + 360) % 360
    brng = to_dms(deg, fmt, dp)
    if brng is None:
        return NO_VALUE
    # rounding can carry 359.9999... up to 360
    if brng.startswith("360"):
        brng = "000" + brng[3:]
    return brng


_FORMATTERS = {
    DmsKind.LATITUDE: to_lat,
    DmsKind.LONGITUDE: to_lon,
    DmsKind.BEARING: to_brng,
}


def format_degrees(
    deg, kind: DmsKind | str, fmt: DmsFormat | str = DmsFormat.DMS, dp: int | None = None
) -> str:
    """Format ``deg`` as a latitude, longitude or bearing.

    Raises:
        ValueError: If ``kind`` is not one of ``latitude``, ``longitude``, ``bearing``.
    """
    return _FORMATTERS[DmsKind(kind)](deg, fmt, dp)
