"""Ride statistics from successive position fixes.

A navigation display samples the device position every few seconds and
shows the speed, heading and distance covered. :class:`RideTracker` turns a
stream of :class:`Fix` values into :class:`TrackUpdate` segments; it does no
I/O and knows nothing about where the fixes come from.

:func:`haversine` and :func:`path_length` are numpy-vectorised versions of
the great-circle distance for whole tracks at once.

Example:
    >>> tracker = RideTracker()
    >>> tracker.update(Fix(LatLon(51.5136, -0.0983), Second(0))) is None
    True
    >>> seg = tracker.update(Fix(LatLon(51.5140, -0.0983), Second(10)))
    >>> round(seg.speed.to(KilometersPerHour), 1)
    16.0
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

import numpy as np

from .config import BASE_TYPE, EARTH_RADIUS_KM
from .geo import LatLon
from .unit import Kilometer, KilometersPerHour, Meter, MeterPerSecond, Second, Time

logger = logging.getLogger(__name__)

__all__ = [
    "Fix",
    "RideTracker",
    "TrackUpdate",
    "haversine",
    "path_length",
]


def haversine(
    lat1: BASE_TYPE,
    lon1: BASE_TYPE,
    lat2: BASE_TYPE,
    lon2: BASE_TYPE,
    radius: float = EARTH_RADIUS_KM,
) -> float | np.ndarray:
    """Elementwise great-circle distance in km between degree coordinates.

    Accepts scalars or broadcastable arrays and returns the same shape,
    without the significant-figure rounding of :meth:`LatLon.distance_to`.
    """
    phi1, lam1, phi2, lam2 = (np.radians(np.asarray(v, dtype=float)) for v in (lat1, lon1, lat2, lon2))
    d_phi = phi2 - phi1
    d_lam = lam2 - lam1

    a = np.sin(d_phi / 2) ** 2 + np.cos(phi1) * np.cos(phi2) * np.sin(d_lam / 2) ** 2
    a = np.clip(a, 0.0, 1.0)
    distance = radius * 2 * np.arctan2(np.sqrt(a), np.sqrt(1 - a))
    return float(distance) if distance.ndim == 0 else distance


def path_length(points: Iterable[LatLon], radius: float = EARTH_RADIUS_KM) -> float:
    """Total great-circle length in km of the polyline through ``points``."""
    coords = np.array([(p.latitude, p.longitude) for p in points], dtype=float)
    if len(coords) < 2:
        return 0.0
    legs = haversine(coords[:-1, 0], coords[:-1, 1], coords[1:, 0], coords[1:, 1], radius)
    return float(np.sum(legs))


@dataclass(frozen=True)
class Fix:
    """A position sample.

    Attributes:
        position (LatLon): Where the device was.
        time (Time): When, on any monotonic clock.
    """

    position: LatLon
    time: Time


@dataclass(frozen=True)
class TrackUpdate:
    """Movement between two consecutive fixes.

    Attributes:
        fix (Fix): The later of the two fixes.
        distance (Meter): Great-circle distance covered since the previous fix.
        duration (Second): Time elapsed since the previous fix.
        speed (MeterPerSecond): Average speed over the segment.
        acceleration (float): Change of speed since the previous segment, m/s².
        heading (float): Initial bearing of the segment in degrees.
        total_distance (Kilometer): Distance covered since the first fix.
    """

    fix: Fix
    distance: Meter
    duration: Second
    speed: MeterPerSecond
    acceleration: float
    heading: float
    total_distance: Kilometer


class RideTracker:
    """Accumulates ride statistics over a stream of fixes.

    Usage::

        tracker = RideTracker()
        for fix in fixes:
            update = tracker.update(fix)
            if update is not None:
                show(update.speed.to(KilometersPerHour), update.total_distance.to(Kilometer))
    """

    def __init__(self):
        self._last_fix: Fix | None = None
        self._last_update: TrackUpdate | None = None
        self._total = Kilometer(0)

    @property
    def total_distance(self) -> Kilometer:
        return self._total

    @property
    def last_update(self) -> TrackUpdate | None:
        return self._last_update

    def update(self, fix: Fix) -> TrackUpdate | None:
        """Record ``fix`` and return the segment ending at it.

        Returns:
            TrackUpdate | None: ``None`` for the first fix.

        Raises:
            ValueError: If ``fix`` is older than the previous fix.
        """
        previous = self._last_fix
        if previous is not None and float(fix.time) < float(previous.time):
            msg = f"fix at {fix.time!r} is older than previous fix at {previous.time!r}"
            raise ValueError(msg)

        self._last_fix = fix
        if previous is None:
            return None

        distance = Kilometer(previous.position.distance_to(fix.position)).as_unit(Meter)
        duration = Second.from_si(float(fix.time) - float(previous.time))
        if float(duration) > 0:
            speed = MeterPerSecond(float(distance) / float(duration))
        else:
            logger.debug("track: zero-length interval at %r", fix.time)
            speed = MeterPerSecond(0)

        acceleration = 0.0
        if self._last_update is not None and float(duration) > 0:
            acceleration = (float(speed) - float(self._last_update.speed)) / float(duration)

        self._total = self._total + distance.as_unit(Kilometer)
        self._last_update = TrackUpdate(
            fix=fix,
            distance=distance,
            duration=duration,
            speed=speed,
            acceleration=acceleration,
            heading=previous.position.bearing_to(fix.position),
            total_distance=self._total,
        )
        return self._last_update
