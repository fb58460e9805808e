"""Rhumb-line (loxodrome) formulae on a sphere.

A rhumb line keeps a constant compass bearing and is a straight line on a
Mercator chart. Distances come from Pythagoras on the chart after undoing the
latitude-dependent stretch of longitude. All functions work in radians.
"""

from __future__ import annotations

import logging
import math

from ..config import RHUMB_EPSILON
from ..numeric import TWO_PI, wrap_longitude

logger = logging.getLogger(__name__)


def _mercator_factor(phi: float) -> float:
    return math.tan(math.pi / 4 + phi / 2)


def _log_ratio(f2: float, f1: float) -> float:
    """ln(f2 / f1), with a zero factor (south pole) mapped to an infinite row."""
    if f1 > 0 and f2 > 0:
        return math.log(f2 / f1)
    if f1 <= 0 and f2 <= 0:
        return math.nan
    return -math.inf if f2 <= 0 else math.inf


def delta_psi(phi1: float, phi2: float) -> float:
    """Difference of Mercator-projected latitudes (Δψ)."""
    return _log_ratio(_mercator_factor(phi2), _mercator_factor(phi1))


def stretch_factor(d_phi: float, d_psi: float, phi1: float) -> float:
    """Mercator stretch factor q = Δφ/Δψ.

    Along an east-west course Δφ/Δψ tends to 0/0; below ``RHUMB_EPSILON``
    the limit cos(φ1) is used.
    """
    if abs(d_psi) > RHUMB_EPSILON:
        return d_phi / d_psi
    logger.debug("rhumb: east-west course, using cos(phi1) stretch")
    return math.cos(phi1)


def _shorter_delta_lambda(d_lam: float) -> float:
    # crossing the antimeridian is shorter when |Δλ| exceeds 180°
    if abs(d_lam) > math.pi:
        return -(TWO_PI - d_lam) if d_lam > 0 else TWO_PI + d_lam
    return d_lam


def angular_distance(phi1: float, lam1: float, phi2: float, lam2: float) -> float:
    """Angular length of the rhumb line between two points."""
    d_phi = phi2 - phi1
    d_lam = _shorter_delta_lambda(abs(lam2 - lam1))
    q = stretch_factor(d_phi, delta_psi(phi1, phi2), phi1)
    return math.sqrt(d_phi * d_phi + q * q * d_lam * d_lam)


def bearing(phi1: float, lam1: float, phi2: float, lam2: float) -> float:
    """Constant course of the rhumb line, in radians within (-π, π]."""
    d_lam = _shorter_delta_lambda(lam2 - lam1)
    return math.atan2(d_lam, delta_psi(phi1, phi2))


def destination(phi1: float, lam1: float, theta: float, delta: float) -> tuple[float, float]:
    """Point reached after angular distance ``delta`` on constant course ``theta``."""
    d_phi = delta * math.cos(theta)
    phi2 = phi1 + d_phi
    # a track running over a pole comes back down the other side
    if abs(phi2) > math.pi / 2:
        phi2 = math.pi - phi2 if phi2 > 0 else -math.pi - phi2

    q = stretch_factor(d_phi, delta_psi(phi1, phi2), phi1)
    # q is 0 only when the track ends exactly on a pole, where longitude is undefined
    d_lam = delta * math.sin(theta) / q if q else 0.0
    return phi2, wrap_longitude(lam1 + d_lam)


def midpoint(phi1: float, lam1: float, phi2: float, lam2: float) -> tuple[float, float]:
    """Loxodromic midpoint, interpolating longitude on the Mercator y axis."""
    if abs(lam2 - lam1) > math.pi:
        lam1 += TWO_PI  # crossing the antimeridian

    phi3 = (phi1 + phi2) / 2
    f1 = _mercator_factor(phi1)
    f2 = _mercator_factor(phi2)
    f3 = _mercator_factor(phi3)

    lam3 = math.nan
    if f1 > 0 and f2 > 0 and f3 > 0:
        denominator = math.log(f2 / f1)
        if denominator:
            lam3 = (
                (lam2 - lam1) * math.log(f3) + lam1 * math.log(f2) - lam2 * math.log(f1)
            ) / denominator
    if not math.isfinite(lam3):
        # parallel of latitude
        lam3 = (lam1 + lam2) / 2
    return phi3, wrap_longitude(lam3)
