"""Great-circle formulae on a sphere.

Every function works in radians on plain floats; :class:`latlon.geo.LatLon`
handles degrees, radius and result types. Formulae follow Ed Williams'
Aviation Formulary and R. W. Sinnott, "Virtues of the Haversine" (1984).
"""

from __future__ import annotations

import logging
import math

from ..numeric import TWO_PI, clamp_unit, wrap_longitude

logger = logging.getLogger(__name__)


def angular_distance(phi1: float, lam1: float, phi2: float, lam2: float) -> float:
    """Haversine central angle between two points."""
    d_phi = phi2 - phi1
    d_lam = lam2 - lam1
    a = math.sin(d_phi / 2) * math.sin(d_phi / 2) + math.cos(phi1) * math.cos(
        phi2
    ) * math.sin(d_lam / 2) * math.sin(d_lam / 2)
    a = clamp_unit(a)
    return 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def initial_bearing(phi1: float, phi2: float, d_lam: float) -> float:
    """Initial course from point 1 to point 2, in radians within (-π, π]."""
    y = math.sin(d_lam) * math.cos(phi2)
    x = math.cos(phi1) * math.sin(phi2) - math.sin(phi1) * math.cos(phi2) * math.cos(d_lam)
    return math.atan2(y, x)


def midpoint(phi1: float, lam1: float, phi2: float, lam2: float) -> tuple[float, float]:
    """Halfway point along the great circle, as ``(phi, lam)``."""
    d_lam = lam2 - lam1
    bx = math.cos(phi2) * math.cos(d_lam)
    by = math.cos(phi2) * math.sin(d_lam)

    phi3 = math.atan2(
        math.sin(phi1) + math.sin(phi2),
        math.sqrt((math.cos(phi1) + bx) * (math.cos(phi1) + bx) + by * by),
    )
    lam3 = lam1 + math.atan2(by, math.cos(phi1) + bx)
    return phi3, wrap_longitude(lam3)


def destination(phi1: float, lam1: float, theta: float, delta: float) -> tuple[float, float]:
    """Point reached after angular distance ``delta`` on initial course ``theta``."""
    phi2 = math.asin(
        clamp_unit(math.sin(phi1) * math.cos(delta) + math.cos(phi1) * math.sin(delta) * math.cos(theta))
    )
    lam2 = lam1 + math.atan2(
        math.sin(theta) * math.sin(delta) * math.cos(phi1),
        math.cos(delta) - math.sin(phi1) * math.sin(phi2),
    )
    return phi2, wrap_longitude(lam2)


def _ratio(numerator: float, denominator: float) -> float:
    if denominator == 0:
        return math.nan
    return numerator / denominator


def intersection(
    phi1: float, lam1: float, theta13: float, phi2: float, lam2: float, theta23: float
) -> tuple[float, float] | None:
    """Crossing point of two great-circle paths given by start point and course.

    Returns ``None`` when no unique crossing exists: the start points coincide,
    both paths run along the line joining the points, or the paths diverge so
    that the forward crossing is ambiguous.
    """
    d_phi = phi2 - phi1
    d_lam = lam2 - lam1

    a = math.sin(d_phi / 2) * math.sin(d_phi / 2) + math.cos(phi1) * math.cos(
        phi2
    ) * math.sin(d_lam / 2) * math.sin(d_lam / 2)
    delta12 = 2 * math.asin(math.sqrt(clamp_unit(a)))
    if delta12 == 0:
        logger.debug("intersection: start points coincide")
        return None

    # bearings between the two start points
    cos_theta1 = _ratio(
        math.sin(phi2) - math.sin(phi1) * math.cos(delta12),
        math.sin(delta12) * math.cos(phi1),
    )
    theta1 = math.acos(cos_theta1) if -1 <= cos_theta1 <= 1 else 0.0
    cos_theta2 = _ratio(
        math.sin(phi1) - math.sin(phi2) * math.cos(delta12),
        math.sin(delta12) * math.cos(phi2),
    )
    theta2 = 0.0 if math.isnan(cos_theta2) else math.acos(clamp_unit(cos_theta2))

    if math.sin(lam2 - lam1) > 0:
        theta12 = theta1
        theta21 = TWO_PI - theta2
    else:
        theta12 = TWO_PI - theta1
        theta21 = theta2

    alpha1 = (theta13 - theta12 + math.pi) % TWO_PI - math.pi  # angle 2-1-3
    alpha2 = (theta21 - theta23 + math.pi) % TWO_PI - math.pi  # angle 1-2-3

    if math.sin(alpha1) == 0 and math.sin(alpha2) == 0:
        logger.debug("intersection: paths coincide, infinite solutions")
        return None
    if math.sin(alpha1) * math.sin(alpha2) < 0:
        logger.debug("intersection: paths diverge, ambiguous solution")
        return None

    # alpha1/alpha2 are used signed; taking abs() here gives wrong crossings
    alpha3 = math.acos(
        clamp_unit(
            -math.cos(alpha1) * math.cos(alpha2)
            + math.sin(alpha1) * math.sin(alpha2) * math.cos(delta12)
        )
    )
    delta13 = math.atan2(
        math.sin(delta12) * math.sin(alpha1) * math.sin(alpha2),
        math.cos(alpha2) + math.cos(alpha1) * math.cos(alpha3),
    )
    return destination(phi1, lam1, theta13, delta13)
