"""Forward geodesic on a spherical Earth.

Given an origin, a distance and an initial bearing, find where a great-circle
path ends. The sphere radius comes from ``lodestone_destination.geo``; the
distance unit decides how the distance is scaled to an angle.
"""

from __future__ import annotations

import logging
import math

from lodestone_destination.models import FeaturePoint
from lodestone_destination.units import Unit

logger = logging.getLogger(__name__)


def destination(
    point: FeaturePoint,
    distance: float,
    bearing: float,
    units: str | Unit,
) -> FeaturePoint:
    """Destination reached from ``point`` after ``distance`` along ``bearing``.

    Args:
        point: Origin.
        distance: Distance to travel, expressed in ``units``.
        bearing: Initial bearing in degrees clockwise from true north.
        units: One of degrees, kilometers/km, meters/m, miles/mi, radians.

    Returns:
        A new FeaturePoint. Longitude is not wrapped into [-180, 180].

    Raises:
        UnrecognizedUnit: if ``units`` is not a known token.
    """
    unit = Unit.parse(units)

    lng1, lat1 = (math.radians(c) for c in point.coordinates())
    theta = math.radians(bearing)
    delta = distance / unit.radius

    lat2 = math.asin(
        math.sin(lat1) * math.cos(delta)
        + math.cos(lat1) * math.sin(delta) * math.cos(theta)
    )
    lng2 = lng1 + math.atan2(
        math.sin(theta) * math.sin(delta) * math.cos(lat1),
        math.cos(delta) - math.sin(lat1) * math.sin(lat2),
    )

    dest = FeaturePoint(longitude=math.degrees(lng2), latitude=math.degrees(lat2))
    logger.debug("destination(%s, %s %s, %s°) -> %s", point.coordinates(), distance,
                 unit.value, bearing, dest.coordinates())
    return dest
