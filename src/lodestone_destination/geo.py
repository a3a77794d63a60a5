"""Geographic constants and conversions — pure Python, no external deps."""

from __future__ import annotations

import math

EARTH_RADIUS_M = 6_378_137.0    # WGS84 semi-major axis
EARTH_RADIUS_KM = EARTH_RADIUS_M / 1000.0


def km_to_mi(km: float) -> float:
    """Convert kilometers to statute miles."""
    return km * 0.621371


def central_angle(lng1: float, lat1: float, lng2: float, lat2: float) -> float:
    """Angle in radians subtended at Earth's center by two points in degrees.

    Haversine form, longitude first to match ``FeaturePoint.coordinates()``.
    """
    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    half_dphi = (phi2 - phi1) / 2
    half_dlambda = math.radians(lng2 - lng1) / 2

    h = math.sin(half_dphi) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(half_dlambda) ** 2
    return 2 * math.asin(min(1.0, math.sqrt(h)))


def great_circle_km(lng1: float, lat1: float, lng2: float, lat2: float) -> float:
    """Distance along the sphere used by ``destination``, in kilometers."""
    return EARTH_RADIUS_KM * central_angle(lng1, lat1, lng2, lat2)
