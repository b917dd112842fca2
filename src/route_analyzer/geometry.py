#!/usr/bin/env python3
"""
Waypoint model and great-circle distance calculation.
"""

from typing import NamedTuple
import math

from .exceptions import InvalidEarthRadius

# Mean Earth radius in kilometers
MEAN_EARTH_RADIUS_KM = 6371.0


class Waypoint(NamedTuple):
    """A single timestamped GPS sample."""

    timestamp: float
    latitude: float
    longitude: float


def haversine_distance(
    lat1: float, lon1: float, lat2: float, lon2: float, earth_radius_km: float
) -> float:
    """
    Calculate the great-circle distance between two points using the Haversine formula.

    Args:
        lat1: Latitude of the first point in decimal degrees
        lon1: Longitude of the first point in decimal degrees
        lat2: Latitude of the second point in decimal degrees
        lon2: Longitude of the second point in decimal degrees
        earth_radius_km: Radius of the sphere in kilometers

    Returns:
        Distance in kilometers (exactly 0.0 for identical coordinates)

    Raises:
        InvalidEarthRadius: If earth_radius_km is not a positive finite number
    """
    if not math.isfinite(earth_radius_km) or earth_radius_km <= 0:
        raise InvalidEarthRadius(
            f"Earth radius must be a positive number of kilometers, got {earth_radius_km}"
        )

    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    dlat = phi2 - phi1
    dlon = math.radians(lon2) - math.radians(lon1)

    a = (
        math.sin(dlat / 2) ** 2
        + math.cos(phi1) * math.cos(phi2) * math.sin(dlon / 2) ** 2
    )
    # Rounding can push a just outside [0, 1] near antipodal points
    a = min(1.0, max(0.0, a))

    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return earth_radius_km * c


def waypoint_distance(a: Waypoint, b: Waypoint, earth_radius_km: float) -> float:
    """Haversine distance in kilometers between two waypoints."""
    return haversine_distance(
        a.latitude, a.longitude, b.latitude, b.longitude, earth_radius_km
    )
