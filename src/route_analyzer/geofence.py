#!/usr/bin/env python3
"""
Circular geofence containment tests.
"""

from typing import List, NamedTuple, Sequence
import logging

from .geometry import Waypoint, haversine_distance

logger = logging.getLogger(__name__)


class GeofenceResult(NamedTuple):
    """Waypoints found outside a geofence, in track order."""

    outside: List[Waypoint]


def is_outside(
    waypoint: Waypoint,
    center_lat: float,
    center_lon: float,
    radius_km: float,
    earth_radius_km: float,
) -> bool:
    """Check whether a waypoint lies strictly beyond a circular geofence."""
    distance = haversine_distance(
        center_lat, center_lon, waypoint.latitude, waypoint.longitude, earth_radius_km
    )
    # Points on the boundary count as inside
    return distance > radius_km


def outside_geofence(
    track: Sequence[Waypoint],
    center_lat: float,
    center_lon: float,
    radius_km: float,
    earth_radius_km: float,
) -> GeofenceResult:
    """
    Collect the waypoints that fall outside a circular geofence.

    Args:
        track: Ordered waypoints to classify
        center_lat: Geofence center latitude in decimal degrees
        center_lon: Geofence center longitude in decimal degrees
        radius_km: Geofence radius in kilometers
        earth_radius_km: Radius of the sphere used for distances

    Returns:
        GeofenceResult whose outside list preserves track order
    """
    outside = [
        waypoint
        for waypoint in track
        if is_outside(waypoint, center_lat, center_lon, radius_km, earth_radius_km)
    ]

    logger.debug(
        f"{len(outside)}/{len(track)} waypoints outside geofence "
        f"({center_lat:.5f}, {center_lon:.5f}) r={radius_km} km"
    )
    return GeofenceResult(outside=outside)
