#!/usr/bin/env python3
"""
Track analysis pipeline: farthest point, hotspot and geofence checks.
"""

from typing import NamedTuple, Optional, Sequence
import logging

from .config import AnalysisParameters
from .exceptions import EmptyTrack, MissingParameters
from .geofence import GeofenceResult, outside_geofence
from .geometry import Waypoint, waypoint_distance
from .hotspot import HotspotResult, detect_hotspot
from .resolution import resolution_for_radius

logger = logging.getLogger(__name__)

# Hotspot radius used when the whole track stays within 1 km of its start
SHORT_TRACK_HOTSPOT_RADIUS_KM = 0.1
SHORT_TRACK_DISTANCE_KM = 1.0
# Fraction of the farthest distance used as the hotspot radius otherwise
HOTSPOT_RADIUS_FRACTION = 10.0


class FarthestResult(NamedTuple):
    """The waypoint farthest from the start of the track."""

    waypoint: Waypoint
    distance_km: float


class AnalysisResult(NamedTuple):
    """Everything computed for one track."""

    farthest: FarthestResult
    hotspot: HotspotResult
    geofence: GeofenceResult
    geofence_center: Waypoint
    geofence_radius_km: float
    hotspot_radius_km: float
    hotspot_resolution: int


def farthest_from_start(
    track: Sequence[Waypoint], params: AnalysisParameters
) -> FarthestResult:
    """
    Find the waypoint with the greatest distance from the first waypoint.

    The start itself takes part in the scan at distance 0, so a single-point
    track yields that point. Ties keep the earliest waypoint.

    Args:
        track: Ordered waypoints; the first one is the start
        params: Analysis parameters providing the Earth radius

    Returns:
        FarthestResult with the farthest waypoint and its distance in km

    Raises:
        EmptyTrack: If the track has no waypoints
    """
    if len(track) == 0:
        raise EmptyTrack("Cannot find the farthest point of an empty track")

    start = track[0]
    best_waypoint = start
    best_distance = 0.0

    for waypoint in track:
        distance = waypoint_distance(start, waypoint, params.earth_radius_km)
        if distance > best_distance:
            best_waypoint = waypoint
            best_distance = distance

    return FarthestResult(waypoint=best_waypoint, distance_km=best_distance)


def derive_hotspot_radius(
    params: AnalysisParameters, farthest_distance_km: float
) -> float:
    """
    Pick the hotspot search radius in kilometers.

    An explicit radius in the parameters wins. Otherwise the radius scales
    with the track extent: 0.1 km for tracks staying within 1 km of the
    start, a tenth of the farthest distance for anything larger.
    """
    if params.hotspot_radius_km is not None:
        return params.hotspot_radius_km
    if farthest_distance_km < SHORT_TRACK_DISTANCE_KM:
        return SHORT_TRACK_HOTSPOT_RADIUS_KM
    return farthest_distance_km / HOTSPOT_RADIUS_FRACTION


def analyze(
    track: Sequence[Waypoint], params: Optional[AnalysisParameters]
) -> AnalysisResult:
    """
    Run the full analysis over a track.

    Args:
        track: Ordered, validated waypoints
        params: Analysis parameters

    Returns:
        AnalysisResult with the farthest point, hotspot and geofence results

    Raises:
        EmptyTrack: If the track has no waypoints
        MissingParameters: If params is None
        InvalidRadius: If the hotspot radius is too small for any H3 resolution
        InvalidEarthRadius: If the Earth radius is not positive
    """
    if len(track) == 0:
        raise EmptyTrack("No valid waypoints to analyze")
    if params is None:
        raise MissingParameters("No analysis parameters provided")

    farthest = farthest_from_start(track, params)
    logger.debug(
        f"Farthest waypoint from start: ({farthest.waypoint.latitude}, "
        f"{farthest.waypoint.longitude}) at {farthest.distance_km:.3f} km"
    )

    hotspot_radius_km = derive_hotspot_radius(params, farthest.distance_km)
    resolution = resolution_for_radius(hotspot_radius_km)
    logger.debug(
        f"Hotspot radius {hotspot_radius_km:.3f} km -> H3 resolution {resolution}"
    )

    hotspot = detect_hotspot(track, resolution)

    geofence = outside_geofence(
        track,
        params.geofence_center_latitude,
        params.geofence_center_longitude,
        params.geofence_radius_km,
        params.earth_radius_km,
    )

    logger.info(
        f"Analyzed {len(track)} waypoints: farthest {farthest.distance_km:.2f} km, "
        f"hotspot {hotspot.cell_count} waypoints, "
        f"{len(geofence.outside)} outside geofence"
    )

    return AnalysisResult(
        farthest=farthest,
        hotspot=hotspot,
        geofence=geofence,
        geofence_center=Waypoint(
            timestamp=0.0,
            latitude=params.geofence_center_latitude,
            longitude=params.geofence_center_longitude,
        ),
        geofence_radius_km=params.geofence_radius_km,
        hotspot_radius_km=hotspot_radius_km,
        hotspot_resolution=resolution,
    )
