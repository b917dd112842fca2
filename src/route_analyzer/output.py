#!/usr/bin/env python3
"""
Rendering of analysis results to the JSON output document.
"""

from typing import Any, Dict
import json
import logging

from .analysis import AnalysisResult
from .geometry import Waypoint

logger = logging.getLogger(__name__)

JSON_INDENT = 4


def waypoint_to_dict(waypoint: Waypoint) -> Dict[str, float]:
    """Convert a waypoint to its JSON object form."""
    return {
        "timestamp": waypoint.timestamp,
        "latitude": waypoint.latitude,
        "longitude": waypoint.longitude,
    }


def result_to_dict(result: AnalysisResult) -> Dict[str, Any]:
    """
    Build the output document for an analysis result.

    The hotspot is represented by its first member waypoint.

    Args:
        result: Completed analysis result

    Returns:
        Dictionary ready for JSON serialization
    """
    outside = result.geofence.outside
    return {
        "maxDistanceFromStart": {
            "waypoint": waypoint_to_dict(result.farthest.waypoint),
            "distanceKm": result.farthest.distance_km,
        },
        "mostFrequentedArea": {
            "centralWaypoint": waypoint_to_dict(result.hotspot.members[0]),
            "areaRadiusKm": result.hotspot_radius_km,
            "entriesCount": result.hotspot.cell_count,
        },
        "waypointsOutsideGeofence": {
            "centralWaypoint": waypoint_to_dict(result.geofence_center),
            "areaRadiusKm": result.geofence_radius_km,
            "count": len(outside),
            "waypoints": [waypoint_to_dict(waypoint) for waypoint in outside],
        },
    }


def render_result(result: AnalysisResult) -> str:
    """Render an analysis result as an indented JSON document."""
    return json.dumps(result_to_dict(result), indent=JSON_INDENT)


def write_result(result: AnalysisResult, filename: str) -> None:
    """
    Write an analysis result to a JSON file.

    Args:
        result: Completed analysis result
        filename: Destination path, overwritten if it exists
    """
    with open(filename, "w", encoding="utf-8") as f:
        f.write(render_result(result))
        f.write("\n")
    logger.debug(f"Wrote analysis result to {filename}")
