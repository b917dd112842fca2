#!/usr/bin/env python3
"""
Route Analyzer - A GPS track analysis tool.

This package finds the waypoint farthest from a track's start, the most
frequented area of the track using the H3 hexagonal grid, and the waypoints
that leave a circular geofence.
"""
import importlib.metadata

__version__ = importlib.metadata.version("route-analyzer")

# Import main classes for public API
from .analysis import AnalysisResult, FarthestResult, analyze, farthest_from_start
from .config import AnalysisParameters, load_parameters
from .exceptions import (
    EmptyTrack,
    InvalidEarthRadius,
    InvalidRadius,
    InvalidResolution,
    MissingParameters,
    ParameterError,
    RouteAnalyzerError,
)
from .geofence import GeofenceResult, outside_geofence
from .geometry import Waypoint, haversine_distance
from .hotspot import HotspotResult, detect_hotspot
from .resolution import resolution_for_radius
from .track import Track

__all__ = [
    "AnalysisParameters",
    "AnalysisResult",
    "EmptyTrack",
    "FarthestResult",
    "GeofenceResult",
    "HotspotResult",
    "InvalidEarthRadius",
    "InvalidRadius",
    "InvalidResolution",
    "MissingParameters",
    "ParameterError",
    "RouteAnalyzerError",
    "Track",
    "Waypoint",
    "analyze",
    "detect_hotspot",
    "farthest_from_start",
    "haversine_distance",
    "load_parameters",
    "outside_geofence",
    "resolution_for_radius",
]
