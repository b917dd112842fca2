"""
Module for collecting and logging metrics related to a track analysis.
"""

import logging
from typing import NamedTuple
from .analysis import AnalysisResult
from .config import AnalyzerConfig

logger = logging.getLogger(__name__)


class AnalysisMetrics(NamedTuple):
    """Container for analysis metrics data."""

    waypoints: int
    farthest_distance_km: float
    hotspot_radius_km: float
    hotspot_resolution: int
    hotspot_cells: int
    hotspot_entries: int
    geofence_radius_km: float
    outside_geofence: int
    inside_geofence: int


def collect_metrics(waypoint_count: int, result: AnalysisResult) -> AnalysisMetrics:
    """
    Collect metrics from a completed analysis.

    Args:
        waypoint_count: Number of waypoints that were analyzed
        result: AnalysisResult to summarize

    Returns:
        AnalysisMetrics containing all collected metrics
    """
    outside = len(result.geofence.outside)
    return AnalysisMetrics(
        waypoints=waypoint_count,
        farthest_distance_km=result.farthest.distance_km,
        hotspot_radius_km=result.hotspot_radius_km,
        hotspot_resolution=result.hotspot_resolution,
        hotspot_cells=result.hotspot.occupied_cells,
        hotspot_entries=result.hotspot.cell_count,
        geofence_radius_km=result.geofence_radius_km,
        outside_geofence=outside,
        inside_geofence=waypoint_count - outside,
    )


def log_metrics(metrics: AnalysisMetrics, config: AnalyzerConfig) -> None:
    """
    Log structured metrics after the analysis.

    Args:
        metrics: AnalysisMetrics containing collected metrics
        config: AnalyzerConfig containing settings like the metrics flag
    """
    if not config.metrics:
        return

    logger.debug("=== ROUTE_ANALYZER_METRICS ===")
    for key, value in metrics._asdict().items():
        logger.debug(f"{key}={value}")
    logger.debug("=== END_ROUTE_ANALYZER_METRICS ===")
