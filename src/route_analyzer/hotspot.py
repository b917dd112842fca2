#!/usr/bin/env python3
"""
Hotspot detection by binning waypoints into H3 cells.
"""

from typing import Dict, List, NamedTuple, Sequence
import logging

import h3

from .exceptions import EmptyTrack, InvalidResolution
from .geometry import Waypoint

logger = logging.getLogger(__name__)

MIN_RESOLUTION = 0
MAX_RESOLUTION = 15


class HotspotResult(NamedTuple):
    """Waypoints sharing the most populated H3 cell."""

    members: List[Waypoint]
    cell_count: int
    cell_id: str
    resolution: int
    occupied_cells: int


def detect_hotspot(track: Sequence[Waypoint], resolution: int) -> HotspotResult:
    """
    Find the H3 cell containing the most waypoints.

    When several cells share the highest count, the cell whose first waypoint
    appears earliest in the track wins.

    Args:
        track: Ordered waypoints to bin
        resolution: H3 resolution to bin at (0-15)

    Returns:
        HotspotResult with the members of the winning cell in track order

    Raises:
        EmptyTrack: If the track has no waypoints
        InvalidResolution: If the resolution is outside 0-15
    """
    if not MIN_RESOLUTION <= resolution <= MAX_RESOLUTION:
        raise InvalidResolution(
            f"H3 resolution must be between {MIN_RESOLUTION} and "
            f"{MAX_RESOLUTION}, got {resolution}"
        )
    if len(track) == 0:
        raise EmptyTrack("Cannot detect a hotspot in an empty track")

    cell_ids = [
        h3.latlng_to_cell(waypoint.latitude, waypoint.longitude, resolution)
        for waypoint in track
    ]

    # Dicts keep insertion order, so cells are visited in order of first appearance
    counts: Dict[str, int] = {}
    for cell_id in cell_ids:
        counts[cell_id] = counts.get(cell_id, 0) + 1

    best_cell = max(counts, key=counts.__getitem__)
    best_count = counts[best_cell]

    tied = sum(1 for count in counts.values() if count == best_count)
    if tied > 1:
        logger.debug(
            f"{tied} cells share the highest count ({best_count}); "
            f"keeping the earliest visited cell {best_cell}"
        )

    members = [
        waypoint
        for waypoint, cell_id in zip(track, cell_ids)
        if cell_id == best_cell
    ]

    logger.debug(
        f"Binned {len(track)} waypoints into {len(counts)} cells at resolution "
        f"{resolution}; hotspot {best_cell} has {best_count} waypoints"
    )

    return HotspotResult(
        members=members,
        cell_count=best_count,
        cell_id=best_cell,
        resolution=resolution,
        occupied_cells=len(counts),
    )
