#!/usr/bin/env python3
"""
Mapping from a hotspot radius to an H3 grid resolution.
"""

from typing import List, Tuple
import logging
import math

from .exceptions import InvalidRadius

logger = logging.getLogger(__name__)

# (minimum radius in km, H3 resolution), coarsest first.
# Lower bounds are inclusive.
RESOLUTION_THRESHOLDS: List[Tuple[float, int]] = [
    (11070.0, 0),
    (4184.0, 1),
    (1582.0, 2),
    (597.5, 3),
    (224.2, 4),
    (84.21, 5),
    (31.5, 6),
    (11.8, 7),
    (4.4, 8),
    (1.65, 9),
    (0.62, 10),
    (0.23, 11),
    (0.087, 12),
    (0.033, 13),
    (0.012, 14),
    (0.004, 15),
]

MIN_RADIUS_KM = RESOLUTION_THRESHOLDS[-1][0]


def resolution_for_radius(radius_km: float) -> int:
    """
    Translate a radius into the coarsest H3 resolution whose threshold it reaches.

    Args:
        radius_km: Desired hotspot radius in kilometers

    Returns:
        H3 resolution level (0 = coarsest, 15 = finest)

    Raises:
        InvalidRadius: If the radius is below the finest supported threshold
    """
    if not math.isnan(radius_km):
        for min_radius_km, resolution in RESOLUTION_THRESHOLDS:
            if radius_km >= min_radius_km:
                logger.debug(
                    f"Radius {radius_km} km maps to H3 resolution {resolution}"
                )
                return resolution

    raise InvalidRadius(
        f"Radius too small for any H3 resolution: {radius_km} km "
        f"(minimum is {MIN_RADIUS_KM} km)"
    )
