#!/usr/bin/env python3
"""
Analysis parameters and CLI configuration.
"""

from dataclasses import dataclass, replace
from typing import Any, Mapping, Optional
import logging
import math
import os

import yaml

from .exceptions import ParameterError

logger = logging.getLogger(__name__)

# Keys of the parameter document
EARTH_RADIUS_KEY = "earthRadiusKm"
GEOFENCE_CENTER_LAT_KEY = "geofenceCenterLatitude"
GEOFENCE_CENTER_LON_KEY = "geofenceCenterLongitude"
GEOFENCE_RADIUS_KEY = "geofenceRadiusKm"
HOTSPOT_RADIUS_KEY = "mostFrequentedAreaRadiusKm"


@dataclass(frozen=True)
class AnalysisParameters:
    """Parameters controlling a single track analysis."""

    earth_radius_km: float
    geofence_center_latitude: float
    geofence_center_longitude: float
    geofence_radius_km: float
    hotspot_radius_km: Optional[float] = None


@dataclass
class AnalyzerConfig:
    """Configuration for the route-analyzer CLI."""

    params_file: Optional[str] = None
    output: Optional[str] = None
    hotspot_radius: Optional[float] = None
    log_level: str = "WARNING"
    metrics: bool = False


def _require_number(data: Mapping[str, Any], key: str) -> float:
    """Fetch a required numeric value from the parameter mapping."""
    if key not in data or data[key] is None:
        raise ParameterError(f"Missing required parameter '{key}'")
    return _to_float(data[key], key)


def _to_float(value: Any, key: str) -> float:
    # bool is an int subclass but "yes"/"true" is never a valid measurement
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ParameterError(
            f"Parameter '{key}' must be a number, got {type(value).__name__}: {value!r}"
        )
    result = float(value)
    if not math.isfinite(result):
        raise ParameterError(f"Parameter '{key}' must be finite, got {value!r}")
    return result


def parameters_from_mapping(data: Any) -> AnalysisParameters:
    """
    Validate a parsed parameter document and build AnalysisParameters.

    Args:
        data: Mapping parsed from the parameter document

    Returns:
        Validated AnalysisParameters

    Raises:
        ParameterError: If a key is missing, a value is not numeric, or a
            value is outside its valid range
    """
    if not isinstance(data, Mapping):
        raise ParameterError(
            f"Parameter document must be a mapping, got {type(data).__name__}"
        )

    earth_radius_km = _require_number(data, EARTH_RADIUS_KEY)
    if earth_radius_km <= 0:
        raise ParameterError(
            f"Parameter '{EARTH_RADIUS_KEY}' must be positive, got {earth_radius_km}"
        )

    center_lat = _require_number(data, GEOFENCE_CENTER_LAT_KEY)
    if not -90.0 <= center_lat <= 90.0:
        raise ParameterError(
            f"Parameter '{GEOFENCE_CENTER_LAT_KEY}' must be within [-90, 90], got {center_lat}"
        )

    center_lon = _require_number(data, GEOFENCE_CENTER_LON_KEY)
    if not -180.0 <= center_lon <= 180.0:
        raise ParameterError(
            f"Parameter '{GEOFENCE_CENTER_LON_KEY}' must be within [-180, 180], got {center_lon}"
        )

    geofence_radius_km = _require_number(data, GEOFENCE_RADIUS_KEY)
    if geofence_radius_km < 0:
        raise ParameterError(
            f"Parameter '{GEOFENCE_RADIUS_KEY}' must not be negative, got {geofence_radius_km}"
        )

    hotspot_radius_km = None
    if data.get(HOTSPOT_RADIUS_KEY) is not None:
        hotspot_radius_km = _to_float(data[HOTSPOT_RADIUS_KEY], HOTSPOT_RADIUS_KEY)
        if hotspot_radius_km <= 0:
            raise ParameterError(
                f"Parameter '{HOTSPOT_RADIUS_KEY}' must be positive, got {hotspot_radius_km}"
            )

    return AnalysisParameters(
        earth_radius_km=earth_radius_km,
        geofence_center_latitude=center_lat,
        geofence_center_longitude=center_lon,
        geofence_radius_km=geofence_radius_km,
        hotspot_radius_km=hotspot_radius_km,
    )


def load_parameters(filename: str) -> Optional[AnalysisParameters]:
    """
    Load analysis parameters from a YAML file.

    Args:
        filename: Path to the YAML parameter document

    Returns:
        AnalysisParameters, or None if the file does not exist

    Raises:
        ParameterError: If the document is malformed or fails validation
        PermissionError: If the file can't be read
    """
    if not os.path.exists(filename):
        logger.error(f"Parameter file not found: {os.path.abspath(filename)}")
        return None

    logger.debug(f"Reading parameter file: {filename}")
    with open(filename, "r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ParameterError(f"Invalid YAML in {filename}: {e}") from e
        except UnicodeDecodeError as e:
            raise ParameterError(f"Parameter file is not valid UTF-8: {filename}: {e}") from e

    return parameters_from_mapping(data)


def with_hotspot_radius(
    params: AnalysisParameters, hotspot_radius_km: float
) -> AnalysisParameters:
    """
    Return a copy of params with the hotspot radius replaced.

    Raises:
        ParameterError: If the radius is not a positive finite number
    """
    radius = _to_float(hotspot_radius_km, HOTSPOT_RADIUS_KEY)
    if radius <= 0:
        raise ParameterError(f"Hotspot radius must be positive, got {radius}")
    return replace(params, hotspot_radius_km=radius)
