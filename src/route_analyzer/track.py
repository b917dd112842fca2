#!/usr/bin/env python3
"""
Track data model and loaders for semicolon-delimited and GPX waypoint files.
"""

from datetime import timezone
from typing import Iterator, List, Optional, TextIO
import logging
import math

import gpxpy
import gpxpy.gpx

from .geometry import Waypoint

logger = logging.getLogger(__name__)

FIELD_SEPARATOR = ";"


def _parse_record(line: str) -> Optional[Waypoint]:
    """Parse a 'timestamp;latitude;longitude' record, or return None if malformed."""
    parts = line.strip().split(FIELD_SEPARATOR)
    if len(parts) < 3:
        return None
    try:
        timestamp, latitude, longitude = (float(part) for part in parts[:3])
    except ValueError:
        return None
    if not all(math.isfinite(value) for value in (timestamp, latitude, longitude)):
        return None
    if not (-90.0 <= latitude <= 90.0 and -180.0 <= longitude <= 180.0):
        return None
    return Waypoint(timestamp=timestamp, latitude=latitude, longitude=longitude)


class Track:
    """An ordered sequence of waypoints in collection order."""

    def __init__(self, waypoints: List[Waypoint]):
        """Initializes a Track object.

        Args:
            waypoints: Waypoints in the order they were collected. The list
                may be empty; analysis steps reject empty tracks themselves.
        """
        self.waypoints = waypoints

    @classmethod
    def from_csv(cls, file_input: TextIO) -> "Track":
        """
        Parse semicolon-delimited waypoint records.

        Each line is 'timestamp;latitude;longitude'. Extra fields are ignored.
        Lines that cannot be parsed (including header lines) and coordinates
        outside the valid latitude/longitude range are skipped.

        Args:
            file_input: File-like object containing the records

        Returns:
            Track with the parsed waypoints in file order
        """
        waypoints = []
        skipped = 0

        for line in file_input:
            if not line.strip():
                continue
            waypoint = _parse_record(line)
            if waypoint is None:
                skipped += 1
                continue
            waypoints.append(waypoint)

        if skipped > 0:
            logger.warning(f"Skipped {skipped} malformed waypoint records")

        track = cls(waypoints)
        logger.debug(f"Parsed {len(track)} waypoints from records")
        return track

    @classmethod
    def from_gpx(cls, file_input: TextIO) -> "Track":
        """
        Parse a GPX file and concatenate all tracks/segments into a single track.

        Points without a time use their index in the file as timestamp. Times
        without a UTC offset are read as UTC.

        Args:
            file_input: File-like object containing GPX data

        Returns:
            Track with all track points in file order

        Raises:
            gpxpy.gpx.GPXException: If GPX file is malformed.
        """
        gpx_data = gpxpy.parse(file_input)

        waypoints = []
        for track in gpx_data.tracks:
            for segment in track.segments:
                for point in segment.points:
                    if point.time is None:
                        timestamp = float(len(waypoints))
                    elif point.time.tzinfo is None:
                        # GPX times without an offset are UTC
                        timestamp = point.time.replace(tzinfo=timezone.utc).timestamp()
                    else:
                        timestamp = point.time.timestamp()
                    waypoints.append(
                        Waypoint(
                            timestamp=timestamp,
                            latitude=point.latitude,
                            longitude=point.longitude,
                        )
                    )

        result = cls(waypoints)
        logger.debug(f"Parsed {len(result)} track points from GPX file")
        return result

    @classmethod
    def from_file(cls, filename: str) -> "Track":
        """
        Load a track from a GPX file or a semicolon-delimited record file.

        Files ending in .gpx (case-insensitive) are parsed as GPX; anything
        else is read as semicolon-delimited records.

        Args:
            filename: Path to the track file

        Returns:
            Track loaded from the file

        Raises:
            FileNotFoundError: If file doesn't exist.
            PermissionError: If file can't be read.
            gpxpy.gpx.GPXException: If a GPX file is malformed.
        """
        logger.debug(f"Reading track file: {filename}")
        if filename.lower().endswith(".gpx"):
            with open(filename, "r", encoding="utf-8") as f:
                return cls.from_gpx(f)

        # Undecodable bytes become U+FFFD so the record is skipped as malformed
        with open(filename, "r", encoding="utf-8", errors="replace") as f:
            return cls.from_csv(f)

    def __len__(self) -> int:
        """Return number of waypoints in track."""
        return len(self.waypoints)

    def __getitem__(self, index):
        """Allow indexing into waypoints."""
        return self.waypoints[index]

    def __iter__(self) -> Iterator[Waypoint]:
        """Allow iteration over waypoints."""
        return iter(self.waypoints)
