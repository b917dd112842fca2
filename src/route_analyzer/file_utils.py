#!/usr/bin/env python3
"""
Filename utilities for generating output filenames.
"""

import os
import logging

logger = logging.getLogger(__name__)

# Input extensions dropped before building the output name
TRACK_EXTENSIONS = (".csv", ".gpx", ".txt")
MAX_ATTEMPTS = 180


def _reserve(candidate: str) -> bool:
    """
    Try to create candidate exclusively.

    Returns:
        True if the file was created, False if it already exists

    Raises:
        ValueError: If the file cannot be created for any other reason
    """
    try:
        with open(candidate, "x"):
            pass
        return True
    except FileExistsError:
        return False
    except OSError as e:
        logger.error(f"Cannot create file {candidate}: {e}")
        raise ValueError(f"Cannot create file: {e}") from e


def generate_output_filename(input_filename: str) -> str:
    """
    Generates an output JSON filename and reserves it by creating an empty file.

    Strategy:
    1. If input ends with .csv, .gpx or .txt (case-insensitive), drop it
    2. Append " analysis.json"
    3. If file exists, try " analysis (1).json", " analysis (2).json", etc.
    4. Stop after 180 numbered attempts
    5. Use exclusive open (`open(path, 'x')`) to avoid race conditions and reserve the name.

    Args:
        input_filename: Path to the input track file

    Returns:
        Safe output filename that has been created as an empty file to reserve its name

    Raises:
        RuntimeError: If no available filename found after 180 attempts
        ValueError: If a filename cannot be created (e.g., due to permissions or an invalid name detected by the OS)
    """
    input_dir = os.path.dirname(input_filename)
    input_base = os.path.basename(input_filename)

    base_name = input_base
    for extension in TRACK_EXTENSIONS:
        if input_base.lower().endswith(extension):
            base_name = input_base[: -len(extension)]
            break

    base_output = base_name + " analysis"

    candidate = os.path.join(input_dir, base_output + ".json")
    if _reserve(candidate):
        return candidate

    for i in range(1, MAX_ATTEMPTS + 1):
        candidate = os.path.join(input_dir, f"{base_output} ({i}).json")
        if _reserve(candidate):
            return candidate

    logger.error(
        f"Could not find an available filename after {MAX_ATTEMPTS} attempts. "
        f"Please clean up your output directory or specify --output explicitly."
    )
    raise RuntimeError(f"No available filename found after {MAX_ATTEMPTS} attempts")
