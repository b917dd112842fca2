#!/usr/bin/env python3
"""
Route Analyzer command-line tool.

This script loads a GPS track and a YAML parameter file, finds the waypoint
farthest from the start, the most frequented H3 cell and the waypoints outside
a circular geofence, and writes the result as a JSON document.

Requirements:
    pip install gpxpy h3 PyYAML

"""

from typing import List, Optional
import argparse
import logging
import os
import sys
from gpxpy import gpx

from . import __version__
from .analysis import AnalysisResult, analyze
from .config import AnalyzerConfig, load_parameters, with_hotspot_radius
from .exceptions import (
    EmptyTrack,
    MissingParameters,
    ParameterError,
    RouteAnalyzerError,
)
from .file_utils import generate_output_filename
from .metrics import collect_metrics, log_metrics
from .output import render_result, write_result
from .track import Track

# Configure logging
logger = logging.getLogger("route_analyzer")

STDOUT_OUTPUT = "-"
CONSOLE_HANDLER_NAME = "route_analyzer_console"


def create_argument_parser() -> argparse.ArgumentParser:
    """
    Create and configure the command-line argument parser.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        description="GPS track analysis tool: farthest point, hotspot and geofence",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "filename",
        type=str,
        nargs="?",
        help="Track file to process (semicolon-delimited records or GPX)",
    )
    parser.add_argument(
        "--params",
        type=str,
        help="YAML file with the analysis parameters",
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Output JSON file, '-' for stdout (default: auto-generated based on input filename)",
    )
    parser.add_argument(
        "--hotspot-radius",
        type=float,
        default=None,
        help="Hotspot radius in km, overrides mostFrequentedAreaRadiusKm",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Set logging level (default: WARNING)",
    )
    parser.add_argument(
        "--metrics",
        action="store_true",
        help="Output structured metrics after processing",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"route-analyzer {__version__}",
    )
    return parser


def config_from_args(args: argparse.Namespace) -> AnalyzerConfig:
    """Build an AnalyzerConfig from parsed command-line arguments."""
    return AnalyzerConfig(
        params_file=args.params,
        output=args.output,
        hotspot_radius=args.hotspot_radius,
        log_level=args.log_level,
        metrics=args.metrics,
    )


def determine_output_filename(input_filename: str, output_arg: Optional[str]) -> str:
    """
    Determine the output filename to use.

    Args:
        input_filename: Path to the input track file
        output_arg: Value from --output argument (None if not specified)

    Returns:
        Output filename to use

    Raises:
        RuntimeError: If auto-generation fails
        ValueError: If constructed filename would be illegal
    """
    if output_arg is not None:
        return output_arg

    try:
        return generate_output_filename(input_filename)
    except (RuntimeError, ValueError) as e:
        logger.error(f"Failed to generate output filename: {e}")
        raise


def setup_logging(config: AnalyzerConfig) -> None:
    """Setup logging configuration."""
    level = getattr(logging, config.log_level)

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%H:%M:%S"
    )

    console_handler = logging.StreamHandler()
    console_handler.set_name(CONSOLE_HANDLER_NAME)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)

    # Configure the root logger so all modules inherit the configuration
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        if handler.get_name() == CONSOLE_HANDLER_NAME:
            root_logger.removeHandler(handler)
    root_logger.setLevel(level)
    root_logger.addHandler(console_handler)


def print_summary(result: AnalysisResult, output_filename: str) -> None:
    """Print a short human-readable summary of the analysis."""
    farthest = result.farthest
    print(
        f"Farthest from start: {farthest.distance_km:.2f} km at "
        f"({farthest.waypoint.latitude}, {farthest.waypoint.longitude})"
    )
    print(
        f"Most frequented area: {result.hotspot.cell_count} waypoints within "
        f"{result.hotspot_radius_km:.3f} km (H3 resolution {result.hotspot_resolution})"
    )
    print(
        f"Outside geofence: {len(result.geofence.outside)} waypoints beyond "
        f"{result.geofence_radius_km} km"
    )
    print(f"Result written to {output_filename}")


def main(argv: Optional[List[str]] = None) -> None:
    """
    Parses command-line arguments, loads the track and parameters,
    runs the analysis, and writes the JSON result.
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    if not args.filename or not args.params:
        parser.print_help()
        sys.exit(1)

    config = config_from_args(args)
    setup_logging(config)

    # Load the track
    try:
        track = Track.from_file(args.filename)
    except FileNotFoundError:
        logger.error(f"Track file not found: {args.filename}")
        sys.exit(1)
    except PermissionError:
        logger.error(f"Cannot read track file (permission denied): {args.filename}")
        sys.exit(1)
    except gpx.GPXException as e:
        logger.error(f"Invalid GPX file: {e}")
        sys.exit(1)
    except UnicodeDecodeError as e:
        logger.error(f"Track file is not valid UTF-8: {args.filename}: {e}")
        sys.exit(1)
    logger.info(f"Loaded track with {len(track)} waypoints")

    # Load the analysis parameters
    try:
        params = load_parameters(config.params_file)
    except PermissionError:
        logger.error(f"Cannot read parameter file (permission denied): {config.params_file}")
        sys.exit(1)
    except ParameterError as e:
        logger.error(f"Invalid parameter file: {e}")
        sys.exit(1)

    if params is not None and config.hotspot_radius is not None:
        try:
            params = with_hotspot_radius(params, config.hotspot_radius)
        except ParameterError as e:
            logger.error(str(e))
            sys.exit(1)

    try:
        result = analyze(track, params)
    except (EmptyTrack, MissingParameters) as e:
        logger.error(f"No valid data: {e}")
        sys.exit(1)
    except RouteAnalyzerError as e:
        logger.error(f"Analysis failed: {e}")
        sys.exit(1)

    if config.output == STDOUT_OUTPUT:
        print(render_result(result))
    else:
        output_filename = None
        try:
            output_filename = determine_output_filename(args.filename, config.output)
            logger.debug(f"Output filename: {output_filename}")
            write_result(result, output_filename)
        except (RuntimeError, ValueError, OSError) as e:
            logger.error(f"Failed to write result: {e}")
            # Drop the name reserved by generate_output_filename
            if (
                config.output is None
                and output_filename is not None
                and os.path.exists(output_filename)
            ):
                os.remove(output_filename)
            sys.exit(1)
        print_summary(result, output_filename)

    log_metrics(collect_metrics(len(track), result), config)


if __name__ == "__main__":
    main()
