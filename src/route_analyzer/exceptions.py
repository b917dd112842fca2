"""
Error kinds raised by the route analysis pipeline.

Every error is fatal to the current run. The CLI is the only caller that
catches them and turns them into an exit status.
"""


class RouteAnalyzerError(Exception):
    """Base class for all route analyzer errors."""


class EmptyTrack(RouteAnalyzerError):
    """Raised when an analysis step receives a track without waypoints."""


class MissingParameters(RouteAnalyzerError):
    """Raised when the analysis is run without parameters."""


class InvalidRadius(RouteAnalyzerError, ValueError):
    """Raised when a radius is too small for any H3 resolution."""


class InvalidResolution(RouteAnalyzerError, ValueError):
    """Raised when an H3 resolution is outside the supported range."""


class InvalidEarthRadius(RouteAnalyzerError, ValueError):
    """Raised when a non-positive Earth radius is passed to the distance kernel."""


class ParameterError(RouteAnalyzerError, ValueError):
    """Raised when the parameter document is missing keys or has invalid values."""
