"""
Track3D core: GPX/IGC track parsing and 3D map rendering artifacts.

Usage:
    from track3d import TrackLoaderService

    track = TrackLoaderService.load(content, filename="flight.igc")
    track.bounds, track.line, track.gradient
"""

from .exceptions import TrackError, TrackParseError, NoTrackPointsError
from .features.tracks import (
    TrackPoint,
    LoadedTrack,
    GPXParserService,
    IGCParserService,
    TrackLoaderService,
    compute_bounds,
    build_line_string,
    cursor_point,
    build_gradient,
    to_line_gradient_expression,
    build_elevation_profile,
    index_for_progress,
    advance_index,
)
from .shared.colors import color_for

__version__ = "0.1.0"

__all__ = [
    "TrackError",
    "TrackParseError",
    "NoTrackPointsError",
    "TrackPoint",
    "LoadedTrack",
    "GPXParserService",
    "IGCParserService",
    "TrackLoaderService",
    "compute_bounds",
    "build_line_string",
    "cursor_point",
    "build_gradient",
    "to_line_gradient_expression",
    "build_elevation_profile",
    "index_for_progress",
    "advance_index",
    "color_for",
]
