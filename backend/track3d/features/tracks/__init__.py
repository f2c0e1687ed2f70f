"""
Track loading and rendering artifacts.

Usage:
    from track3d.features.tracks import TrackLoaderService, build_gradient

Components:
- TrackPoint: one recorded sample (lat, lon, ele, optional UTC time)
- GPXParserService / IGCParserService: file text -> list of TrackPoint
- compute_bounds / build_line_string / cursor_point: map geometry
- build_gradient: elevation-colored line gradient stops
- build_elevation_profile: side panel profile and scrub mapping
- advance_index: playback step for the cursor
- TrackLoaderService: format detection + parse + derived artifacts
"""

from .models import TrackPoint, TrackBounds, LoadedTrack
from .schemas import (
    LineGeometry,
    LineFeature,
    GradientStop,
    ElevationProfile,
    ProfileMarker,
)
from .gpx_parser import GPXParserService
from .igc_parser import IGCParserService, parse_header_date
from .geometry import compute_bounds, build_line_string, cursor_point
from .gradient import build_gradient, gradient_steps, to_line_gradient_expression
from .profile import build_elevation_profile, index_for_progress
from .playback import advance_index
from .loader import TrackLoaderService, detect_format

__all__ = [
    # Models
    "TrackPoint",
    "TrackBounds",
    "LoadedTrack",
    # Schemas
    "LineGeometry",
    "LineFeature",
    "GradientStop",
    "ElevationProfile",
    "ProfileMarker",
    # Parsers
    "GPXParserService",
    "IGCParserService",
    "parse_header_date",
    # Geometry
    "compute_bounds",
    "build_line_string",
    "cursor_point",
    # Gradient
    "build_gradient",
    "gradient_steps",
    "to_line_gradient_expression",
    # Profile
    "build_elevation_profile",
    "index_for_progress",
    # Playback
    "advance_index",
    # Loader
    "TrackLoaderService",
    "detect_format",
]
