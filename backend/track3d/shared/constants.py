"""
Constants for track formats and elevation coloring.

Single source of truth for the color ramp and gradient bucketing numbers.
"""

from enum import Enum


class TrackFormat(str, Enum):
    """Supported track log formats."""
    GPX = "gpx"
    IGC = "igc"


# Returned for elevations that are NaN or infinite
NEUTRAL_COLOR = "#888888"

# Hue ramp in degrees: low -> mid -> high elevation
HUE_LOW = 210.0  # blue
HUE_MID = 160.0  # green
HUE_HIGH = 0.0  # red

SATURATION_PERCENT = 80.0
LIGHTNESS_PERCENT = 50.0

# Elevation range below this is stretched to avoid dividing by ~0
MIN_ELEVATION_SPAN_M = 1.0

# IGC two-digit years below the pivot are 20xx, the rest 19xx
IGC_YEAR_PIVOT = 80

# Shortest B record that carries both altitude fields
IGC_MIN_FIX_LENGTH = 35
