"""
Shared utilities (NOT track parsing logic).

Usage:
    from track3d.shared import color_for, TrackFormat
"""
from .colors import (
    hsl_to_hex,
    elevation_hue,
    color_for,
)
from .constants import (
    TrackFormat,
    NEUTRAL_COLOR,
    HUE_LOW,
    HUE_MID,
    HUE_HIGH,
)

__all__ = [
    # colors
    "hsl_to_hex",
    "elevation_hue",
    "color_for",
    # constants
    "TrackFormat",
    "NEUTRAL_COLOR",
    "HUE_LOW",
    "HUE_MID",
    "HUE_HIGH",
]
