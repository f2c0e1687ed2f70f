"""
Elevation coloring utilities.

This is the SINGLE SOURCE OF TRUTH for mapping elevations to colors.
Both the line gradient and any legend rendering must go through color_for().
"""
import math

from .constants import (
    NEUTRAL_COLOR,
    HUE_LOW,
    HUE_MID,
    HUE_HIGH,
    SATURATION_PERCENT,
    LIGHTNESS_PERCENT,
    MIN_ELEVATION_SPAN_M,
)


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def hsl_to_hex(hue: float, saturation: float, lightness: float) -> str:
    """
    Convert an HSL color to a '#rrggbb' string.

    Args:
        hue: Hue in degrees [0, 360)
        saturation: Saturation in percent [0, 100]
        lightness: Lightness in percent [0, 100]

    Returns:
        Lowercase 6-digit hex color
    """
    s = saturation / 100
    l = lightness / 100
    a = s * min(l, 1 - l)

    def channel(n: int) -> str:
        k = (n + hue / 30) % 12
        c = l - a * max(-1, min(k - 3, min(9 - k, 1)))
        return f"{_round_half_up(255 * c):02x}"

    return f"#{channel(0)}{channel(8)}{channel(4)}"


def elevation_hue(t: float) -> float:
    """
    Hue for a normalized elevation.

    Two linear segments: blue -> green over [0, 0.5], green -> red over (0.5, 1].
    """
    if t < 0.5:
        u = t / 0.5
        return HUE_LOW + (HUE_MID - HUE_LOW) * u
    u = (t - 0.5) / 0.5
    return HUE_MID + (HUE_HIGH - HUE_MID) * u


def color_for(ele: float, min_ele: float, max_ele: float) -> str:
    """
    Map an elevation to a color on the low/mid/high ramp.

    A flat track (max - min < 1 m) is normalized against a 1 m span, so
    all its points land at the low (blue) end.

    Args:
        ele: Elevation in meters
        min_ele: Lowest elevation of the track
        max_ele: Highest elevation of the track

    Returns:
        Hex color, or NEUTRAL_COLOR when ele is not finite
    """
    if not math.isfinite(ele):
        return NEUTRAL_COLOR

    span = max(MIN_ELEVATION_SPAN_M, max_ele - min_ele)
    t = max(0.0, min(1.0, (ele - min_ele) / span))

    return hsl_to_hex(elevation_hue(t), SATURATION_PERCENT, LIGHTNESS_PERCENT)
