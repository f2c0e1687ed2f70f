"""
Track geometry for the map renderer.

Bounds for camera fitting, the line feature, and the cursor position.
"""
import math

from .models import TrackBounds, TrackPoint
from .schemas import LineFeature, LineGeometry


def compute_bounds(points: list[TrackPoint]) -> TrackBounds:
    """
    Bounding box of a track.

    Callers must check the track is non-empty first: an empty list
    yields infinite bounds.

    Args:
        points: Track points

    Returns:
        [[min_lon, min_lat], [max_lon, max_lat]]
    """
    min_lat = math.inf
    max_lat = -math.inf
    min_lon = math.inf
    max_lon = -math.inf

    for p in points:
        if p.lat < min_lat:
            min_lat = p.lat
        if p.lat > max_lat:
            max_lat = p.lat
        if p.lon < min_lon:
            min_lon = p.lon
        if p.lon > max_lon:
            max_lon = p.lon

    return [
        [min_lon, min_lat],
        [max_lon, max_lat],
    ]


def build_line_string(points: list[TrackPoint]) -> LineFeature:
    """Line feature with one [lon, lat] pair per point, in track order."""
    return LineFeature(
        geometry=LineGeometry(coordinates=[[p.lon, p.lat] for p in points]),
        properties={},
    )


def cursor_point(points: list[TrackPoint], index: int) -> list[float] | None:
    """
    [lon, lat] of the point under the playback cursor.

    None when the index is outside the track, e.g. a stale index left
    over from a previous, longer track.
    """
    if not 0 <= index < len(points):
        return None
    return [points[index].lon, points[index].lat]
