"""
Line gradient built from track elevations.

Samples the track into a bounded number of progress-keyed color stops.
"""
import math
from typing import Any

from track3d.config import settings
from track3d.shared.colors import color_for
from .models import TrackPoint
from .schemas import GradientStop


def gradient_steps(
    points_count: int,
    min_stops: int | None = None,
    max_stops: int | None = None,
    points_per_stop: int | None = None,
) -> int:
    """Number of color stops: one per points_per_stop points, clamped."""
    min_stops = min_stops if min_stops is not None else settings.gradient_min_stops
    max_stops = max_stops if max_stops is not None else settings.gradient_max_stops
    points_per_stop = (
        points_per_stop if points_per_stop is not None
        else settings.points_per_gradient_stop
    )
    return max(min_stops, min(max_stops, points_count // points_per_stop))


def build_gradient(points: list[TrackPoint]) -> list[GradientStop] | None:
    """
    Color stops for painting the track line by elevation.

    Stops are evenly spaced in progress from 0 to 1 inclusive. Each
    samples the point at the same fraction of the track and colors it
    against the track's overall elevation range.

    Args:
        points: Track points

    Returns:
        Stops in increasing progress order, or None for fewer than 2 points
    """
    n = len(points)
    if n < 2:
        return None

    elevations = [p.ele for p in points]
    min_ele = min(elevations)
    max_ele = max(elevations)
    steps = gradient_steps(n)

    stops: list[GradientStop] = []
    for i in range(steps):
        idx = math.floor((i / (steps - 1)) * (n - 1))
        progress = i / (steps - 1)
        stops.append(GradientStop(
            progress=progress,
            color=color_for(points[idx].ele, min_ele, max_ele),
        ))

    return stops


def to_line_gradient_expression(stops: list[GradientStop]) -> list[Any]:
    """
    Flat interpolate expression for a 'line-gradient' paint property.

    ["interpolate", ["linear"], ["line-progress"], p0, c0, p1, c1, ...]
    """
    expr: list[Any] = ["interpolate", ["linear"], ["line-progress"]]
    for stop in stops:
        expr.extend([stop.progress, stop.color])
    return expr
