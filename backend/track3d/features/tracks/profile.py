"""Elevation profile panel: path, marker and scrub mapping."""

from __future__ import annotations

import math

from .models import TrackPoint
from .schemas import ElevationProfile, ProfileMarker

PROFILE_MARGIN = 16


def _format_number(value: float) -> str:
    """Integers without '.0', everything else at full precision."""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def build_elevation_profile(
    points: list[TrackPoint],
    current_index: int,
    width: float = 120,
    height: float = 500,
) -> ElevationProfile:
    """
    Vertical elevation profile with the current point marked.

    Elevation runs along x (left = lowest), track progress runs along y
    from the bottom (start) to the top (end).
    """
    if not points:
        return ElevationProfile(width=width, height=height)

    elevations = [p.ele for p in points]
    min_ele = min(elevations)
    max_ele = max(elevations)
    last = max(1, len(points) - 1)

    def x_for(ele: float) -> float:
        if max_ele == min_ele:
            return width / 2
        t = (ele - min_ele) / (max_ele - min_ele)
        return PROFILE_MARGIN + t * (width - 2 * PROFILE_MARGIN)

    def y_for(i: int) -> float:
        t = i / last
        return height - PROFILE_MARGIN - t * (height - 2 * PROFILE_MARGIN)

    commands = []
    for i, p in enumerate(points):
        op = "M" if i == 0 else "L"
        commands.append(f"{op} {_format_number(x_for(p.ele))},{_format_number(y_for(i))}")

    ci = max(0, min(len(points) - 1, current_index))

    return ElevationProfile(
        path=" ".join(commands),
        marker=ProfileMarker(x=x_for(points[ci].ele), y=y_for(ci)),
        min_elevation_m=min_ele,
        max_elevation_m=max_ele,
        width=width,
        height=height,
    )


def index_for_progress(progress: float, points_count: int) -> int:
    """Point index for a scrub position (0 = bottom/start, 1 = top/end)."""
    if points_count <= 0:
        return 0
    t = max(0.0, min(1.0, progress))
    return math.floor(t * (points_count - 1) + 0.5)
