"""Playback stepping for the track cursor."""

from __future__ import annotations

import math


def advance_index(index: int, speed: float, points_count: int) -> tuple[int, bool]:
    """
    Next cursor index for one playback tick.

    The cursor moves by the rounded speed, at least one point per tick,
    and stops on the last point.

    Args:
        index: Current cursor index
        speed: Playback speed in points per tick
        points_count: Number of points in the track

    Returns:
        (next_index, finished) - finished is True once the end is reached
    """
    if points_count <= 0:
        return 0, True
    step = max(1, math.floor(speed + 0.5))
    next_index = index + step
    if next_index >= points_count:
        return points_count - 1, True
    return next_index, False
