"""Data models for loaded tracks (dataclasses, no parser dependency)."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING

from track3d.shared.constants import TrackFormat

if TYPE_CHECKING:
    from .schemas import GradientStop, LineFeature

# [[min_lon, min_lat], [max_lon, max_lat]]
TrackBounds = list[list[float]]


@dataclass(frozen=True)
class TrackPoint:
    """One recorded sample. Only built when lat and lon are finite."""

    lat: float  # decimal degrees
    lon: float  # decimal degrees
    ele: float = 0.0  # meters, 0 when the file has none
    time: datetime | None = None  # UTC


@dataclass
class LoadedTrack:
    """A parsed file and everything derived from it for rendering."""

    format: TrackFormat
    points: list[TrackPoint]
    bounds: TrackBounds
    line: LineFeature
    gradient: list[GradientStop] | None = None
    filename: str | None = None

    @property
    def points_count(self) -> int:
        return len(self.points)
