"""
Track rendering schemas.

Pydantic models for the artifacts handed to the map renderer.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Literal


class LineGeometry(BaseModel):
    """GeoJSON LineString geometry."""

    type: Literal["LineString"] = "LineString"
    coordinates: list[list[float]] = Field(default_factory=list)  # [lon, lat]


class LineFeature(BaseModel):
    """GeoJSON Feature wrapping the track line."""

    type: Literal["Feature"] = "Feature"
    geometry: LineGeometry
    properties: dict[str, Any] = Field(default_factory=dict)


class GradientStop(BaseModel):
    """Single color stop along the line, keyed by progress."""

    model_config = ConfigDict(frozen=True)

    progress: float = Field(ge=0.0, le=1.0)
    color: str = Field(pattern=r"^#[0-9a-f]{6}$")


class ProfileMarker(BaseModel):
    """Position of the current point in the elevation profile."""

    x: float = 0.0
    y: float = 0.0


class ElevationProfile(BaseModel):
    """Vertical elevation profile drawn beside the map."""

    path: str = ""  # SVG path data
    marker: ProfileMarker = Field(default_factory=ProfileMarker)
    min_elevation_m: float = 0.0
    max_elevation_m: float = 0.0
    width: float
    height: float
