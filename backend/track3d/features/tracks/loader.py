"""
Track Loader Service

Turns uploaded file bytes into a LoadedTrack ready for rendering.
"""

import logging
import re
from pathlib import PurePath

from track3d.exceptions import NoTrackPointsError, TrackParseError
from track3d.shared.constants import TrackFormat
from .geometry import build_line_string, compute_bounds
from .gpx_parser import GPXParserService
from .gradient import build_gradient
from .igc_parser import IGCParserService
from .models import LoadedTrack

logger = logging.getLogger(__name__)

IGC_SNIFF_RE = re.compile(r"^(?:HFDTE|B\d{6})", re.MULTILINE)

_EXTENSIONS = {
    ".gpx": TrackFormat.GPX,
    ".igc": TrackFormat.IGC,
}


def detect_format(filename: str | None, text: str) -> TrackFormat:
    """
    Decide whether a file is GPX or IGC.

    The extension wins; without a known one the content is sniffed.

    Raises:
        TrackParseError: If neither format is recognized
    """
    if filename:
        suffix = PurePath(filename).suffix.lower()
        if suffix in _EXTENSIONS:
            return _EXTENSIONS[suffix]

    stripped = text.lstrip("\ufeff \t\r\n")
    if stripped.startswith("<"):
        return TrackFormat.GPX
    if IGC_SNIFF_RE.search(stripped):
        return TrackFormat.IGC

    raise TrackParseError(f"Unsupported track file: {filename or 'unnamed'}")


class TrackLoaderService:
    """Service for loading GPX/IGC files into renderable tracks."""

    @staticmethod
    def load(
        content: bytes | str,
        filename: str | None = None,
    ) -> LoadedTrack:
        """
        Parse a track file and derive bounds, line and gradient.

        Args:
            content: File content as bytes (UTF-8) or text
            filename: Original file name, used for format detection

        Returns:
            LoadedTrack with a fresh point list

        Raises:
            TrackParseError: If the file is malformed or of unknown format
            NoTrackPointsError: If the file holds no usable track points
        """
        if isinstance(content, bytes):
            text = content.decode('utf-8-sig', errors='replace')
        else:
            text = content

        track_format = detect_format(filename, text)

        if track_format == TrackFormat.GPX:
            points = GPXParserService.parse(text)
        else:
            points = IGCParserService.parse(text)

        if not points:
            logger.warning(f"No track points found in {filename or 'upload'}")
            raise NoTrackPointsError()

        logger.info(
            f"{track_format.value.upper()} loaded: {len(points)} points"
            f" from {filename or 'upload'}"
        )

        return LoadedTrack(
            format=track_format,
            points=points,
            bounds=compute_bounds(points),
            line=build_line_string(points),
            gradient=build_gradient(points),
            filename=filename,
        )
