"""
GPX Parser Service

Parses GPX files into an ordered list of track points.
"""

import logging
import math
import xml.etree.ElementTree as ET
from datetime import datetime, timezone

import gpxpy.gpx
from gpxpy.gpxfield import parse_time

from track3d.exceptions import TrackParseError
from .models import TrackPoint

logger = logging.getLogger(__name__)


def _local_name(tag) -> str:
    """Strip the '{namespace}' prefix ElementTree puts on tag names."""
    if not isinstance(tag, str):
        return ""  # comments / processing instructions
    return tag.rsplit("}", 1)[-1]


def _find_descendant(element: ET.Element, name: str) -> ET.Element | None:
    """First descendant with the given local name, in document order."""
    for child in element.iter():
        if child is not element and _local_name(child.tag) == name:
            return child
    return None


def _parse_float(value: str | None) -> float | None:
    """Parse a finite float, None for missing/garbage/NaN/inf."""
    if value is None:
        return None
    try:
        number = float(value.strip())
    except ValueError:
        return None
    return number if math.isfinite(number) else None


def _parse_time(value: str | None) -> datetime | None:
    """Parse an ISO 8601 GPX timestamp and normalize it to UTC."""
    if not value or not value.strip():
        return None
    try:
        parsed = parse_time(value.strip())
    except (gpxpy.gpx.GPXException, ValueError):
        logger.debug(f"Ignoring invalid GPX time: {value!r}")
        return None
    if parsed is None:
        return None
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


class GPXParserService:
    """Service for parsing GPX files."""

    @staticmethod
    def parse(content: bytes | str) -> list[TrackPoint]:
        """
        Parse GPX content into track points.

        Every <trkpt> is read regardless of nesting depth or namespace.
        Points without a finite lat/lon are skipped, not reported.

        Args:
            content: GPX file content as bytes (UTF-8) or text

        Returns:
            List of TrackPoint in document order (may be empty)

        Raises:
            TrackParseError: If the document is not well-formed XML
        """
        if isinstance(content, bytes):
            try:
                text = content.decode('utf-8-sig')
            except UnicodeDecodeError as e:
                logger.error(f"Failed to decode GPX: {e}")
                raise TrackParseError(f"Invalid GPX file: {e}") from e
        else:
            text = content

        try:
            root = ET.fromstring(text.lstrip("\ufeff \t\r\n"))
        except ET.ParseError as e:
            logger.error(f"Failed to parse GPX: {e}")
            raise TrackParseError(f"Invalid GPX file: {e}") from e

        points: list[TrackPoint] = []
        skipped = 0

        for element in root.iter():
            if _local_name(element.tag) != "trkpt":
                continue

            lat = _parse_float(element.get("lat"))
            lon = _parse_float(element.get("lon"))
            if lat is None or lon is None:
                skipped += 1
                continue

            ele_node = _find_descendant(element, "ele")
            ele = _parse_float(ele_node.text) if ele_node is not None else None

            time_node = _find_descendant(element, "time")
            time = _parse_time(time_node.text) if time_node is not None else None

            points.append(TrackPoint(
                lat=lat,
                lon=lon,
                ele=ele if ele is not None else 0.0,
                time=time,
            ))

        if skipped:
            logger.debug(f"Skipped {skipped} GPX track points without valid coordinates")

        return points
