"""
IGC Parser Service

Parses IGC flight logs (B fix records) into an ordered list of track points.

B record layout (0-indexed slices):

    B HHMMSS DDMMmmmN DDDMMmmmE V PPPPP GGGGG ...
      [1:7]  [7:15]   [15:24]  24 [25:30] [30:35]

    - time of day (UTC)
    - latitude DDMMmmm + N/S
    - longitude DDDMMmmm + E/W
    - fix validity (A/V), not used
    - pressure altitude
    - GPS altitude (preferred)
"""

from __future__ import annotations

import logging
import re
from datetime import datetime, timezone

from track3d.shared.constants import IGC_MIN_FIX_LENGTH, IGC_YEAR_PIVOT
from .models import TrackPoint

logger = logging.getLogger(__name__)

# HFDTEddmmyy, newer loggers write HFDTEDATE:ddmmyy
HEADER_DATE_RE = re.compile(r"HFDTE(?:DATE:)?(\d{2})(\d{2})(\d{2})", re.ASCII)
LEADING_INT_RE = re.compile(r"\s*([+-]?\d+)", re.ASCII)


def parse_header_date(text: str) -> datetime | None:
    """Flight date from the HFDTE header, at 00:00:00 UTC.

    Two-digit years below 80 are 20xx, the rest 19xx.
    """
    m = HEADER_DATE_RE.search(text)
    if not m:
        return None
    dd, mm, yy = int(m.group(1)), int(m.group(2)), int(m.group(3))
    year = 2000 + yy if yy < IGC_YEAR_PIVOT else 1900 + yy
    try:
        return datetime(year, mm, dd, tzinfo=timezone.utc)
    except ValueError:
        logger.warning(f"Ignoring invalid IGC header date: {m.group(0)}")
        return None


def _parse_int(field: str) -> int | None:
    """Leading integer of a fixed-width field, None if it has no digits."""
    m = LEADING_INT_RE.match(field)
    return int(m.group(1)) if m else None


def to_decimal_degrees(
    degrees: int | None,
    minutes: int | None,
    thousandths: int | None,
    hemisphere: str,
    negative_hemisphere: str,
) -> float | None:
    """Convert DD(D)MMmmm to signed decimal degrees."""
    if degrees is None or minutes is None or thousandths is None:
        return None
    value = degrees + (minutes + thousandths / 1000) / 60
    if hemisphere == negative_hemisphere:
        value = -value
    return value


def parse_fix_record(line: str, header_date: datetime | None) -> TrackPoint | None:
    """
    Decode one B record.

    Args:
        line: Line starting with 'B', at least 35 characters
        header_date: Flight date from the header, if any

    Returns:
        TrackPoint, or None when latitude/longitude cannot be decoded
    """
    hh = _parse_int(line[1:3])
    mi = _parse_int(line[3:5])
    ss = _parse_int(line[5:7])

    lat = to_decimal_degrees(
        _parse_int(line[7:9]), _parse_int(line[9:11]), _parse_int(line[11:14]),
        line[14], "S",
    )
    lon = to_decimal_degrees(
        _parse_int(line[15:18]), _parse_int(line[18:20]), _parse_int(line[20:23]),
        line[23], "W",
    )
    if lat is None or lon is None:
        return None

    pressure_alt = _parse_int(line[25:30])
    gps_alt = _parse_int(line[30:35])
    if gps_alt is not None:
        ele = float(gps_alt)
    elif pressure_alt is not None:
        ele = float(pressure_alt)
    else:
        ele = 0.0

    # Date stays the header date even after midnight UTC (no rollover)
    time = None
    if header_date is not None and None not in (hh, mi, ss):
        try:
            time = header_date.replace(hour=hh, minute=mi, second=ss)
        except ValueError:
            logger.debug(f"Ignoring invalid IGC fix time: {line[1:7]!r}")

    return TrackPoint(lat=lat, lon=lon, ele=ele, time=time)


class IGCParserService:
    """Service for parsing IGC flight logs."""

    @staticmethod
    def parse(content: bytes | str) -> list[TrackPoint]:
        """
        Parse IGC content into track points.

        First pass recovers the flight date from the header, second pass
        decodes every B record. Lines that are not B records, or are too
        short to hold both altitudes, are ignored.

        Args:
            content: IGC file content as bytes (UTF-8) or text

        Returns:
            List of TrackPoint in file order (may be empty)
        """
        if isinstance(content, bytes):
            text = content.decode('utf-8-sig', errors='replace')
        else:
            text = content

        header_date = parse_header_date(text)
        if header_date is None:
            logger.debug("IGC file has no HFDTE date, points will carry no time")

        points: list[TrackPoint] = []
        skipped = 0

        for line in re.split(r"\r?\n", text):
            if not line.startswith("B") or len(line) < IGC_MIN_FIX_LENGTH:
                continue
            point = parse_fix_record(line, header_date)
            if point is None:
                skipped += 1
                continue
            points.append(point)

        if skipped:
            logger.debug(f"Skipped {skipped} IGC fix records without valid coordinates")

        return points
