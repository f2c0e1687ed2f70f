"""
Tests for TrackLoaderService.

Tests format detection and the user-facing failure categories.
"""

from datetime import datetime, timezone

import pytest

from track3d.exceptions import NoTrackPointsError, TrackError, TrackParseError
from track3d.features.tracks import TrackLoaderService, detect_format
from track3d.shared.colors import color_for
from track3d.shared.constants import TrackFormat


# =============================================================================
# Test Data
# =============================================================================

GPX_TEXT = """<?xml version="1.0" encoding="UTF-8"?>
<gpx version="1.1" xmlns="http://www.topografix.com/GPX/1/1">
  <trk><trkseg>
    <trkpt lat="43.1" lon="76.9"><ele>100</ele></trkpt>
    <trkpt lat="43.2" lon="77.0"><ele>200</ele></trkpt>
    <trkpt lat="43.3" lon="77.1"><ele>300</ele></trkpt>
  </trkseg></trk>
</gpx>
"""

IGC_TEXT = (
    "AXXX001\r\n"
    "HFDTE010120\r\n"
    "B1200004730000N00830000EA0010001500\r\n"
    "B1200014731000N00831000EA0010501510\r\n"
)


# =============================================================================
# Test Format Detection
# =============================================================================

class TestDetectFormat:
    """Tests for detect_format function."""

    @pytest.mark.parametrize("filename,expected", [
        ("route.gpx", TrackFormat.GPX),
        ("ROUTE.GPX", TrackFormat.GPX),
        ("flight.igc", TrackFormat.IGC),
        ("/tmp/Flight.IGC", TrackFormat.IGC),
    ])
    def test_by_extension(self, filename, expected):
        assert detect_format(filename, "") == expected

    def test_sniff_xml(self):
        assert detect_format(None, "\ufeff  <?xml version='1.0'?><gpx/>") == TrackFormat.GPX

    def test_sniff_igc(self):
        assert detect_format("upload.txt", IGC_TEXT) == TrackFormat.IGC

    def test_unknown(self):
        with pytest.raises(TrackParseError):
            detect_format("notes.txt", "hello world")


# =============================================================================
# Test Loading
# =============================================================================

class TestTrackLoader:
    """Tests for TrackLoaderService.load."""

    def test_gpx_scenario(self):
        track = TrackLoaderService.load(GPX_TEXT.encode("utf-8"), "route.gpx")

        assert track.format == TrackFormat.GPX
        assert track.points_count == 3
        assert track.bounds == [[76.9, 43.1], [77.1, 43.3]]
        assert len(track.line.geometry.coordinates) == 3
        assert track.gradient[0].color == color_for(100, 100, 300)
        assert track.gradient[-1].color == color_for(300, 100, 300)

    def test_igc_scenario(self):
        track = TrackLoaderService.load(IGC_TEXT, "flight.igc")

        assert track.format == TrackFormat.IGC
        assert [p.ele for p in track.points] == [1500.0, 1510.0]
        assert track.points[0].time == datetime(2020, 1, 1, 12, 0, 0, tzinfo=timezone.utc)
        assert track.filename == "flight.igc"

    def test_single_point_has_no_gradient(self):
        track = TrackLoaderService.load(
            "B1200004730000N00830000EA0010001500\n", "flight.igc"
        )
        assert track.points_count == 1
        assert track.gradient is None

    def test_no_points_raises(self):
        with pytest.raises(NoTrackPointsError, match="No track points found."):
            TrackLoaderService.load(b"<gpx></gpx>", "empty.gpx")

    def test_short_igc_records_raise_no_points(self):
        with pytest.raises(NoTrackPointsError):
            TrackLoaderService.load("HFDTE010120\nB1200\n", "short.igc")

    def test_malformed_gpx_raises_parse_error(self):
        with pytest.raises(TrackParseError):
            TrackLoaderService.load(b"<gpx><trk>", "broken.gpx")

    def test_single_failure_category(self):
        """Both failure kinds can be caught as TrackError by the UI."""
        for content, name in [(b"<gpx>", "a.gpx"), (b"<gpx/>", "b.gpx")]:
            with pytest.raises(TrackError):
                TrackLoaderService.load(content, name)

    def test_each_load_returns_fresh_points(self):
        first = TrackLoaderService.load(GPX_TEXT, "route.gpx")
        second = TrackLoaderService.load(GPX_TEXT, "route.gpx")
        assert first.points == second.points
        assert first.points is not second.points
