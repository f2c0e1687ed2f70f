"""
Tests for the elevation line gradient.

Tests bucketing, stop ordering and the renderer expression.
"""

import pytest

from track3d.features.tracks import (
    TrackPoint,
    GradientStop,
    build_gradient,
    gradient_steps,
    to_line_gradient_expression,
)
from track3d.shared.colors import color_for


def make_track(elevations):
    return [
        TrackPoint(lat=43.0 + i * 0.001, lon=76.0 + i * 0.001, ele=ele)
        for i, ele in enumerate(elevations)
    ]


# =============================================================================
# Test Step Count
# =============================================================================

class TestGradientSteps:
    """Tests for gradient_steps function."""

    @pytest.mark.parametrize("count,expected", [
        (2, 2),
        (19, 2),
        (29, 2),
        (30, 3),
        (100, 10),
        (499, 49),
        (500, 50),
        (10_000, 50),
    ])
    def test_one_stop_per_ten_points_clamped(self, count, expected):
        assert gradient_steps(count) == expected

    def test_explicit_limits(self):
        assert gradient_steps(1000, min_stops=2, max_stops=8, points_per_stop=5) == 8
        assert gradient_steps(20, min_stops=4, max_stops=8, points_per_stop=10) == 4


# =============================================================================
# Test Gradient Stops
# =============================================================================

class TestBuildGradient:
    """Tests for build_gradient function."""

    def test_fewer_than_two_points(self):
        assert build_gradient([]) is None
        assert build_gradient(make_track([100])) is None

    def test_two_points_two_stops(self):
        stops = build_gradient(make_track([100, 300]))

        assert [s.progress for s in stops] == [0.0, 1.0]
        assert stops[0].color == color_for(100, 100, 300)
        assert stops[1].color == color_for(300, 100, 300)

    def test_three_point_scenario(self):
        """Sparse track: steps=2 samples the first and last point."""
        stops = build_gradient(make_track([100, 200, 300]))

        assert len(stops) == 2
        assert stops[0] == GradientStop(progress=0.0, color=color_for(100, 100, 300))
        assert stops[-1] == GradientStop(progress=1.0, color=color_for(300, 100, 300))

    def test_progress_strictly_increasing_and_covers_range(self):
        stops = build_gradient(make_track(range(0, 1000, 7)))

        progresses = [s.progress for s in stops]
        assert progresses[0] == 0.0
        assert progresses[-1] == 1.0
        assert all(a < b for a, b in zip(progresses, progresses[1:]))

    def test_samples_by_bucket_index(self):
        """100 points -> 10 stops, stop i samples point floor(i/9 * 99)."""
        elevations = [float(i) for i in range(100)]
        stops = build_gradient(make_track(elevations))

        assert len(stops) == 10
        for i, stop in enumerate(stops):
            idx = int(i / 9 * 99)
            assert stop.color == color_for(elevations[idx], 0.0, 99.0)

    def test_capped_at_fifty_stops(self):
        assert len(build_gradient(make_track([0] * 2000))) == 50

    def test_flat_track_is_all_low_color(self):
        stops = build_gradient(make_track([500] * 40))
        assert {s.color for s in stops} == {color_for(500, 500, 500)}


# =============================================================================
# Test Renderer Expression
# =============================================================================

class TestLineGradientExpression:
    """Tests for to_line_gradient_expression function."""

    def test_flat_alternating_encoding(self):
        stops = [
            GradientStop(progress=0.0, color="#1980e6"),
            GradientStop(progress=1.0, color="#e61919"),
        ]
        assert to_line_gradient_expression(stops) == [
            "interpolate", ["linear"], ["line-progress"],
            0.0, "#1980e6",
            1.0, "#e61919",
        ]
