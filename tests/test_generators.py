"""Tests for route_planner generators module.

Tests: MarkerGenerator
Focus: Marker count and placement, closing segment, interval validation

Note: Fixtures are defined in conftest.py (origin, straight_10km, triangle_loop).
"""

import math

import pytest

from route_planner.core.geo_calculator import GeoCalculator
from route_planner.errors import InvalidIntervalError
from route_planner.generators.marker_generator import MarkerGenerator
from route_planner.model.coordinate import Coordinate
from route_planner.model.route_model import RouteModel


def _north_of(start: Coordinate, distance_m: float) -> Coordinate:
    lon, lat = GeoCalculator.destination(lon=start.lon, lat=start.lat, bearing_deg=0.0, distance_m=distance_m)
    return Coordinate(lat=lat, lon=lon)


class TestMarkerGenerator:
    """MarkerGenerator - evenly spaced markers along the cumulative path."""

    def test_straight_10km_gets_nine_markers(self, straight_10km: RouteModel) -> None:
        """Markers at 1000..9000 m; none at the start or the end."""
        markers = MarkerGenerator.generate(points=straight_10km.points, loop_closed=False, interval_m=1000.0)

        assert len(markers) == 9
        start = straight_10km.points[0]
        for k, marker in enumerate(markers, start=1):
            assert start.distance_to(other=marker) == pytest.approx(k * 1000.0, abs=1.0)

    def test_markers_in_route_order(self, origin: Coordinate) -> None:
        points = [origin, _north_of(origin, 2500.0)]
        markers = MarkerGenerator.generate(points=points, loop_closed=False, interval_m=1000.0)

        assert len(markers) == 2
        assert markers[0].lat < markers[1].lat < points[1].lat

    def test_markers_span_segment_boundaries(self, origin: Coordinate) -> None:
        """A marker target past a waypoint lands on the following segment."""
        a = origin
        b = _north_of(a, 600.0)
        c = _north_of(b, 600.0)
        markers = MarkerGenerator.generate(points=[a, b, c], loop_closed=False, interval_m=1000.0)

        assert len(markers) == 1
        assert b.distance_to(other=markers[0]) == pytest.approx(400.0, abs=0.5)

    def test_zero_length_segments_are_skipped(self, origin: Coordinate) -> None:
        end = _north_of(origin, 2500.0)
        markers = MarkerGenerator.generate(points=[origin, origin, end, end], loop_closed=False, interval_m=1000.0)
        assert len(markers) == 2
        assert all(math.isfinite(m.lat) and math.isfinite(m.lon) for m in markers)

    def test_closing_segment_carries_markers(self, triangle_loop: RouteModel) -> None:
        """A closed loop has more length, hence more markers, than the open path."""
        open_markers = MarkerGenerator.generate(points=triangle_loop.points, loop_closed=False, interval_m=250.0)
        loop_markers = MarkerGenerator.generate(points=triangle_loop.points, loop_closed=True, interval_m=250.0)

        assert len(loop_markers) == math.floor((triangle_loop.total_distance_m - 1e-3) / 250.0)
        assert len(loop_markers) > len(open_markers)

        # The last marker sits on the closing segment, between the last and first point
        last, first = triangle_loop.points[2], triangle_loop.points[0]
        closing = last.distance_to(other=first)
        tail = loop_markers[-1]
        assert last.distance_to(other=tail) + tail.distance_to(other=first) == pytest.approx(closing, abs=0.5)

    def test_loop_flag_ignored_below_three_points(self, straight_10km: RouteModel) -> None:
        markers = MarkerGenerator.generate(points=straight_10km.points, loop_closed=True, interval_m=1000.0)
        assert len(markers) == 9

    @pytest.mark.parametrize("count", [0, 1])
    def test_too_few_points(self, origin: Coordinate, count: int) -> None:
        assert MarkerGenerator.generate(points=[origin] * count, loop_closed=False, interval_m=1000.0) == []

    def test_interval_longer_than_route(self, straight_10km: RouteModel) -> None:
        assert MarkerGenerator.generate(points=straight_10km.points, loop_closed=False, interval_m=20_000.0) == []

    @pytest.mark.parametrize("interval", [0, 0.0, -1.0, float("nan"), float("inf"), "abc", None])
    def test_invalid_interval_rejected(self, straight_10km: RouteModel, interval: object) -> None:
        with pytest.raises(InvalidIntervalError) as exc_info:
            MarkerGenerator.generate(points=straight_10km.points, loop_closed=False, interval_m=interval)  # type: ignore[arg-type]
        assert exc_info.value.interval_m is interval

    def test_invalid_interval_rejected_on_empty_route(self) -> None:
        """Validation does not depend on the route having segments."""
        with pytest.raises(InvalidIntervalError):
            MarkerGenerator.generate(points=[], loop_closed=False, interval_m=-5.0)
