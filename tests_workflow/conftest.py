"""Shared pytest fixtures for route_planner workflow tests.

Minimal fixtures: a fresh editor and a few waypoints near Stockholm.

COORDINATE SYSTEM:
    Waypoints sit around lat 59, lon 18. Exact-length legs are built with
    GeoCalculator.destination().
"""

import pytest

from route_planner.core.geo_calculator import GeoCalculator
from route_planner.editor.edit_facade import EditFacade
from route_planner.model.coordinate import Coordinate


@pytest.fixture
def editor() -> EditFacade:
    return EditFacade()


@pytest.fixture
def waypoints() -> list[Coordinate]:
    """Ten distinct waypoints on a gentle zig-zag heading north."""
    return [Coordinate(lat=59.0 + i * 0.01, lon=18.0 + (i % 2) * 0.005) for i in range(10)]


@pytest.fixture
def ten_km_east() -> tuple[Coordinate, Coordinate]:
    start = Coordinate(lat=59.0, lon=18.0)
    lon, lat = GeoCalculator.destination(lon=start.lon, lat=start.lat, bearing_deg=90.0, distance_m=10_000.0)
    return start, Coordinate(lat=lat, lon=lon)
