"""Shared pytest fixtures for route_planner tests.

Provides reusable coordinates and routes for all unit tests.

COORDINATE SYSTEM:
    Tests use coordinates near Stockholm (lat~59, lon~18). Routes with an
    exact length are built with GeoCalculator.destination(), which is the
    inverse of the Haversine distance on the same sphere.
"""

import pytest

from route_planner.core.geo_calculator import GeoCalculator
from route_planner.model.coordinate import Coordinate
from route_planner.model.route_model import RouteModel


def coordinate_at(start: Coordinate, bearing_deg: float, distance_m: float) -> Coordinate:
    """Point at distance_m from start along bearing_deg."""
    lon, lat = GeoCalculator.destination(lon=start.lon, lat=start.lat, bearing_deg=bearing_deg, distance_m=distance_m)
    return Coordinate(lat=lat, lon=lon)


# =============================================================================
# COORDINATES
# =============================================================================


@pytest.fixture
def origin() -> Coordinate:
    return Coordinate(lat=59.0, lon=18.0)


@pytest.fixture
def three_points(origin: Coordinate) -> list[Coordinate]:
    """Triangle with ~1 km sides: origin, 1 km east, 1 km north-east-ish."""
    return [
        origin,
        coordinate_at(start=origin, bearing_deg=90.0, distance_m=1000.0),
        coordinate_at(start=origin, bearing_deg=30.0, distance_m=1000.0),
    ]


# =============================================================================
# ROUTES
# =============================================================================


@pytest.fixture
def straight_10km(origin: Coordinate) -> RouteModel:
    """Two-point route exactly 10 000 m long."""
    end = coordinate_at(start=origin, bearing_deg=90.0, distance_m=10_000.0)
    return RouteModel.empty().load(points=[origin, end], loop_closed=False)


@pytest.fixture
def triangle_loop(three_points: list[Coordinate]) -> RouteModel:
    return RouteModel.empty().load(points=three_points, loop_closed=True)

