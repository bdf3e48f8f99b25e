"""Geodesic calculations on Earth's surface.

Provides the geometry helpers the route engine depends on:
- Distance calculation (Haversine formula), scalar and vectorized
- Destination calculation (endpoint from start, bearing, distance)

All calculations use a WGS84 spherical Earth approximation (R = 6,371 km).
Coordinates are not range-checked here; validation belongs to the input
boundaries (file import).
"""

from math import asin, atan2, cos, degrees, radians, sin, sqrt
from typing import Sequence

import numpy as np

from route_planner.constants import GeoConfig

# Earth's radius in meters (WGS84 spherical approximation)
EARTH_RADIUS_M = GeoConfig.EARTH_RADIUS_M


class GeoCalculator:
    """Static methods for geodesic calculations on Earth's surface.

    All methods use WGS84 spherical Earth model (R = 6,371 km).
    Coordinates are in decimal degrees (WGS84).
    Bearings are in degrees clockwise from North (0-360).
    Distances are in meters.
    """

    EARTH_RADIUS_M = EARTH_RADIUS_M

    @staticmethod
    def haversine_distance_m(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
        """Calculate great-circle distance between two points using Haversine formula.

        Symmetric in its two points and exactly 0.0 for identical inputs.

        Args:
            lat1: Latitude of first point (decimal degrees)
            lon1: Longitude of first point (decimal degrees)
            lat2: Latitude of second point (decimal degrees)
            lon2: Longitude of second point (decimal degrees)

        Returns:
            Distance in meters.
        """
        dlat = radians(lat2 - lat1)
        dlon = radians(lon2 - lon1)
        a = sin(dlat / 2) ** 2 + cos(radians(lat1)) * cos(radians(lat2)) * sin(dlon / 2) ** 2
        # Rounding can push a slightly above 1 for antipodal points
        a = min(1.0, a)
        return EARTH_RADIUS_M * 2 * atan2(sqrt(a), sqrt(1 - a))

    @staticmethod
    def haversine_distances_m(lats: Sequence[float], lons: Sequence[float]) -> np.ndarray:
        """Distances between consecutive points of a polyline.

        Vectorized over the whole polyline, so recomputing segments for an
        imported track with thousands of points stays cheap.

        Args:
            lats: Latitudes in route order (decimal degrees)
            lons: Longitudes in route order (decimal degrees)

        Returns:
            Array of len(lats) - 1 distances in meters (empty for < 2 points).
        """
        lat_rad = np.radians(np.asarray(lats, dtype=float))
        lon_rad = np.radians(np.asarray(lons, dtype=float))
        if lat_rad.size < 2:
            return np.zeros(0, dtype=float)

        dlat = np.diff(lat_rad)
        dlon = np.diff(lon_rad)
        a = np.sin(dlat / 2) ** 2 + np.cos(lat_rad[:-1]) * np.cos(lat_rad[1:]) * np.sin(dlon / 2) ** 2
        a = np.minimum(a, 1.0)
        return EARTH_RADIUS_M * 2 * np.arctan2(np.sqrt(a), np.sqrt(1 - a))

    @staticmethod
    def destination(
        lon: float,
        lat: float,
        bearing_deg: float,
        distance_m: float,
    ) -> tuple[float, float]:
        """Calculate destination point given start, bearing, and distance.

        Uses the formula for finding a point at given distance and bearing
        from a starting point on a sphere.

        Args:
            lon: Longitude of start point (decimal degrees)
            lat: Latitude of start point (decimal degrees)
            bearing_deg: Bearing in degrees (clockwise from North)
            distance_m: Distance to travel in meters

        Returns:
            Tuple (lon, lat) of destination point in decimal degrees.
        """
        brng = radians(bearing_deg)
        lat1 = radians(lat)
        lon1 = radians(lon)
        d_R = distance_m / EARTH_RADIUS_M

        lat2 = asin(sin(lat1) * cos(d_R) + cos(lat1) * sin(d_R) * cos(brng))
        lon2 = lon1 + atan2(
            sin(brng) * sin(d_R) * cos(lat1),
            cos(d_R) - sin(lat1) * sin(lat2),
        )
        return degrees(lon2), degrees(lat2)
