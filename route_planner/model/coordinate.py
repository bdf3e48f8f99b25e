"""Coordinate - The geometry atom of a route.

A Coordinate is a single (latitude, longitude) pair in decimal degrees.
It is an immutable value: route points, distance markers and snapshots
all share Coordinate instances without copying.

Used by:
- RouteModel (ordered route points, distance markers)
- MarkerGenerator (interpolated marker positions)
- GPX/GeoJSON codecs (file boundary)
"""

from dataclasses import dataclass
from math import isfinite
from typing import Any

from route_planner.constants import GeoConfig
from route_planner.core.geo_calculator import GeoCalculator


@dataclass(frozen=True)
class Coordinate:
    """A geographic position in decimal degrees (WGS84).

    Attributes:
        lat: Latitude, valid range [-90, 90]
        lon: Longitude, valid range [-180, 180]

    Example:
        start = Coordinate(lat=59.0, lon=18.0)
        start.distance_to(Coordinate(lat=59.1, lon=18.1))  # ~12.4 km
    """

    lat: float
    lon: float

    @property
    def lat_lon(self) -> tuple[float, float]:
        """Return (lat, lon) tuple - standard geographic order."""
        return (self.lat, self.lon)

    @property
    def lon_lat(self) -> tuple[float, float]:
        """Return (lon, lat) tuple - GeoJSON order."""
        return (self.lon, self.lat)

    @property
    def is_valid(self) -> bool:
        """True if both components are finite and within WGS84 ranges."""
        return (
            isfinite(self.lat)
            and isfinite(self.lon)
            and GeoConfig.MIN_LAT <= self.lat <= GeoConfig.MAX_LAT
            and GeoConfig.MIN_LON <= self.lon <= GeoConfig.MAX_LON
        )

    def distance_to(self, other: "Coordinate") -> float:
        """Calculate haversine distance to another coordinate in meters."""
        return GeoCalculator.haversine_distance_m(
            lat1=self.lat,
            lon1=self.lon,
            lat2=other.lat,
            lon2=other.lon,
        )

    def interpolate(self, other: "Coordinate", ratio: float) -> "Coordinate":
        """Linear interpolation towards other in degree space.

        Args:
            other: Target coordinate
            ratio: 0.0 returns self, 1.0 returns other

        Returns:
            Interpolated Coordinate.
        """
        return Coordinate(
            lat=self.lat + (other.lat - self.lat) * ratio,
            lon=self.lon + (other.lon - self.lon) * ratio,
        )

    def midpoint(self, other: "Coordinate") -> "Coordinate":
        """Point halfway to other (degree space)."""
        return self.interpolate(other=other, ratio=0.5)

    def to_dict(self) -> dict[str, float]:
        return {"lat": self.lat, "lng": self.lon}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Coordinate":
        """Create Coordinate from a saved-route point dict ({"lat", "lng"})."""
        return cls(lat=float(data["lat"]), lon=float(data["lng"]))

    def __repr__(self) -> str:
        return f"Coordinate(lat={self.lat:.6f}, lon={self.lon:.6f})"
