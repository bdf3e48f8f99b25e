"""Core foundation classes for geodesic calculations.

- GeoCalculator: Geodesic calculations (distances, destinations)
- format_distance / format_marker_label: Display strings for distances
- Decimator: Point decimation (import directly from decimator module)
"""

from route_planner.core.formatting import format_distance, format_marker_label
from route_planner.core.geo_calculator import GeoCalculator

# Decimator depends on model.coordinate, which depends on GeoCalculator
# Import directly: from route_planner.core.decimator import Decimator

__all__ = [
    "GeoCalculator",
    "format_distance",
    "format_marker_label",
]
