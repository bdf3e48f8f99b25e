"""Route file import and export.

- parse_gpx / to_gpx: GPX 1.1 track points
- parse_geojson / to_geojson: first LineString of a GeoJSON document
- RouteImporter: extension dispatch and background import
- ImportedRoute: parsed, validated and (if large) decimated point list
"""

from route_planner.io.geojson_io import parse_geojson, to_geojson, to_geojson_feature
from route_planner.io.gpx_io import parse_gpx, to_gpx
from route_planner.io.imported_route import ImportedRoute, finalize_import
from route_planner.io.route_importer import RouteImporter

__all__ = [
    "ImportedRoute",
    "finalize_import",
    "parse_gpx",
    "to_gpx",
    "parse_geojson",
    "to_geojson",
    "to_geojson_feature",
    "RouteImporter",
]
