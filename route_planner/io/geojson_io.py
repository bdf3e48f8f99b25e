"""GeoJSON import and export.

Import takes the first LineString found in a FeatureCollection, Feature or
bare geometry (the first line of a MultiLineString also counts). GeoJSON
positions are [lon, lat], the reverse of the engine's (lat, lon) order.

Export writes a single Feature with a LineString geometry and a loopClosed
property; closure is carried by the property, not by a repeated point.
"""

import logging
from datetime import datetime
from typing import Any, Optional, Sequence, Union

import geojson

from route_planner.constants import ExportConfig
from route_planner.errors import RouteExportError, RouteImportError
from route_planner.io.imported_route import ImportedRoute, finalize_import, parse_coordinate
from route_planner.model.coordinate import Coordinate

logger = logging.getLogger(__name__)


def _find_line(node: Any) -> Optional[tuple[list, dict]]:
    """Depth-first search for the first line.

    Returns:
        Tuple of (coordinates, properties of the enclosing Feature) or None.
    """
    if not isinstance(node, dict):
        return None

    node_type = node.get("type")
    if node_type == "FeatureCollection" and isinstance(node.get("features"), list):
        for feature in node["features"]:
            found = _find_line(feature)
            if found is not None:
                return found
    elif node_type == "Feature" and isinstance(node.get("geometry"), dict):
        found = _find_line(node["geometry"])
        if found is not None:
            properties = node.get("properties")
            return found[0], properties if isinstance(properties, dict) else {}
    elif node_type == "LineString" and isinstance(node.get("coordinates"), list):
        return node["coordinates"], {}
    elif node_type == "MultiLineString" and isinstance(node.get("coordinates"), list):
        lines = node["coordinates"]
        if lines and isinstance(lines[0], list):
            return lines[0], {}
    return None


def parse_geojson(data: Union[str, bytes]) -> ImportedRoute:
    """Parse the first LineString of a GeoJSON document.

    A boolean loopClosed property on the Feature is passed through;
    otherwise closure is inferred from first/last point equality.

    Args:
        data: GeoJSON document as text or UTF-8 bytes

    Returns:
        ImportedRoute with validated coordinates.

    Raises:
        RouteImportError: If the document is malformed or has no LineString.
    """
    if isinstance(data, bytes):
        try:
            data = data.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise RouteImportError(f"GeoJSON file is not valid UTF-8: {exc}") from exc

    try:
        # Plain dicts keep full coordinate precision; geojson still rejects NaN/Infinity
        document = geojson.loads(data, object_hook=dict)
    except ValueError as exc:
        raise RouteImportError(f"Malformed GeoJSON: {exc}") from exc

    found = _find_line(document)
    if found is None:
        raise RouteImportError("No LineString found in GeoJSON")
    coordinates, properties = found

    points = []
    for position in coordinates:
        if not isinstance(position, list) or len(position) < 2:
            raise RouteImportError(f"Point {len(points)}: expected [lon, lat] position, got {position!r}")
        points.append(parse_coordinate(lat=position[1], lon=position[0], position=len(points)))

    if not points:
        raise RouteImportError("LineString has no coordinates")

    loop_closed = properties.get("loopClosed")
    if not isinstance(loop_closed, bool):
        loop_closed = None
    name = properties.get("name")

    logger.debug(f"Parsed {len(points)} GeoJSON positions (loopClosed property={loop_closed})")
    return finalize_import(points=points, loop_closed=loop_closed, name=name if isinstance(name, str) else None)


def to_geojson_feature(
    points: Sequence[Coordinate],
    loop_closed: bool,
    name: str = ExportConfig.DEFAULT_ROUTE_NAME,
    exported_at: Optional[datetime] = None,
) -> geojson.Feature:
    """Build the export Feature for a route.

    Raises:
        RouteExportError: If there are no points to export.
    """
    if not points:
        raise RouteExportError("No route to export")

    line = geojson.LineString(
        [list(p.lon_lat) for p in points],
        precision=ExportConfig.COORDINATE_PRECISION,
    )
    return geojson.Feature(
        geometry=line,
        properties={
            "name": name,
            "loopClosed": bool(loop_closed and len(points) >= 3),
            "exportedAt": (exported_at or datetime.now()).isoformat(),
        },
    )


def to_geojson(
    points: Sequence[Coordinate],
    loop_closed: bool,
    name: str = ExportConfig.DEFAULT_ROUTE_NAME,
    exported_at: Optional[datetime] = None,
) -> str:
    """Export route as a GeoJSON Feature string."""
    feature = to_geojson_feature(points=points, loop_closed=loop_closed, name=name, exported_at=exported_at)
    logger.info(f"Exported GeoJSON feature '{name}' with {len(points)} points")
    return geojson.dumps(feature, indent=2)
