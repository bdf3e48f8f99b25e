"""GPX 1.1 import and export.

Import reads every track point (trk/trkseg/trkpt) in document order with
gpxpy. Export writes a single trk/trkseg; a looped route repeats its first
point at the end so the closure is explicit in the file.
"""

import logging
import xml.etree.ElementTree as ET
from datetime import datetime
from typing import Optional, Sequence, Union

import gpxpy
import gpxpy.gpx

from route_planner.constants import ExportConfig
from route_planner.errors import RouteExportError, RouteImportError
from route_planner.io.imported_route import ImportedRoute, finalize_import, parse_coordinate
from route_planner.model.coordinate import Coordinate

logger = logging.getLogger(__name__)


def parse_gpx(data: Union[str, bytes]) -> ImportedRoute:
    """Parse GPX track points into an ImportedRoute.

    A track whose first and last points are equal is treated as a closed
    loop and its trailing duplicate is dropped. Tracks with more than
    DecimationConfig.POINT_THRESHOLD points are decimated.

    Args:
        data: GPX document as text or UTF-8 bytes

    Returns:
        ImportedRoute with validated coordinates.

    Raises:
        RouteImportError: If the document is malformed or has no track points.
    """
    if isinstance(data, bytes):
        try:
            data = data.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise RouteImportError(f"GPX file is not valid UTF-8: {exc}") from exc

    if not data.strip():
        raise RouteImportError("GPX file is empty")

    try:
        gpx = gpxpy.parse(data)
    except (gpxpy.gpx.GPXException, ValueError) as exc:
        raise RouteImportError(f"Malformed GPX: {exc}") from exc

    points = []
    for track in gpx.tracks:
        for segment in track.segments:
            for point in segment.points:
                points.append(parse_coordinate(lat=point.latitude, lon=point.longitude, position=len(points)))

    if not points:
        raise RouteImportError("No track points found in GPX")

    name = gpx.tracks[0].name if gpx.tracks else None
    logger.debug(f"Parsed {len(points)} GPX track points from {len(gpx.tracks)} track(s)")
    return finalize_import(points=points, name=name)


def to_gpx(
    points: Sequence[Coordinate],
    loop_closed: bool,
    name: str = ExportConfig.DEFAULT_ROUTE_NAME,
    exported_at: Optional[datetime] = None,
) -> str:
    """Export route to GPX 1.1 format.

    Args:
        points: Route points in order
        loop_closed: Append the first point again to close the loop
        name: Track name
        exported_at: Metadata timestamp (defaults to now)

    Returns:
        GPX document as a string.

    Raises:
        RouteExportError: If there are no points to export.
    """
    if not points:
        raise RouteExportError("No route to export")

    precision = ExportConfig.COORDINATE_PRECISION

    gpx = ET.Element(
        "gpx",
        xmlns=ExportConfig.GPX_NAMESPACE,
        version=ExportConfig.GPX_VERSION,
        creator=ExportConfig.CREATOR,
    )

    metadata = ET.SubElement(gpx, "metadata")
    ET.SubElement(metadata, "name").text = name
    ET.SubElement(metadata, "time").text = (exported_at or datetime.now()).isoformat()

    trk = ET.SubElement(gpx, "trk")
    ET.SubElement(trk, "name").text = name
    trkseg = ET.SubElement(trk, "trkseg")

    track_points = list(points)
    if loop_closed and len(points) >= 3:
        track_points.append(points[0])

    for pt in track_points:
        ET.SubElement(trkseg, "trkpt", lat=f"{pt.lat:.{precision}f}", lon=f"{pt.lon:.{precision}f}")

    logger.info(f"Exported GPX track '{name}' with {len(track_points)} points")
    return ET.tostring(gpx, encoding="unicode", method="xml")
