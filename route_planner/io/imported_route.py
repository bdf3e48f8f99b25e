"""ImportedRoute - Result of parsing a route file.

Shared post-processing for all import formats:
- Coordinate validation (malformed data is rejected here, at the boundary)
- Loop detection: a track whose first and last points are equal is closed,
  and the duplicate trailing point is dropped
- Decimation of large tracks (more than DecimationConfig.POINT_THRESHOLD points)
"""

import logging
from dataclasses import dataclass
from typing import Any, Optional

from route_planner.core.decimator import Decimator
from route_planner.errors import RouteImportError
from route_planner.model.coordinate import Coordinate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ImportedRoute:
    """Plain point list handed to the engine after import.

    Attributes:
        points: Route points (closing duplicate removed, decimated if large)
        loop_closed: Whether the route should be treated as a loop
        original_count: Number of points in the file before processing
        name: Track/feature name from the file, if any
        decimated: Whether the track was thinned out by the Decimator
    """

    points: tuple[Coordinate, ...]
    loop_closed: bool
    original_count: int
    name: Optional[str] = None
    decimated: bool = False


def parse_coordinate(lat: Any, lon: Any, position: int) -> Coordinate:
    """Build a validated Coordinate from raw file values.

    Raises:
        RouteImportError: If a value is missing, non-numeric or out of range.
    """
    if lat is None or lon is None:
        raise RouteImportError(f"Point {position}: missing latitude or longitude")
    if isinstance(lat, bool) or isinstance(lon, bool):
        raise RouteImportError(f"Point {position}: coordinates must be numeric, got {lat!r}, {lon!r}")
    try:
        coordinate = Coordinate(lat=float(lat), lon=float(lon))
    except (TypeError, ValueError) as exc:
        raise RouteImportError(f"Point {position}: coordinates must be numeric, got {lat!r}, {lon!r}") from exc
    if not coordinate.is_valid:
        raise RouteImportError(f"Point {position}: coordinate out of range ({coordinate.lat}, {coordinate.lon})")
    return coordinate


def finalize_import(
    points: list[Coordinate],
    loop_closed: Optional[bool] = None,
    name: Optional[str] = None,
) -> ImportedRoute:
    """Apply loop detection and decimation to a freshly parsed point list.

    Args:
        points: Parsed points in file order
        loop_closed: Explicit loop flag from the file, or None to infer it
            from first/last point equality
        name: Optional route name from the file

    Returns:
        ImportedRoute ready for RouteModel.load().
    """
    original_count = len(points)
    ends_on_start = len(points) >= 2 and points[0] == points[-1]

    if loop_closed is None:
        loop_closed = ends_on_start
    if loop_closed and ends_on_start:
        points = points[:-1]

    decimated = Decimator.needs_decimation(points)
    if decimated:
        points = Decimator.decimate(points)

    loop_closed = loop_closed and len(points) >= 3
    logger.info(f"Imported {original_count} points -> {len(points)} route points (loop_closed={loop_closed})")
    return ImportedRoute(
        points=tuple(points),
        loop_closed=loop_closed,
        original_count=original_count,
        name=name,
        decimated=decimated,
    )
