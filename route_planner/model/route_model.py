"""RouteModel - Canonical state of the route being edited.

RouteModel is an immutable value. Every edit returns a new RouteModel whose
derived data (segment lengths) is recomputed at construction and whose
distance markers are cleared, so stale markers are never carried over.

Owns:
- points: ordered route waypoints
- loop_closed: implicit closing segment from last point back to first
- segment_lengths: derived, one per consecutive pair plus the closing segment
- distance_markers: explicit, regenerated only on request

Index-based edits validate first and raise InvalidIndexError before building
anything, so a rejected edit leaves the caller's route untouched.
"""

import logging
import operator
from dataclasses import dataclass, field, replace
from typing import Iterable, Optional

from route_planner.constants import DisplayConfig, MarkerConfig
from route_planner.core.geo_calculator import GeoCalculator
from route_planner.errors import InvalidIndexError
from route_planner.model.coordinate import Coordinate

logger = logging.getLogger(__name__)


def check_index(index: int, upper: int, operation: str) -> int:
    """Return index as a plain int if it lies in [0, upper].

    Accepts any integer type (e.g. numpy.int64 from a hit test) but not bool.

    Raises:
        InvalidIndexError: If index is not an integer or is out of range.
    """
    if isinstance(index, bool):
        raise InvalidIndexError(index=index, valid_range=(0, upper), operation=operation)
    try:
        value = operator.index(index)
    except TypeError as exc:
        raise InvalidIndexError(index=index, valid_range=(0, upper), operation=operation) from exc
    if not 0 <= value <= upper:
        raise InvalidIndexError(index=index, valid_range=(0, upper), operation=operation)
    return value


@dataclass(frozen=True)
class RouteBounds:
    """Padded lat/lon bounding box of a route."""

    min_lat: float
    min_lon: float
    max_lat: float
    max_lon: float

    @property
    def center(self) -> Coordinate:
        return Coordinate(lat=(self.min_lat + self.max_lat) / 2, lon=(self.min_lon + self.max_lon) / 2)


@dataclass(frozen=True)
class RouteModel:
    """Immutable route state with derived per-segment distances.

    Attributes:
        points: Route waypoints in route order (duplicates allowed)
        loop_closed: Whether the last point connects back to the first.
            Normalized to False for routes with fewer than 3 points.
        distance_markers: Marker positions generated for marker_interval_m
        marker_interval_m: Interval used for (re)generating markers
        segment_lengths: Derived segment distances in meters

    Example:
        route = RouteModel.empty().add_point(p=Coordinate(59.0, 18.0))
        route = route.add_point(p=Coordinate(59.1, 18.1))
        route.total_distance_m  # ~12.4 km
    """

    points: tuple[Coordinate, ...] = ()
    loop_closed: bool = False
    distance_markers: tuple[Coordinate, ...] = ()
    marker_interval_m: float = MarkerConfig.DEFAULT_INTERVAL_M
    segment_lengths: tuple[float, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Normalize collections and recompute derived segment lengths."""
        points = tuple(self.points)
        object.__setattr__(self, "points", points)
        object.__setattr__(self, "distance_markers", tuple(self.distance_markers))
        # A loop of fewer than 3 points is not meaningful
        object.__setattr__(self, "loop_closed", bool(self.loop_closed) and len(points) >= 3)
        object.__setattr__(self, "segment_lengths", self._compute_segments(points, self.loop_closed))

    @staticmethod
    def _compute_segments(points: tuple[Coordinate, ...], loop_closed: bool) -> tuple[float, ...]:
        if len(points) < 2:
            return ()
        lats = [p.lat for p in points]
        lons = [p.lon for p in points]
        if loop_closed:
            lats.append(points[0].lat)
            lons.append(points[0].lon)
        return tuple(GeoCalculator.haversine_distances_m(lats=lats, lons=lons).tolist())

    @classmethod
    def empty(cls, marker_interval_m: float = MarkerConfig.DEFAULT_INTERVAL_M) -> "RouteModel":
        """Create an empty route."""
        return cls(marker_interval_m=marker_interval_m)

    # =========================================================================
    # Derived Data
    # =========================================================================

    @property
    def total_distance_m(self) -> float:
        """Route length in meters, including the closing segment when looped."""
        return sum(self.segment_lengths)

    @property
    def has_closing_segment(self) -> bool:
        return self.loop_closed and len(self.points) >= 3

    @property
    def can_toggle_loop(self) -> bool:
        """Loop closure is only meaningful with at least 3 points."""
        return len(self.points) >= 3

    def __len__(self) -> int:
        return len(self.points)

    def distance_to_point(self, index: int) -> float:
        """Cumulative distance from the first point to points[index].

        Raises:
            InvalidIndexError: If index is outside [0, len(points) - 1].
        """
        index = check_index(index=index, upper=len(self.points) - 1, operation="distance_to_point")
        return sum(self.segment_lengths[:index])

    def bounds(self, padding_ratio: float = DisplayConfig.BOUNDS_PADDING_RATIO) -> Optional[RouteBounds]:
        """Bounding box of all points padded by padding_ratio of its extent.

        Returns:
            RouteBounds, or None for an empty route.
        """
        if not self.points:
            return None
        lats = [p.lat for p in self.points]
        lons = [p.lon for p in self.points]
        lat_pad = (max(lats) - min(lats)) * padding_ratio
        lon_pad = (max(lons) - min(lons)) * padding_ratio
        return RouteBounds(
            min_lat=min(lats) - lat_pad,
            min_lon=min(lons) - lon_pad,
            max_lat=max(lats) + lat_pad,
            max_lon=max(lons) + lon_pad,
        )

    def segment_endpoints(self, segment_index: int) -> tuple[Coordinate, Coordinate]:
        """Start and end point of a segment (the closing segment wraps to the first point).

        Raises:
            InvalidIndexError: If segment_index is outside [0, len(segment_lengths) - 1].
        """
        segment_index = check_index(
            index=segment_index, upper=len(self.segment_lengths) - 1, operation="segment_endpoints"
        )
        end_index = (segment_index + 1) % len(self.points)
        return self.points[segment_index], self.points[end_index]

    # =========================================================================
    # Edits (each returns a new RouteModel)
    # =========================================================================

    def add_point(self, p: Coordinate) -> "RouteModel":
        """Append a point. Adding always reopens a closed loop."""
        return self._with_points(points=self.points + (p,), loop_closed=False)

    def insert_point(self, before_index: int, p: Coordinate) -> "RouteModel":
        """Insert a point so it ends up at before_index.

        Raises:
            InvalidIndexError: If before_index is outside [0, len(points)].
        """
        before_index = check_index(index=before_index, upper=len(self.points), operation="insert_point")
        points = self.points[:before_index] + (p,) + self.points[before_index:]
        return self._with_points(points=points, loop_closed=self.loop_closed)

    def insert_midpoint(self, segment_index: int) -> tuple["RouteModel", int]:
        """Insert the midpoint of a segment.

        For the closing segment of a loop the midpoint is appended after the
        last point, which keeps it between the last and first point.

        Returns:
            Tuple of (new route, index of the inserted point).

        Raises:
            InvalidIndexError: If segment_index is outside [0, len(segment_lengths) - 1].
        """
        segment_index = check_index(
            index=segment_index, upper=len(self.segment_lengths) - 1, operation="insert_midpoint"
        )
        start, end = self.segment_endpoints(segment_index=segment_index)
        new_index = segment_index + 1
        return self.insert_point(before_index=new_index, p=start.midpoint(other=end)), new_index

    def move_point(self, index: int, p: Coordinate) -> "RouteModel":
        """Replace the point at index.

        Raises:
            InvalidIndexError: If index is outside [0, len(points) - 1].
        """
        index = check_index(index=index, upper=len(self.points) - 1, operation="move_point")
        points = self.points[:index] + (p,) + self.points[index + 1 :]
        return self._with_points(points=points, loop_closed=self.loop_closed)

    def delete_point(self, index: int) -> "RouteModel":
        """Remove the point at index; loops with fewer than 3 remaining points open.

        Raises:
            InvalidIndexError: If index is outside [0, len(points) - 1].
        """
        index = check_index(index=index, upper=len(self.points) - 1, operation="delete_point")
        points = self.points[:index] + self.points[index + 1 :]
        return self._with_points(points=points, loop_closed=self.loop_closed)

    def toggle_loop(self) -> "RouteModel":
        """Flip loop closure. No-op (returns self) with fewer than 3 points."""
        if not self.can_toggle_loop:
            return self
        return self._with_points(points=self.points, loop_closed=not self.loop_closed)

    def clear(self) -> "RouteModel":
        """Empty route keeping the configured marker interval."""
        return RouteModel.empty(marker_interval_m=self.marker_interval_m)

    def load(self, points: Iterable[Coordinate], loop_closed: bool) -> "RouteModel":
        """Replace the whole route (import or persistence)."""
        return self._with_points(points=tuple(points), loop_closed=loop_closed)

    def with_markers(self, markers: Iterable[Coordinate], interval_m: float) -> "RouteModel":
        """Same route with freshly generated distance markers."""
        return replace(self, distance_markers=tuple(markers), marker_interval_m=interval_m)

    def without_markers(self) -> "RouteModel":
        return replace(self, distance_markers=())

    # =========================================================================
    # Helpers
    # =========================================================================

    def _with_points(self, points: tuple[Coordinate, ...], loop_closed: bool) -> "RouteModel":
        """Structural change: new points/loop state, markers cleared."""
        return RouteModel(
            points=points,
            loop_closed=loop_closed,
            distance_markers=(),
            marker_interval_m=self.marker_interval_m,
        )

    def __repr__(self) -> str:
        return (
            f"RouteModel(points={len(self.points)}, loop_closed={self.loop_closed}, "
            f"total={self.total_distance_m:.1f}m, markers={len(self.distance_markers)})"
        )
