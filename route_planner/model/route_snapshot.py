"""RouteSnapshot - Captured route state for undo.

A snapshot holds every field needed to rebuild a RouteModel: points, loop
state, distance markers and the marker interval. Because RouteModel and
Coordinate are immutable, capturing is a matter of referencing the tuples;
no deep copy is needed and restored state never aliases a live list.
"""

from dataclasses import dataclass

from route_planner.model.coordinate import Coordinate
from route_planner.model.route_model import RouteModel


@dataclass(frozen=True, eq=False)
class RouteSnapshot:
    """Immutable copy of the restorable route state.

    Equality is deliberately cheap and approximate: two snapshots compare
    equal when point count, loop state and marker count match. Use
    is_identical_to() for an exact comparison.
    """

    points: tuple[Coordinate, ...]
    loop_closed: bool
    distance_markers: tuple[Coordinate, ...]
    marker_interval_m: float

    @classmethod
    def from_route(cls, route: RouteModel) -> "RouteSnapshot":
        return cls(
            points=route.points,
            loop_closed=route.loop_closed,
            distance_markers=route.distance_markers,
            marker_interval_m=route.marker_interval_m,
        )

    def to_route(self) -> RouteModel:
        """Rebuild the full RouteModel, derived segments included."""
        return RouteModel(
            points=self.points,
            loop_closed=self.loop_closed,
            distance_markers=self.distance_markers,
            marker_interval_m=self.marker_interval_m,
        )

    def is_identical_to(self, other: "RouteSnapshot") -> bool:
        return (
            self.loop_closed == other.loop_closed
            and self.marker_interval_m == other.marker_interval_m
            and self.points == other.points
            and self.distance_markers == other.distance_markers
        )

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, RouteSnapshot):
            return NotImplemented
        return (
            self.loop_closed == other.loop_closed
            and len(self.points) == len(other.points)
            and len(self.distance_markers) == len(other.distance_markers)
        )

    def __hash__(self) -> int:
        return hash((len(self.points), self.loop_closed, len(self.distance_markers)))

    def __repr__(self) -> str:
        return (
            f"RouteSnapshot(points={len(self.points)}, loop_closed={self.loop_closed}, "
            f"markers={len(self.distance_markers)})"
        )
