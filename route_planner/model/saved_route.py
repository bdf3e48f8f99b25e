"""SavedRoute - Plain route record for the persistence boundary.

The engine does not store routes. It produces and consumes SavedRoute
records; local or remote storage lives outside this package. The dict
layout matches the legacy JSON format of saved routes:

    {
        "name": "Morning loop",
        "points": [{"lat": 59.0, "lng": 18.0}, ...],
        "loopClosed": true,
        "savedAt": "2024-05-01T08:30:00",
        "description": null,
        "distance": 12345.6
    }
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional

from route_planner.errors import RouteExportError
from route_planner.model.coordinate import Coordinate
from route_planner.model.route_model import RouteModel

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SavedRoute:
    """A named route snapshot ready to be persisted.

    Attributes:
        name: User-facing route name
        points: Route waypoints (closure is expressed by loop_closed)
        loop_closed: Whether the route is a loop
        saved_at: When the record was created
        description: Optional free text
        distance_m: Total route length at save time (meters)
    """

    name: str
    points: tuple[Coordinate, ...]
    loop_closed: bool
    saved_at: datetime = field(default_factory=datetime.now)
    description: Optional[str] = None
    distance_m: Optional[float] = None

    @classmethod
    def from_route(
        cls,
        name: str,
        route: RouteModel,
        description: Optional[str] = None,
        saved_at: Optional[datetime] = None,
    ) -> "SavedRoute":
        """Capture a route for saving.

        Raises:
            RouteExportError: If the route has no points.
        """
        if not route.points:
            raise RouteExportError("Cannot save an empty route")
        return cls(
            name=name,
            points=route.points,
            loop_closed=route.loop_closed,
            saved_at=saved_at or datetime.now(),
            description=description,
            distance_m=route.total_distance_m,
        )

    def to_route(self) -> RouteModel:
        """Rebuild an editable route (markers are not persisted)."""
        return RouteModel.empty().load(points=self.points, loop_closed=self.loop_closed)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to JSON-compatible dict."""
        return {
            "name": self.name,
            "points": [p.to_dict() for p in self.points],
            "loopClosed": self.loop_closed,
            "savedAt": self.saved_at.isoformat(),
            "description": self.description,
            "distance": self.distance_m,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SavedRoute":
        """Deserialize from dict, tolerating missing optional keys."""
        distance = data.get("distance")
        return cls(
            name=data["name"],
            points=tuple(Coordinate.from_dict(data=p) for p in data["points"]),
            loop_closed=bool(data.get("loopClosed", False)),
            saved_at=datetime.fromisoformat(data["savedAt"]),
            description=data.get("description"),
            distance_m=float(distance) if distance is not None else None,
        )

    def __repr__(self) -> str:
        return f"SavedRoute({self.name!r}, points={len(self.points)}, loop_closed={self.loop_closed})"
