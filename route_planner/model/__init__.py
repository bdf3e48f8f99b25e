"""Data model classes for route editing.

- Coordinate: Geometry atom (lat, lon)
- RouteModel: Immutable route value (points, loop flag, segments, markers)
- RouteBounds: Padded bounding box for centering a map on a route
- RouteSnapshot: Deep copy of a route kept by the undo history
- UndoHistory: Bounded LIFO of snapshots
- SavedRoute: Named persistence record
"""

from route_planner.model.coordinate import Coordinate
from route_planner.model.route_model import RouteBounds, RouteModel
from route_planner.model.route_snapshot import RouteSnapshot
from route_planner.model.saved_route import SavedRoute
from route_planner.model.undo_history import UndoHistory

__all__ = [
    "Coordinate",
    "RouteModel",
    "RouteBounds",
    "RouteSnapshot",
    "UndoHistory",
    "SavedRoute",
]
