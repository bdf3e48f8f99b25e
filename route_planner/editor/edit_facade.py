"""EditFacade - The route editor's public API.

The presentation layer talks only to this class. Every edit follows the
same sequence:

1. Validate and build the new RouteModel (may raise InvalidIndexError or
   InvalidIntervalError; nothing has changed yet)
2. Save a snapshot of the current route to UndoHistory (skipped when the
   edit is a no-op, e.g. toggling the loop of a 2-point route)
3. Replace the current route
4. End any point selection in the editing session

Read-only queries never touch the history.
"""

import logging
from typing import TYPE_CHECKING, Iterable, Optional

from route_planner.core.formatting import format_distance, format_marker_label
from route_planner.editor.state_machine import EditorStateMachine, EditSession
from route_planner.generators.marker_generator import MarkerGenerator
from route_planner.model.coordinate import Coordinate
from route_planner.model.route_model import RouteModel, check_index
from route_planner.model.saved_route import SavedRoute
from route_planner.model.undo_history import UndoHistory

if TYPE_CHECKING:
    from route_planner.io.imported_route import ImportedRoute

logger = logging.getLogger(__name__)


class EditFacade:
    """Route editing session: current route, undo history and point selection.

    Example:
        editor = EditFacade()
        editor.add_point(Coordinate(lat=59.0, lon=18.0))
        editor.add_point(Coordinate(lat=59.1, lon=18.1))
        editor.undo()
        editor.current_points()  # [Coordinate(lat=59.0, lon=18.0)]
    """

    def __init__(self, route: Optional[RouteModel] = None, history: Optional[UndoHistory] = None) -> None:
        self._route = route if route is not None else RouteModel.empty()
        self.history = history if history is not None else UndoHistory()
        self.session = EditSession()
        self.state_machine = EditorStateMachine(context=self.session)

    # =========================================================================
    # Point Edits
    # =========================================================================

    def add_point(self, coordinate: Coordinate) -> None:
        """Append a point; reopens a closed loop."""
        self._apply(self._route.add_point(p=coordinate), action="add_point")

    def insert_point(self, before_index: int, coordinate: Coordinate) -> None:
        """Insert a point at before_index.

        Raises:
            InvalidIndexError: If before_index is outside [0, len(points)].
        """
        self._apply(self._route.insert_point(before_index=before_index, p=coordinate), action="insert_point")

    def insert_midpoint(self, segment_index: int) -> int:
        """Insert the midpoint of a segment and select it for editing.

        Returns:
            Index of the new point.

        Raises:
            InvalidIndexError: If segment_index is not a segment of the route.
        """
        new_route, new_index = self._route.insert_midpoint(segment_index=segment_index)
        self._apply(new_route, action="insert_midpoint")
        self.state_machine.select_point(index=new_index)
        return new_index

    def move_point(self, index: int, coordinate: Coordinate) -> None:
        """Move the point at index; completes a point selection.

        Raises:
            InvalidIndexError: If index is outside [0, len(points) - 1].
        """
        new_route = self._route.move_point(index=index, p=coordinate)
        self._apply(new_route, action="move_point", end_selection=False)
        if self.state_machine.is_point_selected:
            self.state_machine.finish_move()
        else:
            self.state_machine.end_edit()

    def delete_point(self, index: int) -> None:
        """Remove the point at index; loops with fewer than 3 points open.

        Raises:
            InvalidIndexError: If index is outside [0, len(points) - 1].
        """
        self._apply(self._route.delete_point(index=index), action="delete_point")

    def toggle_loop(self) -> None:
        """Close or reopen the loop. No-op with fewer than 3 points."""
        if not self._route.can_toggle_loop:
            logger.debug(f"toggle_loop ignored: route has {len(self._route)} point(s)")
        self._apply(self._route.toggle_loop(), action="toggle_loop")

    def clear_route(self) -> None:
        self._apply(self._route.clear(), action="clear_route")

    def load_route(self, points: Iterable[Coordinate], loop_closed: bool) -> None:
        """Replace the whole route (import or persistence)."""
        self._apply(self._route.load(points=points, loop_closed=loop_closed), action="load_route")
        logger.info(f"Loaded route: {len(self._route)} points, loop_closed={self._route.loop_closed}")

    def load_saved_route(self, saved: SavedRoute) -> None:
        self.load_route(points=saved.points, loop_closed=saved.loop_closed)

    def load_imported(self, imported: "ImportedRoute") -> None:
        self.load_route(points=imported.points, loop_closed=imported.loop_closed)

    # =========================================================================
    # Selection
    # =========================================================================

    def select_point(self, index: int) -> None:
        """Select a point for moving.

        Raises:
            InvalidIndexError: If index is outside [0, len(points) - 1].
        """
        index = check_index(index=index, upper=len(self._route) - 1, operation="select_point")
        self.state_machine.select_point(index=index)

    def cancel_edit(self) -> bool:
        """Drop the current selection. Returns False if nothing was selected."""
        return self.state_machine.try_transition("cancel_edit")

    @property
    def editing_index(self) -> Optional[int]:
        return self.session.editing_index

    # =========================================================================
    # Distance Markers
    # =========================================================================

    def generate_distance_markers(self, interval_m: float) -> None:
        """Regenerate markers every interval_m meters along the route.

        A request that yields no markers on a route without markers (fewer
        than 2 points, or interval_m beyond the route length) changes nothing
        and is not recorded in the undo history.

        Raises:
            InvalidIntervalError: If interval_m is not positive. Existing
                markers are kept and no snapshot is saved.
        """
        markers = MarkerGenerator.generate(
            points=self._route.points,
            loop_closed=self._route.loop_closed,
            interval_m=interval_m,
        )
        if not markers and not self._route.distance_markers:
            logger.debug(f"generate_distance_markers: no markers on {self._route!r}")
            return
        self._apply(
            self._route.with_markers(markers=markers, interval_m=float(interval_m)),
            action="generate_distance_markers",
        )

    def clear_distance_markers(self) -> None:
        self._apply(self._route.without_markers(), action="clear_distance_markers")

    # =========================================================================
    # Undo
    # =========================================================================

    def undo(self) -> bool:
        """Restore the previous route state.

        Returns:
            True if a previous state was restored, False if history was empty.
        """
        snapshot = self.history.undo()
        if snapshot is None:
            return False
        self._route = snapshot.to_route()
        self.state_machine.end_edit()
        logger.info(f"Undo: restored {snapshot!r}, {len(self.history)} step(s) left")
        return True

    def can_undo(self) -> bool:
        return self.history.can_undo()

    # =========================================================================
    # Queries
    # =========================================================================

    @property
    def route(self) -> RouteModel:
        """Current route value (immutable)."""
        return self._route

    def total_distance_meters(self) -> float:
        return self._route.total_distance_m

    def segment_distances(self) -> list[float]:
        return list(self._route.segment_lengths)

    def current_points(self) -> list[Coordinate]:
        return list(self._route.points)

    def is_loop_closed(self) -> bool:
        return self._route.loop_closed

    def distance_markers(self) -> list[Coordinate]:
        return list(self._route.distance_markers)

    def marker_labels(self) -> list[str]:
        """Display labels for distance_markers(), e.g. ["1", "2", "3"] for 1 km markers."""
        interval_km = self._route.marker_interval_m / 1000
        return [format_marker_label((i + 1) * interval_km) for i in range(len(self._route.distance_markers))]

    def formatted_total_distance(self) -> str:
        return format_distance(self._route.total_distance_m)

    def distance_to_point(self, index: int) -> float:
        return self._route.distance_to_point(index=index)

    def to_saved_route(self, name: str, description: Optional[str] = None) -> SavedRoute:
        return SavedRoute.from_route(name=name, route=self._route, description=description)

    # =========================================================================
    # Helpers
    # =========================================================================

    def _apply(self, new_route: RouteModel, action: str, end_selection: bool = True) -> None:
        """Snapshot the current route, then replace it."""
        if new_route == self._route:
            logger.debug(f"{action}: no change")
        else:
            self.history.save_snapshot(route=self._route)
            self._route = new_route
            logger.debug(f"{action}: {self._route!r}")
        if end_selection:
            self.state_machine.end_edit()

    def __repr__(self) -> str:
        return f"EditFacade(route={self._route!r}, history={self.history!r}, state={self.state_machine.get_state_name()})"
