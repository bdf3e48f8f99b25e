"""UndoHistory - Bounded stack of route snapshots.

A snapshot of the current route is saved before every edit. The stack keeps
at most UndoConfig.MAX_UNDO_STACK_SIZE entries and discards the oldest
first. Popping returns the most recent snapshot; restoring it is the
caller's job (RouteSnapshot.to_route()).
"""

import logging
from typing import Optional

from route_planner.constants import UndoConfig
from route_planner.model.route_model import RouteModel
from route_planner.model.route_snapshot import RouteSnapshot

logger = logging.getLogger(__name__)


class UndoHistory:
    """Snapshot-based undo for route edits.

    Example:
        history = UndoHistory()
        history.save_snapshot(route)
        route = route.add_point(p=point)
        previous = history.undo().to_route()
    """

    def __init__(self, max_size: int = UndoConfig.MAX_UNDO_STACK_SIZE) -> None:
        self.max_size = max_size
        self.undo_stack: list[RouteSnapshot] = []

    def save_snapshot(self, route: RouteModel) -> bool:
        """Push the route's current state with size limiting.

        A state identical to the top of the stack is not pushed twice.

        Returns:
            True if a snapshot was pushed.
        """
        snapshot = RouteSnapshot.from_route(route=route)
        if self.undo_stack:
            top = self.undo_stack[-1]
            # Cheap count comparison first, full comparison only on a match
            if top == snapshot and top.is_identical_to(other=snapshot):
                logger.debug("Undo: skipped duplicate snapshot")
                return False

        self.undo_stack.append(snapshot)
        # Trim oldest snapshots if stack is too large
        while len(self.undo_stack) > self.max_size:
            self.undo_stack.pop(0)
        return True

    def can_undo(self) -> bool:
        return bool(self.undo_stack)

    def undo(self) -> Optional[RouteSnapshot]:
        """Pop the most recent snapshot.

        Returns:
            The snapshot, or None if the history is empty.
        """
        if not self.undo_stack:
            return None
        snapshot = self.undo_stack.pop()
        logger.debug(f"Undo: popped {snapshot!r}, {len(self.undo_stack)} left")
        return snapshot

    def clear(self) -> None:
        self.undo_stack.clear()

    def __len__(self) -> int:
        return len(self.undo_stack)

    def __repr__(self) -> str:
        return f"UndoHistory(size={len(self.undo_stack)}/{self.max_size})"
