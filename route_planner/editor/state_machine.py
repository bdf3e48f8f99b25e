"""State machine for a route editing session.

Uses python-statemachine for the point-selection workflow:
- Clear state definitions
- Entry hooks that keep the editing index consistent
- Explicit event-driven transitions

The "currently editing point" lives in EditSession.editing_index, an
explicit field of the session object rather than ambient UI state. The
presentation layer reads it; the engine clears it through transitions.

States:
    IDLE: No point selected (initial)
    POINT_SELECTED: A point is selected for moving

Transitions:
    IDLE -> POINT_SELECTED: select_point
    POINT_SELECTED -> POINT_SELECTED: select_point (switch selection)
    POINT_SELECTED -> IDLE: finish_move, cancel_edit
    any -> IDLE: end_edit (after add, delete, toggle loop, clear, load, undo)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from statemachine import State, StateMachine
from statemachine.exceptions import TransitionNotAllowed

logger = logging.getLogger(__name__)


@dataclass
class EditSession:
    """Shared context/model for the editing state machine.

    Note: The 'state' field is managed by python-statemachine when this
    object is passed as the model. It stores the current state value.
    """

    # State managed by python-statemachine (model pattern)
    state: str | None = None

    editing_index: int | None = None

    def clear_editing(self) -> None:
        self.editing_index = None

    def has_selection(self) -> bool:
        return self.editing_index is not None

    def __repr__(self) -> str:
        return f"EditSession(state={self.state}, editing_index={self.editing_index})"


class EditorStateMachine(StateMachine):
    """Point selection workflow for the route editor.

    States:
        idle: Nothing selected; add/delete/toggle happen here
        point_selected: A point is being moved
    """

    # ==========================================================================
    # State Definitions
    # ==========================================================================

    idle = State("Idle", initial=True)
    point_selected = State("PointSelected")

    # ==========================================================================
    # Transitions
    # ==========================================================================

    # Select a point for editing (or switch to another point)
    select_point = idle.to(point_selected) | point_selected.to(point_selected)
    # Move completed
    finish_move = point_selected.to(idle)
    # Selection dropped without moving
    cancel_edit = point_selected.to(idle)
    # Any other edit, or undo, ends the selection
    end_edit = idle.to(idle) | point_selected.to(idle)

    # ==========================================================================
    # State Check Properties
    # ==========================================================================

    @property
    def is_idle(self) -> bool:
        return self.idle.is_active

    @property
    def is_point_selected(self) -> bool:
        return self.point_selected.is_active

    # ==========================================================================
    # Hooks
    # ==========================================================================

    def before_select_point(self, index: int) -> None:
        """Action before selecting a point for editing."""
        self.context.editing_index = index

    def on_enter_idle(self) -> None:
        """Hook: Entering idle state clears any selection."""
        self.context.clear_editing()

    # ==========================================================================
    # Initialization
    # ==========================================================================

    def __init__(self, context: EditSession | None = None, start_value: str | None = None) -> None:
        """Initialize state machine with model pattern.

        Args:
            context: Shared session (creates new if None)
            start_value: Optional initial state value (for restoring state)
        """
        model = context or EditSession()
        super().__init__(model=model, start_value=start_value)

    # ==========================================================================
    # Utility Methods
    # ==========================================================================

    @property
    def context(self) -> EditSession:
        """Alias for model."""
        return self.model

    def get_state_name(self) -> str:
        return self.current_state.name

    def try_transition(self, event: str, **kwargs: Any) -> bool:
        """Attempt a transition, returning success/failure.

        Args:
            event: Transition event name
            **kwargs: Arguments for transition

        Returns:
            True if transition succeeded, False otherwise.
        """
        try:
            self.send(event, **kwargs)
            return True
        except TransitionNotAllowed:
            logger.warning(f"Transition '{event}' not allowed from {self.get_state_name()}")
            return False

    def __repr__(self) -> str:
        return f"EditorStateMachine(state={self.get_state_name()}, model={self.context!r})"
