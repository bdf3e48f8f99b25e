"""Tests for the editing session state machine.

Tests: EditorStateMachine, EditSession
Focus: Transition truth table and editing_index bookkeeping
"""

import warnings

import pytest
from statemachine.exceptions import TransitionNotAllowed

from route_planner.editor.state_machine import EditorStateMachine, EditSession


def _machine_in(state_name: str) -> EditorStateMachine:
    """Build a machine and drive it to state_name through real transitions."""
    sm = EditorStateMachine()
    if state_name == "point_selected":
        sm.select_point(index=0)
    return sm


# =============================================================================
# TRUTH TABLE
# =============================================================================
# Format: (event_name, source_state, expected_target or None if not allowed)

TRANSITIONS: list[tuple[str, str, str | None]] = [
    ("select_point", "idle", "point_selected"),
    ("select_point", "point_selected", "point_selected"),
    ("finish_move", "idle", None),
    ("finish_move", "point_selected", "idle"),
    ("cancel_edit", "idle", None),
    ("cancel_edit", "point_selected", "idle"),
    ("end_edit", "idle", "idle"),
    ("end_edit", "point_selected", "idle"),
]


class TestTransitionMatrix:
    """Every event from every state."""

    @pytest.mark.parametrize("event,source,target", TRANSITIONS)
    def test_transition(self, event: str, source: str, target: str | None) -> None:
        sm = _machine_in(state_name=source)
        kwargs = {"index": 1} if event == "select_point" else {}

        if target is None:
            with pytest.raises(TransitionNotAllowed):
                getattr(sm, event)(**kwargs)
            assert sm.current_state == getattr(sm, source)
        else:
            getattr(sm, event)(**kwargs)
            assert sm.current_state == getattr(sm, target)


class TestEditSession:
    """editing_index follows the selection."""

    def test_initial_state(self) -> None:
        session = EditSession()
        sm = EditorStateMachine(context=session)
        assert sm.is_idle
        assert session.editing_index is None
        assert not session.has_selection()

    def test_select_sets_index(self) -> None:
        session = EditSession()
        sm = EditorStateMachine(context=session)
        sm.select_point(index=2)

        assert sm.is_point_selected
        assert session.editing_index == 2

    def test_switch_selection(self) -> None:
        session = EditSession()
        sm = EditorStateMachine(context=session)
        sm.select_point(index=2)
        sm.select_point(index=5)
        assert session.editing_index == 5

    @pytest.mark.parametrize("event", ["finish_move", "cancel_edit", "end_edit"])
    def test_leaving_selection_clears_index(self, event: str) -> None:
        session = EditSession()
        sm = EditorStateMachine(context=session)
        sm.select_point(index=1)

        getattr(sm, event)()

        assert sm.is_idle
        assert session.editing_index is None

    def test_try_transition_reports_failure(self) -> None:
        sm = EditorStateMachine()
        assert sm.try_transition("cancel_edit") is False
        assert sm.try_transition("select_point", index=0) is True
        assert sm.try_transition("cancel_edit") is True

    def test_state_name(self) -> None:
        sm = EditorStateMachine()
        assert sm.get_state_name() == "Idle"
        sm.select_point(index=0)
        assert sm.get_state_name() == "PointSelected"

    def test_state_name_without_deprecation_warnings(self) -> None:
        """Reading the active state stays on the supported python-statemachine API."""
        sm = EditorStateMachine()
        sm.select_point(index=2)
        with warnings.catch_warnings():
            warnings.simplefilter("error", DeprecationWarning)
            assert sm.get_state_name() == "PointSelected"
            assert "PointSelected" in repr(sm)
