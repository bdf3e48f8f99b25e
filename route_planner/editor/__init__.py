"""Route editing API.

- EditFacade: Public API for the presentation layer
- EditorStateMachine + EditSession: Point selection workflow
"""

from route_planner.editor.edit_facade import EditFacade
from route_planner.editor.state_machine import EditorStateMachine, EditSession

__all__ = [
    "EditFacade",
    "EditorStateMachine",
    "EditSession",
]
