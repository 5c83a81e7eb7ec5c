"""
Session module.

Provides the event-driven traversal session:
- TraversalEngine: Applies STEP/RESET/SWITCH events to a traversal and view
- InputEvent: Discrete driver inputs
- SessionState / StepRecord / SessionResult: Step log and run summary
- parse_command: Console key bindings
"""

from graphwalk.session.controls import HELP_TEXT, parse_command
from graphwalk.session.engine import InputEvent, TraversalEngine
from graphwalk.session.state import SessionResult, SessionState, StepRecord

__all__ = [
    "HELP_TEXT",
    "InputEvent",
    "SessionResult",
    "SessionState",
    "StepRecord",
    "TraversalEngine",
    "parse_command",
]
